"""Plain-text character sheets."""

from collections.abc import Iterable
from typing import TYPE_CHECKING

from banditgen.console import colorize

if TYPE_CHECKING:
    from banditgen.generator.character import Character

FIELD_SEPARATOR = "  "


def render_character(character: "Character", color: bool = False) -> str:
    """
    Format a character as a five-line sheet.

    Lines, in order: level/race/class header, attributes with modifiers,
    proficiency/AC/HP, initiative/speed/perception, saving throws.

    Args:
        character: The character to render
        color: Highlight the header with ANSI codes

    Returns:
        The sheet text, without a trailing newline
    """
    header = (
        f"Level {character.level} {character.race.display_name} {character.char_class.value}"
    )
    if color:
        header = colorize(header, "BOLD", "CYAN")

    attributes = FIELD_SEPARATOR.join(
        f"{attr.value}: {score}({mod})"
        for (attr, score), mod in zip(character.attributes.items(), character.modifiers)
    )
    combat = FIELD_SEPARATOR.join(
        [
            f"Proficiency: {character.proficiency}",
            f"AC: {character.armor_class}",
            f"HP: {character.max_hp}",
        ]
    )
    movement = FIELD_SEPARATOR.join(
        [
            f"Initiative: {character.initiative}",
            f"Speed: {character.speed}",
            f"Perception: {character.perception}",
        ]
    )
    saves = "Saving throws, " + FIELD_SEPARATOR.join(
        f"{attr.value}: {value}" for attr, value in character.saving_throws.items()
    )

    return "\n".join([header, attributes, combat, movement, saves])


def render_party(characters: Iterable["Character"], color: bool = False) -> str:
    """Render several sheets separated by blank lines."""
    return "\n\n".join(render_character(c, color=color) for c in characters)
