"""Character record and the generation pipeline that builds it."""

from dataclasses import dataclass
from typing import Any

import structlog

from banditgen.generator.attributes import (
    AttributeScores,
    apply_bonuses,
    roll_base_attributes,
)
from banditgen.generator.dice import (
    RandomSource,
    clamp_level,
    make_rng,
    roll_level,
    weighted_choice,
)
from banditgen.generator.render import render_character
from banditgen.generator.stats import calculate_derived_stats
from banditgen.generator.tables import (
    CLASS_WEIGHTS,
    RACE_WEIGHTS,
    CharacterClass,
    Race,
)

logger = structlog.get_logger(__name__)


@dataclass(frozen=True)
class Character:
    """
    A fully generated NPC.

    Attributes:
        level: Character level, 1-20
        char_class: Character class
        race: Character race
        attributes: Final attribute scores including all bonuses
        modifiers: Attribute modifiers derived from the final scores
        proficiency: Proficiency bonus
        armor_class: Armor class with typical class armor
        max_hp: Maximum hit points
        initiative: Initiative bonus
        speed: Walking speed in feet
        perception: Passive perception
        saving_throws: Saving throw bonus per attribute
    """

    level: int
    char_class: CharacterClass
    race: Race
    attributes: AttributeScores
    modifiers: AttributeScores
    proficiency: int
    armor_class: int
    max_hp: int
    initiative: int
    speed: int
    perception: int
    saving_throws: AttributeScores

    def __str__(self) -> str:
        return render_character(self)

    def to_dict(self) -> dict[str, Any]:
        """Plain-data view of the character, with enums as display strings."""
        return {
            "level": self.level,
            "class": self.char_class.value,
            "race": self.race.display_name,
            "attributes": {attr.value: value for attr, value in self.attributes.items()},
            "modifiers": {attr.value: value for attr, value in self.modifiers.items()},
            "proficiency": self.proficiency,
            "armor_class": self.armor_class,
            "max_hp": self.max_hp,
            "initiative": self.initiative,
            "speed": self.speed,
            "perception": self.perception,
            "saving_throws": {
                attr.value: value for attr, value in self.saving_throws.items()
            },
        }


def build_character(
    level: int,
    char_class: CharacterClass,
    race: Race,
    base_attributes: AttributeScores,
) -> Character:
    """
    Assemble a character from fully resolved inputs.

    No randomness happens here. The level is clamped, bonuses are added to the
    base scores, and every derived stat is calculated.

    Args:
        level: Requested level, clamped into 1-20
        char_class: Character class
        race: Character race
        base_attributes: Pre-bonus scores

    Returns:
        The finished Character
    """
    level = clamp_level(level)
    attributes = apply_bonuses(base_attributes, level, char_class, race)
    modifiers = attributes.modifiers()
    stats = calculate_derived_stats(char_class, race, level, modifiers)

    return Character(
        level=level,
        char_class=char_class,
        race=race,
        attributes=attributes,
        modifiers=modifiers,
        proficiency=stats.proficiency,
        armor_class=stats.armor_class,
        max_hp=stats.max_hp,
        initiative=stats.initiative,
        speed=stats.speed,
        perception=stats.perception,
        saving_throws=stats.saving_throws,
    )


def generate_character(
    level: int | None = None,
    char_class: CharacterClass | None = None,
    *,
    rng: RandomSource | None = None,
) -> Character:
    """
    Generate a random character.

    Missing seeds are drawn in a fixed order: level, class, race, then the six
    base attributes. Race is always drawn.

    Args:
        level: Optional level; out-of-range values are clamped rather than rejected
        char_class: Optional class; drawn from CLASS_WEIGHTS when omitted
        rng: Random source; a fresh unseeded one is used when omitted

    Returns:
        The generated Character
    """
    if rng is None:
        rng = make_rng()

    if level is None:
        level = roll_level(rng)

    if char_class is None:
        classes = list(CLASS_WEIGHTS)
        char_class = classes[weighted_choice(list(CLASS_WEIGHTS.values()), rng)]

    races = list(RACE_WEIGHTS)
    race = races[weighted_choice(list(RACE_WEIGHTS.values()), rng)]

    character = build_character(level, char_class, race, roll_base_attributes(rng))

    logger.debug(
        "character_generated",
        char_level=character.level,
        char_class=character.char_class.value,
        race=character.race.display_name,
        max_hp=character.max_hp,
    )

    return character


def generate_party(
    count: int,
    level: int | None = None,
    char_class: CharacterClass | None = None,
    *,
    rng: RandomSource | None = None,
) -> list[Character]:
    """
    Generate a group of characters that share the same optional seeds.

    Args:
        count: Number of characters, at least 1
        level: Optional level applied to every member
        char_class: Optional class applied to every member
        rng: Random source shared across the whole group

    Returns:
        List of generated characters

    Raises:
        ValueError: If count is less than 1
    """
    if count < 1:
        raise ValueError(f"Party size must be >= 1, got {count}")

    if rng is None:
        rng = make_rng()

    party = [generate_character(level, char_class, rng=rng) for _ in range(count)]

    logger.info(
        "party_generated",
        size=len(party),
        char_level=level,
        char_class=char_class.value if char_class else None,
    )

    return party
