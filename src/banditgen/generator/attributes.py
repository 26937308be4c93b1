"""Attribute generation and modifier calculations.

Scores are built in three layers:
- a random base between 8 and 18 per attribute
- a class bonus from the highest level breakpoint reached
- a fixed racial bonus
"""

from collections.abc import Iterator, Sequence
from dataclasses import dataclass

from banditgen.generator.dice import RandomSource, random_increase
from banditgen.generator.tables import (
    ATTRIBUTE_INCREASE_CHANCE,
    ATTRIBUTES,
    BASE_ATTRIBUTE,
    LEVEL_BREAKPOINTS,
    MAX_BASE_ATTRIBUTE,
    RACIAL_BONUSES,
    Attribute,
    CharacterClass,
    Race,
)

NO_BONUS: tuple[int, ...] = (0,) * len(ATTRIBUTES)

# Highest threshold first
BREAKPOINT_THRESHOLDS: tuple[int, ...] = tuple(sorted(LEVEL_BREAKPOINTS, reverse=True))


@dataclass(frozen=True)
class AttributeScores:
    """Six attribute values in sheet order (Str, Dex, Con, Int, Wis, Cha)."""

    values: tuple[int, ...]

    def __post_init__(self) -> None:
        object.__setattr__(self, "values", tuple(self.values))
        if len(self.values) != len(ATTRIBUTES):
            raise ValueError(
                f"Expected {len(ATTRIBUTES)} attribute values, got {len(self.values)}"
            )

    def __getitem__(self, attribute: Attribute) -> int:
        return self.values[ATTRIBUTES.index(attribute)]

    def __iter__(self) -> Iterator[int]:
        return iter(self.values)

    def items(self) -> Iterator[tuple[Attribute, int]]:
        return zip(ATTRIBUTES, self.values)

    def plus(self, bonus: Sequence[int]) -> "AttributeScores":
        """Return new scores with a per-attribute bonus vector added."""
        return AttributeScores(tuple(v + b for v, b in zip(self.values, bonus, strict=True)))

    def modifiers(self) -> "AttributeScores":
        """Return the modifier for every score."""
        return AttributeScores(tuple(get_modifier(v) for v in self.values))


def get_modifier(score: int) -> int:
    """
    Calculate the attribute modifier for a score.

    Args:
        score: The attribute value

    Returns:
        The modifier: score // 2 - 5

    Examples:
        >>> get_modifier(10)
        0
        >>> get_modifier(18)
        4
        >>> get_modifier(8)
        -1
    """
    return score // 2 - 5


def roll_base_attributes(rng: RandomSource) -> AttributeScores:
    """Roll the six pre-bonus scores, each between 8 and 18."""
    spread = MAX_BASE_ATTRIBUTE - BASE_ATTRIBUTE
    return AttributeScores(
        tuple(
            BASE_ATTRIBUTE + random_increase(ATTRIBUTE_INCREASE_CHANCE, spread, rng)
            for _ in ATTRIBUTES
        )
    )


def level_bonus(level: int, char_class: CharacterClass) -> tuple[int, ...]:
    """
    Get the attribute points a class has earned by a given level.

    Only the highest breakpoint at or below the level applies; a level 13
    character gets the level 12 points and nothing from levels 8 or 4.

    Args:
        level: Character level
        char_class: Character class

    Returns:
        Bonus vector in sheet order, all zeros below the first breakpoint
    """
    for threshold in BREAKPOINT_THRESHOLDS:
        if level >= threshold:
            return LEVEL_BREAKPOINTS[threshold][char_class]
    return NO_BONUS


def racial_bonus(race: Race) -> tuple[int, ...]:
    """Get the fixed attribute bonus for a race."""
    return RACIAL_BONUSES[race]


def apply_bonuses(
    base: AttributeScores, level: int, char_class: CharacterClass, race: Race
) -> AttributeScores:
    """Add level and racial bonuses to base scores."""
    return base.plus(level_bonus(level, char_class)).plus(racial_bonus(race))


def generate_attributes(
    level: int, char_class: CharacterClass, race: Race, rng: RandomSource
) -> AttributeScores:
    """Roll base scores and apply all bonuses."""
    return apply_bonuses(roll_base_attributes(rng), level, char_class, race)
