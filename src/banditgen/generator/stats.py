"""Derived combat statistics.

Every value here is a closed-form function of class, level, race and the
final attribute modifiers:
- proficiency: 2 + (level - 1) // 4
- armor class: depends on the armor typical for the class
- max HP: hit die at level 1, then hit die // 2 + 1 + CON modifier per level
- initiative: DEX modifier
- speed: 25 for dwarves, 30 otherwise
- perception: 10 + WIS modifier + proficiency
- saving throws: modifier, plus proficiency for the class's proficient saves
"""

from dataclasses import dataclass

from banditgen.generator.attributes import AttributeScores
from banditgen.generator.tables import (
    ATTRIBUTES,
    HIT_DICE,
    SAVING_THROW_PROFICIENCIES,
    Attribute,
    CharacterClass,
    Race,
)

BASE_PROFICIENCY = 2
PROFICIENCY_GAIN_RATE = 4

BASE_UNARMORED_AC = 10
BASE_HEAVY_AC = 15
BASE_LIGHT_AC = 12
MAX_HEAVY_DEX_MOD = 2

NORMAL_SPEED = 30
DWARF_SPEED = 25

BASE_PERCEPTION = 10


@dataclass(frozen=True)
class DerivedStats:
    """Container for all derived character statistics."""

    proficiency: int
    armor_class: int
    max_hp: int
    initiative: int
    speed: int
    perception: int
    saving_throws: AttributeScores


def proficiency_bonus(level: int) -> int:
    return BASE_PROFICIENCY + (level - 1) // PROFICIENCY_GAIN_RATE


def armor_class(char_class: CharacterClass, mods: AttributeScores) -> int:
    """
    Calculate armor class assuming typical armor for the class.

    Barbarians fight unarmored (10 + DEX + CON), fighters wear heavy armor
    (15 + DEX capped at 2) and rogues wear light armor (12 + DEX).
    """
    dex = mods[Attribute.DEX]
    if char_class is CharacterClass.BARBARIAN:
        return BASE_UNARMORED_AC + dex + mods[Attribute.CON]
    if char_class is CharacterClass.FIGHTER:
        return BASE_HEAVY_AC + min(dex, MAX_HEAVY_DEX_MOD)
    return BASE_LIGHT_AC + dex


def max_hit_points(char_class: CharacterClass, level: int, con_mod: int) -> int:
    """
    Calculate maximum hit points.

    Args:
        char_class: Determines the hit die (d12, d10 or d8)
        level: Character level
        con_mod: Constitution modifier

    Returns:
        Hit die at level 1, plus (hit die // 2 + 1 + con_mod) for each level after
    """
    hit_die = HIT_DICE[char_class]
    return hit_die + (hit_die // 2 + 1 + con_mod) * (level - 1)


def initiative(mods: AttributeScores) -> int:
    return mods[Attribute.DEX]


def speed(race: Race) -> int:
    """Walking speed in feet per round."""
    return DWARF_SPEED if race is Race.DWARF else NORMAL_SPEED


def passive_perception(mods: AttributeScores, proficiency: int) -> int:
    return BASE_PERCEPTION + mods[Attribute.WIS] + proficiency


def saving_throws(
    char_class: CharacterClass, mods: AttributeScores, proficiency: int
) -> AttributeScores:
    """Calculate all six saving throws for a class."""
    proficient = SAVING_THROW_PROFICIENCIES[char_class]
    return AttributeScores(
        tuple(
            mods[attr] + (proficiency if attr in proficient else 0) for attr in ATTRIBUTES
        )
    )


def calculate_derived_stats(
    char_class: CharacterClass, race: Race, level: int, mods: AttributeScores
) -> DerivedStats:
    """
    Calculate all derived stats for a character.

    Args:
        char_class: Character class
        race: Character race
        level: Character level (already clamped)
        mods: Final attribute modifiers

    Returns:
        DerivedStats with every computed value
    """
    proficiency = proficiency_bonus(level)
    return DerivedStats(
        proficiency=proficiency,
        armor_class=armor_class(char_class, mods),
        max_hp=max_hit_points(char_class, level, mods[Attribute.CON]),
        initiative=initiative(mods),
        speed=speed(race),
        perception=passive_perception(mods, proficiency),
        saving_throws=saving_throws(char_class, mods, proficiency),
    )
