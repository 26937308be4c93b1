"""Static rule tables for bandit-style NPC generation.

All tables are keyed by enum members and wrapped in read-only mappings, so a
lookup can only ever be made with a valid class, race or attribute.
"""

import enum
from types import MappingProxyType
from typing import Final, TypeVar

LEVEL_MIN: Final = 1
LEVEL_MAX: Final = 20

BASE_ATTRIBUTE: Final = 8
MAX_BASE_ATTRIBUTE: Final = 18
ATTRIBUTE_INCREASE_CHANCE: Final = 0.75


class CharacterClass(enum.Enum):
    """Martial classes a bandit can have."""

    BARBARIAN = "Barbarian"
    FIGHTER = "Fighter"
    ROGUE = "Rogue"


class Race(enum.Enum):
    """Common races found among bandit groups."""

    HUMAN = "Human"
    HALF_ORC = "Half-Orc"
    DWARF = "Dwarf"
    HALF_ELF = "Half-Elf"

    @property
    def display_name(self) -> str:
        return self.value


class Attribute(enum.Enum):
    """The six core attributes, in sheet order."""

    STR = "Str"
    DEX = "Dex"
    CON = "Con"
    INT = "Int"
    WIS = "Wis"
    CHA = "Cha"


ATTRIBUTES: Final[tuple[Attribute, ...]] = tuple(Attribute)

# Relative probability of each class/race being drawn
CLASS_WEIGHTS: Final = MappingProxyType(
    {
        CharacterClass.BARBARIAN: 1,
        CharacterClass.FIGHTER: 1,
        CharacterClass.ROGUE: 1,
    }
)

RACE_WEIGHTS: Final = MappingProxyType(
    {
        Race.HUMAN: 5,
        Race.HALF_ORC: 2,
        Race.DWARF: 2,
        Race.HALF_ELF: 1,
    }
)

# Attribute points granted by the highest level threshold reached.
# Thresholds are listed highest first and are not cumulative.
LEVEL_BREAKPOINTS: Final = MappingProxyType(
    {
        19: MappingProxyType(
            {
                CharacterClass.BARBARIAN: (7, 0, 3, 0, 0, 0),
                CharacterClass.FIGHTER: (5, 0, 5, 0, 0, 0),
                CharacterClass.ROGUE: (2, 6, 2, 0, 0, 0),
            }
        ),
        16: MappingProxyType(
            {
                CharacterClass.BARBARIAN: (6, 0, 2, 0, 0, 0),
                CharacterClass.FIGHTER: (4, 0, 4, 0, 0, 0),
                CharacterClass.ROGUE: (1, 5, 2, 0, 0, 0),
            }
        ),
        12: MappingProxyType(
            {
                CharacterClass.BARBARIAN: (4, 0, 2, 0, 0, 0),
                CharacterClass.FIGHTER: (3, 0, 3, 0, 0, 0),
                CharacterClass.ROGUE: (1, 4, 1, 0, 0, 0),
            }
        ),
        8: MappingProxyType(
            {
                CharacterClass.BARBARIAN: (3, 0, 1, 0, 0, 0),
                CharacterClass.FIGHTER: (2, 0, 2, 0, 0, 0),
                CharacterClass.ROGUE: (0, 4, 0, 0, 0, 0),
            }
        ),
        4: MappingProxyType(
            {
                CharacterClass.BARBARIAN: (2, 0, 0, 0, 0, 0),
                CharacterClass.FIGHTER: (2, 0, 0, 0, 0, 0),
                CharacterClass.ROGUE: (0, 2, 0, 0, 0, 0),
            }
        ),
    }
)

RACIAL_BONUSES: Final = MappingProxyType(
    {
        Race.HUMAN: (1, 1, 1, 1, 1, 1),
        Race.HALF_ORC: (2, 0, 1, 0, 0, 0),
        Race.DWARF: (0, 0, 2, 0, 0, 0),
        Race.HALF_ELF: (0, 1, 1, 0, 0, 2),
    }
)

# Saving throws that add proficiency, per class
SAVING_THROW_PROFICIENCIES: Final = MappingProxyType(
    {
        CharacterClass.BARBARIAN: frozenset({Attribute.STR, Attribute.CON}),
        CharacterClass.FIGHTER: frozenset({Attribute.STR, Attribute.CON}),
        CharacterClass.ROGUE: frozenset({Attribute.DEX, Attribute.INT}),
    }
)

HIT_DICE: Final = MappingProxyType(
    {
        CharacterClass.BARBARIAN: 12,
        CharacterClass.FIGHTER: 10,
        CharacterClass.ROGUE: 8,
    }
)


E = TypeVar("E", bound=enum.Enum)


def _normalize(name: str) -> str:
    return name.strip().lower().replace("-", "").replace("_", "").replace(" ", "")


def _lookup(enum_cls: type[E], name: str) -> E:
    key = _normalize(name)
    for member in enum_cls:
        if key in (_normalize(member.name), _normalize(member.value)):
            return member
    choices = ", ".join(member.value for member in enum_cls)
    raise ValueError(f"Unknown {enum_cls.__name__} {name!r}, expected one of: {choices}")


def parse_class(name: str) -> CharacterClass:
    """
    Resolve a class from user input.

    Args:
        name: Class name, case-insensitive (e.g. "rogue", "Fighter")

    Returns:
        The matching CharacterClass

    Raises:
        ValueError: If the name matches no class
    """
    return _lookup(CharacterClass, name)


def parse_race(name: str) -> Race:
    """Resolve a race from user input, accepting "half-orc" or "HalfOrc" spellings."""
    return _lookup(Race, name)
