"""Random NPC generation: rule tables, dice, attributes, derived stats and rendering."""

from .attributes import AttributeScores, get_modifier
from .character import Character, build_character, generate_character, generate_party
from .dice import clamp_level, make_rng, random_increase, weighted_choice
from .render import render_character, render_party
from .tables import Attribute, CharacterClass, Race, parse_class, parse_race

__all__ = [
    "Attribute",
    "AttributeScores",
    "Character",
    "CharacterClass",
    "Race",
    "build_character",
    "clamp_level",
    "generate_character",
    "generate_party",
    "get_modifier",
    "make_rng",
    "parse_class",
    "parse_race",
    "random_increase",
    "render_character",
    "render_party",
    "weighted_choice",
]
