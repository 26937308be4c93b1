"""Tests for character assembly and generation."""

import dataclasses
import random

import pytest

from banditgen.generator.attributes import AttributeScores
from banditgen.generator.character import (
    Character,
    build_character,
    generate_character,
    generate_party,
)
from banditgen.generator.tables import CharacterClass, Race

ALL_EIGHTS = AttributeScores((8,) * 6)


class TestBuildCharacter:
    """Tests for deterministic assembly from resolved inputs."""

    def test_level_one_human_fighter(self):
        character = build_character(1, CharacterClass.FIGHTER, Race.HUMAN, ALL_EIGHTS)

        assert character.attributes.values == (9, 9, 9, 9, 9, 9)
        assert character.modifiers.values == (-1, -1, -1, -1, -1, -1)
        assert character.armor_class == 14
        assert character.max_hp == 10
        assert character.proficiency == 2
        assert character.perception == 11
        assert character.initiative == -1
        assert character.speed == 30
        assert character.saving_throws.values == (1, -1, 1, -1, -1, -1)

    def test_level_bonus_applied_before_modifiers(self):
        character = build_character(13, CharacterClass.BARBARIAN, Race.HALF_ORC, ALL_EIGHTS)

        assert character.attributes.values == (14, 8, 11, 8, 8, 8)
        assert character.modifiers.values == (2, -1, 0, -1, -1, -1)
        # 12 + (7 + 0) * 12
        assert character.max_hp == 96

    @pytest.mark.parametrize("level,expected", [(0, 1), (-3, 1), (21, 20), (99, 20), (7, 7)])
    def test_level_clamped(self, level, expected):
        character = build_character(level, CharacterClass.ROGUE, Race.HUMAN, ALL_EIGHTS)
        assert character.level == expected

    def test_dwarf_speed_independent_of_class_and_level(self):
        for char_class in CharacterClass:
            for level in (1, 10, 20):
                character = build_character(level, char_class, Race.DWARF, ALL_EIGHTS)
                assert character.speed == 25

    def test_character_is_immutable(self):
        character = build_character(1, CharacterClass.FIGHTER, Race.HUMAN, ALL_EIGHTS)
        with pytest.raises(dataclasses.FrozenInstanceError):
            character.level = 5  # type: ignore[misc]


class TestGenerateCharacter:
    """Tests for the random generation factory."""

    def test_all_seeds_drawn(self, scripted):
        """Level 5, Barbarian, Dwarf and six failed attribute rolls."""
        source = scripted(ints=[5, 1, 8], floats=[0.99] * 6)

        character = generate_character(rng=source)

        assert character.level == 5
        assert character.char_class is CharacterClass.BARBARIAN
        assert character.race is Race.DWARF
        assert character.attributes.values == (10, 8, 10, 8, 8, 8)
        assert character.armor_class == 9
        assert character.max_hp == 40
        assert character.speed == 25
        assert character.perception == 12
        assert character.saving_throws.values == (3, -1, 3, -1, -1, -1)
        assert source.ints == [] and source.floats == []

    def test_explicit_level_and_class_skip_draws(self, scripted):
        """Only the race and attributes are drawn when both seeds are given."""
        source = scripted(ints=[1], floats=[0.99] * 6)

        character = generate_character(3, CharacterClass.ROGUE, rng=source)

        assert character.level == 3
        assert character.char_class is CharacterClass.ROGUE
        assert character.race is Race.HUMAN

    def test_explicit_level_only(self, scripted):
        source = scripted(ints=[2, 10], floats=[0.99] * 6)

        character = generate_character(40, rng=source)

        assert character.level == 20
        assert character.char_class is CharacterClass.FIGHTER
        assert character.race is Race.HALF_ELF

    def test_explicit_class_only(self, scripted):
        source = scripted(ints=[17, 6], floats=[0.99] * 6)

        character = generate_character(char_class=CharacterClass.FIGHTER, rng=source)

        assert character.level == 17
        assert character.char_class is CharacterClass.FIGHTER
        assert character.race is Race.HALF_ORC

    def test_same_seed_same_character(self):
        first = generate_character(rng=random.Random(42))
        second = generate_character(rng=random.Random(42))
        assert first == second

    def test_random_characters_are_valid(self, rng):
        for _ in range(300):
            character = generate_character(rng=rng)
            assert 1 <= character.level <= 20
            assert character.char_class in CharacterClass
            assert character.race in Race
            assert character.modifiers == character.attributes.modifiers()

    def test_works_without_rng(self):
        character = generate_character(4, CharacterClass.BARBARIAN)
        assert isinstance(character, Character)
        assert character.level == 4


class TestGenerateParty:
    """Tests for generating groups of characters."""

    def test_party_shares_seeds(self, rng):
        party = generate_party(5, 8, CharacterClass.ROGUE, rng=rng)

        assert len(party) == 5
        assert all(c.level == 8 and c.char_class is CharacterClass.ROGUE for c in party)

    def test_party_reproducible(self):
        assert generate_party(3, rng=random.Random(7)) == generate_party(3, rng=random.Random(7))

    @pytest.mark.parametrize("count", [0, -2])
    def test_invalid_size(self, count):
        with pytest.raises(ValueError, match="Party size must be >= 1"):
            generate_party(count)


class TestToDict:
    def test_plain_data(self):
        character = build_character(1, CharacterClass.FIGHTER, Race.HALF_ELF, ALL_EIGHTS)
        data = character.to_dict()

        assert data["class"] == "Fighter"
        assert data["race"] == "Half-Elf"
        assert data["attributes"] == {
            "Str": 8,
            "Dex": 9,
            "Con": 9,
            "Int": 8,
            "Wis": 8,
            "Cha": 10,
        }
        assert data["saving_throws"]["Str"] == 1
        assert data["speed"] == 30
