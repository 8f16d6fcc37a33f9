"""
Unit Tests for Item Model

Tests for the Item dataclass, its enums and identity semantics.
"""

import pytest

from animal_quiz.core.models.items import AnimalGroup, Habitat, Item


class TestItem:
    """Tests for Item dataclass."""

    # ─────────────────────────────────────────────────────────────────────────
    # Constructor Tests
    # ─────────────────────────────────────────────────────────────────────────

    def test_init_when_valid_values_then_creates_item(self):
        """Valid items should be created successfully."""
        item = Item("frog", "frog", 1, AnimalGroup.AMPHIBIAN, Habitat.LAND)
        assert item.level == 1
        assert item.group is AnimalGroup.AMPHIBIAN
        assert item.habitat is Habitat.LAND

    @pytest.mark.parametrize("level", [0, -1])
    def test_init_when_level_not_positive_then_raises_error(self, level):
        """Level must be greater than zero."""
        with pytest.raises(ValueError, match="level must be positive"):
            Item("frog", "frog", level, AnimalGroup.AMPHIBIAN, Habitat.LAND)

    @pytest.mark.parametrize("level", [1.5, "2", True])
    def test_init_when_level_not_integer_then_raises_error(self, level):
        """Level must be a real int."""
        with pytest.raises(ValueError, match="must be an integer"):
            Item("frog", "frog", level, AnimalGroup.AMPHIBIAN, Habitat.LAND)

    def test_init_when_name_blank_then_raises_error(self):
        """Blank names are rejected."""
        with pytest.raises(ValueError, match="must have a name"):
            Item("frog", "  ", 1, AnimalGroup.AMPHIBIAN, Habitat.LAND)

    def test_init_when_id_empty_then_raises_error(self):
        with pytest.raises(ValueError, match="id cannot be empty"):
            Item("", "frog", 1, AnimalGroup.AMPHIBIAN, Habitat.LAND)

    def test_init_when_group_is_plain_string_then_raises_error(self):
        """Enums are required; strings are converted by from_dict only."""
        with pytest.raises(ValueError, match="Invalid group"):
            Item("frog", "frog", 1, "amphibian", Habitat.LAND)  # type: ignore

    def test_init_when_frozen_then_immutable(self):
        """Items should be immutable (frozen)."""
        item = Item("frog", "frog", 1, AnimalGroup.AMPHIBIAN, Habitat.LAND)
        with pytest.raises(AttributeError):
            item.level = 2  # type: ignore

    # ─────────────────────────────────────────────────────────────────────────
    # Identity Tests
    # ─────────────────────────────────────────────────────────────────────────

    def test_eq_when_same_id_then_equal_regardless_of_fields(self):
        """Identity is the id; display fields do not matter."""
        a = Item("frog", "frog", 1, AnimalGroup.AMPHIBIAN, Habitat.LAND)
        b = Item("frog", "Green Frog", 2, AnimalGroup.AMPHIBIAN, Habitat.SEA)
        assert a == b
        assert hash(a) == hash(b)
        assert len({a, b}) == 1

    def test_eq_when_different_id_then_not_equal(self):
        a = Item("frog", "frog", 1, AnimalGroup.AMPHIBIAN, Habitat.LAND)
        b = Item("toad", "frog", 1, AnimalGroup.AMPHIBIAN, Habitat.LAND)
        assert a != b

    def test_set_difference_when_ids_match_then_removed(self):
        """Set arithmetic between catalog and collection works by id."""
        catalog = {
            Item("frog", "frog", 1, AnimalGroup.AMPHIBIAN, Habitat.LAND),
            Item("tiger", "tiger", 1, AnimalGroup.MAMMAL, Habitat.LAND),
        }
        owned = {Item("frog", "frog", 1, AnimalGroup.AMPHIBIAN, Habitat.LAND)}
        assert {i.id for i in catalog - owned} == {"tiger"}

    # ─────────────────────────────────────────────────────────────────────────
    # Property / Serialization Tests
    # ─────────────────────────────────────────────────────────────────────────

    def test_slug_when_name_has_spaces_then_hyphenated_lowercase(self):
        item = Item("sea-lion", "Sea Lion", 4, AnimalGroup.MAMMAL, Habitat.SEA)
        assert item.slug == "sea-lion"

    def test_to_dict_when_called_then_uses_enum_values(self):
        item = Item("eagle", "eagle", 3, AnimalGroup.BIRD, Habitat.AIR)
        assert item.to_dict() == {
            "id": "eagle",
            "name": "eagle",
            "level": 3,
            "group": "bird",
            "habitat": "air",
        }

    def test_from_dict_when_strings_then_converts_enums(self):
        item = Item.from_dict(
            {"id": "shark", "name": "shark", "level": 4, "group": "fish", "habitat": "sea"}
        )
        assert item.group is AnimalGroup.FISH
        assert item.habitat is Habitat.SEA

    def test_from_dict_when_unknown_habitat_then_raises_error(self):
        with pytest.raises(ValueError, match="Invalid item 'shark'"):
            Item.from_dict(
                {"id": "shark", "name": "shark", "level": 4, "group": "fish", "habitat": "space"}
            )

    def test_from_dict_when_key_missing_then_raises_key_error(self):
        with pytest.raises(KeyError):
            Item.from_dict({"id": "shark", "name": "shark", "group": "fish", "habitat": "sea"})


class TestEnums:
    """Tests for AnimalGroup and Habitat."""

    def test_group_values_when_listed_then_match_known_groups(self):
        assert [g.value for g in AnimalGroup] == [
            "amphibian", "arachnid", "bird", "fish", "insect", "mammal", "reptile",
        ]

    def test_habitat_str_when_called_then_returns_value(self):
        assert str(Habitat.AIR) == "air"
