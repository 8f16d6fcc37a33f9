"""
Module: items

Purpose:
    Provides the Item dataclass - an immutable collectible animal. The
    item's level doubles as the difficulty driver for the puzzle that
    awards it.

Key Functions:
    - Item.to_dict() / Item.from_dict(): Serialization
    - Item.slug: Asset-friendly name

Dependencies:
    - dataclasses (std)
    - enum (std)

Used By:
    - core.models.catalog.Catalog
    - core.utils.serialization
    - engine.selector
    - engine.generator
    - session.game
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any


class AnimalGroup(str, Enum):
    """Biological group of an animal."""
    AMPHIBIAN = "amphibian"
    ARACHNID = "arachnid"
    BIRD = "bird"
    FISH = "fish"
    INSECT = "insect"
    MAMMAL = "mammal"
    REPTILE = "reptile"

    def __str__(self) -> str:
        return self.value


class Habitat(str, Enum):
    """Where an animal lives."""
    AIR = "air"
    LAND = "land"
    SEA = "sea"

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True, slots=True)
class Item:
    """
    Collectible animal (immutable).

    Equality and hashing use ``id`` only. Two items with the same id are
    the same item even if a display field differs, which keeps set
    arithmetic between a catalog and a collection well defined.

    Attributes:
        id: Stable identity of the item
        name: Display name, e.g. "frog"
        level: Difficulty level, a positive integer
        group: Biological group
        habitat: Where the animal lives

    Invariants:
        - id and name are non-empty
        - level is an int > 0 (bools rejected)

    Example:
        >>> frog = Item("frog", "frog", 1, AnimalGroup.AMPHIBIAN, Habitat.LAND)
        >>> frog.level
        1
        >>> frog == Item("frog", "Frog", 1, AnimalGroup.AMPHIBIAN, Habitat.LAND)
        True
    """

    id: str
    name: str = field(compare=False)
    level: int = field(compare=False)
    group: AnimalGroup = field(compare=False)
    habitat: Habitat = field(compare=False)

    def __post_init__(self) -> None:
        """Validate item on construction."""
        if not self.id:
            raise ValueError("Item id cannot be empty")
        if not self.name or not self.name.strip():
            raise ValueError(f"Item {self.id!r} must have a name")
        if isinstance(self.level, bool) or not isinstance(self.level, int):
            raise ValueError(f"Item {self.id!r} level must be an integer: {self.level!r}")
        if self.level <= 0:
            raise ValueError(f"Item {self.id!r} level must be positive: {self.level}")
        if not isinstance(self.group, AnimalGroup):
            raise ValueError(f"Invalid group for item {self.id!r}: {self.group!r}")
        if not isinstance(self.habitat, Habitat):
            raise ValueError(f"Invalid habitat for item {self.id!r}: {self.habitat!r}")

    @property
    def slug(self) -> str:
        """Lowercase name with spaces replaced by hyphens (e.g. "sea-lion")."""
        return self.name.strip().replace(" ", "-").lower()

    # ─────────────────────────────────────────────────────────────────────────
    # Serialization
    # ─────────────────────────────────────────────────────────────────────────

    def to_dict(self) -> dict[str, Any]:
        """Serialize to a JSON-compatible dictionary."""
        return {
            "id": self.id,
            "name": self.name,
            "level": self.level,
            "group": self.group.value,
            "habitat": self.habitat.value,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Item:
        """
        Deserialize from a dictionary.

        Args:
            data: Mapping with id, name, level, group and habitat keys

        Returns:
            Item instance

        Raises:
            KeyError: If a required key is missing
            ValueError: If a value is invalid
        """
        try:
            group = AnimalGroup(data["group"])
            habitat = Habitat(data["habitat"])
        except ValueError as e:
            raise ValueError(f"Invalid item {data.get('id')!r}: {e}") from e
        return cls(
            id=str(data["id"]),
            name=data["name"],
            level=data["level"],
            group=group,
            habitat=habitat,
        )

    def __repr__(self) -> str:
        """Concise representation for debugging."""
        return f"Item({self.id!r}, level={self.level})"
