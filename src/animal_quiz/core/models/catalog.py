"""
Module: catalog

Purpose:
    Provides the Catalog dataclass - the complete, static set of items
    the engine may award. Passed explicitly to the selector; there is no
    module-level registry of items.

Key Functions:
    - Catalog.get(item_id): Look up an item by id
    - Catalog.levels: Distinct levels present
    - Catalog.by_level(): Items grouped by level, sorted by name

Dependencies:
    - dataclasses (std)
    - .items.Item

Used By:
    - core.utils.serialization
    - engine.selector
    - session.game
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Iterator, Optional, Tuple

from .items import Item


@dataclass(frozen=True)
class Catalog:
    """
    Complete set of collectible items (immutable).

    Attributes:
        items: Items in insertion order

    Invariants:
        - No two items share an id

    Example:
        >>> catalog = Catalog.of([frog, tiger, eagle])
        >>> catalog.levels
        (1, 3)
        >>> [i.name for i in catalog.by_level()[1]]
        ['frog', 'tiger']
    """

    items: Tuple[Item, ...] = ()

    def __post_init__(self) -> None:
        """Validate catalog on construction."""
        seen: set[str] = set()
        duplicates = []
        for item in self.items:
            if item.id in seen:
                duplicates.append(item.id)
            seen.add(item.id)
        if duplicates:
            raise ValueError(f"Duplicate item ids in catalog: {sorted(set(duplicates))}")

    @classmethod
    def of(cls, items: Iterable[Item]) -> Catalog:
        """Build a catalog from any iterable of items."""
        return cls(items=tuple(items))

    def __iter__(self) -> Iterator[Item]:
        return iter(self.items)

    def __len__(self) -> int:
        return len(self.items)

    def __contains__(self, item: object) -> bool:
        if not isinstance(item, Item):
            return False
        return self.get(item.id) is not None

    def get(self, item_id: str) -> Optional[Item]:
        """
        Find an item by id.

        Args:
            item_id: Id to look up

        Returns:
            The matching Item, or None if absent
        """
        for item in self.items:
            if item.id == item_id:
                return item
        return None

    @property
    def levels(self) -> Tuple[int, ...]:
        """Sorted distinct levels present in the catalog."""
        return tuple(sorted({item.level for item in self.items}))

    def by_level(self) -> dict[int, list[Item]]:
        """
        Group items by ascending level, each group sorted by name.

        Returns:
            Ordered dict of level -> items
        """
        grouped: dict[int, list[Item]] = {}
        for item in sorted(self.items, key=lambda i: (i.level, i.name.lower())):
            grouped.setdefault(item.level, []).append(item)
        return grouped
