"""
Module: engine.selector

Purpose:
    Chooses the next item to award. Always surfaces the easiest item the
    player does not own yet, so difficulty ramps up as the collection
    grows. Ties at the lowest level are broken uniformly at random.

Key Functions:
    - choose_next(): Main entry point for selection

Key Classes:
    - Selector: Holds the inputs of one selection

Algorithm:
    1. available = catalog - owned (by item id)
    2. Nothing available -> None
    3. Keep the items at the lowest available level
    4. Order them by id, draw one index uniformly

Dependencies:
    - core.models.items: Item
    - engine.random_source: RandomSource

Used By:
    - session.game: Turn loop
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Iterable, List, Optional

from animal_quiz.core.models.items import Item

from .random_source import RandomSource, default_random_source

logger = logging.getLogger(__name__)


def choose_next(
    catalog: Iterable[Item],
    owned: Iterable[Item],
    rng: Optional[RandomSource] = None,
) -> Optional[Item]:
    """
    Pick the next item to award.

    Args:
        catalog: Every item that can be awarded (a Catalog, set or list)
        owned: Items the player already has
        rng: Random source for the tie-break (shared default if None)

    Returns:
        An unowned item of the lowest available level, or None when the
        player owns everything

    Invariants:
        - result is None or result not in owned
        - result.level == min(level over catalog - owned)

    Example:
        >>> choose_next(catalog, owned=set()).level
        1
        >>> choose_next(catalog, owned=set(catalog)) is None
        True
    """
    selector = Selector(catalog, owned, rng or default_random_source())
    return selector.choose()


@dataclass
class Selector:
    """
    Selection of one reward item.

    Attributes:
        catalog: Every item that can be awarded
        owned: Items already in the player's collection
        rng: Random source for the tie-break
    """

    catalog: Iterable[Item]
    owned: Iterable[Item]
    rng: RandomSource = field(default_factory=default_random_source)

    def available(self) -> List[Item]:
        """Catalog items not owned, in catalog order."""
        owned_ids = {item.id for item in self.owned}
        available: List[Item] = []
        seen: set[str] = set()
        for item in self.catalog:
            if item.id in owned_ids or item.id in seen:
                continue
            seen.add(item.id)
            available.append(item)
        return available

    def candidates(self) -> List[Item]:
        """Available items at the lowest level, ordered by id."""
        available = self.available()
        if not available:
            return []
        min_level = min(item.level for item in available)
        return sorted(
            (item for item in available if item.level == min_level),
            key=lambda item: item.id,
        )

    def choose(self) -> Optional[Item]:
        """
        Run the selection.

        Returns:
            The chosen item, or None when nothing is left to award
        """
        candidates = self.candidates()
        if not candidates:
            logger.debug("No items left to award")
            return None

        # A lone candidate consumes no draw
        index = 0 if len(candidates) == 1 else self.rng.randint(0, len(candidates) - 1)
        chosen = candidates[index]
        logger.debug(
            f"Chose {chosen.id!r} (level {chosen.level}) from {len(candidates)} candidate(s)"
        )
        return chosen
