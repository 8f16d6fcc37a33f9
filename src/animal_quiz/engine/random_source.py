"""
Module: engine.random_source

Purpose:
    Injectable randomness for the engine. Every draw the selector and
    generator make (tie-break, operands, distractors, shuffle) goes
    through one RandomSource, so tests can script the exact sequence
    without patching the ``random`` module.

Key Classes:
    - RandomSource: Abstract base class (randint + shuffle)
    - SystemRandomSource: Backed by random.Random, optionally seeded
    - ScriptedRandomSource: Replays a fixed list of integers
    - ScriptExhaustedError: Script ran out with no fallback

Key Functions:
    - default_random_source(): Shared unseeded source

Dependencies:
    - random (std)

Used By:
    - engine.selector
    - engine.generator
    - session.game
"""

from __future__ import annotations

import logging
import random
from abc import ABC, abstractmethod
from typing import Iterable, List, Optional, Sequence, TypeVar

logger = logging.getLogger(__name__)

T = TypeVar("T")


class ScriptExhaustedError(Exception):
    """Scripted random source has no draws left."""
    pass


class RandomSource(ABC):
    """
    Abstract source of uniform randomness.

    Implementations must never mutate the sequence passed to shuffle().
    """

    @abstractmethod
    def randint(self, low: int, high: int) -> int:
        """
        Draw an integer uniformly from the closed range [low, high].

        Args:
            low: Smallest value that may be returned
            high: Largest value that may be returned

        Returns:
            Integer in [low, high]
        """

    @abstractmethod
    def shuffle(self, values: Sequence[T]) -> List[T]:
        """
        Return a uniformly shuffled copy of values.

        Args:
            values: Items to shuffle (left untouched)

        Returns:
            New list with the same items
        """


class SystemRandomSource(RandomSource):
    """
    RandomSource backed by ``random.Random``.

    Example:
        >>> rng = SystemRandomSource(seed=42)
        >>> 1 <= rng.randint(1, 6) <= 6
        True
    """

    def __init__(self, seed: Optional[int] = None) -> None:
        self.seed = seed
        self._rng = random.Random(seed)

    def randint(self, low: int, high: int) -> int:
        if low > high:
            raise ValueError(f"Empty range: [{low}, {high}]")
        return self._rng.randint(low, high)

    def shuffle(self, values: Sequence[T]) -> List[T]:
        shuffled = list(values)
        self._rng.shuffle(shuffled)
        return shuffled

    def __repr__(self) -> str:
        return f"SystemRandomSource(seed={self.seed!r})"


class ScriptedRandomSource(RandomSource):
    """
    RandomSource that replays scripted integers in order.

    Each scripted draw must lie inside the range requested by the caller,
    otherwise ValueError is raised (a mis-scripted test fails loudly
    rather than producing an impossible puzzle).

    Once the script is used up, draws go to ``fallback`` if one is given,
    else ScriptExhaustedError is raised. shuffle() delegates to
    ``fallback`` when present and keeps the original order otherwise.

    Example:
        >>> rng = ScriptedRandomSource([4, 5, 7, 10])
        >>> rng.randint(1, 5), rng.randint(1, 5)
        (4, 5)
        >>> rng.remaining
        2
    """

    def __init__(
        self,
        draws: Iterable[int],
        fallback: Optional[RandomSource] = None,
    ) -> None:
        self._draws = list(draws)
        self._position = 0
        self.fallback = fallback

    @property
    def remaining(self) -> int:
        """Number of scripted draws not yet consumed."""
        return len(self._draws) - self._position

    def randint(self, low: int, high: int) -> int:
        if low > high:
            raise ValueError(f"Empty range: [{low}, {high}]")
        if self._position >= len(self._draws):
            if self.fallback is None:
                raise ScriptExhaustedError(
                    f"No scripted draws left (used {self._position}) for range [{low}, {high}]"
                )
            return self.fallback.randint(low, high)

        value = self._draws[self._position]
        if not low <= value <= high:
            raise ValueError(
                f"Scripted draw #{self._position + 1} ({value}) outside range [{low}, {high}]"
            )
        self._position += 1
        return value

    def shuffle(self, values: Sequence[T]) -> List[T]:
        if self.fallback is not None:
            return self.fallback.shuffle(values)
        return list(values)


_DEFAULT_SOURCE: Optional[SystemRandomSource] = None


def default_random_source() -> SystemRandomSource:
    """Shared unseeded source used when a caller does not inject one."""
    global _DEFAULT_SOURCE
    if _DEFAULT_SOURCE is None:
        logger.debug("Creating default unseeded random source")
        _DEFAULT_SOURCE = SystemRandomSource()
    return _DEFAULT_SOURCE
