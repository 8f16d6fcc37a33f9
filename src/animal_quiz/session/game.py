"""
Module: session.game

Purpose:
    Caller-side turn loop. A Game owns one player's collection and drives
    the engine: choose the next item, generate its puzzle, check the
    player's guess, and record the item on a correct answer.

Key Classes:
    - Game: A named player's collection and current turn
    - Turn: The item on offer and the puzzle that awards it
    - GameError: Answer submitted for a turn that is not open

Dependencies:
    - core.models: Item, Puzzle, Catalog
    - engine: choose_next, PuzzleGenerator, GeneratorConfig, RandomSource

Used By:
    - Applications embedding the engine

Not thread-safe: at most one turn per Game may be in flight, and callers
sharing a Game across threads must serialize access themselves.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Iterable, Optional, Set, Tuple

from animal_quiz.core.models.items import Item
from animal_quiz.core.models.puzzles import Puzzle
from animal_quiz.engine.config import GeneratorConfig
from animal_quiz.engine.generator import PuzzleGenerator
from animal_quiz.engine.random_source import RandomSource, default_random_source
from animal_quiz.engine.selector import choose_next

logger = logging.getLogger(__name__)


class GameError(Exception):
    """Invalid operation on a game."""
    pass


@dataclass(frozen=True)
class Turn:
    """
    One question of a game (immutable).

    Attributes:
        item: Item awarded for a correct answer
        puzzle: Puzzle the player must solve
    """

    item: Item
    puzzle: Puzzle


@dataclass
class Game:
    """
    A player's game: name, owned items and the open turn.

    Attributes:
        name: Player/game name, stored stripped and lowercased
        owned: Items collected so far

    Example:
        >>> game = Game("Foobar")
        >>> game.name
        'foobar'
        >>> turn = game.next_turn(catalog, rng)
        >>> game.submit(turn, turn.puzzle.result)
        True
        >>> turn.item in game.owned
        True
    """

    name: str
    owned: Set[Item] = field(default_factory=set)

    _current: Optional[Turn] = field(init=False, default=None, repr=False)

    def __post_init__(self) -> None:
        """Normalize and validate the name."""
        normalized = (self.name or "").strip().lower()
        if not normalized:
            raise ValueError("Game name cannot be empty")
        self.name = normalized
        self.owned = set(self.owned)

    @property
    def current_turn(self) -> Optional[Turn]:
        """Turn waiting for an answer, if any."""
        return self._current

    def next_turn(
        self,
        catalog: Iterable[Item],
        rng: Optional[RandomSource] = None,
        config: Optional[GeneratorConfig] = None,
    ) -> Optional[Turn]:
        """
        Open the next turn.

        Any unanswered turn is discarded, even when opening the new turn
        fails. The selector and generator share one random source.

        Args:
            catalog: Every item that can be awarded
            rng: Random source (shared default if None)
            config: Generator configuration (defaults if None)

        Returns:
            The new Turn, or None when the collection is complete

        Raises:
            LevelOutOfRangeError: If the chosen item's level has no policy
        """
        self._current = None
        rng = rng or default_random_source()
        item = choose_next(catalog, self.owned, rng)
        if item is None:
            logger.info(f"Game {self.name!r}: collection complete")
            return None

        generator = PuzzleGenerator(rng=rng, config=config or GeneratorConfig())
        puzzle = generator.generate(item)
        self._current = Turn(item=item, puzzle=puzzle)
        return self._current

    def submit(self, turn: Turn, guess: Any) -> bool:
        """
        Answer the open turn.

        Args:
            turn: The turn being answered (must be the open one)
            guess: Player's answer. Integers, integral floats (9.0) and
                integer strings ("9") are accepted; anything else, including
                "9.7" and 9.7, counts as wrong

        Returns:
            True if the guess was correct and the item was recorded

        Raises:
            GameError: If turn is not the open turn
        """
        if self._current is None or turn is not self._current:
            raise GameError(f"Game {self.name!r}: turn is not open for answers")
        self._current = None

        value = _parse_guess(guess)
        if value is None:
            logger.debug(f"Game {self.name!r}: non-integer guess {guess!r}")
            return False

        if not turn.puzzle.is_correct(value):
            return False

        self.owned.add(turn.item)
        logger.info(f"Game {self.name!r}: collected {turn.item.name!r}")
        return True

    def progress(self, catalog: Iterable[Item]) -> Tuple[int, int]:
        """
        Collection progress against a catalog.

        Returns:
            (owned items present in catalog, catalog size)
        """
        catalog_ids = {item.id for item in catalog}
        owned_ids = {item.id for item in self.owned}
        return (len(catalog_ids & owned_ids), len(catalog_ids))

    def is_complete(self, catalog: Iterable[Item]) -> bool:
        collected, total = self.progress(catalog)
        return collected == total


def _parse_guess(guess: Any) -> Optional[int]:
    """
    Whole-number value of a guess, or None if it is not one.

    Floats and strings get the same treatment: 9, 9.0, "9" and " 9 " are
    9; 9.7, "9.7", "nine" and True are None.
    """
    if isinstance(guess, bool):
        return None
    if isinstance(guess, int):
        return guess
    if isinstance(guess, float):
        return int(guess) if guess.is_integer() else None
    if isinstance(guess, str):
        text = guess.strip()
        try:
            return int(text)
        except ValueError:
            pass
        try:
            number = float(text)
        except ValueError:
            return None
        return int(number) if number.is_integer() else None
    return None
