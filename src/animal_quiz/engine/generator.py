"""
Module: engine.generator

Purpose:
    Synthesizes an arithmetic puzzle calibrated to an item's level,
    including a shuffled multiple-choice answer set.

Key Functions:
    - generate_puzzle(): Main entry point for generation

Key Classes:
    - PuzzleGenerator: Generation with an injected random source and config
    - PuzzleError: Base class for generation errors
    - LevelOutOfRangeError: Level has no difficulty policy
    - SamplingExhaustedError: A rejection loop hit the circuit breaker

Algorithm:
    1. Addition levels: draw num1, num2 from [1, level + 2] until
       num1 + num2 >= 2 * level
    2. Subtraction levels: draw a, b from [1, max] until
       max(a, b) - min(a, b) >= min_diff
    3. Draw distractors from [max(result - 2, floor), result + 3] until
       the answer set has 4 distinct values
    4. Shuffle the answers

    Each rejection redraws every value of the step; nothing is nudged
    into range.

Dependencies:
    - core.models: Item, Puzzle, Operation
    - engine.config: GeneratorConfig
    - engine.random_source: RandomSource

Used By:
    - session.game: Turn loop
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import List, Optional, Tuple

from animal_quiz.core.models.items import Item
from animal_quiz.core.models.puzzles import Operation, Puzzle

from .config import GeneratorConfig
from .random_source import RandomSource, default_random_source

logger = logging.getLogger(__name__)


class PuzzleError(Exception):
    """Error during puzzle generation."""
    pass


class LevelOutOfRangeError(PuzzleError):
    """Level has no addition or subtraction policy."""

    def __init__(self, level: int, supported_levels: Tuple[int, ...]):
        super().__init__(
            f"No difficulty policy for level {level} (supported: {list(supported_levels)})"
        )
        self.level = level
        self.supported_levels = supported_levels


class SamplingExhaustedError(PuzzleError):
    """A rejection-sampling loop gave up after max_attempts draws."""

    def __init__(self, stage: str, attempts: int):
        super().__init__(f"Rejection sampling for {stage} gave up after {attempts} attempts")
        self.stage = stage
        self.attempts = attempts


def generate_puzzle(
    item: Optional[Item],
    rng: Optional[RandomSource] = None,
    config: Optional[GeneratorConfig] = None,
) -> Optional[Puzzle]:
    """
    Generate a puzzle for the item the selector picked.

    Args:
        item: Item being awarded, or None when nothing is left
        rng: Random source for every draw (shared default if None)
        config: Difficulty table and answer policy (defaults if None)

    Returns:
        Puzzle, or None when item is None

    Raises:
        LevelOutOfRangeError: If the item's level has no policy

    Example:
        >>> puzzle = generate_puzzle(eagle, SystemRandomSource(seed=1))
        >>> puzzle.operation
        <Operation.ADDITION: 'addition'>
        >>> len(puzzle.answers)
        4
    """
    generator = PuzzleGenerator(
        rng=rng or default_random_source(),
        config=config or GeneratorConfig(),
    )
    return generator.generate(item)


@dataclass
class PuzzleGenerator:
    """
    Puzzle generator bound to one random source and config.

    Attributes:
        rng: Random source for every draw
        config: Difficulty table and answer policy
    """

    rng: RandomSource = field(default_factory=default_random_source)
    config: GeneratorConfig = field(default_factory=GeneratorConfig)

    def generate(self, item: Optional[Item]) -> Optional[Puzzle]:
        """
        Generate a puzzle for an item.

        Args:
            item: Item being awarded, or None

        Returns:
            Puzzle, or None when item is None

        Raises:
            LevelOutOfRangeError: If the item's level has no policy
        """
        if item is None:
            return None
        return self.generate_for_level(item.level)

    def generate_for_level(self, level: int) -> Puzzle:
        """
        Generate a puzzle for a difficulty level.

        Raises:
            LevelOutOfRangeError: If the level has no policy
        """
        operation = self.config.operation_for(level)
        if operation is None:
            logger.warning(f"Refusing to generate a puzzle for unsupported level {level}")
            raise LevelOutOfRangeError(level, self.config.supported_levels)

        if operation is Operation.ADDITION:
            num1, num2 = self._draw_addition(level)
        else:
            num1, num2 = self._draw_subtraction(level)
        result = operation.apply(num1, num2)

        answers = self._answers(result, operation)
        puzzle = Puzzle(
            level=level,
            operation=operation,
            num1=num1,
            num2=num2,
            result=result,
            answers=tuple(answers),
        )
        logger.debug(f"Level {level}: {puzzle.question} answers={list(puzzle.answers)}")
        return puzzle

    # ─────────────────────────────────────────────────────────────────────────
    # Rejection Sampling
    # ─────────────────────────────────────────────────────────────────────────

    def _draw_addition(self, level: int) -> Tuple[int, int]:
        """Draw addends in [1, level + 2] until their sum is >= 2 * level."""
        high = level + 2
        minimum_sum = level * 2
        for attempt in range(1, self.config.max_attempts + 1):
            num1 = self.rng.randint(1, high)
            num2 = self.rng.randint(1, high)
            if num1 + num2 >= minimum_sum:
                if attempt > 1:
                    logger.debug(f"Addition level {level}: accepted after {attempt} draws")
                return num1, num2
        raise self._exhausted(f"addition operands (level {level})")

    def _draw_subtraction(self, level: int) -> Tuple[int, int]:
        """Draw a, b in [1, max] until max(a, b) - min(a, b) >= min_diff."""
        max_value, min_diff = self.config.subtraction_range(level)
        for attempt in range(1, self.config.max_attempts + 1):
            a = self.rng.randint(1, max_value)
            b = self.rng.randint(1, max_value)
            num1, num2 = max(a, b), min(a, b)  # minuend first
            if num1 - num2 >= min_diff:
                if attempt > 1:
                    logger.debug(f"Subtraction level {level}: accepted after {attempt} draws")
                return num1, num2
        raise self._exhausted(f"subtraction operands (level {level})")

    def _answers(self, result: int, operation: Operation) -> List[int]:
        """Correct result plus distinct distractors, shuffled."""
        lower, upper = self.config.answer_bounds(result, operation)
        answers = [result]
        attempts = 0
        while len(answers) < self.config.answer_count:
            attempts += 1
            if attempts > self.config.max_attempts:
                raise self._exhausted(f"distractors (result {result})")
            candidate = self.rng.randint(lower, upper)
            if candidate not in answers:
                answers.append(candidate)
        return self.rng.shuffle(answers)

    def _exhausted(self, stage: str) -> SamplingExhaustedError:
        logger.warning(f"Circuit breaker tripped for {stage} after {self.config.max_attempts} attempts")
        return SamplingExhaustedError(stage, self.config.max_attempts)
