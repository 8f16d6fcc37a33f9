"""
Module: engine.config

Purpose:
    Configuration dataclass for puzzle generation. Holds the difficulty
    table and the answer-set policy. Immutable configuration with
    validation on construction.

Key Classes:
    - GeneratorConfig: Difficulty table and distractor policy

Dependencies:
    - dataclasses (std)
    - core.models.puzzles.Operation

Used By:
    - engine.generator: Puzzle generation
    - session.game: Turn loop
"""

from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Dict, Mapping, Optional, Tuple

from animal_quiz.core.models.puzzles import Operation


# level -> (max operand, minimum difference)
DEFAULT_SUBTRACTION_RANGES: Dict[int, Tuple[int, int]] = {
    4: (6, 1),
    5: (8, 2),
    6: (10, 3),
    7: (12, 4),
}


@dataclass(frozen=True)
class GeneratorConfig:
    """
    Configuration for puzzle generation (immutable).

    The defaults reproduce the standard difficulty table: levels 1-3 are
    addition with operands in [1, level + 2] and a sum of at least
    2 * level; levels 4-7 are subtraction bounded by
    ``subtraction_ranges``. Any other level has no policy.

    Attributes:
        addition_levels: Levels that produce addition puzzles
        subtraction_ranges: level -> (max operand, min difference)
        answer_count: Total answers per puzzle, correct one included
        spread_below: How far below the result a distractor may fall
        spread_above: How far above the result a distractor may rise
        addition_floor: Lowest distractor for addition puzzles
        subtraction_floor: Lowest distractor for subtraction puzzles
        max_attempts: Circuit breaker for any single rejection loop

    Invariants:
        - All levels positive, addition and subtraction levels disjoint
        - 0 <= min_diff < max for every subtraction row
        - spread_below + spread_above + 1 >= answer_count
        - max_attempts > 0

    Example:
        >>> config = GeneratorConfig()
        >>> config.operation_for(5)
        <Operation.SUBTRACTION: 'subtraction'>
        >>> config.answer_bounds(1, Operation.ADDITION)
        (0, 4)
    """

    # Difficulty table
    addition_levels: Tuple[int, ...] = (1, 2, 3)
    subtraction_ranges: Mapping[int, Tuple[int, int]] = field(
        default_factory=lambda: dict(DEFAULT_SUBTRACTION_RANGES)
    )

    # Answer set
    answer_count: int = 4
    spread_below: int = 2
    spread_above: int = 3
    addition_floor: int = 0
    subtraction_floor: int = 0

    # Safety net for rejection sampling
    max_attempts: int = 10_000

    def __post_init__(self) -> None:
        """Freeze the table and validate configuration on construction."""
        object.__setattr__(self, "addition_levels", tuple(self.addition_levels))
        object.__setattr__(
            self,
            "subtraction_ranges",
            MappingProxyType(
                {level: tuple(row) for level, row in dict(self.subtraction_ranges).items()}
            ),
        )
        for level in self.addition_levels:
            if level <= 0:
                raise ValueError(f"addition level must be positive: {level}")
        overlap = set(self.addition_levels) & set(self.subtraction_ranges)
        if overlap:
            raise ValueError(f"levels cannot be both addition and subtraction: {sorted(overlap)}")
        for level, (max_value, min_diff) in self.subtraction_ranges.items():
            if level <= 0:
                raise ValueError(f"subtraction level must be positive: {level}")
            if max_value <= 0:
                raise ValueError(f"subtraction max must be positive for level {level}: {max_value}")
            if not 0 <= min_diff < max_value:
                raise ValueError(
                    f"subtraction min_diff must be in [0, {max_value}) for level {level}: {min_diff}"
                )
        if self.answer_count < 1:
            raise ValueError(f"answer_count must be at least 1: {self.answer_count}")
        if self.spread_below < 0 or self.spread_above < 0:
            raise ValueError(
                f"spreads must be non-negative: below={self.spread_below}, above={self.spread_above}"
            )
        if self.spread_below + self.spread_above + 1 < self.answer_count:
            raise ValueError(
                f"answer range too narrow for {self.answer_count} distinct answers: "
                f"below={self.spread_below}, above={self.spread_above}"
            )
        if self.addition_floor < 0 or self.subtraction_floor < 0:
            raise ValueError(
                f"answer floors must be non-negative: addition={self.addition_floor}, "
                f"subtraction={self.subtraction_floor}"
            )
        if self.max_attempts <= 0:
            raise ValueError(f"max_attempts must be positive: {self.max_attempts}")

    def __hash__(self) -> int:
        return hash((
            self.addition_levels,
            tuple(sorted(self.subtraction_ranges.items())),
            self.answer_count,
            self.spread_below,
            self.spread_above,
            self.addition_floor,
            self.subtraction_floor,
            self.max_attempts,
        ))

    # ─────────────────────────────────────────────────────────────────────────
    # Calculated Properties
    # ─────────────────────────────────────────────────────────────────────────

    @property
    def supported_levels(self) -> Tuple[int, ...]:
        """Every level with a defined policy, ascending."""
        return tuple(sorted(set(self.addition_levels) | set(self.subtraction_ranges)))

    def operation_for(self, level: int) -> Optional[Operation]:
        """
        Operation used at a level.

        Returns:
            ADDITION, SUBTRACTION, or None when the level has no policy
        """
        if level in self.addition_levels:
            return Operation.ADDITION
        if level in self.subtraction_ranges:
            return Operation.SUBTRACTION
        return None

    def subtraction_range(self, level: int) -> Tuple[int, int]:
        """
        (max operand, min difference) for a subtraction level.

        Raises:
            KeyError: If level is not a subtraction level
        """
        return self.subtraction_ranges[level]

    def answer_bounds(self, result: int, operation: Operation) -> Tuple[int, int]:
        """
        Inclusive range distractors are drawn from.

        Args:
            result: Correct answer of the puzzle
            operation: Operation of the puzzle (selects the floor)

        Returns:
            (max(result - spread_below, floor), result + spread_above)
        """
        floor = self.addition_floor if operation is Operation.ADDITION else self.subtraction_floor
        return (max(result - self.spread_below, floor), result + self.spread_above)
