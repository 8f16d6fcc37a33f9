"""
Module: puzzles

Purpose:
    Provides the Puzzle dataclass - one generated arithmetic question
    with its shuffled multiple-choice answers. Puzzles are transient:
    created per turn by the generator and owned by the caller for the
    duration of one question.

Key Functions:
    - Puzzle.is_correct(guess): Check a player's answer
    - Puzzle.distractors: Wrong answers in presentation order
    - Puzzle.to_dict(): Serialization for the presentation layer

Dependencies:
    - dataclasses (std)
    - enum (std)

Used By:
    - engine.generator
    - session.game
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Tuple


class Operation(str, Enum):
    """Arithmetic operation of a puzzle."""
    ADDITION = "addition"
    SUBTRACTION = "subtraction"

    def __str__(self) -> str:
        return self.value

    @property
    def symbol(self) -> str:
        return "+" if self is Operation.ADDITION else "-"

    def apply(self, num1: int, num2: int) -> int:
        """Evaluate ``num1 <op> num2``."""
        if self is Operation.ADDITION:
            return num1 + num2
        return num1 - num2


@dataclass(frozen=True)
class Puzzle:
    """
    Generated arithmetic question (immutable).

    Attributes:
        level: Difficulty level the puzzle was generated for
        operation: ADDITION or SUBTRACTION
        num1: First operand (minuend for subtraction)
        num2: Second operand (subtrahend for subtraction)
        result: Correct answer
        answers: Candidate answers in presentation order

    Invariants:
        - result == operation.apply(num1, num2)
        - answers are distinct and contain result exactly once

    Example:
        >>> p = Puzzle(3, Operation.ADDITION, 4, 5, 9, (10, 9, 7, 8))
        >>> p.question
        '4 + 5 = ?'
        >>> p.distractors
        (10, 7, 8)
    """

    level: int
    operation: Operation
    num1: int
    num2: int
    result: int
    answers: Tuple[int, ...]

    def __post_init__(self) -> None:
        """Validate puzzle on construction."""
        expected = self.operation.apply(self.num1, self.num2)
        if self.result != expected:
            raise ValueError(
                f"Inconsistent puzzle: {self.num1} {self.operation.symbol} "
                f"{self.num2} = {expected}, not {self.result}"
            )
        if len(set(self.answers)) != len(self.answers):
            raise ValueError(f"Puzzle answers must be distinct: {self.answers}")
        if self.result not in self.answers:
            raise ValueError(f"Puzzle answers {self.answers} do not include result {self.result}")

    @property
    def operands(self) -> Tuple[int, int]:
        return (self.num1, self.num2)

    @property
    def symbol(self) -> str:
        return self.operation.symbol

    @property
    def question(self) -> str:
        """Question text, e.g. ``"9 - 4 = ?"``."""
        return f"{self.num1} {self.symbol} {self.num2} = ?"

    @property
    def distractors(self) -> Tuple[int, ...]:
        """Wrong answers in presentation order."""
        return tuple(a for a in self.answers if a != self.result)

    def is_correct(self, guess: int) -> bool:
        return guess == self.result

    def to_dict(self) -> dict[str, Any]:
        """Serialize to a JSON-compatible dictionary."""
        return {
            "level": self.level,
            "operation": self.operation.value,
            "num1": self.num1,
            "num2": self.num2,
            "result": self.result,
            "answers": list(self.answers),
        }
