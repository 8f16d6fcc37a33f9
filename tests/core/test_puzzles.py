"""
Unit Tests for Puzzle Model
"""

import pytest

from animal_quiz.core.models.puzzles import Operation, Puzzle


class TestOperation:
    """Tests for Operation enum."""

    def test_apply_when_addition_then_sums(self):
        assert Operation.ADDITION.apply(4, 5) == 9

    def test_apply_when_subtraction_then_subtracts(self):
        assert Operation.SUBTRACTION.apply(9, 4) == 5

    def test_symbol_when_called_then_matches_operation(self):
        assert Operation.ADDITION.symbol == "+"
        assert Operation.SUBTRACTION.symbol == "-"


class TestPuzzle:
    """Tests for Puzzle dataclass."""

    @pytest.fixture
    def addition(self) -> Puzzle:
        return Puzzle(3, Operation.ADDITION, 4, 5, 9, (10, 9, 7, 8))

    def test_init_when_result_wrong_then_raises_error(self):
        with pytest.raises(ValueError, match="Inconsistent puzzle"):
            Puzzle(3, Operation.ADDITION, 4, 5, 10, (10, 9, 7, 8))

    def test_init_when_answers_repeat_then_raises_error(self):
        with pytest.raises(ValueError, match="must be distinct"):
            Puzzle(3, Operation.ADDITION, 4, 5, 9, (9, 9, 7, 8))

    def test_init_when_result_missing_from_answers_then_raises_error(self):
        with pytest.raises(ValueError, match="do not include result"):
            Puzzle(3, Operation.ADDITION, 4, 5, 9, (10, 11, 7, 8))

    def test_question_when_addition_then_formats_text(self, addition):
        assert addition.question == "4 + 5 = ?"

    def test_question_when_subtraction_then_formats_text(self):
        puzzle = Puzzle(5, Operation.SUBTRACTION, 8, 3, 5, (5, 4, 6, 3))
        assert puzzle.question == "8 - 3 = ?"

    def test_distractors_when_called_then_excludes_result_in_order(self, addition):
        assert addition.distractors == (10, 7, 8)

    def test_is_correct_when_guess_matches_then_true(self, addition):
        assert addition.is_correct(9) is True
        assert addition.is_correct(8) is False

    def test_operands_when_called_then_returns_pair(self, addition):
        assert addition.operands == (4, 5)

    def test_to_dict_when_called_then_serializes_fields(self, addition):
        assert addition.to_dict() == {
            "level": 3,
            "operation": "addition",
            "num1": 4,
            "num2": 5,
            "result": 9,
            "answers": [10, 9, 7, 8],
        }
