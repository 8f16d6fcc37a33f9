"""
Module: engine

Purpose:
    The puzzle/selection engine. Picks the next item to award and
    generates an arithmetic puzzle matched to that item's level. Pure
    computation: no I/O, no shared mutable state, one injected random
    source per call.

Key Functions:
    - choose_next(): Pick the easiest unowned item
    - generate_puzzle(): Build a puzzle for an item

Key Classes:
    - GeneratorConfig: Difficulty table and answer policy
    - RandomSource: Injectable randomness (System/Scripted implementations)
    - PuzzleError: Base class for generation errors

Dependencies:
    - animal_quiz.core.models: Item, Puzzle, Operation

Used By:
    - animal_quiz.session: Turn loop
"""

from .config import GeneratorConfig
from .generator import (
    LevelOutOfRangeError,
    PuzzleError,
    PuzzleGenerator,
    SamplingExhaustedError,
    generate_puzzle,
)
from .random_source import (
    RandomSource,
    ScriptedRandomSource,
    ScriptExhaustedError,
    SystemRandomSource,
    default_random_source,
)
from .selector import Selector, choose_next

__all__ = [
    # Config
    "GeneratorConfig",
    # Randomness
    "RandomSource",
    "SystemRandomSource",
    "ScriptedRandomSource",
    "ScriptExhaustedError",
    "default_random_source",
    # Selection
    "choose_next",
    "Selector",
    # Generation
    "generate_puzzle",
    "PuzzleGenerator",
    "PuzzleError",
    "LevelOutOfRangeError",
    "SamplingExhaustedError",
]
