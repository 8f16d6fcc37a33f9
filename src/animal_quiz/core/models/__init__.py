"""
Core Models Package

Immutable, validated data models.

**DESIGN RATIONALE:**

All models in this package are frozen dataclasses. This ensures:
1. No accidental mutation between the selector and the generator
2. Items can be used in sets (a player's collection is a set of items)
3. Easier to reason about a turn's data flow

| Model | Role |
|-------|------|
| `Item` | Collectible animal, carries the difficulty `level` |
| `Catalog` | Every item the engine may award |
| `Puzzle` | One generated arithmetic question |
"""

from .items import AnimalGroup, Habitat, Item
from .catalog import Catalog
from .puzzles import Operation, Puzzle

__all__ = [
    "AnimalGroup",
    "Habitat",
    "Item",
    "Catalog",
    "Operation",
    "Puzzle",
]
