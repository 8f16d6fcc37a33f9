"""
Animal Quiz Core Package

Shared data models and utilities. These models are the single source of
truth for the engine and the session helper.

**DESIGN NOTES:**

1. **Immutable Data Models**
   - Items, catalogs and puzzles are frozen dataclasses
   - Puzzles are created fresh per turn and never edited

2. **Explicit Catalog**
   - The catalog is a value handed to the selector
   - Nothing looks items up through module-level state

3. **Identity Semantics**
   - Items compare and hash by id only, so set difference against a
     player's collection works regardless of display fields
"""

from .models import AnimalGroup, Catalog, Habitat, Item, Operation, Puzzle

__all__ = [
    "AnimalGroup",
    "Catalog",
    "Habitat",
    "Item",
    "Operation",
    "Puzzle",
]
