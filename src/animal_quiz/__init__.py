"""Top-level package for the Animal Quiz engine.

Provides subpackages:
- animal_quiz.core – immutable models (Item, Catalog, Puzzle), catalog schema and JSON I/O
- animal_quiz.engine – item selection and puzzle generation
- animal_quiz.session – caller-side turn loop that owns a player's collection
"""

from importlib.metadata import PackageNotFoundError, version as _pkg_version

try:
    __version__ = _pkg_version("animal-quiz")
except PackageNotFoundError:
    # Running from a source checkout without an install
    __version__ = "0.0.0"

__all__: list[str] = ["__version__"]
