import pytest
import sys
from pathlib import Path

# Add src to sys.path so we can import animal_quiz
SRC_PATH = Path(__file__).resolve().parent.parent / "src"
if SRC_PATH.as_posix() not in sys.path:
    sys.path.insert(0, SRC_PATH.as_posix())

from animal_quiz.core.models import AnimalGroup, Catalog, Habitat, Item


def make_item(
    item_id: str,
    level: int,
    group: AnimalGroup = AnimalGroup.MAMMAL,
    habitat: Habitat = Habitat.LAND,
) -> Item:
    """Helper to create test items named after their id."""
    return Item(item_id, item_id, level, group, habitat)


# Common test fixtures
@pytest.fixture
def frog() -> Item:
    return make_item("frog", 1, AnimalGroup.AMPHIBIAN)


@pytest.fixture
def tiger() -> Item:
    return make_item("tiger", 1)


@pytest.fixture
def spider() -> Item:
    return make_item("spider", 2, AnimalGroup.ARACHNID)


@pytest.fixture
def eagle() -> Item:
    return make_item("eagle", 3, AnimalGroup.BIRD, Habitat.AIR)


@pytest.fixture
def small_catalog(frog, tiger, spider, eagle) -> Catalog:
    """Two level-1 items, one level-2, one level-3."""
    return Catalog.of([frog, tiger, spider, eagle])
