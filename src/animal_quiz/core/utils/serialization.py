"""
Serialization Utilities

Provides to/from JSON utilities for catalogs.

- `serialize_*` and `deserialize_*` functions work on plain dicts
- `load_*` and `save_*` functions work on files
- Data is validated before it is turned into models
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any

from ..models.catalog import Catalog
from ..models.items import Item
from ..schemas.validator import CATALOG_SCHEMA_VERSION, validate_catalog

logger = logging.getLogger(__name__)

DEFAULT_CATALOG_PATH = Path(__file__).resolve().parent.parent.parent / "data" / "animals.json"


# ─────────────────────────────────────────────────────────────────────────────
# Catalog Serialization
# ─────────────────────────────────────────────────────────────────────────────

def serialize_catalog(catalog: Catalog) -> dict[str, Any]:
    """
    Serialize a Catalog to a dictionary.

    The output can be written to JSON and will pass validation.
    """
    return {
        "schema_version": CATALOG_SCHEMA_VERSION,
        "items": [item.to_dict() for item in catalog],
    }


def deserialize_catalog(
    data: dict[str, Any],
    *,
    validate: bool = True,
    strict: bool = False,
) -> Catalog:
    """
    Deserialize a Catalog from a dictionary.

    Args:
        data: Dictionary from JSON
        validate: Whether to validate before deserializing
        strict: Use full JSON schema validation (implies validate)

    Returns:
        Catalog instance

    Raises:
        CatalogValidationError: If validation is enabled and data is invalid
        ValueError: If an item cannot be built
    """
    if validate or strict:
        validate_catalog(data, strict=strict)
    return Catalog.of(Item.from_dict(entry) for entry in data["items"])


# ─────────────────────────────────────────────────────────────────────────────
# File I/O
# ─────────────────────────────────────────────────────────────────────────────

def load_catalog_json(path: Path, *, strict: bool = False) -> Catalog:
    """
    Load a catalog from a JSON file.

    Args:
        path: Path to the catalog file
        strict: Use full JSON schema validation

    Returns:
        Catalog instance
    """
    with open(path, "r", encoding="utf-8") as f:
        data = json.load(f)
    catalog = deserialize_catalog(data, strict=strict)
    logger.debug(f"Loaded {len(catalog)} items from {path}")
    return catalog


def save_catalog_json(catalog: Catalog, path: Path) -> None:
    """
    Save a catalog to a JSON file.

    Args:
        catalog: Catalog to save
        path: Destination path (parent directories are created)
    """
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    with open(path, "w", encoding="utf-8") as f:
        json.dump(serialize_catalog(catalog), f, indent=2)
        f.write("\n")


def load_default_catalog() -> Catalog:
    """Load the bundled catalog of ten animals (levels 1-5)."""
    return load_catalog_json(DEFAULT_CATALOG_PATH, strict=True)
