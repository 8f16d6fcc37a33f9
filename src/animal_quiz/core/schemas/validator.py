"""
Schema Validation Utilities

Validates catalog JSON before it is turned into models.

- `validate_catalog()` always runs fast structural checks
- `strict=True` additionally validates against `catalog.schema.json`
  with jsonschema
- Fail fast on the first violation, reporting a dotted path
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

import jsonschema


# Schema version constants
CATALOG_SCHEMA_VERSION = 1

VALID_GROUPS = ("amphibian", "arachnid", "bird", "fish", "insect", "mammal", "reptile")
VALID_HABITATS = ("air", "land", "sea")


# Load schemas lazily
_SCHEMAS: dict[str, dict] = {}


def _load_schema(name: str) -> dict:
    """Load a schema from the schemas directory."""
    if name not in _SCHEMAS:
        schema_path = Path(__file__).parent / f"{name}.schema.json"
        if not schema_path.exists():
            raise FileNotFoundError(f"Schema not found: {schema_path}")
        with open(schema_path, "r", encoding="utf-8") as f:
            _SCHEMAS[name] = json.load(f)
    return _SCHEMAS[name]


class CatalogValidationError(Exception):
    """Raised when catalog data fails validation."""

    def __init__(self, message: str, path: str = "", errors: list[str] | None = None):
        super().__init__(message)
        self.path = path
        self.errors = errors or []


def validate_catalog(data: dict[str, Any], *, strict: bool = False) -> None:
    """
    Validate catalog data.

    Args:
        data: Catalog dictionary to validate
        strict: If True, also validate against the JSON schema

    Raises:
        CatalogValidationError: If data is invalid
    """
    if not isinstance(data, dict):
        raise CatalogValidationError("Catalog must be a JSON object")

    required = ["schema_version", "items"]
    missing = [f for f in required if f not in data]
    if missing:
        raise CatalogValidationError(
            f"Missing required fields: {missing}",
            path="",
            errors=[f"Missing field: {f}" for f in missing]
        )

    version = data.get("schema_version")
    if version != CATALOG_SCHEMA_VERSION:
        raise CatalogValidationError(
            f"Unsupported catalog schema version: {version} (expected {CATALOG_SCHEMA_VERSION})",
            path="schema_version"
        )

    items = data.get("items")
    if not isinstance(items, list):
        raise CatalogValidationError("items must be a list", path="items")

    seen_ids: set[str] = set()
    for i, item in enumerate(items):
        path = f"items[{i}]"
        _validate_item(item, path)
        if item["id"] in seen_ids:
            raise CatalogValidationError(
                f"Duplicate item id: {item['id']!r}",
                path=f"{path}.id"
            )
        seen_ids.add(item["id"])

    if strict:
        schema = _load_schema("catalog")
        try:
            jsonschema.validate(data, schema)
        except jsonschema.ValidationError as e:
            raise CatalogValidationError(
                f"Schema validation failed: {e.message}",
                path=".".join(str(p) for p in e.absolute_path),
                errors=[e.message]
            ) from e


def _validate_item(data: Any, path: str) -> None:
    """Validate a single catalog entry."""
    if not isinstance(data, dict):
        raise CatalogValidationError("Item must be an object", path=path)

    required = ["id", "name", "level", "group", "habitat"]
    missing = [f for f in required if f not in data]
    if missing:
        raise CatalogValidationError(
            f"Item missing required fields: {missing}",
            path=path,
            errors=[f"Missing field: {f}" for f in missing]
        )

    if not isinstance(data["id"], str) or not data["id"]:
        raise CatalogValidationError(
            f"Invalid id: {data['id']!r} (must be a non-empty string)",
            path=f"{path}.id"
        )

    if not isinstance(data["name"], str) or not data["name"].strip():
        raise CatalogValidationError(
            f"Invalid name: {data['name']!r} (must be a non-empty string)",
            path=f"{path}.name"
        )

    level = data["level"]
    if isinstance(level, bool) or not isinstance(level, int) or level <= 0:
        raise CatalogValidationError(
            f"Invalid level: {level!r} (must be a positive integer)",
            path=f"{path}.level"
        )

    if data["group"] not in VALID_GROUPS:
        raise CatalogValidationError(
            f"Invalid group: {data['group']!r}",
            path=f"{path}.group"
        )

    if data["habitat"] not in VALID_HABITATS:
        raise CatalogValidationError(
            f"Invalid habitat: {data['habitat']!r}",
            path=f"{path}.habitat"
        )
