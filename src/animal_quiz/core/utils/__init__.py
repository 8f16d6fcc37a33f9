"""
Utils Package

Catalog serialization and loading.
"""

from .serialization import (
    serialize_catalog,
    deserialize_catalog,
    load_catalog_json,
    save_catalog_json,
    load_default_catalog,
)

__all__ = [
    "serialize_catalog",
    "deserialize_catalog",
    "load_catalog_json",
    "save_catalog_json",
    "load_default_catalog",
]
