"""
Schemas Package

JSON schema definitions and validation utilities.
"""

from .validator import (
    validate_catalog,
    CatalogValidationError,
    CATALOG_SCHEMA_VERSION,
)

__all__ = [
    "validate_catalog",
    "CatalogValidationError",
    "CATALOG_SCHEMA_VERSION",
]
