# faultkit/config/__init__.py
"""
faultkit Configuration

Declarative error catalogs.

Design principles:
1. BaseError carries every default; a catalog only supplies descriptors
2. YAML is input parameters, the library works without any catalog
3. Entries that fail validation are skipped and logged
"""

from .loader import CatalogError, ErrorCatalog, load_catalog
from .validator import CatalogIssue, validate_catalog

__all__ = [
    "CatalogError",
    "ErrorCatalog",
    "load_catalog",
    "CatalogIssue",
    "validate_catalog",
]
