# faultkit/config/loader.py
"""
Catalog Loader

Defines named error variants from a declarative YAML catalog.

Design principle:
- Code = truth (BaseError carries every default)
- YAML = variant descriptors only (message/code/status/help)
- Bad entries are reported and skipped, never half-defined
- Loaded catalogs are immutable
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from pathlib import Path
from types import MappingProxyType
from typing import Any, Dict, Iterator, Optional, Tuple, Type, Union

import yaml

from faultkit.core.errors import codes
from faultkit.core.errors.exceptions import BaseError
from .validator import CatalogIssue, ERRORS_KEY, ROOT_PATH, entry_path, validate_catalog


logger = logging.getLogger(__name__)


class CatalogError(BaseError):
    """Raised when a catalog cannot be read or its top level is invalid."""
    code = codes.INVALID_CATALOG
    help = f"A catalog is a YAML mapping with a top-level '{ERRORS_KEY}' key"


def _define_variant(
    name: str,
    entry: Mapping,
    base: Type[BaseError],
    module: str,
) -> Type[BaseError]:
    namespace: Dict[str, Any] = {
        "variant_name": name,
        "__module__": module,
        "__qualname__": name,
    }
    for field in codes.DESCRIPTOR_FIELDS:
        if field in entry:
            namespace[field] = entry[field]
    return type(base)(name, (base,), namespace)


class ErrorCatalog(Mapping):
    """
    Immutable mapping of variant name to variant class.

    Variants are also reachable as attributes:
        catalog = load_catalog("errors.yml")
        raise catalog.UserNotFound()
    """

    def __init__(
        self,
        variants: Optional[Mapping[str, Type[BaseError]]] = None,
        issues: Tuple[CatalogIssue, ...] = (),
    ):
        self._variants = MappingProxyType(dict(variants or {}))
        self._issues = tuple(issues)

    @classmethod
    def from_mapping(
        cls,
        data: Any,
        *,
        base: Type[BaseError] = BaseError,
        module: Optional[str] = None,
    ) -> "ErrorCatalog":
        """
        Build a catalog from an already parsed document.

        Args:
            data: Parsed catalog document (see validate_catalog)
            base: Class every variant derives from
            module: __module__ assigned to the variants

        Raises:
            CatalogError: If the document or its errors section is not a mapping
        """
        issues = validate_catalog(data)
        fatal = [i for i in issues if i.level == "error" and i.path in (ROOT_PATH, ERRORS_KEY)]
        if fatal:
            raise CatalogError(f"Invalid error catalog: {fatal[0].message}")

        broken = {i.path for i in issues if i.level == "error"}
        for issue in issues:
            if issue.level == "error":
                logger.warning("Skipping catalog entry: %s", issue)
            else:
                logger.info("Catalog: %s", issue)

        entries = (data or {}).get(ERRORS_KEY) or {}
        variants: Dict[str, Type[BaseError]] = {}
        for name, entry in entries.items():
            path = entry_path(name)
            if any(p == path or p.startswith(path + ".") for p in broken):
                continue
            variants[name] = _define_variant(name, entry or {}, base, module or __name__)

        logger.debug("Loaded %d error variant(s)", len(variants))
        return cls(variants, issues)

    @classmethod
    def from_yaml(
        cls,
        path: Union[str, Path],
        *,
        base: Type[BaseError] = BaseError,
        module: Optional[str] = None,
    ) -> "ErrorCatalog":
        """
        Load a catalog from a YAML file.

        Raises:
            CatalogError: If the file is missing, unreadable or malformed
        """
        return cls.from_mapping(_load_yaml(Path(path)), base=base, module=module)

    @property
    def issues(self) -> Tuple[CatalogIssue, ...]:
        """Validation issues found while building the catalog."""
        return self._issues

    def names(self) -> Tuple[str, ...]:
        return tuple(self._variants)

    def __getitem__(self, name: str) -> Type[BaseError]:
        return self._variants[name]

    def __iter__(self) -> Iterator[str]:
        return iter(self._variants)

    def __len__(self) -> int:
        return len(self._variants)

    def __getattr__(self, name: str) -> Type[BaseError]:
        variants = self.__dict__.get("_variants", {})
        try:
            return variants[name]
        except KeyError:
            raise AttributeError(f"no error variant named {name!r}") from None

    def __repr__(self) -> str:
        return f"ErrorCatalog({', '.join(self._variants)})"


def _load_yaml(path: Path) -> Any:
    """Read and parse a catalog file; any failure becomes a CatalogError."""
    try:
        with open(path, "r", encoding="utf-8") as f:
            return yaml.safe_load(f)
    except OSError as exc:
        raise CatalogError(f"Unable to read error catalog {path}", cause=exc) from exc
    except (UnicodeDecodeError, yaml.YAMLError) as exc:
        raise CatalogError(f"Malformed error catalog {path}", cause=exc) from exc


def load_catalog(
    path: Union[str, Path],
    *,
    base: Type[BaseError] = BaseError,
    module: Optional[str] = None,
) -> ErrorCatalog:
    """Load named error variants from a YAML catalog file."""
    return ErrorCatalog.from_yaml(path, base=base, module=module)
