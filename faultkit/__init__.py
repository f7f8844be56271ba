# faultkit/__init__.py
"""
faultkit - Structured, machine-inspectable errors

Every error carries a human message, an optional machine readable code, an
HTTP-style status, optional help text and an optional cause.

Declaring a variant:
    >>> from faultkit import BaseError
    >>> class UserNotFound(BaseError):
    ...     message = "Unable to find user"
    ...     status = 404
    ...     code = "E_USER_NOT_FOUND"
    >>> str(UserNotFound())
    'UserNotFound [E_USER_NOT_FOUND]: Unable to find user'

Creating a variant on the fly:
    >>> from faultkit import create_error_variant
    >>> E_NOT_FOUND = create_error_variant("Unable to find %s", "E_NOT_FOUND", 404)
    >>> E_NOT_FOUND(["user"]).message
    'Unable to find user'

Loading variants from YAML:
    >>> from faultkit import load_catalog
    >>> catalog = load_catalog("errors.yml")  # doctest: +SKIP
    >>> raise catalog.UserNotFound()  # doctest: +SKIP
"""

__version__ = "0.1.0"

from .core.errors import (
    ANONYMOUS_VARIANT_NAME,
    DEFAULT_STATUS,
    BaseError,
    ErrorDescriptor,
    ErrorOptions,
    create_error,
    create_error_variant,
    format_message,
)
from .config import (
    CatalogError,
    CatalogIssue,
    ErrorCatalog,
    load_catalog,
    validate_catalog,
)

__all__ = [
    "__version__",
    # Core
    "BaseError",
    "ErrorDescriptor",
    "ErrorOptions",
    "create_error_variant",
    "create_error",
    "format_message",
    "ANONYMOUS_VARIANT_NAME",
    "DEFAULT_STATUS",
    # Catalogs
    "ErrorCatalog",
    "CatalogError",
    "CatalogIssue",
    "load_catalog",
    "validate_catalog",
]
