# faultkit/core/errors/__init__.py
"""
Core error types for faultkit.

This package defines the components responsible for:
- Declaring error variants (BaseError subclasses with a descriptor)
- Creating anonymous variants with templated messages
- Formatting positional message templates

No side effects on import.
"""

from .codes import ANONYMOUS_VARIANT_NAME, DEFAULT_STATUS
from .exceptions import BaseError, ErrorDescriptor, ErrorOptions
from .factory import create_error, create_error_variant
from .formatting import format_message

__all__ = [
    "ANONYMOUS_VARIANT_NAME",
    "DEFAULT_STATUS",
    "BaseError",
    "ErrorDescriptor",
    "ErrorOptions",
    "create_error",
    "create_error_variant",
    "format_message",
]
