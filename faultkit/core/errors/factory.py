# faultkit/core/errors/factory.py
"""
Programmatic creation of anonymous error variants.

    E_RESOURCE_NOT_FOUND = create_error_variant(
        "Unable to find resource with id %d",
        "E_RESOURCE_NOT_FOUND",
        404,
    )
    raise E_RESOURCE_NOT_FOUND([42])

Variants created here are not self-naming: every instance reports the fixed
label ANONYMOUS_VARIANT_NAME. Declare a BaseError subclass when the class
name should show up in logs.
"""

from __future__ import annotations

import logging
from typing import Any, Optional, Sequence, Type

from . import codes
from .exceptions import BaseError
from .formatting import format_message


logger = logging.getLogger(__name__)


def create_error_variant(
    message: str,
    code: str,
    status: Optional[int] = None,
) -> Type[BaseError]:
    """
    Create a BaseError subclass whose instances format `message` with the
    positional args given at construction.

    Args:
        message: Template with printf-style directives (%s, %d, %i, %f, %j, %o)
        code: Machine readable code shared by all instances
        status: Optional HTTP-style status (instances fall back to 500)

    Returns:
        A new variant class taking (args=None, *, cause=None)
    """
    template = message
    variant_code = code
    variant_status = status

    class AnonymousVariant(BaseError):
        variant_name = codes.ANONYMOUS_VARIANT_NAME
        message = template
        code = variant_code
        status = variant_status

        def __init__(
            self,
            args: Optional[Sequence[Any]] = None,
            *,
            cause: Optional[BaseException] = None,
        ) -> None:
            super().__init__(format_message(template, *(args or ())), cause=cause)

    AnonymousVariant.__name__ = codes.ANONYMOUS_VARIANT_NAME
    AnonymousVariant.__qualname__ = codes.ANONYMOUS_VARIANT_NAME

    logger.debug("Created error variant code=%s status=%s", variant_code, variant_status)
    return AnonymousVariant


# Short alias
create_error = create_error_variant
