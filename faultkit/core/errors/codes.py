# faultkit/core/errors/codes.py
from __future__ import annotations

from typing import Final, Tuple


# ---- resolution defaults ----
DEFAULT_STATUS: Final[int] = 500
DEFAULT_MESSAGE: Final[str] = ""

# label shared by every variant produced by create_error_variant
ANONYMOUS_VARIANT_NAME: Final[str] = "Exception"

# library-owned error codes
INVALID_CATALOG: Final[str] = "E_INVALID_CATALOG"


# ---- field groups ----

# variant-scoped defaults, read once per construction
DESCRIPTOR_FIELDS: Final[Tuple[str, ...]] = ("message", "code", "status", "help")

# class attributes that cannot change once a variant class exists
SEALED_CLASS_FIELDS: Final[frozenset[str]] = frozenset(DESCRIPTOR_FIELDS) | {"variant_name"}

# instance attributes that cannot change once __init__ returns
INSTANCE_FIELDS: Final[frozenset[str]] = frozenset({
    "name",
    "message",
    "status",
    "code",
    "help",
    "cause",
    "origin",
})

# HTTP-style range accepted without a catalog warning
STATUS_RANGE: Final[Tuple[int, int]] = (100, 599)
