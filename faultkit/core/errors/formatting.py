# faultkit/core/errors/formatting.py
"""
Positional message formatting for factory-made error variants.

Directives:
- %s  str(value)
- %d  number (integral floats render without a fraction)
- %i  integer, truncated toward zero
- %f  float
- %j  compact JSON
- %o  repr(value)
- %O  repr(value)
- %c  consumes an argument, renders nothing
- %%  literal percent sign

Mismatches are tolerated: directives without an argument stay literal and
surplus arguments are appended, space separated.
"""

from __future__ import annotations

import json
import math
import re
from typing import Any, Callable, Dict, Optional, Union


_DIRECTIVE = re.compile(r"%[sdifjoOc%]")
_LEADING_INT = re.compile(r"^\s*[+-]?\d+")
_LEADING_FLOAT = re.compile(r"^\s*[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?")
_NUMERIC = re.compile(r"^\s*[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?\s*$")

Number = Union[int, float]


def _render_number(value: Number) -> str:
    if isinstance(value, float):
        if math.isnan(value):
            return "NaN"
        if math.isinf(value):
            return "Infinity" if value > 0 else "-Infinity"
        if value.is_integer():
            return str(int(value))
        return repr(value)
    return str(value)


def _to_number(value: Any) -> Optional[Number]:
    if isinstance(value, bool):
        return int(value)
    if isinstance(value, (int, float)):
        return value
    if isinstance(value, str):
        if not value.strip():
            return 0
        # plain decimal notation only ("1_000" and "inf" are not numbers)
        return float(value) if _NUMERIC.match(value) else None
    return None


def _format_number(value: Any) -> str:
    number = _to_number(value)
    return "NaN" if number is None else _render_number(number)


def _format_int(value: Any) -> str:
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        if isinstance(value, float) and not math.isfinite(value):
            return "NaN"
        return str(int(value))
    match = _LEADING_INT.match(str(value))
    return str(int(match.group())) if match else "NaN"


def _format_float(value: Any) -> str:
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        try:
            return _render_number(float(value))
        except OverflowError:
            return "Infinity" if value > 0 else "-Infinity"
    match = _LEADING_FLOAT.match(str(value))
    return _render_number(float(match.group())) if match else "NaN"


def _format_json(value: Any) -> str:
    try:
        return json.dumps(value, separators=(",", ":"), default=str)
    except ValueError as exc:
        if "Circular" in str(exc):
            return "[Circular]"
        return str(value)
    except TypeError:
        # non-string mapping keys
        return str(value)


_FORMATTERS: Dict[str, Callable[[Any], str]] = {
    "s": str,
    "d": _format_number,
    "i": _format_int,
    "f": _format_float,
    "j": _format_json,
    "o": repr,
    "O": repr,
    "c": lambda value: "",
}


def format_message(template: str, *args: Any) -> str:
    """
    Substitute positional args into template.

    With no args the template is returned verbatim (including any "%%").
    """
    if not args:
        return template

    position = 0

    def _substitute(match: re.Match) -> str:
        nonlocal position
        directive = match.group()[1]
        if directive == "%":
            return "%"
        if position >= len(args):
            return match.group()
        value = args[position]
        position += 1
        return _FORMATTERS[directive](value)

    rendered = _DIRECTIVE.sub(_substitute, template)

    surplus = args[position:]
    if surplus:
        rendered = " ".join(
            [rendered] + [v if isinstance(v, str) else repr(v) for v in surplus]
        )
    return rendered
