# faultkit/config/validator.py
"""
Catalog Validator

Validates error catalog documents before any variant is defined.
Returns structured issues with level (warn/error), path, message, hint.
"""

from __future__ import annotations

import keyword
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any, Dict, List, Literal

from faultkit.core.errors import codes


ROOT_PATH = "<root>"
ERRORS_KEY = "errors"

_STRING_FIELDS = ("message", "code", "help")


@dataclass(frozen=True)
class CatalogIssue:
    """
    Catalog validation issue

    Structured output for logging and tooling.
    """
    level: Literal["warn", "error"]
    path: str  # e.g., "errors.UserNotFound.status"
    message: str
    hint: str = ""

    def __str__(self) -> str:
        hint_str = f" (hint: {self.hint})" if self.hint else ""
        return f"{self.level.upper()} [{self.path}] {self.message}{hint_str}"


def entry_path(name: Any) -> str:
    return f"{ERRORS_KEY}.{name}"


def validate_catalog(data: Any) -> List[CatalogIssue]:
    """
    Validate a catalog document.

    Expected shape:
        errors:
          UserNotFound:
            message: Unable to find user
            code: E_USER_NOT_FOUND
            status: 404
            help: Make sure the user exists

    Returns:
        List of issues (warn/error level)
    """
    issues: List[CatalogIssue] = []

    if data is None:
        data = {}

    if not isinstance(data, Mapping):
        issues.append(CatalogIssue(
            level="error",
            path=ROOT_PATH,
            message=f"catalog must be a mapping, got {type(data).__name__}",
            hint=f"Put variant definitions under a top-level '{ERRORS_KEY}' key",
        ))
        return issues

    if ERRORS_KEY not in data:
        issues.append(CatalogIssue(
            level="warn",
            path=ROOT_PATH,
            message=f"no '{ERRORS_KEY}' section, catalog is empty",
        ))
        return issues

    entries = data[ERRORS_KEY]
    if entries is None:
        entries = {}
    if not isinstance(entries, Mapping):
        issues.append(CatalogIssue(
            level="error",
            path=ERRORS_KEY,
            message=f"'{ERRORS_KEY}' must be a mapping of name to definition, got {type(entries).__name__}",
        ))
        return issues

    seen_codes: Dict[str, str] = {}
    for name, entry in entries.items():
        issues.extend(_validate_entry(name, entry, seen_codes))

    return issues


def _validate_entry(name: Any, entry: Any, seen_codes: Dict[str, str]) -> List[CatalogIssue]:
    issues: List[CatalogIssue] = []
    path = entry_path(name)

    if not isinstance(name, str) or not name.isidentifier() or keyword.iskeyword(name):
        issues.append(CatalogIssue(
            level="error",
            path=path,
            message=f"variant name {name!r} is not a valid class name",
            hint="Use a Python identifier such as UserNotFound",
        ))

    if entry is None:
        return issues

    if not isinstance(entry, Mapping):
        issues.append(CatalogIssue(
            level="error",
            path=path,
            message=f"definition must be a mapping, got {type(entry).__name__}",
        ))
        return issues

    for key in entry:
        if key not in codes.DESCRIPTOR_FIELDS:
            issues.append(CatalogIssue(
                level="warn",
                path=f"{path}.{key}",
                message=f"unknown field {key!r} is ignored",
                hint=f"Known fields: {', '.join(codes.DESCRIPTOR_FIELDS)}",
            ))

    for field in _STRING_FIELDS:
        if field in entry and not isinstance(entry[field], str):
            issues.append(CatalogIssue(
                level="error",
                path=f"{path}.{field}",
                message=f"{field} must be a string, got {type(entry[field]).__name__}",
            ))

    if "status" in entry:
        status = entry["status"]
        if isinstance(status, bool) or not isinstance(status, int):
            issues.append(CatalogIssue(
                level="error",
                path=f"{path}.status",
                message=f"status must be an integer, got {type(status).__name__}",
            ))
        else:
            low, high = codes.STATUS_RANGE
            if not low <= status <= high:
                issues.append(CatalogIssue(
                    level="warn",
                    path=f"{path}.status",
                    message=f"status {status} is outside the HTTP range {low}..{high}",
                ))

    code = entry.get("code")
    if isinstance(code, str):
        if code in seen_codes:
            issues.append(CatalogIssue(
                level="warn",
                path=f"{path}.code",
                message=f"code {code!r} is already used by {seen_codes[code]}",
                hint="Codes should identify a single variant",
            ))
        else:
            seen_codes[code] = str(name)

    return issues
