# faultkit/core/errors/exceptions.py
"""
Structured error base type.

Every error variant is a subclass of BaseError. Variant-level defaults live
on the class as plain attributes (the descriptor):

    class FileNotFound(BaseError):
        message = "Unable to find file"
        status = 404
        code = "E_FILE_NOT_FOUND"
        help = "Make sure the file exists before reading it"

    raise FileNotFound()

Instances resolve their fields once, at construction:
- message: explicit argument > descriptor message > ""
- status:  explicit option > descriptor status > 500
- code:    explicit option > descriptor code > absent
- help:    descriptor only
"""

from __future__ import annotations

import inspect
import traceback
from dataclasses import dataclass
from typing import Any, Optional, TypedDict

from . import codes


class ErrorOptions(TypedDict, total=False):
    code: str
    status: int
    cause: BaseException


@dataclass(frozen=True)
class ErrorDescriptor:
    """Variant-scoped defaults attached to an error class."""
    message: Optional[str] = None
    code: Optional[str] = None
    status: Optional[int] = None
    help: Optional[str] = None


class _VariantMeta(type):
    """
    Keeps descriptor fields read-only once the variant class is defined, and
    seals instance fields once the whole __init__ chain has returned.
    """

    def __call__(cls, *args: Any, **kwargs: Any) -> Any:
        instance = super().__call__(*args, **kwargs)
        instance.__dict__["_sealed"] = True
        return instance

    def __setattr__(cls, name: str, value: Any) -> None:
        if name in codes.SEALED_CLASS_FIELDS:
            raise AttributeError(f"{cls.__name__}.{name} is read-only")
        super().__setattr__(name, value)

    def __delattr__(cls, name: str) -> None:
        if name in codes.SEALED_CLASS_FIELDS:
            raise AttributeError(f"{cls.__name__}.{name} is read-only")
        super().__delattr__(name)


def _is_constructing(frame: Any, instance: BaseError) -> bool:
    # any __init__ in the MRO running on behalf of this instance
    return frame.f_code.co_name == "__init__" and frame.f_locals.get("self") is instance


def _rebuild(cls: type, args: tuple, state: dict) -> BaseError:
    """Recreate an error from its resolved fields without running __init__."""
    error = cls.__new__(cls)
    error.args = args
    state = dict(state)
    state["origin"] = traceback.StackSummary.from_list(state.get("origin", ()))
    error.__dict__.update(state)
    if isinstance(state.get("cause"), BaseException):
        error.__cause__ = state["cause"]
    return error


class BaseError(Exception, metaclass=_VariantMeta):
    """
    Error carrying a message, an optional machine readable code, an
    HTTP-style status, optional help text and an optional cause.
    """

    # descriptor (override in subclasses)
    message: Optional[str] = None
    code: Optional[str] = None
    status: Optional[int] = None
    help: Optional[str] = None

    # explicit label; falls back to the class name when unset
    variant_name: Optional[str] = None

    def __init__(
        self,
        message: Optional[str] = None,
        *,
        code: Optional[str] = None,
        status: Optional[int] = None,
        cause: Optional[BaseException] = None,
    ) -> None:
        descriptor = type(self).descriptor()
        resolved_message = message or descriptor.message or codes.DEFAULT_MESSAGE
        super().__init__(resolved_message)

        self.name = type(self).__dict__.get("variant_name") or type(self).__name__
        self.message = resolved_message
        self.status = status or descriptor.status or codes.DEFAULT_STATUS

        # code/help stay absent from the instance when nothing provides them
        resolved_code = code or descriptor.code
        if resolved_code is not None:
            self.code = resolved_code
        if descriptor.help is not None:
            self.help = descriptor.help

        self.cause = cause
        if isinstance(cause, BaseException):
            self.__cause__ = cause

        self.origin = self._capture_origin()

    @classmethod
    def descriptor(cls) -> ErrorDescriptor:
        """Return the variant-scoped defaults for this class."""
        return ErrorDescriptor(
            message=cls.message,
            code=cls.code,
            status=cls.status,
            help=cls.help,
        )

    def _capture_origin(self) -> traceback.StackSummary:
        """
        Capture the call stack at construction, oldest frame first.

        Frames belonging to __init__ methods of this instance (the base class,
        intermediate subclasses and factory variants) are skipped, so the last
        entry is the caller's construction site.
        """
        frame = inspect.currentframe()
        try:
            while frame is not None and (
                frame.f_code in _CONSTRUCTION_CODES
                or _is_constructing(frame, self)
            ):
                frame = frame.f_back
            summary = traceback.StackSummary.extract(
                traceback.walk_stack(frame), lookup_lines=False
            )
        finally:
            del frame
        summary.reverse()
        return summary

    @property
    def stack(self) -> str:
        """Header line followed by the origin frames, innermost first."""
        header = f"{self.name}: {self.message}" if self.message else self.name
        frames = traceback.StackSummary.from_list(list(reversed(self.origin)))
        return header + "\n" + "".join(frames.format())

    def __reduce__(self) -> tuple:
        # frame summaries can hold code objects; keep plain tuples instead
        state = dict(self.__dict__)
        state["origin"] = [(f.filename, f.lineno, f.name, f.line) for f in self.origin]
        return (_rebuild, (type(self), self.args, state))

    def __setattr__(self, name: str, value: Any) -> None:
        if name in codes.INSTANCE_FIELDS and self.__dict__.get("_sealed", False):
            raise AttributeError(f"{self.name}.{name} is read-only")
        super().__setattr__(name, value)

    def __delattr__(self, name: str) -> None:
        if name in codes.INSTANCE_FIELDS and self.__dict__.get("_sealed", False):
            raise AttributeError(f"{self.name}.{name} is read-only")
        super().__delattr__(name)

    def __str__(self) -> str:
        if self.code:
            return f"{self.name} [{self.code}]: {self.message}"
        return f"{self.name}: {self.message}"

    def __repr__(self) -> str:
        return f"{self.name}({self.message!r})"


# frames skipped in addition to the __init__ chain
_CONSTRUCTION_CODES = (
    _VariantMeta.__call__.__code__,
    BaseError._capture_origin.__code__,
)
