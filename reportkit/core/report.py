"""Error reports that remember where they were raised.

``Report`` is the single error type of the library. The helpers here build
one in a single call and stamp it with the caller's source location when the
process runs under the debug profile:

    def load(path: Path) -> ReportResult[str]:
        if not path.exists():
            return fail("missing input: {}", path)
        return Ok(path.read_text())

Rendered under the debug profile::

    missing input: data.txt
    Raised at file: /src/app/io.py:12.

Python functions cannot return on behalf of their caller, so ``error`` and
``fail`` hand the value back and the call site writes the ``return``.
"""

from __future__ import annotations

import sys
from dataclasses import dataclass
from types import FrameType
from typing import Any

from .profile import current_profile
from .result import Err, Ok, Result

__all__ = [
    "Location",
    "Report",
    "ReportResult",
    "create_error",
    "error",
    "fail",
    "report_error",
    "ok_or_error",
]


@dataclass(frozen=True, slots=True)
class Location:
    """Source position of the statement that raised a report.

    Attributes:
        file: Path of the source file, as the interpreter sees it
        line: Line number (1-based)
        function: Name of the enclosing function, if known
    """

    file: str
    line: int
    function: str | None = None

    def __post_init__(self) -> None:
        if self.line <= 0:
            raise ValueError(f"line must be > 0, got {self.line}")

    def __str__(self) -> str:
        return f"{self.file}:{self.line}"

    @classmethod
    def from_frame(cls, frame: FrameType) -> Location:
        code = frame.f_code
        return cls(file=code.co_filename, line=frame.f_lineno or 1, function=code.co_name)


class Report(Exception):
    """A rendered error message, optionally tagged with its origin.

    Reports are normally returned inside ``Err``; they subclass ``Exception``
    so code that prefers raising can raise them directly.
    """

    def __init__(self, message: str, location: Location | None = None) -> None:
        super().__init__(message)
        self._message = message
        self._location = location

    @property
    def message(self) -> str:
        return self._message

    @property
    def location(self) -> Location | None:
        return self._location

    @classmethod
    def msg(cls, message: object) -> Report:
        """Build a report from any displayable value, without a location."""
        return cls(str(message))

    def wrap(self, context: object) -> Report:
        """Prefix the message with ``context``, keeping the location.

        The original report becomes the ``__cause__`` of the new one.
        """
        wrapped = Report(f"{context}: {self._message}", self._location)
        wrapped.__cause__ = self
        return wrapped

    def __str__(self) -> str:
        if self._location is None:
            return self._message
        return f"{self._message}\nRaised at file: {self._location}."

    def __repr__(self) -> str:
        return f"Report({self._message!r}, location={self._location!r})"


type ReportResult[T] = Result[T, Report]


def _caller_location(stacklevel: int) -> Location | None:
    # Frame 2 is the caller of create_error.
    frame: FrameType | None = sys._getframe(2)
    for _ in range(max(stacklevel, 1) - 1):
        if frame is None:
            break
        frame = frame.f_back
    if frame is None:
        return None
    return Location.from_frame(frame)


def create_error(message: object, *, stacklevel: int = 1) -> Report:
    """Build a report from ``message`` and stamp it with the caller's location.

    Args:
        message: Anything ``str()`` accepts: a string, an exception, or an
            existing ``Report`` (rendered in full).
        stacklevel: Which frame counts as the raise site. 1 is the direct
            caller of ``create_error``; helpers that wrap it pass 2.

    Returns:
        A ``Report``. Under the release profile the location is omitted and
        no frame is inspected.
    """
    text = str(message)
    location = _caller_location(stacklevel) if current_profile().is_debug else None
    report = Report(text, location)
    if isinstance(message, BaseException):
        report.__cause__ = message
    return report


def _format(message: object, args: tuple[Any, ...], kwargs: dict[str, Any]) -> object:
    if args or kwargs:
        return str(message).format(*args, **kwargs)
    return message


def error(message: object, *args: Any, **kwargs: Any) -> Report:
    """Build a report for a function whose return type is ``Report`` itself.

    Accepts a literal message, a pre-built value (exception, report, any
    object), or a ``str.format`` template followed by its arguments:

        return error("disk full")
        return error(exc)
        return error("bad value {!r} for {}", value, key)
    """
    return create_error(_format(message, args, kwargs), stacklevel=2)


def fail(message: object, *args: Any, **kwargs: Any) -> Err[Report]:
    """Like ``error``, wrapped as a failed result: ``return fail(...)``."""
    return Err(create_error(_format(message, args, kwargs), stacklevel=2))


def report_error(message: object) -> Err[Report]:
    """Already-failed result carrying ``create_error(message)``.

    Meant for expression position, e.g. ``result = ok if cond else report_error(...)``.
    """
    return Err(create_error(message, stacklevel=2))


def ok_or_error[T](value: T | None, message: object) -> Result[T, Report]:
    """Promote an optional value to a result.

    ``None`` becomes a failure built straight from ``message``. Unlike the
    other helpers no location is attached here.
    """
    if value is None:
        return Err(Report.msg(message))
    return Ok(value)
