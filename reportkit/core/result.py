"""Two-variant result type used to propagate failures by value.

A function that can fail returns either ``Ok(value)`` or ``Err(error)``
instead of raising. Callers branch on the variant explicitly:

    def parse_port(raw: str) -> Result[int, Report]:
        if not raw.isdigit():
            return fail("not a port: {!r}", raw)
        return Ok(int(raw))

    match parse_port("8000"):
        case Ok(port):
            ...
        case Err(report):
            ...
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import NoReturn, TypeGuard

__all__ = ["Ok", "Err", "Result", "is_ok", "is_err"]


@dataclass(frozen=True, slots=True)
class Ok[T]:
    """Success variant.

    Attributes:
        value: The wrapped success value.
    """

    value: T

    def is_ok(self) -> bool:
        return True

    def is_err(self) -> bool:
        return False

    def unwrap(self) -> T:
        """Return the wrapped value."""
        return self.value

    def unwrap_or[D](self, default: D) -> T:
        return self.value

    def unwrap_err(self) -> NoReturn:
        """Always raises, an ``Ok`` carries no error.

        Raises:
            ValueError: Always.
        """
        raise ValueError(f"called unwrap_err on Ok: {self.value!r}")

    def expect(self, message: str) -> T:
        return self.value

    def map[U](self, f: Callable[[T], U]) -> Ok[U]:
        """Apply ``f`` to the wrapped value."""
        return Ok(f(self.value))

    def map_err[F](self, f: Callable[[object], F]) -> Ok[T]:
        return self

    def flat_map[U, E](self, f: Callable[[T], Result[U, E]]) -> Result[U, E]:
        """Chain a computation that itself returns a ``Result``."""
        return f(self.value)

    def __repr__(self) -> str:
        return f"Ok({self.value!r})"


@dataclass(frozen=True, slots=True)
class Err[E]:
    """Failure variant.

    Attributes:
        error: The wrapped error value.
    """

    error: E

    def is_ok(self) -> bool:
        return False

    def is_err(self) -> bool:
        return True

    def unwrap(self) -> NoReturn:
        """Raise the wrapped error.

        Exceptions (``Report`` included) are raised as-is so the original
        message and traceback survive. Any other error value is wrapped in a
        ``ValueError``.
        """
        if isinstance(self.error, BaseException):
            raise self.error
        raise ValueError(f"called unwrap on Err: {self.error}")

    def unwrap_or[D](self, default: D) -> D:
        return default

    def unwrap_err(self) -> E:
        """Return the wrapped error."""
        return self.error

    def expect(self, message: str) -> NoReturn:
        """Raise ``ValueError`` with ``message`` and the wrapped error."""
        cause = self.error if isinstance(self.error, BaseException) else None
        raise ValueError(f"{message}: {self.error}") from cause

    def map[U](self, f: Callable[[object], U]) -> Err[E]:
        return self

    def map_err[F](self, f: Callable[[E], F]) -> Err[F]:
        """Apply ``f`` to the wrapped error."""
        return Err(f(self.error))

    def flat_map[U](self, f: Callable[[object], Result[U, E]]) -> Err[E]:
        return self

    def __repr__(self) -> str:
        return f"Err({self.error!r})"


type Result[T, E] = Ok[T] | Err[E]


def is_ok[T, E](result: Result[T, E]) -> TypeGuard[Ok[T]]:
    """Narrow ``result`` to ``Ok`` for static type checkers."""
    return isinstance(result, Ok)


def is_err[T, E](result: Result[T, E]) -> TypeGuard[Err[E]]:
    """Narrow ``result`` to ``Err`` for static type checkers."""
    return isinstance(result, Err)
