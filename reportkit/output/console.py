"""Console output abstraction.

Everything that touches ``rich`` goes through this module, so the rest of
the package stays free of presentation details and tests can swap in
``MockConsole``.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum, auto
from typing import Protocol

__all__ = [
    "Style",
    "ConsoleProtocol",
    "RichConsole",
    "MockConsole",
    "OutputRecord",
    "install_tracebacks",
]


class Style(Enum):
    """Text styles for console output."""

    DEFAULT = auto()
    ERROR = auto()
    WARNING = auto()
    DIM = auto()

    def __str__(self) -> str:
        return self.name.lower()


class ConsoleProtocol(Protocol):
    """Styled text output, implemented by Rich or captured for tests."""

    def print(self, message: str, style: Style = Style.DEFAULT) -> None:
        """Print a message with optional styling."""
        ...

    def error(self, message: str) -> None: ...

    def warning(self, message: str) -> None: ...

    def newline(self) -> None: ...


class RichConsole:
    """Production console backed by Rich."""

    def __init__(self, *, stderr: bool = False) -> None:
        from rich.console import Console

        self._console = Console(stderr=stderr)
        self._style_map = {
            Style.DEFAULT: "",
            Style.ERROR: "red bold",
            Style.WARNING: "yellow",
            Style.DIM: "dim",
        }

    def print(self, message: str, style: Style = Style.DEFAULT) -> None:
        # Report text is user data, never markup.
        rich_style = self._style_map.get(style) or None
        self._console.print(
            message, style=rich_style, markup=False, highlight=False, soft_wrap=True
        )

    def error(self, message: str) -> None:
        from rich.text import Text

        self._console.print(Text.assemble(("error: ", "red bold"), message), soft_wrap=True)

    def warning(self, message: str) -> None:
        from rich.text import Text

        self._console.print(Text.assemble(("warning: ", "yellow"), message), soft_wrap=True)

    def newline(self) -> None:
        self._console.print()


@dataclass
class OutputRecord:
    """A single captured line."""

    message: str
    style: Style


def _empty_outputs() -> list[OutputRecord]:
    return []


@dataclass
class MockConsole:
    """Console that records output instead of printing it."""

    outputs: list[OutputRecord] = field(default_factory=_empty_outputs)

    def print(self, message: str, style: Style = Style.DEFAULT) -> None:
        self.outputs.append(OutputRecord(message, style))

    def error(self, message: str) -> None:
        self.outputs.append(OutputRecord(f"error: {message}", Style.ERROR))

    def warning(self, message: str) -> None:
        self.outputs.append(OutputRecord(f"warning: {message}", Style.WARNING))

    def newline(self) -> None:
        self.outputs.append(OutputRecord("", Style.DEFAULT))

    @property
    def messages(self) -> list[str]:
        return [o.message for o in self.outputs]

    @property
    def text(self) -> str:
        """All captured output, newline separated."""
        return "\n".join(self.messages)

    def has_error(self) -> bool:
        return any(o.style == Style.ERROR for o in self.outputs)

    def find(self, substring: str) -> list[OutputRecord]:
        return [o for o in self.outputs if substring in o.message]


def install_tracebacks(*, show_locals: bool = False, width: int | None = None) -> None:
    """Install Rich pretty tracebacks as the handler for uncaught exceptions."""
    from rich.traceback import install

    if width is None:
        install(show_locals=show_locals)
    else:
        install(show_locals=show_locals, width=width)
