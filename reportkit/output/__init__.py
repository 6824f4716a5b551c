"""Output abstraction layer."""

from .console import (
    ConsoleProtocol,
    MockConsole,
    RichConsole,
    Style,
    install_tracebacks,
)
from .errors import print_report, report_exit_code

__all__ = [
    "ConsoleProtocol",
    "MockConsole",
    "RichConsole",
    "Style",
    "install_tracebacks",
    "print_report",
    "report_exit_code",
]
