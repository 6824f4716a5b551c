"""Report presentation and exit code mapping."""

from __future__ import annotations

from typing import TYPE_CHECKING

from reportkit.core.errors import ErrorCode
from reportkit.core.report import Report
from reportkit.output.console import Style

if TYPE_CHECKING:
    from reportkit.output.console import ConsoleProtocol

__all__ = ["print_report", "report_exit_code"]


def print_report(report: Report, console: ConsoleProtocol) -> None:
    """Print a report: message as an error, origin dimmed underneath."""
    first, *rest = report.message.split("\n")
    console.error(first)
    for line in rest:
        console.print(line)
    if report.location is not None:
        console.print(f"raised at {report.location}", Style.DIM)


def report_exit_code(report: Report) -> int:
    """Exit code for a report, based on what caused it."""
    seen: set[int] = set()
    cause: BaseException | None = report
    while cause is not None and id(cause) not in seen:
        if isinstance(cause, OSError):
            return int(ErrorCode.IO_ERROR)
        seen.add(id(cause))
        cause = cause.__cause__
    return int(ErrorCode.USER_ERROR)
