"""Error reports with source locations, and small string helpers."""

from reportkit.core.report import (
    Location,
    Report,
    ReportResult,
    create_error,
    error,
    fail,
    ok_or_error,
    report_error,
)
from reportkit.core.result import Err, Ok, Result, is_err, is_ok
from reportkit.core.text import indent
from reportkit.diagnostics import config

__version__ = "0.1.0"

__all__ = [
    "__version__",
    "Location",
    "Report",
    "ReportResult",
    "create_error",
    "error",
    "fail",
    "ok_or_error",
    "report_error",
    "Err",
    "Ok",
    "Result",
    "is_err",
    "is_ok",
    "indent",
    "config",
]
