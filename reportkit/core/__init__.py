"""Core types and logic."""

from .errors import ErrorCode
from .profile import Profile, current_profile
from .report import (
    Location,
    Report,
    ReportResult,
    create_error,
    error,
    fail,
    ok_or_error,
    report_error,
)
from .result import Err, Ok, Result, is_err, is_ok
from .settings import Settings, SettingsError, load_settings
from .text import indent

__all__ = [
    # errors
    "ErrorCode",
    # profile
    "Profile",
    "current_profile",
    # report
    "Location",
    "Report",
    "ReportResult",
    "create_error",
    "error",
    "fail",
    "ok_or_error",
    "report_error",
    # result
    "Err",
    "Ok",
    "Result",
    "is_err",
    "is_ok",
    # settings
    "Settings",
    "SettingsError",
    "load_settings",
    # text
    "indent",
]
