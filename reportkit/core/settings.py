"""Typed settings loading.

Settings live in a standalone TOML file or under ``[tool.reportkit]`` in a
``pyproject.toml``:

    [tool.reportkit]
    indent_width = 4
    show_locals = true
    traceback_width = 120

Environment variables override file values (see ``settings_from_env``).
"""

from __future__ import annotations

import os
from collections.abc import Mapping
from dataclasses import dataclass, replace
from pathlib import Path

from .result import Err, Ok, Result
from .structured import StrDict, as_str_dict, get_bool, get_int, get_table, parse_bool

__all__ = [
    "DEFAULT_INDENT_WIDTH",
    "ENV_INDENT",
    "ENV_SHOW_LOCALS",
    "Settings",
    "SettingsError",
    "load_settings",
    "load_settings_or_default",
    "settings_from_env",
]

DEFAULT_INDENT_WIDTH = 2

ENV_INDENT = "REPORTKIT_INDENT"
ENV_SHOW_LOCALS = "REPORTKIT_SHOW_LOCALS"


@dataclass(frozen=True, slots=True)
class SettingsError:
    """Settings could not be loaded or parsed."""

    message: str
    path: Path | None = None


@dataclass(frozen=True, slots=True)
class Settings:
    """Effective library settings.

    Attributes:
        indent_width: Default width for the ``indent`` command
        show_locals: Show local variables in installed tracebacks
        traceback_width: Traceback render width, None for the rich default
    """

    indent_width: int = DEFAULT_INDENT_WIDTH
    show_locals: bool = False
    traceback_width: int | None = None

    @classmethod
    def from_dict(cls, data: Mapping[str, object]) -> Settings:
        """Build settings from a parsed table.

        Raises:
            ValueError: If a known key holds a value of the wrong type or range.
        """
        indent_width = get_int(data, "indent_width")
        if "indent_width" in data and (indent_width is None or indent_width < 0):
            raise ValueError("indent_width must be a non-negative integer")

        show_locals = get_bool(data, "show_locals")
        if "show_locals" in data and show_locals is None:
            raise ValueError("show_locals must be a boolean")

        traceback_width = get_int(data, "traceback_width")
        if "traceback_width" in data and (traceback_width is None or traceback_width <= 0):
            raise ValueError("traceback_width must be a positive integer")

        return cls(
            indent_width=DEFAULT_INDENT_WIDTH if indent_width is None else indent_width,
            show_locals=bool(show_locals),
            traceback_width=traceback_width,
        )


def _parse_toml(path: Path) -> Result[StrDict, SettingsError]:
    import tomllib

    try:
        data_obj: object = tomllib.loads(path.read_bytes().decode("utf-8"))
    except FileNotFoundError:
        return Err(SettingsError(f"Settings file not found: {path}", path=path))
    except PermissionError:
        return Err(SettingsError(f"Permission denied reading: {path}", path=path))
    except OSError as e:
        return Err(SettingsError(f"Error reading settings: {e}", path=path))
    except tomllib.TOMLDecodeError as e:
        return Err(SettingsError(f"Invalid TOML syntax: {e}", path=path))
    except UnicodeDecodeError as e:
        return Err(SettingsError(f"Error reading settings: {e}", path=path))

    data = as_str_dict(data_obj)
    if data is None:
        return Err(SettingsError("Settings root must be a TOML table", path=path))
    return Ok(data)


def _settings_table(data: StrDict) -> StrDict:
    # pyproject.toml keeps its settings under [tool.reportkit]
    tool = get_table(data, "tool")
    if tool is not None:
        section = get_table(tool, "reportkit")
        if section is not None:
            return section
    return data


def load_settings(path: Path) -> Result[Settings, SettingsError]:
    """Load settings from a TOML file.

    Args:
        path: A settings file or a ``pyproject.toml``

    Returns:
        Ok(Settings) on success, Err(SettingsError) on failure
    """
    result = _parse_toml(path)
    if isinstance(result, Err):
        return result

    try:
        return Ok(Settings.from_dict(_settings_table(result.value)))
    except (KeyError, TypeError, ValueError) as e:
        return Err(SettingsError(f"Invalid settings: {e}", path=path))


def load_settings_or_default(path: Path) -> Settings:
    """Load settings, falling back to defaults on any error."""
    result = load_settings(path)
    if isinstance(result, Ok):
        return result.value
    return Settings()


def settings_from_env(
    base: Settings | None = None,
    environ: Mapping[str, str] | None = None,
) -> Settings:
    """Apply environment overrides on top of ``base``.

    Unparseable values are ignored and the base value is kept.
    """
    settings = base if base is not None else Settings()
    env = os.environ if environ is None else environ

    raw_indent = env.get(ENV_INDENT, "").strip()
    if raw_indent:
        try:
            width = int(raw_indent)
        except ValueError:
            width = -1
        if width >= 0:
            settings = replace(settings, indent_width=width)

    raw_locals = env.get(ENV_SHOW_LOCALS)
    if raw_locals is not None:
        show_locals = parse_bool(raw_locals)
        if show_locals is not None:
            settings = replace(settings, show_locals=show_locals)

    return settings
