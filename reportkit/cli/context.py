from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

import typer

from reportkit.core.errors import ErrorCode
from reportkit.core.result import Err
from reportkit.core.settings import Settings, load_settings, settings_from_env
from reportkit.diagnostics import config
from reportkit.output.console import ConsoleProtocol, RichConsole

SETTINGS_FILES = ("reportkit.toml", "pyproject.toml")


@dataclass(frozen=True, slots=True)
class CLIContext:
    settings: Settings
    console: ConsoleProtocol


def find_settings_file(start: Path) -> Path | None:
    """First settings file found in ``start``, in ``SETTINGS_FILES`` order."""
    for name in SETTINGS_FILES:
        candidate = start / name
        if candidate.is_file():
            return candidate
    return None


def build_context(config_path: Path | None = None) -> CLIContext:
    """Resolve settings (explicit file, discovered file, environment) and a console.

    A broken explicit ``--config`` file is fatal; a broken discovered file
    only warns and falls back to defaults. The traceback handler is
    installed with the resolved settings.
    """
    console = RichConsole(stderr=True)
    settings = Settings()

    path = config_path if config_path is not None else find_settings_file(Path.cwd())
    if path is not None:
        result = load_settings(path)
        if isinstance(result, Err):
            if config_path is not None:
                console.error(result.error.message)
                raise typer.Exit(code=int(ErrorCode.USER_ERROR))
            console.warning(f"{result.error.message} (using defaults)")
        else:
            settings = result.value

    effective = settings_from_env(settings)
    config(effective)
    return CLIContext(settings=effective, console=console)
