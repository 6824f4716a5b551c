"""Settings command - show the effective configuration."""

from __future__ import annotations

from pathlib import Path

import typer

from reportkit.cli.context import build_context
from reportkit.core.profile import current_profile


def settings(
    config_path: Path | None = typer.Option(None, "--config", help="Settings file"),
) -> None:
    """Print the effective settings and the report profile."""
    ctx = build_context(config_path)
    s = ctx.settings
    width = "default" if s.traceback_width is None else str(s.traceback_width)

    typer.echo(f"profile:         {current_profile()}")
    typer.echo(f"indent_width:    {s.indent_width}")
    typer.echo(f"show_locals:     {str(s.show_locals).lower()}")
    typer.echo(f"traceback_width: {width}")
