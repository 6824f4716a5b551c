"""Indent command - pad every non-empty line of a file or stdin."""

from __future__ import annotations

import sys
from pathlib import Path

import typer

from reportkit.cli.context import build_context
from reportkit.core.errors import ErrorCode
from reportkit.core.report import ReportResult, error, fail
from reportkit.core.result import Err, Ok
from reportkit.core.text import indent as indent_text
from reportkit.output.errors import print_report, report_exit_code


def read_input(path: Path | None) -> ReportResult[str]:
    """Read ``path``, or stdin when no path is given."""
    if path is None:
        return Ok(sys.stdin.read())
    try:
        return Ok(path.read_text(encoding="utf-8"))
    except OSError as e:
        return Err(error(e).wrap(f"cannot read {path}"))
    except UnicodeDecodeError as e:
        return fail("cannot decode {} as UTF-8: {}", path, e.reason)


def indent(
    path: Path | None = typer.Argument(None, help="File to indent (default: stdin)"),
    width: int | None = typer.Option(
        None, "--width", "-w", help="Spaces per line (default from settings)"
    ),
    config_path: Path | None = typer.Option(None, "--config", help="Settings file"),
) -> None:
    """Indent every non-empty line and write the result to stdout."""
    ctx = build_context(config_path)
    n = ctx.settings.indent_width if width is None else width
    if n < 0:
        ctx.console.error(f"--width must be >= 0, got {n}")
        raise typer.Exit(code=int(ErrorCode.USAGE_ERROR))

    match read_input(path):
        case Err(error=report):
            print_report(report, ctx.console)
            raise typer.Exit(code=report_exit_code(report))
        case Ok(value=text):
            typer.echo(indent_text(text, n), nl=text.endswith("\n"))
