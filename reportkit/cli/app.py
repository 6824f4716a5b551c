from __future__ import annotations

import typer

from reportkit import __version__
from reportkit.cli.commands.indent_cmd import indent
from reportkit.cli.commands.settings_cmd import settings


app = typer.Typer(
    add_completion=False,
    no_args_is_help=True,
    rich_markup_mode="rich",
)

app.command()(indent)
app.command()(settings)


def _print_version(value: bool) -> None:
    if value:
        typer.echo(__version__)
        raise typer.Exit(code=0)


@app.callback()
def _main(  # pyright: ignore[reportUnusedFunction]
    version: bool = typer.Option(
        False,
        "--version",
        help="Show version and exit.",
        callback=_print_version,
        is_eager=True,
    ),
) -> None:
    """Indent text and report errors with their origin."""


def main() -> None:
    app()
