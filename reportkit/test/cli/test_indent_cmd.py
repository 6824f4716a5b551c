from __future__ import annotations

import io
import sys
from pathlib import Path

import pytest
import typer

from reportkit.cli.context import CLIContext
from reportkit.core.errors import ErrorCode
from reportkit.core.result import Err, Ok
from reportkit.core.settings import Settings
from reportkit.output.console import MockConsole


def _ctx(settings: Settings | None = None) -> CLIContext:
    return CLIContext(settings=settings or Settings(), console=MockConsole())


def _patch_context(monkeypatch: pytest.MonkeyPatch, ctx: CLIContext) -> None:
    import reportkit.cli.commands.indent_cmd as indent_cmd

    monkeypatch.setattr(indent_cmd, "build_context", lambda _path=None: ctx)


def test_indent_file_uses_explicit_width(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
) -> None:
    import reportkit.cli.commands.indent_cmd as indent_cmd

    _patch_context(monkeypatch, _ctx())
    src = tmp_path / "in.txt"
    src.write_text("a\n\nb\n", encoding="utf-8")

    indent_cmd.indent(path=src, width=4, config_path=None)

    assert capsys.readouterr().out == "    a\n\n    b\n"


def test_indent_defaults_to_settings_width(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
) -> None:
    import reportkit.cli.commands.indent_cmd as indent_cmd

    _patch_context(monkeypatch, _ctx(Settings(indent_width=3)))
    src = tmp_path / "in.txt"
    src.write_text("x", encoding="utf-8")

    indent_cmd.indent(path=src, width=None, config_path=None)

    assert capsys.readouterr().out == "   x"


def test_indent_reads_stdin(
    monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
) -> None:
    import reportkit.cli.commands.indent_cmd as indent_cmd

    _patch_context(monkeypatch, _ctx())
    monkeypatch.setattr(sys, "stdin", io.StringIO("one\ntwo\n"))

    indent_cmd.indent(path=None, width=2, config_path=None)

    assert capsys.readouterr().out == "  one\n  two\n"


def test_indent_missing_file_exits_with_io_error(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch
) -> None:
    import reportkit.cli.commands.indent_cmd as indent_cmd

    ctx = _ctx()
    _patch_context(monkeypatch, ctx)

    with pytest.raises(typer.Exit) as exc:
        indent_cmd.indent(path=tmp_path / "missing.txt", width=2, config_path=None)

    assert exc.value.exit_code == int(ErrorCode.IO_ERROR)
    assert isinstance(ctx.console, MockConsole)
    assert ctx.console.has_error()
    assert "cannot read" in ctx.console.text


def test_indent_negative_width_is_usage_error(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch
) -> None:
    import reportkit.cli.commands.indent_cmd as indent_cmd

    _patch_context(monkeypatch, _ctx())

    with pytest.raises(typer.Exit) as exc:
        indent_cmd.indent(path=tmp_path / "unused.txt", width=-1, config_path=None)

    assert exc.value.exit_code == int(ErrorCode.USAGE_ERROR)


class TestReadInput:
    """read_input() turns I/O failures into reports."""

    def test_ok(self, tmp_path: Path) -> None:
        from reportkit.cli.commands.indent_cmd import read_input

        src = tmp_path / "in.txt"
        src.write_text("hi", encoding="utf-8")
        assert read_input(src) == Ok("hi")

    def test_missing_file_keeps_os_error_cause(self, tmp_path: Path) -> None:
        from reportkit.cli.commands.indent_cmd import read_input

        result = read_input(tmp_path / "missing.txt")
        assert isinstance(result, Err)
        assert result.error.message.startswith(f"cannot read {tmp_path / 'missing.txt'}: ")
        inner = result.error.__cause__
        assert inner is not None
        assert isinstance(inner.__cause__, FileNotFoundError)

    def test_undecodable_file(self, tmp_path: Path) -> None:
        from reportkit.cli.commands.indent_cmd import read_input

        src = tmp_path / "bin.dat"
        src.write_bytes(b"\xff\xfe\x00")
        result = read_input(src)
        assert isinstance(result, Err)
        assert "UTF-8" in result.error.message
