"""String helpers."""

from __future__ import annotations

__all__ = ["indent"]


def indent(text: str, width: int) -> str:
    """Prefix every non-empty line of ``text`` with ``width`` spaces.

    Only ``\\n`` separates lines, so a ``\\r`` before it stays part of the
    line. A trailing newline does not yield a trailing empty line, and empty
    lines get no padding.

    Raises:
        ValueError: If ``width`` is negative.
    """
    if width < 0:
        raise ValueError(f"indent width must be >= 0, got {width}")

    lines = text.split("\n")
    if text.endswith("\n"):
        lines.pop()

    pad = " " * width
    return "\n".join(f"{pad}{line}" if line else line for line in lines)
