"""
Terminal scrollback suppression.

After a command's output was echoed live, these helpers work out how many
terminal rows it occupies and build the ANSI sequence that moves the cursor
back up and clears everything below it.
"""

from __future__ import annotations

import os
from collections.abc import Iterable

CURSOR_TO_COLUMN_0 = "\r"
CLEAR_SCREEN_DOWN = "\x1b[J"


def cursor_up(rows: int) -> str:
    """ANSI sequence moving the cursor up; empty for zero rows."""
    return f"\x1b[{rows}A" if rows > 0 else ""


def normalize_line(line: str) -> str:
    """Keep only what a terminal shows after carriage-return overwrites."""
    return line.rsplit("\r", 1)[-1]


def collect_lines(stdout: str, stderr: str, linesep: str = os.linesep) -> list[str]:
    """
    Split captured output into normalized lines.

    An empty stream contributes no lines at all, a stream ending with a line
    terminator contributes a trailing empty line (the row the cursor sits on).
    """
    lines: list[str] = []
    for text in (stdout, stderr):
        if text:
            lines.extend(text.split(linesep))
    return [normalize_line(line) for line in lines]


def count_rows(lines: Iterable[str], terminal_width: int) -> int:
    """Number of terminal rows the lines occupy, counting soft wraps."""
    width = max(terminal_width, 1)
    return sum(len(line) // width + 1 for line in lines)


def erase_sequence(rows: int) -> str:
    """Return to column 0, go up ``rows - 1`` rows and clear to the screen end."""
    return CURSOR_TO_COLUMN_0 + cursor_up(rows - 1) + CLEAR_SCREEN_DOWN
