"""
External command execution.
"""

from .command_runner import CommandRunner
from .scrollback import collect_lines, count_rows, erase_sequence, normalize_line

__all__ = [
    "CommandRunner",
    "collect_lines",
    "count_rows",
    "erase_sequence",
    "normalize_line",
]
