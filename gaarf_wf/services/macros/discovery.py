"""
Macro discovery in query files.

Two independent stages:
- QueryFileTree enumerates query files below a directory
- scan_macros extracts ``{name}`` placeholders from text

discover_macros() combines them.
"""

from __future__ import annotations

import os
import re
from collections.abc import Iterable, Iterator
from pathlib import Path

DEFAULT_QUERY_SUFFIX = ".sql"
DEFAULT_FUNCTION_MARKER = "FUNCTIONS"

# {name} but not ${name}, which is an expression rather than a macro
MACRO_PATTERN = re.compile(r"(?<!\$)\{(?P<macro>[^}]+)\}")


class QueryFileTree:
    """
    Query files below a root directory.

    Iterating walks the tree depth-first (entries sorted by name) and yields
    every file whose name ends with ``suffix``. Symlinked directories are not
    followed. Each iteration walks the filesystem again. A missing root
    yields nothing.
    """

    def __init__(self, root: str | Path, suffix: str = DEFAULT_QUERY_SUFFIX) -> None:
        self.root = Path(root)
        self.suffix = suffix

    def __iter__(self) -> Iterator[Path]:
        return self._walk(self.root)

    def _walk(self, directory: Path) -> Iterator[Path]:
        try:
            with os.scandir(directory) as it:
                entries = sorted(it, key=lambda e: e.name)
        except (FileNotFoundError, NotADirectoryError):
            return
        for entry in entries:
            path = Path(entry.path)
            if entry.is_dir(follow_symlinks=False):
                yield from self._walk(path)
            elif entry.name.endswith(self.suffix):
                yield path

    def __repr__(self) -> str:
        return f"QueryFileTree({str(self.root)!r}, suffix={self.suffix!r})"


def strip_function_block(text: str, marker: str = DEFAULT_FUNCTION_MARKER) -> str:
    """Cut the text at the first case-insensitive occurrence of ``marker``."""
    match = re.search(re.escape(marker), text, re.IGNORECASE)
    if match:
        return text[: match.start()]
    return text


def scan_macros(text: str) -> list[str]:
    """Return macro names in order of first appearance, without duplicates."""
    names = [m.group("macro") for m in MACRO_PATTERN.finditer(text)]
    return list(dict.fromkeys(names))


def discover_macros(
    files: Iterable[Path],
    function_marker: str = DEFAULT_FUNCTION_MARKER,
) -> list[str]:
    """
    Collect the macros used by a set of query files.

    Args:
        files: Query files to read (UTF-8, undecodable bytes replaced)
        function_marker: Text after this marker is function definitions and
            is not scanned

    Returns:
        De-duplicated macro names, in order of first appearance
    """
    found: dict[str, None] = {}
    for path in files:
        text = Path(path).read_text(encoding="utf-8", errors="replace")
        for name in scan_macros(strip_function_block(text, function_marker)):
            found.setdefault(name, None)
    return list(found)
