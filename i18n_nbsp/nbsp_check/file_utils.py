"""Filesystem helpers for locale JSON files.

Files are read and written as UTF-8 with newline translation disabled so
that ``\\r\\n`` and ``\\r`` line endings survive a fix pass unchanged.
"""

from __future__ import annotations

import json
from pathlib import Path


def find_json_files(root: Path) -> list[Path]:
    """Return every ``*.json`` file below ``root`` in a stable, sorted order."""
    if not root.is_dir():
        return []
    return sorted(
        (path for path in root.rglob("*.json") if path.is_file()),
        key=lambda path: path.relative_to(root).as_posix().lower(),
    )


def read_file_content(path: Path) -> str:
    with path.open("r", encoding="utf-8", newline="") as handle:
        return handle.read()


def write_file_content(path: Path, content: str) -> None:
    with path.open("w", encoding="utf-8", newline="") as handle:
        handle.write(content)


def is_valid_json(content: str) -> bool:
    """Return True when ``content`` parses as JSON."""
    try:
        json.loads(content)
    except (ValueError, RecursionError):
        return False
    return True
