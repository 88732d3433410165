"""Find prepositions followed by a breaking space in locale file content."""

from __future__ import annotations

import re
from pathlib import Path
from typing import Iterable

from i18n_nbsp.models import FileOutcome, LineFinding

from .patterns import CompiledPattern

_LINE_BREAK = re.compile(r"\r\n|\r|\n")


def split_lines(content: str) -> list[str]:
    """Split ``content`` on any line-ending style, keeping line numbering stable."""
    return _LINE_BREAK.split(content)


def scan_content(
    content: str, patterns: Iterable[CompiledPattern]
) -> list[LineFinding]:
    """Return one finding per match, ordered by line, rule and position.

    A line with several offending prepositions yields several findings. Empty
    lines are skipped.
    """
    rules = list(patterns)
    findings: list[LineFinding] = []
    if not rules:
        return findings

    for index, line in enumerate(split_lines(content)):
        if not line:
            continue
        for rule in rules:
            for match in rule.find_all(line):
                findings.append(
                    LineFinding(
                        line_number=index + 1,
                        content=line,
                        preposition=match.preposition,
                    )
                )
    return findings


def check_file_content(
    file_path: Path,
    relative_path: str,
    content: str,
    patterns: Iterable[CompiledPattern],
) -> FileOutcome:
    """Scan ``content`` and wrap the findings in a :class:`FileOutcome`."""
    return FileOutcome(
        path=file_path,
        relative_path=relative_path,
        findings=tuple(scan_content(content, patterns)),
    )
