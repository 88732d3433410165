"""Rewrite locale file content so prepositions keep hold of the next word."""

from __future__ import annotations

from typing import Iterable

from .patterns import CompiledPattern


def fix_content(content: str, patterns: Iterable[CompiledPattern]) -> str:
    """Apply every rule to the whole of ``content``, one substitution pass each.

    Rules are applied cumulatively in order. Line endings and all other
    characters are left untouched. Running the fix twice gives the same result
    as running it once, since a preposition already followed by a non-breaking
    space no longer matches.
    """
    fixed = content
    for rule in patterns:
        fixed = rule.fix(fixed)
    return fixed
