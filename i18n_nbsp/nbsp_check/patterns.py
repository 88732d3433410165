"""Compile preposition lists into reusable matching rules.

A rule matches a preposition at a word boundary that is followed by one
ordinary space, provided the character after that space is not already a
non-breaking space. Compiled rules are immutable: every call to
:meth:`CompiledPattern.find_all` or :meth:`CompiledPattern.fix` starts from
the beginning of the text it is given.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Iterable, Mapping, NamedTuple, Optional, Sequence

from .nbsp_config import NON_BREAKING_SPACE


class PatternMatch(NamedTuple):
    """Span of ``preposition + space`` and the captured preposition."""

    start: int
    end: int
    preposition: str


@dataclass(frozen=True)
class CompiledPattern:
    """Matching rule for the prepositions of a single language."""

    language: Optional[str]
    words: tuple[str, ...]
    regex: re.Pattern[str]

    def find_all(self, text: str) -> list[PatternMatch]:
        """Return every non-overlapping match in ``text``, left to right."""
        return [
            PatternMatch(match.start(), match.end(), match.group(1))
            for match in self.regex.finditer(text)
            if match.group(1)
        ]

    def fix(self, text: str) -> str:
        """Replace the space after each matched preposition with a non-breaking space."""
        return self.regex.sub(
            lambda match: f"{match.group(1)}{NON_BREAKING_SPACE}", text
        )


def compile_pattern(
    words: Sequence[str], language: Optional[str] = None
) -> CompiledPattern:
    """Build a case-insensitive rule matching any of ``words``.

    Raises:
            ValueError: if ``words`` is empty. Callers are expected to drop
                    languages without prepositions before compiling.
    """
    cleaned = tuple(word for word in words if word)
    if not cleaned:
        raise ValueError(
            f"Cannot compile an empty preposition list (language: {language or 'unknown'})"
        )

    alternation = "|".join(re.escape(word) for word in cleaned)
    regex = re.compile(
        rf"\b({alternation}) (?!{NON_BREAKING_SPACE})",
        re.IGNORECASE,
    )
    return CompiledPattern(language=language, words=cleaned, regex=regex)


def compile_patterns(
    patterns: Mapping[str, Iterable[str]],
) -> dict[str, CompiledPattern]:
    """Compile one rule per language, skipping languages without prepositions."""
    compiled: dict[str, CompiledPattern] = {}
    for language, words in patterns.items():
        word_list = [word for word in words or () if word]
        if not word_list:
            continue
        compiled[language] = compile_pattern(word_list, language)
    return compiled
