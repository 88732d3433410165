"""Map locale files to the language whose prepositions apply to them."""

from __future__ import annotations

import re
from pathlib import PurePath
from typing import Mapping, Optional

from .patterns import CompiledPattern

# en, en-AU, klingon... Case-insensitive, so "en-au" is accepted as well.
_LANGUAGE_TAG = re.compile(r"[a-z]{2,}(?:-[a-z]{2,})?", re.IGNORECASE | re.ASCII)


def extract_language_from_path(relative_path: str | PurePath) -> Optional[str]:
    """Return the locale segment of a path relative to the locales root.

    Only the first path component is inspected, so ``de-CH/products/catalog.json``
    resolves to ``de-CH`` whatever the nesting below it. Files sitting directly
    in the root, or under a directory that does not look like a language tag,
    resolve to ``None``.
    """
    parts = PurePath(relative_path).parts
    if len(parts) < 2:
        return None

    candidate = parts[0]
    if _LANGUAGE_TAG.fullmatch(candidate):
        return candidate
    return None


def base_language(language: str) -> str:
    """Strip any region suffix: ``en-AU`` -> ``en``, ``de-CH`` -> ``de``."""
    return language.split("-", 1)[0].lower()


def patterns_for_language(
    language: Optional[str], compiled: Mapping[str, CompiledPattern]
) -> list[CompiledPattern]:
    """Return the rule for the base of ``language``, or an empty list.

    Region-specific entries are never consulted: ``en-AU`` always uses ``en``.
    """
    if not language:
        return []
    base = base_language(language)
    if not base:
        return []
    pattern = compiled.get(base)
    return [pattern] if pattern is not None else []

