"""Preposition pattern entries and the user configuration model.

In the JSON configuration file a language maps either to a list of
prepositions or to ``null``, which disables that language. Internally each
entry is turned into an explicit variant so the merge logic never has to
reason about ``None``:

- :class:`Enabled` carries the replacement word list
- :class:`Disabled` removes the language from the effective map
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, List, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator


@dataclass(frozen=True)
class Enabled:
    """Language is processed using ``words``."""

    words: tuple[str, ...]


@dataclass(frozen=True)
class Disabled:
    """Language is switched off, even if it is a built-in default."""


PatternEntry = Union[Enabled, Disabled]


class UserConfig(BaseModel):
    """Validated contents of an ``i18n-nbsp.config.json`` file.

    Fields (JSON key in brackets):
    - locales_path (``localesPath``): root directory of the locale files
    - patterns (``patterns``): language code -> list of prepositions or null
    """

    model_config = ConfigDict(extra="ignore", populate_by_name=True)

    locales_path: Optional[str] = Field(default=None, alias="localesPath")
    patterns: Dict[str, Optional[List[str]]] = Field(default_factory=dict)

    @field_validator("locales_path", mode="before")
    def _strip_locales_path(cls, value: object) -> object:
        if isinstance(value, str):
            return value.strip() or None
        return value

    @field_validator("patterns", mode="before")
    def _normalise_patterns(cls, value: object) -> object:
        if value is None:
            return {}
        if not isinstance(value, dict):
            return value

        normalised: dict[object, object] = {}
        for language, words in value.items():
            key = language.strip().lower() if isinstance(language, str) else language
            if key == "":
                raise ValueError("language codes in patterns must not be empty")
            if isinstance(words, list):
                words = [
                    word.strip() if isinstance(word, str) else word for word in words
                ]
                words = [word for word in words if word != ""]
            normalised[key] = words
        return normalised

    def pattern_entries(self) -> dict[str, PatternEntry]:
        """Return the configured patterns as explicit enabled/disabled entries."""
        entries: dict[str, PatternEntry] = {}
        for language, words in self.patterns.items():
            if words is None:
                entries[language] = Disabled()
            else:
                entries[language] = Enabled(tuple(words))
        return entries
