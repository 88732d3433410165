"""Load the user configuration file and merge it with the built-in defaults.

The user file is optional. Any problem reading or validating it is reported
as a warning and the built-in defaults are used instead; only an empty merged
pattern map is fatal.
"""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass
from pathlib import Path
from types import MappingProxyType
from typing import Any, Mapping, Optional, Sequence

from pydantic import ValidationError

from i18n_nbsp.models import Disabled, Enabled, PatternEntry, UserConfig

from .exceptions import ConfigurationError
from .nbsp_config import DEFAULT_CONFIG_FILENAME, DEFAULT_LOCALES_PATH, DEFAULT_PATTERNS

LOGGER = logging.getLogger(__name__)

KNOWN_CONFIG_KEYS = frozenset({"localesPath", "patterns"})


@dataclass(frozen=True)
class EffectiveConfig:
    """Configuration used for a single run."""

    locales_path: Path
    patterns: Mapping[str, tuple[str, ...]]

    @property
    def languages(self) -> list[str]:
        return sorted(self.patterns)


def merge_patterns(
    defaults: Mapping[str, Sequence[str]],
    overrides: Mapping[str, PatternEntry] | None = None,
) -> dict[str, tuple[str, ...]]:
    """Overlay ``overrides`` on ``defaults`` one language at a time.

    - ``Enabled`` replaces the default list for that language (no concatenation)
    - ``Disabled`` removes the language, including built-in ones
    - languages not mentioned in ``overrides`` keep their default list

    Languages that end up with no prepositions are left out of the result.
    """
    merged: dict[str, tuple[str, ...]] = {
        language.lower(): tuple(words) for language, words in defaults.items()
    }

    for language, entry in (overrides or {}).items():
        key = language.lower()
        if isinstance(entry, Disabled):
            merged.pop(key, None)
        elif isinstance(entry, Enabled):
            merged[key] = tuple(entry.words)
        else:
            raise TypeError(f"Unsupported pattern entry for {language!r}: {entry!r}")

    return {language: words for language, words in merged.items() if words}


def _read_config_file(path: Path) -> Optional[UserConfig]:
    try:
        raw: Any = json.loads(path.read_text(encoding="utf-8"))
    except (OSError, UnicodeDecodeError) as exc:
        LOGGER.warning("Could not read config file %s: %s", path, exc)
        return None
    except json.JSONDecodeError as exc:
        LOGGER.warning("Could not parse config file %s: %s", path, exc)
        return None

    if not isinstance(raw, dict):
        LOGGER.warning(
            "Config file %s must contain a JSON object; using built-in defaults",
            path,
        )
        return None

    unknown = sorted(set(raw) - KNOWN_CONFIG_KEYS)
    if "prepositions" in unknown:
        LOGGER.warning(
            "Config file %s uses the unsupported 'prepositions' key; "
            "move the word lists under 'patterns'",
            path,
        )
        unknown.remove("prepositions")
    if unknown:
        LOGGER.warning(
            "Ignoring unknown config key(s) in %s: %s", path, ", ".join(unknown)
        )

    try:
        return UserConfig.model_validate(raw)
    except ValidationError as exc:
        LOGGER.warning("Invalid config file %s: %s", path, exc)
        return None


def load_user_config(
    config_path: Path | str | None = None,
    *,
    cwd: Path | None = None,
) -> Optional[UserConfig]:
    """Load the user configuration, or ``None`` when defaults should be used.

    Args:
            config_path: Explicit config file (``--config``). A missing file is a
                    warning, not an error.
            cwd: Directory searched for ``i18n-nbsp.config.json`` when no explicit
                    path is given (default: the current working directory).
    """
    if config_path is not None:
        path = Path(config_path)
        if not path.is_file():
            LOGGER.warning("Config file not found: %s", path)
            return None
        return _read_config_file(path)

    candidate = (cwd or Path.cwd()) / DEFAULT_CONFIG_FILENAME
    if candidate.is_file():
        LOGGER.debug("Using config file found in working directory: %s", candidate)
        return _read_config_file(candidate)
    return None


def build_effective_config(
    user_config: Optional[UserConfig] = None,
    *,
    locales_path: Path | str | None = None,
    defaults: Mapping[str, Sequence[str]] = DEFAULT_PATTERNS,
) -> EffectiveConfig:
    """Combine defaults, the user config and an explicit locales path.

    The locales directory is taken from ``locales_path`` first, then from the
    config file's ``localesPath`` and finally from ``DEFAULT_LOCALES_PATH``.

    Raises:
            ConfigurationError: if no language has any prepositions after merging.
    """
    overrides = user_config.pattern_entries() if user_config is not None else None
    merged = merge_patterns(defaults, overrides)
    if not merged:
        raise ConfigurationError(
            "No preposition patterns configured: every language is disabled or empty. "
            "Add word lists under the 'patterns' key of the config file."
        )

    resolved_path = (
        locales_path
        or (user_config.locales_path if user_config is not None else None)
        or DEFAULT_LOCALES_PATH
    )
    return EffectiveConfig(
        locales_path=Path(resolved_path),
        patterns=MappingProxyType(merged),
    )
