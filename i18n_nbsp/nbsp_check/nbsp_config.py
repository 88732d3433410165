"""Built-in configuration for the preposition checker.

This module defines the default locales directory and the preposition lists
shipped for the seed languages. User configuration files replace or disable
individual languages on top of these defaults; the defaults themselves are
never modified at run time.
"""

from __future__ import annotations

from types import MappingProxyType

NON_BREAKING_SPACE = "\u00a0"

# Used when neither the command line nor the config file names a directory
DEFAULT_LOCALES_PATH = "./public/locales"

# Looked up in the working directory when --config is not given
DEFAULT_CONFIG_FILENAME = "i18n-nbsp.config.json"

# Environment variables consulted for CLI defaults (can live in a .env file)
ENV_LOCALES_PATH = "I18N_NBSP_LOCALES"
ENV_CONFIG_PATH = "I18N_NBSP_CONFIG"

# Short words that should stay glued to the following word. Matching is
# case-insensitive, so only lowercase forms are listed.
DEFAULT_PATTERNS = MappingProxyType(
    {
        # --- English: articles, short prepositions and conjunctions ---
        "en": (
            "a", "an", "the",
            "at", "by", "for", "from", "in", "into", "of", "on", "onto", "to",
            "up", "via", "with",
            "and", "but", "or", "nor", "if",
        ),
        # --- Russian: prepositions, conjunctions and particles ---
        "ru": (
            "а", "без", "в", "во", "да", "для", "до", "за", "и", "из", "изо",
            "или", "к", "ко", "на", "над", "не", "ни", "но", "о", "об", "обо",
            "от", "ото", "по", "под", "при", "про", "с", "со", "у",
        ),
        # --- Ukrainian: prepositions, conjunctions and particles ---
        "uk": (
            "а", "або", "без", "в", "від", "для", "до", "за", "з", "зі", "із",
            "і", "й", "к", "на", "над", "не", "ні", "по", "під", "при", "про",
            "та", "у", "через",
        ),
    }
)
