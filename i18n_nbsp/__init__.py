"""i18n-nbsp: non-breaking space fixer for localisation JSON files."""

from __future__ import annotations

__version__ = "0.1.0"

__all__ = [
    "models",
    "nbsp_check",
]
