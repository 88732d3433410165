"""Public model exports for the project.

Keep the :mod:`i18n_nbsp` namespace clean: tests and other modules should
import ``from i18n_nbsp.models import LineFinding, UserConfig``.
"""

from __future__ import annotations

from .finding import FileOutcome, LineFinding, RunSummary, SkippedFile
from .patterns import Disabled, Enabled, PatternEntry, UserConfig

__all__ = [
    "Disabled",
    "Enabled",
    "FileOutcome",
    "LineFinding",
    "PatternEntry",
    "RunSummary",
    "SkippedFile",
    "UserConfig",
]
