"""Fatal errors that abort a checker run.

Problems local to a single locale file are never raised; they are logged and
the file is skipped. Only the conditions below stop the run.
"""

from __future__ import annotations


class NbspCheckError(Exception):
    """Base class for errors that abort a run."""


class ConfigurationError(NbspCheckError):
    """No usable preposition patterns after merging the configuration."""


class LocalesPathError(NbspCheckError):
    """The locales root does not exist or is not a directory."""


class NoLocaleFilesError(NbspCheckError):
    """The locales root contains no JSON files."""
