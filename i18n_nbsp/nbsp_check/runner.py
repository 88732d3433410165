"""Check (and optionally fix) every locale file under the locales root.

Files are processed one at a time. A file that cannot be read or written, is
not valid JSON, or has no applicable prepositions is skipped with a warning; only the
fatal conditions in :mod:`i18n_nbsp.nbsp_check.exceptions` abort the run.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Mapping

from i18n_nbsp.models import FileOutcome, RunSummary, SkippedFile

from .config_loader import EffectiveConfig
from .exceptions import ConfigurationError, LocalesPathError, NoLocaleFilesError
from .file_utils import find_json_files, is_valid_json, read_file_content, write_file_content
from .fixer import fix_content
from .language import base_language, extract_language_from_path, patterns_for_language
from .patterns import CompiledPattern, compile_patterns
from .scanner import check_file_content

LOGGER = logging.getLogger(__name__)


def _locales_hint(locales_root: Path) -> str:
    return (
        f"Checked locales path: {locales_root}. "
        "Pass the directory with --locales <path> (or as a positional argument), "
        "or set \"localesPath\" in the config file."
    )


def discover_locale_files(locales_root: Path) -> list[Path]:
    """Return the JSON files to process, raising when there is nothing to do."""
    if not locales_root.exists():
        raise LocalesPathError(
            f"Locales directory not found: {locales_root}. {_locales_hint(locales_root)}"
        )
    if not locales_root.is_dir():
        raise LocalesPathError(
            f"Locales path is not a directory: {locales_root}. {_locales_hint(locales_root)}"
        )

    json_files = find_json_files(locales_root)
    if not json_files:
        raise NoLocaleFilesError(
            f"No JSON files found in {locales_root}. {_locales_hint(locales_root)}"
        )
    return json_files


def _select_patterns(
    relative_path: Path,
    compiled: Mapping[str, CompiledPattern],
    all_languages: bool,
) -> tuple[list[CompiledPattern], str | None]:
    """Return the rules for a file, or an empty list and the reason to skip it."""
    if all_languages:
        return list(compiled.values()), None

    language = extract_language_from_path(relative_path)
    if language is None:
        LOGGER.warning(
            "Skipping %s: could not determine language from path", relative_path
        )
        return [], "could not determine language"

    patterns = patterns_for_language(language, compiled)
    if not patterns:
        LOGGER.warning(
            "Skipping %s: no preposition patterns configured for language '%s' (base: '%s')",
            relative_path,
            language,
            base_language(language),
        )
        return [], f"no preposition patterns configured for language '{language}'"
    return patterns, None


def process_file(
    file_path: Path,
    locales_root: Path,
    compiled: Mapping[str, CompiledPattern],
    *,
    fix: bool = False,
    all_languages: bool = False,
) -> FileOutcome | SkippedFile:
    """Check one locale file and, in fix mode, rewrite it when it has findings."""
    relative = file_path.relative_to(locales_root)
    relative_path = str(relative)

    try:
        content = read_file_content(file_path)
    except (OSError, UnicodeDecodeError) as exc:
        LOGGER.warning("Skipping unreadable file %s: %s", file_path, exc)
        return SkippedFile(relative_path, f"unreadable: {exc}")

    if not is_valid_json(content):
        LOGGER.warning("Skipping invalid JSON file: %s", file_path)
        return SkippedFile(relative_path, "invalid JSON")

    patterns, skip_reason = _select_patterns(relative, compiled, all_languages)
    if skip_reason is not None:
        return SkippedFile(relative_path, skip_reason)

    outcome = check_file_content(file_path, relative_path, content, patterns)
    LOGGER.debug("Checked %s: %d issue(s)", relative_path, outcome.issue_count)

    if fix and outcome.findings:
        fixed_content = fix_content(content, patterns)
        try:
            write_file_content(file_path, fixed_content)
        except OSError as exc:
            LOGGER.warning("Skipping unwritable file %s: %s", file_path, exc)
            return SkippedFile(relative_path, f"unwritable: {exc}")
        LOGGER.debug("Wrote %d fix(es) to %s", outcome.issue_count, file_path)
        outcome = FileOutcome(
            path=outcome.path,
            relative_path=outcome.relative_path,
            findings=outcome.findings,
            was_fixed=True,
        )
    return outcome


def process_files(
    config: EffectiveConfig,
    *,
    fix: bool = False,
    all_languages: bool = False,
) -> RunSummary:
    """Run the check (or fix) pass over every JSON file under the locales root.

    Args:
            config: Merged configuration for this run
            fix: Rewrite files that have findings
            all_languages: Apply every language's rule to every file instead of
                    only the rule for the file's own language

    Raises:
            LocalesPathError: the locales root is missing or not a directory
            NoLocaleFilesError: no JSON files were found
            ConfigurationError: no usable preposition patterns
    """
    compiled = compile_patterns(config.patterns)
    if not compiled:
        raise ConfigurationError("No preposition patterns configured")

    locales_root = config.locales_path.resolve()
    json_files = discover_locale_files(locales_root)
    LOGGER.info(
        "%s %d JSON file(s) in %s (languages: %s)",
        "Fixing" if fix else "Checking",
        len(json_files),
        locales_root,
        ", ".join(sorted(compiled)),
    )

    summary = RunSummary(total_files=len(json_files))
    for file_path in json_files:
        result = process_file(
            file_path,
            locales_root,
            compiled,
            fix=fix,
            all_languages=all_languages,
        )
        if isinstance(result, SkippedFile):
            summary.skipped.append(result)
        else:
            summary.add(result)

    return summary
