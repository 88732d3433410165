"""Preposition checker package exports.

This package exposes the key helpers used by other parts of the project
so callers can import from ``i18n_nbsp.nbsp_check``.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:  # pragma: no cover - typing only
    from .config_loader import (
        EffectiveConfig,
        build_effective_config,
        load_user_config,
        merge_patterns,
    )
    from .exceptions import (
        ConfigurationError,
        LocalesPathError,
        NbspCheckError,
        NoLocaleFilesError,
    )
    from .fixer import fix_content
    from .language import base_language, extract_language_from_path, patterns_for_language
    from .nbsp_config import DEFAULT_LOCALES_PATH, DEFAULT_PATTERNS, NON_BREAKING_SPACE
    from .patterns import CompiledPattern, compile_pattern, compile_patterns
    from .runner import process_file, process_files
    from .scanner import check_file_content, scan_content

__all__ = [
    "CompiledPattern",
    "ConfigurationError",
    "DEFAULT_LOCALES_PATH",
    "DEFAULT_PATTERNS",
    "EffectiveConfig",
    "LocalesPathError",
    "NON_BREAKING_SPACE",
    "NbspCheckError",
    "NoLocaleFilesError",
    "base_language",
    "build_effective_config",
    "check_file_content",
    "compile_pattern",
    "compile_patterns",
    "extract_language_from_path",
    "fix_content",
    "load_user_config",
    "merge_patterns",
    "patterns_for_language",
    "process_file",
    "process_files",
    "scan_content",
]

_LAZY_EXPORTS = {
    # attribute -> (module, attribute)
    "CompiledPattern": (".patterns", "CompiledPattern"),
    "compile_pattern": (".patterns", "compile_pattern"),
    "compile_patterns": (".patterns", "compile_patterns"),
    "ConfigurationError": (".exceptions", "ConfigurationError"),
    "LocalesPathError": (".exceptions", "LocalesPathError"),
    "NbspCheckError": (".exceptions", "NbspCheckError"),
    "NoLocaleFilesError": (".exceptions", "NoLocaleFilesError"),
    "DEFAULT_LOCALES_PATH": (".nbsp_config", "DEFAULT_LOCALES_PATH"),
    "DEFAULT_PATTERNS": (".nbsp_config", "DEFAULT_PATTERNS"),
    "NON_BREAKING_SPACE": (".nbsp_config", "NON_BREAKING_SPACE"),
    "EffectiveConfig": (".config_loader", "EffectiveConfig"),
    "build_effective_config": (".config_loader", "build_effective_config"),
    "load_user_config": (".config_loader", "load_user_config"),
    "merge_patterns": (".config_loader", "merge_patterns"),
    "base_language": (".language", "base_language"),
    "extract_language_from_path": (".language", "extract_language_from_path"),
    "patterns_for_language": (".language", "patterns_for_language"),
    "check_file_content": (".scanner", "check_file_content"),
    "scan_content": (".scanner", "scan_content"),
    "fix_content": (".fixer", "fix_content"),
    "process_file": (".runner", "process_file"),
    "process_files": (".runner", "process_files"),
}


def __getattr__(name: str):
    """Lazily import and return exported attributes.

    Submodules are only imported when first used, so importing the package
    for one helper does not pull in the CLI and its dependencies.
    """

    if name in _LAZY_EXPORTS:
        module_name, attr = _LAZY_EXPORTS[name]
        from importlib import import_module

        mod = import_module(f"i18n_nbsp.nbsp_check{module_name}")
        value = getattr(mod, attr)
        globals()[name] = value
        return value
    raise AttributeError(name)


def __dir__() -> list[str]:
    return sorted(list(globals().keys()) + list(_LAZY_EXPORTS.keys()))
