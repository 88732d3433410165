"""Command-line interface for the preposition checker.

Check mode (the default) lists offending lines and exits with status 1 when
any are found. Fix mode rewrites the files and exits with status 0 once the
pass completes.
"""

from __future__ import annotations

import argparse
import logging
import os
from pathlib import Path
from typing import Iterable, Optional

from dotenv import find_dotenv, load_dotenv

from .config_loader import build_effective_config, load_user_config
from .exceptions import NbspCheckError
from .nbsp_config import DEFAULT_CONFIG_FILENAME, DEFAULT_LOCALES_PATH, ENV_CONFIG_PATH, ENV_LOCALES_PATH
from .report_utils import format_check_results, format_fix_results, write_report_files
from .runner import process_files

LOGGER = logging.getLogger(__name__)


def parse_args(argv: Optional[Iterable[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="i18n-nbsp",
        description="i18n-nbsp - Non-breaking space fixer for i18n JSON files.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=f"""
Examples:
  i18n-nbsp ./locales                           # Check for issues
  i18n-nbsp --fix ./locales                     # Fix issues
  i18n-nbsp --config ./custom.json ./locales    # Use custom config

Environment Variables:
  {ENV_LOCALES_PATH}    Default locales directory
  {ENV_CONFIG_PATH}     Default config file
        """,
    )
    parser.add_argument(
        "path",
        nargs="?",
        type=Path,
        default=None,
        help="Locales directory (used when --locales is not given)",
    )
    parser.add_argument(
        "--check",
        action="store_true",
        help="Check for preposition issues (default mode)",
    )
    parser.add_argument(
        "--fix",
        action="store_true",
        help="Fix preposition issues by adding non-breaking spaces",
    )
    parser.add_argument(
        "--locales",
        type=Path,
        default=None,
        help=f"Path to locales directory (default: config 'localesPath' or {DEFAULT_LOCALES_PATH})",
    )
    parser.add_argument(
        "--config",
        type=Path,
        default=None,
        help=f"Path to config file (default: ./{DEFAULT_CONFIG_FILENAME} if present)",
    )
    parser.add_argument(
        "--all-languages",
        action="store_true",
        help="Apply every configured language's prepositions to every file",
    )
    parser.add_argument(
        "--report",
        type=Path,
        default=None,
        help="Also write a Markdown report to this path (and a CSV next to it)",
    )
    parser.add_argument(
        "--dotenv",
        type=Path,
        help="Path to .env file with default settings",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Enable debug logging",
    )
    # Unknown options and extra positionals are ignored rather than fatal
    args, ignored = parser.parse_known_args(list(argv) if argv is not None else None)
    args.ignored = ignored
    return args


def _load_environment(dotenv_path: Path | None) -> None:
    if dotenv_path is not None:
        # Existing environment variables take precedence over the file
        load_dotenv(dotenv_path=dotenv_path)
    else:
        load_dotenv(find_dotenv(usecwd=True))


def _resolve_path_option(explicit: Path | None, env_name: str) -> Path | None:
    if explicit is not None:
        return explicit
    value = os.environ.get(env_name, "").strip()
    return Path(value) if value else None


def main(argv: Optional[Iterable[str]] = None) -> int:
    try:
        args = parse_args(argv)
    except SystemExit as exc:
        # --help exits 0; any other argparse failure maps onto the error status
        if exc.code in (0, None):
            raise
        return 1
    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.INFO)
    if args.ignored:
        LOGGER.warning("Ignoring unrecognised argument(s): %s", " ".join(args.ignored))
    _load_environment(args.dotenv)

    locales_path = _resolve_path_option(args.locales or args.path, ENV_LOCALES_PATH)
    config_path = _resolve_path_option(args.config, ENV_CONFIG_PATH)

    try:
        user_config = load_user_config(config_path)
        config = build_effective_config(user_config, locales_path=locales_path)
        summary = process_files(config, fix=args.fix, all_languages=args.all_languages)
    except NbspCheckError as exc:
        LOGGER.error("Error: %s", exc)
        return 1
    except Exception:
        LOGGER.exception("Unexpected error")
        return 1

    if args.fix:
        print(format_fix_results(summary))
    else:
        print(format_check_results(summary))

    if args.report is not None:
        try:
            report_path = write_report_files(summary, args.report)
        except OSError as exc:
            LOGGER.error("Could not write report to %s: %s", args.report, exc)
            return 1
        print(f"Report written to {report_path.resolve()}")
        print(f"CSV report written to {report_path.with_suffix('.csv').resolve()}")

    if not args.fix and summary.total_findings > 0:
        return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
