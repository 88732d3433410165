"""Utilities for presenting checker results.

This module holds the console summaries printed after a check or fix pass
and the optional Markdown and CSV report builders. Keeping the formatting
here lets the runner stay free of presentation concerns.
"""

from __future__ import annotations

import csv
from pathlib import Path
from typing import TYPE_CHECKING

if TYPE_CHECKING:  # pragma: no cover - typing only
    from i18n_nbsp.models import RunSummary

CSV_HEADER = ["File", "Line", "Preposition", "Content", "Fixed"]


def format_check_results(summary: "RunSummary") -> str:
    """Build the check-mode listing: findings per file, then totals."""
    lines = ["Checking prepositions in locale files...", ""]

    for outcome in summary.outcomes:
        lines.append(f"Checking file: {outcome.relative_path}")
        if outcome.findings:
            for finding in outcome.findings:
                lines.append(f"{finding.line_number}: {finding.content}")
            lines.append(
                f"Found {outcome.issue_count} line(s) with preposition issues "
                f"in {outcome.relative_path}"
            )
        else:
            lines.append(f"No preposition issues found in {outcome.relative_path}")
        lines.append("")

    if summary.total_findings > 0:
        lines.append(
            f"Total {summary.total_findings} line(s) with preposition issues "
            f"across {summary.total_files} files."
        )
        lines.append(
            "Tip: Replace regular spaces after prepositions with non-breaking spaces (\\u00A0)"
        )
        lines.append("Run with --fix flag to automatically fix these issues.")
    else:
        lines.append(f"No preposition issues found in {summary.total_files} files!")

    if summary.skipped:
        lines.append(f"Skipped {len(summary.skipped)} file(s); see warnings above.")
    return "\n".join(lines)


def format_fix_results(summary: "RunSummary") -> str:
    """Build the fix-mode listing: fixed counts per file, then totals."""
    lines = ["Fixing preposition issues in locale files...", ""]

    fixed_files = summary.fixed_files
    total_fixed = sum(outcome.issue_count for outcome in fixed_files)
    for outcome in fixed_files:
        lines.append(f"Fixed {outcome.issue_count} issue(s) in: {outcome.relative_path}")

    if total_fixed > 0:
        lines.append("")
        lines.append(
            f"Successfully fixed {total_fixed} preposition issue(s) "
            f"in {len(fixed_files)} file(s)."
        )
    else:
        lines.append("No preposition issues found to fix.")

    if summary.skipped:
        lines.append(f"Skipped {len(summary.skipped)} file(s); see warnings above.")
    return "\n".join(lines)


def build_report_markdown(summary: "RunSummary") -> str:
    """Convert a run summary into a Markdown report."""
    files_with_issues = [o for o in summary.outcomes if o.findings]
    lines: list[str] = [
        "# Preposition Spacing Report",
        "",
        f"- Files scanned: {summary.total_files}",
        f"- Files with issues: {len(files_with_issues)}",
        f"- Total issues: {summary.total_findings}",
        f"- Files skipped: {len(summary.skipped)}",
        "",
    ]

    for outcome in files_with_issues:
        status = " (fixed)" if outcome.was_fixed else ""
        lines.append(f"## {outcome.relative_path}{status}")
        lines.append("")
        lines.append("| Line | Preposition | Content |")
        lines.append("| --- | --- | --- |")
        for finding in outcome.findings:
            content = finding.content.replace("|", "\\|")
            lines.append(
                f"| {finding.line_number} | {finding.preposition} | {content} |"
            )
        lines.append("")

    if summary.skipped:
        lines.append("## Skipped files")
        lines.append("")
        for skipped in summary.skipped:
            lines.append(f"- {skipped.relative_path}: {skipped.reason}")
        lines.append("")

    return "\n".join(lines).rstrip() + "\n"


def build_report_csv(summary: "RunSummary") -> list[list[str]]:
    """Return CSV rows (header first), one row per finding."""
    rows: list[list[str]] = [list(CSV_HEADER)]
    for outcome in summary.outcomes:
        for finding in outcome.findings:
            rows.append([
                outcome.relative_path,
                str(finding.line_number),
                finding.preposition,
                finding.content,
                "yes" if outcome.was_fixed else "no",
            ])
    return rows


def write_report_files(summary: "RunSummary", report_path: Path) -> Path:
    """Write the Markdown report to ``report_path`` and a CSV next to it."""
    report_path.parent.mkdir(parents=True, exist_ok=True)
    report_path.write_text(build_report_markdown(summary), encoding="utf-8")

    csv_path = report_path.with_suffix(".csv")
    with csv_path.open("w", encoding="utf-8", newline="") as csv_file:
        writer = csv.writer(csv_file)
        writer.writerows(build_report_csv(summary))

    return report_path
