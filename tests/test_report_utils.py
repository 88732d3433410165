from __future__ import annotations

from pathlib import Path

from i18n_nbsp.models import FileOutcome, LineFinding, RunSummary, SkippedFile
from i18n_nbsp.nbsp_check.report_utils import (
    build_report_csv,
    build_report_markdown,
    format_check_results,
    format_fix_results,
)


def _summary(*, fixed: bool = False) -> RunSummary:
    summary = RunSummary(total_files=3)
    summary.add(
        FileOutcome(
            path=Path("/locales/en/common.json"),
            relative_path="en/common.json",
            findings=(
                LineFinding(line_number=2, content='  "a": "go to bed | now"', preposition="to"),
                LineFinding(line_number=4, content='"b": "in the box"', preposition="in"),
            ),
            was_fixed=fixed,
        )
    )
    summary.add(FileOutcome(path=Path("/locales/uk/common.json"), relative_path="uk/common.json"))
    summary.skipped.append(SkippedFile("broken.json", "invalid JSON"))
    return summary


def test_check_results_list_findings_and_totals() -> None:
    text = format_check_results(_summary())

    assert "Checking file: en/common.json" in text
    assert '2: "a": "go to bed | now"' in text
    assert "Found 2 line(s) with preposition issues in en/common.json" in text
    assert "No preposition issues found in uk/common.json" in text
    assert "Total 2 line(s) with preposition issues across 3 files." in text
    assert "Run with --fix flag" in text
    assert "Skipped 1 file(s)" in text


def test_check_results_without_findings() -> None:
    summary = RunSummary(total_files=1)
    summary.add(FileOutcome(path=Path("/l/en/a.json"), relative_path="en/a.json"))

    text = format_check_results(summary)

    assert text.endswith("No preposition issues found in 1 files!")


def test_fix_results_only_list_fixed_files() -> None:
    text = format_fix_results(_summary(fixed=True))

    assert "Fixed 2 issue(s) in: en/common.json" in text
    assert "uk/common.json" not in text
    assert "Successfully fixed 2 preposition issue(s) in 1 file(s)." in text


def test_fix_results_nothing_to_fix() -> None:
    text = format_fix_results(RunSummary(total_files=2))

    assert "No preposition issues found to fix." in text


def test_markdown_report_escapes_pipes() -> None:
    markdown = build_report_markdown(_summary(fixed=True))

    assert "# Preposition Spacing Report" in markdown
    assert "- Total issues: 2" in markdown
    assert "## en/common.json (fixed)" in markdown
    assert "go to bed \\| now" in markdown
    assert "- broken.json: invalid JSON" in markdown
    assert "uk/common.json" not in markdown


def test_csv_rows() -> None:
    rows = build_report_csv(_summary())

    assert rows[0] == ["File", "Line", "Preposition", "Content", "Fixed"]
    assert rows[1] == ["en/common.json", "2", "to", '"a": "go to bed | now"', "no"]
    assert len(rows) == 3
