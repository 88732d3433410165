from __future__ import annotations

from pathlib import Path

import pytest
from pydantic import ValidationError

from i18n_nbsp.models import Disabled, Enabled, FileOutcome, LineFinding, RunSummary, UserConfig


def test_line_finding_trims_content() -> None:
    finding = LineFinding(line_number=3, content="   go to bed  ", preposition="to")

    assert finding.content == "go to bed"


def test_line_finding_rejects_invalid_values() -> None:
    with pytest.raises(ValidationError):
        LineFinding(line_number=0, content="x", preposition="to")
    with pytest.raises(ValidationError) as exc:
        LineFinding(line_number=1, content="x", preposition=" ")
    assert "preposition must not be empty" in str(exc.value)


def test_line_finding_is_frozen() -> None:
    finding = LineFinding(line_number=1, content="x", preposition="to")

    with pytest.raises(ValidationError):
        finding.line_number = 2  # type: ignore[misc]


def test_run_summary_accumulates_counts() -> None:
    finding = LineFinding(line_number=1, content="go to bed", preposition="to")
    summary = RunSummary(total_files=2)

    summary.add(FileOutcome(Path("a.json"), "a.json", (finding, finding), was_fixed=True))
    summary.add(FileOutcome(Path("b.json"), "b.json"))

    assert summary.total_findings == 2
    assert [o.relative_path for o in summary.fixed_files] == ["a.json"]


def test_user_config_accepts_field_names_and_aliases() -> None:
    by_alias = UserConfig.model_validate({"localesPath": " ./locales "})
    by_name = UserConfig(locales_path="./locales")

    assert by_alias.locales_path == by_name.locales_path == "./locales"
    assert by_alias.patterns == {}


def test_user_config_null_patterns_means_no_overrides() -> None:
    assert UserConfig.model_validate({"patterns": None}).pattern_entries() == {}


def test_user_config_rejects_non_list_patterns() -> None:
    with pytest.raises(ValidationError):
        UserConfig.model_validate({"patterns": {"en": 5}})


def test_pattern_entries_preserve_word_order() -> None:
    config = UserConfig.model_validate({"patterns": {"en": ["to", "in"], "ru": None}})

    assert config.pattern_entries() == {"en": Enabled(("to", "in")), "ru": Disabled()}
