"""Result models produced by the scanner and the run orchestrator.

``LineFinding`` is a validated Pydantic model because findings are also
serialised into reports. The per-file and per-run containers are plain
dataclasses, mirroring how reports are compiled elsewhere in the project.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field, field_validator


class LineFinding(BaseModel):
    """A single preposition followed by a breaking space.

    - line_number: 1-based line number in the file
    - content: the offending line, trimmed of surrounding whitespace
    - preposition: the matched preposition exactly as it appears in the text
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    line_number: int = Field(ge=1)
    content: str
    preposition: str

    @field_validator("content", mode="before")
    def _strip_content(cls, value: object) -> str:
        return str(value or "").strip()

    @field_validator("preposition", mode="before")
    def _require_preposition(cls, value: object) -> str:
        result = str(value or "")
        if not result.strip():
            raise ValueError("preposition must not be empty")
        return result


@dataclass(frozen=True)
class FileOutcome:
    """Findings for one locale file after its check (and optional fix) pass."""

    path: Path
    relative_path: str
    findings: tuple[LineFinding, ...] = ()
    was_fixed: bool = False

    @property
    def issue_count(self) -> int:
        return len(self.findings)


@dataclass(frozen=True)
class SkippedFile:
    """A locale file that was left untouched, with the reason it was skipped."""

    relative_path: str
    reason: str


@dataclass
class RunSummary:
    """Aggregate of every file processed in a single run."""

    total_files: int = 0
    total_findings: int = 0
    outcomes: list[FileOutcome] = field(default_factory=list)
    skipped: list[SkippedFile] = field(default_factory=list)

    def add(self, outcome: FileOutcome) -> None:
        self.outcomes.append(outcome)
        self.total_findings += outcome.issue_count

    @property
    def fixed_files(self) -> list[FileOutcome]:
        return [outcome for outcome in self.outcomes if outcome.was_fixed]
