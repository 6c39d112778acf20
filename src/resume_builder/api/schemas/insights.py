"""Pydantic schemas for progress and content warnings."""

from __future__ import annotations

from pydantic import BaseModel, Field

from resume_builder.constants.heuristics_constants import WarningKind, WarningSeverity
from resume_builder.services.content_warnings import ContentWarning
from resume_builder.services.progress import ProgressReport


class ProgressResponse(BaseModel):
    completed: int
    total: int
    percent: int = Field(ge=0, le=100)
    steps: dict[str, bool]

    @classmethod
    def from_report(cls, report: ProgressReport) -> ProgressResponse:
        return cls(
            completed=report.completed,
            total=report.total,
            percent=report.percent,
            steps=dict(report.steps),
        )


class WarningResponse(BaseModel):
    id: str
    kind: WarningKind
    severity: WarningSeverity
    message: str
    section: str
    fixable: bool

    @classmethod
    def from_warning(cls, warning: ContentWarning) -> WarningResponse:
        return cls(
            id=warning.id,
            kind=warning.kind,
            severity=warning.severity,
            message=warning.message,
            section=warning.section,
            fixable=warning.fixable,
        )


class InsightsResponse(BaseModel):
    """Completion progress plus the full, ordered warning list."""

    progress: ProgressResponse
    warnings: list[WarningResponse]
