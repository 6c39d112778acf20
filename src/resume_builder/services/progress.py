"""Resume completeness scoring.

Six independent checks, one per builder step. The percentage is the
rounded share of satisfied checks.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass

from resume_builder.constants.heuristics_constants import (
    PROGRESS_MIN_SKILLS,
    PROGRESS_SUMMARY_MIN_LENGTH,
)
from resume_builder.models.resume_content import ResumeContent

__all__ = ["PROGRESS_STEPS", "ProgressReport", "ProgressStep", "compute_progress"]


@dataclass(frozen=True, slots=True)
class ProgressStep:
    id: str
    label: str
    check: Callable[[ResumeContent], bool]


@dataclass(frozen=True, slots=True)
class ProgressReport:
    """Result of :func:`compute_progress`.

    Attributes:
        completed: Number of satisfied checks.
        total: Number of checks.
        percent: ``round(completed / total * 100)``.
        steps: Step id -> satisfied, in step order.
    """

    completed: int
    total: int
    percent: int
    steps: dict[str, bool]


PROGRESS_STEPS: tuple[ProgressStep, ...] = (
    ProgressStep(
        "personal",
        "Personal",
        lambda c: bool(c.personal_info.full_name) and bool(c.personal_info.email),
    ),
    ProgressStep(
        "summary",
        "Summary",
        lambda c: bool(c.summary) and len(c.summary) > PROGRESS_SUMMARY_MIN_LENGTH,
    ),
    ProgressStep("experience", "Experience", lambda c: len(c.experience) > 0),
    ProgressStep("education", "Education", lambda c: len(c.education) > 0),
    ProgressStep("projects", "Projects", lambda c: len(c.projects) > 0),
    ProgressStep("skills", "Skills", lambda c: len(c.skills) >= PROGRESS_MIN_SKILLS),
)


def compute_progress(content: ResumeContent) -> ProgressReport:
    """Evaluate every completeness check against *content*."""
    steps = {step.id: step.check(content) for step in PROGRESS_STEPS}
    completed = sum(steps.values())
    total = len(PROGRESS_STEPS)
    return ProgressReport(
        completed=completed,
        total=total,
        percent=round(completed / total * 100),
        steps=steps,
    )
