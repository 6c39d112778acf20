"""Heuristic content warnings.

Rules are a fixed keyword/regex rule set evaluated in a fixed order. The
engine always returns the full list; truncating it for display is the
caller's business.
"""

from __future__ import annotations

from dataclasses import dataclass

from resume_builder.constants.heuristics_constants import (
    BULLET_MAX_LENGTH,
    BULLET_METRICS_MIN_LENGTH,
    MAX_TOTAL_BULLETS,
    METRICS_PATTERN,
    MIN_RECOMMENDED_SKILLS,
    SUMMARY_MAX_LENGTH,
    SUMMARY_MIN_LENGTH,
    WEAK_WORDS,
    WarningKind,
    WarningSeverity,
)
from resume_builder.models.resume_content import ResumeContent

__all__ = [
    "ContentWarning",
    "detect_weak_words",
    "generate_warnings",
    "has_metrics",
]


@dataclass(frozen=True, slots=True)
class ContentWarning:
    """A single content warning.

    Attributes:
        id: Stable id derived from the warning's location.
        kind: Rule category; paired with ``section`` to pick an AI fix.
        fixable: Whether an AI rewrite of ``section`` can resolve it.
    """

    id: str
    kind: WarningKind
    severity: WarningSeverity
    message: str
    section: str
    fixable: bool


def detect_weak_words(text: str) -> list[str]:
    """Return the weak phrases contained in *text* (case-insensitive)."""
    lower = text.lower()
    return [word for word in WEAK_WORDS if word in lower]


def has_metrics(text: str) -> bool:
    """Return True if *text* contains a quantification signal."""
    return METRICS_PATTERN.search(text) is not None


def _summary_warnings(summary: str) -> list[ContentWarning]:
    if not summary or len(summary) < SUMMARY_MIN_LENGTH:
        return [
            ContentWarning(
                id="summary-missing",
                kind=WarningKind.MISSING_SECTION,
                severity=WarningSeverity.WARNING,
                message="Professional summary is missing or too short",
                section="summary",
                fixable=True,
            )
        ]
    if len(summary) > SUMMARY_MAX_LENGTH:
        return [
            ContentWarning(
                id="summary-long",
                kind=WarningKind.LONG_TEXT,
                severity=WarningSeverity.INFO,
                message="Summary is quite long. Consider keeping it under 3-4 sentences.",
                section="summary",
                fixable=False,
            )
        ]
    return []


def _bullet_warnings(content: ResumeContent) -> list[ContentWarning]:
    result: list[ContentWarning] = []
    for exp_idx, exp in enumerate(content.experience):
        for bullet_idx, bullet in enumerate(exp.bullets):
            if not bullet.strip():
                continue
            prefix = f"exp-{exp_idx}-bullet-{bullet_idx}"

            weak = detect_weak_words(bullet)
            if weak:
                result.append(
                    ContentWarning(
                        id=f"{prefix}-weak",
                        kind=WarningKind.WEAK_WORDS,
                        severity=WarningSeverity.WARNING,
                        message=f'"{exp.position}" uses weak words: {", ".join(weak)}',
                        section="experience",
                        fixable=True,
                    )
                )

            if len(bullet) > BULLET_METRICS_MIN_LENGTH and not has_metrics(bullet):
                result.append(
                    ContentWarning(
                        id=f"{prefix}-metrics",
                        kind=WarningKind.MISSING_METRICS,
                        severity=WarningSeverity.INFO,
                        message=f'"{exp.position}" bullet lacks quantified achievements',
                        section="experience",
                        fixable=True,
                    )
                )

            if len(bullet) > BULLET_MAX_LENGTH:
                result.append(
                    ContentWarning(
                        id=f"{prefix}-long",
                        kind=WarningKind.LONG_TEXT,
                        severity=WarningSeverity.INFO,
                        message=f'"{exp.position}" has a very long bullet point',
                        section="experience",
                        fixable=False,
                    )
                )
    return result


def generate_warnings(content: ResumeContent) -> list[ContentWarning]:
    """Return every content warning for *content*, in rule order."""
    result = _summary_warnings(content.summary)
    result.extend(_bullet_warnings(content))

    if len(content.skills) < MIN_RECOMMENDED_SKILLS:
        result.append(
            ContentWarning(
                id="skills-few",
                kind=WarningKind.MISSING_SECTION,
                severity=WarningSeverity.WARNING,
                message="Consider adding more skills (at least 5-8 recommended)",
                section="skills",
                fixable=True,
            )
        )

    if not content.education:
        result.append(
            ContentWarning(
                id="education-missing",
                kind=WarningKind.MISSING_SECTION,
                severity=WarningSeverity.INFO,
                message="No education listed. Add if applicable.",
                section="education",
                fixable=False,
            )
        )

    total_bullets = sum(len(exp.non_blank_bullets()) for exp in content.experience)
    if total_bullets > MAX_TOTAL_BULLETS:
        result.append(
            ContentWarning(
                id="too-long",
                kind=WarningKind.LENGTH,
                severity=WarningSeverity.INFO,
                message="Resume may be too long. Focus on most relevant experience.",
                section="experience",
                fixable=False,
            )
        )

    return result
