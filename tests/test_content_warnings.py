"""Tests for heuristic content warnings."""

from __future__ import annotations

import pytest

from resume_builder.constants import WarningKind, WarningSeverity
from resume_builder.models.resume_content import (
    Education,
    Experience,
    ResumeContent,
)
from resume_builder.services.content_warnings import (
    detect_weak_words,
    generate_warnings,
    has_metrics,
)

GOOD_SUMMARY = (
    "Backend engineer with six years building payment APIs and data pipelines "
    "for high-traffic products."
)
SKILLS = ["Python", "SQL", "Docker", "AWS", "Go"]


def _content(*bullets: str, **overrides) -> ResumeContent:
    fields = {
        "summary": GOOD_SUMMARY,
        "education": [Education(id="e1", institution="State University")],
        "experience": [
            Experience(id="x1", company="Acme", position="Engineer", bullets=list(bullets))
        ],
        "skills": list(SKILLS),
    }
    fields.update(overrides)
    return ResumeContent(**fields)


def _ids(content: ResumeContent) -> list[str]:
    return [w.id for w in generate_warnings(content)]


class TestHelpers:
    def test_detect_weak_words_is_case_insensitive(self) -> None:
        assert detect_weak_words("Was Responsible For the build") == ["responsible for"]

    def test_detect_weak_words_returns_every_match_in_list_order(self) -> None:
        assert detect_weak_words("Assisted and helped") == ["helped", "assisted"]

    @pytest.mark.parametrize(
        "text",
        ["Cut costs by 35%", "Saved $200 per month", "Ranked #1", "Served 10k users"],
    )
    def test_has_metrics_true(self, text: str) -> None:
        assert has_metrics(text)

    def test_has_metrics_false(self) -> None:
        assert not has_metrics("Improved the onboarding experience")


class TestSummaryWarnings:
    def test_empty_summary_yields_single_missing_warning(self) -> None:
        warnings = [w for w in generate_warnings(_content(summary="")) if w.section == "summary"]

        assert len(warnings) == 1
        warning = warnings[0]
        assert warning.id == "summary-missing"
        assert warning.severity == WarningSeverity.WARNING
        assert warning.kind == WarningKind.MISSING_SECTION
        assert warning.fixable is True
        assert "summary-long" not in _ids(_content(summary=""))

    def test_short_summary_is_missing(self) -> None:
        assert "summary-missing" in _ids(_content(summary="x" * 49))

    def test_fifty_character_summary_is_fine(self) -> None:
        ids = _ids(_content(summary="x" * 50))
        assert "summary-missing" not in ids
        assert "summary-long" not in ids

    def test_long_summary(self) -> None:
        warnings = generate_warnings(_content(summary="x" * 401))

        long_warning = next(w for w in warnings if w.id == "summary-long")
        assert long_warning.severity == WarningSeverity.INFO
        assert long_warning.fixable is False


class TestBulletWarnings:
    def test_weak_words_bullet(self) -> None:
        warnings = generate_warnings(_content("Helped the team ship features"))

        weak = [w for w in warnings if w.kind == WarningKind.WEAK_WORDS]
        assert len(weak) == 1
        assert weak[0].id == "exp-0-bullet-0-weak"
        assert "helped" in weak[0].message
        assert weak[0].fixable is True

    def test_quantified_bullet_has_no_weak_or_metrics_warning(self) -> None:
        ids = _ids(_content("Increased revenue by 35% through automation"))

        assert "exp-0-bullet-0-weak" not in ids
        assert "exp-0-bullet-0-metrics" not in ids

    def test_short_bullet_is_not_checked_for_metrics(self) -> None:
        assert "exp-0-bullet-0-metrics" not in _ids(_content("Wrote tests"))

    def test_blank_bullets_are_skipped_but_keep_indices(self) -> None:
        ids = _ids(_content("", "Helped customers"))

        assert "exp-0-bullet-0-weak" not in ids
        assert "exp-0-bullet-1-weak" in ids

    def test_long_bullet(self) -> None:
        bullet = "Shipped " + "a" * 150 + " for 10 clients"
        ids = _ids(_content(bullet))

        assert "exp-0-bullet-0-long" in ids

    def test_bullet_rules_are_ordered_weak_metrics_long(self) -> None:
        bullet = "Helped " + "a" * 150
        ids = [i for i in _ids(_content(bullet)) if i.startswith("exp-0-bullet-0")]

        assert ids == [
            "exp-0-bullet-0-weak",
            "exp-0-bullet-0-metrics",
            "exp-0-bullet-0-long",
        ]


class TestSectionWarnings:
    def test_few_skills(self) -> None:
        ids = _ids(_content(skills=["Python"]))
        assert "skills-few" in ids

    def test_five_skills_are_enough(self) -> None:
        assert "skills-few" not in _ids(_content())

    def test_missing_education(self) -> None:
        warnings = generate_warnings(_content(education=[]))

        education = next(w for w in warnings if w.id == "education-missing")
        assert education.severity == WarningSeverity.INFO
        assert education.fixable is False

    def test_too_many_bullets(self) -> None:
        bullets = [f"Delivered feature {i} used by 100 users" for i in range(16)]

        assert "too-long" in _ids(_content(*bullets))

    def test_fifteen_bullets_are_fine(self) -> None:
        bullets = [f"Delivered feature {i} used by 100 users" for i in range(15)]

        assert "too-long" not in _ids(_content(*bullets))


def test_empty_content_warning_order() -> None:
    assert _ids(ResumeContent()) == ["summary-missing", "skills-few", "education-missing"]


def test_generation_is_deterministic() -> None:
    content = _content("Helped the team ship features", "Responsible for on-call", summary="")

    assert generate_warnings(content) == generate_warnings(content)
