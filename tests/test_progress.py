"""Tests for resume completion progress."""

from __future__ import annotations

import pytest

from resume_builder.models.resume_content import (
    Education,
    Experience,
    PersonalInfo,
    Project,
    ResumeContent,
)
from resume_builder.services.progress import PROGRESS_STEPS, compute_progress


def _complete_content() -> ResumeContent:
    return ResumeContent(
        personal_info=PersonalInfo(full_name="Jane Doe", email="jane@example.com"),
        summary="Backend engineer focused on reliable APIs.",
        education=[Education(id="e1", institution="State University")],
        experience=[Experience(id="x1", company="Acme", position="Engineer")],
        projects=[Project(id="p1", name="Tracker")],
        skills=["Python", "SQL", "Docker"],
    )


def test_empty_content_is_zero_percent() -> None:
    report = compute_progress(ResumeContent())

    assert report.percent == 0
    assert report.completed == 0
    assert report.total == len(PROGRESS_STEPS)
    assert not any(report.steps.values())


def test_complete_content_is_one_hundred_percent() -> None:
    report = compute_progress(_complete_content())

    assert report.percent == 100
    assert report.completed == report.total
    assert all(report.steps.values())


def test_steps_are_reported_in_order() -> None:
    report = compute_progress(ResumeContent())

    assert list(report.steps) == [
        "personal",
        "summary",
        "experience",
        "education",
        "projects",
        "skills",
    ]


def test_personal_requires_name_and_email() -> None:
    content = _complete_content()
    content.personal_info.email = ""

    report = compute_progress(content)

    assert report.steps["personal"] is False
    assert report.completed == 5
    assert report.percent == 83


@pytest.mark.parametrize(
    ("summary", "expected"),
    [
        ("", False),
        ("x" * 20, False),
        ("x" * 21, True),
    ],
)
def test_summary_must_exceed_twenty_characters(summary: str, expected: bool) -> None:
    content = _complete_content()
    content.summary = summary

    assert compute_progress(content).steps["summary"] is expected


@pytest.mark.parametrize(
    ("skills", "expected"),
    [
        ([], False),
        (["Python", "SQL"], False),
        (["Python", "SQL", "Go"], True),
    ],
)
def test_skills_need_at_least_three(skills: list[str], expected: bool) -> None:
    content = _complete_content()
    content.skills = skills

    assert compute_progress(content).steps["skills"] is expected


def test_percent_is_rounded_to_integer() -> None:
    content = ResumeContent(
        personal_info=PersonalInfo(full_name="Jane", email="jane@example.com"),
    )

    report = compute_progress(content)

    assert report.completed == 1
    assert report.percent == 17
