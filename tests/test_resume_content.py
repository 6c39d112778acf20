"""Tests for the resume content model and tagged updates."""

from __future__ import annotations

import pytest

from resume_builder.constants.roles import ResumeRole, get_role_keywords, get_role_label
from resume_builder.models import (
    EducationListUpdate,
    ExperienceListUpdate,
    PersonalInfoUpdate,
    ProjectListUpdate,
    RoleUpdate,
    SkillsUpdate,
    SummaryUpdate,
    apply_update,
)
from resume_builder.models.resume_content import (
    Education,
    Experience,
    PersonalInfo,
    Project,
    ResumeContent,
    add_unique,
    blank_content,
    content_from_dict,
    content_to_dict,
    new_experience,
    new_project,
    unique_skills,
)

STORED = {
    "personalInfo": {
        "fullName": "Jane Doe",
        "email": "jane@example.com",
        "phone": "555-0100",
        "linkedin": "linkedin.com/in/jane",
        "location": "Austin, TX",
    },
    "summary": "Engineer.",
    "education": [
        {
            "id": "e1",
            "institution": "State University",
            "degree": "BSc",
            "field": "Computer Science",
            "startDate": "2015",
            "endDate": "2019",
            "gpa": "3.8",
        }
    ],
    "experience": [
        {
            "id": "x1",
            "company": "Acme",
            "position": "Engineer",
            "location": "Remote",
            "startDate": "Jan 2020",
            "endDate": "",
            "current": True,
            "description": ["Built things", ""],
        }
    ],
    "projects": [
        {
            "id": "p1",
            "name": "Tracker",
            "description": "Habit tracker",
            "technologies": ["React", "Go"],
            "link": "https://example.com",
        }
    ],
    "skills": ["Python", "SQL"],
    "role": "backend",
}


class TestSerialization:
    def test_reads_camel_case_keys(self) -> None:
        content = content_from_dict(STORED)

        assert content.personal_info.full_name == "Jane Doe"
        assert content.education[0].field_of_study == "Computer Science"
        assert content.education[0].gpa == "3.8"
        assert content.experience[0].start_date == "Jan 2020"
        assert content.experience[0].bullets == ["Built things", ""]
        assert content.experience[0].current is True
        assert content.projects[0].link == "https://example.com"
        assert content.role == "backend"

    def test_round_trip_preserves_stored_shape(self) -> None:
        assert content_to_dict(content_from_dict(STORED)) == STORED

    def test_missing_keys_become_blank(self) -> None:
        content = content_from_dict({})

        assert content == ResumeContent()

    def test_none_is_blank(self) -> None:
        assert content_from_dict(None) == ResumeContent()

    def test_unknown_role_falls_back_to_general(self) -> None:
        assert content_from_dict({"role": "astronaut"}).role == ResumeRole.GENERAL

    def test_optional_fields_are_omitted_when_absent(self) -> None:
        stored = content_to_dict(
            ResumeContent(
                education=[Education(id="e1")],
                projects=[Project(id="p1")],
            )
        )

        assert "gpa" not in stored["education"][0]
        assert "link" not in stored["projects"][0]

    def test_entries_without_id_get_one(self) -> None:
        content = content_from_dict({"experience": [{"company": "Acme"}]})

        assert content.experience[0].id

    def test_skills_are_deduplicated(self) -> None:
        content = content_from_dict({"skills": ["Go", "Go", " ", "Rust"]})

        assert content.skills == ["Go", "Rust"]

    def test_non_string_values_are_coerced(self) -> None:
        content = content_from_dict({"education": [{"id": "e1", "gpa": 3.9}]})

        assert content.education[0].gpa == "3.9"


class TestFactories:
    def test_new_experience_starts_with_one_empty_bullet(self) -> None:
        entry = new_experience()

        assert entry.bullets == [""]
        assert entry.id

    def test_new_entries_get_distinct_ids(self) -> None:
        assert new_project().id != new_project().id

    def test_blank_content_prefills_email_and_role(self) -> None:
        content = blank_content(email="jane@example.com", role="frontend")

        assert content.personal_info.email == "jane@example.com"
        assert content.role == "frontend"
        assert content.summary == ""
        assert content.experience == []

    def test_add_unique_ignores_blank_and_duplicates(self) -> None:
        assert add_unique(["Go"], "Go") == ["Go"]
        assert add_unique(["Go"], "  ") == ["Go"]
        assert add_unique(["Go"], " Rust ") == ["Go", "Rust"]

    def test_unique_skills_keeps_first_seen_order(self) -> None:
        assert unique_skills([" Rust", "Go", "Rust", "", "go"]) == ["Rust", "Go", "go"]


class TestExperienceDisplay:
    def test_current_entry_displays_present(self) -> None:
        entry = Experience(id="x1", end_date="Dec 2021", current=True)

        assert entry.display_end_date() == "Present"

    def test_past_entry_displays_end_date(self) -> None:
        assert Experience(id="x1", end_date="Dec 2021").display_end_date() == "Dec 2021"

    def test_non_blank_bullets(self) -> None:
        entry = Experience(id="x1", bullets=["A", " ", "", "B"])

        assert entry.non_blank_bullets() == ["A", "B"]


class TestApplyUpdate:
    def test_each_update_replaces_only_its_field(self) -> None:
        base = content_from_dict(STORED)

        updated = apply_update(base, SkillsUpdate(["Rust"]))

        assert updated.skills == ["Rust"]
        assert updated.summary == base.summary
        assert updated.experience == base.experience

    def test_skills_update_trims_and_drops_repeats(self) -> None:
        updated = apply_update(ResumeContent(), SkillsUpdate(["Go", "Go", " ", " Rust ", "Rust"]))

        assert updated.skills == ["Go", "Rust"]

    def test_list_updates_replace_wholesale(self) -> None:
        base = content_from_dict(STORED)
        replacement = [Experience(id="x2", company="Globex")]

        updated = apply_update(base, ExperienceListUpdate(replacement))

        assert [e.id for e in updated.experience] == ["x2"]

    def test_input_is_not_mutated(self) -> None:
        base = content_from_dict(STORED)
        snapshot = content_to_dict(base)

        apply_update(base, SummaryUpdate("New"))
        apply_update(base, PersonalInfoUpdate(PersonalInfo(full_name="Other")))
        apply_update(base, EducationListUpdate([]))
        apply_update(base, ProjectListUpdate([]))

        assert content_to_dict(base) == snapshot

    def test_updated_content_does_not_share_lists(self) -> None:
        entries = [Education(id="e9")]
        updated = apply_update(ResumeContent(), EducationListUpdate(entries))

        entries.append(Education(id="e10"))

        assert len(updated.education) == 1

    def test_role_update(self) -> None:
        updated = apply_update(ResumeContent(), RoleUpdate(ResumeRole.DATA_ANALYST))

        assert updated.role == "data-analyst"

    def test_unknown_update_type_is_rejected(self) -> None:
        with pytest.raises(TypeError):
            apply_update(ResumeContent(), object())  # type: ignore[arg-type]


class TestRoles:
    def test_labels(self) -> None:
        assert get_role_label(ResumeRole.FULLSTACK) == "Full Stack Developer"
        assert get_role_label("nonsense") == "General"

    def test_keywords(self) -> None:
        assert "SQL" in get_role_keywords(ResumeRole.DATA_ANALYST)
