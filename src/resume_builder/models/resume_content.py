"""Typed resume content model.

``ResumeContent`` is the root entity every heuristic, renderer and AI
action reads. It is stored as a JSON object using camelCase keys
(``personalInfo``, ``fullName``, ``startDate``...), so the conversion
helpers here are the only place that knows about the stored shape.
"""

from __future__ import annotations

import uuid
from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from datetime import datetime
from typing import Any

from resume_builder.constants.roles import ResumeRole

__all__ = [
    "Education",
    "Experience",
    "PersonalInfo",
    "Project",
    "ResumeContent",
    "ResumeRecord",
    "add_unique",
    "blank_content",
    "content_from_dict",
    "content_to_dict",
    "new_education",
    "new_entry_id",
    "new_experience",
    "new_project",
    "unique_skills",
]

PRESENT = "Present"


@dataclass(slots=True)
class PersonalInfo:
    full_name: str = ""
    email: str = ""
    phone: str = ""
    linkedin: str = ""
    location: str = ""


@dataclass(slots=True)
class Education:
    """A single education entry. Dates are free-form strings."""

    id: str
    institution: str = ""
    degree: str = ""
    field_of_study: str = ""
    start_date: str = ""
    end_date: str = ""
    gpa: str | None = None


@dataclass(slots=True)
class Experience:
    """A single work-experience entry.

    Attributes:
        bullets: Ordered bullet strings. Blank strings are allowed while the
            user is still typing and are dropped at display time.
        current: When True the stored ``end_date`` is ignored for display.
    """

    id: str
    company: str = ""
    position: str = ""
    location: str = ""
    start_date: str = ""
    end_date: str = ""
    current: bool = False
    bullets: list[str] = field(default_factory=list)

    def non_blank_bullets(self) -> list[str]:
        return [b for b in self.bullets if b.strip()]

    def display_end_date(self) -> str:
        return PRESENT if self.current else self.end_date


@dataclass(slots=True)
class Project:
    id: str
    name: str = ""
    description: str = ""
    technologies: list[str] = field(default_factory=list)
    link: str | None = None


@dataclass(slots=True)
class ResumeContent:
    """Aggregate of all user-authored resume sections."""

    personal_info: PersonalInfo = field(default_factory=PersonalInfo)
    summary: str = ""
    education: list[Education] = field(default_factory=list)
    experience: list[Experience] = field(default_factory=list)
    projects: list[Project] = field(default_factory=list)
    skills: list[str] = field(default_factory=list)
    role: str = ResumeRole.GENERAL.value


@dataclass(slots=True)
class ResumeRecord:
    """Persisted resume envelope owned by a single user."""

    id: int
    owner: str
    title: str
    content: ResumeContent
    created_at: datetime
    updated_at: datetime


# ---------------------------------------------------------------------------
# Factories


def new_entry_id() -> str:
    """Return an opaque id for a list entry."""
    return uuid.uuid4().hex


def new_education() -> Education:
    return Education(id=new_entry_id())


def new_experience() -> Experience:
    # One empty bullet so the form has a line to type into.
    return Experience(id=new_entry_id(), bullets=[""])


def new_project() -> Project:
    return Project(id=new_entry_id(), link="")


def blank_content(email: str = "", role: ResumeRole | str = ResumeRole.GENERAL) -> ResumeContent:
    """Return content for a freshly created resume."""
    return ResumeContent(personal_info=PersonalInfo(email=email), role=ResumeRole(role).value)


def add_unique(values: Iterable[str], value: str) -> list[str]:
    """Return *values* with the trimmed *value* appended if new and non-blank."""
    result = list(values)
    cleaned = value.strip()
    if cleaned and cleaned not in result:
        result.append(cleaned)
    return result


def unique_skills(values: Iterable[str]) -> list[str]:
    """Trim *values*, dropping blanks and repeats while keeping first-seen order."""
    result: list[str] = []
    for value in values:
        result = add_unique(result, value)
    return result


# ---------------------------------------------------------------------------
# Stored JSON shape <-> dataclasses


def _str(value: Any) -> str:
    if value is None:
        return ""
    return value if isinstance(value, str) else str(value)


def _optional_str(value: Any) -> str | None:
    if value is None:
        return None
    return _str(value)


def _mapping(value: Any) -> Mapping[str, Any]:
    return value if isinstance(value, Mapping) else {}


def _list(value: Any) -> list[Any]:
    return value if isinstance(value, list) else []


def _unique_strings(values: Any) -> list[str]:
    return unique_skills(_str(value) for value in _list(values))


def _education_from_dict(data: Mapping[str, Any]) -> Education:
    return Education(
        id=_str(data.get("id")) or new_entry_id(),
        institution=_str(data.get("institution")),
        degree=_str(data.get("degree")),
        field_of_study=_str(data.get("field")),
        start_date=_str(data.get("startDate")),
        end_date=_str(data.get("endDate")),
        gpa=_optional_str(data.get("gpa")),
    )


def _experience_from_dict(data: Mapping[str, Any]) -> Experience:
    return Experience(
        id=_str(data.get("id")) or new_entry_id(),
        company=_str(data.get("company")),
        position=_str(data.get("position")),
        location=_str(data.get("location")),
        start_date=_str(data.get("startDate")),
        end_date=_str(data.get("endDate")),
        current=bool(data.get("current", False)),
        bullets=[_str(b) for b in _list(data.get("description"))],
    )


def _project_from_dict(data: Mapping[str, Any]) -> Project:
    return Project(
        id=_str(data.get("id")) or new_entry_id(),
        name=_str(data.get("name")),
        description=_str(data.get("description")),
        technologies=_unique_strings(data.get("technologies")),
        link=_optional_str(data.get("link")),
    )


def content_from_dict(data: Mapping[str, Any] | None) -> ResumeContent:
    """Build :class:`ResumeContent` from its stored JSON object.

    Missing keys become blank defaults and unknown keys are ignored, so
    content written by older clients always loads.
    """
    data = _mapping(data)
    personal = _mapping(data.get("personalInfo"))
    try:
        role = ResumeRole(_str(data.get("role")) or ResumeRole.GENERAL).value
    except ValueError:
        role = ResumeRole.GENERAL.value

    return ResumeContent(
        personal_info=PersonalInfo(
            full_name=_str(personal.get("fullName")),
            email=_str(personal.get("email")),
            phone=_str(personal.get("phone")),
            linkedin=_str(personal.get("linkedin")),
            location=_str(personal.get("location")),
        ),
        summary=_str(data.get("summary")),
        education=[_education_from_dict(_mapping(e)) for e in _list(data.get("education"))],
        experience=[_experience_from_dict(_mapping(e)) for e in _list(data.get("experience"))],
        projects=[_project_from_dict(_mapping(p)) for p in _list(data.get("projects"))],
        skills=_unique_strings(data.get("skills")),
        role=role,
    )


def content_to_dict(content: ResumeContent) -> dict[str, Any]:
    """Serialize *content* into its stored camelCase JSON object."""
    info = content.personal_info
    education = []
    for edu in content.education:
        item: dict[str, Any] = {
            "id": edu.id,
            "institution": edu.institution,
            "degree": edu.degree,
            "field": edu.field_of_study,
            "startDate": edu.start_date,
            "endDate": edu.end_date,
        }
        if edu.gpa is not None:
            item["gpa"] = edu.gpa
        education.append(item)

    projects = []
    for proj in content.projects:
        item = {
            "id": proj.id,
            "name": proj.name,
            "description": proj.description,
            "technologies": list(proj.technologies),
        }
        if proj.link is not None:
            item["link"] = proj.link
        projects.append(item)

    return {
        "personalInfo": {
            "fullName": info.full_name,
            "email": info.email,
            "phone": info.phone,
            "linkedin": info.linkedin,
            "location": info.location,
        },
        "summary": content.summary,
        "education": education,
        "experience": [
            {
                "id": exp.id,
                "company": exp.company,
                "position": exp.position,
                "location": exp.location,
                "startDate": exp.start_date,
                "endDate": exp.end_date,
                "current": exp.current,
                "description": list(exp.bullets),
            }
            for exp in content.experience
        ],
        "projects": projects,
        "skills": list(content.skills),
        "role": content.role,
    }
