"""Tagged, per-section updates to :class:`ResumeContent`.

Each update replaces exactly one top-level field. Lists are replaced
wholesale, never merged element-wise. Skills are trimmed and repeats
dropped on the way in.
"""

from __future__ import annotations

import copy
import dataclasses
from dataclasses import dataclass

from resume_builder.constants.roles import ResumeRole
from resume_builder.models.resume_content import (
    Education,
    Experience,
    PersonalInfo,
    Project,
    ResumeContent,
    unique_skills,
)

__all__ = [
    "ContentUpdate",
    "EducationListUpdate",
    "ExperienceListUpdate",
    "PersonalInfoUpdate",
    "ProjectListUpdate",
    "RoleUpdate",
    "SkillsUpdate",
    "SummaryUpdate",
    "apply_update",
]


@dataclass(frozen=True, slots=True)
class PersonalInfoUpdate:
    personal_info: PersonalInfo


@dataclass(frozen=True, slots=True)
class SummaryUpdate:
    summary: str


@dataclass(frozen=True, slots=True)
class EducationListUpdate:
    education: list[Education]


@dataclass(frozen=True, slots=True)
class ExperienceListUpdate:
    experience: list[Experience]


@dataclass(frozen=True, slots=True)
class ProjectListUpdate:
    projects: list[Project]


@dataclass(frozen=True, slots=True)
class SkillsUpdate:
    skills: list[str]


@dataclass(frozen=True, slots=True)
class RoleUpdate:
    role: ResumeRole


ContentUpdate = (
    PersonalInfoUpdate
    | SummaryUpdate
    | EducationListUpdate
    | ExperienceListUpdate
    | ProjectListUpdate
    | SkillsUpdate
    | RoleUpdate
)


def apply_update(content: ResumeContent, update: ContentUpdate) -> ResumeContent:
    """Return a copy of *content* with the field named by *update* replaced.

    The input is never mutated.

    Raises:
        TypeError: If *update* is not one of the known update types.
    """
    # Deep copy so callers holding the previous content never see later edits.
    match update:
        case PersonalInfoUpdate(personal_info=info):
            changes = {"personal_info": copy.deepcopy(info)}
        case SummaryUpdate(summary=summary):
            changes = {"summary": summary}
        case EducationListUpdate(education=entries):
            changes = {"education": copy.deepcopy(list(entries))}
        case ExperienceListUpdate(experience=entries):
            changes = {"experience": copy.deepcopy(list(entries))}
        case ProjectListUpdate(projects=entries):
            changes = {"projects": copy.deepcopy(list(entries))}
        case SkillsUpdate(skills=skills):
            changes = {"skills": unique_skills(skills)}
        case RoleUpdate(role=role):
            changes = {"role": ResumeRole(role).value}
        case _:
            raise TypeError(f"Unsupported content update: {type(update).__name__}")
    return dataclasses.replace(copy.deepcopy(content), **changes)
