"""Target roles a resume can be tailored for.

The role is picked when a resume is created. It provides a label, used as
the target job title when the resume has no experience entry, and a short
keyword list that is added to every AI skill suggestion prompt.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum


class ResumeRole(StrEnum):
    """Supported resume target roles."""

    FRONTEND = "frontend"
    BACKEND = "backend"
    FULLSTACK = "fullstack"
    DATA_ANALYST = "data-analyst"
    FRESHER = "fresher"
    GENERAL = "general"


@dataclass(frozen=True)
class RoleMetadata:
    """Display metadata for a role."""

    label: str
    description: str
    keywords: tuple[str, ...]


ROLE_METADATA: dict[ResumeRole, RoleMetadata] = {
    ResumeRole.FRONTEND: RoleMetadata(
        label="Frontend Developer",
        description="React, Vue, Angular, UI/UX",
        keywords=("React", "TypeScript", "CSS", "JavaScript", "Vue.js", "Angular"),
    ),
    ResumeRole.BACKEND: RoleMetadata(
        label="Backend Developer",
        description="APIs, Databases, Server-side",
        keywords=("Node.js", "Python", "Java", "SQL", "REST APIs", "Docker"),
    ),
    ResumeRole.FULLSTACK: RoleMetadata(
        label="Full Stack Developer",
        description="End-to-end development",
        keywords=("React", "Node.js", "PostgreSQL", "TypeScript", "AWS", "Docker"),
    ),
    ResumeRole.DATA_ANALYST: RoleMetadata(
        label="Data Analyst",
        description="Analytics, SQL, Visualization",
        keywords=("Python", "SQL", "Tableau", "Excel", "Power BI", "Statistics"),
    ),
    ResumeRole.FRESHER: RoleMetadata(
        label="Fresher / Student",
        description="Entry-level, Internships",
        keywords=("Problem Solving", "Quick Learner", "Team Player", "Communication"),
    ),
    ResumeRole.GENERAL: RoleMetadata(
        label="General / Other",
        description="Custom role, flexible format",
        keywords=(),
    ),
}


def get_role_label(role: ResumeRole | str) -> str:
    """Return the display label for *role*, falling back to ``General``."""
    try:
        return ROLE_METADATA[ResumeRole(role)].label
    except ValueError:
        return "General"


def get_role_keywords(role: ResumeRole | str) -> list[str]:
    """Return the keyword list for *role* (empty for unknown roles)."""
    try:
        return list(ROLE_METADATA[ResumeRole(role)].keywords)
    except ValueError:
        return []
