"""Data models and type definitions"""

from resume_builder.models.content_updates import (
    ContentUpdate,
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
    ResumeRecord,
    blank_content,
    content_from_dict,
    content_to_dict,
)

__all__ = [
    "ContentUpdate",
    "Education",
    "EducationListUpdate",
    "Experience",
    "ExperienceListUpdate",
    "PersonalInfo",
    "PersonalInfoUpdate",
    "Project",
    "ProjectListUpdate",
    "ResumeContent",
    "ResumeRecord",
    "RoleUpdate",
    "SkillsUpdate",
    "SummaryUpdate",
    "apply_update",
    "blank_content",
    "content_from_dict",
    "content_to_dict",
]
