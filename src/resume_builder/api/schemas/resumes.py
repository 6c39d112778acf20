"""Pydantic schemas for resume API endpoints.

Resume content travels in its stored camelCase shape (``personalInfo``,
``startDate``...). Envelope fields keep snake_case.
"""

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from resume_builder.constants.roles import ResumeRole
from resume_builder.models.resume_content import (
    ResumeContent,
    ResumeRecord,
    content_from_dict,
    content_to_dict,
)
from resume_builder.services.resume import DEFAULT_TITLE


class CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class PersonalInfoSchema(CamelModel):
    full_name: str = ""
    email: str = ""
    phone: str = ""
    linkedin: str = ""
    location: str = ""


class EducationSchema(CamelModel):
    id: str = Field("", description="Entry id; generated when blank")
    institution: str = ""
    degree: str = ""
    field_of_study: str = Field("", alias="field")
    start_date: str = ""
    end_date: str = ""
    gpa: str | None = None


class ExperienceSchema(CamelModel):
    id: str = Field("", description="Entry id; generated when blank")
    company: str = ""
    position: str = ""
    location: str = ""
    start_date: str = ""
    end_date: str = ""
    current: bool = False
    bullets: list[str] = Field(default_factory=list, alias="description")


class ProjectSchema(CamelModel):
    id: str = Field("", description="Entry id; generated when blank")
    name: str = ""
    description: str = ""
    technologies: list[str] = Field(default_factory=list)
    link: str | None = None


class ResumeContentSchema(CamelModel):
    """Full resume content."""

    personal_info: PersonalInfoSchema = Field(default_factory=PersonalInfoSchema)
    summary: str = ""
    education: list[EducationSchema] = Field(default_factory=list)
    experience: list[ExperienceSchema] = Field(default_factory=list)
    projects: list[ProjectSchema] = Field(default_factory=list)
    skills: list[str] = Field(default_factory=list)
    role: ResumeRole = ResumeRole.GENERAL

    @classmethod
    def from_content(cls, content: ResumeContent) -> ResumeContentSchema:
        return cls.model_validate(content_to_dict(content))

    def to_content(self) -> ResumeContent:
        return content_from_dict(self.model_dump(mode="json", by_alias=True))


class ResumeResponse(BaseModel):
    """Response schema for a stored resume."""

    id: int
    title: str
    content: ResumeContentSchema
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_record(cls, record: ResumeRecord) -> ResumeResponse:
        return cls(
            id=record.id,
            title=record.title,
            content=ResumeContentSchema.from_content(record.content),
            created_at=record.created_at,
            updated_at=record.updated_at,
        )


class ResumeCreateRequest(BaseModel):
    """Request schema for creating a resume."""

    title: str = Field(DEFAULT_TITLE, min_length=1, max_length=255)
    role: ResumeRole = Field(ResumeRole.GENERAL, description="Target role for the resume")
    email: str = Field("", description="Contact email to pre-fill")


class ResumeUpdateRequest(CamelModel):
    """Request schema for saving a resume.

    All fields are optional; each provided section replaces the stored
    section as a whole.
    """

    title: str | None = Field(None, min_length=1, max_length=255)
    personal_info: PersonalInfoSchema | None = None
    summary: str | None = None
    education: list[EducationSchema] | None = None
    experience: list[ExperienceSchema] | None = None
    projects: list[ProjectSchema] | None = None
    skills: list[str] | None = None
    role: ResumeRole | None = None


class RenderRequest(BaseModel):
    """Template and font for a preview or export."""

    template: str = Field("modern", description="modern, classic or minimal")
    font: str = Field("inter", description="inter, georgia or merriweather")
