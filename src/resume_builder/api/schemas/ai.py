"""Pydantic schemas for AI endpoints."""

from __future__ import annotations

from enum import StrEnum
from typing import Any

from pydantic import BaseModel, Field

from resume_builder.api.schemas.resumes import CamelModel, ResumeContentSchema


class AIAction(StrEnum):
    GENERATE_SUMMARY = "generate-summary"
    IMPROVE_EXPERIENCE = "improve-experience"
    SUGGEST_SKILLS = "suggest-skills"
    ANALYZE_RESUME = "analyze-resume"
    OPTIMIZE_FOR_JD = "optimize-for-jd"
    FIX_WARNING = "fix-warning"


class AIActionRequest(CamelModel):
    """Inputs for AI actions; each action reads only the fields it needs."""

    experience_id: str | None = Field(None, description="improve-experience target")
    job_description: str | None = Field(None, description="optimize-for-jd input")
    accept_summary: bool = Field(True, description="optimize-for-jd: apply proposed summary")
    accept_skills: bool = Field(True, description="optimize-for-jd: apply proposed skills")
    kind: str | None = Field(None, description="fix-warning: warning kind")
    section: str | None = Field(None, description="fix-warning: warning section")


class AnalysisResponse(BaseModel):
    score: int = Field(ge=0, le=100)
    strengths: list[str]
    weaknesses: list[str]
    suggestions: list[str]


class OptimizationResponse(BaseModel):
    summary: str
    skills: list[str]


class AIActionResponse(BaseModel):
    """Proposed content after an AI action. Nothing is saved."""

    action: AIAction
    changed: bool
    content: ResumeContentSchema
    analysis: AnalysisResponse | None = None
    optimization: OptimizationResponse | None = None


class EnhanceRequest(BaseModel):
    """Raw ``{type, content?, context}`` body for a single AI call."""

    type: str
    content: str | None = None
    context: dict[str, Any] = Field(default_factory=dict)
