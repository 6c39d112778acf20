"""Typed AI requests and prompt construction.

A request is a type plus a context record appropriate to that type.
:func:`build_prompts` maps it to a ``(system, user)`` prompt pair; the
helpers at the bottom derive requests from :class:`ResumeContent`.
"""

from __future__ import annotations

import json
from collections.abc import Mapping, Sequence
from dataclasses import dataclass, field
from enum import StrEnum
from typing import Any

from resume_builder.errors import ValidationError
from resume_builder.models.resume_content import ResumeContent, content_to_dict

__all__ = [
    "AIRequest",
    "AIRequestType",
    "AnalyzeContext",
    "ExperienceContext",
    "OptimizeContext",
    "PromptPair",
    "SkillsContext",
    "SummaryContext",
    "analyze_request",
    "build_prompts",
    "improve_experience_request",
    "optimize_request",
    "request_from_payload",
    "suggest_skills_request",
    "summary_request",
]


class AIRequestType(StrEnum):
    GENERATE_SUMMARY = "generate-summary"
    IMPROVE_EXPERIENCE = "improve-experience"
    SUGGEST_SKILLS = "suggest-skills"
    ANALYZE_RESUME = "analyze-resume"
    OPTIMIZE_FOR_JD = "optimize-for-jd"


@dataclass(frozen=True, slots=True)
class SummaryContext:
    name: str = ""
    position: str = ""
    skills: tuple[str, ...] = ()
    years_experience: int = 0


@dataclass(frozen=True, slots=True)
class ExperienceContext:
    position: str = ""
    company: str = ""


@dataclass(frozen=True, slots=True)
class SkillsContext:
    job_role: str = ""
    existing_skills: tuple[str, ...] = ()
    keywords: tuple[str, ...] = ()


@dataclass(frozen=True, slots=True)
class AnalyzeContext:
    full_name: str = ""
    has_summary: bool = False
    experience_count: int = 0
    education_count: int = 0
    skills_count: int = 0
    has_projects: bool = False


@dataclass(frozen=True, slots=True)
class OptimizeContext:
    current_summary: str = ""
    current_skills: tuple[str, ...] = ()
    current_experience: tuple[Mapping[str, Any], ...] = field(default=())


RequestContext = SummaryContext | ExperienceContext | SkillsContext | AnalyzeContext | OptimizeContext


@dataclass(frozen=True, slots=True)
class AIRequest:
    """An AI request. ``content`` carries the free text the type needs
    (bullets, serialized resume, job description)."""

    type: AIRequestType
    context: RequestContext
    content: str | None = None


@dataclass(frozen=True, slots=True)
class PromptPair:
    system: str
    user: str


# ---------------------------------------------------------------------------
# System prompts

_SUMMARY_SYSTEM = (
    "You are a professional resume writer. Generate a compelling professional summary "
    "for a resume.\nThe summary should be 2-4 sentences, highlight key strengths, and be "
    'written in first person implied (no "I" statements).\nFocus on value the person '
    "brings to employers. Be specific and avoid generic phrases."
)

_EXPERIENCE_SYSTEM = (
    "You are a professional resume writer. Improve the given work experience bullet points "
    "to be more impactful.\nUse action verbs, quantify achievements when possible, and focus "
    "on impact and results.\nKeep each bullet point concise (under 20 words ideally).\n"
    "Return ONLY the improved bullet points, one per line, without numbers or bullet characters."
)

_SKILLS_SYSTEM = (
    "You are a career advisor. Suggest relevant technical and soft skills for a resume.\n"
    "Focus on skills that are in-demand and relevant to the job role.\n"
    'Return ONLY a JSON object with a "skills" array containing 5-8 skill strings.'
)

_ANALYZE_SYSTEM = """You are an expert ATS (Applicant Tracking System) and resume consultant. \
Analyze the resume content and provide:
1. An ATS compatibility score from 0-100
2. 2-3 key strengths of the resume
3. 2-3 areas that need improvement
4. 2-3 specific, actionable suggestions

Return ONLY a JSON object with this structure:
{
  "score": number,
  "strengths": ["strength1", "strength2"],
  "weaknesses": ["weakness1", "weakness2"],
  "suggestions": ["suggestion1", "suggestion2"]
}

Scoring guidelines:
- 80-100: Excellent - well-structured, keyword-rich, quantified achievements
- 60-79: Good - solid content but room for improvement
- 40-59: Fair - missing key elements or poor formatting
- 0-39: Needs work - significant improvements needed"""

_OPTIMIZE_SYSTEM = """You are a resume optimization expert. Given a job description, optimize \
the resume content to better match the role.
Keep content truthful and professional. Focus on highlighting relevant experience and using \
matching keywords.
Return ONLY a JSON object with optimized content:
{
  "summary": "optimized professional summary",
  "skills": ["skill1", "skill2", ...]
}

The summary should be 2-4 sentences tailored to the job.
The skills should include relevant skills from the job description that the candidate could \
reasonably have."""


def _join(values: Sequence[str], empty: str) -> str:
    return ", ".join(values) or empty


def _keyword_line(keywords: Sequence[str]) -> str:
    if not keywords:
        return ""
    return f"Keywords common for this role: {', '.join(keywords)}\n"


def build_prompts(request: AIRequest) -> PromptPair:
    """Map *request* to its system and user prompts."""
    ctx = request.context
    match request.type, ctx:
        case AIRequestType.GENERATE_SUMMARY, SummaryContext():
            user = (
                "Generate a professional summary for:\n"
                f"Name: {ctx.name or 'Professional'}\n"
                f"Current/Target Role: {ctx.position}\n"
                f"Key Skills: {_join(ctx.skills, 'Not specified')}\n"
                f"Experience Level: {ctx.years_experience} position(s) listed\n\n"
                "Write a compelling 2-4 sentence summary."
            )
            return PromptPair(_SUMMARY_SYSTEM, user)

        case AIRequestType.IMPROVE_EXPERIENCE, ExperienceContext():
            user = (
                "Improve these experience bullet points for a "
                f"{ctx.position or 'professional'} at {ctx.company or 'a company'}:\n\n"
                f"{request.content or ''}\n\n"
                "Return the improved version of each bullet point, one per line."
            )
            return PromptPair(_EXPERIENCE_SYSTEM, user)

        case AIRequestType.SUGGEST_SKILLS, SkillsContext():
            user = (
                f"Suggest skills for someone in the role of: {ctx.job_role}\n"
                f"They already have these skills: {_join(ctx.existing_skills, 'None listed')}\n"
                f"{_keyword_line(ctx.keywords)}\n"
                "Suggest 5-8 additional relevant skills they should add. "
                'Return as JSON: {"skills": ["skill1", "skill2", ...]}'
            )
            return PromptPair(_SKILLS_SYSTEM, user)

        case AIRequestType.ANALYZE_RESUME, AnalyzeContext():
            user = (
                "Analyze this resume for ATS compatibility and overall effectiveness:\n\n"
                f"Personal Info: {ctx.full_name or 'Not provided'}\n"
                f"Has Summary: {'Yes' if ctx.has_summary else 'No'}\n"
                f"Experience Entries: {ctx.experience_count}\n"
                f"Education Entries: {ctx.education_count}\n"
                f"Skills Count: {ctx.skills_count}\n"
                f"Has Projects: {'Yes' if ctx.has_projects else 'No'}\n\n"
                f"Full Resume Content:\n{request.content or ''}\n\n"
                "Provide your analysis as JSON."
            )
            return PromptPair(_ANALYZE_SYSTEM, user)

        case AIRequestType.OPTIMIZE_FOR_JD, OptimizeContext():
            experience = json.dumps([dict(e) for e in ctx.current_experience[:2]])
            user = (
                f"Job Description:\n{request.content or ''}\n\n"
                "Current Resume:\n"
                f"Summary: {ctx.current_summary or 'No summary'}\n"
                f"Skills: {_join(ctx.current_skills, 'No skills listed')}\n"
                f"Experience: {experience}\n\n"
                "Optimize the summary and suggest skills that align with this job "
                "description. Return as JSON."
            )
            return PromptPair(_OPTIMIZE_SYSTEM, user)

    raise ValidationError(
        f"Context {type(ctx).__name__} does not match request type {request.type}"
    )


# ---------------------------------------------------------------------------
# Raw payloads (API passthrough)


def _strings(value: Any) -> tuple[str, ...]:
    if not isinstance(value, list):
        return ()
    return tuple(str(v) for v in value)


def _int(value: Any) -> int:
    try:
        return int(value)
    except (TypeError, ValueError):
        return 0


def request_from_payload(
    request_type: str,
    content: str | None,
    context: Mapping[str, Any] | None,
) -> AIRequest:
    """Build an :class:`AIRequest` from a loosely-typed ``{type, content, context}`` body.

    Raises:
        ValidationError: If *request_type* is not a known enhancement type.
    """
    try:
        kind = AIRequestType(request_type)
    except ValueError:
        raise ValidationError("Invalid enhancement type") from None

    ctx = context or {}
    match kind:
        case AIRequestType.GENERATE_SUMMARY:
            parsed: RequestContext = SummaryContext(
                name=str(ctx.get("name") or ""),
                position=str(ctx.get("position") or ""),
                skills=_strings(ctx.get("skills")),
                years_experience=_int(ctx.get("yearsExperience")),
            )
        case AIRequestType.IMPROVE_EXPERIENCE:
            parsed = ExperienceContext(
                position=str(ctx.get("position") or ""),
                company=str(ctx.get("company") or ""),
            )
        case AIRequestType.SUGGEST_SKILLS:
            parsed = SkillsContext(
                job_role=str(ctx.get("jobRole") or ""),
                existing_skills=_strings(ctx.get("existingSkills")),
                keywords=_strings(ctx.get("roleKeywords")),
            )
        case AIRequestType.ANALYZE_RESUME:
            personal = ctx.get("personalInfo")
            full_name = personal.get("fullName", "") if isinstance(personal, Mapping) else ""
            parsed = AnalyzeContext(
                full_name=str(full_name or ""),
                has_summary=bool(ctx.get("hasSummary")),
                experience_count=_int(ctx.get("experienceCount")),
                education_count=_int(ctx.get("educationCount")),
                skills_count=_int(ctx.get("skillsCount")),
                has_projects=bool(ctx.get("hasProjects")),
            )
        case AIRequestType.OPTIMIZE_FOR_JD:
            experience = ctx.get("currentExperience")
            parsed = OptimizeContext(
                current_summary=str(ctx.get("currentSummary") or ""),
                current_skills=_strings(ctx.get("currentSkills")),
                current_experience=tuple(
                    e for e in (experience if isinstance(experience, list) else [])
                    if isinstance(e, Mapping)
                ),
            )
    return AIRequest(type=kind, context=parsed, content=content)


# ---------------------------------------------------------------------------
# Requests derived from resume content


def summary_request(content: ResumeContent) -> AIRequest:
    latest = content.experience[0].position if content.experience else ""
    return AIRequest(
        type=AIRequestType.GENERATE_SUMMARY,
        context=SummaryContext(
            name=content.personal_info.full_name,
            position=latest or "Professional",
            skills=tuple(content.skills[:10]),
            years_experience=len(content.experience),
        ),
    )


def improve_experience_request(position: str, company: str, bullets: Sequence[str]) -> AIRequest:
    return AIRequest(
        type=AIRequestType.IMPROVE_EXPERIENCE,
        context=ExperienceContext(position=position, company=company),
        content="\n".join(bullets),
    )


def suggest_skills_request(
    job_role: str, existing_skills: Sequence[str], keywords: Sequence[str] = ()
) -> AIRequest:
    return AIRequest(
        type=AIRequestType.SUGGEST_SKILLS,
        context=SkillsContext(
            job_role=job_role,
            existing_skills=tuple(existing_skills),
            keywords=tuple(keywords),
        ),
    )


def analyze_request(content: ResumeContent) -> AIRequest:
    return AIRequest(
        type=AIRequestType.ANALYZE_RESUME,
        context=AnalyzeContext(
            full_name=content.personal_info.full_name,
            has_summary=bool(content.summary),
            experience_count=len(content.experience),
            education_count=len(content.education),
            skills_count=len(content.skills),
            has_projects=bool(content.projects),
        ),
        content=json.dumps(content_to_dict(content)),
    )


def optimize_request(content: ResumeContent, job_description: str) -> AIRequest:
    stored = content_to_dict(content)
    return AIRequest(
        type=AIRequestType.OPTIMIZE_FOR_JD,
        context=OptimizeContext(
            current_summary=content.summary,
            current_skills=tuple(content.skills),
            current_experience=tuple(stored["experience"]),
        ),
        content=job_description,
    )
