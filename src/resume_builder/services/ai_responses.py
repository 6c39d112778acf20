"""Normalization of raw AI text into typed results.

Model output is free-form text that may or may not contain the JSON it
was asked for. Parsing here never raises: malformed output degrades to
documented fallback values.
"""

from __future__ import annotations

import json
import logging
import math
import re
from dataclasses import dataclass, field
from typing import Any

from resume_builder.services.ai_requests import AIRequestType

logger = logging.getLogger(__name__)

__all__ = [
    "AIResult",
    "AnalysisResult",
    "ImprovedExperienceResult",
    "OptimizationResult",
    "SkillsResult",
    "SummaryResult",
    "analysis_fallback",
    "parse_response",
    "split_bullets",
    "try_parse_json_object",
]

_DECODER = json.JSONDecoder()
_LIST_SEPARATORS = re.compile(r"[\n,]")
# Leading bullet characters, list numbering and whitespace.
_LIST_MARKER = re.compile(r"^[-•*\d.)\s]+")
_MAX_SKILL_LENGTH = 50
DEFAULT_SCORE = 50


@dataclass(frozen=True, slots=True)
class SummaryResult:
    summary: str


@dataclass(frozen=True, slots=True)
class ImprovedExperienceResult:
    improved: str

    def bullets(self) -> list[str]:
        return split_bullets(self.improved)


@dataclass(frozen=True, slots=True)
class SkillsResult:
    skills: list[str] = field(default_factory=list)


@dataclass(frozen=True, slots=True)
class AnalysisResult:
    score: int = DEFAULT_SCORE
    strengths: list[str] = field(default_factory=list)
    weaknesses: list[str] = field(default_factory=list)
    suggestions: list[str] = field(default_factory=list)


@dataclass(frozen=True, slots=True)
class OptimizationResult:
    summary: str = ""
    skills: list[str] = field(default_factory=list)


AIResult = SummaryResult | ImprovedExperienceResult | SkillsResult | AnalysisResult | OptimizationResult


def analysis_fallback() -> AnalysisResult:
    """Return the result shown when an analysis reply has no JSON in it."""
    return AnalysisResult(
        score=DEFAULT_SCORE,
        strengths=["Resume content detected"],
        weaknesses=["Analysis parsing failed"],
        suggestions=["Please try again"],
    )


def try_parse_json_object(text: str) -> dict[str, Any] | None:
    """Return the first JSON object embedded in *text*, or None.

    Every ``{`` is tried in order as the start of a JSON value, so prose
    before or after the object (and stray braces in that prose) is
    tolerated.
    """
    start = text.find("{")
    while start != -1:
        try:
            value, _ = _DECODER.raw_decode(text, start)
        except json.JSONDecodeError:
            value = None
        if isinstance(value, dict):
            return value
        start = text.find("{", start + 1)
    return None


def split_bullets(text: str) -> list[str]:
    """Split improved experience text into non-blank bullet lines."""
    return [line.strip() for line in text.splitlines() if line.strip()]


def _string_list(value: Any) -> list[str]:
    if not isinstance(value, list):
        return []
    return [str(item).strip() for item in value if str(item).strip()]


def _split_skill_lines(text: str) -> list[str]:
    skills = []
    for part in _LIST_SEPARATORS.split(text):
        cleaned = _LIST_MARKER.sub("", part).strip()
        if 0 < len(cleaned) < _MAX_SKILL_LENGTH:
            skills.append(cleaned)
    return skills


def _clamp_score(value: Any) -> int:
    if isinstance(value, bool) or not isinstance(value, int | float):
        return DEFAULT_SCORE
    # json accepts NaN, Infinity and overflowing literals like 1e400.
    if isinstance(value, float) and not math.isfinite(value):
        return DEFAULT_SCORE
    return max(0, min(100, round(value)))


def _parse_skills(raw: str) -> SkillsResult:
    parsed = try_parse_json_object(raw)
    if parsed is None:
        logger.info("No JSON object in skills response; splitting raw text")
        return SkillsResult(skills=_split_skill_lines(raw))
    return SkillsResult(skills=_string_list(parsed.get("skills")))


def _parse_analysis(raw: str) -> AnalysisResult:
    parsed = try_parse_json_object(raw)
    if parsed is None:
        logger.info("No JSON object in analysis response; using fallback")
        return analysis_fallback()
    return AnalysisResult(
        score=_clamp_score(parsed.get("score")),
        strengths=_string_list(parsed.get("strengths")),
        weaknesses=_string_list(parsed.get("weaknesses")),
        suggestions=_string_list(parsed.get("suggestions")),
    )


def _parse_optimization(raw: str) -> OptimizationResult:
    parsed = try_parse_json_object(raw)
    if parsed is None:
        logger.info("No JSON object in optimization response; using empty result")
        return OptimizationResult()
    summary = parsed.get("summary")
    return OptimizationResult(
        summary=summary.strip() if isinstance(summary, str) else "",
        skills=_string_list(parsed.get("skills")),
    )


def parse_response(request_type: AIRequestType, raw: str) -> AIResult:
    """Normalize *raw* model output for *request_type* into a typed result."""
    raw = raw or ""
    match request_type:
        case AIRequestType.GENERATE_SUMMARY:
            return SummaryResult(summary=raw.strip())
        case AIRequestType.IMPROVE_EXPERIENCE:
            return ImprovedExperienceResult(improved=raw.strip())
        case AIRequestType.SUGGEST_SKILLS:
            return _parse_skills(raw)
        case AIRequestType.ANALYZE_RESUME:
            return _parse_analysis(raw)
        case AIRequestType.OPTIMIZE_FOR_JD:
            return _parse_optimization(raw)
    raise ValueError(f"Unknown request type: {request_type}")
