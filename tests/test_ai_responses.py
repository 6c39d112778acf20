"""Tests for AI response normalization and its fallback paths."""

from __future__ import annotations

import pytest

from resume_builder.services.ai_requests import AIRequestType
from resume_builder.services.ai_responses import (
    AnalysisResult,
    ImprovedExperienceResult,
    OptimizationResult,
    SkillsResult,
    SummaryResult,
    analysis_fallback,
    parse_response,
    try_parse_json_object,
)


class TestTryParseJsonObject:
    def test_plain_object(self) -> None:
        assert try_parse_json_object('{"a": 1}') == {"a": 1}

    def test_object_surrounded_by_prose(self) -> None:
        text = 'Sure! Here it is:\n{"skills": ["Go"]}\nLet me know.'

        assert try_parse_json_object(text) == {"skills": ["Go"]}

    def test_markdown_fence(self) -> None:
        text = '```json\n{"score": 70}\n```'

        assert try_parse_json_object(text) == {"score": 70}

    def test_stray_brace_before_object(self) -> None:
        text = 'Use {curly} braces: {"score": 1}'

        assert try_parse_json_object(text) == {"score": 1}

    def test_nested_objects_return_outermost(self) -> None:
        assert try_parse_json_object('x {"a": {"b": 2}} y') == {"a": {"b": 2}}

    @pytest.mark.parametrize("text", ["", "no json here", "{not: valid}", "[1, 2]"])
    def test_no_object(self, text: str) -> None:
        assert try_parse_json_object(text) is None


class TestSummaryAndExperience:
    def test_summary_is_trimmed(self) -> None:
        result = parse_response(AIRequestType.GENERATE_SUMMARY, "  Great dev.\n")

        assert result == SummaryResult(summary="Great dev.")

    def test_improved_experience_splits_into_bullets(self) -> None:
        result = parse_response(AIRequestType.IMPROVE_EXPERIENCE, "\nLed A\n\n  Built B  \n")

        assert isinstance(result, ImprovedExperienceResult)
        assert result.improved == "Led A\n\n  Built B"
        assert result.bullets() == ["Led A", "Built B"]


class TestSkills:
    def test_json_embedded_in_prose(self) -> None:
        raw = 'Here you go: {"skills": ["Go", "Rust"]}'

        result = parse_response(AIRequestType.SUGGEST_SKILLS, raw)

        assert result == SkillsResult(skills=["Go", "Rust"])

    def test_plain_lines_fallback(self) -> None:
        result = parse_response(AIRequestType.SUGGEST_SKILLS, "Go\nRust\n")

        assert result == SkillsResult(skills=["Go", "Rust"])

    def test_fallback_strips_markers_and_splits_commas(self) -> None:
        raw = "1. Kubernetes\n- Terraform, CI/CD\n* GraphQL"

        result = parse_response(AIRequestType.SUGGEST_SKILLS, raw)

        assert result == SkillsResult(skills=["Kubernetes", "Terraform", "CI/CD", "GraphQL"])

    def test_fallback_drops_overlong_items(self) -> None:
        raw = "Go\n" + "x" * 50

        assert parse_response(AIRequestType.SUGGEST_SKILLS, raw) == SkillsResult(skills=["Go"])

    def test_json_without_skills_array(self) -> None:
        result = parse_response(AIRequestType.SUGGEST_SKILLS, '{"skills": "Go"}')

        assert result == SkillsResult(skills=[])


class TestAnalysis:
    def test_no_json_uses_fallback(self) -> None:
        result = parse_response(AIRequestType.ANALYZE_RESUME, "Looks good to me!")

        assert result == AnalysisResult(
            score=50,
            strengths=["Resume content detected"],
            weaknesses=["Analysis parsing failed"],
            suggestions=["Please try again"],
        )
        assert result == analysis_fallback()

    def test_fallback_is_not_shared_between_calls(self) -> None:
        first = parse_response(AIRequestType.ANALYZE_RESUME, "no json")
        assert isinstance(first, AnalysisResult)
        first.strengths.append("Edited by caller")

        second = parse_response(AIRequestType.ANALYZE_RESUME, "no json")

        assert second == analysis_fallback()
        assert isinstance(second, AnalysisResult)
        assert second.strengths is not first.strengths

    def test_full_payload(self) -> None:
        raw = (
            '{"score": 82, "strengths": ["Clear"], "weaknesses": ["Short"], '
            '"suggestions": ["Add metrics"]}'
        )

        result = parse_response(AIRequestType.ANALYZE_RESUME, raw)

        assert result == AnalysisResult(
            score=82, strengths=["Clear"], weaknesses=["Short"], suggestions=["Add metrics"]
        )

    @pytest.mark.parametrize(
        ("raw", "expected"),
        [
            ('{"score": 150}', 100),
            ('{"score": -5}', 0),
            ('{"score": 71.6}', 72),
            ('{"score": "high"}', 50),
            ('{"score": true}', 50),
            ("{}", 50),
            ('{"score": NaN}', 50),
            ('{"score": Infinity}', 50),
            ('{"score": -Infinity}', 50),
            ('{"score": 1e400}', 50),
        ],
    )
    def test_score_is_clamped(self, raw: str, expected: int) -> None:
        result = parse_response(AIRequestType.ANALYZE_RESUME, raw)

        assert isinstance(result, AnalysisResult)
        assert result.score == expected

    def test_missing_lists_default_to_empty(self) -> None:
        result = parse_response(AIRequestType.ANALYZE_RESUME, '{"score": 60}')

        assert result == AnalysisResult(score=60)


class TestOptimization:
    def test_payload(self) -> None:
        raw = 'Result: {"summary": " Tailored. ", "skills": ["Go", "gRPC"]}'

        result = parse_response(AIRequestType.OPTIMIZE_FOR_JD, raw)

        assert result == OptimizationResult(summary="Tailored.", skills=["Go", "gRPC"])

    def test_no_json_yields_empty_result(self) -> None:
        result = parse_response(AIRequestType.OPTIMIZE_FOR_JD, "I cannot help with that.")

        assert result == OptimizationResult(summary="", skills=[])

    def test_missing_fields_default(self) -> None:
        result = parse_response(AIRequestType.OPTIMIZE_FOR_JD, '{"summary": 5}')

        assert result == OptimizationResult()


@pytest.mark.parametrize("request_type", list(AIRequestType))
@pytest.mark.parametrize(
    "raw", ["", "}{", "{{{", "null", '{"score": null}', '{"score": NaN}', '{"score": 1e999}']
)
def test_malformed_output_never_raises(request_type: AIRequestType, raw: str) -> None:
    parse_response(request_type, raw)
