"""Tests for AI enhancement API endpoints."""

from __future__ import annotations

from collections.abc import Iterator

import pytest
from fastapi.testclient import TestClient

from resume_builder.api.main import app
from resume_builder.api.routes.ai import get_llm_service
from resume_builder.services.llm_providers import LLMError, LLMProvider
from resume_builder.services.llm_service import LLMService

USERNAME = "testuser_ai"
HEADERS = {"X-Username": USERNAME}


class FakeProvider(LLMProvider):
    """Replies by request type; raises ``error`` when set."""

    def __init__(self) -> None:
        self.prompts: list[str] = []
        self.error: LLMError | None = None

    def send_prompt(self, prompt: str, config: dict) -> str:
        self.prompts.append(prompt)
        if self.error is not None:
            raise self.error
        if "Generate a professional summary" in prompt:
            return "Engineer who ships reliable systems."
        if "Improve these experience bullet points" in prompt:
            return "Built 3 services\nCut costs by 20%"
        if "Suggest skills" in prompt:
            return '```json\n{"skills": ["Docker", "Python"]}\n```'
        if "Analyze this resume" in prompt:
            return 'Here you go: {"score": 120, "strengths": ["Concise"]}'
        if "Job Description" in prompt:
            return '{"summary": "Go engineer.", "skills": ["Go"]}'
        return ""


@pytest.fixture
def provider() -> Iterator[FakeProvider]:
    fake = FakeProvider()
    app.dependency_overrides[get_llm_service] = lambda: LLMService(provider=fake)
    yield fake
    app.dependency_overrides.pop(get_llm_service, None)


@pytest.fixture
def client(provider: FakeProvider) -> TestClient:
    return TestClient(app)


@pytest.fixture
def resume_id(client: TestClient) -> int:
    created = client.post(
        f"/api/users/{USERNAME}/resumes", json={"role": "backend"}, headers=HEADERS
    )
    resume_id = created.json()["id"]
    client.patch(
        f"/api/users/{USERNAME}/resumes/{resume_id}",
        json={
            "summary": "Old summary.",
            "experience": [
                {"id": "exp-1", "position": "Engineer", "description": ["Worked on services"]}
            ],
            "skills": ["Python"],
        },
        headers=HEADERS,
    )
    return resume_id


def _action(client: TestClient, resume_id: int, action: str, body: dict | None = None):
    return client.post(
        f"/api/users/{USERNAME}/resumes/{resume_id}/ai/{action}",
        json=body or {},
        headers=HEADERS,
    )


def _stored(client: TestClient, resume_id: int) -> dict:
    return client.get(f"/api/users/{USERNAME}/resumes/{resume_id}", headers=HEADERS).json()


class TestResumeActions:
    def test_generate_summary_proposes_without_saving(
        self, client: TestClient, resume_id: int
    ) -> None:
        response = _action(client, resume_id, "generate-summary")

        assert response.status_code == 200
        data = response.json()
        assert data["action"] == "generate-summary"
        assert data["changed"] is True
        assert data["content"]["summary"] == "Engineer who ships reliable systems."
        assert _stored(client, resume_id)["content"]["summary"] == "Old summary."

    def test_improve_experience(self, client: TestClient, resume_id: int) -> None:
        response = _action(client, resume_id, "improve-experience", {"experienceId": "exp-1"})

        assert response.status_code == 200
        assert response.json()["content"]["experience"][0]["description"] == [
            "Built 3 services",
            "Cut costs by 20%",
        ]

    def test_improve_experience_requires_id(self, client: TestClient, resume_id: int) -> None:
        response = _action(client, resume_id, "improve-experience")

        assert response.status_code == 422
        assert response.json() == {"error": "experienceId is required"}

    def test_improve_unknown_experience(self, client: TestClient, resume_id: int) -> None:
        response = _action(client, resume_id, "improve-experience", {"experienceId": "nope"})

        assert response.status_code == 404

    def test_suggest_skills_adds_only_new_skills(
        self, client: TestClient, resume_id: int
    ) -> None:
        response = _action(client, resume_id, "suggest-skills")

        assert response.json()["content"]["skills"] == ["Python", "Docker"]

    def test_analyze_clamps_score_and_keeps_content(
        self, client: TestClient, resume_id: int
    ) -> None:
        response = _action(client, resume_id, "analyze-resume")

        data = response.json()
        assert data["changed"] is False
        assert data["analysis"] == {
            "score": 100,
            "strengths": ["Concise"],
            "weaknesses": [],
            "suggestions": [],
        }

    def test_optimize_for_job(self, client: TestClient, resume_id: int) -> None:
        response = _action(
            client,
            resume_id,
            "optimize-for-jd",
            {"jobDescription": "Go engineer wanted", "acceptSkills": False},
        )

        data = response.json()
        assert data["optimization"] == {"summary": "Go engineer.", "skills": ["Go"]}
        assert data["content"]["summary"] == "Go engineer."
        assert data["content"]["skills"] == ["Python"]

    def test_optimize_requires_job_description(
        self, client: TestClient, resume_id: int, provider: FakeProvider
    ) -> None:
        response = _action(client, resume_id, "optimize-for-jd", {"jobDescription": "  "})

        assert response.status_code == 422
        assert provider.prompts == []

    def test_fix_warning(self, client: TestClient, resume_id: int) -> None:
        response = _action(
            client, resume_id, "fix-warning", {"kind": "missing-section", "section": "summary"}
        )

        assert response.json()["content"]["summary"] == "Engineer who ships reliable systems."

    def test_fix_warning_unfixable_section(self, client: TestClient, resume_id: int) -> None:
        response = _action(
            client, resume_id, "fix-warning", {"kind": "missing-section", "section": "education"}
        )

        assert response.status_code == 422

    def test_unknown_action(self, client: TestClient, resume_id: int) -> None:
        assert _action(client, resume_id, "write-cover-letter").status_code == 422

    @pytest.mark.parametrize(
        ("status", "expected_status", "message"),
        [
            (429, 429, "Rate limit exceeded. Please try again later."),
            (402, 402, "AI credits exhausted. Please add credits."),
            (500, 502, "AI service error. Please try again."),
        ],
    )
    def test_provider_errors_are_mapped(
        self,
        client: TestClient,
        resume_id: int,
        provider: FakeProvider,
        status: int,
        expected_status: int,
        message: str,
    ) -> None:
        provider.error = LLMError("provider failed", status=status)

        response = _action(client, resume_id, "generate-summary")

        assert response.status_code == expected_status
        assert response.json() == {"error": message}

    def test_other_users_resume(self, client: TestClient, resume_id: int) -> None:
        response = client.post(
            f"/api/users/{USERNAME}/resumes/{resume_id}/ai/generate-summary",
            json={},
            headers={"X-Username": "intruder"},
        )

        assert response.status_code == 403


class TestEnhanceEndpoint:
    def test_suggest_skills(self, client: TestClient) -> None:
        response = client.post(
            "/api/ai/enhance",
            json={
                "type": "suggest-skills",
                "context": {"jobRole": "Backend Developer", "existingSkills": ["Python"]},
            },
            headers=HEADERS,
        )

        assert response.status_code == 200
        assert response.json() == {"skills": ["Docker", "Python"]}

    def test_improve_experience_returns_raw_text(self, client: TestClient) -> None:
        response = client.post(
            "/api/ai/enhance",
            json={
                "type": "improve-experience",
                "content": "did things",
                "context": {"position": "Engineer", "company": "Acme"},
            },
            headers=HEADERS,
        )

        assert response.json() == {"improved": "Built 3 services\nCut costs by 20%"}

    def test_invalid_type(self, client: TestClient, provider: FakeProvider) -> None:
        response = client.post(
            "/api/ai/enhance", json={"type": "write-poem", "context": {}}, headers=HEADERS
        )

        assert response.status_code == 422
        assert response.json() == {"error": "Invalid enhancement type"}
        assert provider.prompts == []

    def test_requires_authentication(self, client: TestClient) -> None:
        response = client.post("/api/ai/enhance", json={"type": "suggest-skills"})

        assert response.status_code == 401
