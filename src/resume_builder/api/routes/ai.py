"""AI enhancement routes.

Actions on a stored resume return the proposed content without saving
it; the client saves through the regular PATCH endpoint.
"""

from __future__ import annotations

import dataclasses
from typing import Annotated, Any

from fastapi import APIRouter, Depends, HTTPException, status
from fastapi import Path as PathParam

from resume_builder.api.dependencies import get_current_username, verify_permission
from resume_builder.api.schemas.ai import (
    AIAction,
    AIActionRequest,
    AIActionResponse,
    AnalysisResponse,
    EnhanceRequest,
    OptimizationResponse,
)
from resume_builder.api.schemas.resumes import ResumeContentSchema
from resume_builder.errors import ValidationError
from resume_builder.services import resume as resume_service
from resume_builder.services.ai_enhance import enhance
from resume_builder.services.ai_requests import request_from_payload
from resume_builder.services.editor import ResumeEditor
from resume_builder.services.llm_service import LLMService

router = APIRouter(tags=["ai"])


def get_llm_service() -> LLMService | None:
    """LLM service used by AI routes; None builds one from the environment."""
    return None


LLMDependency = Annotated[LLMService | None, Depends(get_llm_service)]


@router.post(
    "/users/{username}/resumes/{resume_id}/ai/{action}",
    response_model=AIActionResponse,
)
def run_ai_action(
    username: Annotated[str, PathParam(description="Username")],
    resume_id: Annotated[int, PathParam(description="Resume ID")],
    action: AIAction,
    data: AIActionRequest,
    current_username: Annotated[str, Depends(get_current_username)],
    llm_service: LLMDependency,
) -> AIActionResponse:
    """Run an AI action against a stored resume and return the proposal."""
    verify_permission(current_username, username)
    editor = ResumeEditor(resume_service.get_resume(username, resume_id), llm_service)

    analysis = None
    optimization = None
    match action:
        case AIAction.GENERATE_SUMMARY:
            editor.generate_summary()
        case AIAction.IMPROVE_EXPERIENCE:
            if not data.experience_id:
                raise ValidationError("experienceId is required")
            editor.improve_experience(data.experience_id)
        case AIAction.SUGGEST_SKILLS:
            editor.suggest_skills()
        case AIAction.ANALYZE_RESUME:
            result = editor.analyze()
            if result is not None:
                analysis = AnalysisResponse(**dataclasses.asdict(result))
        case AIAction.OPTIMIZE_FOR_JD:
            proposal = editor.optimize_for_job(data.job_description or "")
            if proposal is not None:
                optimization = OptimizationResponse(**dataclasses.asdict(proposal))
                editor.apply_optimization(
                    proposal,
                    accept_summary=data.accept_summary,
                    accept_skills=data.accept_skills,
                )
        case AIAction.FIX_WARNING:
            if not data.section:
                raise ValidationError("section is required")
            editor.fix_warning(data.kind or "", data.section)
        case _:  # pragma: no cover
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Unknown action")

    return AIActionResponse(
        action=action,
        changed=editor.dirty,
        content=ResumeContentSchema.from_content(editor.content),
        analysis=analysis,
        optimization=optimization,
    )


@router.post("/ai/enhance")
def enhance_endpoint(
    data: EnhanceRequest,
    current_username: Annotated[str, Depends(get_current_username)],
    llm_service: LLMDependency,
) -> dict[str, Any]:
    """Run one raw ``{type, content?, context}`` request and return the typed result."""
    request = request_from_payload(data.type, data.content, data.context)
    return dataclasses.asdict(enhance(request, llm_service))
