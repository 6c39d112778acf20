"""Resume routes for the API."""

from __future__ import annotations

import logging
import shutil
import subprocess
import tempfile
from pathlib import Path
from typing import Annotated

from fastapi import APIRouter, BackgroundTasks, Depends, HTTPException, Query, status
from fastapi import Path as PathParam
from fastapi.responses import FileResponse, PlainTextResponse
from pylatex.errors import CompilerError

from resume_builder.api.dependencies import get_current_username, verify_permission
from resume_builder.api.schemas.insights import (
    InsightsResponse,
    ProgressResponse,
    WarningResponse,
)
from resume_builder.api.schemas.resumes import (
    RenderRequest,
    ResumeCreateRequest,
    ResumeResponse,
    ResumeUpdateRequest,
)
from resume_builder.constants.roles import ResumeRole
from resume_builder.models.content_updates import (
    ContentUpdate,
    EducationListUpdate,
    ExperienceListUpdate,
    PersonalInfoUpdate,
    ProjectListUpdate,
    RoleUpdate,
    SkillsUpdate,
    SummaryUpdate,
)
from resume_builder.models.resume_content import content_from_dict
from resume_builder.services import resume as resume_service
from resume_builder.services.editor import ResumeEditor
from resume_builder.services.resume_generator import generate_resume_pdf
from resume_builder.templates import RenderConfig

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/users", tags=["resumes"])

Username = Annotated[str, PathParam(description="Username")]
ResumeId = Annotated[int, PathParam(description="Resume ID")]
CurrentUser = Annotated[str, Depends(get_current_username)]


def _section_updates(data: ResumeUpdateRequest) -> list[ContentUpdate]:
    """Translate the sections present in *data* into tagged updates."""
    provided = data.model_dump(mode="json", by_alias=True, exclude_unset=True, exclude_none=True)
    # Parse through the stored shape so ids and lists are normalized like loaded content.
    parsed = content_from_dict(provided)

    updates: list[ContentUpdate] = []
    if "personalInfo" in provided:
        updates.append(PersonalInfoUpdate(parsed.personal_info))
    if "summary" in provided:
        updates.append(SummaryUpdate(parsed.summary))
    if "experience" in provided:
        updates.append(ExperienceListUpdate(parsed.experience))
    if "projects" in provided:
        updates.append(ProjectListUpdate(parsed.projects))
    if "education" in provided:
        updates.append(EducationListUpdate(parsed.education))
    if "skills" in provided:
        updates.append(SkillsUpdate(parsed.skills))
    if "role" in provided:
        updates.append(RoleUpdate(ResumeRole(parsed.role)))
    return updates


@router.get("/{username}/resumes", response_model=list[ResumeResponse])
def list_resumes(username: Username, current_username: CurrentUser) -> list[ResumeResponse]:
    """List the user's resumes, most recently updated first."""
    verify_permission(current_username, username)
    return [ResumeResponse.from_record(r) for r in resume_service.list_resumes(username)]


@router.post(
    "/{username}/resumes",
    response_model=ResumeResponse,
    status_code=status.HTTP_201_CREATED,
)
def create_resume(
    username: Username,
    data: ResumeCreateRequest,
    current_username: CurrentUser,
) -> ResumeResponse:
    """Create a blank resume."""
    verify_permission(current_username, username)
    record = resume_service.create_resume(
        username, title=data.title, role=data.role, email=data.email
    )
    return ResumeResponse.from_record(record)


@router.get("/{username}/resumes/{resume_id}", response_model=ResumeResponse)
def get_resume(
    username: Username,
    resume_id: ResumeId,
    current_username: CurrentUser,
) -> ResumeResponse:
    """Get one resume."""
    verify_permission(current_username, username)
    return ResumeResponse.from_record(resume_service.get_resume(username, resume_id))


@router.patch("/{username}/resumes/{resume_id}", response_model=ResumeResponse)
def save_resume(
    username: Username,
    resume_id: ResumeId,
    data: ResumeUpdateRequest,
    current_username: CurrentUser,
) -> ResumeResponse:
    """Save a resume. Each provided section replaces the stored one."""
    verify_permission(current_username, username)

    editor = ResumeEditor(resume_service.get_resume(username, resume_id))
    if data.title is not None:
        editor.rename(data.title)
    for update in _section_updates(data):
        editor.apply(update)

    if not editor.dirty:
        return ResumeResponse.from_record(editor.record)
    return ResumeResponse.from_record(editor.save(resume_service.update_resume))


@router.delete("/{username}/resumes/{resume_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_resume(
    username: Username,
    resume_id: ResumeId,
    current_username: CurrentUser,
) -> None:
    """Delete a resume."""
    verify_permission(current_username, username)
    resume_service.delete_resume(username, resume_id)


@router.get("/{username}/resumes/{resume_id}/insights", response_model=InsightsResponse)
def get_insights(
    username: Username,
    resume_id: ResumeId,
    current_username: CurrentUser,
) -> InsightsResponse:
    """Return completion progress and content warnings."""
    verify_permission(current_username, username)
    editor = ResumeEditor(resume_service.get_resume(username, resume_id))
    return InsightsResponse(
        progress=ProgressResponse.from_report(editor.progress()),
        warnings=[WarningResponse.from_warning(w) for w in editor.warnings()],
    )


@router.get(
    "/{username}/resumes/{resume_id}/preview",
    response_class=PlainTextResponse,
    responses={200: {"content": {"text/plain": {}}}},
)
def preview_resume(
    username: Username,
    resume_id: ResumeId,
    current_username: CurrentUser,
    template: Annotated[str, Query(description="modern, classic or minimal")] = "modern",
    font: Annotated[str, Query(description="inter, georgia or merriweather")] = "inter",
) -> PlainTextResponse:
    """Return the LaTeX source of the rendered resume."""
    verify_permission(current_username, username)
    config = RenderConfig.from_names(template, font)
    editor = ResumeEditor(resume_service.get_resume(username, resume_id))
    return PlainTextResponse(editor.render(config).dumps())


@router.post(
    "/{username}/resumes/{resume_id}/export",
    responses={200: {"content": {"application/pdf": {}}}},
)
def export_resume(
    username: Username,
    resume_id: ResumeId,
    data: RenderRequest,
    background_tasks: BackgroundTasks,
    current_username: CurrentUser,
) -> FileResponse:
    """Render and download the resume as PDF."""
    verify_permission(current_username, username)
    config = RenderConfig.from_names(data.template, data.font)
    editor = ResumeEditor(resume_service.get_resume(username, resume_id))
    rendered = editor.render(config)

    tmp_dir = tempfile.mkdtemp()
    try:
        pdf_path = generate_resume_pdf(rendered, Path(tmp_dir) / f"resume_{resume_id}")
    except (CompilerError, FileNotFoundError):
        logger.warning("No LaTeX compiler available to export resume %d", resume_id)
        shutil.rmtree(tmp_dir, ignore_errors=True)
        raise HTTPException(
            status_code=status.HTTP_502_BAD_GATEWAY,
            detail="LaTeX compiler not found. Please install pdflatex.",
        ) from None
    except subprocess.CalledProcessError:
        logger.warning("LaTeX compilation failed for resume %d", resume_id)
        shutil.rmtree(tmp_dir, ignore_errors=True)
        raise HTTPException(
            status_code=status.HTTP_502_BAD_GATEWAY,
            detail="LaTeX compilation failed. Check that all required packages are installed.",
        ) from None

    background_tasks.add_task(shutil.rmtree, tmp_dir, True)
    filename = "".join(c if c.isalnum() or c in "-_" else "_" for c in editor.title) or "resume"
    return FileResponse(
        path=str(pdf_path),
        media_type="application/pdf",
        filename=f"{filename}.pdf",
    )
