"""Editor controller for a single resume.

``ResumeEditor`` owns one :class:`ResumeRecord` for the length of an
editing session. Every mutation marks the editor dirty; only an explicit
:meth:`ResumeEditor.save` persists and clears the flag.

AI actions build their new content completely before assigning it, so a
failed call leaves the content exactly as it was.
"""

from __future__ import annotations

import copy
import dataclasses
import logging
import threading
from collections.abc import Callable, Iterator
from contextlib import contextmanager
from typing import TYPE_CHECKING, cast

from resume_builder.constants.roles import ResumeRole, get_role_keywords, get_role_label
from resume_builder.errors import NotFoundError, ValidationError
from resume_builder.models.content_updates import ContentUpdate, apply_update
from resume_builder.models.resume_content import (
    Experience,
    ResumeContent,
    ResumeRecord,
    unique_skills,
)
from resume_builder.services import resume as resume_service
from resume_builder.services.ai_enhance import enhance
from resume_builder.services.ai_requests import (
    analyze_request,
    improve_experience_request,
    optimize_request,
    suggest_skills_request,
    summary_request,
)
from resume_builder.services.ai_responses import (
    AnalysisResult,
    ImprovedExperienceResult,
    OptimizationResult,
    SkillsResult,
    SummaryResult,
)
from resume_builder.services.content_warnings import ContentWarning, generate_warnings
from resume_builder.services.progress import ProgressReport, compute_progress
from resume_builder.services.resume_generator import render_resume

if TYPE_CHECKING:
    from resume_builder.services.llm_service import LLMService
    from resume_builder.templates import RenderConfig, RenderedResume

logger = logging.getLogger(__name__)

__all__ = ["ResumeEditor", "SaveFn"]

SaveFn = Callable[..., ResumeRecord]

FIXABLE_SECTIONS = ("summary", "skills", "experience")


class ResumeEditor:
    """Single-writer editing session over one resume."""

    def __init__(self, record: ResumeRecord, llm_service: LLMService | None = None) -> None:
        self._record = copy.deepcopy(record)
        self._llm_service = llm_service
        self._dirty = False
        self._busy: set[str] = set()
        self._busy_lock = threading.Lock()

    # ------------------------------------------------------------------
    # state
    # ------------------------------------------------------------------

    @property
    def record(self) -> ResumeRecord:
        return self._record

    @property
    def content(self) -> ResumeContent:
        return self._record.content

    @property
    def title(self) -> str:
        return self._record.title

    @property
    def dirty(self) -> bool:
        """True when there are changes not yet saved."""
        return self._dirty

    def is_busy(self, action: str) -> bool:
        return action in self._busy

    # ------------------------------------------------------------------
    # mutations
    # ------------------------------------------------------------------

    def replace_content(self, content: ResumeContent) -> None:
        self._set_content(copy.deepcopy(content))

    def apply(self, update: ContentUpdate) -> None:
        """Replace the single top-level field named by *update*."""
        self._set_content(apply_update(self.content, update))

    def rename(self, title: str) -> None:
        self._record = dataclasses.replace(self._record, title=title)
        self._dirty = True

    def save(self, save_fn: SaveFn | None = None) -> ResumeRecord:
        """Persist title and content.

        Args:
            save_fn: Persistence call taking ``(owner, id, *, title, content)``.
                Defaults to :func:`resume_builder.services.resume.update_resume`.

        Raises:
            NotFoundError: The resume no longer exists.
            UpstreamError: The store failed. The editor stays dirty.
        """
        save_fn = save_fn or resume_service.update_resume
        saved = save_fn(
            self._record.owner,
            self._record.id,
            title=self._record.title,
            content=self._record.content,
        )
        self._record = saved
        self._dirty = False
        logger.info("Saved resume %d for %s", saved.id, saved.owner)
        return saved

    def _set_content(self, content: ResumeContent) -> None:
        self._record = dataclasses.replace(self._record, content=content)
        self._dirty = True

    # ------------------------------------------------------------------
    # derived views
    # ------------------------------------------------------------------

    def progress(self) -> ProgressReport:
        return compute_progress(self.content)

    def warnings(self) -> list[ContentWarning]:
        return generate_warnings(self.content)

    def render(self, config: RenderConfig | None = None) -> RenderedResume:
        return render_resume(self.content, config)

    # ------------------------------------------------------------------
    # AI actions
    # ------------------------------------------------------------------

    @contextmanager
    def _action(self, name: str) -> Iterator[bool]:
        """Mark *name* busy for the duration of the block.

        Yields False when *name* is already running; the caller must then
        return without doing anything.
        """
        with self._busy_lock:
            if name in self._busy:
                acquired = False
            else:
                self._busy.add(name)
                acquired = True
        if not acquired:
            logger.info("Ignoring %s: already in progress", name)
            yield False
            return
        try:
            yield True
        finally:
            with self._busy_lock:
                self._busy.discard(name)

    def generate_summary(self) -> str | None:
        """Replace the summary with an AI-written one.

        Returns:
            The new summary, or None if the action was already running.
        """
        with self._action("generate-summary") as acquired:
            if not acquired:
                return None
            summary = self._generated_summary(self.content)
            if summary:
                self._set_content(dataclasses.replace(self.content, summary=summary))
            return summary

    def improve_experience(self, experience_id: str) -> list[str] | None:
        """Rewrite the bullets of one experience entry.

        Raises:
            NotFoundError: No entry has *experience_id*.
            ValidationError: The entry has no non-blank bullets.
        """
        with self._action("improve-experience") as acquired:
            if not acquired:
                return None
            index = self._experience_index(experience_id)
            entry = self.content.experience[index]
            if not entry.non_blank_bullets():
                raise ValidationError("Add some bullet points first.")
            improved = self._improved_experience(entry)
            if improved is not None:
                experience = copy.deepcopy(self.content.experience)
                experience[index] = improved
                self._set_content(dataclasses.replace(self.content, experience=experience))
                return list(improved.bullets)
            return entry.non_blank_bullets()

    def suggest_skills(self) -> list[str] | None:
        """Append AI-suggested skills for the target role.

        Returns:
            Only the newly added skills.

        Raises:
            ValidationError: No target role can be derived.
        """
        with self._action("suggest-skills") as acquired:
            if not acquired:
                return None
            added = self._suggested_skills(self.content)
            if added:
                skills = [*self.content.skills, *added]
                self._set_content(dataclasses.replace(self.content, skills=skills))
            return added

    def analyze(self) -> AnalysisResult | None:
        """Score the resume. Never changes content."""
        with self._action("analyze-resume") as acquired:
            if not acquired:
                return None
            return cast(AnalysisResult, enhance(analyze_request(self.content), self._llm_service))

    def optimize_for_job(self, job_description: str) -> OptimizationResult | None:
        """Propose a summary and skill list tailored to *job_description*.

        The proposal is returned for review; use :meth:`apply_optimization`
        to accept it.

        Raises:
            ValidationError: *job_description* is blank.
        """
        with self._action("optimize-for-jd") as acquired:
            if not acquired:
                return None
            if not job_description.strip():
                raise ValidationError("Please paste a job description to optimize your resume.")
            request = optimize_request(self.content, job_description)
            return cast(OptimizationResult, enhance(request, self._llm_service))

    def apply_optimization(
        self,
        result: OptimizationResult,
        *,
        accept_summary: bool = True,
        accept_skills: bool = True,
    ) -> bool:
        """Apply the accepted parts of *result*. Returns True if anything changed."""
        changes: dict[str, object] = {}
        if accept_summary and result.summary and result.summary != self.content.summary:
            changes["summary"] = result.summary
        if accept_skills and result.skills:
            changes["skills"] = unique_skills(result.skills)
        if not changes:
            return False
        self._set_content(dataclasses.replace(self.content, **changes))
        return True

    def fix_warning(self, kind: str, section: str) -> bool | None:
        """Run the AI rewrite that addresses a fixable warning in *section*.

        Returns:
            True if content changed, None if a fix was already running.

        Raises:
            ValidationError: *section* has no AI fix.
        """
        if section not in FIXABLE_SECTIONS:
            raise ValidationError(f"No AI fix available for section {section!r}")

        with self._action("fix-warning") as acquired:
            if not acquired:
                return None
            logger.info("Fixing %s warning in %s", kind, section)
            content = self.content
            match section:
                case "summary":
                    summary = self._generated_summary(content)
                    if not summary:
                        return False
                    updated = dataclasses.replace(content, summary=summary)
                case "skills":
                    added = self._suggested_skills(content)
                    if not added:
                        return False
                    updated = dataclasses.replace(content, skills=[*content.skills, *added])
                case _:
                    experience = copy.deepcopy(content.experience)
                    changed = False
                    for i, entry in enumerate(experience):
                        if not entry.non_blank_bullets():
                            continue
                        improved = self._improved_experience(entry)
                        if improved is not None:
                            experience[i] = improved
                            changed = True
                    if not changed:
                        return False
                    updated = dataclasses.replace(content, experience=experience)
            self._set_content(updated)
            return True

    # -- helpers that never touch editor state -----------------------------

    def _experience_index(self, experience_id: str) -> int:
        for i, entry in enumerate(self.content.experience):
            if entry.id == experience_id:
                return i
        raise NotFoundError(f"Experience {experience_id} not found")

    def _generated_summary(self, content: ResumeContent) -> str:
        result = cast(SummaryResult, enhance(summary_request(content), self._llm_service))
        return result.summary

    def _improved_experience(self, entry: Experience) -> Experience | None:
        request = improve_experience_request(
            entry.position, entry.company, entry.non_blank_bullets()
        )
        result = cast(ImprovedExperienceResult, enhance(request, self._llm_service))
        bullets = result.bullets()
        if not bullets:
            return None
        return dataclasses.replace(copy.deepcopy(entry), bullets=bullets)

    def _target_role(self, content: ResumeContent) -> str:
        latest = content.experience[0].position.strip() if content.experience else ""
        if latest:
            return latest
        if content.role != ResumeRole.GENERAL:
            return get_role_label(content.role)
        raise ValidationError("Add a position to your experience first.")

    def _suggested_skills(self, content: ResumeContent) -> list[str]:
        role = self._target_role(content)
        request = suggest_skills_request(role, content.skills, get_role_keywords(content.role))
        result = cast(SkillsResult, enhance(request, self._llm_service))
        added: list[str] = []
        for skill in result.skills:
            cleaned = skill.strip()
            if cleaned and cleaned not in content.skills and cleaned not in added:
                added.append(cleaned)
        return added
