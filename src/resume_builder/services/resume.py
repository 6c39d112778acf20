"""Resume persistence service.

CRUD over resume records scoped to their owning user. Records are
returned as :class:`ResumeRecord` envelopes with typed content; the JSON
column shape never leaves this module.
"""

from __future__ import annotations

import logging
from datetime import UTC, datetime

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from resume_builder.constants.roles import ResumeRole
from resume_builder.data.db import get_session
from resume_builder.data.models import Resume, User
from resume_builder.errors import NotFoundError, UpstreamError
from resume_builder.models.resume_content import (
    ResumeContent,
    ResumeRecord,
    blank_content,
    content_from_dict,
    content_to_dict,
)

logger = logging.getLogger(__name__)

__all__ = [
    "DEFAULT_TITLE",
    "create_resume",
    "delete_resume",
    "get_resume",
    "list_resumes",
    "update_resume",
]

DEFAULT_TITLE = "Untitled Resume"


def _to_record(resume: Resume, username: str) -> ResumeRecord:
    return ResumeRecord(
        id=resume.id,
        owner=username,
        title=resume.title,
        content=content_from_dict(resume.content),
        created_at=resume.created_at,
        updated_at=resume.updated_at,
    )


def _get_user_by_username(session: Session, username: str) -> User | None:
    """Get a user by username."""
    return session.query(User).filter(User.username == username).first()


def _get_owned_resume(session: Session, username: str, resume_id: int) -> Resume:
    """Return the resume *resume_id* if *username* owns it.

    Raises:
        NotFoundError: If the resume does not exist or belongs to someone else.
    """
    resume = (
        session.query(Resume)
        .join(User)
        .filter(Resume.id == resume_id, User.username == username)
        .first()
    )
    if resume is None:
        raise NotFoundError(f"Resume {resume_id} not found")
    return resume


def list_resumes(username: str) -> list[ResumeRecord]:
    """Return every resume owned by *username*, most recently updated first."""
    try:
        with get_session() as session:
            resumes = (
                session.query(Resume)
                .join(User)
                .filter(User.username == username)
                .order_by(Resume.updated_at.desc(), Resume.id.desc())
                .all()
            )
            return [_to_record(r, username) for r in resumes]
    except SQLAlchemyError as e:
        logger.exception("Failed to list resumes for %s", username)
        raise UpstreamError("Failed to load resumes. Please try again.") from e


def get_resume(username: str, resume_id: int) -> ResumeRecord:
    """Return one resume owned by *username*.

    Raises:
        NotFoundError: If no such resume exists for this user.
        UpstreamError: If the database call fails.
    """
    try:
        with get_session() as session:
            return _to_record(_get_owned_resume(session, username, resume_id), username)
    except SQLAlchemyError as e:
        logger.exception("Failed to get resume %d for %s", resume_id, username)
        raise UpstreamError("Failed to load resume. Please try again.") from e


def create_resume(
    username: str,
    *,
    title: str = DEFAULT_TITLE,
    role: ResumeRole | str = ResumeRole.GENERAL,
    email: str = "",
    content: ResumeContent | None = None,
) -> ResumeRecord:
    """Insert a new resume for *username*, creating the owner row if needed.

    Args:
        username: Owner of the new resume.
        title: Resume title.
        role: Target role stored in blank content.
        email: Pre-filled contact email for blank content.
        content: Initial content; blank content is used when omitted.
    """
    initial = content if content is not None else blank_content(email=email, role=role)
    try:
        with get_session() as session:
            user = _get_user_by_username(session, username)
            if user is None:
                user = User(username=username)
                session.add(user)
                session.flush()

            resume = Resume(user_id=user.id, title=title, content=content_to_dict(initial))
            session.add(resume)
            session.flush()
            session.refresh(resume)
            logger.info("Created resume %d for %s", resume.id, username)
            return _to_record(resume, username)
    except SQLAlchemyError as e:
        logger.exception("Failed to create resume for %s", username)
        raise UpstreamError("Failed to create resume. Please try again.") from e


def update_resume(
    username: str,
    resume_id: int,
    *,
    title: str,
    content: ResumeContent,
) -> ResumeRecord:
    """Replace the title and content of an existing resume.

    Raises:
        NotFoundError: If no such resume exists for this user.
        UpstreamError: If the database call fails.
    """
    try:
        with get_session() as session:
            resume = _get_owned_resume(session, username, resume_id)
            resume.title = title
            resume.content = content_to_dict(content)
            resume.updated_at = datetime.now(UTC)
            session.flush()
            return _to_record(resume, username)
    except SQLAlchemyError as e:
        logger.exception("Failed to update resume %d for %s", resume_id, username)
        raise UpstreamError("Failed to save resume. Please try again.") from e


def delete_resume(username: str, resume_id: int) -> None:
    """Delete a resume owned by *username*.

    Raises:
        NotFoundError: If no such resume exists for this user.
        UpstreamError: If the database call fails.
    """
    try:
        with get_session() as session:
            session.delete(_get_owned_resume(session, username, resume_id))
    except SQLAlchemyError as e:
        logger.exception("Failed to delete resume %d for %s", resume_id, username)
        raise UpstreamError("Failed to delete resume. Please try again.") from e
