"""Resume owner model.

Authentication lives outside this service; a user row only anchors
ownership of resumes and is created the first time a username saves one.
"""

from __future__ import annotations

from datetime import UTC, datetime
from typing import TYPE_CHECKING

from sqlalchemy import DateTime, Integer, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from resume_builder.data.db import Base

if TYPE_CHECKING:
    from resume_builder.data.models.resume import Resume


class User(Base):
    """Resume owner.

    Attributes:
        id: Auto-incrementing primary key.
        username: Unique handle supplied by the authentication layer.
        created_at: UTC timestamp when the row was created.
    """

    __tablename__ = "users"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    username: Mapped[str] = mapped_column(String(128), unique=True, nullable=False, index=True)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False, default=lambda: datetime.now(UTC)
    )
    resumes: Mapped[list[Resume]] = relationship(
        "Resume", back_populates="user", cascade="all, delete-orphan"
    )
