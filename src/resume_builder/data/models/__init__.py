"""ORM models package for database tables.

This package provides SQLAlchemy ORM models representing database tables:
- User: Owner of resumes (identity comes from the authentication layer)
- Resume: A titled resume whose sections are stored as JSON

All models inherit from the shared Base declarative class defined in data.db.
"""

from resume_builder.data.db import Base
from resume_builder.data.models.resume import Resume
from resume_builder.data.models.user import User

__all__ = ["Base", "Resume", "User"]
