from __future__ import annotations

from resume_builder.constants.heuristics_constants import (
    METRICS_PATTERN,
    WEAK_WORDS,
    WarningKind,
    WarningSeverity,
)
from resume_builder.constants.roles import (
    ROLE_METADATA,
    ResumeRole,
    RoleMetadata,
    get_role_keywords,
    get_role_label,
)

__all__ = [
    "METRICS_PATTERN",
    "ROLE_METADATA",
    "ResumeRole",
    "RoleMetadata",
    "WEAK_WORDS",
    "WarningKind",
    "WarningSeverity",
    "get_role_keywords",
    "get_role_label",
]
