"""Fixed rule set for the content-warning and progress heuristics."""

from __future__ import annotations

import re
from enum import StrEnum

WEAK_WORDS: tuple[str, ...] = (
    "helped",
    "assisted",
    "worked on",
    "responsible for",
    "duties included",
    "was in charge of",
    "participated in",
)

# A digit (optionally a percentage), a $ or # amount, or a count of
# users/customers/clients/projects/sales/revenue.
METRICS_PATTERN = re.compile(
    r"\d+%?|\$\d+|#\d+|\d+\+?\s*(users|customers|clients|projects|sales|revenue)",
    re.IGNORECASE,
)

SUMMARY_MIN_LENGTH = 50
SUMMARY_MAX_LENGTH = 400
BULLET_METRICS_MIN_LENGTH = 20
BULLET_MAX_LENGTH = 150
MIN_RECOMMENDED_SKILLS = 5
MAX_TOTAL_BULLETS = 15

# Progress checks
PROGRESS_SUMMARY_MIN_LENGTH = 20
PROGRESS_MIN_SKILLS = 3


class WarningKind(StrEnum):
    """Category of a content warning, used to pick an AI fix."""

    WEAK_WORDS = "weak-words"
    LONG_TEXT = "long-text"
    MISSING_METRICS = "missing-metrics"
    LENGTH = "length"
    MISSING_SECTION = "missing-section"


class WarningSeverity(StrEnum):
    WARNING = "warning"
    INFO = "info"
