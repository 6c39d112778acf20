"""Error taxonomy for user-triggered actions.

Every error raised from a service or editor action derives from
:class:`ResumeBuilderError` and carries a human-readable message plus the
HTTP status the API boundary should answer with. Nothing here is fatal to
the process; each error is local to the one action that raised it.
"""

from __future__ import annotations

__all__ = [
    "NotFoundError",
    "QuotaExceededError",
    "RateLimitedError",
    "ResumeBuilderError",
    "UpstreamError",
    "ValidationError",
]


class ResumeBuilderError(Exception):
    """Base class for errors surfaced to the user as a single notification."""

    status_code: int = 500
    default_message: str = "Something went wrong. Please try again."

    def __init__(self, message: str | None = None) -> None:
        self.message = message or self.default_message
        super().__init__(self.message)


class ValidationError(ResumeBuilderError):
    """Required input is missing or invalid before an action can run."""

    status_code = 422
    default_message = "The request is missing required input."


class NotFoundError(ResumeBuilderError):
    """A referenced resume (or entry within it) does not exist."""

    status_code = 404
    default_message = "Resume not found."


class RateLimitedError(ResumeBuilderError):
    """The AI service rejected the call because of rate limiting."""

    status_code = 429
    default_message = "Rate limit exceeded. Please try again later."


class QuotaExceededError(ResumeBuilderError):
    """The AI service credits or quota are exhausted."""

    status_code = 402
    default_message = "AI credits exhausted. Please add credits."


class UpstreamError(ResumeBuilderError):
    """The AI service or the persistence layer failed for any other reason."""

    status_code = 502
    default_message = "An upstream service failed. Please try again."
