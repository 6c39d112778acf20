"""AI enhancement: prompt -> text-generation provider -> typed result.

This is the only translator between the raw provider interface
(``text | LLMError(status)``) and typed domain results and errors.
"""

from __future__ import annotations

import logging

from resume_builder.errors import (
    QuotaExceededError,
    RateLimitedError,
    ResumeBuilderError,
    UpstreamError,
)
from resume_builder.services.ai_requests import AIRequest, build_prompts
from resume_builder.services.ai_responses import AIResult, parse_response
from resume_builder.services.llm_providers import LLMError
from resume_builder.services.llm_service import LLMService

logger = logging.getLogger(__name__)

__all__ = ["enhance", "map_llm_error"]


def map_llm_error(error: LLMError) -> ResumeBuilderError:
    """Translate a provider failure into the user-facing error taxonomy."""
    if error.status == 429:
        return RateLimitedError()
    if error.status == 402:
        return QuotaExceededError()
    return UpstreamError("AI service error. Please try again.")


def enhance(request: AIRequest, llm_service: LLMService | None = None) -> AIResult:
    """Run *request* against the text-generation provider.

    Args:
        request: Typed AI request.
        llm_service: Service to use; built from the environment when omitted.

    Returns:
        The normalized result for the request type. Malformed model output
        yields the documented fallback values, never an exception.

    Raises:
        RateLimitedError: Provider answered 429.
        QuotaExceededError: Provider answered 402.
        UpstreamError: Provider is not configured or failed otherwise.
    """
    prompts = build_prompts(request)

    try:
        service = llm_service or LLMService()
    except LLMError as e:
        logger.warning("LLM service unavailable: %s", e)
        raise UpstreamError("AI service is not configured.") from e

    try:
        raw = service.generate_llm_response(
            system_instructions=prompts.system,
            user_content=prompts.user,
        )
    except LLMError as e:
        logger.warning("AI request %s failed (status=%s): %s", request.type, e.status, e)
        raise map_llm_error(e) from e

    return parse_response(request.type, raw)
