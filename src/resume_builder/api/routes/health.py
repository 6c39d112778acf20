"""Liveness check, plus whether PDF export can run on this host."""

from __future__ import annotations

import shutil

from fastapi import APIRouter

from resume_builder import __version__
from resume_builder.api.schemas.health import HealthResponse
from resume_builder.services.resume_generator import DEFAULT_COMPILER

router = APIRouter(tags=["health"])


@router.get("/health", response_model=HealthResponse)
def health_check() -> HealthResponse:
    return HealthResponse(
        status="healthy",
        version=__version__,
        latex_available=shutil.which(DEFAULT_COMPILER) is not None,
    )
