"""Pydantic schema for the health check."""

from __future__ import annotations

from pydantic import BaseModel


class HealthResponse(BaseModel):
    status: str
    version: str
    latex_available: bool
