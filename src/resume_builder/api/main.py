"""FastAPI application entry point for the resume builder API."""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from typing import TYPE_CHECKING

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from resume_builder import __version__
from resume_builder.api.routes import ai, health, resumes
from resume_builder.errors import ResumeBuilderError

if TYPE_CHECKING:
    from collections.abc import AsyncIterator

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Initialize resources on startup and clean up on shutdown."""
    from resume_builder.data.db import init_db

    init_db()
    yield


app = FastAPI(
    title="Resume Builder API",
    description="API for editing, scoring, AI-enhancing and exporting resumes",
    version=__version__,
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.exception_handler(ResumeBuilderError)
async def resume_builder_error_handler(request: Request, exc: ResumeBuilderError) -> JSONResponse:
    """Turn any domain error into a single ``{"error": message}`` body."""
    logger.info("%s %s -> %d: %s", request.method, request.url.path, exc.status_code, exc.message)
    return JSONResponse(status_code=exc.status_code, content={"error": exc.message})


app.include_router(health.router)
app.include_router(resumes.router, prefix="/api")
app.include_router(ai.router, prefix="/api")


def main() -> None:
    """Start the development server."""
    import uvicorn

    uvicorn.run(
        "resume_builder.api.main:app",
        host="0.0.0.0",
        port=8000,
        reload=True,
    )


if __name__ == "__main__":
    main()
