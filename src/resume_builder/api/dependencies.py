"""Shared dependencies for API routes."""

from __future__ import annotations

from typing import Annotated

from fastapi import Header, HTTPException, status


def get_current_username(
    x_username: Annotated[
        str | None,
        Header(description="Username asserted by the authentication proxy in front of the API."),
    ] = None,
) -> str:
    """Return the caller's username from the ``X-Username`` header.

    Raises:
        HTTPException: If the header is missing (401).
    """
    if not x_username:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Missing authentication. Please provide X-Username header.",
        )
    return x_username


def verify_permission(current_username: str, username: str) -> None:
    """Reject access to another user's resumes.

    Raises:
        HTTPException: 403 if *current_username* is not *username*.
    """
    if current_username != username:
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="You can only access your own resumes",
        )
