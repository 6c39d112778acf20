from __future__ import annotations

from collections.abc import Iterator
from pathlib import Path

import pytest

import resume_builder.data.db as app_db
from resume_builder.data.db import init_db


@pytest.fixture
def api_db(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> Iterator[None]:
    """Use a temporary SQLite DB for API tests."""
    db_path = tmp_path / "api.db"
    monkeypatch.setenv("DB_URL", f"sqlite:///{db_path.as_posix()}")
    app_db._engine = None
    app_db._SessionLocal = None
    init_db()
    yield
    # Dispose engine to release connections
    if app_db._engine is not None:
        app_db._engine.dispose()
        app_db._engine = None
        app_db._SessionLocal = None


@pytest.fixture(autouse=True)
def _auto_api_db(request: pytest.FixtureRequest) -> None:
    """Automatically apply the api_db fixture to tests in API test files."""
    # Check if test file name contains "api" (case-insensitive)
    test_file_path = Path(str(request.node.fspath))
    if "api" in test_file_path.stem.lower():
        request.getfixturevalue("api_db")
