"""
Pytest configuration for backend tests.

Provides isolated SQLite databases using temporary files (rather than in-memory)
to support multiple connections and sessions.

Fixtures:
- database (session scope): an initialized storage client with all tables created.
- db_session (function scope): a clean Session per test, with FK enforcement on.
- client (function scope): a TestClient over a fresh app and a fresh database file;
  entering the client runs the lifespan (init/close of the storage client).
"""

from __future__ import annotations

import os
import sys
from pathlib import Path
from typing import Generator

import pytest


# Ensure the 'backend' directory is on sys.path so we can import storefront modules when running tests from repo root
CURRENT_DIR = Path(__file__).parent
BACKEND_ROOT = (CURRENT_DIR / "..").resolve()
if str(BACKEND_ROOT) not in sys.path:
    sys.path.insert(0, str(BACKEND_ROOT))

# Keep the module-level application from pointing at a developer database
os.environ.setdefault("DATABASE_URL", "sqlite:///:memory:")
os.environ.setdefault("LOG_LEVEL", "WARNING")


def _sqlite_url(path: Path) -> str:
    return f"sqlite:///{path.as_posix()}"


@pytest.fixture(scope="session")
def database(tmp_path_factory) -> "Generator":
    """
    Create a temporary file-based SQLite storage client for the entire test session.
    """
    from storefront.db.session import Database

    db_file = tmp_path_factory.mktemp("db") / "test.db"
    db = Database(_sqlite_url(db_file), create_tables=True)
    db.init()
    try:
        yield db
    finally:
        db.close()
        if db_file.exists():
            db_file.unlink()


@pytest.fixture(scope="function")
def db_session(database) -> "Generator":
    """
    Provide a fresh Session for each test function.
    Truncates tables before each test for isolation.
    """
    from storefront.db.base import Base

    session = database.session()
    try:
        for table in reversed(Base.metadata.sorted_tables):
            session.execute(table.delete())
        session.commit()
    except Exception:
        session.rollback()
        raise

    try:
        yield session
    finally:
        session.rollback()
        session.close()


@pytest.fixture(scope="function")
def client(tmp_path) -> "Generator":
    """
    TestClient over a new application backed by its own SQLite file, so ids start at 1.
    """
    from fastapi.testclient import TestClient

    from storefront.core.config import Settings
    from storefront.db.session import Database
    from storefront.main import get_application

    url = _sqlite_url(tmp_path / "api.db")
    settings = Settings(database_url=url, public_dir="", log_level="WARNING")
    app = get_application(settings, database=Database(url))
    with TestClient(app) as test_client:
        yield test_client
