"""Shared pytest fixtures for dashboard test suites."""

from collections.abc import Generator
from pathlib import Path
import sys

import pytest
from fastapi.testclient import TestClient

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from tests.stubs import SessionStub  # noqa: E402
from tests.stubs import SignalsStub  # noqa: E402


@pytest.fixture
def signals() -> SignalsStub:
    return SignalsStub()


@pytest.fixture
def db_session() -> SessionStub:
    """Empty stub session; tests needing canned rows override this fixture."""
    return SessionStub()


@pytest.fixture
def client(db_session: SessionStub) -> Generator[TestClient, None, None]:
    """Provide an API test client whose database session is a stub."""
    from app.db.base import get_db_session
    from app.main import app

    app.dependency_overrides[get_db_session] = lambda: db_session
    try:
        with TestClient(app) as test_client:
            yield test_client
    finally:
        app.dependency_overrides.clear()
