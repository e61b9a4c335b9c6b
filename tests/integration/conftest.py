"""Integration test fixtures: in-memory SQLite repository and API client."""

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.engine import Engine

from texel.api import create_app
from texel.config import DatabaseSettings
from texel.repositories.engine import create_db_engine, init_schema
from texel.repositories.repository import Repository

PROJECT_ID = "0b8f6b9e-3c47-4b8e-9f0a-6d1f2a4c5e7b"


@pytest.fixture
def test_engine() -> Engine:
    """Fresh in-memory database with the schema and seed project loaded."""
    engine = create_db_engine(DatabaseSettings(url="sqlite://", _env_file=None))
    init_schema(engine)
    yield engine
    engine.dispose()


@pytest.fixture
def repository(test_engine) -> Repository:
    return Repository(test_engine)


@pytest.fixture
def client(repository, design_rule_engine) -> TestClient:
    with TestClient(create_app(repository, design_rule_engine)) as test_client:
        yield test_client


@pytest.fixture
def server_error_client(repository, design_rule_engine) -> TestClient:
    """Client that returns 500 responses instead of re-raising unhandled errors."""
    app = create_app(repository, design_rule_engine)
    with TestClient(app, raise_server_exceptions=False) as test_client:
        yield test_client


@pytest.fixture
def project_id() -> str:
    return PROJECT_ID


@pytest.fixture
def project_url(project_id) -> str:
    return f"/v1/projects/{project_id}"
