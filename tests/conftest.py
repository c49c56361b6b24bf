"""
Pytest configuration and shared fixtures.

Puts the project root on sys.path, points the default settings at SQLite so
importing ``main`` never needs PostgreSQL, and provides the database and
HTTP client fixtures used across the suite.
"""

import os
import sys
from pathlib import Path
from typing import Generator

# Add project root to sys.path so we can import domain, services, etc.
project_root = Path(__file__).parent.parent
if str(project_root) not in sys.path:
    sys.path.insert(0, str(project_root))

os.environ.setdefault("DATABASE_URL", "sqlite://")
os.environ.setdefault("ENVIRONMENT", "testing")

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.orm import Session

from domain.models import Database
from main import create_app
from test_fixtures import make_test_settings


@pytest.fixture(scope="function")
def database() -> Generator[Database, None, None]:
    """
    A fresh in-memory database with the schema created.

    Each test gets its own store, so no cleanup between tests is needed.
    """
    db = Database("sqlite://").open()
    db.init_schema()
    try:
        yield db
    finally:
        db.close()


@pytest.fixture(scope="function")
def db_session(database: Database) -> Generator[Session, None, None]:
    """
    Create a database session for integration tests.

    Yields:
        Session: SQLAlchemy database session bound to the in-memory store
    """
    session = database.session()
    try:
        yield session
    finally:
        session.rollback()
        session.close()


@pytest.fixture(scope="function")
def client() -> Generator[TestClient, None, None]:
    """
    TestClient over an application with its own in-memory store.

    Entering the client runs the application lifespan, which opens the
    database and creates the schema; leaving it closes the database.
    """
    app = create_app(make_test_settings())
    with TestClient(app) as test_client:
        yield test_client
