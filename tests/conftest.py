"""Root conftest for all tests.

This file makes shared fixtures available across all test modules.
"""

from contextlib import contextmanager
from datetime import date

import pytest
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker

from athlete_load.schemas.training_load import SessionRecord


@pytest.fixture
def reference_date() -> date:
    """Stable "today" for window computations (a Wednesday)."""
    return date(2024, 5, 15)


@pytest.fixture
def make_session():
    """Factory for SessionRecord with sensible defaults."""

    def _make(day: date, duration_minutes: float = 60, exertion_rating: float = 5, load: float | None = None) -> SessionRecord:
        return SessionRecord(date=day, duration_minutes=duration_minutes, exertion_rating=exertion_rating, load=load)

    return _make


@pytest.fixture(scope="function")
def db_session(monkeypatch):
    """
    Provides a transactional in-memory SQLite DB session for tests.

    This fixture:
    - Creates an isolated in-memory SQLite database per test
    - Patches the engine getter to use SQLite
    - Patches get_session() to return the test session
    - Uses transaction rollback for cleanup

    Usage:
        def test_something(db_session):
            add_training_load("user-1", TrainingLoadCreate(...))
    """
    engine = create_engine(
        "sqlite:///:memory:",
        echo=False,
        connect_args={"check_same_thread": False},
    )

    def mock_get_engine():
        return engine

    monkeypatch.setattr("athlete_load.db.session._get_engine", mock_get_engine)
    monkeypatch.setattr("athlete_load.db.session.get_engine", mock_get_engine)

    from athlete_load.db.models import Base

    Base.metadata.create_all(engine)

    connection = engine.connect()
    transaction = connection.begin()

    test_session_local = sessionmaker(bind=connection, autocommit=False, autoflush=False)
    session = test_session_local()

    @contextmanager
    def mock_get_session():
        yield session

    # Patch where it's defined and where it's imported
    import athlete_load.db.session as session_module
    import athlete_load.db.training_loads as training_loads_module

    monkeypatch.setattr(session_module, "get_session", mock_get_session)
    monkeypatch.setattr(training_loads_module, "get_session", mock_get_session)

    try:
        yield session
    finally:
        session.close()
        transaction.rollback()
        connection.close()
        engine.dispose()
