"""Shared pytest fixtures: a fresh in-memory SQLite store per test."""

from __future__ import annotations

from collections.abc import Iterator

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool

from rental_api.db.db_connection import build_engine, build_sessionmaker, get_db
from rental_api.db.orm_registry import Base, import_all_models
from rental_api.main import app


@pytest.fixture()
def session_factory() -> Iterator[sessionmaker]:
    """Create all tables on a single shared in-memory connection."""

    engine = build_engine("sqlite://", poolclass=StaticPool)
    import_all_models()
    Base.metadata.create_all(bind=engine)
    yield build_sessionmaker(engine)
    Base.metadata.drop_all(bind=engine)
    engine.dispose()


@pytest.fixture()
def db(session_factory: sessionmaker) -> Iterator[Session]:
    session = session_factory()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture()
def client(session_factory: sessionmaker) -> Iterator[TestClient]:
    """Provide a client whose requests run against the test store."""

    def _get_db() -> Iterator[Session]:
        session = session_factory()
        try:
            yield session
        finally:
            session.close()

    app.dependency_overrides[get_db] = _get_db
    yield TestClient(app)
    app.dependency_overrides.clear()
