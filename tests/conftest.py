"""Shared fixtures: an isolated in-memory database per test."""

import os

# Must be set before the application settings are imported.
os.environ.setdefault("DATABASE_URL_OVERRIDE", "sqlite://")

import pytest
from fastapi.testclient import TestClient
from sqlmodel import Session, SQLModel

import app.db.base  # noqa: F401
from app.db.session import build_engine, get_db
from app.main import app as fastapi_app


@pytest.fixture
def engine():
    engine = build_engine("sqlite://")
    SQLModel.metadata.create_all(engine)
    yield engine
    engine.dispose()


@pytest.fixture
def session(engine):
    with Session(engine) as session:
        yield session


@pytest.fixture
def client(engine):
    def _get_db():
        with Session(engine) as session:
            yield session

    fastapi_app.dependency_overrides[get_db] = _get_db
    with TestClient(fastapi_app) as test_client:
        yield test_client
    fastapi_app.dependency_overrides.clear()
