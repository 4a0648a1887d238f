# File: tests/conftest.py

import pytest
from fastapi.testclient import TestClient

from app.core.config import Settings
from app.db.init_db import init_db
from app.db.session import build_engine, build_session_factory
from app.main import create_application

TEST_DATABASE_URL = "sqlite://"


@pytest.fixture
def settings() -> Settings:
    return Settings(database_url=TEST_DATABASE_URL)


@pytest.fixture
def app(settings):
    return create_application(settings)


@pytest.fixture
def client(app):
    # entering the client runs the lifespan (engine + schema bootstrap)
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def engine():
    engine = build_engine(TEST_DATABASE_URL)
    init_db(engine)
    yield engine
    engine.dispose()


@pytest.fixture
def db_session(engine):
    session = build_session_factory(engine)()
    try:
        yield session
    finally:
        session.close()
