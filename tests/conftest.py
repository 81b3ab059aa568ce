from typing import Generator

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.pool import StaticPool
from sqlmodel import Session, SQLModel, create_engine

import models.models  # noqa: F401  (registers table metadata)
from core.database import get_session
from main import app
from tests.factories import Account, signup

# In-memory SQLite shared by every connection of one test
TEST_DATABASE_URL = "sqlite://"


@pytest.fixture(scope="function")
def session() -> Generator[Session, None, None]:
    """
    Fresh schema per test. The same session is handed to services and,
    through the dependency override, to the API.
    """
    engine = create_engine(
        TEST_DATABASE_URL,
        poolclass=StaticPool,  # Required for in-memory SQLite
        connect_args={"check_same_thread": False},
    )
    SQLModel.metadata.create_all(engine)

    with Session(engine) as db_session:
        yield db_session

    SQLModel.metadata.drop_all(engine)
    engine.dispose()


@pytest.fixture(scope="function")
def client(session: Session) -> Generator[TestClient, None, None]:
    def override_get_session():
        yield session

    app.dependency_overrides[get_session] = override_get_session
    try:
        yield TestClient(app)
    finally:
        app.dependency_overrides.clear()


@pytest.fixture
def account(session: Session) -> Account:
    return signup(session)
