"""Root conftest for all tests.

Sets the environment the settings object needs before any ``gymtrack``
import, and provides an in-memory SQLite database with the real schema.
"""

import os

os.environ.setdefault("SECRET_KEY", "test-secret-key")
os.environ.setdefault("DATABASE_URL", "sqlite://")

import datetime

import pytest
from sqlalchemy.pool import StaticPool
from sqlmodel import Session, SQLModel

import gymtrack.db.base  # noqa: F401
from gymtrack.db.repositories.user import UserRepository
from gymtrack.db.session import build_engine
from gymtrack.models.user import User

TODAY = datetime.date(2024, 1, 10)


@pytest.fixture
def engine():
    test_engine = build_engine("sqlite://", poolclass=StaticPool)
    SQLModel.metadata.create_all(test_engine)
    yield test_engine
    SQLModel.metadata.drop_all(test_engine)
    test_engine.dispose()


@pytest.fixture
def db_session(engine):
    with Session(engine) as session:
        yield session


@pytest.fixture
def user(db_session) -> User:
    return UserRepository(db_session).create(User(name="Alex", access_code="ALEX2024"))


@pytest.fixture
def today() -> datetime.date:
    return TODAY
