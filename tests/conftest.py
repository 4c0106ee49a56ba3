# tests/conftest.py
import os

os.environ.setdefault("DATABASE_URL", "sqlite://")
os.environ.setdefault("JWT_SECRET", "test-secret-for-the-ticket-service-suite")

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from app.core.config import get_settings
from app.core.database import Base, get_db, init_db
from app.core.security import create_access_token
from app.main import app
from app.user.models import User

engine = create_engine(
    "sqlite://",
    connect_args={"check_same_thread": False},
    poolclass=StaticPool,
)
TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


def override_get_db():
    db = TestingSessionLocal()
    try:
        yield db
    finally:
        db.close()


app.dependency_overrides[get_db] = override_get_db


@pytest.fixture(autouse=True)
def fresh_db():
    init_db(engine)
    yield
    Base.metadata.drop_all(bind=engine)


@pytest.fixture
def db_engine():
    return engine


@pytest.fixture
def client():
    return TestClient(app)


@pytest.fixture
def db():
    session = TestingSessionLocal()
    try:
        yield session
    finally:
        session.close()


def _auth_header(user_id: str) -> dict:
    token = create_access_token(user_id, get_settings())
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture
def auth_header():
    """Headers for a user id whether or not the user exists."""
    return _auth_header


@pytest.fixture
def create_user(db):
    """Insert a user and return the auth headers for it."""

    def _create(user_id: str, is_admin: bool = False, is_tutor: bool = False) -> dict:
        db.add(User(
            id=user_id,
            name=user_id,
            email=f"{user_id}@example.com",
            is_admin=is_admin,
            is_tutor=is_tutor,
        ))
        db.commit()
        return _auth_header(user_id)

    return _create
