"""Pytest configuration and shared fixtures."""

import os
import tempfile

# Settings are read at import time, so they must be in place before app imports
os.environ["JWT_SECRET"] = "test-secret"
os.environ["ADMIN_REGISTRATION_KEY"] = "test-admin-key"
os.environ["LOG_DIR"] = tempfile.mkdtemp(prefix="convention-logs-")
os.environ["REDIS_URL"] = ""
os.environ["DATABASE_URL"] = "sqlite://"

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from app.core.dependencies import get_db
from app.core.jwt import create_user_token
from app.db.base import Base
from app.main import app
from app.models.convention import Convention
from app.models.convention_series import ConventionSeries
from app.models.enums import ConventionStatus, UserRole
from app.models.user import User

engine = create_engine(
    "sqlite://",
    connect_args={"check_same_thread": False},
    poolclass=StaticPool,
)
TestingSessionLocal = sessionmaker(bind=engine, autocommit=False, autoflush=False)


@pytest.fixture
def db():
    Base.metadata.create_all(bind=engine)
    session = TestingSessionLocal()
    try:
        yield session
    finally:
        session.close()
        Base.metadata.drop_all(bind=engine)


@pytest.fixture
def client(db):
    def override_get_db():
        yield db

    app.dependency_overrides[get_db] = override_get_db
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()


# ---------------------------------------------------------------------
# Factories
# ---------------------------------------------------------------------
def make_user(db, email="organizer@example.com", role=UserRole.ORGANIZER, name="Org"):
    # Not a real hash; login tests register through the API instead
    user = User(name=name, email=email, password_hash="x", role=role)
    db.add(user)
    db.commit()
    db.refresh(user)
    return user


def make_series(db, owner, name="Tampa Magic Series"):
    series = ConventionSeries(name=name, organizer_user_id=owner.id)
    db.add(series)
    db.commit()
    db.refresh(series)
    return series


def make_convention(db, series, slug="tampa-magic-2026", **fields):
    values = {
        "name": "Tampa Magic 2026",
        "slug": slug,
        "series_id": series.id,
        "status": ConventionStatus.PUBLISHED,
    }
    values.update(fields)
    convention = Convention(**values)
    db.add(convention)
    db.commit()
    db.refresh(convention)
    return convention


def auth_header(user):
    return {"Authorization": f"Bearer {create_user_token(user)}"}


@pytest.fixture
def organizer(db):
    return make_user(db)


@pytest.fixture
def series(db, organizer):
    return make_series(db, organizer)


@pytest.fixture
def convention(db, series):
    return make_convention(db, series)
