import os
from dataclasses import dataclass
from datetime import datetime

# Settings are read at import time; give tests a throwaway database and key.
os.environ.setdefault("DATABASE_URL", "sqlite://")
os.environ.setdefault("SECRET_KEY", "test-secret-key")

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

import jobboard.models  # noqa: F401
from jobboard.database import Base, get_db
from jobboard.dependencies import get_current_user
from jobboard.main import app
from jobboard.models.company import Company
from jobboard.models.job import Job
from jobboard.models.user import User


@dataclass
class StubUser:
    id: str = "user-1"
    email: str | None = "user@example.com"
    first_name: str | None = "Ada"
    last_name: str | None = "Lovelace"
    profile_image_url: str | None = None
    created_at: object | None = None


@pytest.fixture
def stub_user() -> StubUser:
    return StubUser()


@pytest.fixture
def client(stub_user: StubUser):
    def _db_override():
        yield object()

    app.dependency_overrides[get_db] = _db_override
    app.dependency_overrides[get_current_user] = lambda: stub_user
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def db_session():
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(bind=engine)
    TestingSession = sessionmaker(autocommit=False, autoflush=False, bind=engine)
    db = TestingSession()
    db.add(User(id="user-1", email="user@example.com"))
    db.add(User(id="user-2", email="other@example.com"))
    db.commit()
    try:
        yield db
    finally:
        db.close()
        Base.metadata.drop_all(bind=engine)
        engine.dispose()


@pytest.fixture
def db_client(db_session, stub_user: StubUser):
    """Client backed by the in-memory database, authenticated as user-1."""

    def _db_override():
        yield db_session

    app.dependency_overrides[get_db] = _db_override
    app.dependency_overrides[get_current_user] = lambda: stub_user
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def make_company(db_session):
    def _make(name="ACME", **fields):
        company = Company(name=name, **fields)
        db_session.add(company)
        db_session.commit()
        db_session.refresh(company)
        return company

    return _make


@pytest.fixture
def make_job(db_session):
    def _make(
        title="Backend Engineer",
        description="Build APIs",
        location="Remote",
        type="full-time",
        posted_at=None,
        **fields,
    ):
        job = Job(
            title=title,
            description=description,
            location=location,
            type=type,
            posted_at=posted_at or datetime(2024, 1, 1, 12, 0),
            **fields,
        )
        db_session.add(job)
        db_session.commit()
        db_session.refresh(job)
        return job

    return _make
