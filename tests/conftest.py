"""
Pytest configuration and fixtures for testing.

This file provides reusable test fixtures for:
- Database setup/teardown
- FastAPI test client
- Users and bearer tokens
- Job factory with controllable creation timestamps
"""

import uuid
from datetime import datetime, timedelta, timezone

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool
from jose import jwt

from app.core.config import settings
from app.core.database import Base, get_db
from app.models.job import Job, JobStatus, JobType
from app.models.user import User
from main import app


# Use in-memory SQLite for testing (fast, isolated)
SQLALCHEMY_TEST_DATABASE_URL = "sqlite:///:memory:"

engine = create_engine(
    SQLALCHEMY_TEST_DATABASE_URL,
    connect_args={"check_same_thread": False},
    poolclass=StaticPool,
)
TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


@pytest.fixture
def db_session():
    """
    Create a fresh database for each test.
    Tables are dropped after the test completes.
    """
    Base.metadata.create_all(bind=engine)
    db = TestingSessionLocal()
    try:
        yield db
    finally:
        db.close()
        Base.metadata.drop_all(bind=engine)


@pytest.fixture
def client(db_session):
    """
    FastAPI test client with overridden database dependency.
    """
    def override_get_db():
        try:
            yield db_session
        finally:
            pass

    app.dependency_overrides[get_db] = override_get_db

    with TestClient(app) as test_client:
        yield test_client

    app.dependency_overrides.clear()


def _create_user(db_session, email, is_active=True):
    user = User(id=uuid.uuid4(), email=email, name="Test User", is_active=is_active)
    db_session.add(user)
    db_session.commit()
    db_session.refresh(user)
    return user


def make_token(claims, expires_delta=timedelta(hours=1)):
    """Sign a bearer token the way the auth service issues them"""
    to_encode = dict(claims, exp=datetime.now(timezone.utc) + expires_delta)
    return jwt.encode(to_encode, settings.SECRET_KEY, algorithm=settings.ALGORITHM)


def _auth_headers(user):
    token = make_token({"sub": str(user.id)})
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture
def token_factory():
    """Signs arbitrary claims, for tokens the auth service would never issue"""
    return make_token


@pytest.fixture
def user(db_session):
    """The authenticated caller in most tests"""
    return _create_user(db_session, "owner@example.com")


@pytest.fixture
def other_user(db_session):
    """A second account whose jobs must stay invisible to `user`"""
    return _create_user(db_session, "someone-else@example.com")


@pytest.fixture
def auth_headers(user):
    return _auth_headers(user)


@pytest.fixture
def other_auth_headers(other_user):
    return _auth_headers(other_user)


@pytest.fixture
def inactive_auth_headers(db_session):
    return _auth_headers(_create_user(db_session, "inactive@example.com", is_active=False))


@pytest.fixture
def sample_job_data():
    """Sample job payload as a client would send it"""
    return {
        "company": "Acme",
        "position": "Engineer",
        "status": "interview",
        "jobType": "part-time",
    }


@pytest.fixture
def make_job(db_session):
    """
    Insert a job directly, bypassing the API, so tests can pin created_at.
    """
    def _make_job(
        owner,
        company="Acme",
        position="Engineer",
        status=JobStatus.PENDING,
        job_type=JobType.FULL_TIME,
        created_at=None,
    ):
        job = Job(
            company=company,
            position=position,
            status=status,
            job_type=job_type,
            created_by=owner.id,
        )
        if created_at is not None:
            job.created_at = created_at
            job.updated_at = created_at
        db_session.add(job)
        db_session.commit()
        db_session.refresh(job)
        return job

    return _make_job


@pytest.fixture
def dated_jobs(user, make_job):
    """Three jobs with distinct creation times and positions"""
    return [
        make_job(user, company="Globex", position="Backend Developer", created_at=datetime(2024, 1, 10, 9, 0)),
        make_job(user, company="Initech", position="Data Analyst", status=JobStatus.INTERVIEW,
                 job_type=JobType.REMOTE, created_at=datetime(2024, 3, 5, 9, 0)),
        make_job(user, company="Umbrella", position="Cloud Engineer", status=JobStatus.DECLINED,
                 job_type=JobType.INTERNSHIP, created_at=datetime(2024, 2, 20, 9, 0)),
    ]
