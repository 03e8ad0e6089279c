"""Pytest configuration and fixtures."""

import pytest
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from curalink.db.base import Base
from curalink.models.model_user import RegisterRequest
from curalink.services.auth import AuthService
from curalink.services.credential_store import CredentialStore

import curalink.sqlalchemy.users  # noqa: F401

TEST_JWT_SECRET = "test-secret"


@pytest.fixture
def session_factory():
    """In-memory SQLite shared across threads, fresh per test."""
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(engine)
    yield sessionmaker(bind=engine, expire_on_commit=False)
    engine.dispose()


@pytest.fixture
def db_session(session_factory):
    session = session_factory()
    yield session
    session.close()


@pytest.fixture
def store(db_session) -> CredentialStore:
    return CredentialStore(db_session)


@pytest.fixture
def auth_service(store) -> AuthService:
    return AuthService(store, TEST_JWT_SECRET)


@pytest.fixture
def patient_payload() -> dict:
    """Sample patient registration body (camelCase, as sent by the frontend)."""
    return {
        "firstName": "Ada",
        "lastName": "Okafor",
        "email": "ada@example.com",
        "password": "correct horse battery staple",
        "gender": "FEMALE",
        "userType": "PATIENT",
        "fieldType": "Oncology",
        "age": "42",
        "condition": "Type 2 diabetes",
        "allergies": "Penicillin",
    }


@pytest.fixture
def researcher_payload() -> dict:
    """Sample researcher registration body."""
    return {
        "firstName": "Rafael",
        "lastName": "Lindqvist",
        "email": "rafael@example.org",
        "password": "s3cret-pass",
        "gender": "MALE",
        "userType": "RESEARCHER",
        "fieldType": "Immunology",
        "age": 51,
        "condition": "n/a",
        "allergies": "none",
    }


@pytest.fixture
def patient_request(patient_payload) -> RegisterRequest:
    return RegisterRequest.model_validate(patient_payload)


@pytest.fixture
def researcher_request(researcher_payload) -> RegisterRequest:
    return RegisterRequest.model_validate(researcher_payload)
