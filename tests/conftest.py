# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
import os

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker

# Set test environment before importing app
os.environ["DATABASE_URL"] = "sqlite:///./test_sce_portal.db"

from sce_portal.database import get_db
from sce_portal.main import app
from sce_portal.models.base import Base
from sce_portal.repositories import Store
from sce_portal.services.seed_service import seed_store
from sce_portal.services.session_service import AuthSession
from sce_portal.storage import DatabaseStorage

# Test database setup
TEST_DATABASE_URL = "sqlite:///./test_sce_portal.db"
engine = create_engine(TEST_DATABASE_URL, connect_args={"check_same_thread": False})
TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

ADMIN_PASSWORD = "adminpassword123"  # nosec - test-only secret
READER_PASSWORD = "readerpassword123"  # nosec - test-only secret


@pytest.fixture(scope="function")
def db_session():
    """Create a fresh database for each test."""
    Base.metadata.create_all(bind=engine)
    session = TestingSessionLocal()
    try:
        yield session
    finally:
        session.close()
        Base.metadata.drop_all(bind=engine)


@pytest.fixture
def storage(db_session) -> DatabaseStorage:
    return DatabaseStorage(db_session)


@pytest.fixture
def store(storage) -> Store:
    """Seeded store on the test database."""
    store = Store(storage)
    seed_store(store)
    return store


def _make_session(store: Store, profile: str = "test-profile") -> AuthSession:
    """Create and initialize an AuthSession for one profile."""
    session = AuthSession(store, store.session_key(profile))
    session.initialize()
    return session


@pytest.fixture
def admin_session(store) -> AuthSession:
    """Session of the first registered user, who is an administrator."""
    session = _make_session(store, "admin-profile")
    session.register("Admin", "admin@example.com", ADMIN_PASSWORD)
    return session


@pytest.fixture
def reader_session(store, admin_session) -> AuthSession:
    """Session of a user registered after the administrator."""
    session = _make_session(store, "reader-profile")
    session.register("Reader", "reader@example.com", READER_PASSWORD)
    return session


@pytest.fixture
def researcher_session(store, admin_session) -> AuthSession:
    """Session of a user promoted to researcher."""
    session = _make_session(store, "researcher-profile")
    session.register("Researcher", "researcher@example.com", "researcherpw123")
    user = store.get_user_by_email("researcher@example.com")
    user = store.users.update(user.model_copy(update={"role_id": "researcher"}))
    session.refresh_user(user)
    return session


@pytest.fixture(scope="function")
def client(db_session):
    """Create a test client with database override."""

    def override_get_db():
        try:
            yield db_session
        finally:
            pass

    app.dependency_overrides[get_db] = override_get_db
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()


@pytest.fixture
def admin_client(client):
    """Client whose profile registered first and therefore is an administrator."""
    response = client.post(
        "/api/v1/auth/register",
        json={
            "name": "Admin",
            "email": "admin@example.com",
            "password": ADMIN_PASSWORD,
            "passwordConfirm": ADMIN_PASSWORD,
        },
    )
    assert response.status_code == 201
    return client


@pytest.fixture
def reader_client(admin_client):
    """Client logged in as a reader, registered after the administrator."""
    admin_client.cookies.clear()
    response = admin_client.post(
        "/api/v1/auth/register",
        json={
            "name": "Reader",
            "email": "reader@example.com",
            "password": READER_PASSWORD,
            "passwordConfirm": READER_PASSWORD,
        },
    )
    assert response.status_code == 201
    return admin_client


@pytest.fixture
def make_session():
    """Factory for initialized sessions of named profiles."""
    return _make_session
