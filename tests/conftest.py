"""Shared fixtures: in-memory database, test client and authenticated users."""

import os

# Test environment, applied before the application modules read settings
os.environ["DATABASE_URL"] = "sqlite://"
os.environ["LOG_FILE"] = ""
os.environ["BCRYPT_ROUNDS"] = "4"
os.environ["JWT_SECRET_KEY"] = "test-secret-key-0123456789abcdefghij"

import pytest  # noqa: E402
from fastapi.testclient import TestClient  # noqa: E402
from sqlalchemy import create_engine  # noqa: E402
from sqlalchemy.orm import sessionmaker  # noqa: E402
from sqlalchemy.pool import StaticPool  # noqa: E402

from skillhub.database import Base, get_db  # noqa: E402
from skillhub.main import app  # noqa: E402
from skillhub.models import Skill, User  # noqa: E402,F401

# ---------------------------------------------------------------------------
# In-memory SQLite test database (shared via StaticPool)
# ---------------------------------------------------------------------------
engine = create_engine(
    "sqlite://",
    connect_args={"check_same_thread": False},
    poolclass=StaticPool,
)
TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


def override_get_db():
    """Dependency override that uses the test in-memory database."""
    db = TestingSessionLocal()
    try:
        yield db
    finally:
        db.close()


@pytest.fixture(autouse=True)
def setup_db():
    """Create and tear down tables around each test."""
    Base.metadata.create_all(bind=engine)
    yield
    Base.metadata.drop_all(bind=engine)


@pytest.fixture
def client():
    """TestClient with the DB dependency overridden."""
    app.dependency_overrides[get_db] = override_get_db
    with TestClient(app) as c:
        yield c
    app.dependency_overrides.clear()


@pytest.fixture
def db():
    """SQLAlchemy session for pre-populating and inspecting test data."""
    session = TestingSessionLocal()
    try:
        yield session
    finally:
        session.close()


def register_and_login(client, username, email, password):
    """Register a user, log in, and return (user json, auth headers)."""
    response = client.post(
        "/register", json={"username": username, "email": email, "password": password}
    )
    assert response.status_code == 201, response.text
    login = client.post("/login", json={"email": email, "password": password})
    assert login.status_code == 200, login.text
    return response.json()["user"], {"Authorization": f"Bearer {login.json()['token']}"}


@pytest.fixture
def alice(client):
    """Registered user 'alice' with auth headers."""
    return register_and_login(client, "alice", "a@x.com", "pw1")


@pytest.fixture
def bob(client):
    """Registered user 'bob' with auth headers."""
    return register_and_login(client, "bob", "b@x.com", "pw2")


@pytest.fixture
def make_user(client):
    """Factory fixture wrapping register_and_login."""

    def _make(username, email, password):
        return register_and_login(client, username, email, password)

    return _make
