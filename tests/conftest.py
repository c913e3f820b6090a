"""Pytest configuration and fixtures."""

import os

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker

from src.database import Base, enable_sqlite_foreign_keys, get_db
from src.main import app
from src.models import Category, User
from src.models.enums import UserRole

API = "/api"


class AuthHeaders(dict):
    """Dict subclass that also stores the user's id, username and email."""

    def __init__(
        self,
        *args,
        user_id: int | None = None,
        username: str = "",
        email: str = "",
        **kwargs,
    ):
        super().__init__(*args, **kwargs)
        self.user_id = user_id
        self.username = username
        self.email = email


# Use test database - PostgreSQL in Docker, SQLite locally
if os.getenv("DATABASE_URL"):
    # Running in Docker - use PostgreSQL test database
    SQLALCHEMY_DATABASE_URL = os.getenv("DATABASE_URL").replace("/recyclehero", "/recyclehero_test")
else:
    # Running locally - use SQLite
    SQLALCHEMY_DATABASE_URL = "sqlite:///./test.db"

connect_args = {"check_same_thread": False} if "sqlite" in SQLALCHEMY_DATABASE_URL else {}
engine = create_engine(SQLALCHEMY_DATABASE_URL, connect_args=connect_args)
if "sqlite" in SQLALCHEMY_DATABASE_URL:
    enable_sqlite_foreign_keys(engine)
TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


@pytest.fixture(scope="session", autouse=True)
def setup_test_database():
    """Create test database schema once at the start of the test session."""
    if "postgresql" in SQLALCHEMY_DATABASE_URL:
        # For PostgreSQL, create the test database
        from sqlalchemy_utils import create_database, database_exists

        # Create test database if it doesn't exist
        if not database_exists(SQLALCHEMY_DATABASE_URL):
            create_database(SQLALCHEMY_DATABASE_URL)

    Base.metadata.create_all(bind=engine)
    yield
    # Don't drop database - just leave it for next run (each test cleans up after itself)


@pytest.fixture(scope="function", autouse=True)
def db():
    """Create a fresh database session for each test with cleanup."""
    session = TestingSessionLocal()

    yield session

    # Clean up all data after test
    session.rollback()
    for table in reversed(Base.metadata.sorted_tables):
        session.execute(table.delete())
    session.commit()
    session.close()


@pytest.fixture(scope="function")
def client(db):
    """Create a test client with database override."""

    def override_get_db():
        try:
            yield db
        finally:
            pass

    app.dependency_overrides[get_db] = override_get_db
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()


@pytest.fixture
def categories(db):
    """Seed the category reference table and return the rows."""
    rows = [Category(name=name) for name in ("Plastic", "Paper", "Glass", "Batteries")]
    db.add_all(rows)
    db.commit()
    for row in rows:
        db.refresh(row)
    return rows


def register_and_login(client, username: str, email: str, password: str) -> AuthHeaders:
    """Register a user through the API and return bearer headers for them."""
    response = client.post(
        f"{API}/auth/register",
        json={"username": username, "email": email, "password": password},
    )
    assert response.status_code == 201
    user_id = response.json()["id"]

    response = client.post(f"{API}/auth/login", json={"email": email, "password": password})
    assert response.status_code == 200
    token = response.json()["token"]

    return AuthHeaders(
        {"Authorization": f"Bearer {token}"}, user_id=user_id, username=username, email=email
    )


@pytest.fixture
def auth_headers(client):
    """Create a regular user and return auth headers with user info."""
    return register_and_login(client, "testuser", "test@example.com", "testpass123")


@pytest.fixture
def admin_headers(client, db):
    """Create an admin and return auth headers.

    The role is granted directly in the database before logging in, since the
    token carries the role it was issued with.
    """
    client.post(
        f"{API}/auth/register",
        json={"username": "admin", "email": "admin@example.com", "password": "adminpass123"},
    )
    user = db.query(User).filter(User.email == "admin@example.com").one()
    user.role = UserRole.ADMIN.value
    db.commit()

    response = client.post(
        f"{API}/auth/login", json={"email": "admin@example.com", "password": "adminpass123"}
    )
    assert response.status_code == 200
    assert response.json()["role"] == "admin"
    return AuthHeaders(
        {"Authorization": f"Bearer {response.json()['token']}"},
        user_id=user.id,
        username="admin",
        email="admin@example.com",
    )
