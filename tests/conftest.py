"""
Shared test fixtures.

The application reads its settings at import time, so the required
environment variables are set before anything from moza_backend is imported.
"""

import os

os.environ.setdefault("DATABASE_URL", "sqlite://")
os.environ.setdefault("SECRET_KEY", "test-secret-key-that-is-at-least-32-bytes")

from decimal import Decimal

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from moza_backend.main import app
from moza_backend.database import Base, get_db
from moza_backend.models import BankAccount, User

# In-memory SQLite shared by every session in a test
SQLALCHEMY_DATABASE_URL = "sqlite://"

engine = create_engine(
    SQLALCHEMY_DATABASE_URL,
    connect_args={"check_same_thread": False},
    poolclass=StaticPool
)
TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


def override_get_db():
    """Override database dependency for testing."""
    try:
        db = TestingSessionLocal()
        yield db
    finally:
        db.close()


@pytest.fixture(autouse=True)
def setup_database():
    """Create fresh database for each test."""
    app.dependency_overrides[get_db] = override_get_db
    Base.metadata.create_all(bind=engine)
    yield
    Base.metadata.drop_all(bind=engine)
    app.dependency_overrides.clear()


@pytest.fixture
def client():
    return TestClient(app)


@pytest.fixture
def db():
    """Session for calling the service layer directly."""
    session = TestingSessionLocal()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def make_user(db):
    """Insert a user row without going through password hashing."""
    def _make_user(username="alice"):
        user = User(
            username=username,
            email=f"{username}@example.com",
            password="unused",
            full_name=username.title()
        )
        db.add(user)
        db.commit()
        db.refresh(user)
        return user
    return _make_user


@pytest.fixture
def set_balance():
    """Set an account balance directly in the database."""
    def _set_balance(account_id, balance):
        session = TestingSessionLocal()
        try:
            account = session.get(BankAccount, account_id)
            account.balance = Decimal(str(balance))
            session.commit()
        finally:
            session.close()
    return _set_balance


@pytest.fixture
def get_balance():
    """Read an account balance with a fresh session."""
    def _get_balance(account_id):
        session = TestingSessionLocal()
        try:
            return session.get(BankAccount, account_id).balance
        finally:
            session.close()
    return _get_balance


@pytest.fixture
def register(client):
    """Register a user through the API and return auth headers and user data."""
    def _register(username="alice", password="Passw0rd!"):
        response = client.post(
            "/api/auth/register",
            json={
                "username": username,
                "email": f"{username}@example.com",
                "password": password,
                "full_name": username.title()
            }
        )
        assert response.status_code == 201, response.text
        data = response.json()
        return {
            "headers": {"Authorization": f"Bearer {data['token']}"},
            "user": data["user"]
        }
    return _register
