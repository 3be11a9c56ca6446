"""
Pytest configuration and fixtures for SchoolHub API tests.
"""
from datetime import datetime, timedelta

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from schoolhub.database import Base, get_db
from schoolhub.limiter import limiter
from schoolhub.main import app
from schoolhub.models import Post, User

# Disable rate limiting for tests
limiter.enabled = False

# Use in-memory SQLite for tests with shared connection
SQLALCHEMY_DATABASE_URL = "sqlite:///:memory:"

engine = create_engine(
    SQLALCHEMY_DATABASE_URL,
    connect_args={"check_same_thread": False},
    poolclass=StaticPool,
)
TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

# Global session for sharing across requests
_test_session = None


def get_test_db():
    """Get the shared test database session."""
    yield _test_session


@pytest.fixture(scope="function")
def db():
    """Create a fresh database for each test."""
    global _test_session

    Base.metadata.create_all(bind=engine)
    _test_session = TestingSessionLocal()
    app.dependency_overrides[get_db] = get_test_db

    yield _test_session

    app.dependency_overrides.clear()
    _test_session.close()
    _test_session = None
    Base.metadata.drop_all(bind=engine)


@pytest.fixture(scope="function")
def client(db):
    """Create a test client."""
    with TestClient(app) as c:
        yield c


def _make_user(db, username, role="student", **overrides):
    user = User(
        username=username,
        email=overrides.pop("email", f"{username}@example.com"),
        name=overrides.pop("name", username.title()),
        class_name=overrides.pop("class_name", "10A"),
        role=role,
        **overrides,
    )
    db.add(user)
    db.commit()
    db.refresh(user)
    return user


def _make_post(db, author, title="Hello", minutes_ago=0, **overrides):
    created = datetime.utcnow() - timedelta(minutes=minutes_ago)
    post = Post(
        title=title,
        content=overrides.pop("content", f"{title} content"),
        type=overrides.pop("type", "text"),
        author_id=author.id,
        created_at=created,
        updated_at=created,
        **overrides,
    )
    db.add(post)
    db.commit()
    db.refresh(post)
    return post


@pytest.fixture(scope="function")
def student(db):
    """A regular student account."""
    return _make_user(db, "student")


@pytest.fixture(scope="function")
def admin(db):
    """An administrator account."""
    return _make_user(db, "admin", role="admin", class_name="Staff")


@pytest.fixture(scope="function")
def post(db, student):
    """A text post written by the student."""
    return _make_post(db, student, title="First post")


@pytest.fixture(scope="function")
def make_user(db):
    """Factory for extra users: make_user("name", role="admin")."""
    def factory(username, role="student", **overrides):
        return _make_user(db, username, role=role, **overrides)
    return factory


@pytest.fixture(scope="function")
def make_post(db):
    """Factory for posts with a controlled age: make_post(author, minutes_ago=5)."""
    def factory(author, title="Hello", minutes_ago=0, **overrides):
        return _make_post(db, author, title=title, minutes_ago=minutes_ago, **overrides)
    return factory
