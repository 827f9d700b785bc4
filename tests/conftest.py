"""Shared pytest fixtures for backend tests."""

import os
from datetime import date
from typing import AsyncGenerator

# Settings are read at import time; provide the required keys before any
# app module is imported. The Postgres engine is never connected in tests.
os.environ.setdefault("DB_SERVER", "localhost")
os.environ.setdefault("DB_NAME", "project_collab_test")
os.environ.setdefault("DB_USER", "test")
os.environ.setdefault("DB_PASSWORD", "test")
os.environ.setdefault("JWT_SECRET", "test-secret-key")

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from sqlalchemy import event
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

from app.database import Base, get_db
from app.main import app
from app.models import Project, ProjectType, Team, User
from app.schemas.project import ProjectCreate
from app.services.auth_service import create_access_token
from app.services.project_service import ProjectService

# Use in-memory SQLite for testing
SQLALCHEMY_DATABASE_URL = "sqlite+aiosqlite:///:memory:"


@pytest_asyncio.fixture(scope="function")
async def engine():
    """Create a test database engine with SQLite."""
    engine = create_async_engine(
        SQLALCHEMY_DATABASE_URL,
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )

    # Enable foreign key support for SQLite
    @event.listens_for(engine.sync_engine, "connect")
    def set_sqlite_pragma(dbapi_conn, connection_record):
        cursor = dbapi_conn.cursor()
        cursor.execute("PRAGMA foreign_keys=ON")
        cursor.close()

    # Create all tables
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    yield engine

    # Clean up
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
    await engine.dispose()


@pytest.fixture(scope="function")
def session_maker(engine) -> async_sessionmaker:
    """Session factory configured like the application's."""
    return async_sessionmaker(
        engine,
        class_=AsyncSession,
        expire_on_commit=False,
        autoflush=False,
    )


@pytest_asyncio.fixture(scope="function")
async def db_session(session_maker) -> AsyncGenerator[AsyncSession, None]:
    """Create a test database session."""
    async with session_maker() as session:
        try:
            yield session
        finally:
            await session.rollback()


@pytest_asyncio.fixture(scope="function")
async def client(session_maker) -> AsyncGenerator[AsyncClient, None]:
    """Create a test client with database dependency override.

    Each request gets its own session, as it would against the real app.
    """
    async def override_get_db():
        async with session_maker() as session:
            try:
                yield session
            except Exception:
                await session.rollback()
                raise

    app.dependency_overrides[get_db] = override_get_db

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as test_client:
        yield test_client

    app.dependency_overrides.clear()


async def _persist(session_maker: async_sessionmaker, entity):
    """Store an entity through a short-lived session and return it detached."""
    async with session_maker() as session:
        session.add(entity)
        await session.commit()
    return entity


@pytest_asyncio.fixture
async def test_user(session_maker) -> User:
    """Create a test user."""
    return await _persist(
        session_maker,
        User(email="test@example.com", first_name="Test", last_name="User", projects=[]),
    )


@pytest_asyncio.fixture
async def test_user_2(session_maker) -> User:
    """Create a second test user."""
    return await _persist(
        session_maker,
        User(email="test2@example.com", first_name="Second", last_name="User", projects=[]),
    )


@pytest_asyncio.fixture
async def test_user_3(session_maker) -> User:
    """Create a third test user."""
    return await _persist(
        session_maker,
        User(email="test3@example.com", first_name="Third", last_name=None, projects=[]),
    )


@pytest_asyncio.fixture
async def test_team(session_maker, test_user: User) -> Team:
    """Create a test team administered by the test user."""
    async with session_maker() as session:
        admin = await session.get(User, test_user.id)
        team = Team(
            title="Test Team",
            description="A test team",
            admins=[admin],
            contributors=[],
            projects=[],
        )
        session.add(team)
        await session.commit()
    return team


@pytest.fixture
def auth_token(test_user: User) -> str:
    """Create an authentication token for the test user."""
    return create_access_token(
        data={"sub": str(test_user.id)}
    )


@pytest.fixture
def auth_token_2(test_user_2: User) -> str:
    """Create an authentication token for the second test user."""
    return create_access_token(
        data={"sub": str(test_user_2.id)}
    )


@pytest.fixture
def auth_headers(auth_token: str) -> dict:
    """Create authorization headers."""
    return {"Authorization": f"Bearer {auth_token}"}


@pytest.fixture
def auth_headers_2(auth_token_2: str) -> dict:
    """Create authorization headers for second user."""
    return {"Authorization": f"Bearer {auth_token_2}"}


@pytest_asyncio.fixture
async def personal_project(session_maker, test_user: User) -> Project:
    """A personal project created by the test user, who is its admin."""
    async with session_maker() as session:
        created = await ProjectService(session).create_project(
            ProjectCreate(
                title="Launch",
                type=ProjectType.PERSONAL,
                end_date=date(2025, 1, 1),
            ),
            test_user,
        )
    return created.project


@pytest_asyncio.fixture
async def team_project(session_maker, test_user: User, test_team: Team) -> Project:
    """A team project created by the test user for the test team."""
    async with session_maker() as session:
        created = await ProjectService(session).create_project(
            ProjectCreate(
                title="Team Launch",
                type=ProjectType.TEAM,
                end_date=date(2025, 6, 30),
                team=test_team.id,
            ),
            test_user,
        )
    return created.project
