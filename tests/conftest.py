"""Pytest configuration and fixtures."""

import os
import sys
from collections.abc import AsyncGenerator, Awaitable, Callable
from pathlib import Path
from uuid import UUID, uuid4

# Disable rate limiting in tests
os.environ["RATE_LIMIT_ENABLED"] = "false"

import pytest
from httpx import ASGITransport, AsyncClient
from sqlalchemy import select
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)

# Add src to path
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from infrastructure.auth.jwt_provider import JWTAuthProvider
from infrastructure.auth.provider import TokenUser
from infrastructure.database.models import Base, ProfileModel

# Test database URL (SQLite in memory)
TEST_DATABASE_URL = "sqlite+aiosqlite:///:memory:"

# Fixed test user ID for consistency
TEST_USER_ID = uuid4()


@pytest.fixture(scope="session")
async def engine() -> AsyncGenerator[AsyncEngine, None]:
    """Create test database engine."""
    engine = create_async_engine(
        TEST_DATABASE_URL,
        echo=False,
    )
    yield engine
    await engine.dispose()


@pytest.fixture(scope="session")
async def setup_database(engine: AsyncEngine) -> AsyncGenerator[None, None]:
    """Create all tables once per session."""
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)


@pytest.fixture(scope="session")
async def session_factory(
    engine: AsyncEngine, setup_database: None
) -> AsyncGenerator[async_sessionmaker[AsyncSession], None]:
    """Create session factory."""
    factory = async_sessionmaker(
        bind=engine,
        class_=AsyncSession,
        expire_on_commit=False,
    )
    yield factory


@pytest.fixture
async def db_session(
    session_factory: async_sessionmaker[AsyncSession],
) -> AsyncGenerator[AsyncSession, None]:
    """Create a fresh database session for each test."""
    async with session_factory() as session:
        yield session
        await session.rollback()


@pytest.fixture
def make_profile(
    session_factory: async_sessionmaker[AsyncSession],
) -> Callable[..., Awaitable[UUID]]:
    """Insert a profile row and return its user ID."""

    async def _make(
        user_id: UUID | None = None,
        email: str | None = None,
        name: str | None = "Miembro",
        avatar_url: str | None = None,
    ) -> UUID:
        user_id = user_id or uuid4()
        async with session_factory() as session:
            existing = await session.get(ProfileModel, user_id)
            if existing is None:
                session.add(
                    ProfileModel(
                        user_id=user_id,
                        email=email or f"{user_id.hex}@example.com",
                        name=name,
                        avatar_url=avatar_url,
                    )
                )
                await session.commit()
        return user_id

    return _make


@pytest.fixture
def test_user() -> TokenUser:
    """Create a test user with fixed ID."""
    return TokenUser(
        id=TEST_USER_ID,
        email="test@example.com",
        display_name="Test User",
        role="authenticated",
    )


@pytest.fixture
def auth_provider() -> JWTAuthProvider:
    """Create auth provider for testing."""
    return JWTAuthProvider(
        secret_key="test-secret-key",
        algorithm="HS256",
        expire_minutes=30,
    )


@pytest.fixture
def auth_token(auth_provider: JWTAuthProvider, test_user: TokenUser) -> str:
    """Create auth token for test user."""
    return str(auth_provider.create_token(test_user))


@pytest.fixture
def auth_headers(auth_token: str) -> dict[str, str]:
    """Create authorization headers."""
    return {"Authorization": f"Bearer {auth_token}"}


@pytest.fixture
async def client() -> AsyncGenerator[AsyncClient, None]:
    """Create async test client (no auth)."""
    from main import app

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as c:
        yield c


@pytest.fixture
async def authenticated_client(
    session_factory: async_sessionmaker[AsyncSession],
    test_user: TokenUser,
    auth_provider: JWTAuthProvider,
) -> AsyncGenerator[AsyncClient, None]:
    """
    Create authenticated test client with proper database and auth overrides.

    This client:
    - Uses an in-memory SQLite database
    - Injects a profile for the test user into the database
    - Overrides auth dependencies to return the test user
    - Overrides every service and the owner info store to use the test database
    """
    from api.dependencies.auth import get_auth_provider, get_current_user, get_optional_user
    from api.v1.dependencies import (
        get_book_service,
        get_event_service,
        get_member_service,
        get_music_service,
        get_owner_info_store,
        get_user_admin_service,
    )
    from domain.services.book_service import BookService
    from domain.services.event_service import EventService
    from domain.services.member_service import MemberService
    from domain.services.music_service import MusicService
    from domain.services.user_admin_service import UserAdminService
    from infrastructure.database.owner_info_store import UnitOfWorkOwnerInfoStore
    from infrastructure.database.sqlalchemy_uow import SQLAlchemyUnitOfWork
    from main import create_app

    app = create_app()

    # Create a profile for the test user
    async with session_factory() as session:
        stmt = select(ProfileModel).where(ProfileModel.user_id == test_user.id)
        result = await session.execute(stmt)
        if not result.scalar_one_or_none():
            session.add(
                ProfileModel(
                    user_id=test_user.id,
                    email=test_user.email,
                    name=test_user.display_name,
                )
            )
            await session.commit()

    # Override auth to return test user directly
    async def override_get_user() -> TokenUser:
        return test_user

    def override_get_auth_provider() -> JWTAuthProvider:
        return auth_provider

    # Create a UoW factory that uses test session
    def test_uow_factory() -> SQLAlchemyUnitOfWork:
        return SQLAlchemyUnitOfWork(session_factory)

    app.dependency_overrides[get_current_user] = override_get_user
    app.dependency_overrides[get_optional_user] = override_get_user
    app.dependency_overrides[get_auth_provider] = override_get_auth_provider
    app.dependency_overrides[get_member_service] = lambda: MemberService(test_uow_factory)
    app.dependency_overrides[get_event_service] = lambda: EventService(test_uow_factory)
    app.dependency_overrides[get_book_service] = lambda: BookService(test_uow_factory)
    app.dependency_overrides[get_music_service] = lambda: MusicService(test_uow_factory)
    app.dependency_overrides[get_user_admin_service] = lambda: UserAdminService(
        test_uow_factory
    )
    app.dependency_overrides[get_owner_info_store] = lambda: UnitOfWorkOwnerInfoStore(
        test_uow_factory
    )

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as c:
        yield c

    app.dependency_overrides.clear()
