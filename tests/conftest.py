"""Pytest configuration and fixtures."""

import os
import sys
from collections.abc import AsyncGenerator
from datetime import datetime, timedelta
from decimal import Decimal
from pathlib import Path
from uuid import UUID, uuid4

# Disable rate limiting in tests
os.environ["RATE_LIMIT_ENABLED"] = "false"

import pytest
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.pool import StaticPool

# Add src to path
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from infrastructure.auth.jwt_provider import JWTAuthProvider
from infrastructure.auth.provider import TokenUser
from infrastructure.database.models import Base, ListingModel, ProfileModel

# Test database URL (SQLite in memory, one connection shared by all sessions)
TEST_DATABASE_URL = "sqlite+aiosqlite:///:memory:"


@pytest.fixture
async def engine() -> AsyncGenerator[AsyncEngine, None]:
    """Create a fresh in-memory database per test."""
    engine = create_async_engine(TEST_DATABASE_URL, poolclass=StaticPool)
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    await engine.dispose()


@pytest.fixture
def session_factory(engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    """Create session factory bound to the test engine."""
    return async_sessionmaker(
        bind=engine,
        class_=AsyncSession,
        expire_on_commit=False,
    )


@pytest.fixture
def test_user() -> TokenUser:
    """The authenticated caller used by API tests."""
    return TokenUser(
        id=uuid4(),
        email="ana@example.com",
        display_name="Ana Popescu",
    )


@pytest.fixture
def auth_provider() -> JWTAuthProvider:
    """Create auth provider for testing."""
    return JWTAuthProvider(
        secret_key="test-secret-key",
        algorithm="HS256",
        expire_minutes=30,
        jwks_url="",
    )


@pytest.fixture
def auth_headers(auth_provider: JWTAuthProvider, test_user: TokenUser) -> dict[str, str]:
    """Authorization headers carrying a valid token for test_user."""
    return {"Authorization": f"Bearer {auth_provider.create_token(test_user)}"}


@pytest.fixture
async def seeded_profile(
    session_factory: async_sessionmaker[AsyncSession],
    test_user: TokenUser,
) -> ProfileModel:
    """A profile owned by test_user with one active, one sold and one pending listing."""
    created = datetime(2025, 3, 1, 12, 0, 0)
    profile = ProfileModel(
        id=uuid4(),
        owner_id=test_user.id,
        email=test_user.email,
        name="Ana Popescu",
        phone="0790454647",
        location="Cluj-Napoca",
        description="Vând piese auto originale, verificate.",
        website="https://ana.example.ro",
        verified=True,
        rating=4.5,
        reviews_count=8,
        created_at=created,
        updated_at=created,
    )
    listings = [
        ListingModel(
            seller_id=profile.id,
            title="Dacia Logan 2015",
            price=Decimal("4500.00"),
            status="active",
            views_count=5,
            favorites_count=1,
            created_at=created + timedelta(days=1),
        ),
        ListingModel(
            seller_id=profile.id,
            title="Jante aliaj R16",
            price=Decimal("800.00"),
            status="sold",
            views_count=3,
            favorites_count=0,
            created_at=created + timedelta(days=3),
        ),
        ListingModel(
            seller_id=profile.id,
            title="Anvelope iarnă",
            status="pending",
            views_count=2,
            favorites_count=None,
            created_at=created + timedelta(days=2),
        ),
    ]
    async with session_factory() as session:
        session.add(profile)
        await session.flush()
        session.add_all(listings)
        await session.commit()
    return profile


@pytest.fixture
async def client() -> AsyncGenerator[AsyncClient, None]:
    """Create async test client (no auth, no database overrides)."""
    from main import app

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as c:
        yield c


@pytest.fixture
async def api_client(
    session_factory: async_sessionmaker[AsyncSession],
    auth_provider: JWTAuthProvider,
) -> AsyncGenerator[AsyncClient, None]:
    """
    Create a test client wired to the in-memory database.

    Tokens are verified by the test auth provider, so requests authenticate
    through the real identity dependency chain.
    """
    from api.dependencies.auth import get_auth_provider
    from api.v1.dependencies import get_profile_service
    from domain.services.profile_service import ProfileService
    from infrastructure.database.sqlalchemy_uow import SQLAlchemyUnitOfWork
    from main import create_app

    app = create_app()

    def test_uow_factory() -> SQLAlchemyUnitOfWork:
        return SQLAlchemyUnitOfWork(session_factory)

    app.dependency_overrides[get_auth_provider] = lambda: auth_provider
    app.dependency_overrides[get_profile_service] = lambda: ProfileService(test_uow_factory)

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as c:
        yield c

    app.dependency_overrides.clear()


def profile_url(profile_id: UUID) -> str:
    return f"/api/v1/profiles/{profile_id}"
