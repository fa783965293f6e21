"""Shared fixtures for unit tests."""

from datetime import datetime
from typing import Any
from unittest.mock import AsyncMock
from uuid import UUID, uuid4

import pytest

from domain.entities.identity import Identity
from domain.entities.profile import Profile


class FakeUnitOfWork:
    """Fake Unit of Work with profile and listing repository mocks."""

    def __init__(self) -> None:
        self.profiles = AsyncMock()
        self.listings = AsyncMock()
        self.committed = False
        self.rolled_back = False

    async def commit(self) -> None:
        self.committed = True

    async def rollback(self) -> None:
        self.rolled_back = True

    async def __aenter__(self) -> "FakeUnitOfWork":
        return self

    async def __aexit__(self, *args: Any) -> None:
        pass


@pytest.fixture
def uow() -> FakeUnitOfWork:
    """Create a fresh FakeUnitOfWork."""
    return FakeUnitOfWork()


@pytest.fixture
def owner_id() -> UUID:
    """A random owner (identity) ID."""
    return uuid4()


@pytest.fixture
def owner(owner_id: UUID) -> Identity:
    """The authenticated owner of the ``profile`` fixture."""
    return Identity(id=owner_id, email="ana@example.com")


@pytest.fixture
def stranger() -> Identity:
    """An authenticated caller who owns nothing."""
    return Identity(id=uuid4(), email="ion@example.com")


@pytest.fixture
def profile(owner_id: UUID) -> Profile:
    """A complete, valid profile."""
    created = datetime(2025, 3, 1, 12, 0, 0)
    return Profile(
        owner_id=owner_id,
        name="Ana Popescu",
        email="ana@example.com",
        phone="0790454647",
        location="Cluj-Napoca",
        description="Vând piese auto originale, verificate.",
        website="https://ana.example.ro",
        verified=True,
        rating=4.5,
        review_count=8,
        created_at=created,
        updated_at=created,
    )
