"""Authentication and identity provider protocols."""

from dataclasses import dataclass
from typing import Optional, Protocol
from uuid import UUID

from domain.entities.identity import Identity


@dataclass
class TokenUser:
    """Represents a user extracted from an auth token."""

    id: UUID
    email: str
    display_name: Optional[str] = None
    role: Optional[str] = None

    def to_identity(self) -> Identity:
        return Identity(id=self.id, email=self.email)


class IAuthProvider(Protocol):
    """Protocol for authentication providers."""

    async def validate_token(self, token: str) -> Optional[TokenUser]:
        """
        Validate an authentication token.

        Args:
            token: The bearer token to validate

        Returns:
            TokenUser if valid, None if invalid
        """
        ...

    def create_token(self, user: TokenUser) -> str:
        """Create an authentication token for a user."""
        ...


class IIdentityService(Protocol):
    """Resolves who is making the current request."""

    async def get_current_identity(self) -> Optional[Identity]:
        """Return the caller's identity, or None when anonymous. Never raises for anonymity."""
        ...
