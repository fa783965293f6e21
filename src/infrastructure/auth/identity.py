"""Identity service backed by a bearer token."""

from typing import Optional

from domain.entities.identity import Identity
from infrastructure.auth.provider import IAuthProvider


class TokenIdentityService:
    """Resolves the caller from an optional bearer token.

    A missing, malformed or expired token resolves to an anonymous caller.
    """

    def __init__(self, auth_provider: IAuthProvider, token: Optional[str]) -> None:
        self._auth_provider = auth_provider
        self._token = token

    async def get_current_identity(self) -> Optional[Identity]:
        if not self._token:
            return None
        user = await self._auth_provider.validate_token(self._token)
        return user.to_identity() if user else None
