"""JWT authentication provider.

Accepts Supabase-issued access tokens (ES256, verified against the
project's JWKS) and locally signed tokens (HS256 shared secret, used by
tests and internal tooling). Payload fields used:

    {"sub": "<owner uuid>", "email": "...", "user_metadata": {"name": "..."}, "exp": ...}
"""

import logging
from datetime import datetime, timedelta
from typing import Any, Optional
from uuid import UUID

import httpx
from jose import JWTError, jwt

from core.config import settings
from infrastructure.auth.provider import TokenUser

logger = logging.getLogger(__name__)


class JWTAuthProvider:
    """JWT-based authentication provider."""

    def __init__(
        self,
        secret_key: str = settings.jwt_secret_key,
        algorithm: str = settings.jwt_algorithm,
        expire_minutes: int = settings.jwt_expire_minutes,
        jwks_url: str = settings.supabase_jwks_url,
    ) -> None:
        self._secret_key = secret_key
        self._algorithm = algorithm
        self._expire_minutes = expire_minutes
        self._jwks_url = jwks_url
        self._jwks: dict[str, dict[str, Any]] | None = None

    async def validate_token(self, token: str) -> Optional[TokenUser]:
        """
        Validate a JWT and extract the user it was issued to.

        Returns:
            TokenUser if valid, None if invalid, expired or missing claims
        """
        try:
            header = jwt.get_unverified_header(token)
            if header.get("alg") == "ES256":
                payload = await self._decode_es256(token, header.get("kid"))
            else:
                payload = jwt.decode(
                    token,
                    self._secret_key,
                    algorithms=[self._algorithm],
                    options={"verify_aud": False},
                )
        except JWTError:
            return None

        if not payload:
            return None

        subject = payload.get("sub")
        email = payload.get("email")
        if not subject or not email:
            return None
        try:
            user_id = UUID(subject)
        except ValueError:
            return None

        metadata = payload.get("user_metadata") or {}
        return TokenUser(
            id=user_id,
            email=email,
            display_name=metadata.get("name") or metadata.get("display_name"),
            role=payload.get("role"),
        )

    async def _decode_es256(self, token: str, kid: Optional[str]) -> Optional[dict[str, Any]]:
        """Verify an ES256 token against the JWKS key named by ``kid``."""
        if not kid:
            return None

        key = (await self._get_jwks()).get(kid)
        if key is None:
            # Unknown kid usually means the keys were rotated.
            self._jwks = None
            key = (await self._get_jwks()).get(kid)
            if key is None:
                logger.warning("JWKS key not found for kid=%s", kid)
                return None

        return jwt.decode(token, key, algorithms=["ES256"], options={"verify_aud": False})

    async def _get_jwks(self) -> dict[str, dict[str, Any]]:
        """Fetch and cache the JWKS keys by kid."""
        if self._jwks is not None:
            return self._jwks
        if not self._jwks_url:
            return {}

        try:
            async with httpx.AsyncClient() as client:
                response = await client.get(self._jwks_url, timeout=10.0)
                response.raise_for_status()
        except httpx.HTTPError:
            logger.exception("Failed to fetch JWKS from %s", self._jwks_url)
            return {}

        self._jwks = {
            key["kid"]: key for key in response.json().get("keys", []) if key.get("kid")
        }
        logger.info("Fetched %d JWKS keys", len(self._jwks))
        return self._jwks

    def create_token(self, user: TokenUser) -> str:
        """Create an HS256 token for a user."""
        expire = datetime.utcnow() + timedelta(minutes=self._expire_minutes)
        payload: dict[str, Any] = {
            "sub": str(user.id),
            "email": user.email,
            "aud": "authenticated",
            "role": user.role or "authenticated",
            "exp": expire,
            "user_metadata": {"name": user.display_name},
        }
        return jwt.encode(payload, self._secret_key, algorithm=self._algorithm)
