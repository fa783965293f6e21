"""Authentication dependencies for FastAPI."""

from typing import Annotated

from fastapi import Depends
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from core.exceptions import AuthenticationError, ErrorCode
from domain.entities.identity import Identity
from infrastructure.auth.identity import TokenIdentityService
from infrastructure.auth.jwt_provider import JWTAuthProvider
from infrastructure.auth.provider import IIdentityService

# Security scheme for OpenAPI docs
security = HTTPBearer(auto_error=False)

# Singleton auth provider
_auth_provider: JWTAuthProvider | None = None


def get_auth_provider() -> JWTAuthProvider:
    """Get or create the auth provider singleton."""
    global _auth_provider
    if _auth_provider is None:
        _auth_provider = JWTAuthProvider()
    return _auth_provider


def get_identity_service(
    credentials: Annotated[
        HTTPAuthorizationCredentials | None,
        Depends(security),
    ],
    auth_provider: JWTAuthProvider = Depends(get_auth_provider),
) -> TokenIdentityService:
    """Identity service bound to the request's bearer token, if any."""
    token = credentials.credentials if credentials else None
    return TokenIdentityService(auth_provider, token)


async def get_optional_identity(
    identity_service: IIdentityService = Depends(get_identity_service),
) -> Identity | None:
    """
    Dependency to get the caller if authenticated.

    Returns:
        Identity if authenticated, None otherwise (no exception raised)
    """
    return await identity_service.get_current_identity()


async def get_current_identity(
    credentials: Annotated[
        HTTPAuthorizationCredentials | None,
        Depends(security),
    ],
    identity: Identity | None = Depends(get_optional_identity),
) -> Identity:
    """
    Dependency to get the authenticated caller.

    Raises:
        AuthenticationError: If no token provided or token is invalid
    """
    if identity:
        return identity
    if not credentials:
        raise AuthenticationError(
            message="Authorization header required",
            error_code=ErrorCode.UNAUTHORIZED,
        )
    raise AuthenticationError(
        message="Invalid or expired token",
        error_code=ErrorCode.INVALID_TOKEN,
    )


# Type aliases for convenience in route handlers
CurrentIdentity = Annotated[Identity, Depends(get_current_identity)]
OptionalIdentity = Annotated[Identity | None, Depends(get_optional_identity)]
