# =============================================================================
# SUPPLIER MINIMAL API - AUTH DEPENDENCIES
# =============================================================================
# File: auth/dependencies.py
# Description: FastAPI dependencies for authentication and authorization
#              Provides reusable dependency injection for protected routes
# =============================================================================

from typing import Optional, Annotated, Callable, Awaitable
from fastapi import Depends, Request
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials

from sqlalchemy.ext.asyncio import AsyncSession

from db.factory import get_db_session
from auth.service import AuthService
from core.security import jwt_manager, TokenPayload
from core.exceptions import (
    TokenMissingError,
    InsufficientPermissionsError,
)


# =============================================================================
# SECURITY SCHEME
# =============================================================================

bearer_scheme = HTTPBearer(
    scheme_name="Bearer",
    description="JWT access token",
    auto_error=False,
)


# =============================================================================
# DATABASE DEPENDENCIES
# =============================================================================

DBSession = Annotated[AsyncSession, Depends(get_db_session)]


# =============================================================================
# SERVICE DEPENDENCIES
# =============================================================================

async def get_auth_service(
    session: DBSession,
) -> AuthService:
    """
    Dependency for authentication service.

    Args:
        session: Database session

    Returns:
        AuthService: Configured auth service
    """
    return AuthService(session)


AuthServiceDep = Annotated[AuthService, Depends(get_auth_service)]


# =============================================================================
# TOKEN EXTRACTION AND VALIDATION
# =============================================================================

async def get_token_from_header(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(bearer_scheme),
) -> str:
    """
    Extract JWT token from Authorization header.

    Raises:
        TokenMissingError: If token not provided
    """
    if credentials is None:
        raise TokenMissingError()

    return credentials.credentials


Token = Annotated[str, Depends(get_token_from_header)]


async def get_current_token(token: Token) -> TokenPayload:
    """
    Validate and decode JWT token.

    The token is self-contained: identity and claims are read from it
    without a database lookup.

    Raises:
        TokenExpiredError: If token expired
        TokenInvalidError: If token invalid
    """
    return jwt_manager.decode_token(token)


CurrentToken = Annotated[TokenPayload, Depends(get_current_token)]


# =============================================================================
# AUTHORIZATION POLICIES
# =============================================================================

def require_claim(
    claim_type: str,
    claim_value: Optional[str] = None,
) -> Callable[[TokenPayload], Awaitable[TokenPayload]]:
    """
    Build a dependency that admits only tokens carrying a claim.

    Args:
        claim_type: Required claim type
        claim_value: Required value, or None to accept any value

    Usage:
        @router.delete("/{id}", dependencies=[Depends(require_claim("RemoveSupplier"))])
    """

    async def check_claim(token: CurrentToken) -> TokenPayload:
        if not token.has_claim(claim_type, claim_value):
            raise InsufficientPermissionsError(required_claim=claim_type)
        return token

    return check_claim


# Policy guarding supplier deletion
REMOVE_SUPPLIER_CLAIM = "RemoveSupplier"

CanRemoveSupplier = Annotated[TokenPayload, Depends(require_claim(REMOVE_SUPPLIER_CLAIM))]


# =============================================================================
# REQUEST CONTEXT
# =============================================================================

def get_client_ip(request: Request) -> str:
    """
    Extract client IP from request.

    Handles proxy headers (X-Forwarded-For, X-Real-IP).
    """
    forwarded_for = request.headers.get("X-Forwarded-For")
    if forwarded_for:
        return forwarded_for.split(",")[0].strip()

    real_ip = request.headers.get("X-Real-IP")
    if real_ip:
        return real_ip.strip()

    return request.client.host if request.client else "unknown"


ClientIP = Annotated[str, Depends(get_client_ip)]
