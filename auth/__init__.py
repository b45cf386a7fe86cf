# =============================================================================
# AUTH MODULE INITIALIZATION
# =============================================================================
# File: auth/__init__.py
# Description: Auth module exports
# =============================================================================

from auth.schemas import (
    RegisterUser,
    LoginUser,
    LoginResponse,
    UserTokenResponse,
    ClaimResponse,
    ErrorResponse,
)
from auth.repository import UserRepository
from auth.service import AuthService
from auth.dependencies import (
    get_auth_service,
    get_current_token,
    get_client_ip,
    require_claim,
    REMOVE_SUPPLIER_CLAIM,
    DBSession,
    AuthServiceDep,
    CurrentToken,
    CanRemoveSupplier,
    ClientIP,
)

__all__ = [
    # Schemas
    "RegisterUser",
    "LoginUser",
    "LoginResponse",
    "UserTokenResponse",
    "ClaimResponse",
    "ErrorResponse",

    # Repository
    "UserRepository",

    # Service
    "AuthService",

    # Dependencies
    "get_auth_service",
    "get_current_token",
    "get_client_ip",
    "require_claim",
    "REMOVE_SUPPLIER_CLAIM",
    "DBSession",
    "AuthServiceDep",
    "CurrentToken",
    "CanRemoveSupplier",
    "ClientIP",
]
