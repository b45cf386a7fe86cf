# =============================================================================
# CORE MODULE INITIALIZATION
# =============================================================================
# File: core/__init__.py
# Description: Core module exports for centralized access
# =============================================================================

from core.config import settings, get_settings, Settings
from core.exceptions import (
    # Base
    ApiException,

    # Authentication
    AuthenticationError,
    TokenError,
    TokenExpiredError,
    TokenInvalidError,
    TokenMissingError,

    # Authorization
    AuthorizationError,
    InsufficientPermissionsError,

    # User
    UserError,
    UserNotFoundError,
    UserExistsError,
    InvalidCredentialsError,
    AccountLockedError,

    # Supplier
    SupplierNotFoundError,
    PersistenceError,

    # Validation
    ValidationError,
    PasswordValidationError,

    # Database
    DatabaseError,
    DatabaseConnectionError,
)
from core.security import (
    PasswordManager,
    JWTManager,
    PasswordValidator,
    TokenPayload,
    password_manager,
    jwt_manager,
    password_validator,
)

__all__ = [
    # Config
    "settings",
    "get_settings",
    "Settings",

    # Exceptions
    "ApiException",
    "AuthenticationError",
    "TokenError",
    "TokenExpiredError",
    "TokenInvalidError",
    "TokenMissingError",
    "AuthorizationError",
    "InsufficientPermissionsError",
    "UserError",
    "UserNotFoundError",
    "UserExistsError",
    "InvalidCredentialsError",
    "AccountLockedError",
    "SupplierNotFoundError",
    "PersistenceError",
    "ValidationError",
    "PasswordValidationError",
    "DatabaseError",
    "DatabaseConnectionError",

    # Security
    "PasswordManager",
    "JWTManager",
    "PasswordValidator",
    "TokenPayload",
    "password_manager",
    "jwt_manager",
    "password_validator",
]
