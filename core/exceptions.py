# =============================================================================
# SUPPLIER MINIMAL API - CORE EXCEPTIONS MODULE
# =============================================================================
# File: core/exceptions.py
# Description: Custom exception hierarchy for the API
#              Provides granular error handling with HTTP status code mapping
# =============================================================================

from typing import Optional, Dict, Any
from fastapi import status


class ApiException(Exception):
    """
    ┌─────────────────────────────────────────────────────────────────────────┐
    │                    BASE EXCEPTION CLASS                                  │
    │  All custom exceptions inherit from this base class                      │
    │  Provides consistent error structure across the application             │
    └─────────────────────────────────────────────────────────────────────────┘

    Attributes:
        message: Human-readable error description
        error_code: Machine-readable error identifier
        status_code: HTTP status code for API responses
        details: Additional context for debugging
    """

    def __init__(
        self,
        message: str = "An error occurred",
        error_code: str = "API_ERROR",
        status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR,
        details: Optional[Dict[str, Any]] = None
    ):
        self.message = message
        self.error_code = error_code
        self.status_code = status_code
        self.details = details or {}
        super().__init__(self.message)

    def to_dict(self) -> Dict[str, Any]:
        """Convert exception to dictionary for JSON serialization."""
        return {
            "error": True,
            "error_code": self.error_code,
            "message": self.message,
            "details": self.details
        }


# =============================================================================
# AUTHENTICATION EXCEPTIONS
# =============================================================================

class AuthenticationError(ApiException):
    """
    Raised when the bearer credential cannot be accepted.

    Examples:
        - Expired or malformed JWT token
        - Missing authentication header
    """

    def __init__(
        self,
        message: str = "Authentication failed",
        error_code: str = "AUTHENTICATION_FAILED",
        details: Optional[Dict[str, Any]] = None
    ):
        super().__init__(
            message=message,
            error_code=error_code,
            status_code=status.HTTP_401_UNAUTHORIZED,
            details=details
        )


class TokenError(AuthenticationError):
    """Base class for all token-related errors."""

    def __init__(
        self,
        message: str = "Token error",
        error_code: str = "TOKEN_ERROR",
        details: Optional[Dict[str, Any]] = None
    ):
        super().__init__(
            message=message,
            error_code=error_code,
            details=details
        )


class TokenExpiredError(TokenError):
    """Raised when JWT token has expired."""

    def __init__(self, details: Optional[Dict[str, Any]] = None):
        super().__init__(
            message="Token has expired",
            error_code="TOKEN_EXPIRED",
            details=details
        )


class TokenInvalidError(TokenError):
    """Raised when JWT token is malformed or signature is invalid."""

    def __init__(self, details: Optional[Dict[str, Any]] = None):
        super().__init__(
            message="Invalid token",
            error_code="TOKEN_INVALID",
            details=details
        )


class TokenMissingError(TokenError):
    """Raised when authentication token is not provided."""

    def __init__(self, details: Optional[Dict[str, Any]] = None):
        super().__init__(
            message="Authentication token is required",
            error_code="TOKEN_MISSING",
            details=details
        )


# =============================================================================
# AUTHORIZATION EXCEPTIONS
# =============================================================================

class AuthorizationError(ApiException):
    """Raised when an authenticated caller lacks access to a resource."""

    def __init__(
        self,
        message: str = "Access denied",
        error_code: str = "AUTHORIZATION_FAILED",
        details: Optional[Dict[str, Any]] = None
    ):
        super().__init__(
            message=message,
            error_code=error_code,
            status_code=status.HTTP_403_FORBIDDEN,
            details=details
        )


class InsufficientPermissionsError(AuthorizationError):
    """Raised when the token does not carry the claim a policy requires."""

    def __init__(
        self,
        required_claim: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None
    ):
        message = "Insufficient permissions"
        if required_claim:
            message = f"Insufficient permissions. Required claim: {required_claim}"
        super().__init__(
            message=message,
            error_code="INSUFFICIENT_PERMISSIONS",
            details=details
        )


# =============================================================================
# USER EXCEPTIONS
# =============================================================================

class UserError(ApiException):
    """Base class for user-related errors."""

    def __init__(
        self,
        message: str = "User error",
        error_code: str = "USER_ERROR",
        status_code: int = status.HTTP_400_BAD_REQUEST,
        details: Optional[Dict[str, Any]] = None
    ):
        super().__init__(
            message=message,
            error_code=error_code,
            status_code=status_code,
            details=details
        )


class UserNotFoundError(UserError):
    """Raised when requested user does not exist."""

    def __init__(self, email: Optional[str] = None, details: Optional[Dict[str, Any]] = None):
        message = "User not found"
        if email:
            message = f"User '{email}' not found"
        super().__init__(
            message=message,
            error_code="USER_NOT_FOUND",
            status_code=status.HTTP_404_NOT_FOUND,
            details=details
        )


class UserExistsError(UserError):
    """Raised when attempting to register an email that is already taken."""

    def __init__(
        self,
        field: str = "email",
        details: Optional[Dict[str, Any]] = None
    ):
        super().__init__(
            message=f"User with this {field} already exists",
            error_code="USER_EXISTS",
            details=details
        )


class InvalidCredentialsError(UserError):
    """Raised when email/password combination is invalid."""

    def __init__(self, details: Optional[Dict[str, Any]] = None):
        super().__init__(
            message="Invalid user or password.",
            error_code="INVALID_CREDENTIALS",
            details=details
        )


class AccountLockedError(UserError):
    """Raised when user account is locked due to too many failed attempts."""

    def __init__(
        self,
        locked_until: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None
    ):
        if locked_until:
            details = dict(details or {}, locked_until=locked_until)
        super().__init__(
            message="User is blocked.",
            error_code="ACCOUNT_LOCKED",
            details=details
        )


# =============================================================================
# SUPPLIER EXCEPTIONS
# =============================================================================

class SupplierNotFoundError(ApiException):
    """Raised when no supplier exists for the requested id."""

    def __init__(self, supplier_id: Optional[str] = None, details: Optional[Dict[str, Any]] = None):
        message = "Supplier not found"
        if supplier_id:
            message = f"Supplier '{supplier_id}' not found"
        super().__init__(
            message=message,
            error_code="SUPPLIER_NOT_FOUND",
            status_code=status.HTTP_404_NOT_FOUND,
            details=details
        )


class PersistenceError(ApiException):
    """Raised when a write reported no affected entities."""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(
            message=message,
            error_code="PERSISTENCE_ERROR",
            status_code=status.HTTP_400_BAD_REQUEST,
            details=details
        )


# =============================================================================
# VALIDATION EXCEPTIONS
# =============================================================================

class ValidationError(ApiException):
    """Raised when input validation fails outside of request parsing."""

    def __init__(
        self,
        message: str = "One or more validation errors occurred.",
        details: Optional[Dict[str, Any]] = None
    ):
        super().__init__(
            message=message,
            error_code="VALIDATION_ERROR",
            status_code=status.HTTP_400_BAD_REQUEST,
            details=details
        )


class PasswordValidationError(ValidationError):
    """Raised when password does not meet requirements."""

    def __init__(
        self,
        message: str = "Password does not meet requirements",
        details: Optional[Dict[str, Any]] = None
    ):
        super().__init__(
            message=message,
            details=details
        )
        self.error_code = "PASSWORD_VALIDATION_ERROR"


# =============================================================================
# DATABASE EXCEPTIONS
# =============================================================================

class DatabaseError(ApiException):
    """Base class for database-related errors."""

    def __init__(
        self,
        message: str = "Database error",
        error_code: str = "DATABASE_ERROR",
        details: Optional[Dict[str, Any]] = None
    ):
        super().__init__(
            message=message,
            error_code=error_code,
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            details=details
        )


class DatabaseConnectionError(DatabaseError):
    """Raised when database connection fails."""

    def __init__(self, details: Optional[Dict[str, Any]] = None):
        super().__init__(
            message="Failed to connect to database",
            error_code="DATABASE_CONNECTION_ERROR",
            details=details
        )
