# =============================================================================
# SUPPLIER MINIMAL API - AUTH SCHEMAS
# =============================================================================
# File: auth/schemas.py
# Description: Pydantic models for request/response validation
#              Type-safe data transfer objects for register and login
# =============================================================================

from typing import List, Optional

from pydantic import BaseModel, EmailStr, Field, field_validator, ConfigDict, ValidationInfo
from pydantic.alias_generators import to_camel
from pydantic_core import PydanticCustomError


# =============================================================================
# BASE SCHEMAS
# =============================================================================

class BaseSchema(BaseModel):
    """
    Base schema with common configuration.

    JSON uses camelCase names; snake_case names are accepted on input.
    """
    model_config = ConfigDict(
        from_attributes=True,
        str_strip_whitespace=True,
        alias_generator=to_camel,
        populate_by_name=True,
    )


# =============================================================================
# REQUEST SCHEMAS
# =============================================================================

class LoginUser(BaseSchema):
    """
    Schema for login request.

    Validation Rules:
        - email: Valid email format
        - password: 6-100 characters
    """
    # Passwords are compared exactly as typed
    model_config = ConfigDict(str_strip_whitespace=False)

    email: EmailStr = Field(
        ...,
        description="User's email address",
        examples=["user@example.com"]
    )
    password: str = Field(
        ...,
        min_length=6,
        max_length=100,
        description="User's password",
        examples=["SecurePass123!"]
    )

    @field_validator("email", mode="before")
    @classmethod
    def strip_email(cls, v):
        return v.strip() if isinstance(v, str) else v


class RegisterUser(LoginUser):
    """
    Schema for user registration request.

    Validation Rules:
        - email: Valid email format
        - password: 6-100 characters
        - confirmPassword: must equal password
    """
    confirm_password: str = Field(
        ...,
        description="Repeat of the password",
        examples=["SecurePass123!"]
    )

    @field_validator("confirm_password")
    @classmethod
    def passwords_match(cls, v: str, info: ValidationInfo) -> str:
        """Reject a confirmation that differs from the password."""
        password = info.data.get("password")
        if password is not None and v != password:
            raise PydanticCustomError("password_mismatch", "The passwords do not match.")
        return v


# =============================================================================
# RESPONSE SCHEMAS
# =============================================================================

class ClaimResponse(BaseSchema):
    """A single user claim."""
    type: str = Field(..., description="Claim type")
    value: str = Field(..., description="Claim value")


class UserTokenResponse(BaseSchema):
    """Identity summary returned next to the access token."""
    id: str = Field(..., description="User UUID")
    email: str = Field(..., description="Email address")
    claims: List[ClaimResponse] = Field(default_factory=list, description="User claims")


class LoginResponse(BaseSchema):
    """Schema for authentication token response."""
    access_token: str = Field(
        ...,
        description="JWT access token"
    )
    token_type: str = Field(
        "bearer",
        description="Token type"
    )
    expires_in: int = Field(
        ...,
        description="Access token expiration in seconds"
    )
    user_token: UserTokenResponse = Field(
        ...,
        description="Authenticated user"
    )


class ErrorResponse(BaseSchema):
    """Error response envelope, documented on routes."""
    model_config = ConfigDict(alias_generator=None)

    error: bool = Field(
        True,
        description="Error flag"
    )
    error_code: str = Field(
        ...,
        description="Error code"
    )
    message: str = Field(
        ...,
        description="Error message"
    )
    details: Optional[dict] = Field(
        None,
        description="Additional error details"
    )
