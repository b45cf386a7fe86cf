# =============================================================================
# SUPPLIER MINIMAL API - CORE SECURITY MODULE
# =============================================================================
# File: core/security.py
# Description: Security utilities including password hashing and JWT management
#              Argon2id hashing with bcrypt fallback, HMAC-signed bearer tokens
# =============================================================================

from typing import Optional, Dict, List, Tuple
from datetime import datetime, timedelta, timezone
from uuid import uuid4

from passlib.context import CryptContext
from argon2 import PasswordHasher
from argon2.exceptions import InvalidHash, VerificationError
from jose import jwt, JWTError, ExpiredSignatureError
from pydantic import BaseModel, Field

from core.config import settings
from core.exceptions import (
    TokenExpiredError,
    TokenInvalidError,
    PasswordValidationError,
)


# =============================================================================
# PASSWORD HASHER CONFIGURATION
# =============================================================================

class PasswordManager:
    """
    ┌─────────────────────────────────────────────────────────────────────────┐
    │                    PASSWORD HASHING MANAGER                              │
    │  Implements OWASP recommended Argon2id with Bcrypt fallback            │
    │  Supports automatic algorithm upgrade on password verification         │
    └─────────────────────────────────────────────────────────────────────────┘

    Algorithm Selection:
        - Primary:  Argon2id (OWASP recommended for new passwords)
        - Fallback: Bcrypt (for legacy password verification)
    """

    def __init__(self):
        self._argon2_hasher = PasswordHasher(
            time_cost=settings.argon2_time_cost,
            memory_cost=settings.argon2_memory_cost,
            parallelism=settings.argon2_parallelism,
            hash_len=32,
            salt_len=16,
        )

        self._bcrypt_context = CryptContext(
            schemes=["bcrypt"],
            deprecated="auto",
            bcrypt__rounds=settings.bcrypt_rounds,
        )

        self._preferred_algorithm = settings.password_hash_algorithm

    def hash_password(self, password: str) -> str:
        """
        Hash a password using the configured algorithm.

        Example:
            >>> pm = PasswordManager()
            >>> pm.hash_password("SecurePassword123!").startswith("$argon2id$")
            True
        """
        if self._preferred_algorithm == "argon2":
            return self._argon2_hasher.hash(password)
        return self._bcrypt_context.hash(password)

    def verify_password(
        self,
        plain_password: str,
        hashed_password: str
    ) -> Tuple[bool, bool]:
        """
        Verify a password against its hash with algorithm detection.

        Args:
            plain_password: Plain text password to verify
            hashed_password: Stored password hash

        Returns:
            tuple[bool, bool]: (is_valid, needs_rehash)
                - is_valid: True if password matches
                - needs_rehash: True if password should be rehashed with current algorithm
        """
        if hashed_password.startswith("$argon2"):
            try:
                self._argon2_hasher.verify(hashed_password, plain_password)
            except (VerificationError, InvalidHash):
                return False, False
            needs_rehash = (
                self._preferred_algorithm != "argon2"
                or self._argon2_hasher.check_needs_rehash(hashed_password)
            )
            return True, needs_rehash

        if hashed_password.startswith("$2"):
            try:
                is_valid = self._bcrypt_context.verify(plain_password, hashed_password)
            except ValueError:
                return False, False
            # Upgrade to Argon2 if that's the preferred algorithm
            return is_valid, is_valid and self._preferred_algorithm == "argon2"

        # Unknown hash format
        return False, False


# =============================================================================
# JWT TOKEN PAYLOAD MODELS
# =============================================================================

class TokenPayload(BaseModel):
    """
    Decoded bearer token.

    Attributes:
        sub: Subject (user ID)
        email: User e-mail, which doubles as the user name
        jti: Unique token identifier
        iat: Issued at timestamp
        exp: Expiration timestamp
        claims: User claims grouped by claim type
    """
    sub: str
    email: Optional[str] = None
    jti: str
    iat: datetime
    exp: datetime
    claims: Dict[str, List[str]] = Field(default_factory=dict)

    def has_claim(self, claim_type: str, value: Optional[str] = None) -> bool:
        """Check for a claim type, optionally requiring a specific value."""
        values = self.claims.get(claim_type)
        if values is None:
            return False
        return value is None or value in values


# =============================================================================
# JWT TOKEN MANAGER
# =============================================================================

class JWTManager:
    """
    ┌─────────────────────────────────────────────────────────────────────────┐
    │                    JWT TOKEN MANAGER                                     │
    │  Handles creation and validation of bearer access tokens                │
    │  Symmetric HMAC signing with issuer and audience binding                │
    └─────────────────────────────────────────────────────────────────────────┘

    Tokens carry the user id, e-mail and the user's claims so authorization
    policies can be evaluated without a database round trip.
    """

    def __init__(self):
        self._secret_key = settings.jwt_secret_key
        self._algorithm = settings.jwt_algorithm
        self._issuer = settings.jwt_issuer
        self._audience = settings.jwt_audience
        self._access_token_expire = timedelta(minutes=settings.jwt_access_token_expire_minutes)

    @property
    def expires_in(self) -> int:
        """Access token lifetime in seconds."""
        return int(self._access_token_expire.total_seconds())

    def create_access_token(
        self,
        user_id: str,
        email: Optional[str] = None,
        claims: Optional[Dict[str, List[str]]] = None,
        expires_delta: Optional[timedelta] = None,
    ) -> str:
        """
        Create a signed access token.

        Args:
            user_id: User identifier (subject)
            email: User e-mail
            claims: User claims grouped by type
            expires_delta: Override for the configured lifetime

        Returns:
            str: Encoded JWT token
        """
        now = datetime.now(timezone.utc)
        expire = now + (expires_delta if expires_delta is not None else self._access_token_expire)

        payload = {
            "sub": user_id,
            "jti": str(uuid4()),
            "iat": now,
            "nbf": now,
            "exp": expire,
            "iss": self._issuer,
            "aud": self._audience,
            "claims": claims or {},
        }

        if email:
            payload["email"] = email

        return jwt.encode(payload, self._secret_key, algorithm=self._algorithm)

    def decode_token(self, token: str) -> TokenPayload:
        """
        Decode and validate a JWT token.

        Raises:
            TokenExpiredError: If token has expired
            TokenInvalidError: If token is malformed, the signature is invalid,
                or issuer/audience do not match
        """
        try:
            payload = jwt.decode(
                token,
                self._secret_key,
                algorithms=[self._algorithm],
                audience=self._audience,
                issuer=self._issuer,
            )
        except ExpiredSignatureError:
            raise TokenExpiredError()
        except JWTError as e:
            raise TokenInvalidError(details={"error": str(e)})

        if not payload.get("sub"):
            raise TokenInvalidError(details={"error": "Token has no subject"})

        return TokenPayload(
            sub=payload["sub"],
            email=payload.get("email"),
            jti=payload.get("jti", ""),
            iat=datetime.fromtimestamp(payload.get("iat", 0), tz=timezone.utc),
            exp=datetime.fromtimestamp(payload.get("exp", 0), tz=timezone.utc),
            claims=payload.get("claims") or {},
        )


# =============================================================================
# PASSWORD VALIDATION
# =============================================================================

class PasswordValidator:
    """
    Password strength validation.

    Rules:
        - Minimum 6 characters
        - Maximum 100 characters
        - At least one uppercase letter
        - At least one lowercase letter
        - At least one digit
        - At least one special character
        - Not in common passwords list
    """

    MIN_LENGTH = 6
    MAX_LENGTH = 100

    COMMON_PASSWORDS = {
        "password", "123456", "12345678", "qwerty", "abc123",
        "monkey", "1234567", "letmein", "trustno1", "dragon",
        "baseball", "iloveyou", "master", "sunshine", "ashley",
        "bailey", "shadow", "123123", "654321", "superman",
        "qazwsx", "michael", "football", "password1", "password123"
    }

    SPECIAL_CHARS = set("!@#$%^&*()_+-=[]{}|;':\",./<>?`~")

    @classmethod
    def validate(cls, password: str) -> Tuple[bool, List[str]]:
        """
        Validate password strength.

        Returns:
            tuple[bool, list[str]]: (is_valid, list of error messages)
        """
        errors = []

        if len(password) < cls.MIN_LENGTH:
            errors.append(f"Password must be at least {cls.MIN_LENGTH} characters long")

        if len(password) > cls.MAX_LENGTH:
            errors.append(f"Password must not exceed {cls.MAX_LENGTH} characters")

        if not any(c.isupper() for c in password):
            errors.append("Password must contain at least one uppercase letter")

        if not any(c.islower() for c in password):
            errors.append("Password must contain at least one lowercase letter")

        if not any(c.isdigit() for c in password):
            errors.append("Password must contain at least one digit")

        if not any(c in cls.SPECIAL_CHARS for c in password):
            errors.append("Password must contain at least one special character")

        if password.lower() in cls.COMMON_PASSWORDS:
            errors.append("Password is too common")

        return len(errors) == 0, errors

    @classmethod
    def ensure_valid(cls, password: str) -> None:
        """
        Validate password and raise exception if invalid.

        Raises:
            PasswordValidationError: If password doesn't meet requirements
        """
        is_valid, errors = cls.validate(password)
        if not is_valid:
            raise PasswordValidationError(
                message="; ".join(errors),
                details={"errors": {"password": errors}}
            )


# =============================================================================
# SINGLETON INSTANCES
# =============================================================================

password_manager = PasswordManager()
jwt_manager = JWTManager()
password_validator = PasswordValidator()
