# =============================================================================
# SUPPLIER MINIMAL API - AUTH SERVICE
# =============================================================================
# File: auth/service.py
# Description: Business logic layer for registration and login
#              Orchestrates repository, password hashing and token issuing
# =============================================================================

from typing import Optional
import logging

from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from auth.repository import UserRepository
from auth.schemas import (
    RegisterUser,
    LoginUser,
    LoginResponse,
    UserTokenResponse,
    ClaimResponse,
)
from db.models import User
from core.security import (
    password_manager,
    jwt_manager,
    password_validator,
)
from core.exceptions import (
    InvalidCredentialsError,
    UserExistsError,
    UserNotFoundError,
    AccountLockedError,
)


logger = logging.getLogger(__name__)


class AuthService:
    """
    ┌─────────────────────────────────────────────────────────────────────────┐
    │                    AUTHENTICATION SERVICE                                │
    │  Business logic layer handling registration, login and claims           │
    │  Coordinates between the user repository and the security helpers       │
    └─────────────────────────────────────────────────────────────────────────┘

    Responsibilities:
        - User registration with password strength validation
        - Login with brute-force lockout
        - Access token issuing
        - Claim management (used by the management CLI)
    """

    def __init__(self, session: AsyncSession):
        """
        Initialize service with database session.

        Args:
            session: SQLAlchemy async session
        """
        self._session = session
        self._user_repo = UserRepository(session)

    # =========================================================================
    # REGISTRATION
    # =========================================================================

    async def register(
        self,
        user_data: RegisterUser,
        ip_address: Optional[str] = None,
    ) -> LoginResponse:
        """
        Register a new user and sign them in.

        Args:
            user_data: Registration data
            ip_address: Client IP address

        Returns:
            LoginResponse: Access token for the new user

        Raises:
            PasswordValidationError: If password doesn't meet requirements
            UserExistsError: If email already exists
        """
        password_validator.ensure_valid(user_data.password)

        if await self._user_repo.exists_email(user_data.email):
            raise UserExistsError(field="email")

        password_hash = password_manager.hash_password(user_data.password)

        # No confirmation flow; accounts are confirmed on creation
        try:
            user = await self._user_repo.create(
                email=user_data.email,
                password_hash=password_hash,
                email_confirmed=True,
            )
            await self._session.commit()
        except IntegrityError as e:
            # Concurrent registration took the email after the check above
            await self._session.rollback()
            raise UserExistsError(field="email") from e

        logger.info(f"User registered: {user.email} (ip={ip_address})")

        return self.issue_token(user)

    # =========================================================================
    # LOGIN
    # =========================================================================

    async def login(
        self,
        credentials: LoginUser,
        ip_address: Optional[str] = None,
    ) -> LoginResponse:
        """
        Authenticate user and issue an access token.

        Flow:
            1. Validate user exists
            2. Check account lock status
            3. Verify password, counting failures
            4. Rehash password if the stored hash is outdated
            5. Record the login and issue a token

        Raises:
            InvalidCredentialsError: Unknown email or wrong password
            AccountLockedError: Account is locked
        """
        user = await self._user_repo.get_by_email(credentials.email)

        if not user:
            logger.info(f"Login failed for unknown user {credentials.email} (ip={ip_address})")
            raise InvalidCredentialsError()

        if user.is_locked:
            logger.warning(f"Login refused for locked user {user.email} (ip={ip_address})")
            raise AccountLockedError(
                locked_until=user.locked_until.isoformat() if user.locked_until else None
            )

        is_valid, needs_rehash = password_manager.verify_password(
            credentials.password, user.password_hash
        )

        if not is_valid:
            await self._user_repo.increment_failed_attempts(user)
            # Persist the counter; the request session rolls back on error
            await self._session.commit()

            if user.is_locked:
                logger.warning(f"User locked out after failed logins: {user.email} (ip={ip_address})")
                raise AccountLockedError(locked_until=user.locked_until.isoformat())

            logger.info(f"Login failed for {user.email} (ip={ip_address})")
            raise InvalidCredentialsError()

        if needs_rehash:
            await self._user_repo.update_password(
                user, password_manager.hash_password(credentials.password)
            )

        await self._user_repo.update_last_login(user)
        await self._session.commit()

        logger.info(f"User logged in: {user.email} (ip={ip_address})")

        return self.issue_token(user)

    # =========================================================================
    # TOKENS
    # =========================================================================

    def issue_token(self, user: User) -> LoginResponse:
        """Build the login response for a user, embedding its claims."""
        access_token = jwt_manager.create_access_token(
            user_id=user.id,
            email=user.email,
            claims=user.claims_map,
        )

        return LoginResponse(
            access_token=access_token,
            token_type="bearer",
            expires_in=jwt_manager.expires_in,
            user_token=UserTokenResponse(
                id=user.id,
                email=user.email,
                claims=[
                    ClaimResponse(type=claim.claim_type, value=claim.claim_value)
                    for claim in user.claims
                ],
            ),
        )

    # =========================================================================
    # CLAIMS
    # =========================================================================

    async def grant_claim(self, email: str, claim_type: str, claim_value: str = "") -> None:
        """
        Attach a claim to a user.

        Raises:
            UserNotFoundError: If no user has this email
        """
        user = await self._user_repo.get_by_email(email)
        if not user:
            raise UserNotFoundError(email=email)

        await self._user_repo.add_claim(user, claim_type, claim_value)
        await self._session.commit()
        logger.info(f"Granted claim {claim_type}={claim_value!r} to {user.email}")

    async def revoke_claim(self, email: str, claim_type: str) -> int:
        """
        Remove all claims of a type from a user.

        Returns:
            int: Number of claims removed

        Raises:
            UserNotFoundError: If no user has this email
        """
        user = await self._user_repo.get_by_email(email)
        if not user:
            raise UserNotFoundError(email=email)

        removed = await self._user_repo.remove_claims(user, claim_type)
        await self._session.commit()
        logger.info(f"Revoked {removed} {claim_type} claim(s) from {user.email}")
        return removed
