# =============================================================================
# SUPPLIER MINIMAL API - AUTH REPOSITORY
# =============================================================================
# File: auth/repository.py
# Description: Data access layer for identity users and their claims
#              Implements repository pattern with SQLAlchemy async
# =============================================================================

from typing import Optional
from datetime import datetime, timezone, timedelta

from sqlalchemy import select, delete, func
from sqlalchemy.ext.asyncio import AsyncSession

from db.models import User, UserClaim
from core.config import settings


class UserRepository:
    """
    ┌─────────────────────────────────────────────────────────────────────────┐
    │                    USER REPOSITORY                                       │
    │  Data access layer for User and UserClaim entities                      │
    │  Provides clean separation between business logic and data access       │
    └─────────────────────────────────────────────────────────────────────────┘

    All methods are async and work with SQLAlchemy AsyncSession.
    The repository flushes but does not commit; transactions are the
    caller's responsibility.
    """

    def __init__(self, session: AsyncSession):
        """
        Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self._session = session

    # =========================================================================
    # CREATE OPERATIONS
    # =========================================================================

    async def create(
        self,
        email: str,
        password_hash: str,
        email_confirmed: bool = False,
    ) -> User:
        """
        Create a new user.

        Args:
            email: User's email address, stored lower-cased
            password_hash: Hashed password
            email_confirmed: Email confirmation status

        Returns:
            User: Created user entity
        """
        user = User(
            email=email.lower(),
            password_hash=password_hash,
            email_confirmed=email_confirmed,
            claims=[],
        )

        self._session.add(user)
        await self._session.flush()

        return user

    # =========================================================================
    # READ OPERATIONS
    # =========================================================================

    async def get_by_email(self, email: str) -> Optional[User]:
        """
        Get user by email address (case-insensitive).

        Returns:
            User if found, None otherwise
        """
        result = await self._session.execute(
            select(User).where(User.email == email.lower())
        )
        return result.scalar_one_or_none()

    async def exists_email(self, email: str) -> bool:
        result = await self._session.execute(
            select(func.count()).select_from(User).where(User.email == email.lower())
        )
        return (result.scalar() or 0) > 0

    # =========================================================================
    # LOCKOUT AND LOGIN BOOKKEEPING
    # =========================================================================

    async def update_password(
        self,
        user: User,
        password_hash: str
    ) -> User:
        """Replace the stored password hash."""
        user.password_hash = password_hash
        await self._session.flush()
        return user

    async def update_last_login(self, user: User) -> User:
        """
        Record a successful login and clear the lockout state.
        """
        user.last_login = datetime.now(timezone.utc)
        user.failed_attempts = 0
        user.locked_until = None

        await self._session.flush()

        return user

    async def increment_failed_attempts(self, user: User) -> User:
        """
        Increment failed login attempts.

        Once settings.max_login_attempts is reached the account is locked
        for settings.lockout_duration_minutes and the counter starts over.
        """
        user.failed_attempts += 1

        if user.failed_attempts >= settings.max_login_attempts:
            user.locked_until = (
                datetime.now(timezone.utc) +
                timedelta(minutes=settings.lockout_duration_minutes)
            )
            user.failed_attempts = 0

        await self._session.flush()

        return user

    # =========================================================================
    # CLAIMS
    # =========================================================================

    async def add_claim(
        self,
        user: User,
        claim_type: str,
        claim_value: str = ""
    ) -> UserClaim:
        """
        Attach a claim to a user. Adding an existing (type, value) pair is a no-op.

        Returns:
            UserClaim: The new or existing claim
        """
        for claim in user.claims:
            if claim.claim_type == claim_type and claim.claim_value == claim_value:
                return claim

        claim = UserClaim(claim_type=claim_type, claim_value=claim_value)
        user.claims.append(claim)
        await self._session.flush()

        return claim

    async def remove_claims(self, user: User, claim_type: str) -> int:
        """
        Remove every claim of the given type from a user.

        Returns:
            int: Number of claims removed
        """
        result = await self._session.execute(
            delete(UserClaim).where(
                UserClaim.user_id == user.id,
                UserClaim.claim_type == claim_type,
            )
        )
        await self._session.refresh(user, attribute_names=["claims"])
        return result.rowcount or 0
