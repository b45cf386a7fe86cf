# =============================================================================
# SUPPLIER MINIMAL API - DATABASE MODELS
# =============================================================================
# File: db/models.py
# Description: SQLAlchemy ORM models for identity users, their claims,
#              and the Supplier business entity
# =============================================================================

from typing import Optional, List, Dict
from datetime import datetime, timezone
from uuid import uuid4

from sqlalchemy import (
    String,
    Boolean,
    Integer,
    DateTime,
    ForeignKey,
    UniqueConstraint,
)
from sqlalchemy.orm import relationship, Mapped, mapped_column

from db.base import Base


# =============================================================================
# HELPER FUNCTIONS
# =============================================================================

def generate_uuid() -> str:
    """Generate a new UUID string."""
    return str(uuid4())


def utc_now() -> datetime:
    """Get current UTC timestamp."""
    return datetime.now(timezone.utc)


def as_utc(value: Optional[datetime]) -> Optional[datetime]:
    """SQLite hands back naive datetimes; treat them as UTC."""
    if value is not None and value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value


# =============================================================================
# USER MODEL
# =============================================================================

class User(Base):
    """
    ┌─────────────────────────────────────────────────────────────────────────┐
    │                    USER MODEL                                            │
    │  Identity user: credentials, lockout state and claims                   │
    └─────────────────────────────────────────────────────────────────────────┘

    Fields:
        - id:              UUID primary key (auto-generated)
        - email:           Unique, lower-cased e-mail; also the user name
        - password_hash:   Argon2id/Bcrypt hashed password
        - email_confirmed: Set on registration
        - failed_attempts: Consecutive failed login attempts
        - locked_until:    Account lockout expiration
        - created_at / updated_at / last_login

    Relationships:
        - claims: One-to-many with UserClaim
    """

    __tablename__ = "users"

    id: Mapped[str] = mapped_column(
        String(36),
        primary_key=True,
        default=generate_uuid
    )

    email: Mapped[str] = mapped_column(
        String(255),
        unique=True,
        nullable=False,
        index=True
    )
    password_hash: Mapped[str] = mapped_column(
        String(255),
        nullable=False
    )
    email_confirmed: Mapped[bool] = mapped_column(
        Boolean,
        default=False,
        nullable=False
    )

    # Brute force protection
    failed_attempts: Mapped[int] = mapped_column(
        Integer,
        default=0,
        nullable=False
    )
    locked_until: Mapped[Optional[datetime]] = mapped_column(
        DateTime(timezone=True),
        nullable=True
    )

    # Timestamps
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        default=utc_now,
        nullable=False
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        default=utc_now,
        onupdate=utc_now,
        nullable=False
    )
    last_login: Mapped[Optional[datetime]] = mapped_column(
        DateTime(timezone=True),
        nullable=True
    )

    claims: Mapped[List["UserClaim"]] = relationship(
        "UserClaim",
        back_populates="user",
        cascade="all, delete-orphan",
        lazy="selectin"
    )

    def __repr__(self) -> str:
        return f"<User(id={self.id}, email={self.email})>"

    @property
    def is_locked(self) -> bool:
        """Check if account is currently locked."""
        locked_until = as_utc(self.locked_until)
        if locked_until is None:
            return False
        return utc_now() < locked_until

    @property
    def claims_map(self) -> Dict[str, List[str]]:
        """Claims grouped by type, in the shape the access token carries."""
        grouped: Dict[str, List[str]] = {}
        for claim in self.claims:
            grouped.setdefault(claim.claim_type, []).append(claim.claim_value)
        return grouped


# =============================================================================
# USER CLAIM MODEL
# =============================================================================

class UserClaim(Base):
    """
    A (type, value) pair attached to a user and copied into its tokens.

    The RemoveSupplier claim gates supplier deletion.
    """

    __tablename__ = "user_claims"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    user_id: Mapped[str] = mapped_column(
        String(36),
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
        index=True
    )
    claim_type: Mapped[str] = mapped_column(String(256), nullable=False)
    claim_value: Mapped[str] = mapped_column(String(256), nullable=False, default="")

    user: Mapped["User"] = relationship("User", back_populates="claims")

    __table_args__ = (
        UniqueConstraint("user_id", "claim_type", "claim_value", name="uq_user_claims_triple"),
    )

    def __repr__(self) -> str:
        return f"<UserClaim(user_id={self.user_id}, {self.claim_type}={self.claim_value})>"


# =============================================================================
# SUPPLIER MODEL
# =============================================================================

class Supplier(Base):
    """
    ┌─────────────────────────────────────────────────────────────────────────┐
    │                    SUPPLIER MODEL                                        │
    │  Business entity exposed through the /supplier endpoints               │
    └─────────────────────────────────────────────────────────────────────────┘

    Fields:
        - id:        UUID primary key, generated server-side
        - name:      Required, at most 200 characters
        - document:  Required, exactly 14 characters
        - is_active: Defaults to False
    """

    __tablename__ = "Suppliers"

    id: Mapped[str] = mapped_column(
        String(36),
        primary_key=True,
        default=generate_uuid
    )
    name: Mapped[str] = mapped_column(String(200), nullable=False)
    document: Mapped[str] = mapped_column(String(14), nullable=False)
    is_active: Mapped[bool] = mapped_column(
        Boolean,
        default=False,
        nullable=False
    )

    def __repr__(self) -> str:
        return f"<Supplier(id={self.id}, name={self.name})>"
