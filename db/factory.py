# =============================================================================
# SUPPLIER MINIMAL API - DATABASE FACTORY
# =============================================================================
# File: db/factory.py
# Description: Factory pattern for database adapter instantiation
#              Provides unified interface for switching between database backends
# =============================================================================

from typing import AsyncGenerator, Optional
from enum import Enum
import logging

from sqlalchemy.ext.asyncio import AsyncSession

from db.base import BaseDBAdapter
from db.adapters.sqlite_adapter import SQLiteAdapter
from db.adapters.postgres_adapter import PostgresAdapter
from core.config import settings


logger = logging.getLogger(__name__)


class DatabaseType(str, Enum):
    """Supported database types."""
    SQLITE = "sqlite"
    POSTGRESQL = "postgresql"


class DBFactory:
    """
    ┌─────────────────────────────────────────────────────────────────────────┐
    │                    DATABASE FACTORY                                      │
    │  Creates and holds the process-wide database adapter                    │
    │  Supports runtime switching between SQLite and PostgreSQL               │
    └─────────────────────────────────────────────────────────────────────────┘

    Usage:
        db = DBFactory.get_db_adapter()
        await db.connect()
    """

    _db_adapter: Optional[BaseDBAdapter] = None

    @classmethod
    def get_db_adapter(
        cls,
        db_type: Optional[str] = None,
        force_new: bool = False,
        **kwargs
    ) -> BaseDBAdapter:
        """
        Get database adapter based on configuration or specified type.

        Args:
            db_type: Override database type (sqlite/postgresql)
                    Defaults to settings.db_type
            force_new: Force creation of new adapter instance
            **kwargs: Additional options passed to adapter

        Raises:
            ValueError: If unsupported database type specified
        """
        if not force_new and cls._db_adapter is not None:
            return cls._db_adapter

        selected_type = db_type or settings.db_type

        if selected_type == DatabaseType.SQLITE:
            adapter: BaseDBAdapter = SQLiteAdapter(**kwargs)
        elif selected_type == DatabaseType.POSTGRESQL:
            adapter = PostgresAdapter(**kwargs)
        else:
            raise ValueError(
                f"Unsupported database type: {selected_type}. "
                f"Supported types: {[t.value for t in DatabaseType]}"
            )

        if not force_new:
            cls._db_adapter = adapter

        return adapter

    @classmethod
    def set_db_adapter(cls, adapter: BaseDBAdapter) -> None:
        """Install a pre-built adapter as the singleton (tests, CLI)."""
        cls._db_adapter = adapter

    @classmethod
    async def connect(cls) -> None:
        """Connect the configured adapter. Used at application startup."""
        adapter = cls.get_db_adapter()
        await adapter.connect()
        logger.info(f"Database connection established ({settings.db_type})")

    @classmethod
    async def disconnect(cls) -> None:
        """Dispose of the adapter. Used at application shutdown."""
        if cls._db_adapter:
            await cls._db_adapter.disconnect()
            cls._db_adapter = None

    @classmethod
    async def create_tables(cls) -> None:
        """Create all database tables using SQLAlchemy metadata."""
        adapter = cls.get_db_adapter()
        await adapter.create_tables()

    @classmethod
    def reset(cls) -> None:
        """Reset singleton instance (useful for testing)."""
        cls._db_adapter = None


async def get_db_session() -> AsyncGenerator[AsyncSession, None]:
    """
    FastAPI dependency for database session.

    Yields:
        AsyncSession: Database session, committed when the request succeeds

    Usage:
        @app.get("/supplier")
        async def list_suppliers(
            session: AsyncSession = Depends(get_db_session)
        ):
            ...
    """
    adapter = DBFactory.get_db_adapter()
    async with adapter.get_session() as session:
        yield session
