# =============================================================================
# SUPPLIER MINIMAL API - SQLITE ADAPTER
# =============================================================================
# File: db/adapters/sqlite_adapter.py
# Description: SQLite database adapter for development and testing
#              Uses aiosqlite for async operations with SQLAlchemy
# =============================================================================

from typing import Any, Optional
from pathlib import Path

from sqlalchemy import event
from sqlalchemy.ext.asyncio import AsyncEngine
from sqlalchemy.pool import StaticPool

from db.base import BaseDBAdapter
from core.config import settings


SQLITE_URL_PREFIX = "sqlite+aiosqlite:///"


class SQLiteAdapter(BaseDBAdapter):
    """
    ┌─────────────────────────────────────────────────────────────────────────┐
    │                    SQLITE DATABASE ADAPTER                               │
    │  Async SQLite implementation for development and testing environments   │
    │  Uses aiosqlite driver with SQLAlchemy async ORM                        │
    └─────────────────────────────────────────────────────────────────────────┘

    Features:
        - Zero-configuration setup
        - File-based persistent storage
        - In-memory option for testing (single shared connection)
        - PRAGMAs applied to every new DBAPI connection

    Usage:
        adapter = SQLiteAdapter()
        await adapter.connect()
        async with adapter.get_session() as session:
            ...
        await adapter.disconnect()
    """

    def __init__(
        self,
        database_url: Optional[str] = None,
        **kwargs: Any
    ):
        """
        Initialize SQLite adapter.

        Args:
            database_url: Optional custom database URL
                         Defaults to settings.database_url
            **kwargs: Additional engine options
        """
        if database_url is None:
            database_url = settings.database_url

        if database_url.startswith(SQLITE_URL_PREFIX) and ":memory:" not in database_url:
            db_path = database_url[len(SQLITE_URL_PREFIX):]
            Path(db_path).parent.mkdir(parents=True, exist_ok=True)

        default_options = {
            "echo": settings.debug,
            "pool_pre_ping": True,
            "connect_args": {
                "check_same_thread": False,
                "timeout": 30,
            },
        }
        default_options.update(kwargs)

        super().__init__(database_url, **default_options)

    @property
    def is_memory(self) -> bool:
        return ":memory:" in self._database_url

    def _configure_engine(self, engine: AsyncEngine) -> None:
        """Register PRAGMA setup for every DBAPI connection the pool opens."""
        is_memory = self.is_memory

        @event.listens_for(engine.sync_engine, "connect")
        def _apply_pragmas(dbapi_connection, connection_record):
            cursor = dbapi_connection.cursor()
            # Cascading delete of user claims relies on this
            cursor.execute("PRAGMA foreign_keys=ON")
            if not is_memory:
                cursor.execute("PRAGMA journal_mode=WAL")
                cursor.execute("PRAGMA synchronous=NORMAL")
            cursor.execute("PRAGMA busy_timeout=30000")
            cursor.close()

    @classmethod
    def create_for_testing(cls) -> "SQLiteAdapter":
        """
        Create an in-memory SQLite adapter for testing.

        All sessions share one connection through StaticPool, otherwise each
        new connection would see its own empty database.
        """
        return cls(
            database_url=f"{SQLITE_URL_PREFIX}:memory:",
            echo=False,
            pool_pre_ping=False,
            poolclass=StaticPool,
        )
