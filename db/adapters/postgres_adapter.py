# =============================================================================
# SUPPLIER MINIMAL API - POSTGRESQL ADAPTER
# =============================================================================
# File: db/adapters/postgres_adapter.py
# Description: PostgreSQL database adapter for production environments
#              Uses asyncpg for high-performance async operations
# =============================================================================

from typing import Any, Dict, Optional

from db.base import BaseDBAdapter
from core.config import settings


class PostgresAdapter(BaseDBAdapter):
    """
    ┌─────────────────────────────────────────────────────────────────────────┐
    │                    POSTGRESQL DATABASE ADAPTER                           │
    │  Async PostgreSQL implementation for production                         │
    │  Uses asyncpg driver with SQLAlchemy async ORM                          │
    └─────────────────────────────────────────────────────────────────────────┘

    Connection Pool Configuration:
        - pool_size:     Initial connections (settings.db_pool_size)
        - max_overflow:  Extra connections allowed (settings.db_max_overflow)
        - pool_timeout:  Wait time for connection (settings.db_pool_timeout)
        - pool_recycle:  Recycle connections after 1800s
    """

    def __init__(
        self,
        database_url: Optional[str] = None,
        **kwargs: Any
    ):
        if database_url is None:
            database_url = settings.database_url

        default_options = {
            "pool_size": settings.db_pool_size,
            "max_overflow": settings.db_max_overflow,
            "pool_timeout": settings.db_pool_timeout,
            "pool_recycle": 1800,
            "pool_pre_ping": True,
            "echo": settings.debug and settings.is_development,
            "connect_args": {
                "statement_cache_size": 100,
                "command_timeout": 60,
            },
        }
        default_options.update(kwargs)

        super().__init__(database_url, **default_options)

    def get_pool_status(self) -> Dict[str, int]:
        """
        Get current connection pool statistics.

        Returns:
            Dict with size, checked_in, checked_out and overflow counts
        """
        if not self._engine:
            return {"size": 0, "checked_in": 0, "checked_out": 0, "overflow": 0}

        pool = self._engine.pool
        return {
            "size": pool.size(),
            "checked_in": pool.checkedin(),
            "checked_out": pool.checkedout(),
            "overflow": pool.overflow(),
        }
