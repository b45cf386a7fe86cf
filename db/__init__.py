# =============================================================================
# DATABASE MODULE INITIALIZATION
# =============================================================================
# File: db/__init__.py
# Description: Database module exports
# =============================================================================

from db.base import Base, IDBAdapter, BaseDBAdapter
from db.models import (
    User,
    UserClaim,
    Supplier,
)
from db.adapters import (
    SQLiteAdapter,
    PostgresAdapter,
)
from db.factory import (
    DBFactory,
    DatabaseType,
    get_db_session,
)

__all__ = [
    # Base
    "Base",
    "IDBAdapter",
    "BaseDBAdapter",

    # Models
    "User",
    "UserClaim",
    "Supplier",

    # Adapters
    "SQLiteAdapter",
    "PostgresAdapter",

    # Factory
    "DBFactory",
    "DatabaseType",
    "get_db_session",
]
