# =============================================================================
# SUPPLIER MINIMAL API - SUPPLIER REPOSITORY
# =============================================================================
# File: suppliers/repository.py
# Description: Data access layer for the Supplier entity
#              Implements repository pattern with SQLAlchemy async
# =============================================================================

from typing import Optional, List

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from db.models import Supplier


class SupplierRepository:
    """
    ┌─────────────────────────────────────────────────────────────────────────┐
    │                    SUPPLIER REPOSITORY                                   │
    │  Unit-of-work style access to the Suppliers table                       │
    └─────────────────────────────────────────────────────────────────────────┘

    add/update/remove only stage changes on the session; nothing reaches
    the database until save_changes() runs.
    """

    def __init__(self, session: AsyncSession):
        self._session = session

    async def list_all(self) -> List[Supplier]:
        result = await self._session.execute(
            select(Supplier).order_by(Supplier.name, Supplier.id)
        )
        return list(result.scalars().all())

    async def find(self, supplier_id: str) -> Optional[Supplier]:
        """
        Look a supplier up by primary key.

        Returns:
            Supplier if found, None otherwise
        """
        return await self._session.get(Supplier, supplier_id)

    def add(self, supplier: Supplier) -> Supplier:
        self._session.add(supplier)
        return supplier

    def update(self, supplier: Supplier, **fields) -> Supplier:
        """Overwrite the given attributes on a tracked supplier."""
        for key, value in fields.items():
            if hasattr(supplier, key):
                setattr(supplier, key, value)
        return supplier

    async def remove(self, supplier: Supplier) -> None:
        await self._session.delete(supplier)

    async def save_changes(self) -> int:
        """
        Flush and commit pending changes.

        Returns:
            int: Number of entities inserted, modified or deleted
        """
        affected = (
            len(self._session.new)
            + len(self._session.dirty)
            + len(self._session.deleted)
        )
        if affected == 0:
            return 0

        await self._session.flush()
        await self._session.commit()
        return affected
