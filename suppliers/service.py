# =============================================================================
# SUPPLIER MINIMAL API - SUPPLIER SERVICE
# =============================================================================
# File: suppliers/service.py
# Description: Business logic for supplier CRUD
#              Maps missing rows and empty writes to API errors
# =============================================================================

from typing import List
from uuid import UUID
import logging

from sqlalchemy.ext.asyncio import AsyncSession

from suppliers.repository import SupplierRepository
from suppliers.schemas import SupplierIn
from db.models import Supplier, generate_uuid
from core.exceptions import SupplierNotFoundError, PersistenceError


logger = logging.getLogger(__name__)


class SupplierService:
    """
    ┌─────────────────────────────────────────────────────────────────────────┐
    │                    SUPPLIER SERVICE                                      │
    │  List, read, create, update and remove suppliers                        │
    └─────────────────────────────────────────────────────────────────────────┘

    Every write ends in save_changes(); a write that reports zero affected
    entities raises PersistenceError.
    """

    def __init__(self, session: AsyncSession):
        self._repo = SupplierRepository(session)

    async def list_suppliers(self) -> List[Supplier]:
        return await self._repo.list_all()

    async def get_supplier(self, supplier_id: UUID) -> Supplier:
        """
        Fetch one supplier.

        Raises:
            SupplierNotFoundError: If no supplier has this id
        """
        supplier = await self._repo.find(str(supplier_id))
        if supplier is None:
            raise SupplierNotFoundError(supplier_id=str(supplier_id))
        return supplier

    async def create_supplier(self, data: SupplierIn) -> Supplier:
        """
        Insert a supplier with a server-generated id.

        Raises:
            PersistenceError: If nothing was written
        """
        supplier = self._repo.add(Supplier(
            id=generate_uuid(),
            name=data.name,
            document=data.document,
            is_active=data.is_active,
        ))

        if await self._repo.save_changes() == 0:
            raise PersistenceError("There was an error inserting supplier.")

        logger.info(f"Supplier created: {supplier.id}")
        return supplier

    async def update_supplier(self, supplier: Supplier, data: SupplierIn) -> None:
        """
        Overwrite every field of a loaded supplier.

        Raises:
            PersistenceError: If nothing was written
        """
        self._repo.update(
            supplier,
            name=data.name,
            document=data.document,
            is_active=data.is_active,
        )

        if await self._repo.save_changes() == 0:
            raise PersistenceError("There was an error editing supplier.")

        logger.info(f"Supplier updated: {supplier.id}")

    async def remove_supplier(self, supplier_id: UUID) -> None:
        """
        Delete an existing supplier.

        Raises:
            SupplierNotFoundError: If no supplier has this id
            PersistenceError: If nothing was written
        """
        supplier = await self.get_supplier(supplier_id)

        await self._repo.remove(supplier)

        if await self._repo.save_changes() == 0:
            raise PersistenceError("There was an error removing supplier.")

        logger.info(f"Supplier removed: {supplier_id}")
