# =============================================================================
# SUPPLIER MINIMAL API - SUPPLIER DEPENDENCIES
# =============================================================================
# File: suppliers/dependencies.py
# Description: FastAPI dependency wiring for the supplier service
# =============================================================================

from typing import Annotated
from uuid import UUID

from fastapi import Depends

from auth.dependencies import DBSession
from db.models import Supplier
from suppliers.service import SupplierService


async def get_supplier_service(session: DBSession) -> SupplierService:
    """Dependency for the supplier service, bound to the request session."""
    return SupplierService(session)


SupplierServiceDep = Annotated[SupplierService, Depends(get_supplier_service)]


async def get_existing_supplier(id: UUID, service: SupplierServiceDep) -> Supplier:
    """
    Load the supplier named by the path id.

    Dependencies are solved before the request body is validated, so an
    unknown id answers 404 whatever the body holds.

    Raises:
        SupplierNotFoundError: If no supplier has this id
    """
    return await service.get_supplier(id)


ExistingSupplier = Annotated[Supplier, Depends(get_existing_supplier)]
