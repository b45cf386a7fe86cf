# =============================================================================
# SUPPLIERS MODULE INITIALIZATION
# =============================================================================
# File: suppliers/__init__.py
# Description: Suppliers module exports
# =============================================================================

from suppliers.schemas import SupplierIn, SupplierResponse
from suppliers.repository import SupplierRepository
from suppliers.service import SupplierService
from suppliers.dependencies import (
    get_supplier_service,
    SupplierServiceDep,
    get_existing_supplier,
    ExistingSupplier,
)

__all__ = [
    "SupplierIn",
    "SupplierResponse",
    "SupplierRepository",
    "SupplierService",
    "get_supplier_service",
    "SupplierServiceDep",
    "get_existing_supplier",
    "ExistingSupplier",
]
