# =============================================================================
# SUPPLIER MINIMAL API - SUPPLIER ROUTES
# =============================================================================
# File: api/routes/supplier_routes.py
# Description: Supplier CRUD endpoints
# =============================================================================

from typing import List
from uuid import UUID

from fastapi import APIRouter, Depends, Response, status

from auth.dependencies import CurrentToken, CanRemoveSupplier, get_current_token
from auth.schemas import ErrorResponse
from suppliers.dependencies import SupplierServiceDep, ExistingSupplier
from suppliers.schemas import SupplierIn, SupplierResponse


router = APIRouter(prefix="/supplier", tags=["Supplier"])

_error_responses = {
    status.HTTP_400_BAD_REQUEST: {"model": ErrorResponse},
    status.HTTP_401_UNAUTHORIZED: {"model": ErrorResponse},
    status.HTTP_404_NOT_FOUND: {"model": ErrorResponse},
}


@router.get(
    "",
    response_model=List[SupplierResponse],
    summary="List suppliers",
)
async def list_suppliers(service: SupplierServiceDep) -> List[SupplierResponse]:
    """Return every supplier. Does not require authentication."""
    suppliers = await service.list_suppliers()
    return [SupplierResponse.model_validate(s) for s in suppliers]


@router.get(
    "/{id}",
    response_model=SupplierResponse,
    summary="Get supplier by id",
    responses=_error_responses,
)
async def get_supplier(
    id: UUID,
    service: SupplierServiceDep,
    token: CurrentToken,
) -> SupplierResponse:
    supplier = await service.get_supplier(id)
    return SupplierResponse.model_validate(supplier)


@router.post(
    "",
    response_model=SupplierResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Create supplier",
    responses=_error_responses,
    dependencies=[Depends(get_current_token)],
)
async def create_supplier(
    supplier_data: SupplierIn,
    response: Response,
    service: SupplierServiceDep,
) -> SupplierResponse:
    """
    Create a supplier.

    The id is generated by the server; the Location header points at the
    new resource.
    """
    supplier = await service.create_supplier(supplier_data)
    response.headers["Location"] = f"/supplier/{supplier.id}"
    return SupplierResponse.model_validate(supplier)


@router.put(
    "/{id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Update supplier",
    responses=_error_responses,
    dependencies=[Depends(get_current_token)],
)
async def update_supplier(
    supplier: ExistingSupplier,
    supplier_data: SupplierIn,
    service: SupplierServiceDep,
) -> Response:
    """
    Overwrite all fields of a supplier. An id in the body is ignored.

    The supplier is looked up before the body is validated, so an unknown
    id is a 404 even when the body is invalid.
    """
    await service.update_supplier(supplier, supplier_data)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.delete(
    "/{id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Remove supplier",
    description="Requires the RemoveSupplier claim.",
    responses={
        **_error_responses,
        status.HTTP_403_FORBIDDEN: {"model": ErrorResponse},
    },
)
async def remove_supplier(
    id: UUID,
    service: SupplierServiceDep,
    token: CanRemoveSupplier,
) -> Response:
    await service.remove_supplier(id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
