# =============================================================================
# SUPPLIER MINIMAL API - SUPPLIER SCHEMAS
# =============================================================================
# File: suppliers/schemas.py
# Description: Request and response models for the /supplier endpoints
# =============================================================================

from typing import Optional
from uuid import UUID

from pydantic import Field, field_validator
from pydantic_core import PydanticCustomError

from auth.schemas import BaseSchema


NAME_MAX_LENGTH = 200
DOCUMENT_LENGTH = 14


class SupplierIn(BaseSchema):
    """
    Supplier payload for create and update.

    Validation Rules:
        - name: required, at most 200 characters
        - document: required, exactly 14 characters
        - isActive: optional, defaults to false

    An ``id`` in the body is accepted and ignored; ids come from the server
    on create and from the route on update.
    """
    id: Optional[UUID] = Field(None, description="Ignored on input")
    name: Optional[str] = Field(
        None,
        validate_default=True,
        description="Supplier name",
        examples=["ACME Industrial Ltda"]
    )
    document: Optional[str] = Field(
        None,
        validate_default=True,
        description="Registration document, 14 characters",
        examples=["12345678000199"]
    )
    is_active: bool = Field(False, description="Whether the supplier is active")

    @field_validator("name")
    @classmethod
    def validate_name(cls, v: Optional[str]) -> str:
        if not v:
            raise PydanticCustomError("name_required", "Supplier name is required.")
        if len(v) > NAME_MAX_LENGTH:
            raise PydanticCustomError(
                "name_too_long",
                "Supplier name must have at most {max_length} characters.",
                {"max_length": NAME_MAX_LENGTH},
            )
        return v

    @field_validator("document")
    @classmethod
    def validate_document(cls, v: Optional[str]) -> str:
        if not v:
            raise PydanticCustomError("document_required", "Supplier document is required.")
        if len(v) != DOCUMENT_LENGTH:
            raise PydanticCustomError(
                "document_length",
                "Supplier document must have exactly {length} characters.",
                {"length": DOCUMENT_LENGTH},
            )
        return v


class SupplierResponse(BaseSchema):
    """Supplier as returned by the API."""
    id: UUID = Field(..., description="Supplier UUID")
    name: str = Field(..., description="Supplier name")
    document: str = Field(..., description="Registration document")
    is_active: bool = Field(..., description="Whether the supplier is active")
