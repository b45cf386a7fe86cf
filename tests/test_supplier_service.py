# =============================================================================
# SUPPLIER MINIMAL API - SUPPLIER SERVICE TESTS
# =============================================================================
# File: tests/test_supplier_service.py
# Description: Repository unit-of-work counting and service error mapping
# =============================================================================

import uuid

import pytest
from sqlalchemy.ext.asyncio import AsyncSession

from core.exceptions import PersistenceError, SupplierNotFoundError
from db.models import Supplier
from suppliers.repository import SupplierRepository
from suppliers.schemas import SupplierIn
from suppliers.service import SupplierService


def payload(**overrides) -> SupplierIn:
    data = {"name": "ACME", "document": "12345678000199", "isActive": True}
    data.update(overrides)
    return SupplierIn.model_validate(data)


class TestSupplierRepository:

    async def test_save_changes_with_nothing_pending(self, db_session: AsyncSession):
        repo = SupplierRepository(db_session)

        assert await repo.save_changes() == 0

    async def test_save_changes_counts_affected_entities(self, db_session: AsyncSession):
        repo = SupplierRepository(db_session)
        repo.add(Supplier(name="A", document="11111111111111"))
        repo.add(Supplier(name="B", document="22222222222222"))

        assert await repo.save_changes() == 2
        assert len(await repo.list_all()) == 2

    async def test_update_and_remove_are_counted(self, db_session: AsyncSession):
        repo = SupplierRepository(db_session)
        supplier = repo.add(Supplier(name="A", document="11111111111111"))
        await repo.save_changes()

        repo.update(supplier, name="A2")
        assert await repo.save_changes() == 1

        await repo.remove(supplier)
        assert await repo.save_changes() == 1
        assert await repo.find(supplier.id) is None


class TestSupplierService:

    async def test_create_and_get(self, db_session: AsyncSession):
        service = SupplierService(db_session)

        created = await service.create_supplier(payload())
        fetched = await service.get_supplier(uuid.UUID(created.id))

        assert fetched.name == "ACME"
        assert fetched.is_active is True

    async def test_get_unknown_raises(self, db_session: AsyncSession):
        with pytest.raises(SupplierNotFoundError):
            await SupplierService(db_session).get_supplier(uuid.uuid4())

    @pytest.mark.parametrize(
        "operation, message",
        [
            ("create", "There was an error inserting supplier."),
            ("update", "There was an error editing supplier."),
            ("remove", "There was an error removing supplier."),
        ],
    )
    async def test_empty_write_raises_persistence_error(
        self, db_session: AsyncSession, monkeypatch, operation, message
    ):
        """
        Test: A write whose save reports zero affected entities
        Expected: PersistenceError with the operation's message, status 400
        """
        service = SupplierService(db_session)
        existing = await service.create_supplier(payload())

        async def nothing_saved() -> int:
            return 0

        monkeypatch.setattr(service._repo, "save_changes", nothing_saved)

        with pytest.raises(PersistenceError) as exc_info:
            if operation == "create":
                await service.create_supplier(payload(name="Other"))
            elif operation == "update":
                await service.update_supplier(existing, payload(name="Other"))
            else:
                await service.remove_supplier(uuid.UUID(existing.id))

        assert exc_info.value.message == message
        assert exc_info.value.status_code == 400
