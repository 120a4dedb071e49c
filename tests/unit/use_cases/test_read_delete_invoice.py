"""Unit tests for ListInvoices, GetInvoice and DeleteInvoice use cases"""

import pytest
from datetime import date, datetime
from decimal import Decimal
from unittest.mock import AsyncMock, MagicMock

from src.app.use_cases.invoices import ListInvoices, GetInvoice, DeleteInvoice
from src.domain.invoice import Invoice
from src.domain.invoice_item import InvoiceItem


def make_invoice(invoice_id, number):
    return Invoice(
        id=invoice_id,
        user_id=1,
        invoice_number=number,
        invoice_date=date(2024, 5, 1),
        client_name="Globex",
        subtotal=Decimal("100.00"),
        tax_rate=Decimal("0"),
        tax_amount=Decimal("0"),
        total_amount=Decimal("100.00"),
        status="draft",
        created_at=datetime(2024, 5, 1, 12, 0, 0),
        updated_at=datetime(2024, 5, 1, 12, 0, 0),
    )


@pytest.fixture
def mock_invoice_repo():
    return MagicMock()


@pytest.fixture
def mock_item_repo():
    return MagicMock()


@pytest.mark.asyncio
class TestListInvoices:
    async def test_list_includes_item_counts(self, mock_invoice_repo):
        mock_invoice_repo.list_for_user = AsyncMock(
            return_value=[(make_invoice(2, "INV2"), 3), (make_invoice(1, "INV1"), 0)]
        )

        result = await ListInvoices(mock_invoice_repo).execute(1)

        assert result.is_ok()
        assert [(s.id, s.item_count) for s in result.value] == [(2, 3), (1, 0)]
        assert result.value[0].invoice_number == "INV2"
        mock_invoice_repo.list_for_user.assert_called_once_with(1)

    async def test_empty_list(self, mock_invoice_repo):
        mock_invoice_repo.list_for_user = AsyncMock(return_value=[])

        result = await ListInvoices(mock_invoice_repo).execute(1)

        assert result.value == []

    async def test_repository_failure(self, mock_invoice_repo):
        mock_invoice_repo.list_for_user = AsyncMock(side_effect=Exception("db down"))

        result = await ListInvoices(mock_invoice_repo).execute(1)

        assert result.error.code == "INTERNAL_ERROR"


@pytest.mark.asyncio
class TestGetInvoice:
    async def test_get_returns_items(self, mock_invoice_repo, mock_item_repo):
        mock_invoice_repo.get_for_user = AsyncMock(return_value=make_invoice(5, "INV5"))
        mock_item_repo.get_by_invoice_id = AsyncMock(
            return_value=[
                InvoiceItem(id=1, invoice_id=5, description="a", quantity=Decimal("1"),
                            price=Decimal("60"), total=Decimal("60")),
                InvoiceItem(id=2, invoice_id=5, description="b", quantity=Decimal("2"),
                            price=Decimal("20"), total=Decimal("40")),
            ]
        )

        result = await GetInvoice(mock_invoice_repo, mock_item_repo).execute(5, 1)

        assert result.is_ok()
        assert result.value.id == 5
        assert result.value.item_count == 2
        assert [item.description for item in result.value.items] == ["a", "b"]
        mock_invoice_repo.get_for_user.assert_called_once_with(5, 1)

    async def test_not_found(self, mock_invoice_repo, mock_item_repo):
        mock_invoice_repo.get_for_user = AsyncMock(return_value=None)
        mock_item_repo.get_by_invoice_id = AsyncMock()

        result = await GetInvoice(mock_invoice_repo, mock_item_repo).execute(5, 2)

        assert result.error.code == "INVOICE_NOT_FOUND"
        assert result.error.message == "Invoice not found"
        mock_item_repo.get_by_invoice_id.assert_not_called()


@pytest.mark.asyncio
class TestDeleteInvoice:
    async def test_delete(self, mock_uow, mock_invoice_repo):
        mock_invoice_repo.delete_for_user = AsyncMock(return_value=1)

        result = await DeleteInvoice(mock_uow, mock_invoice_repo).execute(5, 1)

        assert result.is_ok()
        mock_invoice_repo.delete_for_user.assert_called_once_with(5, 1)
        mock_uow.commit.assert_called_once()

    async def test_delete_missing_or_foreign(self, mock_uow, mock_invoice_repo):
        mock_invoice_repo.delete_for_user = AsyncMock(return_value=0)

        result = await DeleteInvoice(mock_uow, mock_invoice_repo).execute(5, 2)

        assert result.error.code == "INVOICE_NOT_FOUND"
        mock_uow.commit.assert_not_called()

    async def test_rollback_on_exception(self, mock_uow, mock_invoice_repo):
        mock_invoice_repo.delete_for_user = AsyncMock(side_effect=Exception("db error"))

        result = await DeleteInvoice(mock_uow, mock_invoice_repo).execute(5, 1)

        assert result.error.code == "INTERNAL_ERROR"
        mock_uow.rollback.assert_called_once()
