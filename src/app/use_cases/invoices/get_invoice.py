"""GetInvoice Use Case

Loads one invoice with its items for the editor.
"""

import logging
from src.libs.result import Result, Return, Error
from src.app.repositories.invoice_repository import InvoiceRepository
from src.app.repositories.invoice_item_repository import InvoiceItemRepository
from .dtos import InvoiceDetailDTO
from .mappers import to_detail

logger = logging.getLogger(__name__)


class GetInvoice:
    """
    Use Case: Fetch an invoice owned by the caller

    Business Rules:
    1. An invoice owned by someone else is reported exactly like a missing one
    2. Items are returned in insertion order
    """

    def __init__(
        self,
        invoice_repo: InvoiceRepository,
        item_repo: InvoiceItemRepository,
    ):
        self.invoice_repo = invoice_repo
        self.item_repo = item_repo

    async def execute(self, invoice_id: int, user_id: int) -> Result[InvoiceDetailDTO]:
        """
        Execute invoice lookup

        Args:
            invoice_id: Invoice ID
            user_id: Authenticated user

        Returns:
            Result[InvoiceDetailDTO]: Invoice with items, or INVOICE_NOT_FOUND
        """
        try:
            invoice = await self.invoice_repo.get_for_user(invoice_id, user_id)
            if not invoice:
                return Return.err(
                    Error(
                        code="INVOICE_NOT_FOUND",
                        message="Invoice not found",
                    )
                )

            items = await self.item_repo.get_by_invoice_id(invoice.id)
            return Return.ok(to_detail(invoice, items))

        except Exception as e:
            logger.exception(f"Failed to fetch invoice {invoice_id}")
            return Return.err(
                Error(
                    code="INTERNAL_ERROR",
                    message="Failed to fetch invoice",
                    reason=str(e),
                )
            )
