"""ListInvoices Use Case

Dashboard listing of the caller's invoices.
"""

import logging
from typing import List
from src.libs.result import Result, Return, Error
from src.app.repositories.invoice_repository import InvoiceRepository
from .dtos import InvoiceSummaryDTO
from .mappers import to_summary

logger = logging.getLogger(__name__)


class ListInvoices:
    """
    Use Case: List a user's invoices

    Business Rules:
    1. Only invoices owned by the user are returned
    2. Newest invoices come first
    3. Each entry carries its item count, not its items
    """

    def __init__(self, invoice_repo: InvoiceRepository):
        self.invoice_repo = invoice_repo

    async def execute(self, user_id: int) -> Result[List[InvoiceSummaryDTO]]:
        try:
            rows = await self.invoice_repo.list_for_user(user_id)
            return Return.ok([to_summary(invoice, item_count) for invoice, item_count in rows])

        except Exception as e:
            logger.exception(f"Failed to list invoices for user {user_id}")
            return Return.err(
                Error(
                    code="INTERNAL_ERROR",
                    message="Failed to fetch invoices",
                    reason=str(e),
                )
            )
