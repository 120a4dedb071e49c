"""DeleteInvoice Use Case"""

import logging
from src.libs.result import Result, Return, Error
from src.app.services.unit_of_work import UnitOfWork
from src.app.repositories.invoice_repository import InvoiceRepository

logger = logging.getLogger(__name__)


class DeleteInvoice:
    """
    Use Case: Delete an invoice owned by the caller

    Business Rules:
    1. Deleting someone else's or a missing invoice reports INVOICE_NOT_FOUND
    2. Items go with the invoice
    """

    def __init__(self, uow: UnitOfWork, invoice_repo: InvoiceRepository):
        self.uow = uow
        self.invoice_repo = invoice_repo

    async def execute(self, invoice_id: int, user_id: int) -> Result[int]:
        try:
            deleted = await self.invoice_repo.delete_for_user(invoice_id, user_id)
            if deleted == 0:
                await self.uow.rollback()
                return Return.err(
                    Error(
                        code="INVOICE_NOT_FOUND",
                        message="Invoice not found",
                    )
                )

            await self.uow.commit()
            logger.info(f"User {user_id} deleted invoice {invoice_id}")
            return Return.ok(invoice_id)

        except Exception as e:
            await self.uow.rollback()
            logger.exception(f"Failed to delete invoice {invoice_id}")
            return Return.err(
                Error(
                    code="INTERNAL_ERROR",
                    message="Failed to delete invoice",
                    reason=str(e),
                )
            )
