"""UpdateInvoice Use Case

Replaces an invoice header and its full item list in one transaction.
"""

import logging
from src.libs.result import Result, Return, Error
from src.app.services.unit_of_work import UnitOfWork
from src.app.repositories.invoice_repository import InvoiceRepository
from src.app.repositories.invoice_item_repository import InvoiceItemRepository
from src.domain.invoice import InvoiceStatus
from .dtos import SaveInvoiceCommandDTO
from .mappers import apply_header, build_items

logger = logging.getLogger(__name__)


class UpdateInvoice:
    """
    Use Case: Overwrite an invoice owned by the caller

    Business Rules:
    1. Only the owner may update; anyone else gets INVOICE_NOT_FOUND
    2. Every header field is overwritten; a missing status becomes draft
    3. Previous items are deleted and the submitted items inserted
    4. Header and items change together or not at all

    Flow:
    1. Verify ownership
    2. Overwrite header
    3. Delete previous items
    4. Insert submitted items
    5. Commit transaction
    """

    def __init__(
        self,
        uow: UnitOfWork,
        invoice_repo: InvoiceRepository,
        item_repo: InvoiceItemRepository,
    ):
        self.uow = uow
        self.invoice_repo = invoice_repo
        self.item_repo = item_repo

    async def execute(self, invoice_id: int, command: SaveInvoiceCommandDTO) -> Result[int]:
        """
        Execute invoice update

        Args:
            invoice_id: Invoice to overwrite
            command: SaveInvoiceCommandDTO owned by command.user_id

        Returns:
            Result[int]: ID of the updated invoice or error
        """
        try:
            # Step 1: Ownership
            invoice = await self.invoice_repo.get_for_user(invoice_id, command.user_id)
            if not invoice:
                await self.uow.rollback()
                return Return.err(
                    Error(
                        code="INVOICE_NOT_FOUND",
                        message="Invoice not found",
                    )
                )

            # Step 2: Header
            apply_header(invoice, command)
            invoice.status = (command.status or InvoiceStatus.DRAFT).value
            await self.invoice_repo.update(invoice)

            # Steps 3-4: Items
            await self.item_repo.delete_by_invoice_id(invoice_id)
            await self.item_repo.create_many(build_items(invoice_id, command))

            # Step 5: Commit
            await self.uow.commit()
            logger.info(f"User {command.user_id} updated invoice {invoice_id}")

            return Return.ok(invoice_id)

        except Exception as e:
            await self.uow.rollback()
            logger.exception(f"Failed to update invoice {invoice_id}")
            return Return.err(
                Error(
                    code="INTERNAL_ERROR",
                    message="Failed to update invoice",
                    reason=str(e),
                )
            )
