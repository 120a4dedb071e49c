"""CreateInvoice Use Case

Stores a new invoice header together with its items in one transaction.
"""

import logging
from src.libs.result import Result, Return, Error
from src.app.services.unit_of_work import UnitOfWork
from src.app.repositories.invoice_repository import InvoiceRepository
from src.app.repositories.invoice_item_repository import InvoiceItemRepository
from src.domain.invoice import Invoice, InvoiceStatus
from .dtos import SaveInvoiceCommandDTO, InvoiceCreatedDTO
from .mappers import apply_header, build_items

logger = logging.getLogger(__name__)


class CreateInvoice:
    """
    Use Case: Create an invoice with its line items

    Business Rules:
    1. Header and items are written atomically; a failure leaves nothing behind
    2. New invoices always start as draft
    3. Submitted totals are stored as-is
    4. Items keep their submitted order

    Flow:
    1. Insert header to obtain its ID
    2. Insert items referencing the header
    3. Commit transaction
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

    async def execute(self, command: SaveInvoiceCommandDTO) -> Result[InvoiceCreatedDTO]:
        """
        Execute invoice creation

        Args:
            command: SaveInvoiceCommandDTO owned by command.user_id

        Returns:
            Result[InvoiceCreatedDTO]: ID of the new invoice or error
        """
        try:
            # Step 1: Header
            invoice = apply_header(
                Invoice(
                    user_id=command.user_id,
                    invoice_number=command.invoice_number,
                    invoice_date=command.invoice_date,
                    status=InvoiceStatus.DRAFT.value,
                ),
                command,
            )
            invoice = await self.invoice_repo.create(invoice)

            # Step 2: Items
            await self.item_repo.create_many(build_items(invoice.id, command))

            # Step 3: Commit
            await self.uow.commit()
            logger.info(
                f"User {command.user_id} created invoice {invoice.id} "
                f"with {len(command.items)} items"
            )

            return Return.ok(InvoiceCreatedDTO(invoice_id=invoice.id))

        except Exception as e:
            await self.uow.rollback()
            logger.exception(f"Failed to create invoice for user {command.user_id}")
            return Return.err(
                Error(
                    code="INTERNAL_ERROR",
                    message="Failed to create invoice",
                    reason=str(e),
                )
            )
