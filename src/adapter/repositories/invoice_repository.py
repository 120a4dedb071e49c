"""SQLAlchemy Invoice Repository Implementation

Implements invoice persistence using SQLAlchemy async session.
"""

from typing import Optional, List, Tuple
from sqlalchemy import delete
from sqlmodel import select, func
from sqlmodel.ext.asyncio.session import AsyncSession
from src.app.repositories.invoice_repository import InvoiceRepository
from src.domain.base import MAX_IDENTIFIER, utc_now
from src.domain.invoice import Invoice
from src.domain.invoice_item import InvoiceItem


class SqlAlchemyInvoiceRepository(InvoiceRepository):
    """
    SQLAlchemy implementation of InvoiceRepository

    Uses async session for database operations. Writes are flushed, never
    committed; the caller's unit of work owns the transaction.
    """

    def __init__(self, session: AsyncSession):
        self.session = session

    async def list_for_user(self, user_id: int) -> List[Tuple[Invoice, int]]:
        """
        List a user's invoices with their item counts

        Item rows are only counted, never loaded.
        """
        statement = (
            select(Invoice, func.count(InvoiceItem.id).label("item_count"))
            .outerjoin(InvoiceItem, InvoiceItem.invoice_id == Invoice.id)
            .where(Invoice.user_id == user_id)
            .group_by(Invoice.id)
            .order_by(Invoice.created_at.desc(), Invoice.id.desc())
        )
        result = await self.session.execute(statement)
        return [(invoice, item_count) for invoice, item_count in result.all()]

    async def get_for_user(self, invoice_id: int, user_id: int) -> Optional[Invoice]:
        if not 0 < invoice_id <= MAX_IDENTIFIER:
            return None
        statement = (
            select(Invoice)
            .where(Invoice.id == invoice_id)
            .where(Invoice.user_id == user_id)
        )
        result = await self.session.execute(statement)
        return result.scalar_one_or_none()

    async def create(self, invoice: Invoice) -> Invoice:
        self.session.add(invoice)
        await self.session.flush()
        await self.session.refresh(invoice)
        return invoice

    async def update(self, invoice: Invoice) -> Invoice:
        invoice.updated_at = utc_now()
        self.session.add(invoice)
        await self.session.flush()
        await self.session.refresh(invoice)
        return invoice

    async def delete_for_user(self, invoice_id: int, user_id: int) -> int:
        if not 0 < invoice_id <= MAX_IDENTIFIER:
            return 0
        statement = (
            delete(Invoice)
            .where(Invoice.id == invoice_id)
            .where(Invoice.user_id == user_id)
        )
        result = await self.session.execute(statement)
        return result.rowcount or 0
