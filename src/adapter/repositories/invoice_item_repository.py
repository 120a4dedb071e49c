"""SQLAlchemy Invoice Item Repository Implementation

Implements invoice item persistence using SQLAlchemy async session.
"""

from typing import List
from sqlalchemy import delete
from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession
from src.app.repositories.invoice_item_repository import InvoiceItemRepository
from src.domain.invoice_item import InvoiceItem


class SqlAlchemyInvoiceItemRepository(InvoiceItemRepository):
    """
    SQLAlchemy implementation of InvoiceItemRepository
    """

    def __init__(self, session: AsyncSession):
        self.session = session

    async def get_by_invoice_id(self, invoice_id: int) -> List[InvoiceItem]:
        statement = (
            select(InvoiceItem)
            .where(InvoiceItem.invoice_id == invoice_id)
            .order_by(InvoiceItem.id)
        )
        result = await self.session.execute(statement)
        return list(result.scalars().all())

    async def create_many(self, items: List[InvoiceItem]) -> List[InvoiceItem]:
        # One flush per item keeps ids increasing in submission order
        for item in items:
            self.session.add(item)
            await self.session.flush()
        return items

    async def delete_by_invoice_id(self, invoice_id: int) -> int:
        statement = delete(InvoiceItem).where(InvoiceItem.invoice_id == invoice_id)
        result = await self.session.execute(statement)
        return result.rowcount or 0
