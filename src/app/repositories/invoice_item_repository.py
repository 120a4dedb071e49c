"""Invoice Item Repository Interface

Defines the contract for invoice line item persistence.
"""

from abc import ABC, abstractmethod
from typing import List
from src.domain.invoice_item import InvoiceItem


class InvoiceItemRepository(ABC):
    """
    Repository interface for InvoiceItem persistence
    """

    @abstractmethod
    async def get_by_invoice_id(self, invoice_id: int) -> List[InvoiceItem]:
        """
        Retrieve all items of an invoice in insertion order

        Args:
            invoice_id: Invoice ID

        Returns:
            List of InvoiceItem
        """
        pass

    @abstractmethod
    async def create_many(self, items: List[InvoiceItem]) -> List[InvoiceItem]:
        """
        Insert items in the given order

        Args:
            items: Items already tied to an invoice_id

        Returns:
            Created items with generated IDs
        """
        pass

    @abstractmethod
    async def delete_by_invoice_id(self, invoice_id: int) -> int:
        """
        Delete every item of an invoice

        Args:
            invoice_id: Invoice ID

        Returns:
            Number of deleted items
        """
        pass
