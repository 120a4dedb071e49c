"""Invoice Repository Interface

Defines the contract for invoice header persistence. Every lookup is
scoped by owner so one user can never reach another user's invoices.
"""

from abc import ABC, abstractmethod
from typing import Optional, List, Tuple
from src.domain.invoice import Invoice


class InvoiceRepository(ABC):
    """
    Repository interface for Invoice persistence
    """

    @abstractmethod
    async def list_for_user(self, user_id: int) -> List[Tuple[Invoice, int]]:
        """
        List a user's invoices, newest first

        Args:
            user_id: Owning user

        Returns:
            (invoice, item_count) pairs ordered by created_at descending
        """
        pass

    @abstractmethod
    async def get_for_user(self, invoice_id: int, user_id: int) -> Optional[Invoice]:
        """
        Retrieve invoice by ID if it belongs to the user

        Args:
            invoice_id: Invoice ID
            user_id: Owning user

        Returns:
            Invoice if found and owned by the user, None otherwise
        """
        pass

    @abstractmethod
    async def create(self, invoice: Invoice) -> Invoice:
        """
        Create a new invoice header

        Args:
            invoice: Invoice entity to persist

        Returns:
            Created Invoice with generated ID
        """
        pass

    @abstractmethod
    async def update(self, invoice: Invoice) -> Invoice:
        """
        Update an existing invoice header

        Args:
            invoice: Invoice entity with updated values

        Returns:
            Updated Invoice
        """
        pass

    @abstractmethod
    async def delete_for_user(self, invoice_id: int, user_id: int) -> int:
        """
        Delete an invoice owned by the user

        Items are removed by the foreign key cascade.

        Args:
            invoice_id: Invoice ID
            user_id: Owning user

        Returns:
            Number of deleted invoice rows (0 or 1)
        """
        pass
