from .user_repository import UserRepository
from .invoice_repository import InvoiceRepository
from .invoice_item_repository import InvoiceItemRepository

__all__ = [
    "UserRepository",
    "InvoiceRepository",
    "InvoiceItemRepository",
]
