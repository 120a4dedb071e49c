from .user_repository import SqlAlchemyUserRepository
from .invoice_repository import SqlAlchemyInvoiceRepository
from .invoice_item_repository import SqlAlchemyInvoiceItemRepository

__all__ = [
    "SqlAlchemyUserRepository",
    "SqlAlchemyInvoiceRepository",
    "SqlAlchemyInvoiceItemRepository",
]
