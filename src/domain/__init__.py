from .base import BaseModel
from .user import User
from .invoice import Invoice, InvoiceStatus
from .invoice_item import InvoiceItem
from .invoice_draft import InvoiceDraft, DraftItem
from .invoice_totals import InvoiceTotals, calculate_totals

__all__ = [
    "BaseModel",
    "User",
    "Invoice",
    "InvoiceStatus",
    "InvoiceItem",
    "InvoiceDraft",
    "DraftItem",
    "InvoiceTotals",
    "calculate_totals",
]
