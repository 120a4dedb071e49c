from .dtos import (
    InvoiceItemInputDTO,
    SaveInvoiceCommandDTO,
    InvoiceItemDTO,
    InvoiceSummaryDTO,
    InvoiceDetailDTO,
    InvoiceCreatedDTO,
)
from .list_invoices import ListInvoices
from .get_invoice import GetInvoice
from .create_invoice import CreateInvoice
from .update_invoice import UpdateInvoice
from .delete_invoice import DeleteInvoice

__all__ = [
    "InvoiceItemInputDTO",
    "SaveInvoiceCommandDTO",
    "InvoiceItemDTO",
    "InvoiceSummaryDTO",
    "InvoiceDetailDTO",
    "InvoiceCreatedDTO",
    "ListInvoices",
    "GetInvoice",
    "CreateInvoice",
    "UpdateInvoice",
    "DeleteInvoice",
]
