"""Conversions between invoice commands, entities and DTOs"""

from decimal import Decimal
from typing import List

from src.domain.invoice import Invoice
from src.domain.invoice_item import InvoiceItem
from src.domain.invoice_totals import line_amount
from .dtos import (
    SaveInvoiceCommandDTO,
    InvoiceItemDTO,
    InvoiceSummaryDTO,
    InvoiceDetailDTO,
)

HEADER_FIELDS = (
    "invoice_number",
    "invoice_date",
    "due_date",
    "company_name",
    "company_address",
    "company_email",
    "company_phone",
    "client_name",
    "client_address",
    "client_email",
    "client_phone",
    "notes",
)

AMOUNT_FIELDS = ("subtotal", "tax_rate", "tax_amount", "total_amount")


def to_decimal(value: float) -> Decimal:
    return Decimal(str(value))


def apply_header(invoice: Invoice, command: SaveInvoiceCommandDTO) -> Invoice:
    """Overwrite every header column from the command"""
    for name in HEADER_FIELDS:
        setattr(invoice, name, getattr(command, name))
    for name in AMOUNT_FIELDS:
        setattr(invoice, name, to_decimal(getattr(command, name)))
    return invoice


def build_items(invoice_id: int, command: SaveInvoiceCommandDTO) -> List[InvoiceItem]:
    return [
        InvoiceItem(
            invoice_id=invoice_id,
            description=item.description,
            quantity=to_decimal(item.quantity),
            price=to_decimal(item.price),
            total=to_decimal(
                item.total if item.total is not None else line_amount(item.price, item.quantity)
            ),
        )
        for item in command.items
    ]


def to_summary(invoice: Invoice, item_count: int) -> InvoiceSummaryDTO:
    return InvoiceSummaryDTO(**invoice.model_dump(), item_count=item_count)


def to_detail(invoice: Invoice, items: List[InvoiceItem]) -> InvoiceDetailDTO:
    return InvoiceDetailDTO(
        **invoice.model_dump(),
        item_count=len(items),
        items=[InvoiceItemDTO(**item.model_dump()) for item in items],
    )
