"""Conversions between drafts, API payloads and stored records"""

import re
from dataclasses import dataclass
from typing import Any, Dict, Iterable, List, Optional

from src.domain.invoice_draft import InvoiceDraft, DraftItem
from src.domain.invoice_totals import to_number

PHONE_PATTERN = re.compile(r"[\d+\-()]+")


@dataclass
class Party:
    name: str = ""
    address: str = ""
    email: str = ""
    phone: str = ""


def parse_party_block(text: str) -> Party:
    """
    Split a free-text party block into contact fields

    The first non-blank line is the name and the remaining lines the
    address. Email and phone are the first lines (name included) that
    contain an ``@`` or a digit / ``+-()`` respectively, so they also stay
    part of the address.
    """
    lines = [line for line in (text or "").split("\n") if line.strip()]
    if not lines:
        return Party()
    return Party(
        name=lines[0],
        address="\n".join(lines[1:]),
        email=next((line for line in lines if "@" in line), ""),
        phone=next((line for line in lines if PHONE_PATTERN.search(line)), ""),
    )


def join_party_block(*fields: Optional[str]) -> str:
    return "\n".join(field for field in fields if field)


def draft_to_payload(draft: InvoiceDraft, status: Optional[str] = None) -> Dict[str, Any]:
    """
    Build the request body for saving a draft

    Totals are the ones computed client-side. Discount, shipping, currency,
    bank details, logo and purchase order are not part of the payload.
    """
    totals = draft.totals()
    company = parse_party_block(draft.company_details)
    client = parse_party_block(draft.bill_to)

    payload = {
        "invoiceNumber": draft.invoice_number,
        "invoiceDate": draft.invoice_date.isoformat(),
        "dueDate": draft.due_date.isoformat() if draft.due_date else None,
        "companyName": company.name,
        "companyAddress": company.address,
        "companyEmail": company.email,
        "companyPhone": company.phone,
        "clientName": client.name,
        "clientAddress": client.address,
        "clientEmail": client.email,
        "clientPhone": client.phone,
        "items": [
            {
                "description": item.description,
                "quantity": to_number(item.quantity),
                "price": to_number(item.unit_cost),
                "total": item.amount,
            }
            for item in draft.items
        ],
        "subtotal": totals.subtotal,
        "taxRate": totals.tax_rate,
        "taxAmount": totals.tax_amount,
        "totalAmount": totals.total,
        "notes": draft.notes,
    }
    if status:
        payload["status"] = status
    return payload


def record_to_draft(record: Dict[str, Any], currency: str = "LKR") -> InvoiceDraft:
    """
    Rebuild an editable draft from a stored invoice

    Fields the backend does not store (logo, bank details, discount,
    shipping fee) come back at their defaults.
    """
    return InvoiceDraft(
        invoice_number=record["invoice_number"],
        purchase_order=record.get("purchase_order") or "",
        logo=None,
        company_details=join_party_block(
            record.get("company_name"),
            record.get("company_address"),
            record.get("company_email"),
            record.get("company_phone"),
        ),
        bill_to=join_party_block(
            record.get("client_name"),
            record.get("client_address"),
            record.get("client_email"),
            record.get("client_phone"),
        ),
        currency=currency,
        invoice_date=record["invoice_date"],
        due_date=record.get("due_date") or None,
        items=[
            DraftItem(
                description=item.get("description") or "",
                unit_cost=to_number(item.get("price")),
                quantity=to_number(item.get("quantity")),
            )
            for item in record.get("items", [])
        ],
        notes=record.get("notes") or "",
        bank_details="",
        tax_rate=to_number(record.get("tax_rate")),
        discount=0,
        shipping_fee=0,
    )


def filter_invoices(invoices: Iterable[Dict[str, Any]], term: Optional[str]) -> List[Dict[str, Any]]:
    """Case-insensitive match on invoice number or client name"""
    invoices = list(invoices)
    if not term:
        return invoices
    needle = term.lower()
    return [
        invoice
        for invoice in invoices
        if needle in (invoice.get("invoice_number") or "").lower()
        or needle in (invoice.get("client_name") or "").lower()
    ]
