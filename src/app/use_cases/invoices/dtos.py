"""Data Transfer Objects for Invoice Use Cases

Pydantic models for command inputs and response outputs.
"""

from datetime import date, datetime
from decimal import Decimal
from typing import List, Optional
from pydantic import BaseModel, Field

from src.domain.invoice import InvoiceStatus


class InvoiceItemInputDTO(BaseModel):
    """Line item as submitted by the client"""

    description: str = Field(default="", description="Line item description")
    quantity: float = Field(default=0, description="Quantity")
    price: float = Field(default=0, description="Unit price")
    total: Optional[float] = Field(
        default=None,
        description="Line total as computed by the client (quantity * price when omitted)"
    )


class SaveInvoiceCommandDTO(BaseModel):
    """
    Command DTO for creating or updating an invoice

    Totals are taken as submitted; they are not recomputed.
    """

    user_id: int = Field(..., description="Owning user")
    invoice_number: str = Field(..., description="User-chosen invoice number")
    invoice_date: date = Field(..., description="Date of issue")
    due_date: Optional[date] = Field(default=None, description="Payment due date")

    company_name: Optional[str] = None
    company_address: Optional[str] = None
    company_email: Optional[str] = None
    company_phone: Optional[str] = None

    client_name: Optional[str] = None
    client_address: Optional[str] = None
    client_email: Optional[str] = None
    client_phone: Optional[str] = None

    items: List[InvoiceItemInputDTO] = Field(default_factory=list)

    subtotal: float = 0
    tax_rate: float = 0
    tax_amount: float = 0
    total_amount: float = 0
    notes: Optional[str] = None

    status: Optional[InvoiceStatus] = Field(
        default=None,
        description="Only applied on update; draft when omitted"
    )


class InvoiceItemDTO(BaseModel):
    """Stored line item"""

    id: int
    invoice_id: int
    description: str
    quantity: Decimal
    price: Decimal
    total: Decimal


class InvoiceSummaryDTO(BaseModel):
    """Invoice header as listed on the dashboard"""

    id: int
    user_id: int
    invoice_number: str
    invoice_date: date
    due_date: Optional[date] = None

    company_name: Optional[str] = None
    company_address: Optional[str] = None
    company_email: Optional[str] = None
    company_phone: Optional[str] = None

    client_name: Optional[str] = None
    client_address: Optional[str] = None
    client_email: Optional[str] = None
    client_phone: Optional[str] = None

    subtotal: Decimal
    tax_rate: Decimal
    tax_amount: Decimal
    total_amount: Decimal
    notes: Optional[str] = None
    status: str
    created_at: datetime
    updated_at: datetime

    item_count: int = Field(default=0, description="Number of line items")


class InvoiceDetailDTO(InvoiceSummaryDTO):
    """Invoice header with its items in insertion order"""

    items: List[InvoiceItemDTO] = Field(default_factory=list)


class InvoiceCreatedDTO(BaseModel):
    invoice_id: int
