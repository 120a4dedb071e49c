"""Invoice Domain Entity

Invoice header owned by a single user. Party details are stored as
denormalized columns rather than a separate parties table.
"""

from datetime import datetime, date
from decimal import Decimal
from enum import Enum
from typing import Optional
from sqlmodel import Field, Column, Index
from sqlalchemy import ForeignKey, Numeric, String, Text, Date
from src.domain.base import BaseModel, IdentifierType, TimestampType, utc_now


class InvoiceStatus(str, Enum):
    """Invoice status values (no transition graph is enforced)"""
    DRAFT = "draft"
    SENT = "sent"
    PAID = "paid"
    OVERDUE = "overdue"


class Invoice(BaseModel, table=True):
    """
    Invoice - Header of a user's invoice

    Domain Rules:
    - Owned exclusively by user_id; every lookup filters by id AND user_id
    - invoice_number is chosen by the user and is not unique
    - subtotal/tax_amount/total_amount are submitted by the client as computed
    - status defaults to draft; any status may follow any other
    - Deleting an invoice cascades to its items
    """

    __tablename__ = "invoices"
    __table_args__ = (
        Index('ix_invoices_user_id', 'user_id'),
        Index('ix_invoices_created_at', 'created_at'),
    )

    id: Optional[int] = Field(
        default=None,
        sa_column=Column(IdentifierType, primary_key=True, autoincrement=True),
        description="Unique invoice identifier (auto-increment)"
    )

    user_id: int = Field(
        sa_column=Column(IdentifierType, ForeignKey("users.id", ondelete="CASCADE"), nullable=False),
        description="Owning user"
    )

    invoice_number: str = Field(
        sa_column=Column(String(50), nullable=False),
        description="User-chosen invoice number (e.g., INV001)"
    )

    invoice_date: date = Field(
        sa_column=Column(Date, nullable=False),
        description="Date of issue"
    )

    due_date: Optional[date] = Field(
        default=None,
        sa_column=Column(Date, nullable=True),
        description="Payment due date"
    )

    company_name: Optional[str] = Field(default=None, sa_column=Column(String(255)))
    company_address: Optional[str] = Field(default=None, sa_column=Column(Text))
    company_email: Optional[str] = Field(default=None, sa_column=Column(String(255)))
    company_phone: Optional[str] = Field(default=None, sa_column=Column(String(50)))

    client_name: Optional[str] = Field(default=None, sa_column=Column(String(255)))
    client_address: Optional[str] = Field(default=None, sa_column=Column(Text))
    client_email: Optional[str] = Field(default=None, sa_column=Column(String(255)))
    client_phone: Optional[str] = Field(default=None, sa_column=Column(String(50)))

    subtotal: Decimal = Field(
        default=Decimal("0"),
        sa_column=Column(Numeric(12, 2), nullable=False, default=0),
        description="Sum of line totals"
    )

    tax_rate: Decimal = Field(
        default=Decimal("0"),
        sa_column=Column(Numeric(5, 2), nullable=False, default=0),
        description="Tax rate as a percentage"
    )

    tax_amount: Decimal = Field(
        default=Decimal("0"),
        sa_column=Column(Numeric(12, 2), nullable=False, default=0),
        description="subtotal * tax_rate / 100"
    )

    total_amount: Decimal = Field(
        default=Decimal("0"),
        sa_column=Column(Numeric(12, 2), nullable=False, default=0),
        description="Grand total as computed by the client"
    )

    notes: Optional[str] = Field(
        default=None,
        sa_column=Column(Text),
        description="Free-text terms"
    )

    status: str = Field(
        default=InvoiceStatus.DRAFT.value,
        sa_column=Column(String(20), nullable=False, default=InvoiceStatus.DRAFT.value),
        description="Invoice status (draft, sent, paid, overdue)"
    )

    created_at: datetime = Field(
        default_factory=utc_now,
        sa_column=Column(TimestampType, nullable=False),
        description="Invoice creation timestamp"
    )

    updated_at: datetime = Field(
        default_factory=utc_now,
        sa_column=Column(TimestampType, nullable=False),
        description="Last update timestamp"
    )
