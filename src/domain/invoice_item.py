"""Invoice Item Domain Entity

Line item of an invoice. Items are replaced as a whole on every invoice
update, so an item has no identity across edits.
"""

from decimal import Decimal
from typing import Optional
from sqlmodel import Field, Column, Index
from sqlalchemy import ForeignKey, Numeric, Text
from src.domain.base import BaseModel, IdentifierType


class InvoiceItem(BaseModel, table=True):
    """
    Invoice Item - Individual line within an invoice

    Domain Rules:
    - Each item belongs to exactly one invoice (deleted with it)
    - total = quantity * price, computed by the caller
    - Insertion order (id) is display order
    """

    __tablename__ = "invoice_items"
    __table_args__ = (
        Index('ix_invoice_items_invoice_id', 'invoice_id'),
    )

    id: Optional[int] = Field(
        default=None,
        sa_column=Column(IdentifierType, primary_key=True, autoincrement=True),
        description="Unique item identifier (auto-increment)"
    )

    invoice_id: int = Field(
        sa_column=Column(IdentifierType, ForeignKey("invoices.id", ondelete="CASCADE"), nullable=False),
        description="Foreign key to Invoice"
    )

    description: str = Field(
        default="",
        sa_column=Column(Text, nullable=False),
        description="Line item description"
    )

    quantity: Decimal = Field(
        sa_column=Column(Numeric(10, 2), nullable=False),
        description="Quantity"
    )

    price: Decimal = Field(
        sa_column=Column(Numeric(12, 2), nullable=False),
        description="Unit price"
    )

    total: Decimal = Field(
        sa_column=Column(Numeric(12, 2), nullable=False),
        description="Line total (quantity * price)"
    )
