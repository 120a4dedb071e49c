"""Invoice Draft

Editable, not-yet-persisted invoice held by the presentation layer. It
carries fields the backend never stores (discount, shipping fee, bank
details, logo, currency, purchase order) and is what the PDF renderer
lays out.
"""

import time
from datetime import date
from typing import List, Optional, Union
from pydantic import BaseModel, Field, field_validator, model_validator

from src.domain.invoice_totals import InvoiceTotals, calculate_totals, line_amount, to_number

SUPPORTED_CURRENCIES = {
    "LKR": "Sri Lanka rupee",
    "USD": "US Dollar",
    "EUR": "Euro",
    "GBP": "British Pound",
}

EDITABLE_ITEM_FIELDS = ("description", "unit_cost", "quantity")


def new_invoice_number() -> str:
    """INV followed by the last six digits of the current millisecond timestamp"""
    return f"INV{str(int(time.time() * 1000))[-6:]}"


class DraftItem(BaseModel):
    description: str = ""
    unit_cost: Union[float, str] = ""
    quantity: Union[float, str] = ""
    amount: float = 0.0

    @model_validator(mode="after")
    def compute_amount(self):
        self.amount = line_amount(self.unit_cost, self.quantity)
        return self


class InvoiceDraft(BaseModel):
    """In-memory invoice being composed or edited"""

    invoice_number: str = Field(default_factory=new_invoice_number)
    purchase_order: str = "ON001"
    logo: Optional[str] = Field(
        default=None,
        description="Logo as a data: URL or a path to an image file"
    )
    company_details: str = ""
    bill_to: str = ""
    currency: str = "LKR"
    invoice_date: date = Field(default_factory=date.today)
    due_date: Optional[date] = None
    items: List[DraftItem] = Field(default_factory=lambda: [DraftItem()])
    notes: str = ""
    bank_details: str = ""
    tax_rate: float = 0.0
    discount: float = 0.0
    shipping_fee: float = 0.0

    @field_validator("tax_rate", "discount", "shipping_fee", mode="before")
    @classmethod
    def coerce_number(cls, v):
        return to_number(v)

    @field_validator("due_date", mode="before")
    @classmethod
    def blank_due_date(cls, v):
        if isinstance(v, str) and not v.strip():
            return None
        return v

    @field_validator("currency")
    @classmethod
    def validate_currency(cls, v):
        code = v.upper()
        if code not in SUPPORTED_CURRENCIES:
            raise ValueError(
                f"Unsupported currency {v!r}; expected one of {', '.join(SUPPORTED_CURRENCIES)}"
            )
        return code

    @field_validator("items")
    @classmethod
    def at_least_one_item(cls, v):
        return v or [DraftItem()]

    def add_item(self) -> DraftItem:
        item = DraftItem()
        self.items.append(item)
        return item

    def remove_item(self, index: int) -> bool:
        """Remove an item; the last remaining item is never removed"""
        if len(self.items) <= 1 or not 0 <= index < len(self.items):
            return False
        del self.items[index]
        return True

    def move_item_up(self, index: int) -> bool:
        if not 0 < index < len(self.items):
            return False
        self.items[index - 1], self.items[index] = self.items[index], self.items[index - 1]
        return True

    def update_item(self, index: int, field: str, value) -> DraftItem:
        if field not in EDITABLE_ITEM_FIELDS:
            raise ValueError(f"Unknown item field: {field}")
        item = self.items[index]
        setattr(item, field, value)
        if field in ("unit_cost", "quantity"):
            item.amount = line_amount(item.unit_cost, item.quantity)
        return item

    def set_logo(self, logo: str) -> None:
        self.logo = logo

    def remove_logo(self) -> None:
        self.logo = None

    def totals(self) -> InvoiceTotals:
        return calculate_totals(
            self.items,
            tax_rate=self.tax_rate,
            discount=self.discount,
            shipping_fee=self.shipping_fee,
        )
