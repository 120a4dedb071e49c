"""Invoice totals calculation

Pure float arithmetic shared by the draft preview, the PDF renderer and
the payload sent on save. Amounts are rounded to two decimals only when
formatted for display.
"""

import math
from dataclasses import dataclass
from typing import Any, Iterable, Mapping, Optional


def to_number(value: Any) -> float:
    """Coerce a form value to float; blank or non-numeric input counts as 0"""
    if value is None or isinstance(value, bool):
        return 0.0
    try:
        number = float(str(value).strip()) if isinstance(value, str) else float(value)
    except (TypeError, ValueError):
        return 0.0
    if math.isnan(number):
        return 0.0
    return number


def line_amount(unit_cost: Any, quantity: Any) -> float:
    return to_number(unit_cost) * to_number(quantity)


def _field(item: Any, *names: str) -> Any:
    for name in names:
        if isinstance(item, Mapping):
            if name in item:
                return item[name]
        elif hasattr(item, name):
            return getattr(item, name)
    return None


@dataclass(frozen=True)
class InvoiceTotals:
    subtotal: float
    tax_rate: float
    tax_amount: float
    discount: float
    shipping_fee: float
    total: float


def calculate_totals(
    items: Iterable[Any],
    tax_rate: Any = 0,
    discount: Any = 0,
    shipping_fee: Any = 0,
) -> InvoiceTotals:
    """
    Derive invoice totals from line items

    Items may be objects or mappings exposing unit_cost (or unitCost / price)
    and quantity.

    total = subtotal + subtotal * tax_rate / 100 - discount + shipping_fee
    """
    subtotal = sum(
        (
            line_amount(
                _field(item, "unit_cost", "unitCost", "price"),
                _field(item, "quantity"),
            )
            for item in items
        ),
        0.0,
    )
    rate = to_number(tax_rate)
    tax_amount = subtotal * rate / 100
    discount_amount = to_number(discount)
    shipping_amount = to_number(shipping_fee)

    return InvoiceTotals(
        subtotal=subtotal,
        tax_rate=rate,
        tax_amount=tax_amount,
        discount=discount_amount,
        shipping_fee=shipping_amount,
        total=subtotal + tax_amount - discount_amount + shipping_amount,
    )


def format_amount(amount: Any, currency: Optional[str] = None) -> str:
    """Two decimals with thousands separators, currency code appended"""
    text = f"{to_number(amount):,.2f}"
    return f"{text} {currency}" if currency else text
