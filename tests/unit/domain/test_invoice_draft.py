"""Unit tests for InvoiceDraft editing"""

import re
import pytest
from datetime import date
from pydantic import ValidationError
from src.domain.invoice_draft import InvoiceDraft, DraftItem, new_invoice_number


class TestInvoiceDraftDefaults:
    def test_defaults(self):
        draft = InvoiceDraft()

        assert re.fullmatch(r"INV\d{6}", draft.invoice_number)
        assert draft.purchase_order == "ON001"
        assert draft.currency == "LKR"
        assert draft.invoice_date == date.today()
        assert draft.due_date is None
        assert draft.logo is None
        assert len(draft.items) == 1
        assert draft.items[0].description == ""
        assert draft.items[0].amount == 0
        assert draft.tax_rate == 0
        assert draft.discount == 0
        assert draft.shipping_fee == 0

    def test_new_invoice_number_format(self):
        assert re.fullmatch(r"INV\d{6}", new_invoice_number())

    def test_currency_is_normalised(self):
        assert InvoiceDraft(currency="usd").currency == "USD"

    def test_unsupported_currency_rejected(self):
        with pytest.raises(ValidationError):
            InvoiceDraft(currency="JPY")

    def test_blank_due_date_is_none(self):
        assert InvoiceDraft(due_date="").due_date is None

    def test_non_numeric_adjustments_become_zero(self):
        draft = InvoiceDraft(tax_rate="", discount="abc", shipping_fee=None)
        assert draft.tax_rate == 0
        assert draft.discount == 0
        assert draft.shipping_fee == 0

    def test_empty_item_list_gets_one_blank_item(self):
        assert len(InvoiceDraft(items=[]).items) == 1

    def test_item_amount_computed_on_load(self):
        item = DraftItem(description="Design", unit_cost="150", quantity=2)
        assert item.amount == 300


class TestInvoiceDraftItems:
    def test_add_item(self):
        draft = InvoiceDraft()
        draft.add_item()
        assert len(draft.items) == 2

    def test_remove_item(self):
        draft = InvoiceDraft(items=[DraftItem(description="a"), DraftItem(description="b")])

        assert draft.remove_item(0) is True
        assert [item.description for item in draft.items] == ["b"]

    def test_last_item_is_never_removed(self):
        draft = InvoiceDraft()

        assert draft.remove_item(0) is False
        assert len(draft.items) == 1

    def test_remove_item_out_of_range(self):
        draft = InvoiceDraft(items=[DraftItem(), DraftItem()])
        assert draft.remove_item(5) is False
        assert len(draft.items) == 2

    def test_move_item_up(self):
        draft = InvoiceDraft(
            items=[DraftItem(description="a"), DraftItem(description="b"), DraftItem(description="c")]
        )

        assert draft.move_item_up(2) is True
        assert [item.description for item in draft.items] == ["a", "c", "b"]

    def test_move_first_item_up_is_noop(self):
        draft = InvoiceDraft(items=[DraftItem(description="a"), DraftItem(description="b")])

        assert draft.move_item_up(0) is False
        assert [item.description for item in draft.items] == ["a", "b"]

    def test_update_item_recomputes_amount(self):
        draft = InvoiceDraft()

        draft.update_item(0, "unit_cost", "25")
        draft.update_item(0, "quantity", "4")

        assert draft.items[0].amount == 100

    def test_update_description_keeps_amount(self):
        draft = InvoiceDraft(items=[DraftItem(unit_cost=5, quantity=2)])

        draft.update_item(0, "description", "Widgets")

        assert draft.items[0].description == "Widgets"
        assert draft.items[0].amount == 10

    def test_update_unknown_field_rejected(self):
        with pytest.raises(ValueError):
            InvoiceDraft().update_item(0, "amount", 99)


class TestInvoiceDraftTotals:
    def test_totals(self):
        draft = InvoiceDraft(
            items=[DraftItem(unit_cost=500, quantity=2)],
            tax_rate=10,
            discount=50,
            shipping_fee=20,
        )
        assert draft.totals().total == 1070

    def test_logo_set_and_remove(self):
        draft = InvoiceDraft()
        draft.set_logo("logo.png")
        assert draft.logo == "logo.png"
        draft.remove_logo()
        assert draft.logo is None
