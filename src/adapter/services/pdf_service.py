"""ReportLab PDF Generation Service Implementation

Lays out an invoice draft on a single A4 page using ReportLab.
"""

import base64
import binascii
import os
from io import BytesIO
from typing import Any, List, Optional, Tuple
from xml.sax.saxutils import escape

from reportlab.lib import colors
from reportlab.lib.pagesizes import A4
from reportlab.lib.styles import getSampleStyleSheet, ParagraphStyle
from reportlab.lib.units import mm
from reportlab.lib.utils import ImageReader
from reportlab.platypus import (
    SimpleDocTemplate,
    Table,
    TableStyle,
    Paragraph,
    Spacer,
)

from src.app.services.pdf_service import PdfService
from src.domain.invoice_draft import InvoiceDraft
from src.domain.invoice_totals import InvoiceTotals, format_amount

LABEL_COLOR = colors.HexColor("#5b6f77")
TEXT_COLOR = colors.HexColor("#202124")
PANEL_COLOR = colors.HexColor("#f8f9fa")
RULE_COLOR = colors.HexColor("#dadce0")

LOGO_MAX_WIDTH = 150
LOGO_MAX_HEIGHT = 75
PAGE_MARGIN = 15 * mm


def display_value(value: Any, default: str = "0") -> str:
    """Raw form value as typed; whole floats lose their trailing .0"""
    if value is None or value == "":
        return default
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def build_totals_rows(draft: InvoiceDraft, totals: InvoiceTotals) -> List[Tuple[str, str]]:
    """
    Rows of the totals block, in display order

    Tax, shipping and discount rows only appear when their amount is
    positive; the discount is shown as a negative amount.
    """
    currency = draft.currency
    rows = [("Subtotal", format_amount(totals.subtotal, currency))]
    if totals.tax_rate > 0:
        rows.append(
            (f"Tax Rate ({display_value(totals.tax_rate)}%)", format_amount(totals.tax_amount, currency))
        )
    if totals.shipping_fee > 0:
        rows.append(("Shipping", format_amount(totals.shipping_fee, currency)))
    if totals.discount > 0:
        rows.append(("Discount", f"-{format_amount(totals.discount, currency)}"))
    rows.append(("Invoice Total", format_amount(totals.total, currency)))
    return rows


def load_logo(logo: Optional[str]) -> Optional[ImageReader]:
    """
    Load the draft logo from a data: URL or an image file path

    Raises:
        ValueError: logo is set but cannot be read as an image
    """
    if not logo or not logo.strip():
        return None

    try:
        if logo.startswith("data:"):
            _, _, encoded = logo.partition(",")
            return ImageReader(BytesIO(base64.b64decode(encoded, validate=True)))
        if os.path.exists(logo):
            return ImageReader(logo)
    except (binascii.Error, OSError) as exc:
        raise ValueError("Logo could not be read as an image") from exc
    raise ValueError(f"Logo not found: {logo}")


def fit_logo(width: float, height: float) -> Tuple[float, float]:
    """Scale image dimensions into the logo box, keeping aspect ratio"""
    scale = min(LOGO_MAX_WIDTH / width, LOGO_MAX_HEIGHT / height, 1.0)
    return width * scale, height * scale


def _multiline(text: str) -> str:
    return "<br/>".join(escape(line) for line in text.splitlines())


class ReportLabPdfService(PdfService):
    """
    ReportLab implementation of PdfService

    The logo is drawn directly on the page canvas at the top-right corner
    so it never shifts the flowing content.
    """

    def render_invoice(self, draft: InvoiceDraft) -> bytes:
        """
        Render an invoice draft as a single-page PDF

        Args:
            draft: Invoice draft as held in the editor

        Returns:
            PDF document as bytes

        Raises:
            ValueError: the draft logo cannot be read
        """
        logo = load_logo(draft.logo)
        totals = draft.totals()

        buffer = BytesIO()
        doc = SimpleDocTemplate(
            buffer,
            pagesize=A4,
            rightMargin=PAGE_MARGIN,
            leftMargin=PAGE_MARGIN,
            topMargin=PAGE_MARGIN,
            bottomMargin=PAGE_MARGIN,
            title=f"Invoice {draft.invoice_number}",
        )

        styles = getSampleStyleSheet()
        title_style = ParagraphStyle(
            "TitleStyle",
            parent=styles["Heading1"],
            fontSize=28,
            leading=32,
            textColor=LABEL_COLOR,
            spaceAfter=8 * mm,
        )
        label_style = ParagraphStyle(
            "LabelStyle",
            parent=styles["Normal"],
            fontName="Helvetica-Bold",
            fontSize=9,
            textColor=LABEL_COLOR,
            spaceAfter=4,
        )
        value_style = ParagraphStyle(
            "ValueStyle",
            parent=styles["Normal"],
            fontSize=11,
            textColor=TEXT_COLOR,
        )
        text_style = ParagraphStyle(
            "TextStyle",
            parent=styles["Normal"],
            fontSize=10,
            leading=13,
            textColor=TEXT_COLOR,
        )
        grand_total_style = ParagraphStyle(
            "GrandTotalStyle",
            parent=styles["Normal"],
            fontName="Helvetica-Bold",
            fontSize=12,
            alignment=2,
        )

        usable_width = A4[0] - 2 * PAGE_MARGIN
        elements = []

        elements.append(Paragraph("Invoice", title_style))

        # Number / issue date / due date
        info_table = Table(
            [
                [Paragraph("INVOICE NUMBER", label_style),
                 Paragraph("DATE OF ISSUE", label_style),
                 Paragraph("DUE DATE", label_style)],
                [Paragraph(escape(draft.invoice_number), value_style),
                 Paragraph(draft.invoice_date.isoformat(), value_style),
                 Paragraph(draft.due_date.isoformat() if draft.due_date else "N/A", value_style)],
            ],
            colWidths=[45 * mm, 45 * mm, 45 * mm],
            hAlign="LEFT",
        )
        info_table.setStyle(
            TableStyle(
                [
                    ("VALIGN", (0, 0), (-1, -1), "TOP"),
                    ("LEFTPADDING", (0, 0), (-1, -1), 0),
                ]
            )
        )
        elements.append(info_table)
        elements.append(Spacer(1, 8 * mm))

        # Billed to / from / purchase order
        party_table = Table(
            [
                [Paragraph("BILLED TO", label_style),
                 Paragraph("FROM", label_style),
                 Paragraph("PURCHASE ORDER", label_style)],
                [Paragraph(_multiline(draft.bill_to) or "N/A", text_style),
                 Paragraph(_multiline(draft.company_details) or "N/A", text_style),
                 Paragraph(escape(draft.purchase_order) or "N/A", text_style)],
            ],
            colWidths=[usable_width / 3] * 3,
        )
        party_table.setStyle(
            TableStyle(
                [
                    ("VALIGN", (0, 0), (-1, -1), "TOP"),
                    ("LEFTPADDING", (0, 0), (-1, -1), 0),
                ]
            )
        )
        elements.append(party_table)
        elements.append(Spacer(1, 8 * mm))

        # Line items
        item_rows = [["DESCRIPTION", "UNIT COST", "QTY", "AMOUNT"]]
        for item in draft.items:
            item_rows.append(
                [
                    Paragraph(escape(item.description) or "N/A", text_style),
                    display_value(item.unit_cost),
                    display_value(item.quantity),
                    format_amount(item.amount, draft.currency),
                ]
            )
        items_table = Table(
            item_rows,
            colWidths=[usable_width * 0.45, usable_width * 0.18, usable_width * 0.12, usable_width * 0.25],
        )
        items_table.setStyle(
            TableStyle(
                [
                    ("BACKGROUND", (0, 0), (-1, -1), PANEL_COLOR),
                    ("FONTNAME", (0, 0), (-1, 0), "Helvetica-Bold"),
                    ("FONTSIZE", (0, 0), (-1, 0), 9),
                    ("TEXTCOLOR", (0, 0), (-1, 0), LABEL_COLOR),
                    ("FONTSIZE", (0, 1), (-1, -1), 10),
                    ("TEXTCOLOR", (0, 1), (-1, -1), TEXT_COLOR),
                    ("ALIGN", (1, 0), (1, -1), "RIGHT"),
                    ("ALIGN", (2, 0), (2, -1), "CENTER"),
                    ("ALIGN", (3, 0), (3, -1), "RIGHT"),
                    ("VALIGN", (0, 0), (-1, -1), "TOP"),
                    ("BOTTOMPADDING", (0, 0), (-1, 0), 8),
                    ("LINEBELOW", (0, -1), (-1, -1), 1, RULE_COLOR),
                    ("BOTTOMPADDING", (0, -1), (-1, -1), 12),
                ]
            )
        )
        elements.append(items_table)

        # Terms beside totals
        terms_cell = ""
        if draft.notes:
            terms_cell = [
                Paragraph("TERMS", label_style),
                Paragraph(_multiline(draft.notes), text_style),
            ]

        totals_rows = build_totals_rows(draft, totals)
        grand_label, grand_value = totals_rows[-1]
        totals_data = [[label.upper(), value] for label, value in totals_rows[:-1]]
        totals_data.append([grand_label.upper(), Paragraph(escape(grand_value), grand_total_style)])
        totals_table = Table(totals_data, colWidths=[usable_width * 0.22, usable_width * 0.22])
        totals_table.setStyle(
            TableStyle(
                [
                    ("FONTNAME", (0, 0), (0, -1), "Helvetica-Bold"),
                    ("FONTSIZE", (0, 0), (-1, -1), 10),
                    ("TEXTCOLOR", (0, 0), (0, -1), LABEL_COLOR),
                    ("ALIGN", (1, 0), (1, -1), "RIGHT"),
                    ("LINEABOVE", (0, -1), (-1, -1), 1, RULE_COLOR),
                    ("TOPPADDING", (0, -1), (-1, -1), 10),
                ]
            )
        )

        bottom_table = Table(
            [[terms_cell, totals_table]],
            colWidths=[usable_width * 0.52, usable_width * 0.48],
        )
        bottom_table.setStyle(
            TableStyle(
                [
                    ("BACKGROUND", (0, 0), (-1, -1), PANEL_COLOR),
                    ("VALIGN", (0, 0), (-1, -1), "TOP"),
                    ("TOPPADDING", (0, 0), (-1, -1), 12),
                    ("BOTTOMPADDING", (0, 0), (-1, -1), 12),
                ]
            )
        )
        elements.append(bottom_table)

        if draft.bank_details:
            elements.append(Spacer(1, 8 * mm))
            elements.append(Paragraph("BANK ACCOUNT DETAILS", label_style))
            elements.append(Paragraph(_multiline(draft.bank_details), text_style))

        def draw_logo(canvas, document):
            if logo is None:
                return
            width, height = fit_logo(*logo.getSize())
            page_width, page_height = document.pagesize
            canvas.saveState()
            canvas.drawImage(
                logo,
                page_width - document.rightMargin - width,
                page_height - document.topMargin - height,
                width=width,
                height=height,
                mask="auto",
            )
            canvas.restoreState()

        doc.build(elements, onFirstPage=draw_logo, onLaterPages=draw_logo)
        pdf_bytes = buffer.getvalue()
        buffer.close()

        return pdf_bytes
