"""PDF Generation Service Interface

Defines the contract for rendering an invoice draft into a document.
"""

from abc import ABC, abstractmethod
from src.domain.invoice_draft import InvoiceDraft


class PdfService(ABC):
    """
    Service interface for PDF generation

    Rendering is read-only: the draft is never modified.
    """

    @abstractmethod
    def render_invoice(self, draft: InvoiceDraft) -> bytes:
        """
        Render an invoice draft as a single-page PDF

        Args:
            draft: Invoice draft as held in the editor

        Returns:
            PDF document as bytes
        """
        pass

    def filename_for(self, draft: InvoiceDraft) -> str:
        """Download file name for the rendered draft"""
        return f"invoice-{draft.invoice_number}.pdf"
