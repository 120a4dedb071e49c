"""Request schemas for the Invoice API

Bodies are accepted in camelCase (``invoiceNumber``) as sent by the client;
snake_case names are accepted too.
"""

from datetime import date
from typing import List, Optional
from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

from src.app.use_cases.invoices import InvoiceItemInputDTO, SaveInvoiceCommandDTO
from src.domain.invoice import InvoiceStatus


class InvoiceItemRequestSchema(BaseModel):
    model_config = ConfigDict(allow_inf_nan=False)

    description: str = ""
    quantity: float = 0
    price: float = 0
    total: Optional[float] = None

    @field_validator("description", mode="before")
    @classmethod
    def none_to_blank(cls, v):
        return "" if v is None else v


class InvoiceRequestSchema(BaseModel):
    """
    Request schema for creating or updating an invoice

    Used for POST /invoices and PUT /invoices/{id}.
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        allow_inf_nan=False,
        json_schema_extra={
            "example": {
                "invoiceNumber": "INV123456",
                "invoiceDate": "2024-05-01",
                "dueDate": "2024-05-31",
                "companyName": "Acme Ltd",
                "companyAddress": "1 Main Street\nColombo",
                "companyEmail": "billing@acme.example",
                "companyPhone": "+94 11 234 5678",
                "clientName": "Globex",
                "clientAddress": "42 Side Road",
                "clientEmail": None,
                "clientPhone": None,
                "items": [
                    {"description": "Consulting", "quantity": 2, "price": 500, "total": 1000}
                ],
                "subtotal": 1000,
                "taxRate": 10,
                "taxAmount": 100,
                "totalAmount": 1070,
                "notes": "Payment within 30 days",
                "status": "draft",
            }
        },
    )

    invoice_number: str = Field(..., min_length=1, description="Invoice number")
    invoice_date: date = Field(..., description="Date of issue (YYYY-MM-DD)")
    due_date: Optional[date] = Field(default=None, description="Due date (YYYY-MM-DD)")

    company_name: Optional[str] = None
    company_address: Optional[str] = None
    company_email: Optional[str] = None
    company_phone: Optional[str] = None

    client_name: Optional[str] = None
    client_address: Optional[str] = None
    client_email: Optional[str] = None
    client_phone: Optional[str] = None

    items: List[InvoiceItemRequestSchema] = Field(default_factory=list)

    subtotal: float = 0
    tax_rate: float = 0
    tax_amount: float = 0
    total_amount: float = 0
    notes: Optional[str] = None
    status: Optional[InvoiceStatus] = None

    @field_validator("due_date", "status", mode="before")
    @classmethod
    def blank_to_none(cls, v):
        if isinstance(v, str) and not v.strip():
            return None
        return v

    @field_validator("subtotal", "tax_rate", "tax_amount", "total_amount", mode="before")
    @classmethod
    def missing_amount_to_zero(cls, v):
        return 0 if v is None or v == "" else v

    def to_command(self, user_id: int) -> SaveInvoiceCommandDTO:
        data = self.model_dump(exclude={"items"})
        return SaveInvoiceCommandDTO(
            user_id=user_id,
            items=[InvoiceItemInputDTO(**item.model_dump()) for item in self.items],
            **data,
        )


class InvoiceCreatedResponseSchema(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    message: str = "Invoice created successfully"
    invoice_id: int = Field(..., alias="invoiceId")
