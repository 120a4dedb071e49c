"""Invoice API Routes

Owner-scoped CRUD over invoices and their line items.
"""

from typing import List
from fastapi import APIRouter, Depends, status
from sqlmodel.ext.asyncio.session import AsyncSession

from src.api.schemas.invoice_request import (
    InvoiceRequestSchema,
    InvoiceCreatedResponseSchema,
)
from src.api.schemas.auth_request import MessageResponseSchema
from src.app.use_cases.auth import UserDTO
from src.app.use_cases.invoices import (
    ListInvoices,
    GetInvoice,
    CreateInvoice,
    UpdateInvoice,
    DeleteInvoice,
    InvoiceSummaryDTO,
    InvoiceDetailDTO,
)
from src.adapter.repositories.invoice_repository import SqlAlchemyInvoiceRepository
from src.adapter.repositories.invoice_item_repository import SqlAlchemyInvoiceItemRepository
from src.adapter.services.unit_of_work import SqlAlchemyUnitOfWork
from src.depends import get_session
from src.api.error import ClientError
from src.api.security import get_current_user
from src.libs.result import Error

router = APIRouter(prefix="/invoices", tags=["Invoices"])

NOT_FOUND_RESPONSE = {
    404: {
        "description": "Invoice not found",
        "content": {
            "application/json": {
                "example": {
                    "error": {
                        "code": "INVOICE_NOT_FOUND",
                        "message": "Invoice not found"
                    }
                }
            }
        }
    }
}


def _raise_for(error: Error):
    if error.code == "INVOICE_NOT_FOUND":
        raise ClientError(error, status_code=status.HTTP_404_NOT_FOUND)
    if error.code == "INTERNAL_ERROR":
        raise ClientError(error, status_code=status.HTTP_500_INTERNAL_SERVER_ERROR)
    raise ClientError(error)


@router.get("", response_model=List[InvoiceSummaryDTO])
async def list_invoices(
    user: UserDTO = Depends(get_current_user),
    session: AsyncSession = Depends(get_session),
):
    """
    List the caller's invoices, newest first.

    Each entry carries `item_count` instead of its items.
    """
    use_case = ListInvoices(SqlAlchemyInvoiceRepository(session))
    result = await use_case.execute(user.id)

    if result.is_err():
        _raise_for(result.error)

    return result.value


@router.get("/{invoice_id}", response_model=InvoiceDetailDTO, responses=NOT_FOUND_RESPONSE)
async def get_invoice(
    invoice_id: int,
    user: UserDTO = Depends(get_current_user),
    session: AsyncSession = Depends(get_session),
):
    """
    Fetch one of the caller's invoices with its items.

    **Returns:**
    - 200: Invoice header plus `items` in insertion order
    - 404: No such invoice for this user
    """
    use_case = GetInvoice(
        SqlAlchemyInvoiceRepository(session),
        SqlAlchemyInvoiceItemRepository(session),
    )
    result = await use_case.execute(invoice_id, user.id)

    if result.is_err():
        _raise_for(result.error)

    return result.value


@router.post(
    "",
    response_model=InvoiceCreatedResponseSchema,
    status_code=status.HTTP_201_CREATED,
)
async def create_invoice(
    request: InvoiceRequestSchema,
    user: UserDTO = Depends(get_current_user),
    session: AsyncSession = Depends(get_session),
):
    """
    Create an invoice with its items in one transaction.

    New invoices always start as `draft`; totals are stored as submitted.

    **Returns:**
    - 201: `{message, invoiceId}`
    - 400: Invalid request body
    """
    use_case = CreateInvoice(
        SqlAlchemyUnitOfWork(session),
        SqlAlchemyInvoiceRepository(session),
        SqlAlchemyInvoiceItemRepository(session),
    )
    result = await use_case.execute(request.to_command(user.id))

    if result.is_err():
        _raise_for(result.error)

    return InvoiceCreatedResponseSchema(invoice_id=result.value.invoice_id)


@router.put("/{invoice_id}", response_model=MessageResponseSchema, responses=NOT_FOUND_RESPONSE)
async def update_invoice(
    invoice_id: int,
    request: InvoiceRequestSchema,
    user: UserDTO = Depends(get_current_user),
    session: AsyncSession = Depends(get_session),
):
    """
    Overwrite an invoice and replace all of its items.

    A missing `status` resets the invoice to `draft`.

    **Returns:**
    - 200: Invoice updated
    - 400: Invalid request body
    - 404: No such invoice for this user
    """
    use_case = UpdateInvoice(
        SqlAlchemyUnitOfWork(session),
        SqlAlchemyInvoiceRepository(session),
        SqlAlchemyInvoiceItemRepository(session),
    )
    result = await use_case.execute(invoice_id, request.to_command(user.id))

    if result.is_err():
        _raise_for(result.error)

    return MessageResponseSchema(message="Invoice updated successfully")


@router.delete("/{invoice_id}", response_model=MessageResponseSchema, responses=NOT_FOUND_RESPONSE)
async def delete_invoice(
    invoice_id: int,
    user: UserDTO = Depends(get_current_user),
    session: AsyncSession = Depends(get_session),
):
    """Delete one of the caller's invoices together with its items."""
    use_case = DeleteInvoice(SqlAlchemyUnitOfWork(session), SqlAlchemyInvoiceRepository(session))
    result = await use_case.execute(invoice_id, user.id)

    if result.is_err():
        _raise_for(result.error)

    return MessageResponseSchema(message="Invoice deleted successfully")
