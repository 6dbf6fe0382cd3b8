from datetime import datetime
from decimal import Decimal
from typing import Optional
from uuid import UUID

from fastapi import APIRouter, Depends, status
from pydantic import BaseModel, Field

from config import ApplicationConfig
from src.api.error import raise_for_error
from src.app.services.clock import Clock
from src.app.services.notification_dispatcher import NotificationDispatcher
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.invoices import (
    AddInvoiceItemUseCase,
    ApplyPaymentUseCase,
    CreateInvoiceUseCase,
    GetInvoiceUseCase,
    InvoiceListResponse,
    InvoiceResponse,
    ListInvoicesUseCase,
    ListOverdueInvoicesUseCase,
    PaymentResponse,
    RemoveInvoiceItemUseCase,
    SendInvoiceUseCase,
    UpdateInvoiceDetailsUseCase,
    VoidInvoiceUseCase,
)
from src.depends import (
    get_clock,
    get_current_user_id,
    get_notification_dispatcher,
    get_unit_of_work,
)
from src.domain.base import to_naive_utc
from src.domain.entities import PaymentMethod

router = APIRouter(prefix="/businesses/{business_id}/invoices", tags=["Invoices"])


class CreateInvoiceRequest(BaseModel):
    client_id: UUID
    currency: str = Field(..., description="ISO currency code, e.g. USD")
    invoice_number: Optional[str] = Field(
        default=None, description="Leave empty to generate yyyyMM### automatically"
    )


class UpdateInvoiceDetailsRequest(BaseModel):
    issue_date: datetime
    due_date: datetime
    notes: Optional[str] = None
    terms: Optional[str] = None


class AddItemRequest(BaseModel):
    description: str
    quantity: Decimal
    unit_price: Decimal
    unit: Optional[str] = None


class ApplyPaymentRequest(BaseModel):
    amount: Decimal
    method: PaymentMethod
    external_id: Optional[str] = None


@router.post("", status_code=status.HTTP_201_CREATED, response_model=InvoiceResponse)
async def create_invoice(
    business_id: UUID,
    request: CreateInvoiceRequest,
    user_id: UUID = Depends(get_current_user_id),
    uow: UnitOfWork = Depends(get_unit_of_work),
    clock: Clock = Depends(get_clock),
):
    """
    Create Draft Invoice

    Raises:
        - 400 Bad Request: CURRENCY_REQUIRED, INVOICE_NUMBER_REQUIRED
        - 403 Forbidden: INSUFFICIENT_PERMISSION (needs invoices:create)
        - 404 Not Found: BUSINESS_NOT_FOUND, CLIENT_NOT_FOUND
        - 409 Conflict: BUSINESS_INACTIVE, INVOICE_NUMBER_TAKEN
    """
    use_case = CreateInvoiceUseCase(
        uow, clock=clock, due_in_days=ApplicationConfig.INVOICE_DUE_DAYS
    )
    result = await use_case.execute(
        user_id,
        business_id,
        request.client_id,
        request.currency,
        invoice_number=request.invoice_number,
    )

    if result.is_err():
        raise_for_error(result.error)

    return result.value


@router.get("", response_model=InvoiceListResponse)
async def list_invoices(
    business_id: UUID,
    user_id: UUID = Depends(get_current_user_id),
    uow: UnitOfWork = Depends(get_unit_of_work),
    clock: Clock = Depends(get_clock),
):
    result = await ListInvoicesUseCase(uow, clock=clock).execute(user_id, business_id)

    if result.is_err():
        raise_for_error(result.error)

    return result.value


@router.get("/overdue", response_model=InvoiceListResponse)
async def list_overdue_invoices(
    business_id: UUID,
    user_id: UUID = Depends(get_current_user_id),
    uow: UnitOfWork = Depends(get_unit_of_work),
    clock: Clock = Depends(get_clock),
):
    result = await ListOverdueInvoicesUseCase(uow, clock=clock).execute(user_id, business_id)

    if result.is_err():
        raise_for_error(result.error)

    return result.value


@router.get("/{invoice_id}", response_model=InvoiceResponse)
async def get_invoice(
    business_id: UUID,
    invoice_id: UUID,
    user_id: UUID = Depends(get_current_user_id),
    uow: UnitOfWork = Depends(get_unit_of_work),
    clock: Clock = Depends(get_clock),
):
    result = await GetInvoiceUseCase(uow, clock=clock).execute(user_id, business_id, invoice_id)

    if result.is_err():
        raise_for_error(result.error)

    return result.value


@router.put("/{invoice_id}/details", response_model=InvoiceResponse)
async def update_invoice_details(
    business_id: UUID,
    invoice_id: UUID,
    request: UpdateInvoiceDetailsRequest,
    user_id: UUID = Depends(get_current_user_id),
    uow: UnitOfWork = Depends(get_unit_of_work),
    clock: Clock = Depends(get_clock),
):
    """
    Raises:
        - 400 Bad Request: INVALID_ISSUE_DATE, INVALID_DUE_DATE
    """
    # Stored timestamps are naive UTC
    issue_date = to_naive_utc(request.issue_date)
    due_date = to_naive_utc(request.due_date)

    result = await UpdateInvoiceDetailsUseCase(uow, clock=clock).execute(
        user_id,
        business_id,
        invoice_id,
        issue_date,
        due_date,
        notes=request.notes,
        terms=request.terms,
    )

    if result.is_err():
        raise_for_error(result.error)

    return result.value


@router.post("/{invoice_id}/items", response_model=InvoiceResponse)
async def add_invoice_item(
    business_id: UUID,
    invoice_id: UUID,
    request: AddItemRequest,
    user_id: UUID = Depends(get_current_user_id),
    uow: UnitOfWork = Depends(get_unit_of_work),
    clock: Clock = Depends(get_clock),
):
    """
    Add Line Item (draft only)

    Raises:
        - 400 Bad Request: INVALID_LINE_ITEM
        - 409 Conflict: INVOICE_NOT_DRAFT, BUSINESS_INACTIVE
    """
    result = await AddInvoiceItemUseCase(uow, clock=clock).execute(
        user_id,
        business_id,
        invoice_id,
        request.description,
        request.quantity,
        request.unit_price,
        unit=request.unit,
    )

    if result.is_err():
        raise_for_error(result.error)

    return result.value


@router.delete("/{invoice_id}/items/{item_id}", response_model=InvoiceResponse)
async def remove_invoice_item(
    business_id: UUID,
    invoice_id: UUID,
    item_id: UUID,
    user_id: UUID = Depends(get_current_user_id),
    uow: UnitOfWork = Depends(get_unit_of_work),
    clock: Clock = Depends(get_clock),
):
    result = await RemoveInvoiceItemUseCase(uow, clock=clock).execute(
        user_id, business_id, invoice_id, item_id
    )

    if result.is_err():
        raise_for_error(result.error)

    return result.value


@router.post("/{invoice_id}/send", response_model=InvoiceResponse)
async def send_invoice(
    business_id: UUID,
    invoice_id: UUID,
    user_id: UUID = Depends(get_current_user_id),
    uow: UnitOfWork = Depends(get_unit_of_work),
    dispatcher: NotificationDispatcher = Depends(get_notification_dispatcher),
    clock: Clock = Depends(get_clock),
):
    """
    Raises:
        - 409 Conflict: INVOICE_HAS_NO_ITEMS, BUSINESS_INACTIVE
    """
    result = await SendInvoiceUseCase(uow, dispatcher=dispatcher, clock=clock).execute(
        user_id, business_id, invoice_id
    )

    if result.is_err():
        raise_for_error(result.error)

    return result.value


@router.post(
    "/{invoice_id}/payments",
    status_code=status.HTTP_201_CREATED,
    response_model=PaymentResponse,
)
async def apply_payment(
    business_id: UUID,
    invoice_id: UUID,
    request: ApplyPaymentRequest,
    user_id: UUID = Depends(get_current_user_id),
    uow: UnitOfWork = Depends(get_unit_of_work),
    dispatcher: NotificationDispatcher = Depends(get_notification_dispatcher),
    clock: Clock = Depends(get_clock),
):
    """
    Record Payment

    Raises:
        - 400 Bad Request: INVALID_PAYMENT_AMOUNT
        - 409 Conflict: INVOICE_CLOSED (paid or void), BUSINESS_INACTIVE
    """
    result = await ApplyPaymentUseCase(uow, dispatcher=dispatcher, clock=clock).execute(
        user_id,
        business_id,
        invoice_id,
        request.amount,
        request.method,
        external_id=request.external_id,
    )

    if result.is_err():
        raise_for_error(result.error)

    return result.value


@router.post("/{invoice_id}/void", response_model=InvoiceResponse)
async def void_invoice(
    business_id: UUID,
    invoice_id: UUID,
    user_id: UUID = Depends(get_current_user_id),
    uow: UnitOfWork = Depends(get_unit_of_work),
    clock: Clock = Depends(get_clock),
):
    """
    Raises:
        - 409 Conflict: INVOICE_ALREADY_PAID
    """
    result = await VoidInvoiceUseCase(uow, clock=clock).execute(user_id, business_id, invoice_id)

    if result.is_err():
        raise_for_error(result.error)

    return result.value
