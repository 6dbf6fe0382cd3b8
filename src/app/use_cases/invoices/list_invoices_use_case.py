from typing import Optional
from uuid import UUID

from libs.result import Result, Return
from src.app.services.clock import Clock, SystemClock
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.guards import authorize_business
from src.domain.permissions import PermissionName

from .dtos import InvoiceListResponse, InvoiceResponse


class ListInvoicesUseCase:
    """All invoices of a business, newest first"""

    def __init__(self, uow: UnitOfWork, clock: Optional[Clock] = None):
        self.uow = uow
        self.clock = clock or SystemClock()

    async def execute(self, user_id: UUID, business_id: UUID) -> Result[InvoiceListResponse]:
        async with self.uow:
            authorized = await authorize_business(
                self.uow, user_id, business_id, PermissionName.invoices_view
            )
            if authorized.is_err():
                return authorized

            now = self.clock.now()
            invoices = await self.uow.invoices.get_by_business_id(business_id)
            return Return.ok(
                InvoiceListResponse(
                    invoices=[InvoiceResponse.from_entity(i, now) for i in invoices]
                )
            )


class ListOverdueInvoicesUseCase:
    """
    Sent invoices whose due date has passed.

    Overdue is never stored; it is evaluated against the clock here.
    """

    def __init__(self, uow: UnitOfWork, clock: Optional[Clock] = None):
        self.uow = uow
        self.clock = clock or SystemClock()

    async def execute(self, user_id: UUID, business_id: UUID) -> Result[InvoiceListResponse]:
        async with self.uow:
            authorized = await authorize_business(
                self.uow, user_id, business_id, PermissionName.invoices_view
            )
            if authorized.is_err():
                return authorized

            now = self.clock.now()
            invoices = await self.uow.invoices.get_overdue(business_id, now)
            return Return.ok(
                InvoiceListResponse(
                    invoices=[InvoiceResponse.from_entity(i, now) for i in invoices]
                )
            )
