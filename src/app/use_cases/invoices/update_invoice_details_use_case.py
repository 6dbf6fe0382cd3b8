from datetime import datetime
from typing import Optional
from uuid import UUID

from libs.result import Result, Return
from src.app.services.clock import Clock, SystemClock
from src.app.services.unit_of_work import UnitOfWork
from src.domain.errors import DomainError
from src.domain.permissions import PermissionName

from .dtos import InvoiceResponse
from .guards import load_invoice


class UpdateInvoiceDetailsUseCase:
    """
    Change dates, notes and terms of an invoice.

    The issue date cannot lie before today (UTC) and the due date cannot
    precede the issue date.
    """

    def __init__(self, uow: UnitOfWork, clock: Optional[Clock] = None):
        self.uow = uow
        self.clock = clock or SystemClock()

    async def execute(
        self,
        user_id: UUID,
        business_id: UUID,
        invoice_id: UUID,
        issue_date: datetime,
        due_date: datetime,
        notes: Optional[str] = None,
        terms: Optional[str] = None,
    ) -> Result[InvoiceResponse]:
        async with self.uow:
            now = self.clock.now()
            loaded = await load_invoice(
                self.uow,
                user_id,
                business_id,
                invoice_id,
                PermissionName.invoices_edit,
                for_update=True,
            )
            if loaded.is_err():
                return loaded
            invoice = loaded.value

            try:
                invoice.update_details(issue_date, due_date, notes=notes, terms=terms, now=now)
            except DomainError as exc:
                return Return.err(exc.to_error())

            await self.uow.invoices.update(invoice)
            await self.uow.commit()

            return Return.ok(InvoiceResponse.from_entity(invoice, now))
