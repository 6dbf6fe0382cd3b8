from typing import Optional
from uuid import UUID

from libs.result import Result, Return
from src.app.services.clock import Clock, SystemClock
from src.app.services.unit_of_work import UnitOfWork
from src.domain.permissions import PermissionName

from .dtos import InvoiceResponse
from .guards import load_invoice


class GetInvoiceUseCase:
    def __init__(self, uow: UnitOfWork, clock: Optional[Clock] = None):
        self.uow = uow
        self.clock = clock or SystemClock()

    async def execute(
        self, user_id: UUID, business_id: UUID, invoice_id: UUID
    ) -> Result[InvoiceResponse]:
        async with self.uow:
            loaded = await load_invoice(
                self.uow, user_id, business_id, invoice_id, PermissionName.invoices_view
            )
            if loaded.is_err():
                return loaded

            return Return.ok(InvoiceResponse.from_entity(loaded.value, self.clock.now()))
