from decimal import Decimal
from typing import Optional
from uuid import UUID

from libs.result import Result, Return
from src.app.services.clock import Clock, SystemClock
from src.app.services.unit_of_work import UnitOfWork
from src.domain.errors import DomainError
from src.domain.permissions import PermissionName

from .dtos import InvoiceResponse
from .guards import load_invoice


class AddInvoiceItemUseCase:
    """
    Append a line item to a draft invoice.

    Totals are recomputed from all items in the same unit of work.
    """

    def __init__(self, uow: UnitOfWork, clock: Optional[Clock] = None):
        self.uow = uow
        self.clock = clock or SystemClock()

    async def execute(
        self,
        user_id: UUID,
        business_id: UUID,
        invoice_id: UUID,
        description: str,
        quantity: Decimal,
        unit_price: Decimal,
        unit: Optional[str] = None,
    ) -> Result[InvoiceResponse]:
        async with self.uow:
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
                invoice.add_item(description, quantity, unit_price, unit)
            except DomainError as exc:
                return Return.err(exc.to_error())

            await self.uow.invoices.update(invoice)
            await self.uow.commit()

            return Return.ok(InvoiceResponse.from_entity(invoice, self.clock.now()))
