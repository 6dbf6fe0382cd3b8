"""
Send Invoice Use Case

Moves a draft invoice to sent and tells the notification dispatcher.
"""

import logging
from typing import Optional
from uuid import UUID

from libs.result import Result, Return
from src.app.services.clock import Clock, SystemClock
from src.app.services.notification_dispatcher import (
    NotificationDispatcher,
    dispatch_after_commit,
)
from src.app.services.unit_of_work import UnitOfWork
from src.domain.errors import DomainError
from src.domain.facts import InvoiceSent
from src.domain.permissions import PermissionName

from .dtos import InvoiceResponse
from .guards import load_invoice

logger = logging.getLogger(__name__)


class SendInvoiceUseCase:
    """
    Use case for sending an invoice.

    Business Rules:
    - Requires invoices:send
    - An invoice without items cannot be sent
    - Only draft -> sent changes anything; resending is a silent no-op and
      publishes nothing
    """

    def __init__(
        self,
        uow: UnitOfWork,
        dispatcher: Optional[NotificationDispatcher] = None,
        clock: Optional[Clock] = None,
    ):
        self.uow = uow
        self.dispatcher = dispatcher
        self.clock = clock or SystemClock()

    async def execute(
        self, user_id: UUID, business_id: UUID, invoice_id: UUID
    ) -> Result[InvoiceResponse]:
        async with self.uow:
            loaded = await load_invoice(
                self.uow,
                user_id,
                business_id,
                invoice_id,
                PermissionName.invoices_send,
                for_update=True,
            )
            if loaded.is_err():
                return loaded
            invoice = loaded.value

            try:
                changed = invoice.mark_as_sent()
            except DomainError as exc:
                return Return.err(exc.to_error())

            if changed:
                await self.uow.invoices.update(invoice)
                await self.uow.commit()
                logger.info("Invoice %s sent", invoice.id)

                await dispatch_after_commit(
                    self.dispatcher,
                    [
                        InvoiceSent(
                            invoice_id=invoice.id,
                            business_id=invoice.business_id,
                            client_id=invoice.client_id,
                            invoice_number=invoice.invoice_number,
                            total=invoice.total,
                            currency=invoice.currency,
                        )
                    ],
                )

            return Return.ok(InvoiceResponse.from_entity(invoice, self.clock.now()))
