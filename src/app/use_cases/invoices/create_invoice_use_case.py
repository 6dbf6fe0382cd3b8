"""
Create Invoice Use Case

Opens a draft invoice for a client of the business.
"""

import logging
from typing import Optional
from uuid import UUID

from libs.result import Error, Result, Return
from src.app.services.clock import Clock, SystemClock
from src.app.services.invoice_number_generator import InvoiceNumberGenerator
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.guards import authorize_business
from src.domain.entities import Invoice
from src.domain.entities.invoice import DEFAULT_DUE_DAYS
from src.domain.errors import DomainError
from src.domain.permissions import PermissionName

from .dtos import InvoiceResponse

logger = logging.getLogger(__name__)


class CreateInvoiceUseCase:
    """
    Use case for creating a draft invoice.

    Business Rules:
    - Requires invoices:create
    - The business must be active (and not deleted)
    - Client must belong to the same business
    - Invoice number is unique per business; generated (yyyyMM###) when omitted
    - Starts as draft with zero totals, issued now, due after the due window
    - Tax rate is copied from the business
    """

    def __init__(
        self,
        uow: UnitOfWork,
        clock: Optional[Clock] = None,
        due_in_days: int = DEFAULT_DUE_DAYS,
    ):
        self.uow = uow
        self.clock = clock or SystemClock()
        self.due_in_days = due_in_days

    async def execute(
        self,
        user_id: UUID,
        business_id: UUID,
        client_id: UUID,
        currency: str,
        invoice_number: Optional[str] = None,
    ) -> Result[InvoiceResponse]:
        """
        Execute create invoice use case.

        Args:
            user_id: Caller
            business_id: Issuing business
            client_id: Client being billed
            currency: ISO currency code
            invoice_number: Explicit number, or None to generate one

        Returns:
            Result with InvoiceResponse DTO, or Error
        """
        async with self.uow:
            now = self.clock.now()

            # 1. Business and permission
            authorized = await authorize_business(
                self.uow, user_id, business_id, PermissionName.invoices_create
            )
            if authorized.is_err():
                return authorized
            business = authorized.value

            # 2. Client of this business
            client = await self.uow.clients.get_by_id(client_id)
            if client is None or client.business_id != business.id:
                return Return.err(Error("CLIENT_NOT_FOUND", "Client not found"))

            # 3. Invoice number
            if invoice_number is None:
                invoice_number = await InvoiceNumberGenerator(self.uow).next_number(
                    business.id, now
                )
            elif await self.uow.invoices.number_exists(business.id, invoice_number.strip()):
                return Return.err(
                    Error(
                        "INVOICE_NUMBER_TAKEN",
                        f"Invoice number '{invoice_number}' is already used",
                    )
                )

            # 4. Build the draft
            try:
                invoice = Invoice.create(
                    business.id,
                    client.id,
                    invoice_number,
                    currency,
                    business_is_active=business.can_create_invoices(),
                    tax_rate=business.tax_rate,
                    due_in_days=self.due_in_days,
                    created_by=user_id,
                    now=now,
                )
            except DomainError as exc:
                return Return.err(exc.to_error())

            await self.uow.invoices.create(invoice)
            await self.uow.commit()
            logger.info("Invoice %s (%s) created", invoice.id, invoice.invoice_number)

            return Return.ok(InvoiceResponse.from_entity(invoice, now))
