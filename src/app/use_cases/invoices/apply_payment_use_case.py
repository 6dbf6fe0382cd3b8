"""
Apply Payment Use Case

Records a payment transaction against an invoice.
"""

import logging
from decimal import Decimal
from typing import Optional
from uuid import UUID

from libs.result import Result, Return
from src.app.services.clock import Clock, SystemClock
from src.app.services.notification_dispatcher import (
    NotificationDispatcher,
    dispatch_after_commit,
)
from src.app.services.unit_of_work import UnitOfWork
from src.domain.entities import InvoiceStatus, PaymentMethod
from src.domain.errors import DomainError
from src.domain.facts import InvoicePaid, PaymentApplied
from src.domain.permissions import PermissionName

from .dtos import InvoiceResponse, PaymentResponse, TransactionResponse
from .guards import load_invoice

logger = logging.getLogger(__name__)


class ApplyPaymentUseCase:
    """
    Use case for applying a payment.

    Business Rules:
    - Requires payments:record
    - Paid and void invoices accept no payments
    - Amount must be positive; overpayment is accepted as is
    - The invoice becomes paid once amount_paid >= total
    - Transactions are append-only
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
        self,
        user_id: UUID,
        business_id: UUID,
        invoice_id: UUID,
        amount: Decimal,
        method: PaymentMethod,
        external_id: Optional[str] = None,
    ) -> Result[PaymentResponse]:
        """
        Execute apply payment use case.

        Args:
            user_id: Caller
            business_id: Business owning the invoice
            invoice_id: Invoice being paid
            amount: Amount received
            method: How it was paid
            external_id: Reference from the payment provider

        Returns:
            Result with PaymentResponse DTO, or Error
        """
        async with self.uow:
            now = self.clock.now()
            loaded = await load_invoice(
                self.uow,
                user_id,
                business_id,
                invoice_id,
                PermissionName.payments_record,
                for_update=True,
            )
            if loaded.is_err():
                return loaded
            invoice = loaded.value

            try:
                transaction = invoice.apply_payment(amount, method, external_id, now=now)
            except DomainError as exc:
                return Return.err(exc.to_error())

            await self.uow.invoices.update(invoice)
            await self.uow.commit()
            logger.info("Payment %s applied to invoice %s", transaction.id, invoice.id)

            facts = [
                PaymentApplied(
                    invoice_id=invoice.id,
                    transaction_id=transaction.id,
                    amount=transaction.amount,
                    method=transaction.payment_method.value,
                    external_id=transaction.external_transaction_id,
                )
            ]
            if invoice.status == InvoiceStatus.paid:
                facts.append(
                    InvoicePaid(
                        invoice_id=invoice.id,
                        business_id=invoice.business_id,
                        amount_paid=invoice.amount_paid,
                    )
                )
            await dispatch_after_commit(self.dispatcher, facts)

            return Return.ok(
                PaymentResponse(
                    transaction=TransactionResponse.from_entity(transaction),
                    invoice=InvoiceResponse.from_entity(invoice, now),
                )
            )
