"""
Invoice Entity

Billing aggregate: owns its line items and payment transactions.
"""

from datetime import datetime, timedelta
from decimal import Decimal
from typing import List, Optional
from uuid import UUID, uuid4

from sqlalchemy import Numeric, Text
from sqlmodel import Column, DateTime, Field, Index, Relationship, SQLModel

from src.domain.base import is_blank, to_decimal, to_money, utc_now
from src.domain.errors import InvalidStateError, ValidationError

from .enums import InvoiceStatus, PaymentMethod
from .invoice_item import InvoiceItem
from .transaction import Transaction

DEFAULT_TAX_RATE = Decimal("0.10")
DEFAULT_DUE_DAYS = 30

ZERO = Decimal("0.00")


class Invoice(SQLModel, table=True):
    """
    Invoice entity - aggregate root for billing.

    Business Rules:
    - draft -> sent -> paid; draft|sent -> void; paid and void are terminal
    - Items can be added or removed only while draft
    - Totals are recomputed from the items after every item change:
      sub_total = sum(item.total), tax = round(sub_total * tax_rate), total = sub_total + tax
    - Payment moves the invoice to paid once amount_paid >= total
    - A paid invoice cannot be voided
    - Overdue is derived from due_date at read time and never stored
    - Items and transactions are changed only through the invoice
    """

    __tablename__ = "invoices"

    id: UUID = Field(default_factory=uuid4, primary_key=True)
    business_id: UUID = Field(foreign_key="businesses.id", nullable=False, index=True)
    client_id: UUID = Field(foreign_key="clients.id", nullable=False, index=True)
    created_by: Optional[UUID] = Field(default=None, foreign_key="users.id")

    invoice_number: str = Field(max_length=50)
    currency: str = Field(max_length=10)
    status: InvoiceStatus = Field(default=InvoiceStatus.draft)

    issue_date: datetime = Field(sa_column=Column(DateTime, nullable=False))
    due_date: datetime = Field(sa_column=Column(DateTime, nullable=False))

    # Money
    tax_rate: Decimal = Field(
        default=DEFAULT_TAX_RATE, sa_column=Column(Numeric(5, 4), nullable=False)
    )
    sub_total: Decimal = Field(default=ZERO, sa_column=Column(Numeric(14, 2), nullable=False))
    tax: Decimal = Field(default=ZERO, sa_column=Column(Numeric(14, 2), nullable=False))
    total: Decimal = Field(default=ZERO, sa_column=Column(Numeric(14, 2), nullable=False))
    amount_paid: Decimal = Field(default=ZERO, sa_column=Column(Numeric(14, 2), nullable=False))

    notes: Optional[str] = Field(default=None, sa_column=Column(Text))
    terms: Optional[str] = Field(default=None, sa_column=Column(Text))

    created_at: datetime = Field(default_factory=utc_now, sa_column=Column(DateTime))

    items: List[InvoiceItem] = Relationship(
        sa_relationship_kwargs={"lazy": "selectin", "cascade": "all, delete-orphan"}
    )
    transactions: List[Transaction] = Relationship(
        sa_relationship_kwargs={
            "lazy": "selectin",
            "cascade": "save-update, merge",
            "passive_deletes": "all",
            "order_by": "Transaction.transaction_date",
        }
    )

    __table_args__ = (
        Index("uq_invoice_business_number", "business_id", "invoice_number", unique=True),
        Index("idx_invoice_status_due_date", "status", "due_date"),
    )

    @classmethod
    def create(
        cls,
        business_id: UUID,
        client_id: UUID,
        invoice_number: str,
        currency: str,
        business_is_active: bool = True,
        tax_rate: Decimal = DEFAULT_TAX_RATE,
        due_in_days: int = DEFAULT_DUE_DAYS,
        created_by: Optional[UUID] = None,
        now: Optional[datetime] = None,
    ) -> "Invoice":
        if not business_is_active:
            raise InvalidStateError(
                "Cannot create invoices for an inactive or deleted business.",
                code="BUSINESS_INACTIVE",
            )
        if is_blank(invoice_number):
            raise ValidationError("Invoice number cannot be empty.", code="INVOICE_NUMBER_REQUIRED")
        if is_blank(currency):
            raise ValidationError("Currency cannot be empty.", code="CURRENCY_REQUIRED")

        rate = to_decimal(tax_rate)
        if rate < 0:
            raise ValidationError("Tax rate cannot be negative.", code="INVALID_TAX_RATE")

        now = now or utc_now()
        return cls(
            business_id=business_id,
            client_id=client_id,
            created_by=created_by,
            invoice_number=invoice_number.strip(),
            currency=currency.strip().upper(),
            status=InvoiceStatus.draft,
            issue_date=now,
            due_date=now + timedelta(days=due_in_days),
            tax_rate=rate,
            sub_total=ZERO,
            tax=ZERO,
            total=ZERO,
            amount_paid=ZERO,
            created_at=now,
            items=[],
            transactions=[],
        )

    def update_details(
        self,
        issue_date: datetime,
        due_date: datetime,
        notes: Optional[str] = None,
        terms: Optional[str] = None,
        now: Optional[datetime] = None,
    ) -> None:
        # date-only comparison against the current UTC day
        if issue_date.date() < (now or utc_now()).date():
            raise ValidationError("Issue date cannot be in the past.", code="INVALID_ISSUE_DATE")
        if due_date < issue_date:
            raise ValidationError(
                "Due date cannot be before the issue date.", code="INVALID_DUE_DATE"
            )

        self.issue_date = issue_date
        self.due_date = due_date
        self.notes = notes
        self.terms = terms

    def add_item(
        self,
        description: str,
        quantity,
        unit_price,
        unit: Optional[str] = None,
    ) -> InvoiceItem:
        self._ensure_draft()

        item = InvoiceItem.create(self.id, description, quantity, unit_price, unit)
        self.items.append(item)
        self._recalculate_totals()
        return item

    def remove_item(self, item_id: UUID) -> bool:
        self._ensure_draft()

        item = next((i for i in self.items if i.id == item_id), None)
        if item is None:
            return False

        self.items.remove(item)
        self._recalculate_totals()
        return True

    def apply_payment(
        self,
        amount,
        method: PaymentMethod,
        external_id: Optional[str] = None,
        now: Optional[datetime] = None,
    ) -> Transaction:
        if self.status in (InvoiceStatus.paid, InvoiceStatus.void):
            raise InvalidStateError(
                "Cannot apply payment to a paid or voided invoice.", code="INVOICE_CLOSED"
            )

        amount = to_money(amount)
        if amount <= 0:
            raise ValidationError(
                "Payment amount must be positive.", code="INVALID_PAYMENT_AMOUNT"
            )

        transaction = Transaction.record(self.id, amount, method, external_id, now=now)
        self.transactions.append(transaction)
        self.amount_paid = to_money(self.amount_paid + amount)
        if self.amount_paid >= self.total:
            self.status = InvoiceStatus.paid
        return transaction

    def mark_as_sent(self) -> bool:
        """
        Move a draft invoice to sent.

        Returns:
            True when the status changed; sending an already sent, paid or
            void invoice is a no-op.
        """
        if not self.items:
            raise InvalidStateError(
                "Cannot send an invoice with no items.", code="INVOICE_HAS_NO_ITEMS"
            )
        if self.status != InvoiceStatus.draft:
            return False
        self.status = InvoiceStatus.sent
        return True

    def void(self) -> None:
        if self.status == InvoiceStatus.paid:
            raise InvalidStateError(
                "A paid invoice cannot be voided.", code="INVOICE_ALREADY_PAID"
            )
        self.status = InvoiceStatus.void

    def effective_status(self, now: Optional[datetime] = None) -> InvoiceStatus:
        if self.status == InvoiceStatus.sent and (now or utc_now()) > self.due_date:
            return InvoiceStatus.overdue
        return self.status

    @property
    def balance_due(self) -> Decimal:
        return max(to_money(self.total - self.amount_paid), ZERO)

    def _ensure_draft(self) -> None:
        if self.status != InvoiceStatus.draft:
            raise InvalidStateError(
                "Cannot modify an invoice that is not a draft.", code="INVOICE_NOT_DRAFT"
            )

    def _recalculate_totals(self) -> None:
        sub_total = sum((item.total for item in self.items), ZERO)
        self.sub_total = to_money(sub_total)
        self.tax = to_money(self.sub_total * to_decimal(self.tax_rate))
        self.total = to_money(self.sub_total + self.tax)
