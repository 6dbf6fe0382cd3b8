from datetime import datetime
from decimal import Decimal
from typing import Optional
from uuid import UUID, uuid4

from sqlalchemy import ForeignKey, Numeric, Text
from sqlalchemy import Uuid as SaUuid
from sqlmodel import Column, DateTime, Field, SQLModel

from src.domain.base import utc_now

from .enums import PaymentMethod


class Transaction(SQLModel, table=True):
    """
    Payment recorded against an invoice.

    Business Rules:
    - Append-only: created by Invoice.apply_payment, never deleted
    - Only the note can change after creation
    - The invoice foreign key restricts deletes of the parent row
    """

    __tablename__ = "transactions"

    id: UUID = Field(default_factory=uuid4, primary_key=True)
    invoice_id: UUID = Field(
        sa_column=Column(
            SaUuid, ForeignKey("invoices.id", ondelete="RESTRICT"), nullable=False, index=True
        )
    )

    amount: Decimal = Field(sa_column=Column(Numeric(14, 2), nullable=False))
    transaction_date: datetime = Field(default_factory=utc_now, sa_column=Column(DateTime))
    payment_method: PaymentMethod
    external_transaction_id: Optional[str] = Field(default=None, max_length=255)
    notes: Optional[str] = Field(default=None, sa_column=Column(Text))

    @classmethod
    def record(
        cls,
        invoice_id: UUID,
        amount: Decimal,
        method: PaymentMethod,
        external_id: Optional[str] = None,
        now: Optional[datetime] = None,
    ) -> "Transaction":
        return cls(
            invoice_id=invoice_id,
            amount=amount,
            transaction_date=now or utc_now(),
            payment_method=method,
            external_transaction_id=external_id,
        )

    def add_note(self, note: str) -> None:
        self.notes = note
