from decimal import Decimal
from typing import Optional
from uuid import UUID, uuid4

from sqlalchemy import Numeric
from sqlmodel import Column, Field, SQLModel

from src.domain.base import is_blank, to_decimal, to_money
from src.domain.errors import ValidationError


class InvoiceItem(SQLModel, table=True):
    """
    Line item of an invoice.

    Business Rules:
    - total = quantity * unit_price, computed once at creation
    - Items are never edited; remove and re-add through the invoice instead
    """

    __tablename__ = "invoice_items"

    id: UUID = Field(default_factory=uuid4, primary_key=True)
    invoice_id: UUID = Field(foreign_key="invoices.id", nullable=False, index=True)

    description: str = Field(max_length=500)
    quantity: Decimal = Field(sa_column=Column(Numeric(12, 3), nullable=False))
    unit_price: Decimal = Field(sa_column=Column(Numeric(12, 2), nullable=False))
    unit: Optional[str] = Field(default=None, max_length=32)
    total: Decimal = Field(sa_column=Column(Numeric(14, 2), nullable=False))

    @classmethod
    def create(
        cls,
        invoice_id: UUID,
        description: str,
        quantity,
        unit_price,
        unit: Optional[str] = None,
    ) -> "InvoiceItem":
        if is_blank(description):
            raise ValidationError("Item description cannot be empty.", code="INVALID_LINE_ITEM")

        quantity = to_decimal(quantity)
        unit_price = to_money(unit_price)
        if quantity <= 0:
            raise ValidationError("Item quantity must be positive.", code="INVALID_LINE_ITEM")
        if unit_price < 0:
            raise ValidationError("Item unit price cannot be negative.", code="INVALID_LINE_ITEM")

        return cls(
            invoice_id=invoice_id,
            description=description.strip(),
            quantity=quantity,
            unit_price=unit_price,
            unit=unit,
            total=to_money(quantity * unit_price),
        )
