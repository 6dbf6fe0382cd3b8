"""
Invoice Use Case DTOs (Data Transfer Objects)

Money values are Decimals (serialized as strings); dates are ISO strings.
"""

from datetime import datetime
from decimal import Decimal
from typing import List, Optional

from pydantic import BaseModel

from src.domain.entities import Invoice, InvoiceItem, Transaction


# ============================================================================
# Response DTOs
# ============================================================================


class InvoiceItemResponse(BaseModel):
    id: str
    description: str
    quantity: Decimal
    unit_price: Decimal
    unit: Optional[str] = None
    total: Decimal

    @classmethod
    def from_entity(cls, item: InvoiceItem) -> "InvoiceItemResponse":
        return cls(
            id=str(item.id),
            description=item.description,
            quantity=item.quantity,
            unit_price=item.unit_price,
            unit=item.unit,
            total=item.total,
        )


class TransactionResponse(BaseModel):
    id: str
    amount: Decimal
    date: str
    method: str
    external_id: Optional[str] = None
    notes: Optional[str] = None

    @classmethod
    def from_entity(cls, transaction: Transaction) -> "TransactionResponse":
        return cls(
            id=str(transaction.id),
            amount=transaction.amount,
            date=transaction.transaction_date.isoformat(),
            method=transaction.payment_method.value,
            external_id=transaction.external_transaction_id,
            notes=transaction.notes,
        )


class InvoiceResponse(BaseModel):
    """Invoice with its line items and payments"""

    id: str
    business_id: str
    client_id: str
    invoice_number: str
    status: str
    currency: str
    issue_date: str
    due_date: str
    tax_rate: Decimal
    sub_total: Decimal
    tax: Decimal
    total: Decimal
    amount_paid: Decimal
    balance_due: Decimal
    notes: Optional[str] = None
    terms: Optional[str] = None
    items: List[InvoiceItemResponse]
    transactions: List[TransactionResponse]

    @classmethod
    def from_entity(cls, invoice: Invoice, now: Optional[datetime] = None) -> "InvoiceResponse":
        return cls(
            id=str(invoice.id),
            business_id=str(invoice.business_id),
            client_id=str(invoice.client_id),
            invoice_number=invoice.invoice_number,
            status=invoice.effective_status(now).value,
            currency=invoice.currency,
            issue_date=invoice.issue_date.isoformat(),
            due_date=invoice.due_date.isoformat(),
            tax_rate=invoice.tax_rate,
            sub_total=invoice.sub_total,
            tax=invoice.tax,
            total=invoice.total,
            amount_paid=invoice.amount_paid,
            balance_due=invoice.balance_due,
            notes=invoice.notes,
            terms=invoice.terms,
            items=[InvoiceItemResponse.from_entity(i) for i in invoice.items],
            transactions=[TransactionResponse.from_entity(t) for t in invoice.transactions],
        )


class InvoiceListResponse(BaseModel):
    invoices: List[InvoiceResponse]


class PaymentResponse(BaseModel):
    """Payment just recorded and the invoice after it"""

    transaction: TransactionResponse
    invoice: InvoiceResponse
