"""
Invoicing Use Cases

Invoice lifecycle: draft, line items, sending, payments and voiding.
"""

from .add_invoice_item_use_case import AddInvoiceItemUseCase
from .apply_payment_use_case import ApplyPaymentUseCase
from .create_invoice_use_case import CreateInvoiceUseCase
from .dtos import (
    InvoiceItemResponse,
    InvoiceListResponse,
    InvoiceResponse,
    PaymentResponse,
    TransactionResponse,
)
from .get_invoice_use_case import GetInvoiceUseCase
from .list_invoices_use_case import ListInvoicesUseCase, ListOverdueInvoicesUseCase
from .remove_invoice_item_use_case import RemoveInvoiceItemUseCase
from .send_invoice_use_case import SendInvoiceUseCase
from .update_invoice_details_use_case import UpdateInvoiceDetailsUseCase
from .void_invoice_use_case import VoidInvoiceUseCase

__all__ = [
    "CreateInvoiceUseCase",
    "GetInvoiceUseCase",
    "ListInvoicesUseCase",
    "ListOverdueInvoicesUseCase",
    "UpdateInvoiceDetailsUseCase",
    "AddInvoiceItemUseCase",
    "RemoveInvoiceItemUseCase",
    "SendInvoiceUseCase",
    "ApplyPaymentUseCase",
    "VoidInvoiceUseCase",
    "InvoiceResponse",
    "InvoiceItemResponse",
    "TransactionResponse",
    "InvoiceListResponse",
    "PaymentResponse",
]
