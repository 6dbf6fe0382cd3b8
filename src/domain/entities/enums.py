"""
Domain Enums

All enumeration types used across domain entities.
"""

from enum import Enum


class InvitationStatus(str, Enum):
    """Invitation status"""

    pending = "pending"
    accepted = "accepted"
    expired = "expired"


class InvoiceStatus(str, Enum):
    """
    Invoice lifecycle status.

    ``overdue`` is never stored; it is derived from ``due_date`` when a sent
    invoice is read (see ``Invoice.effective_status``).
    """

    draft = "draft"
    sent = "sent"
    paid = "paid"
    overdue = "overdue"
    void = "void"


class PaymentMethod(str, Enum):
    """How a payment transaction was settled"""

    stripe = "stripe"
    bank_transfer = "bank_transfer"
    cash = "cash"
