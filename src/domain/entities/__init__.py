"""
Domain Entities

Each entity lives in its own module; importing this package registers every
table on the shared SQLModel metadata.
"""

# Export all enums
from .enums import InvitationStatus, InvoiceStatus, PaymentMethod

# Export all entities
from .user import User
from .permission import Permission, RolePermission
from .role import Role
from .business import Business
from .team_member import TeamMember
from .invitation import Invitation
from .client import Client
from .invoice_item import InvoiceItem
from .transaction import Transaction
from .invoice import Invoice

__all__ = [
    # Enums
    "InvitationStatus",
    "InvoiceStatus",
    "PaymentMethod",
    # Entities
    "User",
    "Permission",
    "RolePermission",
    "Role",
    "Business",
    "TeamMember",
    "Invitation",
    "Client",
    "InvoiceItem",
    "Transaction",
    "Invoice",
]
