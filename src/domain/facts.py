"""
Notification facts.

Use cases collect these while executing and hand them to the notification
dispatcher once the unit of work has committed. Entities never hold them.
"""

from datetime import datetime
from decimal import Decimal
from typing import ClassVar, Optional
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field

from src.domain.base import utc_now


class Fact(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: ClassVar[str] = "fact"

    occurred_at: datetime = Field(default_factory=utc_now)


class BusinessCreated(Fact):
    name: ClassVar[str] = "business_created"

    business_id: UUID
    owner_id: UUID
    business_name: str


class BusinessDeleted(Fact):
    name: ClassVar[str] = "business_deleted"

    business_id: UUID
    deleted_by: UUID


class BusinessRestored(Fact):
    name: ClassVar[str] = "business_restored"

    business_id: UUID
    restored_by: UUID


class InvitationCreated(Fact):
    name: ClassVar[str] = "invitation_created"

    invitation_id: UUID
    business_id: UUID
    business_name: str
    email: str
    role_name: str
    token: str
    expires_at: datetime


class InvitationAccepted(Fact):
    name: ClassVar[str] = "invitation_accepted"

    invitation_id: UUID
    business_id: UUID
    user_id: UUID


class TeamMemberAdded(Fact):
    name: ClassVar[str] = "team_member_added"

    team_member_id: UUID
    business_id: UUID
    user_id: UUID
    role_id: UUID


class InvoiceSent(Fact):
    name: ClassVar[str] = "invoice_sent"

    invoice_id: UUID
    business_id: UUID
    client_id: UUID
    invoice_number: str
    total: Decimal
    currency: str


class PaymentApplied(Fact):
    name: ClassVar[str] = "payment_applied"

    invoice_id: UUID
    transaction_id: UUID
    amount: Decimal
    method: str
    external_id: Optional[str] = None


class InvoicePaid(Fact):
    name: ClassVar[str] = "invoice_paid"

    invoice_id: UUID
    business_id: UUID
    amount_paid: Decimal
