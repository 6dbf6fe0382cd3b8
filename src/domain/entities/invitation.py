"""
Invitation Entity

Time-boxed, single-use offer of a role within a business.
"""

import secrets
from datetime import datetime, timedelta
from typing import Iterable, Optional
from uuid import UUID, uuid4

from sqlmodel import Column, DateTime, Field, Index, SQLModel

from src.domain.base import is_blank, utc_now
from src.domain.errors import ConflictError, InvalidStateError, ValidationError

from .enums import InvitationStatus

TOKEN_BYTES = 32


class Invitation(SQLModel, table=True):
    """
    Invitation entity - pending offer to join a business.

    Business Rules:
    - Cannot invite an email already held by a team member (case-insensitive)
    - Token is single-use, cryptographically secure (32 bytes, URL-safe)
    - pending -> accepted and pending -> expired are the only transitions
    - Expiry is checked against the clock at use time, not at issuance
    """

    __tablename__ = "invitations"

    id: UUID = Field(default_factory=uuid4, primary_key=True)

    business_id: UUID = Field(foreign_key="businesses.id", nullable=False, index=True)
    email: str = Field(max_length=256, nullable=False, index=True)
    role_id: UUID = Field(foreign_key="roles.id", nullable=False)

    token: str = Field(unique=True, index=True, max_length=128)

    status: InvitationStatus = Field(default=InvitationStatus.pending)

    # Timestamps
    expires_at: datetime = Field(sa_column=Column(DateTime, nullable=False))
    created_at: datetime = Field(default_factory=utc_now, sa_column=Column(DateTime))

    __table_args__ = (
        Index("idx_invitation_expires_at", "expires_at"),
        Index("idx_invitation_business_email", "business_id", "email"),
        Index("idx_invitation_status", "status"),
    )

    @classmethod
    def create(
        cls,
        business_id: UUID,
        email: str,
        role_id: UUID,
        validity_hours: int,
        existing_member_emails: Iterable[str] = (),
        token: Optional[str] = None,
        now: Optional[datetime] = None,
    ) -> "Invitation":
        if is_blank(email):
            raise ValidationError("Email cannot be empty.", code="EMAIL_REQUIRED")
        if validity_hours <= 0:
            raise ValidationError(
                "Invitation validity must be a positive number of hours.",
                code="INVALID_VALIDITY_WINDOW",
            )

        email = email.strip()
        wanted = email.casefold()
        if any((existing or "").strip().casefold() == wanted for existing in existing_member_emails):
            raise ConflictError(
                "A team member with this email already exists.", code="ALREADY_MEMBER"
            )

        now = now or utc_now()
        return cls(
            business_id=business_id,
            email=email,
            role_id=role_id,
            token=token or secrets.token_urlsafe(TOKEN_BYTES),
            status=InvitationStatus.pending,
            expires_at=now + timedelta(hours=validity_hours),
            created_at=now,
        )

    def is_expired(self, now: Optional[datetime] = None) -> bool:
        return (now or utc_now()) > self.expires_at

    def ensure_acceptable(self, now: Optional[datetime] = None) -> None:
        if self.status != InvitationStatus.pending:
            raise InvalidStateError(
                "Only a pending invitation can be accepted.", code="INVITATION_NOT_PENDING"
            )
        if self.is_expired(now):
            raise InvalidStateError("This invitation has expired.", code="INVITATION_EXPIRED")

    def accept(self, now: Optional[datetime] = None) -> None:
        self.ensure_acceptable(now)
        self.status = InvitationStatus.accepted

    def expire(self) -> None:
        if self.status == InvitationStatus.pending:
            self.status = InvitationStatus.expired
