"""
Invite Team Member Use Case

Issues a time-boxed, single-use invitation to join a business.
"""

import logging
from typing import Optional
from uuid import UUID

from libs.result import Error, Result, Return
from src.app.services.clock import Clock, SystemClock
from src.app.services.notification_dispatcher import (
    NotificationDispatcher,
    dispatch_after_commit,
)
from src.app.services.token_issuer import TokenIssuer
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.guards import authorize_business
from src.domain.entities import Invitation
from src.domain.errors import DomainError
from src.domain.facts import InvitationCreated
from src.domain.permissions import PermissionName

from .dtos import InvitationResponse

logger = logging.getLogger(__name__)

DEFAULT_VALIDITY_HOURS = 24


class InviteTeamMemberUseCase:
    """
    Use case for inviting someone to a business.

    Business Rules:
    - Requires team:invite
    - Role must exist
    - Cannot invite an email already held by a team member (case-insensitive)
    - Only one pending invitation per email; a stale pending one is expired
      and replaced
    - Token comes from the token issuer, expiry = now + validity window
    - The invitation fact (carrying the token) is published after commit
    """

    def __init__(
        self,
        uow: UnitOfWork,
        token_issuer: Optional[TokenIssuer] = None,
        dispatcher: Optional[NotificationDispatcher] = None,
        clock: Optional[Clock] = None,
        validity_hours: int = DEFAULT_VALIDITY_HOURS,
    ):
        self.uow = uow
        self.token_issuer = token_issuer
        self.dispatcher = dispatcher
        self.clock = clock or SystemClock()
        self.validity_hours = validity_hours

    async def execute(
        self,
        inviter_user_id: UUID,
        business_id: UUID,
        email: str,
        role_name: str,
    ) -> Result[InvitationResponse]:
        """
        Execute invite team member use case.

        Args:
            inviter_user_id: User sending the invitation
            business_id: Business the invitee will join
            email: Invitee email address
            role_name: Name of the role the invitee will get

        Returns:
            Result with InvitationResponse DTO, or Error
        """
        async with self.uow:
            now = self.clock.now()

            # 1. Business exists and inviter may invite
            authorized = await authorize_business(
                self.uow, inviter_user_id, business_id, PermissionName.team_invite
            )
            if authorized.is_err():
                return authorized
            business = authorized.value

            # 2. Role must exist
            role = await self.uow.roles.get_by_name(role_name)
            if role is None:
                return Return.err(Error("ROLE_NOT_FOUND", f"Role '{role_name}' not found"))

            # 3. One live invitation per email
            if email:
                pending = await self.uow.invitations.get_pending_by_business_and_email(
                    business.id, email
                )
                if pending is not None:
                    if not pending.is_expired(now):
                        return Return.err(
                            Error(
                                "INVITE_ALREADY_EXISTS",
                                "A pending invitation already exists for this email",
                            )
                        )
                    pending.expire()
                    await self.uow.invitations.update(pending)

            # 4. Build the invitation against the current members
            member_emails = await self.uow.team_members.get_member_emails(business.id)
            try:
                invitation = Invitation.create(
                    business.id,
                    email,
                    role.id,
                    self.validity_hours,
                    existing_member_emails=member_emails,
                    token=self.token_issuer.issue() if self.token_issuer else None,
                    now=now,
                )
            except DomainError as exc:
                return Return.err(exc.to_error())

            await self.uow.invitations.create(invitation)
            await self.uow.commit()
            logger.info("Invitation %s sent for business %s", invitation.id, business.id)

            await dispatch_after_commit(
                self.dispatcher,
                [
                    InvitationCreated(
                        invitation_id=invitation.id,
                        business_id=business.id,
                        business_name=business.name,
                        email=invitation.email,
                        role_name=role.name,
                        token=invitation.token,
                        expires_at=invitation.expires_at,
                    )
                ],
            )

            return Return.ok(
                InvitationResponse(
                    id=str(invitation.id),
                    business_id=str(business.id),
                    email=invitation.email,
                    role_id=str(role.id),
                    role_name=role.name,
                    status=invitation.status.value,
                    expires_at=invitation.expires_at.isoformat(),
                )
            )
