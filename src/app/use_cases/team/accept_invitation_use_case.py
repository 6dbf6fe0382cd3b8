"""
Accept Invitation Use Case

Turns a pending invitation into a team membership.
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
from src.app.services.unit_of_work import UnitOfWork
from src.domain.entities import TeamMember
from src.domain.errors import DomainError
from src.domain.facts import InvitationAccepted, TeamMemberAdded

from .dtos import AcceptInvitationResponse

logger = logging.getLogger(__name__)


class AcceptInvitationUseCase:
    """
    Use case for accepting an invitation.

    Business Rules:
    - Token must resolve to an invitation that is pending and not expired
      at the time of acceptance
    - The invited email must belong to a registered user ("register first")
    - When the caller is known it must be that user
    - Invitation acceptance and the new TeamMember commit together
    - An expired token is rejected but not marked expired here; the expiry
      sweep does that
    """

    def __init__(
        self,
        uow: UnitOfWork,
        dispatcher: Optional[NotificationDispatcher] = None,
        clock: Optional[Clock] = None,
    ):
        self.uow = uow
        self.dispatcher = dispatcher
        self.clock = clock or SystemClock()

    async def execute(
        self, token: str, user_id: Optional[UUID] = None
    ) -> Result[AcceptInvitationResponse]:
        """
        Execute accept invitation use case.

        Args:
            token: Invitation token
            user_id: Authenticated caller, if any

        Returns:
            Result with AcceptInvitationResponse DTO, or Error
        """
        async with self.uow:
            now = self.clock.now()

            # 1. Find invitation by token and check it can still be used
            invitation = await self.uow.invitations.get_by_token(token)
            if invitation is None:
                return Return.err(Error("INVITATION_NOT_FOUND", "Invitation not found"))

            try:
                invitation.ensure_acceptable(now)
            except DomainError as exc:
                return Return.err(exc.to_error())

            # 2. Business must still exist
            business = await self.uow.businesses.get_by_id(invitation.business_id)
            if business is None:
                return Return.err(Error("BUSINESS_NOT_FOUND", "Business not found"))

            # 3. The invited email must be a registered user
            user = await self.uow.users.get_by_email(invitation.email)
            if user is None:
                return Return.err(
                    Error(
                        "USER_NOT_REGISTERED",
                        "No account exists for the invited email; register first",
                    )
                )
            if user_id is not None and user.id != user_id:
                return Return.err(
                    Error(
                        "INVITATION_EMAIL_MISMATCH",
                        "This invitation was sent to a different email address",
                    )
                )

            # 4. One membership per (user, business)
            existing = await self.uow.team_members.get_by_user_and_business(
                user.id, business.id
            )
            if existing is not None:
                return Return.err(
                    Error("ALREADY_MEMBER", "User is already a member of this business")
                )

            role = await self.uow.roles.get_by_id(invitation.role_id)
            if role is None:
                return Return.err(Error("ROLE_NOT_FOUND", "Invited role no longer exists"))

            # 5. Accept and add the member in the same unit of work
            invitation.accept(now)
            await self.uow.invitations.update(invitation)

            member = await self.uow.team_members.create(
                TeamMember.create(user.id, business.id, role.id)
            )

            await self.uow.commit()
            logger.info("Invitation %s accepted by %s", invitation.id, user.id)

            await dispatch_after_commit(
                self.dispatcher,
                [
                    InvitationAccepted(
                        invitation_id=invitation.id,
                        business_id=business.id,
                        user_id=user.id,
                    ),
                    TeamMemberAdded(
                        team_member_id=member.id,
                        business_id=business.id,
                        user_id=user.id,
                        role_id=role.id,
                    ),
                ],
            )

            return Return.ok(
                AcceptInvitationResponse(
                    team_member_id=str(member.id),
                    business_id=str(business.id),
                    business_name=business.name,
                    role_id=str(role.id),
                    role_name=role.name,
                )
            )
