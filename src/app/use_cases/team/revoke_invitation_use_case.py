from uuid import UUID

from libs.result import Error, Result, Return
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.guards import authorize_business
from src.domain.entities import InvitationStatus
from src.domain.permissions import PermissionName

from .dtos import InvitationResponse


class RevokeInvitationUseCase:
    """
    Withdraw a pending invitation by expiring it.

    Accepted and expired invitations are terminal and cannot be revoked.
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(
        self, user_id: UUID, business_id: UUID, invitation_id: UUID
    ) -> Result[InvitationResponse]:
        async with self.uow:
            authorized = await authorize_business(
                self.uow, user_id, business_id, PermissionName.team_invite
            )
            if authorized.is_err():
                return authorized

            invitation = await self.uow.invitations.get_by_id(invitation_id)
            if invitation is None or invitation.business_id != business_id:
                return Return.err(Error("INVITATION_NOT_FOUND", "Invitation not found"))

            if invitation.status != InvitationStatus.pending:
                return Return.err(
                    Error(
                        "INVITATION_NOT_PENDING",
                        f"Invitation is already {invitation.status.value}",
                    )
                )

            invitation.expire()
            await self.uow.invitations.update(invitation)

            role = await self.uow.roles.get_by_id(invitation.role_id)
            await self.uow.commit()

            return Return.ok(
                InvitationResponse(
                    id=str(invitation.id),
                    business_id=str(invitation.business_id),
                    email=invitation.email,
                    role_id=str(invitation.role_id),
                    role_name=role.name if role else "",
                    status=invitation.status.value,
                    expires_at=invitation.expires_at.isoformat(),
                )
            )
