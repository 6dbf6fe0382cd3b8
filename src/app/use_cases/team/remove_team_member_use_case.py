import logging
from uuid import UUID

from libs.result import Error, Result, Return
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.guards import authorize_business
from src.domain.permissions import PermissionName

from .dtos import RemoveTeamMemberResponse

logger = logging.getLogger(__name__)


class RemoveTeamMemberUseCase:
    """
    Remove a member from a business.

    Requires team:manage. The owner's membership cannot be removed.
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(
        self, user_id: UUID, business_id: UUID, team_member_id: UUID
    ) -> Result[RemoveTeamMemberResponse]:
        async with self.uow:
            authorized = await authorize_business(
                self.uow, user_id, business_id, PermissionName.team_manage
            )
            if authorized.is_err():
                return authorized
            business = authorized.value

            member = await self.uow.team_members.get_by_id(team_member_id)
            if member is None or member.business_id != business.id:
                return Return.err(Error("TEAM_MEMBER_NOT_FOUND", "Team member not found"))

            if member.user_id == business.owner_id:
                return Return.err(
                    Error("CANNOT_REMOVE_OWNER", "The business owner cannot be removed")
                )

            await self.uow.team_members.delete(member)
            await self.uow.commit()
            logger.info("Team member %s removed from %s by %s", member.id, business.id, user_id)

            return Return.ok(RemoveTeamMemberResponse(status="removed"))
