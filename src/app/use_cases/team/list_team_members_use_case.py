from uuid import UUID

from libs.result import Result, Return
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.guards import authorize_business
from src.domain.permissions import PermissionName

from .dtos import TeamMemberListResponse, TeamMemberResponse


class ListTeamMembersUseCase:
    """List the team of a business with each member's role"""

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, user_id: UUID, business_id: UUID) -> Result[TeamMemberListResponse]:
        async with self.uow:
            authorized = await authorize_business(
                self.uow, user_id, business_id, PermissionName.team_view
            )
            if authorized.is_err():
                return authorized
            business = authorized.value

            details = await self.uow.team_members.get_by_business_id(business.id)
            members = [
                TeamMemberResponse(
                    id=str(d.member.id),
                    user_id=str(d.member.user_id),
                    email=d.email,
                    full_name=d.full_name,
                    role_id=str(d.member.role_id),
                    role_name=d.role_name,
                    is_owner=d.member.user_id == business.owner_id,
                    joined_at=d.member.created_at.isoformat(),
                )
                for d in details
            ]
            return Return.ok(TeamMemberListResponse(members=members))
