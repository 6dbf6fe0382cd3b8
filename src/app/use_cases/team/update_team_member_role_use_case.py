"""
Update Team Member Role Use Case

Reassigns the single role a member holds in a business.
"""

from uuid import UUID

from libs.result import Error, Result, Return
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.guards import authorize_business
from src.domain.permissions import PermissionName

from .dtos import TeamMemberResponse


class UpdateTeamMemberRoleUseCase:
    """
    Use case for changing a member's role.

    Business Rules:
    - Requires team:manage
    - The business owner's membership keeps the Owner role
    - Target role must exist
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(
        self,
        user_id: UUID,
        business_id: UUID,
        team_member_id: UUID,
        role_name: str,
    ) -> Result[TeamMemberResponse]:
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
                    Error("CANNOT_CHANGE_OWNER_ROLE", "The business owner's role cannot change")
                )

            role = await self.uow.roles.get_by_name(role_name)
            if role is None:
                return Return.err(Error("ROLE_NOT_FOUND", f"Role '{role_name}' not found"))

            member.update_role(role.id)
            await self.uow.team_members.update(member)

            user = await self.uow.users.get_by_id(member.user_id)
            await self.uow.commit()

            return Return.ok(
                TeamMemberResponse(
                    id=str(member.id),
                    user_id=str(member.user_id),
                    email=user.email if user else "",
                    full_name=user.full_name if user else None,
                    role_id=str(role.id),
                    role_name=role.name,
                    is_owner=False,
                    joined_at=member.created_at.isoformat(),
                )
            )
