from typing import List, Optional
from uuid import UUID

from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession

from src.app.repositories.team_member_repository import (
    ITeamMemberRepository,
    TeamMemberDetails,
)
from src.domain.entities import Role, TeamMember, User


class TeamMemberRepository(ITeamMemberRepository):
    """TeamMember repository implementation using SQLModel"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def get_by_id(self, team_member_id: UUID) -> Optional[TeamMember]:
        """Get team member by ID"""
        stmt = select(TeamMember).where(TeamMember.id == team_member_id)
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none()

    async def get_by_user_and_business(
        self, user_id: UUID, business_id: UUID
    ) -> Optional[TeamMember]:
        """Get the membership of a user in a business"""
        stmt = select(TeamMember).where(
            TeamMember.user_id == user_id, TeamMember.business_id == business_id
        )
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none()

    async def get_by_business_id(self, business_id: UUID) -> List[TeamMemberDetails]:
        """Get all team members of a business with email and role name"""
        stmt = (
            select(TeamMember, User.email, User.full_name, Role.name)
            .join(User, User.id == TeamMember.user_id)
            .join(Role, Role.id == TeamMember.role_id)
            .where(TeamMember.business_id == business_id)
            .order_by(TeamMember.created_at)
        )
        result = await self.session.execute(stmt)
        return [TeamMemberDetails(*row) for row in result.all()]

    async def get_member_emails(self, business_id: UUID) -> List[str]:
        """Get the emails of all team members of a business"""
        stmt = (
            select(User.email)
            .join(TeamMember, TeamMember.user_id == User.id)
            .where(TeamMember.business_id == business_id)
        )
        result = await self.session.execute(stmt)
        return list(result.scalars().all())

    async def create(self, team_member: TeamMember) -> TeamMember:
        """Create a new team member"""
        self.session.add(team_member)
        await self.session.flush()
        await self.session.refresh(team_member)
        return team_member

    async def update(self, team_member: TeamMember) -> TeamMember:
        """Update existing team member"""
        self.session.add(team_member)
        await self.session.flush()
        await self.session.refresh(team_member)
        return team_member

    async def delete(self, team_member: TeamMember) -> None:
        """Remove a team member"""
        await self.session.delete(team_member)
        await self.session.flush()
