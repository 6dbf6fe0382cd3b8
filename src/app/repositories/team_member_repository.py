from abc import ABC, abstractmethod
from typing import List, NamedTuple, Optional
from uuid import UUID

from src.domain.entities import TeamMember


class TeamMemberDetails(NamedTuple):
    """Team member joined with its user and role"""

    member: TeamMember
    email: str
    full_name: Optional[str]
    role_name: str


class ITeamMemberRepository(ABC):
    """TeamMember repository interface - application layer"""

    @abstractmethod
    async def get_by_id(self, team_member_id: UUID) -> Optional[TeamMember]:
        """Get team member by ID"""
        pass

    @abstractmethod
    async def get_by_user_and_business(
        self, user_id: UUID, business_id: UUID
    ) -> Optional[TeamMember]:
        """Get the membership of a user in a business"""
        pass

    @abstractmethod
    async def get_by_business_id(self, business_id: UUID) -> List[TeamMemberDetails]:
        """Get all team members of a business with email and role name"""
        pass

    @abstractmethod
    async def get_member_emails(self, business_id: UUID) -> List[str]:
        """Get the emails of all team members of a business"""
        pass

    @abstractmethod
    async def create(self, team_member: TeamMember) -> TeamMember:
        """Create a new team member"""
        pass

    @abstractmethod
    async def update(self, team_member: TeamMember) -> TeamMember:
        """Update existing team member"""
        pass

    @abstractmethod
    async def delete(self, team_member: TeamMember) -> None:
        """Remove a team member"""
        pass
