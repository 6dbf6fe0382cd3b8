from typing import List, Optional
from uuid import UUID

from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession

from src.app.repositories.business_repository import IBusinessRepository
from src.domain.entities import Business, TeamMember


class BusinessRepository(IBusinessRepository):
    """Business repository implementation using SQLModel"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def get_by_id(
        self, business_id: UUID, include_deleted: bool = False
    ) -> Optional[Business]:
        """Get business by ID"""
        stmt = select(Business).where(Business.id == business_id)
        if not include_deleted:
            stmt = stmt.where(Business.is_deleted == False)  # noqa: E712
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none()

    async def get_by_member_user_id(self, user_id: UUID) -> List[Business]:
        """Get all non-deleted businesses the user is a team member of"""
        stmt = (
            select(Business)
            .join(TeamMember, TeamMember.business_id == Business.id)
            .where(TeamMember.user_id == user_id, Business.is_deleted == False)  # noqa: E712
            .order_by(Business.name)
        )
        result = await self.session.execute(stmt)
        return list(result.scalars().all())

    async def exists_active_with_name(
        self, name: str, country: str, exclude_id: Optional[UUID] = None
    ) -> bool:
        """Check whether a non-deleted business holds (name, country)"""
        stmt = select(Business.id).where(
            Business.name == name.strip(),
            Business.country == country.strip(),
            Business.is_deleted == False,  # noqa: E712
        )
        if exclude_id is not None:
            stmt = stmt.where(Business.id != exclude_id)
        result = await self.session.execute(stmt.limit(1))
        return result.first() is not None

    async def create(self, business: Business) -> Business:
        """Create a new business"""
        self.session.add(business)
        await self.session.flush()
        await self.session.refresh(business)
        return business

    async def update(self, business: Business) -> Business:
        """Update existing business"""
        self.session.add(business)
        await self.session.flush()
        await self.session.refresh(business)
        return business
