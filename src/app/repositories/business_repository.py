from abc import ABC, abstractmethod
from typing import List, Optional
from uuid import UUID

from src.domain.entities import Business


class IBusinessRepository(ABC):
    """
    Business repository interface - application layer

    Soft-deleted businesses are invisible to every query unless the caller
    passes ``include_deleted=True``. There is no hard delete.
    """

    @abstractmethod
    async def get_by_id(
        self, business_id: UUID, include_deleted: bool = False
    ) -> Optional[Business]:
        """Get business by ID"""
        pass

    @abstractmethod
    async def get_by_member_user_id(self, user_id: UUID) -> List[Business]:
        """Get all non-deleted businesses the user is a team member of"""
        pass

    @abstractmethod
    async def exists_active_with_name(
        self, name: str, country: str, exclude_id: Optional[UUID] = None
    ) -> bool:
        """Check whether a non-deleted business holds (name, country)"""
        pass

    @abstractmethod
    async def create(self, business: Business) -> Business:
        """Create a new business"""
        pass

    @abstractmethod
    async def update(self, business: Business) -> Business:
        """Update existing business"""
        pass
