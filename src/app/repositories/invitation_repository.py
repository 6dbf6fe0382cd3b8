from abc import ABC, abstractmethod
from datetime import datetime
from typing import List, Optional
from uuid import UUID

from src.domain.entities import Invitation


class IInvitationRepository(ABC):
    """Invitation repository interface - application layer"""

    @abstractmethod
    async def get_by_id(self, invitation_id: UUID) -> Optional[Invitation]:
        """Get invitation by ID"""
        pass

    @abstractmethod
    async def get_by_token(self, token: str) -> Optional[Invitation]:
        """Get invitation by token"""
        pass

    @abstractmethod
    async def get_pending_by_business_and_email(
        self, business_id: UUID, email: str
    ) -> Optional[Invitation]:
        """Get pending invitation by business and email (case-insensitive)"""
        pass

    @abstractmethod
    async def get_by_business_id(self, business_id: UUID) -> List[Invitation]:
        """Get all invitations for a business"""
        pass

    @abstractmethod
    async def get_pending_expired(self, now: datetime) -> List[Invitation]:
        """Get pending invitations whose expiry is before now"""
        pass

    @abstractmethod
    async def create(self, invitation: Invitation) -> Invitation:
        """Create a new invitation"""
        pass

    @abstractmethod
    async def update(self, invitation: Invitation) -> Invitation:
        """Update existing invitation"""
        pass
