from abc import ABC, abstractmethod
from typing import List, Optional
from uuid import UUID

from src.domain.entities import Client


class IClientRepository(ABC):
    """Client repository interface - application layer"""

    @abstractmethod
    async def get_by_id(self, client_id: UUID) -> Optional[Client]:
        """Get client by ID"""
        pass

    @abstractmethod
    async def get_by_business_id(self, business_id: UUID) -> List[Client]:
        """Get all clients of a business"""
        pass

    @abstractmethod
    async def create(self, client: Client) -> Client:
        """Create a new client"""
        pass

    @abstractmethod
    async def update(self, client: Client) -> Client:
        """Update existing client"""
        pass
