from typing import List, Optional
from uuid import UUID

from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession

from src.app.repositories.client_repository import IClientRepository
from src.domain.entities import Client


class ClientRepository(IClientRepository):
    """Client repository implementation using SQLModel"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def get_by_id(self, client_id: UUID) -> Optional[Client]:
        """Get client by ID"""
        stmt = select(Client).where(Client.id == client_id)
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none()

    async def get_by_business_id(self, business_id: UUID) -> List[Client]:
        """Get all clients of a business"""
        stmt = select(Client).where(Client.business_id == business_id).order_by(Client.name)
        result = await self.session.execute(stmt)
        return list(result.scalars().all())

    async def create(self, client: Client) -> Client:
        """Create a new client"""
        self.session.add(client)
        await self.session.flush()
        await self.session.refresh(client)
        return client

    async def update(self, client: Client) -> Client:
        """Update existing client"""
        self.session.add(client)
        await self.session.flush()
        await self.session.refresh(client)
        return client
