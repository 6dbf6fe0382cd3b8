from typing import Iterable, List

from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession

from src.app.repositories.permission_repository import IPermissionRepository
from src.domain.entities import Permission


class PermissionRepository(IPermissionRepository):
    """Permission repository implementation using SQLModel"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def get_all(self) -> List[Permission]:
        """Get the whole permission catalog"""
        stmt = select(Permission).order_by(Permission.name)
        result = await self.session.execute(stmt)
        return list(result.scalars().all())

    async def get_by_names(self, names: Iterable[str]) -> List[Permission]:
        """Get permissions by name"""
        stmt = select(Permission).where(Permission.name.in_(list(names)))
        result = await self.session.execute(stmt)
        return list(result.scalars().all())

    async def create(self, permission: Permission) -> Permission:
        """Create a new permission"""
        self.session.add(permission)
        await self.session.flush()
        await self.session.refresh(permission)
        return permission
