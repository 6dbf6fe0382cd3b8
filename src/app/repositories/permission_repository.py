from abc import ABC, abstractmethod
from typing import Iterable, List

from src.domain.entities import Permission


class IPermissionRepository(ABC):
    """Permission repository interface - application layer"""

    @abstractmethod
    async def get_all(self) -> List[Permission]:
        """Get the whole permission catalog"""
        pass

    @abstractmethod
    async def get_by_names(self, names: Iterable[str]) -> List[Permission]:
        """Get permissions by name"""
        pass

    @abstractmethod
    async def create(self, permission: Permission) -> Permission:
        """Create a new permission"""
        pass
