from typing import List, Optional

from pydantic import BaseModel

from src.domain.entities import Role


class AuthorizationResponse(BaseModel):
    """Roles and permissions a user holds in one business"""

    user_id: str
    business_id: str
    roles: List[str]
    permissions: List[str]


class RoleResponse(BaseModel):
    id: str
    name: str
    description: Optional[str] = None
    permissions: List[str]

    @classmethod
    def from_entity(cls, role: Role) -> "RoleResponse":
        return cls(
            id=str(role.id),
            name=role.name,
            description=role.description,
            permissions=sorted(role.permission_names),
        )


class RoleListResponse(BaseModel):
    roles: List[RoleResponse]
