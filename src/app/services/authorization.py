"""
Authorization

Resolves what a user may do inside one business by walking
TeamMember -> Role -> Permission.
"""

from typing import FrozenSet, Optional
from uuid import UUID

from pydantic import BaseModel, ConfigDict

from libs.result import Error
from src.app.services.unit_of_work import UnitOfWork
from src.domain.permissions import PermissionName


class AuthorizationContext(BaseModel):
    """Roles and permissions a user holds in a business"""

    model_config = ConfigDict(frozen=True)

    roles: FrozenSet[str] = frozenset()
    permissions: FrozenSet[str] = frozenset()

    def has_permission(self, permission: str) -> bool:
        return str(getattr(permission, "value", permission)) in self.permissions


class AuthorizationResolver:
    """
    Read-only lookup of a user's authorization inside a business.

    A user with no membership, or whose membership points at a missing role,
    gets an empty context; the resolver never fails for those cases.
    Must be used inside an entered unit of work.
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def resolve(self, user_id: UUID, business_id: UUID) -> AuthorizationContext:
        member = await self.uow.team_members.get_by_user_and_business(user_id, business_id)
        if member is None:
            return AuthorizationContext()

        role = await self.uow.roles.get_by_id(member.role_id)
        if role is None:
            return AuthorizationContext()

        return AuthorizationContext(
            roles=frozenset({role.name}),
            permissions=role.permission_names,
        )


async def require_permission(
    uow: UnitOfWork, user_id: UUID, business_id: UUID, permission: PermissionName
) -> Optional[Error]:
    """
    Check a permission before a command runs.

    Returns:
        None when allowed, otherwise an INSUFFICIENT_PERMISSION error
    """
    context = await AuthorizationResolver(uow).resolve(user_id, business_id)
    if context.has_permission(permission):
        return None
    return Error(
        "INSUFFICIENT_PERMISSION",
        f"Missing permission '{permission.value}' in this business",
    )
