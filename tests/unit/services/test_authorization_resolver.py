from unittest.mock import AsyncMock, MagicMock
from uuid import uuid4

import pytest

from src.app.services.authorization import (
    AuthorizationContext,
    AuthorizationResolver,
    require_permission,
)
from src.domain.entities import Permission, Role, TeamMember
from src.domain.permissions import PERMISSION_CATALOG, PermissionName


def make_role(name, permission_names):
    role = Role.create(name)
    for permission_name in permission_names:
        role.add_permission(Permission.create(permission_name, ""))
    return role


@pytest.fixture
def uow():
    uow = MagicMock()
    uow.team_members = MagicMock()
    uow.team_members.get_by_user_and_business = AsyncMock(return_value=None)
    uow.roles = MagicMock()
    uow.roles.get_by_id = AsyncMock(return_value=None)
    return uow


@pytest.mark.asyncio
async def test_owner_gets_full_catalog(uow):
    # Arrange
    user_id, business_id = uuid4(), uuid4()
    owner_role = make_role("Owner", [d.name.value for d in PERMISSION_CATALOG])
    uow.team_members.get_by_user_and_business.return_value = TeamMember.create(
        user_id, business_id, owner_role.id
    )
    uow.roles.get_by_id.return_value = owner_role

    # Act
    context = await AuthorizationResolver(uow).resolve(user_id, business_id)

    # Assert
    assert context.roles == frozenset({"Owner"})
    assert context.permissions == frozenset(d.name.value for d in PERMISSION_CATALOG)
    uow.team_members.get_by_user_and_business.assert_called_once_with(user_id, business_id)
    uow.roles.get_by_id.assert_called_once_with(owner_role.id)


@pytest.mark.asyncio
async def test_non_member_gets_empty_context(uow):
    context = await AuthorizationResolver(uow).resolve(uuid4(), uuid4())

    assert context.roles == frozenset()
    assert context.permissions == frozenset()
    uow.roles.get_by_id.assert_not_called()


@pytest.mark.asyncio
async def test_member_with_missing_role_gets_empty_context(uow):
    uow.team_members.get_by_user_and_business.return_value = TeamMember.create(
        uuid4(), uuid4(), uuid4()
    )

    context = await AuthorizationResolver(uow).resolve(uuid4(), uuid4())

    assert context == AuthorizationContext()


@pytest.mark.asyncio
async def test_require_permission_allows_granted_permission(uow):
    role = make_role("Accountant", ["invoices:view", "reports:view"])
    uow.team_members.get_by_user_and_business.return_value = TeamMember.create(
        uuid4(), uuid4(), role.id
    )
    uow.roles.get_by_id.return_value = role

    error = await require_permission(uow, uuid4(), uuid4(), PermissionName.invoices_view)

    assert error is None


@pytest.mark.asyncio
async def test_require_permission_denies_missing_permission(uow):
    role = make_role("Accountant", ["invoices:view", "reports:view"])
    uow.team_members.get_by_user_and_business.return_value = TeamMember.create(
        uuid4(), uuid4(), role.id
    )
    uow.roles.get_by_id.return_value = role

    error = await require_permission(uow, uuid4(), uuid4(), PermissionName.invoices_void)

    assert error is not None
    assert error.code == "INSUFFICIENT_PERMISSION"
    assert "invoices:void" in error.message


def test_context_accepts_enum_or_string():
    context = AuthorizationContext(permissions=frozenset({"team:invite"}))

    assert context.has_permission(PermissionName.team_invite)
    assert context.has_permission("team:invite")
    assert not context.has_permission("team:manage")
