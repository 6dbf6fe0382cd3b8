from unittest.mock import AsyncMock, MagicMock

import pytest

from src.app.services.role_provisioning import RoleProvisioner
from src.domain.entities import Permission, Role
from src.domain.permissions import ALL_PERMISSIONS, PERMISSION_CATALOG, ROLE_TEMPLATES, RoleName


@pytest.fixture
def uow():
    """Unit of work whose permission and role repositories keep rows in memory"""
    permissions = {}
    roles = {}

    async def create_permission(permission):
        permissions[permission.name] = permission
        return permission

    async def get_all_permissions():
        return list(permissions.values())

    async def create_role(role):
        roles[role.name] = role
        return role

    async def get_role_by_name(name):
        return roles.get(name)

    uow = MagicMock()
    uow.permissions = MagicMock()
    uow.permissions.get_all = AsyncMock(side_effect=get_all_permissions)
    uow.permissions.create = AsyncMock(side_effect=create_permission)
    uow.roles = MagicMock()
    uow.roles.get_by_name = AsyncMock(side_effect=get_role_by_name)
    uow.roles.create = AsyncMock(side_effect=create_role)
    uow.roles.update = AsyncMock(side_effect=lambda role: role)
    uow.stored_permissions = permissions
    uow.stored_roles = roles
    return uow


@pytest.mark.asyncio
async def test_seeds_permission_catalog_once(uow):
    provisioner = RoleProvisioner(uow)

    first = await provisioner.ensure_permission_catalog()
    second = await provisioner.ensure_permission_catalog()

    assert set(first) == ALL_PERMISSIONS
    assert first == second
    assert uow.permissions.create.call_count == len(PERMISSION_CATALOG)


@pytest.mark.asyncio
async def test_owner_role_created_with_every_permission(uow):
    role = await RoleProvisioner(uow).get_or_create_owner_role()

    assert role.name == "Owner"
    assert role.permission_names == ALL_PERMISSIONS
    uow.roles.create.assert_called_once()


@pytest.mark.asyncio
async def test_existing_owner_role_is_reused(uow):
    existing = Role.create("Owner")
    uow.stored_roles["Owner"] = existing

    role = await RoleProvisioner(uow).get_or_create_owner_role()

    assert role is existing
    uow.roles.create.assert_not_called()
    uow.permissions.create.assert_not_called()


@pytest.mark.asyncio
async def test_default_roles_are_created_idempotently(uow):
    provisioner = RoleProvisioner(uow)

    roles = await provisioner.ensure_default_roles()
    again = await provisioner.ensure_default_roles()

    assert {r.name for r in roles} == {t.value for t in RoleName}
    assert [r.id for r in roles] == [r.id for r in again]
    assert uow.roles.create.call_count == len(ROLE_TEMPLATES)
    for role in roles:
        assert role.permission_names == ROLE_TEMPLATES[RoleName(role.name)].permissions


@pytest.mark.asyncio
async def test_default_roles_top_up_missing_permissions(uow):
    stale = Role.create("Editor")
    stale.add_permission(
        await uow.permissions.create(Permission.create("invoices:view", "View invoices"))
    )
    uow.stored_roles["Editor"] = stale

    await RoleProvisioner(uow).ensure_default_roles()

    assert stale.permission_names == ROLE_TEMPLATES[RoleName.editor].permissions
    uow.roles.update.assert_any_call(stale)
