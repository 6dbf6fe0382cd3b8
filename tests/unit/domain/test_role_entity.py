import pytest

from src.domain.entities import Permission, Role
from src.domain.errors import ValidationError
from src.domain.permissions import ALL_PERMISSIONS, ROLE_TEMPLATES, PermissionName, RoleName


def test_add_permission_is_idempotent():
    role = Role.create("Manager")
    permission = Permission.create("invoices:send", "Send invoices")

    role.add_permission(permission)
    role.add_permission(permission)

    assert len(role.permissions) == 1
    assert role.has_permission("invoices:send")


def test_remove_permission():
    role = Role.create("Manager")
    send = Permission.create("invoices:send", "Send invoices")
    view = Permission.create("invoices:view", "View invoices")
    role.add_permission(send)
    role.add_permission(view)

    role.remove_permission(send)
    role.remove_permission(send)

    assert role.permission_names == frozenset({"invoices:view"})


def test_role_name_required():
    with pytest.raises(ValidationError) as exc_info:
        Role.create("")

    assert exc_info.value.code == "ROLE_NAME_REQUIRED"


def test_owner_template_has_every_permission():
    owner = ROLE_TEMPLATES[RoleName.owner]

    assert owner.permissions == ALL_PERMISSIONS
    assert len(ALL_PERMISSIONS) == len(PermissionName)


def test_templates_only_reference_catalog_permissions():
    for template in ROLE_TEMPLATES.values():
        assert template.permissions <= ALL_PERMISSIONS


def test_admin_cannot_delete_business():
    admin = ROLE_TEMPLATES[RoleName.admin]

    assert PermissionName.business_delete.value not in admin.permissions
    assert PermissionName.team_invite.value in admin.permissions


def test_accountant_is_read_only():
    accountant = ROLE_TEMPLATES[RoleName.accountant]

    assert all(p.endswith(":view") for p in accountant.permissions)
