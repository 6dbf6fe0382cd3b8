"""
Permission catalog and default role templates.

The catalog is immutable: permissions are seeded from it and never edited.
Role templates bundle catalog entries; ``Owner`` always receives every
permission.
"""

from enum import Enum
from typing import Dict, FrozenSet, NamedTuple, Tuple


class PermissionName(str, Enum):
    business_view = "business:view"
    business_manage = "business:manage"
    business_delete = "business:delete"
    team_view = "team:view"
    team_invite = "team:invite"
    team_manage = "team:manage"
    clients_view = "clients:view"
    clients_manage = "clients:manage"
    invoices_view = "invoices:view"
    invoices_create = "invoices:create"
    invoices_edit = "invoices:edit"
    invoices_send = "invoices:send"
    invoices_void = "invoices:void"
    payments_record = "payments:record"
    reports_view = "reports:view"


class PermissionDefinition(NamedTuple):
    name: PermissionName
    description: str


PERMISSION_CATALOG: Tuple[PermissionDefinition, ...] = (
    PermissionDefinition(PermissionName.business_view, "View business profile and settings"),
    PermissionDefinition(PermissionName.business_manage, "Edit business details, address, branding and status"),
    PermissionDefinition(PermissionName.business_delete, "Delete and restore the business"),
    PermissionDefinition(PermissionName.team_view, "View team members"),
    PermissionDefinition(PermissionName.team_invite, "Invite new team members and revoke invitations"),
    PermissionDefinition(PermissionName.team_manage, "Change team member roles and remove members"),
    PermissionDefinition(PermissionName.clients_view, "View clients"),
    PermissionDefinition(PermissionName.clients_manage, "Create and edit clients"),
    PermissionDefinition(PermissionName.invoices_view, "View invoices"),
    PermissionDefinition(PermissionName.invoices_create, "Create draft invoices"),
    PermissionDefinition(PermissionName.invoices_edit, "Edit draft invoices and their line items"),
    PermissionDefinition(PermissionName.invoices_send, "Send invoices to clients"),
    PermissionDefinition(PermissionName.invoices_void, "Void unpaid invoices"),
    PermissionDefinition(PermissionName.payments_record, "Record payments against invoices"),
    PermissionDefinition(PermissionName.reports_view, "View financial reports"),
)

ALL_PERMISSIONS: FrozenSet[str] = frozenset(d.name.value for d in PERMISSION_CATALOG)


class RoleName(str, Enum):
    owner = "Owner"
    admin = "Admin"
    manager = "Manager"
    editor = "Editor"
    accountant = "Accountant"


class RoleTemplate(NamedTuple):
    name: RoleName
    description: str
    permissions: FrozenSet[str]


def _names(*permissions: PermissionName) -> FrozenSet[str]:
    return frozenset(p.value for p in permissions)


ROLE_TEMPLATES: Dict[RoleName, RoleTemplate] = {
    RoleName.owner: RoleTemplate(
        RoleName.owner,
        "Full administrative access to the business.",
        ALL_PERMISSIONS,
    ),
    RoleName.admin: RoleTemplate(
        RoleName.admin,
        "Can manage users, settings, clients, and invoices.",
        ALL_PERMISSIONS - _names(PermissionName.business_delete),
    ),
    RoleName.manager: RoleTemplate(
        RoleName.manager,
        "Can manage clients and invoices but not settings or other users.",
        _names(
            PermissionName.business_view,
            PermissionName.team_view,
            PermissionName.clients_view,
            PermissionName.clients_manage,
            PermissionName.invoices_view,
            PermissionName.invoices_create,
            PermissionName.invoices_edit,
            PermissionName.invoices_send,
            PermissionName.invoices_void,
            PermissionName.payments_record,
            PermissionName.reports_view,
        ),
    ),
    RoleName.editor: RoleTemplate(
        RoleName.editor,
        "Can create and edit invoices but not send them or manage clients.",
        _names(
            PermissionName.business_view,
            PermissionName.clients_view,
            PermissionName.invoices_view,
            PermissionName.invoices_create,
            PermissionName.invoices_edit,
        ),
    ),
    RoleName.accountant: RoleTemplate(
        RoleName.accountant,
        "Has read-only access to invoices and financial reports.",
        _names(
            PermissionName.business_view,
            PermissionName.clients_view,
            PermissionName.invoices_view,
            PermissionName.reports_view,
        ),
    ),
}
