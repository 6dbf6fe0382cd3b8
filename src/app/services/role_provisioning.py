import logging
from typing import Dict, List

from src.app.services.unit_of_work import UnitOfWork
from src.domain.entities import Permission, Role
from src.domain.permissions import PERMISSION_CATALOG, ROLE_TEMPLATES, RoleName, RoleTemplate

logger = logging.getLogger(__name__)


class RoleProvisioner:
    """
    Seeds the permission catalog and the default roles.

    Lookups go by name first, so running it repeatedly never creates
    duplicates. Must be used inside an entered unit of work; committing is
    the caller's job.
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def ensure_permission_catalog(self) -> Dict[str, Permission]:
        existing = {p.name: p for p in await self.uow.permissions.get_all()}

        for definition in PERMISSION_CATALOG:
            name = definition.name.value
            if name not in existing:
                permission = Permission.create(name, definition.description)
                existing[name] = await self.uow.permissions.create(permission)
                logger.info("Seeded permission %s", name)

        return existing

    async def get_or_create_role(self, template: RoleTemplate) -> Role:
        role = await self.uow.roles.get_by_name(template.name.value)
        if role is not None:
            return role

        catalog = await self.ensure_permission_catalog()
        role = Role.create(template.name.value, template.description)
        for name in sorted(template.permissions):
            role.add_permission(catalog[name])

        logger.info("Provisioned role %s", role.name)
        return await self.uow.roles.create(role)

    async def get_or_create_owner_role(self) -> Role:
        return await self.get_or_create_role(ROLE_TEMPLATES[RoleName.owner])

    async def ensure_default_roles(self) -> List[Role]:
        """Create missing default roles and top up missing template permissions"""
        catalog = await self.ensure_permission_catalog()

        roles = []
        for template in ROLE_TEMPLATES.values():
            role = await self.get_or_create_role(template)
            missing = template.permissions - role.permission_names
            if missing:
                for name in sorted(missing):
                    role.add_permission(catalog[name])
                role = await self.uow.roles.update(role)
            roles.append(role)

        return roles
