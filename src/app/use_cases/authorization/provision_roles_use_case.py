import logging

from libs.result import Result, Return
from src.app.services.role_provisioning import RoleProvisioner
from src.app.services.unit_of_work import UnitOfWork

from .dtos import RoleListResponse, RoleResponse

logger = logging.getLogger(__name__)


class ProvisionRolesUseCase:
    """
    Seed the permission catalog and the default roles.

    Safe to run repeatedly: existing roles are kept and only receive
    template permissions they are missing.
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self) -> Result[RoleListResponse]:
        async with self.uow:
            roles = await RoleProvisioner(self.uow).ensure_default_roles()
            await self.uow.commit()
            logger.info("Provisioned %d default role(s)", len(roles))

            return Return.ok(RoleListResponse(roles=[RoleResponse.from_entity(r) for r in roles]))
