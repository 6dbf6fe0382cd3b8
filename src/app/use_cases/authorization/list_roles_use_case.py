from libs.result import Result, Return
from src.app.services.unit_of_work import UnitOfWork

from .dtos import RoleListResponse, RoleResponse


class ListRolesUseCase:
    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self) -> Result[RoleListResponse]:
        async with self.uow:
            roles = await self.uow.roles.get_all()
            return Return.ok(RoleListResponse(roles=[RoleResponse.from_entity(r) for r in roles]))
