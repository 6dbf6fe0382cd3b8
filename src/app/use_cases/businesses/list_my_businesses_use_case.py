from uuid import UUID

from libs.result import Result, Return
from src.app.services.unit_of_work import UnitOfWork

from .dtos import BusinessListResponse, BusinessResponse


class ListMyBusinessesUseCase:
    """List the non-deleted businesses the caller is a team member of"""

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, user_id: UUID) -> Result[BusinessListResponse]:
        async with self.uow:
            businesses = await self.uow.businesses.get_by_member_user_id(user_id)
            return Return.ok(
                BusinessListResponse(
                    businesses=[BusinessResponse.from_entity(b) for b in businesses]
                )
            )
