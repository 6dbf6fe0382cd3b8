from uuid import UUID

from libs.result import Result, Return
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.guards import authorize_business
from src.domain.permissions import PermissionName

from .dtos import BusinessResponse


class GetBusinessUseCase:
    """Load a business profile visible to the caller"""

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, user_id: UUID, business_id: UUID) -> Result[BusinessResponse]:
        async with self.uow:
            authorized = await authorize_business(
                self.uow, user_id, business_id, PermissionName.business_view
            )
            if authorized.is_err():
                return authorized

            return Return.ok(BusinessResponse.from_entity(authorized.value))
