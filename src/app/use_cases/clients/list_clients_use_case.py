from uuid import UUID

from libs.result import Result, Return
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.guards import authorize_business
from src.domain.permissions import PermissionName

from .dtos import ClientListResponse, ClientResponse


class ListClientsUseCase:
    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, user_id: UUID, business_id: UUID) -> Result[ClientListResponse]:
        async with self.uow:
            authorized = await authorize_business(
                self.uow, user_id, business_id, PermissionName.clients_view
            )
            if authorized.is_err():
                return authorized

            clients = await self.uow.clients.get_by_business_id(business_id)
            return Return.ok(
                ClientListResponse(clients=[ClientResponse.from_entity(c) for c in clients])
            )
