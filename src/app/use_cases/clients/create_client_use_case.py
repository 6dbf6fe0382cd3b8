from typing import Optional
from uuid import UUID

from libs.result import Result, Return
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.guards import authorize_business
from src.domain.entities import Client
from src.domain.errors import DomainError
from src.domain.permissions import PermissionName

from .dtos import ClientResponse


class CreateClientUseCase:
    """Add a client to a business (requires clients:manage)"""

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(
        self,
        user_id: UUID,
        business_id: UUID,
        name: str,
        email: Optional[str] = None,
        phone: Optional[str] = None,
        address: Optional[str] = None,
        country: Optional[str] = None,
        locale: Optional[str] = None,
    ) -> Result[ClientResponse]:
        async with self.uow:
            authorized = await authorize_business(
                self.uow, user_id, business_id, PermissionName.clients_manage
            )
            if authorized.is_err():
                return authorized

            try:
                client = Client.create(business_id, name, email=email, phone=phone)
            except DomainError as exc:
                return Return.err(exc.to_error())
            client.update_address(address, country, locale)

            await self.uow.clients.create(client)
            await self.uow.commit()

            return Return.ok(ClientResponse.from_entity(client))
