"""
Activate / Deactivate Business Use Cases

Both toggles are idempotent. An inactive business keeps its data but
cannot create or change invoices.
"""

from uuid import UUID

from libs.result import Result, Return
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.guards import authorize_business
from src.domain.permissions import PermissionName

from .dtos import BusinessResponse


class ActivateBusinessUseCase:
    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, user_id: UUID, business_id: UUID) -> Result[BusinessResponse]:
        async with self.uow:
            authorized = await authorize_business(
                self.uow, user_id, business_id, PermissionName.business_manage
            )
            if authorized.is_err():
                return authorized
            business = authorized.value

            business.activate()
            await self.uow.businesses.update(business)
            await self.uow.commit()

            return Return.ok(BusinessResponse.from_entity(business))


class DeactivateBusinessUseCase:
    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, user_id: UUID, business_id: UUID) -> Result[BusinessResponse]:
        async with self.uow:
            authorized = await authorize_business(
                self.uow, user_id, business_id, PermissionName.business_manage
            )
            if authorized.is_err():
                return authorized
            business = authorized.value

            business.deactivate()
            await self.uow.businesses.update(business)
            await self.uow.commit()

            return Return.ok(BusinessResponse.from_entity(business))
