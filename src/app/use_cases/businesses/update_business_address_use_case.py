from typing import Optional
from uuid import UUID

from libs.result import Error, Result, Return
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.guards import authorize_business
from src.domain.errors import DomainError
from src.domain.permissions import PermissionName

from .dtos import BusinessResponse


class UpdateBusinessAddressUseCase:
    """
    Use case for updating the postal address of a business.

    Moving to another country must not collide with a non-deleted business
    of the same name there.
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(
        self,
        user_id: UUID,
        business_id: UUID,
        country: str,
        address: Optional[str] = None,
        city: Optional[str] = None,
        state: Optional[str] = None,
        zip_code: Optional[str] = None,
    ) -> Result[BusinessResponse]:
        async with self.uow:
            authorized = await authorize_business(
                self.uow, user_id, business_id, PermissionName.business_manage
            )
            if authorized.is_err():
                return authorized
            business = authorized.value

            country_changed = country.strip() != business.country
            if country_changed and await self.uow.businesses.exists_active_with_name(
                business.name, country, exclude_id=business.id
            ):
                return Return.err(
                    Error(
                        "BUSINESS_NAME_TAKEN",
                        f"A business named '{business.name}' already exists in {country}",
                    )
                )

            try:
                business.update_address(address, city, state, zip_code, country)
            except DomainError as exc:
                return Return.err(exc.to_error())

            await self.uow.businesses.update(business)
            await self.uow.commit()

            return Return.ok(BusinessResponse.from_entity(business))
