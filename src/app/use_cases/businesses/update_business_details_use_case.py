"""
Update Business Details Use Case

Changes name and contact information of a business.
"""

from typing import Optional
from uuid import UUID

from libs.result import Error, Result, Return
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.guards import authorize_business
from src.domain.errors import DomainError
from src.domain.permissions import PermissionName

from .dtos import BusinessResponse


class UpdateBusinessDetailsUseCase:
    """
    Use case for updating business details.

    Business Rules:
    - Requires business:manage
    - Name is required and must stay unique within the country
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(
        self,
        user_id: UUID,
        business_id: UUID,
        name: str,
        email: Optional[str] = None,
        phone: Optional[str] = None,
        website: Optional[str] = None,
    ) -> Result[BusinessResponse]:
        async with self.uow:
            authorized = await authorize_business(
                self.uow, user_id, business_id, PermissionName.business_manage
            )
            if authorized.is_err():
                return authorized
            business = authorized.value

            name_changed = name.strip() != business.name
            if name_changed and await self.uow.businesses.exists_active_with_name(
                name, business.country, exclude_id=business.id
            ):
                return Return.err(
                    Error(
                        "BUSINESS_NAME_TAKEN",
                        f"A business named '{name}' already exists in {business.country}",
                    )
                )

            try:
                business.update_details(name, email=email, phone=phone, website=website)
            except DomainError as exc:
                return Return.err(exc.to_error())

            await self.uow.businesses.update(business)
            await self.uow.commit()

            return Return.ok(BusinessResponse.from_entity(business))
