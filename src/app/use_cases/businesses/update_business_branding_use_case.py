from typing import Optional
from uuid import UUID

from libs.result import Result, Return
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.guards import authorize_business
from src.domain.errors import DomainError
from src.domain.permissions import PermissionName

from .dtos import BusinessResponse


class UpdateBusinessBrandingUseCase:
    """Replace logo and theme settings; the theme must be a JSON document"""

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(
        self,
        user_id: UUID,
        business_id: UUID,
        theme_settings_json: str,
        logo_url: Optional[str] = None,
    ) -> Result[BusinessResponse]:
        async with self.uow:
            authorized = await authorize_business(
                self.uow, user_id, business_id, PermissionName.business_manage
            )
            if authorized.is_err():
                return authorized
            business = authorized.value

            try:
                business.update_branding(logo_url, theme_settings_json)
            except DomainError as exc:
                return Return.err(exc.to_error())

            await self.uow.businesses.update(business)
            await self.uow.commit()

            return Return.ok(BusinessResponse.from_entity(business))
