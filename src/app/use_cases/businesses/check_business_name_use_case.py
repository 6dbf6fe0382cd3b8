from libs.result import Error, Result, Return
from src.app.services.unit_of_work import UnitOfWork
from src.domain.base import is_blank

from .dtos import BusinessNameAvailabilityResponse


class CheckBusinessNameUseCase:
    """Tell whether a (name, country) pair is still free"""

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, name: str, country: str) -> Result[BusinessNameAvailabilityResponse]:
        if is_blank(name):
            return Return.err(Error("BUSINESS_NAME_REQUIRED", "Business name cannot be empty."))
        if is_blank(country):
            return Return.err(Error("COUNTRY_REQUIRED", "Country cannot be empty."))

        async with self.uow:
            taken = await self.uow.businesses.exists_active_with_name(name, country)
            return Return.ok(
                BusinessNameAvailabilityResponse(name=name, country=country, available=not taken)
            )
