"""
Create Business Use Case

Creates a tenant and makes its creator the owning team member.
"""

import logging
from decimal import Decimal
from typing import Optional
from uuid import UUID

from libs.result import Error, Result, Return
from src.app.services.notification_dispatcher import (
    NotificationDispatcher,
    dispatch_after_commit,
)
from src.app.services.role_provisioning import RoleProvisioner
from src.app.services.unit_of_work import UnitOfWork
from src.domain.entities import Business, TeamMember
from src.domain.errors import DomainError
from src.domain.facts import BusinessCreated

from .dtos import BusinessResponse

logger = logging.getLogger(__name__)


class CreateBusinessUseCase:
    """
    Use case for creating a business.

    Business Rules:
    - Name and country are required
    - (name, country) must be unique among non-deleted businesses
    - The owner gets a TeamMember row with the Owner role, which is
      provisioned with every permission the first time it is needed
    - Business, owner role and membership are committed together
    """

    def __init__(
        self,
        uow: UnitOfWork,
        dispatcher: Optional[NotificationDispatcher] = None,
        default_tax_rate: Optional[Decimal] = None,
    ):
        self.uow = uow
        self.dispatcher = dispatcher
        self.default_tax_rate = default_tax_rate

    async def execute(
        self,
        owner_id: UUID,
        name: str,
        country: str,
        tax_rate: Optional[Decimal] = None,
    ) -> Result[BusinessResponse]:
        """
        Execute create business use case.

        Args:
            owner_id: User creating (and owning) the business
            name: Business name
            country: Country the business operates in
            tax_rate: Optional tax rate override (defaults to configured rate)

        Returns:
            Result with BusinessResponse DTO, or Error
        """
        async with self.uow:
            # 1. Owner must be a registered user
            owner = await self.uow.users.get_by_id(owner_id)
            if owner is None:
                return Return.err(Error("USER_NOT_FOUND", "User not found"))

            # 2. Validate and build the aggregate
            try:
                business = Business.create(
                    name,
                    owner_id,
                    country,
                    tax_rate=tax_rate if tax_rate is not None else self.default_tax_rate,
                )
            except DomainError as exc:
                return Return.err(exc.to_error())

            # 3. Uniqueness among non-deleted businesses
            if await self.uow.businesses.exists_active_with_name(business.name, business.country):
                return Return.err(
                    Error(
                        "BUSINESS_NAME_TAKEN",
                        f"A business named '{business.name}' already exists in {business.country}",
                    )
                )

            await self.uow.businesses.create(business)

            # 4. Owner role (idempotent) and owner membership
            owner_role = await RoleProvisioner(self.uow).get_or_create_owner_role()
            await self.uow.team_members.create(
                TeamMember.create(owner_id, business.id, owner_role.id)
            )

            await self.uow.commit()
            logger.info("Business %s created by %s", business.id, owner_id)

            await dispatch_after_commit(
                self.dispatcher,
                [
                    BusinessCreated(
                        business_id=business.id,
                        owner_id=owner_id,
                        business_name=business.name,
                    )
                ],
            )

            return Return.ok(BusinessResponse.from_entity(business))
