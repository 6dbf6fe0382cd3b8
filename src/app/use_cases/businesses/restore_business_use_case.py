"""
Restore Business Use Case

Undoes a soft delete when the (name, country) pair is still free.
"""

import logging
from typing import Optional
from uuid import UUID

from libs.result import Result, Return
from src.app.services.notification_dispatcher import (
    NotificationDispatcher,
    dispatch_after_commit,
)
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.guards import authorize_business
from src.domain.errors import DomainError
from src.domain.facts import BusinessRestored
from src.domain.permissions import PermissionName

from .dtos import BusinessResponse

logger = logging.getLogger(__name__)


class RestoreBusinessUseCase:
    """
    Use case for restoring a soft-deleted business.

    Business Rules:
    - Requires business:delete in the deleted business
    - Fails with BUSINESS_NOT_DELETED when the business is not deleted
    - Fails with BUSINESS_NAME_TAKEN when another non-deleted business now
      holds the same (name, country)
    - On success the business is active again and deleted_at is cleared
    """

    def __init__(self, uow: UnitOfWork, dispatcher: Optional[NotificationDispatcher] = None):
        self.uow = uow
        self.dispatcher = dispatcher

    async def execute(self, user_id: UUID, business_id: UUID) -> Result[BusinessResponse]:
        async with self.uow:
            # 1. Deleted businesses are only visible when asked for explicitly
            authorized = await authorize_business(
                self.uow,
                user_id,
                business_id,
                PermissionName.business_delete,
                include_deleted=True,
            )
            if authorized.is_err():
                return authorized
            business = authorized.value

            # 2. Check the name is still free, then let the entity decide
            conflict = await self.uow.businesses.exists_active_with_name(
                business.name, business.country, exclude_id=business.id
            )
            try:
                business.restore(conflicting_business_exists=conflict)
            except DomainError as exc:
                return Return.err(exc.to_error())

            await self.uow.businesses.update(business)
            await self.uow.commit()
            logger.info("Business %s restored by %s", business.id, user_id)

            await dispatch_after_commit(
                self.dispatcher,
                [BusinessRestored(business_id=business.id, restored_by=user_id)],
            )

            return Return.ok(BusinessResponse.from_entity(business))
