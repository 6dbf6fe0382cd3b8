"""
Delete Business Use Case

Soft-deletes a business: it disappears from normal queries while its
clients, invoices and team are kept.
"""

import logging
from typing import Optional
from uuid import UUID

from libs.result import Result, Return
from src.app.services.clock import Clock, SystemClock
from src.app.services.notification_dispatcher import (
    NotificationDispatcher,
    dispatch_after_commit,
)
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.guards import authorize_business
from src.domain.facts import BusinessDeleted
from src.domain.permissions import PermissionName

from .dtos import BusinessResponse

logger = logging.getLogger(__name__)


class DeleteBusinessUseCase:
    """
    Use case for deleting a business.

    Business Rules:
    - Requires business:delete
    - Always soft: deactivates, flags deleted and stamps deleted_at
    - Rows are never removed; RestoreBusinessUseCase undoes it
    """

    def __init__(
        self,
        uow: UnitOfWork,
        dispatcher: Optional[NotificationDispatcher] = None,
        clock: Optional[Clock] = None,
    ):
        self.uow = uow
        self.dispatcher = dispatcher
        self.clock = clock or SystemClock()

    async def execute(self, user_id: UUID, business_id: UUID) -> Result[BusinessResponse]:
        async with self.uow:
            authorized = await authorize_business(
                self.uow, user_id, business_id, PermissionName.business_delete
            )
            if authorized.is_err():
                return authorized
            business = authorized.value

            business.delete(self.clock.now())
            await self.uow.businesses.update(business)
            await self.uow.commit()
            logger.info("Business %s soft-deleted by %s", business.id, user_id)

            await dispatch_after_commit(
                self.dispatcher,
                [BusinessDeleted(business_id=business.id, deleted_by=user_id)],
            )

            return Return.ok(BusinessResponse.from_entity(business))
