"""
Expire Invitations Use Case

Periodic sweep moving every overdue pending invitation to expired.
"""

import logging
from typing import Optional

from libs.result import Result, Return
from src.app.services.clock import Clock, SystemClock
from src.app.services.unit_of_work import UnitOfWork

from .dtos import ExpireInvitationsResponse

logger = logging.getLogger(__name__)


class ExpireInvitationsUseCase:
    def __init__(self, uow: UnitOfWork, clock: Optional[Clock] = None):
        self.uow = uow
        self.clock = clock or SystemClock()

    async def execute(self) -> Result[ExpireInvitationsResponse]:
        async with self.uow:
            now = self.clock.now()
            invitations = await self.uow.invitations.get_pending_expired(now)

            for invitation in invitations:
                invitation.expire()
                await self.uow.invitations.update(invitation)

            await self.uow.commit()
            if invitations:
                logger.info("Expired %d pending invitation(s)", len(invitations))

            return Return.ok(ExpireInvitationsResponse(expired_count=len(invitations)))
