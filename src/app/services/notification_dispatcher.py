import logging
from abc import ABC, abstractmethod
from typing import Optional, Sequence

from src.domain.facts import Fact

logger = logging.getLogger(__name__)


class NotificationDispatcher(ABC):
    """
    Receives facts after the unit of work committed.

    Delivery (email, queues, ...) is fire-and-forget: a failing dispatcher
    must never undo a committed command.
    """

    @abstractmethod
    async def publish(self, facts: Sequence[Fact]) -> None:
        pass


async def dispatch_after_commit(
    dispatcher: Optional[NotificationDispatcher], facts: Sequence[Fact]
) -> None:
    """Hand committed facts to the dispatcher; delivery failures are only logged"""
    if dispatcher is None or not facts:
        return
    try:
        await dispatcher.publish(list(facts))
    except Exception:
        logger.exception(
            "Notification dispatch failed for %s", ", ".join(f.name for f in facts)
        )
