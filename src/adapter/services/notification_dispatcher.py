import logging
from collections import deque
from typing import Sequence

from src.app.services.notification_dispatcher import NotificationDispatcher
from src.domain.facts import Fact

logger = logging.getLogger(__name__)

# Never written to the log
SENSITIVE_FIELDS = {"token"}


class LoggingNotificationDispatcher(NotificationDispatcher):
    """
    Dispatcher that records facts in the application log.

    Stands in for the email/queue delivery service. The most recent facts
    stay available in ``published`` for inspection.
    """

    def __init__(self, history_size: int = 100):
        self.published = deque(maxlen=history_size)

    async def publish(self, facts: Sequence[Fact]) -> None:
        for fact in facts:
            payload = fact.model_dump(mode="json", exclude=SENSITIVE_FIELDS)
            logger.info("Notification %s: %s", fact.name, payload)
            self.published.append(fact)
