from abc import ABC, abstractmethod
from datetime import datetime

from src.domain.base import utc_now


class Clock(ABC):
    """Source of the current time for use cases"""

    @abstractmethod
    def now(self) -> datetime:
        pass


class SystemClock(Clock):
    """Wall-clock UTC time (naive, like the stored timestamps)"""

    def now(self) -> datetime:
        return utc_now()
