from abc import ABC, abstractmethod


class TokenIssuer(ABC):
    """Issues unguessable, URL-safe invitation tokens"""

    @abstractmethod
    def issue(self) -> str:
        pass
