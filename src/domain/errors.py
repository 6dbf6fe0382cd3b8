"""
Domain error taxonomy.

Entities raise these synchronously, before mutating any state. Use cases turn
them into ``libs.result.Error`` values; the API layer maps codes to statuses.
"""

from typing import Optional

from libs.result import Error


class DomainError(Exception):
    """Base class for domain rule violations"""

    code = "DOMAIN_ERROR"

    def __init__(self, message: str, code: Optional[str] = None):
        super().__init__(message)
        self.message = message
        if code is not None:
            self.code = code

    def to_error(self) -> Error:
        return Error(self.code, self.message)


class ValidationError(DomainError):
    """Blank required fields, malformed payloads, nonsensical values"""

    code = "VALIDATION_ERROR"


class InvalidStateError(DomainError):
    """Transition forbidden by the current lifecycle state"""

    code = "INVALID_STATE"


class ConflictError(DomainError):
    """Uniqueness rule violated"""

    code = "CONFLICT"


class NotFoundError(DomainError):
    code = "NOT_FOUND"
