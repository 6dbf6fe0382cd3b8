from typing import NoReturn

from fastapi import status

from libs.result import Error


class ClientError(Exception):
    def __init__(self, base_error: Error, status_code: int = status.HTTP_400_BAD_REQUEST):
        self.base_error = base_error
        self.status_code = status_code
        super().__init__(base_error.message)


class ServerError(Exception):
    def __init__(self, base_error: Error):
        self.base_error = base_error
        super().__init__(base_error.message)


BAD_REQUEST_CODES = {
    "VALIDATION_ERROR",
    "BUSINESS_NAME_REQUIRED",
    "COUNTRY_REQUIRED",
    "INVALID_THEME_SETTINGS",
    "INVALID_TAX_RATE",
    "EMAIL_REQUIRED",
    "INVALID_VALIDITY_WINDOW",
    "INVOICE_NUMBER_REQUIRED",
    "CURRENCY_REQUIRED",
    "INVALID_ISSUE_DATE",
    "INVALID_DUE_DATE",
    "INVALID_LINE_ITEM",
    "INVALID_PAYMENT_AMOUNT",
    "CLIENT_NAME_REQUIRED",
    "ROLE_NAME_REQUIRED",
}

FORBIDDEN_CODES = {
    "INSUFFICIENT_PERMISSION",
    "INVITATION_EMAIL_MISMATCH",
    "CANNOT_REMOVE_OWNER",
    "CANNOT_CHANGE_OWNER_ROLE",
}

CONFLICT_CODES = {
    "CONFLICT",
    "INVALID_STATE",
    "BUSINESS_NAME_TAKEN",
    "BUSINESS_NOT_DELETED",
    "BUSINESS_INACTIVE",
    "ALREADY_MEMBER",
    "INVITE_ALREADY_EXISTS",
    "INVITATION_NOT_PENDING",
    "EMAIL_ALREADY_REGISTERED",
    "INVOICE_NUMBER_TAKEN",
    "INVOICE_NOT_DRAFT",
    "INVOICE_CLOSED",
    "INVOICE_HAS_NO_ITEMS",
    "INVOICE_ALREADY_PAID",
}


def status_for(error: Error) -> int:
    """HTTP status for a use case error code; 500 when the code is unknown"""
    if error.code in BAD_REQUEST_CODES:
        return status.HTTP_400_BAD_REQUEST
    if error.code == "INVALID_CREDENTIALS":
        return status.HTTP_401_UNAUTHORIZED
    if error.code in FORBIDDEN_CODES:
        return status.HTTP_403_FORBIDDEN
    if error.code.endswith("_NOT_FOUND") or error.code == "USER_NOT_REGISTERED":
        return status.HTTP_404_NOT_FOUND
    if error.code in CONFLICT_CODES:
        return status.HTTP_409_CONFLICT
    if error.code == "INVITATION_EXPIRED":
        return status.HTTP_410_GONE
    return status.HTTP_500_INTERNAL_SERVER_ERROR


def raise_for_error(error: Error) -> NoReturn:
    status_code = status_for(error)
    if status_code == status.HTTP_500_INTERNAL_SERVER_ERROR:
        raise ServerError(error)
    raise ClientError(error, status_code=status_code)
