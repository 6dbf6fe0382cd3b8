"""
Login Use Case

Authenticates a user and issues a bearer token.
"""

import bcrypt

from libs.result import Error, Result, Return
from src.api.utils.jwt import generate_jwt
from src.app.services.unit_of_work import UnitOfWork

from .dtos import LoginResponse, UserResponse

# Checked when the email is unknown so both failure paths cost one bcrypt round
DUMMY_HASH = bcrypt.hashpw(b"dummy_password", bcrypt.gensalt(12))


class LoginUseCase:
    """
    Use case for user login and JWT issuance.

    Business Rules:
    - Constant-time password comparison
    - Unknown email and wrong password give the same error
    - The token identifies the user only; business access is resolved per
      request through team membership
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, email: str, password: str) -> Result[LoginResponse]:
        async with self.uow:
            user = await self.uow.users.get_by_email(email)

            if user is None:
                bcrypt.checkpw(password.encode(), DUMMY_HASH)
                return Return.err(Error("INVALID_CREDENTIALS", "Invalid email or password"))

            if not bcrypt.checkpw(password.encode(), user.password_hash.encode()):
                return Return.err(Error("INVALID_CREDENTIALS", "Invalid email or password"))

            return Return.ok(
                LoginResponse(
                    access_token=generate_jwt(user.id),
                    user=UserResponse(id=str(user.id), email=user.email, full_name=user.full_name),
                )
            )
