import bcrypt

from libs.result import Error, Result, Return
from src.app.services.unit_of_work import UnitOfWork
from src.domain.entities import User
from src.domain.errors import DomainError

from .dtos import RegisterUserCommand, UserResponse


class RegisterUserUseCase:
    """
    Register a user account.

    Business Logic:
    1. Email must not be registered yet (case-insensitive)
    2. Hash password with bcrypt cost factor 12
    3. Create User and commit
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, command: RegisterUserCommand) -> Result[UserResponse]:
        async with self.uow:
            existing_user = await self.uow.users.get_by_email(command.email)
            if existing_user:
                return Return.err(
                    Error("EMAIL_ALREADY_REGISTERED", "Email already registered")
                )

            password_hash = bcrypt.hashpw(command.password.encode("utf-8"), bcrypt.gensalt(12))

            try:
                user = User.register(
                    command.email, password_hash.decode("utf-8"), full_name=command.full_name
                )
            except DomainError as exc:
                return Return.err(exc.to_error())

            user = await self.uow.users.create(user)
            await self.uow.commit()

            return Return.ok(
                UserResponse(id=str(user.id), email=user.email, full_name=user.full_name)
            )
