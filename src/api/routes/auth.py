from typing import Optional

from fastapi import APIRouter, Depends, status
from pydantic import BaseModel, EmailStr, Field

from src.api.error import raise_for_error
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.users import (
    LoginResponse,
    LoginUseCase,
    RegisterUserCommand,
    RegisterUserUseCase,
    UserResponse,
)
from src.depends import get_unit_of_work

router = APIRouter(prefix="/auth", tags=["Authentication"])


class RegisterRequest(BaseModel):
    """
    Register HTTP request payload

    Validates incoming HTTP request before converting to RegisterUserCommand.
    """

    email: EmailStr = Field(..., description="User email address")
    password: str = Field(..., min_length=8, max_length=72, description="User password (min 8 chars)")
    full_name: Optional[str] = Field(default=None, max_length=200)


class LoginRequest(BaseModel):
    email: EmailStr
    password: str


@router.post("/register", status_code=status.HTTP_201_CREATED, response_model=UserResponse)
async def register(request: RegisterRequest, uow: UnitOfWork = Depends(get_unit_of_work)):
    """
    Register a user account.

    Raises:
        - 409 Conflict: EMAIL_ALREADY_REGISTERED
        - 422 Unprocessable Entity: invalid email or password too short
    """
    command = RegisterUserCommand(
        email=request.email, password=request.password, full_name=request.full_name
    )
    result = await RegisterUserUseCase(uow).execute(command)

    if result.is_err():
        raise_for_error(result.error)

    return result.value


@router.post("/login", status_code=status.HTTP_200_OK, response_model=LoginResponse)
async def login(request: LoginRequest, uow: UnitOfWork = Depends(get_unit_of_work)):
    """
    Exchange credentials for a bearer token.

    Raises:
        - 401 Unauthorized: INVALID_CREDENTIALS
    """
    result = await LoginUseCase(uow).execute(request.email, request.password)

    if result.is_err():
        raise_for_error(result.error)

    return result.value
