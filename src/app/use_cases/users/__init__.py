"""
User Use Cases

Registration and login.
"""

from .dtos import LoginResponse, RegisterUserCommand, UserResponse
from .login_use_case import LoginUseCase
from .register_user_use_case import RegisterUserUseCase

__all__ = [
    "RegisterUserUseCase",
    "LoginUseCase",
    "RegisterUserCommand",
    "UserResponse",
    "LoginResponse",
]
