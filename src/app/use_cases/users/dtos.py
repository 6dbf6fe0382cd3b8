"""
User Use Case DTOs (Data Transfer Objects)

Command and Response classes for registration and login.
"""

from typing import Optional

from pydantic import BaseModel, EmailStr, Field


# ============================================================================
# Command DTOs
# ============================================================================


class RegisterUserCommand(BaseModel):
    """Validated registration intent"""

    email: EmailStr
    password: str = Field(..., min_length=8, max_length=72)
    full_name: Optional[str] = Field(default=None, max_length=200)


# ============================================================================
# Response DTOs
# ============================================================================


class UserResponse(BaseModel):
    """Registered user"""

    id: str
    email: str
    full_name: Optional[str] = None


class LoginResponse(BaseModel):
    """Response for user login use case"""

    access_token: str
    token_type: str = "bearer"
    user: UserResponse
