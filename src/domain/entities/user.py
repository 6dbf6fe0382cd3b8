"""
User Entity

A registered person who can be a team member of several businesses.
"""

from datetime import datetime
from typing import Optional
from uuid import UUID, uuid4

from sqlmodel import Column, DateTime, Field, SQLModel

from src.domain.base import is_blank, utc_now
from src.domain.errors import ValidationError


class User(SQLModel, table=True):
    """
    User entity - a registered account.

    Business Rules:
    - Email must be unique across all users (compared case-insensitively)
    - Password stored as bcrypt hash
    - Invitations resolve to an existing user; they never create one
    """

    __tablename__ = "users"

    id: UUID = Field(default_factory=uuid4, primary_key=True)
    email: str = Field(unique=True, index=True, max_length=256)
    full_name: Optional[str] = Field(default=None, max_length=200)
    password_hash: str = Field(max_length=60)  # Bcrypt output is 60 chars

    # Timestamps
    created_at: datetime = Field(default_factory=utc_now, sa_column=Column(DateTime))

    @classmethod
    def register(
        cls, email: str, password_hash: str, full_name: Optional[str] = None
    ) -> "User":
        if is_blank(email):
            raise ValidationError("Email cannot be empty.", code="EMAIL_REQUIRED")
        return cls(
            email=email.strip().lower(),
            password_hash=password_hash,
            full_name=full_name,
        )
