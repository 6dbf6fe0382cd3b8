"""
TeamMember Entity

Binds one user to one business with exactly one role.
"""

from datetime import datetime
from uuid import UUID, uuid4

from sqlmodel import Column, DateTime, Field, Index, SQLModel

from src.domain.base import utc_now


class TeamMember(SQLModel, table=True):
    """
    TeamMember entity - the unit authorization queries resolve against.

    Business Rules:
    - (user_id, business_id) must be unique: one role per user per business
    - Created by invitation acceptance or when a business is created (owner)
    - Role reassignable via update_role
    """

    __tablename__ = "team_members"

    id: UUID = Field(default_factory=uuid4, primary_key=True)

    user_id: UUID = Field(foreign_key="users.id", nullable=False, index=True)
    business_id: UUID = Field(foreign_key="businesses.id", nullable=False, index=True)
    role_id: UUID = Field(foreign_key="roles.id", nullable=False)

    # Timestamps
    created_at: datetime = Field(default_factory=utc_now, sa_column=Column(DateTime))

    __table_args__ = (
        Index("idx_team_member_user_business", "user_id", "business_id", unique=True),
    )

    @classmethod
    def create(cls, user_id: UUID, business_id: UUID, role_id: UUID) -> "TeamMember":
        return cls(user_id=user_id, business_id=business_id, role_id=role_id)

    def update_role(self, role_id: UUID) -> None:
        self.role_id = role_id
