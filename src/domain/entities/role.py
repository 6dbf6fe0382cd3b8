"""
Role Entity

Tenant-independent bundle of permissions.
"""

from datetime import datetime
from typing import FrozenSet, List, Optional
from uuid import UUID, uuid4

from sqlmodel import Column, DateTime, Field, Relationship, SQLModel

from src.domain.base import is_blank, utc_now
from src.domain.errors import ValidationError

from .permission import Permission, RolePermission


class Role(SQLModel, table=True):
    """
    Role entity - a named set of permissions shared by all businesses.

    Business Rules:
    - Name is unique ("Owner", "Admin", ...)
    - A permission appears at most once per role
    - Removing a permission does not affect checks already completed
    """

    __tablename__ = "roles"

    id: UUID = Field(default_factory=uuid4, primary_key=True)
    name: str = Field(unique=True, index=True, max_length=100)
    description: Optional[str] = Field(default=None, max_length=255)

    # Timestamps
    created_at: datetime = Field(default_factory=utc_now, sa_column=Column(DateTime))

    # Relationships
    permissions: List[Permission] = Relationship(
        link_model=RolePermission, sa_relationship_kwargs={"lazy": "selectin"}
    )

    @classmethod
    def create(cls, name: str, description: Optional[str] = None) -> "Role":
        if is_blank(name):
            raise ValidationError("Role name cannot be empty.", code="ROLE_NAME_REQUIRED")
        return cls(name=name, description=description, permissions=[])

    def add_permission(self, permission: Permission) -> None:
        if not any(p.id == permission.id for p in self.permissions):
            self.permissions.append(permission)

    def remove_permission(self, permission: Permission) -> None:
        for existing in self.permissions:
            if existing.id == permission.id:
                self.permissions.remove(existing)
                return

    @property
    def permission_names(self) -> FrozenSet[str]:
        return frozenset(p.name for p in self.permissions)

    def has_permission(self, name: str) -> bool:
        return name in self.permission_names
