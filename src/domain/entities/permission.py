"""
Permission Entity

Named capability from the permission catalog, plus the role/permission link.
"""

from uuid import UUID, uuid4

from sqlmodel import Field, SQLModel


class RolePermission(SQLModel, table=True):
    """
    Many-to-many link between roles and permissions.

    The composite primary key keeps a permission at most once per role.
    """

    __tablename__ = "role_permissions"

    role_id: UUID = Field(foreign_key="roles.id", primary_key=True)
    permission_id: UUID = Field(foreign_key="permissions.id", primary_key=True)


class Permission(SQLModel, table=True):
    """
    Permission entity - immutable catalog entry (e.g. "business:manage").

    Business Rules:
    - Name is unique
    - Never modified once referenced by a role
    """

    __tablename__ = "permissions"

    id: UUID = Field(default_factory=uuid4, primary_key=True)
    name: str = Field(unique=True, index=True, max_length=100)
    description: str = Field(default="", max_length=255)

    @classmethod
    def create(cls, name: str, description: str) -> "Permission":
        return cls(name=name, description=description)
