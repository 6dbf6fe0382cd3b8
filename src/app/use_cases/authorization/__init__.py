"""
Authorization Use Cases

Role catalog and per-business authorization lookups.
"""

from .dtos import AuthorizationResponse, RoleListResponse, RoleResponse
from .list_roles_use_case import ListRolesUseCase
from .provision_roles_use_case import ProvisionRolesUseCase
from .resolve_authorization_use_case import ResolveAuthorizationUseCase

__all__ = [
    "ResolveAuthorizationUseCase",
    "ProvisionRolesUseCase",
    "ListRolesUseCase",
    "AuthorizationResponse",
    "RoleResponse",
    "RoleListResponse",
]
