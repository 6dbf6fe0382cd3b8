"""
Team Management Use Cases

Invitations and team membership of a business.
"""

from .accept_invitation_use_case import AcceptInvitationUseCase
from .dtos import (
    AcceptInvitationResponse,
    ExpireInvitationsResponse,
    InvitationResponse,
    RemoveTeamMemberResponse,
    TeamMemberListResponse,
    TeamMemberResponse,
)
from .expire_invitations_use_case import ExpireInvitationsUseCase
from .invite_team_member_use_case import InviteTeamMemberUseCase
from .list_team_members_use_case import ListTeamMembersUseCase
from .remove_team_member_use_case import RemoveTeamMemberUseCase
from .revoke_invitation_use_case import RevokeInvitationUseCase
from .update_team_member_role_use_case import UpdateTeamMemberRoleUseCase

__all__ = [
    "InviteTeamMemberUseCase",
    "AcceptInvitationUseCase",
    "RevokeInvitationUseCase",
    "ExpireInvitationsUseCase",
    "ListTeamMembersUseCase",
    "UpdateTeamMemberRoleUseCase",
    "RemoveTeamMemberUseCase",
    "InvitationResponse",
    "AcceptInvitationResponse",
    "ExpireInvitationsResponse",
    "TeamMemberResponse",
    "TeamMemberListResponse",
    "RemoveTeamMemberResponse",
]
