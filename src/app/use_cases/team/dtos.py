"""
Team Use Case DTOs (Data Transfer Objects)

Response classes for team membership and invitations.
"""

from typing import List, Optional

from pydantic import BaseModel


# ============================================================================
# Response DTOs
# ============================================================================


class InvitationResponse(BaseModel):
    """Invitation as seen by the business that issued it"""

    id: str
    business_id: str
    email: str
    role_id: str
    role_name: str
    status: str
    expires_at: str


class AcceptInvitationResponse(BaseModel):
    """Membership created by accepting an invitation"""

    team_member_id: str
    business_id: str
    business_name: str
    role_id: str
    role_name: str


class ExpireInvitationsResponse(BaseModel):
    """Outcome of an expiry sweep"""

    expired_count: int


class TeamMemberResponse(BaseModel):
    """Team member with user and role details"""

    id: str
    user_id: str
    email: str
    full_name: Optional[str] = None
    role_id: str
    role_name: str
    is_owner: bool
    joined_at: str


class TeamMemberListResponse(BaseModel):
    """All team members of a business"""

    members: List[TeamMemberResponse]


class RemoveTeamMemberResponse(BaseModel):
    """Response for remove team member use case"""

    status: str
