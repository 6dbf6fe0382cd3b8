from uuid import UUID

from fastapi import APIRouter, Depends, status
from pydantic import BaseModel, EmailStr, Field

from config import ApplicationConfig
from src.api.error import raise_for_error
from src.app.services.clock import Clock
from src.app.services.notification_dispatcher import NotificationDispatcher
from src.app.services.token_issuer import TokenIssuer
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.team import (
    InvitationResponse,
    InviteTeamMemberUseCase,
    ListTeamMembersUseCase,
    RemoveTeamMemberResponse,
    RemoveTeamMemberUseCase,
    RevokeInvitationUseCase,
    TeamMemberListResponse,
    TeamMemberResponse,
    UpdateTeamMemberRoleUseCase,
)
from src.depends import (
    get_clock,
    get_current_user_id,
    get_notification_dispatcher,
    get_token_issuer,
    get_unit_of_work,
)

router = APIRouter(prefix="/businesses/{business_id}", tags=["Team"])


class InviteRequest(BaseModel):
    email: EmailStr = Field(..., description="Email address to invite")
    role: str = Field(..., description="Role name, e.g. Admin, Manager, Editor, Accountant")


class UpdateRoleRequest(BaseModel):
    role: str = Field(..., description="New role name")


@router.get("/members", response_model=TeamMemberListResponse)
async def list_team_members(
    business_id: UUID,
    user_id: UUID = Depends(get_current_user_id),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    result = await ListTeamMembersUseCase(uow).execute(user_id, business_id)

    if result.is_err():
        raise_for_error(result.error)

    return result.value


@router.put("/members/{team_member_id}/role", response_model=TeamMemberResponse)
async def update_team_member_role(
    business_id: UUID,
    team_member_id: UUID,
    request: UpdateRoleRequest,
    user_id: UUID = Depends(get_current_user_id),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Raises:
        - 403 Forbidden: INSUFFICIENT_PERMISSION, CANNOT_CHANGE_OWNER_ROLE
        - 404 Not Found: TEAM_MEMBER_NOT_FOUND, ROLE_NOT_FOUND
    """
    result = await UpdateTeamMemberRoleUseCase(uow).execute(
        user_id, business_id, team_member_id, request.role
    )

    if result.is_err():
        raise_for_error(result.error)

    return result.value


@router.delete("/members/{team_member_id}", response_model=RemoveTeamMemberResponse)
async def remove_team_member(
    business_id: UUID,
    team_member_id: UUID,
    user_id: UUID = Depends(get_current_user_id),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    result = await RemoveTeamMemberUseCase(uow).execute(user_id, business_id, team_member_id)

    if result.is_err():
        raise_for_error(result.error)

    return result.value


@router.post(
    "/invitations", status_code=status.HTTP_201_CREATED, response_model=InvitationResponse
)
async def invite_team_member(
    business_id: UUID,
    request: InviteRequest,
    user_id: UUID = Depends(get_current_user_id),
    uow: UnitOfWork = Depends(get_unit_of_work),
    token_issuer: TokenIssuer = Depends(get_token_issuer),
    dispatcher: NotificationDispatcher = Depends(get_notification_dispatcher),
    clock: Clock = Depends(get_clock),
):
    """
    Invite Team Member

    The invitation token is delivered through the notification dispatcher,
    never in the response.

    Raises:
        - 403 Forbidden: INSUFFICIENT_PERMISSION (needs team:invite)
        - 404 Not Found: BUSINESS_NOT_FOUND, ROLE_NOT_FOUND
        - 409 Conflict: ALREADY_MEMBER, INVITE_ALREADY_EXISTS
    """
    use_case = InviteTeamMemberUseCase(
        uow,
        token_issuer=token_issuer,
        dispatcher=dispatcher,
        clock=clock,
        validity_hours=ApplicationConfig.INVITATION_VALIDITY_HOURS,
    )
    result = await use_case.execute(user_id, business_id, request.email, request.role)

    if result.is_err():
        raise_for_error(result.error)

    return result.value


@router.post("/invitations/{invitation_id}/revoke", response_model=InvitationResponse)
async def revoke_invitation(
    business_id: UUID,
    invitation_id: UUID,
    user_id: UUID = Depends(get_current_user_id),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    result = await RevokeInvitationUseCase(uow).execute(user_id, business_id, invitation_id)

    if result.is_err():
        raise_for_error(result.error)

    return result.value
