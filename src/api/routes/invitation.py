from uuid import UUID

from fastapi import APIRouter, Depends

from src.api.error import raise_for_error
from src.app.services.clock import Clock
from src.app.services.notification_dispatcher import NotificationDispatcher
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.team import AcceptInvitationResponse, AcceptInvitationUseCase
from src.depends import (
    get_clock,
    get_current_user_id,
    get_notification_dispatcher,
    get_unit_of_work,
)

router = APIRouter(prefix="/invitations", tags=["Invitations"])


@router.post("/{token}/accept", response_model=AcceptInvitationResponse)
async def accept_invitation(
    token: str,
    user_id: UUID = Depends(get_current_user_id),
    uow: UnitOfWork = Depends(get_unit_of_work),
    dispatcher: NotificationDispatcher = Depends(get_notification_dispatcher),
    clock: Clock = Depends(get_clock),
):
    """
    Accept Invitation

    The caller must be the registered user the invitation was sent to.

    Raises:
        - 403 Forbidden: INVITATION_EMAIL_MISMATCH
        - 404 Not Found: INVITATION_NOT_FOUND, USER_NOT_REGISTERED
        - 409 Conflict: INVITATION_NOT_PENDING, ALREADY_MEMBER
        - 410 Gone: INVITATION_EXPIRED
    """
    use_case = AcceptInvitationUseCase(uow, dispatcher=dispatcher, clock=clock)
    result = await use_case.execute(token, user_id=user_id)

    if result.is_err():
        raise_for_error(result.error)

    return result.value
