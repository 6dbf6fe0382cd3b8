"""
Admin API Routes - Operational Endpoints

Called by operators and schedulers. Authentication is via Admin API Key,
not user JWTs.
"""

from fastapi import APIRouter, Depends, status

from src.api.error import raise_for_error
from src.api.utils.admin_auth import verify_admin_api_key
from src.app.services.clock import Clock
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.authorization import ProvisionRolesUseCase, RoleListResponse
from src.app.use_cases.team import ExpireInvitationsResponse, ExpireInvitationsUseCase
from src.depends import get_clock, get_unit_of_work

router = APIRouter(prefix="/admin", tags=["Admin"])


@router.post(
    "/roles/provision",
    status_code=status.HTTP_200_OK,
    response_model=RoleListResponse,
    dependencies=[Depends(verify_admin_api_key)],
)
async def provision_roles(uow: UnitOfWork = Depends(get_unit_of_work)):
    """
    Seed the permission catalog and default roles (idempotent).

    Requires: X-Admin-API-Key header
    """
    result = await ProvisionRolesUseCase(uow).execute()

    if result.is_err():
        raise_for_error(result.error)

    return result.value


@router.post(
    "/invitations/expire",
    status_code=status.HTTP_200_OK,
    response_model=ExpireInvitationsResponse,
    dependencies=[Depends(verify_admin_api_key)],
)
async def expire_invitations(
    uow: UnitOfWork = Depends(get_unit_of_work),
    clock: Clock = Depends(get_clock),
):
    """
    Expire every pending invitation past its expiry date.

    Requires: X-Admin-API-Key header
    """
    result = await ExpireInvitationsUseCase(uow, clock=clock).execute()

    if result.is_err():
        raise_for_error(result.error)

    return result.value
