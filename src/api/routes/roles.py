from uuid import UUID

from fastapi import APIRouter, Depends

from src.api.error import raise_for_error
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.authorization import ListRolesUseCase, RoleListResponse
from src.depends import get_current_user_id, get_unit_of_work

router = APIRouter(prefix="/roles", tags=["Roles"])


@router.get("", response_model=RoleListResponse)
async def list_roles(
    _: UUID = Depends(get_current_user_id),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """Roles that can be given to team members, with their permissions"""
    result = await ListRolesUseCase(uow).execute()

    if result.is_err():
        raise_for_error(result.error)

    return result.value
