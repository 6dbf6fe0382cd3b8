from typing import Optional
from uuid import UUID

from fastapi import APIRouter, Depends, status
from pydantic import BaseModel

from src.api.error import raise_for_error
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.clients import (
    ClientListResponse,
    ClientResponse,
    CreateClientUseCase,
    ListClientsUseCase,
    UpdateClientUseCase,
)
from src.depends import get_current_user_id, get_unit_of_work

router = APIRouter(prefix="/businesses/{business_id}/clients", tags=["Clients"])


class ClientRequest(BaseModel):
    name: str
    email: Optional[str] = None
    phone: Optional[str] = None
    address: Optional[str] = None
    country: Optional[str] = None
    locale: Optional[str] = None


@router.post("", status_code=status.HTTP_201_CREATED, response_model=ClientResponse)
async def create_client(
    business_id: UUID,
    request: ClientRequest,
    user_id: UUID = Depends(get_current_user_id),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    result = await CreateClientUseCase(uow).execute(
        user_id, business_id, **request.model_dump()
    )

    if result.is_err():
        raise_for_error(result.error)

    return result.value


@router.get("", response_model=ClientListResponse)
async def list_clients(
    business_id: UUID,
    user_id: UUID = Depends(get_current_user_id),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    result = await ListClientsUseCase(uow).execute(user_id, business_id)

    if result.is_err():
        raise_for_error(result.error)

    return result.value


@router.put("/{client_id}", response_model=ClientResponse)
async def update_client(
    business_id: UUID,
    client_id: UUID,
    request: ClientRequest,
    user_id: UUID = Depends(get_current_user_id),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Raises:
        - 400 Bad Request: CLIENT_NAME_REQUIRED
        - 404 Not Found: CLIENT_NOT_FOUND
    """
    result = await UpdateClientUseCase(uow).execute(
        user_id, business_id, client_id, **request.model_dump()
    )

    if result.is_err():
        raise_for_error(result.error)

    return result.value
