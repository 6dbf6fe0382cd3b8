from decimal import Decimal
from typing import Optional
from uuid import UUID

from fastapi import APIRouter, Depends, Query, status
from pydantic import BaseModel, Field

from config import ApplicationConfig
from src.api.error import raise_for_error
from src.app.services.clock import Clock
from src.app.services.notification_dispatcher import NotificationDispatcher
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.authorization import AuthorizationResponse, ResolveAuthorizationUseCase
from src.app.use_cases.businesses import (
    ActivateBusinessUseCase,
    BusinessListResponse,
    BusinessNameAvailabilityResponse,
    BusinessResponse,
    CheckBusinessNameUseCase,
    CreateBusinessUseCase,
    DeactivateBusinessUseCase,
    DeleteBusinessUseCase,
    GetBusinessUseCase,
    ListMyBusinessesUseCase,
    RestoreBusinessUseCase,
    UpdateBusinessAddressUseCase,
    UpdateBusinessBrandingUseCase,
    UpdateBusinessDetailsUseCase,
    UpdateBusinessTaxRateUseCase,
)
from src.depends import (
    get_clock,
    get_current_user_id,
    get_notification_dispatcher,
    get_unit_of_work,
)

router = APIRouter(prefix="/businesses", tags=["Businesses"])


class CreateBusinessRequest(BaseModel):
    name: str = Field(..., description="Business name")
    country: str = Field(..., description="Country of operation")
    tax_rate: Optional[Decimal] = Field(default=None, description="Tax rate, e.g. 0.10")


class UpdateDetailsRequest(BaseModel):
    name: str
    email: Optional[str] = None
    phone: Optional[str] = None
    website: Optional[str] = None


class UpdateAddressRequest(BaseModel):
    country: str
    address: Optional[str] = None
    city: Optional[str] = None
    state: Optional[str] = None
    zip_code: Optional[str] = None


class UpdateBrandingRequest(BaseModel):
    theme_settings: str = Field(..., description="Theme settings as a JSON string")
    logo_url: Optional[str] = None


class UpdateTaxRateRequest(BaseModel):
    tax_rate: Decimal = Field(..., description="Rate applied to new invoices, e.g. 0.10")


@router.post("", status_code=status.HTTP_201_CREATED, response_model=BusinessResponse)
async def create_business(
    request: CreateBusinessRequest,
    user_id: UUID = Depends(get_current_user_id),
    uow: UnitOfWork = Depends(get_unit_of_work),
    dispatcher: NotificationDispatcher = Depends(get_notification_dispatcher),
):
    """
    Create Business

    The caller becomes the owner and receives the Owner role.

    Raises:
        - 400 Bad Request: BUSINESS_NAME_REQUIRED, COUNTRY_REQUIRED, INVALID_TAX_RATE
        - 409 Conflict: BUSINESS_NAME_TAKEN
    """
    use_case = CreateBusinessUseCase(
        uow, dispatcher=dispatcher, default_tax_rate=Decimal(ApplicationConfig.DEFAULT_TAX_RATE)
    )
    result = await use_case.execute(user_id, request.name, request.country, request.tax_rate)

    if result.is_err():
        raise_for_error(result.error)

    return result.value


@router.get("", response_model=BusinessListResponse)
async def list_my_businesses(
    user_id: UUID = Depends(get_current_user_id),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    result = await ListMyBusinessesUseCase(uow).execute(user_id)

    if result.is_err():
        raise_for_error(result.error)

    return result.value


@router.get("/name-availability", response_model=BusinessNameAvailabilityResponse)
async def check_business_name(
    name: str = Query(...),
    country: str = Query(...),
    _: UUID = Depends(get_current_user_id),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    result = await CheckBusinessNameUseCase(uow).execute(name, country)

    if result.is_err():
        raise_for_error(result.error)

    return result.value


@router.get("/{business_id}", response_model=BusinessResponse)
async def get_business(
    business_id: UUID,
    user_id: UUID = Depends(get_current_user_id),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    result = await GetBusinessUseCase(uow).execute(user_id, business_id)

    if result.is_err():
        raise_for_error(result.error)

    return result.value


@router.get("/{business_id}/authorization", response_model=AuthorizationResponse)
async def get_my_authorization(
    business_id: UUID,
    user_id: UUID = Depends(get_current_user_id),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """Roles and permissions the caller holds in the business (empty when not a member)"""
    result = await ResolveAuthorizationUseCase(uow).execute(user_id, business_id)

    if result.is_err():
        raise_for_error(result.error)

    return result.value


@router.put("/{business_id}/details", response_model=BusinessResponse)
async def update_business_details(
    business_id: UUID,
    request: UpdateDetailsRequest,
    user_id: UUID = Depends(get_current_user_id),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    result = await UpdateBusinessDetailsUseCase(uow).execute(
        user_id,
        business_id,
        request.name,
        email=request.email,
        phone=request.phone,
        website=request.website,
    )

    if result.is_err():
        raise_for_error(result.error)

    return result.value


@router.put("/{business_id}/address", response_model=BusinessResponse)
async def update_business_address(
    business_id: UUID,
    request: UpdateAddressRequest,
    user_id: UUID = Depends(get_current_user_id),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    result = await UpdateBusinessAddressUseCase(uow).execute(
        user_id,
        business_id,
        request.country,
        address=request.address,
        city=request.city,
        state=request.state,
        zip_code=request.zip_code,
    )

    if result.is_err():
        raise_for_error(result.error)

    return result.value


@router.put("/{business_id}/branding", response_model=BusinessResponse)
async def update_business_branding(
    business_id: UUID,
    request: UpdateBrandingRequest,
    user_id: UUID = Depends(get_current_user_id),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Raises:
        - 400 Bad Request: INVALID_THEME_SETTINGS when theme_settings is not JSON
    """
    result = await UpdateBusinessBrandingUseCase(uow).execute(
        user_id, business_id, request.theme_settings, logo_url=request.logo_url
    )

    if result.is_err():
        raise_for_error(result.error)

    return result.value


@router.put("/{business_id}/tax-rate", response_model=BusinessResponse)
async def update_business_tax_rate(
    business_id: UUID,
    request: UpdateTaxRateRequest,
    user_id: UUID = Depends(get_current_user_id),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Raises:
        - 400 Bad Request: INVALID_TAX_RATE when the rate is negative
    """
    result = await UpdateBusinessTaxRateUseCase(uow).execute(
        user_id, business_id, request.tax_rate
    )

    if result.is_err():
        raise_for_error(result.error)

    return result.value


@router.post("/{business_id}/activate", response_model=BusinessResponse)
async def activate_business(
    business_id: UUID,
    user_id: UUID = Depends(get_current_user_id),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    result = await ActivateBusinessUseCase(uow).execute(user_id, business_id)

    if result.is_err():
        raise_for_error(result.error)

    return result.value


@router.post("/{business_id}/deactivate", response_model=BusinessResponse)
async def deactivate_business(
    business_id: UUID,
    user_id: UUID = Depends(get_current_user_id),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    result = await DeactivateBusinessUseCase(uow).execute(user_id, business_id)

    if result.is_err():
        raise_for_error(result.error)

    return result.value


@router.delete("/{business_id}", response_model=BusinessResponse)
async def delete_business(
    business_id: UUID,
    user_id: UUID = Depends(get_current_user_id),
    uow: UnitOfWork = Depends(get_unit_of_work),
    dispatcher: NotificationDispatcher = Depends(get_notification_dispatcher),
    clock: Clock = Depends(get_clock),
):
    """
    Soft-delete Business

    Raises:
        - 403 Forbidden: INSUFFICIENT_PERMISSION (needs business:delete)
        - 404 Not Found: BUSINESS_NOT_FOUND
    """
    result = await DeleteBusinessUseCase(uow, dispatcher=dispatcher, clock=clock).execute(
        user_id, business_id
    )

    if result.is_err():
        raise_for_error(result.error)

    return result.value


@router.post("/{business_id}/restore", response_model=BusinessResponse)
async def restore_business(
    business_id: UUID,
    user_id: UUID = Depends(get_current_user_id),
    uow: UnitOfWork = Depends(get_unit_of_work),
    dispatcher: NotificationDispatcher = Depends(get_notification_dispatcher),
):
    """
    Restore a soft-deleted Business

    Raises:
        - 404 Not Found: BUSINESS_NOT_FOUND
        - 409 Conflict: BUSINESS_NOT_DELETED, BUSINESS_NAME_TAKEN
    """
    result = await RestoreBusinessUseCase(uow, dispatcher=dispatcher).execute(
        user_id, business_id
    )

    if result.is_err():
        raise_for_error(result.error)

    return result.value
