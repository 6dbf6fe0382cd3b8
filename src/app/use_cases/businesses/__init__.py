"""
Business Management Use Cases

Tenant lifecycle: creation, profile updates, activation and soft delete.
"""

from .change_business_status_use_case import (
    ActivateBusinessUseCase,
    DeactivateBusinessUseCase,
)
from .check_business_name_use_case import CheckBusinessNameUseCase
from .create_business_use_case import CreateBusinessUseCase
from .delete_business_use_case import DeleteBusinessUseCase
from .dtos import (
    BusinessListResponse,
    BusinessNameAvailabilityResponse,
    BusinessResponse,
)
from .get_business_use_case import GetBusinessUseCase
from .list_my_businesses_use_case import ListMyBusinessesUseCase
from .restore_business_use_case import RestoreBusinessUseCase
from .update_business_address_use_case import UpdateBusinessAddressUseCase
from .update_business_branding_use_case import UpdateBusinessBrandingUseCase
from .update_business_details_use_case import UpdateBusinessDetailsUseCase
from .update_business_tax_rate_use_case import UpdateBusinessTaxRateUseCase

__all__ = [
    "CreateBusinessUseCase",
    "GetBusinessUseCase",
    "ListMyBusinessesUseCase",
    "CheckBusinessNameUseCase",
    "UpdateBusinessDetailsUseCase",
    "UpdateBusinessAddressUseCase",
    "UpdateBusinessBrandingUseCase",
    "UpdateBusinessTaxRateUseCase",
    "ActivateBusinessUseCase",
    "DeactivateBusinessUseCase",
    "DeleteBusinessUseCase",
    "RestoreBusinessUseCase",
    "BusinessResponse",
    "BusinessListResponse",
    "BusinessNameAvailabilityResponse",
]
