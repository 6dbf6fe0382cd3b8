"""
Business Use Case DTOs (Data Transfer Objects)

Response classes for the business domain.
"""

from typing import Any, Dict, List, Optional

from pydantic import BaseModel

from src.domain.entities import Business


# ============================================================================
# Response DTOs
# ============================================================================


class BusinessResponse(BaseModel):
    """Business profile"""

    id: str
    name: str
    country: str
    owner_id: str
    is_active: bool
    is_deleted: bool
    deleted_at: Optional[str] = None
    address: Optional[str] = None
    city: Optional[str] = None
    state: Optional[str] = None
    zip_code: Optional[str] = None
    formatted_address: str = ""
    phone_number: Optional[str] = None
    email: Optional[str] = None
    website: Optional[str] = None
    logo_url: Optional[str] = None
    theme_settings: Dict[str, Any] = {}
    tax_rate: str
    can_create_invoices: bool

    @classmethod
    def from_entity(cls, business: Business) -> "BusinessResponse":
        return cls(
            id=str(business.id),
            name=business.name,
            country=business.country,
            owner_id=str(business.owner_id),
            is_active=business.is_active,
            is_deleted=business.is_deleted,
            deleted_at=business.deleted_at.isoformat() if business.deleted_at else None,
            address=business.address,
            city=business.city,
            state=business.state,
            zip_code=business.zip_code,
            formatted_address=business.formatted_address,
            phone_number=business.phone_number,
            email=business.email,
            website=business.website,
            logo_url=business.logo_url,
            theme_settings=business.theme,
            tax_rate=str(business.tax_rate),
            can_create_invoices=business.can_create_invoices(),
        )


class BusinessListResponse(BaseModel):
    """Businesses the caller belongs to"""

    businesses: List[BusinessResponse]


class BusinessNameAvailabilityResponse(BaseModel):
    """Whether (name, country) is free among non-deleted businesses"""

    name: str
    country: str
    available: bool
