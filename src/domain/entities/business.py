"""
Business Entity

The tenant: a company account owning clients, invoices and a team.
"""

import json
from datetime import datetime
from decimal import Decimal
from typing import Any, Dict, Optional
from uuid import UUID, uuid4

from sqlalchemy import Numeric, Text, text
from sqlmodel import Column, DateTime, Field, Index, SQLModel

from src.domain.base import is_blank, to_decimal, utc_now
from src.domain.errors import ConflictError, InvalidStateError, ValidationError

DEFAULT_TAX_RATE = Decimal("0.10")


class Business(SQLModel, table=True):
    """
    Business entity - aggregate root for a tenant.

    Business Rules:
    - (name, country) unique among non-deleted businesses
    - Deletion is always soft: deactivate + flag deleted, rows are kept
    - Restore only from deleted, and only while no other non-deleted
      business holds the same (name, country)
    - Invoices can be created only while active and not deleted
    """

    __tablename__ = "businesses"

    id: UUID = Field(default_factory=uuid4, primary_key=True)
    name: str = Field(max_length=200)
    country: str = Field(max_length=100)
    owner_id: UUID = Field(foreign_key="users.id", nullable=False, index=True)

    is_active: bool = Field(default=True)

    # Soft delete support
    is_deleted: bool = Field(default=False)
    deleted_at: Optional[datetime] = Field(default=None, sa_column=Column(DateTime))

    # Address
    address: Optional[str] = Field(default=None, max_length=255)
    city: Optional[str] = Field(default=None, max_length=100)
    state: Optional[str] = Field(default=None, max_length=100)
    zip_code: Optional[str] = Field(default=None, max_length=20)

    # Contact
    phone_number: Optional[str] = Field(default=None, max_length=50)
    email: Optional[str] = Field(default=None, max_length=256)
    website: Optional[str] = Field(default=None, max_length=2048)

    # Branding
    logo_url: Optional[str] = Field(default=None, max_length=2048)
    theme_settings: str = Field(default="{}", sa_column=Column(Text, nullable=False))

    tax_rate: Decimal = Field(
        default=DEFAULT_TAX_RATE, sa_column=Column(Numeric(5, 4), nullable=False)
    )

    # Timestamps
    created_at: datetime = Field(default_factory=utc_now, sa_column=Column(DateTime))

    __table_args__ = (
        Index(
            "uq_business_name_country_active",
            "name",
            "country",
            unique=True,
            sqlite_where=text("is_deleted = 0"),
            postgresql_where=text("NOT is_deleted"),
        ),
        Index("idx_business_is_deleted", "is_deleted"),
    )

    @classmethod
    def create(
        cls,
        name: str,
        owner_id: UUID,
        country: str,
        tax_rate: Optional[Decimal] = None,
    ) -> "Business":
        if is_blank(name):
            raise ValidationError("Business name cannot be empty.", code="BUSINESS_NAME_REQUIRED")
        if is_blank(country):
            raise ValidationError("Country cannot be empty.", code="COUNTRY_REQUIRED")

        rate = DEFAULT_TAX_RATE if tax_rate is None else to_decimal(tax_rate)
        if rate < 0:
            raise ValidationError("Tax rate cannot be negative.", code="INVALID_TAX_RATE")

        return cls(
            name=name.strip(),
            owner_id=owner_id,
            country=country.strip(),
            is_active=True,
            is_deleted=False,
            theme_settings="{}",
            tax_rate=rate,
        )

    def update_details(
        self,
        name: str,
        email: Optional[str] = None,
        phone: Optional[str] = None,
        website: Optional[str] = None,
    ) -> None:
        if is_blank(name):
            raise ValidationError("Business name cannot be empty.", code="BUSINESS_NAME_REQUIRED")

        self.name = name.strip()
        self.email = email
        self.phone_number = phone
        self.website = website

    def update_address(
        self,
        address: Optional[str],
        city: Optional[str],
        state: Optional[str],
        zip_code: Optional[str],
        country: str,
    ) -> None:
        if is_blank(country):
            raise ValidationError("Country cannot be empty.", code="COUNTRY_REQUIRED")

        self.address = address
        self.city = city
        self.state = state
        self.zip_code = zip_code
        self.country = country.strip()

    def update_branding(self, logo_url: Optional[str], theme_settings_json: str) -> None:
        try:
            json.loads(theme_settings_json)
        except (TypeError, ValueError) as exc:
            raise ValidationError(
                f"Theme settings must be a valid JSON string. Details: {exc}",
                code="INVALID_THEME_SETTINGS",
            ) from exc

        self.logo_url = logo_url
        self.theme_settings = theme_settings_json

    def update_tax_rate(self, tax_rate: Decimal) -> None:
        rate = to_decimal(tax_rate)
        if rate < 0:
            raise ValidationError("Tax rate cannot be negative.", code="INVALID_TAX_RATE")
        self.tax_rate = rate

    def activate(self) -> None:
        self.is_active = True

    def deactivate(self) -> None:
        self.is_active = False

    def delete(self, now: Optional[datetime] = None) -> None:
        self.is_active = False
        self.is_deleted = True
        self.deleted_at = now or utc_now()

    def restore(self, conflicting_business_exists: bool) -> None:
        """
        Undo a soft delete.

        Args:
            conflicting_business_exists: whether another non-deleted business
                currently holds this (name, country)
        """
        if not self.is_deleted:
            raise InvalidStateError(
                "Only a deleted business can be restored.", code="BUSINESS_NOT_DELETED"
            )
        if conflicting_business_exists:
            raise ConflictError(
                f"Another business named '{self.name}' already exists in {self.country}.",
                code="BUSINESS_NAME_TAKEN",
            )

        self.is_deleted = False
        self.deleted_at = None
        self.is_active = True

    def can_create_invoices(self) -> bool:
        return self.is_active and not self.is_deleted

    @property
    def theme(self) -> Dict[str, Any]:
        return json.loads(self.theme_settings or "{}")

    @property
    def formatted_address(self) -> str:
        lines = []
        if not is_blank(self.address):
            lines.append(self.address)
        locality = ""
        if not is_blank(self.city):
            locality += f"{self.city}, "
        if not is_blank(self.state):
            locality += f"{self.state} "
        if not is_blank(self.zip_code):
            locality += self.zip_code
        locality = locality.strip().rstrip(",")
        if locality:
            lines.append(locality)
        if not is_blank(self.country):
            lines.append(self.country)
        return "\n".join(lines)
