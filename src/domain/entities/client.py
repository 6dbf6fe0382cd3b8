"""
Client Entity

A customer of a business; invoices are addressed to clients.
"""

from datetime import datetime
from typing import Optional
from uuid import UUID, uuid4

from sqlmodel import Column, DateTime, Field, SQLModel

from src.domain.base import is_blank, utc_now
from src.domain.errors import ValidationError


class Client(SQLModel, table=True):
    __tablename__ = "clients"

    id: UUID = Field(default_factory=uuid4, primary_key=True)
    business_id: UUID = Field(foreign_key="businesses.id", nullable=False, index=True)

    name: str = Field(max_length=200)
    email: Optional[str] = Field(default=None, max_length=256)
    phone: Optional[str] = Field(default=None, max_length=50)
    address: Optional[str] = Field(default=None, max_length=255)
    country: Optional[str] = Field(default=None, max_length=100)
    locale: Optional[str] = Field(default=None, max_length=10)

    created_at: datetime = Field(default_factory=utc_now, sa_column=Column(DateTime))

    @classmethod
    def create(
        cls,
        business_id: UUID,
        name: str,
        email: Optional[str] = None,
        phone: Optional[str] = None,
    ) -> "Client":
        if is_blank(name):
            raise ValidationError("Client name cannot be empty.", code="CLIENT_NAME_REQUIRED")
        client = cls(business_id=business_id, name=name)
        client.update_contact_info(email, phone)
        return client

    def update_name(self, name: str) -> None:
        if is_blank(name):
            raise ValidationError("Client name cannot be empty.", code="CLIENT_NAME_REQUIRED")
        self.name = name

    def update_contact_info(self, email: Optional[str], phone: Optional[str]) -> None:
        self.email = email
        self.phone = phone

    def update_address(
        self, address: Optional[str], country: Optional[str], locale: Optional[str]
    ) -> None:
        self.address = address
        self.country = country
        self.locale = locale
