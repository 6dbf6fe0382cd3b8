from typing import List, Optional

from pydantic import BaseModel

from src.domain.entities import Client


class ClientResponse(BaseModel):
    """Client of a business"""

    id: str
    business_id: str
    name: str
    email: Optional[str] = None
    phone: Optional[str] = None
    address: Optional[str] = None
    country: Optional[str] = None
    locale: Optional[str] = None

    @classmethod
    def from_entity(cls, client: Client) -> "ClientResponse":
        return cls(
            id=str(client.id),
            business_id=str(client.business_id),
            name=client.name,
            email=client.email,
            phone=client.phone,
            address=client.address,
            country=client.country,
            locale=client.locale,
        )


class ClientListResponse(BaseModel):
    clients: List[ClientResponse]
