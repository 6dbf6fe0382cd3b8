"""
Client Management Use Cases
"""

from .create_client_use_case import CreateClientUseCase
from .dtos import ClientListResponse, ClientResponse
from .list_clients_use_case import ListClientsUseCase
from .update_client_use_case import UpdateClientUseCase

__all__ = [
    "CreateClientUseCase",
    "ListClientsUseCase",
    "UpdateClientUseCase",
    "ClientResponse",
    "ClientListResponse",
]
