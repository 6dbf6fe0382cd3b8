from abc import ABC, abstractmethod

from src.app.repositories.business_repository import IBusinessRepository
from src.app.repositories.client_repository import IClientRepository
from src.app.repositories.invitation_repository import IInvitationRepository
from src.app.repositories.invoice_repository import IInvoiceRepository
from src.app.repositories.permission_repository import IPermissionRepository
from src.app.repositories.role_repository import IRoleRepository
from src.app.repositories.team_member_repository import ITeamMemberRepository
from src.app.repositories.user_repository import IUserRepository


class UnitOfWork(ABC):
    """Abstract UnitOfWork - defines repository access and transaction management"""

    # Repository properties (initialized in __aenter__)
    users: IUserRepository
    businesses: IBusinessRepository
    permissions: IPermissionRepository
    roles: IRoleRepository
    team_members: ITeamMemberRepository
    invitations: IInvitationRepository
    clients: IClientRepository
    invoices: IInvoiceRepository

    @abstractmethod
    async def __aenter__(self):
        pass

    @abstractmethod
    async def __aexit__(self, *args):
        pass

    @abstractmethod
    async def commit(self):
        pass

    @abstractmethod
    async def rollback(self):
        pass
