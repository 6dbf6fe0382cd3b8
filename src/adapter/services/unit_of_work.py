from sqlmodel.ext.asyncio.session import AsyncSession

from src.adapter.repositories.business_repository import BusinessRepository
from src.adapter.repositories.client_repository import ClientRepository
from src.adapter.repositories.invitation_repository import InvitationRepository
from src.adapter.repositories.invoice_repository import InvoiceRepository
from src.adapter.repositories.permission_repository import PermissionRepository
from src.adapter.repositories.role_repository import RoleRepository
from src.adapter.repositories.team_member_repository import TeamMemberRepository
from src.adapter.repositories.user_repository import UserRepository
from src.app.services.unit_of_work import UnitOfWork


class SqlAlchemyUnitOfWork(UnitOfWork):
    """SQLAlchemy implementation of UnitOfWork pattern"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def __aenter__(self):
        # Initialize all repositories with the session
        self.users = UserRepository(self.session)
        self.businesses = BusinessRepository(self.session)
        self.permissions = PermissionRepository(self.session)
        self.roles = RoleRepository(self.session)
        self.team_members = TeamMemberRepository(self.session)
        self.invitations = InvitationRepository(self.session)
        self.clients = ClientRepository(self.session)
        self.invoices = InvoiceRepository(self.session)
        return self

    async def __aexit__(self, *args):
        # Anything not committed by the use case is discarded
        await self.rollback()

    async def commit(self):
        await self.session.commit()

    async def rollback(self):
        await self.session.rollback()
