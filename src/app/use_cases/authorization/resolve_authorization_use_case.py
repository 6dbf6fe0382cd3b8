from uuid import UUID

from libs.result import Result, Return
from src.app.services.authorization import AuthorizationResolver
from src.app.services.unit_of_work import UnitOfWork

from .dtos import AuthorizationResponse


class ResolveAuthorizationUseCase:
    """
    Report what a user may do in a business.

    Never fails: a user without membership gets empty role and permission
    lists.
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, user_id: UUID, business_id: UUID) -> Result[AuthorizationResponse]:
        async with self.uow:
            context = await AuthorizationResolver(self.uow).resolve(user_id, business_id)
            return Return.ok(
                AuthorizationResponse(
                    user_id=str(user_id),
                    business_id=str(business_id),
                    roles=sorted(context.roles),
                    permissions=sorted(context.permissions),
                )
            )
