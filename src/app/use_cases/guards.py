"""
Shared preconditions for business-scoped use cases.

Every command against a business first loads it (soft-deleted businesses
count as missing unless asked for) and then checks the caller's permission
through the authorization resolver.
"""

from uuid import UUID

from libs.result import Error, Result, Return
from src.app.services.authorization import require_permission
from src.app.services.unit_of_work import UnitOfWork
from src.domain.entities import Business
from src.domain.permissions import PermissionName


async def authorize_business(
    uow: UnitOfWork,
    user_id: UUID,
    business_id: UUID,
    permission: PermissionName,
    include_deleted: bool = False,
) -> Result[Business]:
    business = await uow.businesses.get_by_id(business_id, include_deleted=include_deleted)
    if business is None:
        return Return.err(Error("BUSINESS_NOT_FOUND", "Business not found"))

    error = await require_permission(uow, user_id, business.id, permission)
    if error is not None:
        return Return.err(error)

    return Return.ok(business)
