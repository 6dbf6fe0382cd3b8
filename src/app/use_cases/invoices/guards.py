from uuid import UUID

from libs.result import Error, Result, Return
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.guards import authorize_business
from src.domain.entities import Invoice
from src.domain.permissions import PermissionName


async def load_invoice(
    uow: UnitOfWork,
    user_id: UUID,
    business_id: UUID,
    invoice_id: UUID,
    permission: PermissionName,
    for_update: bool = False,
) -> Result[Invoice]:
    """
    Load an invoice of a business after checking the caller's permission.

    With ``for_update`` the business must also be able to create invoices
    (active and not deleted) and the invoice row is locked for the rest of
    the unit of work.
    """
    authorized = await authorize_business(uow, user_id, business_id, permission)
    if authorized.is_err():
        return authorized
    business = authorized.value

    if for_update and not business.can_create_invoices():
        return Return.err(
            Error("BUSINESS_INACTIVE", "Cannot modify invoices for an inactive business")
        )

    invoice = await uow.invoices.get_by_id(invoice_id, for_update=for_update)
    if invoice is None or invoice.business_id != business.id:
        return Return.err(Error("INVOICE_NOT_FOUND", "Invoice not found"))

    return Return.ok(invoice)
