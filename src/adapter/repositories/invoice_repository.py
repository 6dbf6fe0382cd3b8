from datetime import datetime
from typing import List, Optional
from uuid import UUID

from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession

from src.app.repositories.invoice_repository import IInvoiceRepository
from src.domain.entities import Invoice, InvoiceStatus


class InvoiceRepository(IInvoiceRepository):
    """Invoice repository implementation using SQLModel"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def get_by_id(self, invoice_id: UUID, for_update: bool = False) -> Optional[Invoice]:
        """Get invoice by ID with items and transactions"""
        stmt = select(Invoice).where(Invoice.id == invoice_id)
        if for_update:
            # The SQLite dialect renders no FOR UPDATE clause
            stmt = stmt.with_for_update()
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none()

    async def get_by_business_id(self, business_id: UUID) -> List[Invoice]:
        """Get all invoices of a business, newest first"""
        stmt = (
            select(Invoice)
            .where(Invoice.business_id == business_id)
            .order_by(Invoice.created_at.desc())
        )
        result = await self.session.execute(stmt)
        return list(result.scalars().all())

    async def number_exists(self, business_id: UUID, invoice_number: str) -> bool:
        """Check whether the business already used an invoice number"""
        stmt = select(Invoice.id).where(
            Invoice.business_id == business_id,
            Invoice.invoice_number == invoice_number,
        )
        result = await self.session.execute(stmt.limit(1))
        return result.first() is not None

    async def get_numbers_with_prefix(self, business_id: UUID, prefix: str) -> List[str]:
        """Get every invoice number of a business starting with prefix"""
        stmt = select(Invoice.invoice_number).where(
            Invoice.business_id == business_id,
            Invoice.invoice_number.startswith(prefix),
        )
        result = await self.session.execute(stmt)
        return list(result.scalars().all())

    async def get_overdue(self, business_id: UUID, now: datetime) -> List[Invoice]:
        """Get sent invoices of a business whose due date has passed"""
        stmt = (
            select(Invoice)
            .where(
                Invoice.business_id == business_id,
                Invoice.status == InvoiceStatus.sent,
                Invoice.due_date < now,
            )
            .order_by(Invoice.due_date)
        )
        result = await self.session.execute(stmt)
        return list(result.scalars().all())

    # No refresh: it would expire the selectin-loaded items and transactions
    async def create(self, invoice: Invoice) -> Invoice:
        """Create a new invoice"""
        self.session.add(invoice)
        await self.session.flush()
        return invoice

    async def update(self, invoice: Invoice) -> Invoice:
        """Update existing invoice, items and transactions included"""
        self.session.add(invoice)
        await self.session.flush()
        return invoice
