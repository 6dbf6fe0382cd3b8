from abc import ABC, abstractmethod
from datetime import datetime
from typing import List, Optional
from uuid import UUID

from src.domain.entities import Invoice


class IInvoiceRepository(ABC):
    """
    Invoice repository interface - application layer

    Invoices are loaded with their items and transactions. Invoices and
    transactions are permanent records, so there is no delete.
    """

    @abstractmethod
    async def get_by_id(self, invoice_id: UUID, for_update: bool = False) -> Optional[Invoice]:
        """
        Get invoice by ID with items and transactions

        With ``for_update`` the row stays locked until the unit of work ends,
        so commands against the same invoice run one at a time.
        """
        pass

    @abstractmethod
    async def get_by_business_id(self, business_id: UUID) -> List[Invoice]:
        """Get all invoices of a business, newest first"""
        pass

    @abstractmethod
    async def number_exists(self, business_id: UUID, invoice_number: str) -> bool:
        """Check whether the business already used an invoice number"""
        pass

    @abstractmethod
    async def get_numbers_with_prefix(self, business_id: UUID, prefix: str) -> List[str]:
        """Get every invoice number of a business starting with prefix"""
        pass

    @abstractmethod
    async def get_overdue(self, business_id: UUID, now: datetime) -> List[Invoice]:
        """Get sent invoices of a business whose due date has passed"""
        pass

    @abstractmethod
    async def create(self, invoice: Invoice) -> Invoice:
        """Create a new invoice"""
        pass

    @abstractmethod
    async def update(self, invoice: Invoice) -> Invoice:
        """Update existing invoice, items and transactions included"""
        pass
