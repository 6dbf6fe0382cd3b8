from datetime import datetime
from uuid import UUID

from src.app.services.unit_of_work import UnitOfWork

SEQUENCE_WIDTH = 3


class InvoiceNumberGenerator:
    """
    Generates invoice numbers of the form ``yyyyMM###`` per business.

    The sequence restarts every month and continues from the highest number
    already issued with the month prefix. Manual numbers sharing the prefix
    take part only when the rest of the number is all digits. It widens past
    999 instead of wrapping. Must be used inside an entered unit of work.
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def next_number(self, business_id: UUID, now: datetime) -> str:
        prefix = f"{now.year:04d}{now.month:02d}"
        numbers = await self.uow.invoices.get_numbers_with_prefix(business_id, prefix)

        sequences = [
            int(number[len(prefix):])
            for number in numbers
            if number[len(prefix):].isdigit()
        ]
        sequence = max(sequences, default=0) + 1

        return f"{prefix}{sequence:0{SEQUENCE_WIDTH}d}"
