"""Domain entity for invoices."""

from dataclasses import dataclass, field
from datetime import date
from enum import Enum

INVOICE_ID_PREFIX = "BX"


class InvoiceStatus(str, Enum):
    """Payment state of an invoice."""

    PAID = "Paid"
    PENDING = "Pending"
    OVERDUE = "Overdue"


@dataclass
class Invoice:
    """A bill sent to a client, optionally covering several projects.

    The id is a formatted token such as ``BX0001`` assigned before submission.
    """

    id: str
    client_name: str
    amount: float  # subtotal before tax
    due_date: date
    project_ids: list[int] = field(default_factory=list)
    description: str = ""
    status: InvoiceStatus = InvoiceStatus.PENDING
