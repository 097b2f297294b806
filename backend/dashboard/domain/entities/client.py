"""Domain entity — a customer company tracked by the dashboard."""

from dataclasses import dataclass
from enum import Enum


class ClientStatus(str, Enum):
    """Relationship stage of a client."""

    PROSPECT = "prospect"
    ACTIVE = "active"
    FORMER = "former"


@dataclass
class Client:
    """A client company and its primary contact.

    Projects and invoices point back at a client by ``name``, not by ``id``.
    """

    id: int
    name: str  # company name
    contact_person: str = ""
    email: str = ""
    phone: str = ""
    location: str = ""
    industry: str = ""
    status: ClientStatus = ClientStatus.PROSPECT
    total_value: float = 0.0
    notes: str | None = None
    avatar_url: str = ""  # contact person's avatar
