"""Pydantic DTOs (Data Transfer Objects) for clients."""

from pydantic import BaseModel, Field

from dashboard.domain.entities import ClientStatus


class ClientPayload(BaseModel):
    """Client form submission — ``id`` present means edit, absent means create."""

    id: int | None = None
    name: str = Field(..., min_length=1, max_length=200, examples=["Acme"])
    contact_person: str = ""
    email: str = ""
    phone: str = ""
    location: str = ""
    industry: str = ""
    status: ClientStatus = ClientStatus.PROSPECT
    total_value: float = Field(0.0, ge=0)
    notes: str | None = None
    avatar_url: str = ""


class ClientResponse(BaseModel):
    """Schema returned to the client."""

    id: int
    name: str
    contact_person: str
    email: str
    phone: str
    location: str
    industry: str
    status: ClientStatus
    total_value: float
    notes: str | None
    avatar_url: str

    model_config = {"from_attributes": True}
