"""Pydantic DTOs for invoices."""

from datetime import date

from pydantic import BaseModel, Field

from dashboard.domain.entities import InvoiceStatus


class InvoicePayload(BaseModel):
    """Invoice form submission — the id is assigned before the form opens."""

    id: str = Field(..., min_length=1, examples=["BX0004"])
    client_name: str = Field(..., min_length=1)
    project_ids: list[int] = Field(default_factory=list)
    description: str = ""
    amount: float = Field(..., ge=0, description="Subtotal before tax")
    due_date: date
    status: InvoiceStatus = InvoiceStatus.PENDING


class InvoiceResponse(BaseModel):
    id: str
    client_name: str
    project_ids: list[int]
    description: str
    amount: float
    due_date: date
    status: InvoiceStatus

    model_config = {"from_attributes": True}


class NextInvoiceIdResponse(BaseModel):
    id: str
