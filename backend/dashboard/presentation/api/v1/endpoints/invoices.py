"""Invoice endpoints — listing, id sequencing and form submission."""

from fastapi import APIRouter, Depends, HTTPException, status

from dashboard.application.schemas.invoice import (
    InvoicePayload,
    InvoiceResponse,
    NextInvoiceIdResponse,
)
from dashboard.application.services import DashboardController
from dashboard.domain.entities import User
from dashboard.domain.exceptions import EntityNotFoundError
from dashboard.infrastructure.dependencies import get_controller, get_current_user
from dashboard.presentation.api.v1.endpoints.outcomes import ensure_applied

router = APIRouter(prefix="/invoices", tags=["Invoices"])


@router.get("", response_model=list[InvoiceResponse])
async def list_invoices(
    controller: DashboardController = Depends(get_controller),
    _user: User = Depends(get_current_user),
) -> list[InvoiceResponse]:
    """Retrieve every invoice."""
    return [
        InvoiceResponse.model_validate(i, from_attributes=True)
        for i in controller.snapshot.invoices
    ]


@router.get("/next-id", response_model=NextInvoiceIdResponse)
async def next_invoice_id(
    controller: DashboardController = Depends(get_controller),
    _user: User = Depends(get_current_user),
) -> NextInvoiceIdResponse:
    """Return the id a new invoice should be submitted with."""
    return NextInvoiceIdResponse(id=controller.next_invoice_id())


@router.get("/{invoice_id}", response_model=InvoiceResponse)
async def get_invoice(
    invoice_id: str,
    controller: DashboardController = Depends(get_controller),
    _user: User = Depends(get_current_user),
) -> InvoiceResponse:
    """Retrieve a single invoice by ID."""
    try:
        invoice = controller.get_invoice(invoice_id)
    except EntityNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    return InvoiceResponse.model_validate(invoice, from_attributes=True)


@router.post("", response_model=InvoiceResponse)
async def submit_invoice(
    data: InvoicePayload,
    controller: DashboardController = Depends(get_controller),
    _user: User = Depends(get_current_user),
) -> InvoiceResponse:
    """Create or replace the invoice with the submitted id."""
    result = ensure_applied(controller.submit_invoice(data), "Invoice", data.id)
    return InvoiceResponse.model_validate(result.entity, from_attributes=True)
