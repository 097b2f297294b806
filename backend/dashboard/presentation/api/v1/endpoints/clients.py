"""Client endpoints — listing and form submission."""

from fastapi import APIRouter, Depends, HTTPException, status

from dashboard.application.schemas.client import ClientPayload, ClientResponse
from dashboard.application.services import DashboardController
from dashboard.domain.entities import User
from dashboard.domain.exceptions import EntityNotFoundError
from dashboard.infrastructure.dependencies import get_controller, get_current_user
from dashboard.presentation.api.v1.endpoints.outcomes import ensure_applied

router = APIRouter(prefix="/clients", tags=["Clients"])


@router.get("", response_model=list[ClientResponse])
async def list_clients(
    controller: DashboardController = Depends(get_controller),
    _user: User = Depends(get_current_user),
) -> list[ClientResponse]:
    """Retrieve every client."""
    return [
        ClientResponse.model_validate(c, from_attributes=True)
        for c in controller.snapshot.clients
    ]


@router.get("/{client_id}", response_model=ClientResponse)
async def get_client(
    client_id: int,
    controller: DashboardController = Depends(get_controller),
    _user: User = Depends(get_current_user),
) -> ClientResponse:
    """Retrieve a single client by ID."""
    try:
        client = controller.get_client(client_id)
    except EntityNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    return ClientResponse.model_validate(client, from_attributes=True)


@router.post("", response_model=ClientResponse)
async def submit_client(
    data: ClientPayload,
    controller: DashboardController = Depends(get_controller),
    _user: User = Depends(get_current_user),
) -> ClientResponse:
    """Create a client (no ``id``) or replace an existing one."""
    result = ensure_applied(controller.submit_client(data), "Client", data.id)
    return ClientResponse.model_validate(result.entity, from_attributes=True)
