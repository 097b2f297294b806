"""Modal state endpoints — open, inspect, close and confirm dialogs."""

from fastapi import APIRouter, Depends, HTTPException, status
from fastapi.encoders import jsonable_encoder

from dashboard.application.schemas.navigation import (
    ModalIntent,
    ModalViewResponse,
    MutationResponse,
)
from dashboard.application.services import DashboardController, MutationOutcome
from dashboard.domain.entities import ModalView, User
from dashboard.domain.exceptions import EntityNotFoundError
from dashboard.infrastructure.dependencies import get_controller, get_current_user

router = APIRouter(prefix="/modal", tags=["Modal"])


def _modal_to_response(view: ModalView) -> ModalViewResponse:
    """Map a ModalView to its API response."""
    return ModalViewResponse(
        kind=view.kind,
        title=view.title,
        target=jsonable_encoder(view.target) if view.target is not None else None,
        message=view.message,
        client_names=view.client_names,
        next_invoice_id=view.next_invoice_id,
        active_projects=(
            jsonable_encoder(view.active_projects)
            if view.active_projects is not None
            else None
        ),
    )


@router.get("", response_model=ModalViewResponse)
async def get_modal(
    controller: DashboardController = Depends(get_controller),
    _user: User = Depends(get_current_user),
) -> ModalViewResponse:
    """Describe the open modal."""
    return _modal_to_response(controller.render_modal())


@router.post("", response_model=ModalViewResponse)
async def open_modal(
    intent: ModalIntent,
    controller: DashboardController = Depends(get_controller),
    _user: User = Depends(get_current_user),
) -> ModalViewResponse:
    """Open a modal; edit and delete kinds target an existing record."""
    try:
        controller.open_modal_for(intent.kind, intent.target_id)
    except EntityNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    return _modal_to_response(controller.render_modal())


@router.delete("", status_code=status.HTTP_204_NO_CONTENT)
async def close_modal(
    controller: DashboardController = Depends(get_controller),
    _user: User = Depends(get_current_user),
) -> None:
    """Close the open modal; closing a closed modal does nothing."""
    controller.close_modal()


@router.post("/confirm", response_model=MutationResponse)
async def confirm(
    controller: DashboardController = Depends(get_controller),
    _user: User = Depends(get_current_user),
) -> MutationResponse:
    """Confirm the deletion asked for by the open confirmation modal."""
    modal = controller.modal
    result = controller.confirm_delete()
    if result.outcome is MutationOutcome.REJECTED:
        raise HTTPException(
            status_code=status.HTTP_409_CONFLICT,
            detail=f"No deletion pending (modal is '{modal.kind.value}')",
        )
    if result.outcome is MutationOutcome.NOT_FOUND:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Target of '{modal.kind.value}' no longer exists",
        )
    return MutationResponse(outcome=result.outcome.value, revision=controller.revision)
