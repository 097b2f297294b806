"""Project endpoints — form submission, report images, notes and checklist."""

from fastapi import APIRouter, Depends, HTTPException, Query, status

from dashboard.application.schemas.project import (
    ProjectImageRequest,
    ProjectNotesRequest,
    ProjectPayload,
    ProjectResponse,
)
from dashboard.application.services import DashboardController
from dashboard.domain.entities import User
from dashboard.domain.exceptions import EntityNotFoundError
from dashboard.infrastructure.dependencies import get_controller, get_current_user
from dashboard.presentation.api.v1.endpoints.outcomes import ensure_applied

router = APIRouter(prefix="/projects", tags=["Projects"])


@router.get("", response_model=list[ProjectResponse])
async def list_projects(
    client_name: str | None = Query(None, description="Filter by client name"),
    controller: DashboardController = Depends(get_controller),
    _user: User = Depends(get_current_user),
) -> list[ProjectResponse]:
    """Retrieve every project, optionally for one client."""
    projects = controller.snapshot.projects
    if client_name is not None:
        projects = tuple(p for p in projects if p.client_name == client_name)
    return [ProjectResponse.model_validate(p, from_attributes=True) for p in projects]


@router.get("/{project_id}", response_model=ProjectResponse)
async def get_project(
    project_id: int,
    controller: DashboardController = Depends(get_controller),
    _user: User = Depends(get_current_user),
) -> ProjectResponse:
    """Retrieve a single project by ID."""
    try:
        project = controller.get_project(project_id)
    except EntityNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    return ProjectResponse.model_validate(project, from_attributes=True)


@router.post("", response_model=ProjectResponse)
async def submit_project(
    data: ProjectPayload,
    controller: DashboardController = Depends(get_controller),
    _user: User = Depends(get_current_user),
) -> ProjectResponse:
    """Create a project (no ``id``) or replace an existing one."""
    result = ensure_applied(controller.submit_project(data), "Project", data.id)
    return ProjectResponse.model_validate(result.entity, from_attributes=True)


@router.post("/{project_id}/images", response_model=ProjectResponse)
async def upload_image(
    project_id: int,
    data: ProjectImageRequest,
    controller: DashboardController = Depends(get_controller),
    _user: User = Depends(get_current_user),
) -> ProjectResponse:
    """Attach an image reference to a project report."""
    result = ensure_applied(
        controller.upload_project_image(project_id, data.image_url), "Project", project_id
    )
    return ProjectResponse.model_validate(result.entity, from_attributes=True)


@router.delete("/{project_id}/images", response_model=ProjectResponse)
async def delete_image(
    project_id: int,
    image_url: str = Query(..., min_length=1),
    controller: DashboardController = Depends(get_controller),
    _user: User = Depends(get_current_user),
) -> ProjectResponse:
    """Remove an image reference from a project report."""
    result = ensure_applied(
        controller.delete_project_image(project_id, image_url), "Project", project_id
    )
    return ProjectResponse.model_validate(result.entity, from_attributes=True)


@router.put("/{project_id}/notes", response_model=ProjectResponse)
async def set_notes(
    project_id: int,
    data: ProjectNotesRequest,
    controller: DashboardController = Depends(get_controller),
    _user: User = Depends(get_current_user),
) -> ProjectResponse:
    """Replace a project's notes."""
    result = ensure_applied(
        controller.set_project_notes(project_id, data.notes), "Project", project_id
    )
    return ProjectResponse.model_validate(result.entity, from_attributes=True)


@router.post("/{project_id}/checklist/{item_id}/toggle", response_model=ProjectResponse)
async def toggle_checklist_item(
    project_id: int,
    item_id: str,
    controller: DashboardController = Depends(get_controller),
    _user: User = Depends(get_current_user),
) -> ProjectResponse:
    """Flip one checklist item between done and not done."""
    result = ensure_applied(
        controller.toggle_checklist_item(project_id, item_id),
        "ChecklistItem",
        f"{project_id}/{item_id}",
    )
    return ProjectResponse.model_validate(result.entity, from_attributes=True)
