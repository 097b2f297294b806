"""Pydantic DTOs for projects, checklists and report attachments."""

from pydantic import BaseModel, Field

from dashboard.domain.entities import ProjectStatus, ServiceType


class ChecklistItemSchema(BaseModel):
    id: str
    label: str
    completed: bool = False

    model_config = {"from_attributes": True}


class ProjectPayload(BaseModel):
    """Project form submission.

    New projects (no ``id``) always start from the default checklist; an
    edit keeps the submitted checklist, images and notes, or the stored
    ones for any field left out of the submission.
    """

    id: int | None = None
    name: str = Field(..., min_length=1, max_length=200)
    client_name: str = Field(..., min_length=1, max_length=200)
    status: ProjectStatus = ProjectStatus.IN_PROGRESS
    service_type: ServiceType = ServiceType.WEB_DEVELOPMENT
    notes: str | None = None
    checklist: list[ChecklistItemSchema] | None = None
    image_urls: list[str] | None = None


class ProjectResponse(BaseModel):
    id: int
    name: str
    client_name: str
    status: ProjectStatus
    service_type: ServiceType
    notes: str | None
    checklist: list[ChecklistItemSchema]
    image_urls: list[str]

    model_config = {"from_attributes": True}


class ProjectImageRequest(BaseModel):
    image_url: str = Field(..., min_length=1)


class ProjectNotesRequest(BaseModel):
    notes: str
