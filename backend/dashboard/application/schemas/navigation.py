"""Pydantic DTOs for section navigation, rendered views and modals."""

from typing import Any

from pydantic import BaseModel

from dashboard.domain.entities import ModalKind, Section, ViewKind


class NavigateRequest(BaseModel):
    section: Section


class RenderedViewResponse(BaseModel):
    kind: ViewKind
    section: Section
    revision: int
    content: dict[str, Any]


class ModalIntent(BaseModel):
    """Request to open a modal; edit/delete kinds need a ``target_id``."""

    kind: ModalKind
    target_id: int | str | None = None


class ModalViewResponse(BaseModel):
    kind: ModalKind
    title: str | None = None
    target: dict[str, Any] | None = None
    message: str | None = None
    client_names: list[str] | None = None
    next_invoice_id: str | None = None
    active_projects: list[dict[str, Any]] | None = None


class MutationResponse(BaseModel):
    """Outcome of a mutation that does not return an entity."""

    outcome: str
    revision: int
