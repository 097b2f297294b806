"""Mutation handlers — pure transformations of the entity store snapshot.

Every handler takes the current ``StoreSnapshot`` plus a payload and returns
a ``MutationResult`` holding the next snapshot. Handlers never edit records
in place and never raise for a missing target: they report
``MutationOutcome.NOT_FOUND`` and hand back the snapshot unchanged.
"""

import re
from collections.abc import Callable, Iterable
from dataclasses import dataclass, replace
from enum import Enum
from typing import Any

from dashboard.application.schemas.client import ClientPayload
from dashboard.application.schemas.invoice import InvoicePayload
from dashboard.application.schemas.project import ProjectPayload
from dashboard.application.schemas.user import ProfileUpdate
from dashboard.domain.entities import (
    INVOICE_ID_PREFIX,
    ChecklistItem,
    Client,
    Invoice,
    Project,
    StoreSnapshot,
    default_checklist,
)

IdFactory = Callable[[], int]

_INVOICE_ID_PATTERN = re.compile(rf"^{INVOICE_ID_PREFIX}(\d+)$")


class MutationOutcome(str, Enum):
    """How a mutation ended."""

    APPLIED = "applied"
    NOT_FOUND = "not_found"
    REJECTED = "rejected"


@dataclass(frozen=True)
class MutationResult:
    """Next snapshot plus what happened; ``entity`` is the record touched."""

    snapshot: StoreSnapshot
    outcome: MutationOutcome
    entity: Any = None

    @property
    def applied(self) -> bool:
        return self.outcome is MutationOutcome.APPLIED


def _not_found(snapshot: StoreSnapshot) -> MutationResult:
    return MutationResult(snapshot, MutationOutcome.NOT_FOUND)


# ── Clients ──────────────────────────────────────────────────────────


def submit_client(
    snapshot: StoreSnapshot, payload: ClientPayload, id_factory: IdFactory
) -> MutationResult:
    """Create a client, or replace the one with ``payload.id``.

    A rename is carried over to every project and invoice that referenced
    the old name, unless another client still goes by that name.
    """
    fields = payload.model_dump(exclude={"id"})

    if payload.id is None:
        client = Client(id=id_factory(), **fields)
        return MutationResult(
            replace(snapshot, clients=snapshot.clients + (client,)),
            MutationOutcome.APPLIED,
            client,
        )

    existing = snapshot.find_client(payload.id)
    if existing is None:
        return _not_found(snapshot)

    client = Client(id=payload.id, **fields)
    next_snapshot = replace(
        snapshot,
        clients=tuple(client if c.id == client.id else c for c in snapshot.clients),
    )
    if existing.name != client.name:
        next_snapshot = _rename_client_references(next_snapshot, existing.name, client.name)
    return MutationResult(next_snapshot, MutationOutcome.APPLIED, client)


def _rename_client_references(
    snapshot: StoreSnapshot, old_name: str, new_name: str
) -> StoreSnapshot:
    if any(c.name == old_name for c in snapshot.clients):
        return snapshot
    return replace(
        snapshot,
        projects=tuple(
            replace(p, client_name=new_name) if p.client_name == old_name else p
            for p in snapshot.projects
        ),
        invoices=tuple(
            replace(i, client_name=new_name) if i.client_name == old_name else i
            for i in snapshot.invoices
        ),
    )


def confirm_delete_client(snapshot: StoreSnapshot, target: Client) -> MutationResult:
    """Remove a client and every project that references it by name."""
    stored = snapshot.find_client(target.id)
    if stored is None:
        return _not_found(snapshot)
    return MutationResult(
        replace(
            snapshot,
            clients=tuple(c for c in snapshot.clients if c.id != stored.id),
            projects=tuple(p for p in snapshot.projects if p.client_name != stored.name),
        ),
        MutationOutcome.APPLIED,
        stored,
    )


# ── Projects ─────────────────────────────────────────────────────────


def submit_project(
    snapshot: StoreSnapshot, payload: ProjectPayload, id_factory: IdFactory
) -> MutationResult:
    """Create a project with the default checklist, or replace one in place."""
    fields = payload.model_dump(exclude={"id", "checklist", "image_urls"})

    if payload.id is None:
        project = Project(
            id=id_factory(),
            checklist=default_checklist(),
            image_urls=list(payload.image_urls or []),
            **fields,
        )
        return MutationResult(
            replace(snapshot, projects=snapshot.projects + (project,)),
            MutationOutcome.APPLIED,
            project,
        )

    existing = snapshot.find_project(payload.id)
    if existing is None:
        return _not_found(snapshot)

    if payload.checklist is not None:
        checklist = [ChecklistItem(**item.model_dump()) for item in payload.checklist]
    else:
        checklist = [replace(item) for item in existing.checklist]
    image_urls = payload.image_urls if payload.image_urls is not None else existing.image_urls
    if "notes" not in payload.model_fields_set:
        fields["notes"] = existing.notes

    project = Project(
        id=payload.id,
        checklist=checklist,
        image_urls=list(image_urls),
        **fields,
    )
    return MutationResult(
        _with_project(snapshot, project), MutationOutcome.APPLIED, project
    )


def confirm_delete_project(snapshot: StoreSnapshot, target: Project) -> MutationResult:
    stored = snapshot.find_project(target.id)
    if stored is None:
        return _not_found(snapshot)
    return MutationResult(
        replace(snapshot, projects=tuple(p for p in snapshot.projects if p.id != stored.id)),
        MutationOutcome.APPLIED,
        stored,
    )


def upload_project_image(
    snapshot: StoreSnapshot, project_id: int, image_url: str
) -> MutationResult:
    return _update_project(
        snapshot, project_id, lambda p: replace(p, image_urls=[*p.image_urls, image_url])
    )


def delete_project_image(
    snapshot: StoreSnapshot, project_id: int, image_url: str
) -> MutationResult:
    """Remove every occurrence of ``image_url`` from the project's images."""
    return _update_project(
        snapshot,
        project_id,
        lambda p: replace(p, image_urls=[url for url in p.image_urls if url != image_url]),
    )


def set_project_notes(snapshot: StoreSnapshot, project_id: int, notes: str) -> MutationResult:
    return _update_project(snapshot, project_id, lambda p: replace(p, notes=notes))


def toggle_checklist_item(
    snapshot: StoreSnapshot, project_id: int, item_id: str
) -> MutationResult:
    """Flip the ``completed`` flag of one checklist item."""
    project = snapshot.find_project(project_id)
    if project is None or not any(item.id == item_id for item in project.checklist):
        return _not_found(snapshot)
    checklist = [
        replace(item, completed=not item.completed) if item.id == item_id else item
        for item in project.checklist
    ]
    updated = replace(project, checklist=checklist)
    return MutationResult(_with_project(snapshot, updated), MutationOutcome.APPLIED, updated)


def _update_project(
    snapshot: StoreSnapshot, project_id: int, change: Callable[[Project], Project]
) -> MutationResult:
    project = snapshot.find_project(project_id)
    if project is None:
        return _not_found(snapshot)
    updated = change(project)
    return MutationResult(_with_project(snapshot, updated), MutationOutcome.APPLIED, updated)


def _with_project(snapshot: StoreSnapshot, project: Project) -> StoreSnapshot:
    return replace(
        snapshot,
        projects=tuple(project if p.id == project.id else p for p in snapshot.projects),
    )


# ── Invoices ─────────────────────────────────────────────────────────


def next_invoice_id(invoices: Iterable[Invoice]) -> str:
    """Return the id following the highest well-formed ``BX<digits>`` id.

    Ids that do not match the pattern are ignored.
    """
    highest = 0
    for invoice in invoices:
        match = _INVOICE_ID_PATTERN.match(invoice.id)
        if match:
            highest = max(highest, int(match.group(1)))
    return f"{INVOICE_ID_PREFIX}{highest + 1:04d}"


def submit_invoice(snapshot: StoreSnapshot, payload: InvoicePayload) -> MutationResult:
    """Replace the invoice with ``payload.id`` if it exists, else append it."""
    invoice = Invoice(**payload.model_dump())
    if snapshot.find_invoice(invoice.id) is not None:
        invoices = tuple(invoice if i.id == invoice.id else i for i in snapshot.invoices)
    else:
        invoices = snapshot.invoices + (invoice,)
    return MutationResult(
        replace(snapshot, invoices=invoices), MutationOutcome.APPLIED, invoice
    )


def confirm_delete_invoice(snapshot: StoreSnapshot, target: Invoice) -> MutationResult:
    if snapshot.find_invoice(target.id) is None:
        return _not_found(snapshot)
    return MutationResult(
        replace(snapshot, invoices=tuple(i for i in snapshot.invoices if i.id != target.id)),
        MutationOutcome.APPLIED,
        target,
    )


# ── Profile ──────────────────────────────────────────────────────────


def update_profile(snapshot: StoreSnapshot, update: ProfileUpdate) -> MutationResult:
    """Merge a partial profile into the signed-in identity and its account.

    A new password is written to the account only; the signed-in identity
    never holds one. An email already used by another account is REJECTED.
    """
    current = snapshot.current_user
    if current is None:
        return _not_found(snapshot)

    changes = update.model_dump(exclude_unset=True, exclude_none=True)
    email = changes.get("email")
    if email is not None and any(u.email == email and u.id != current.id for u in snapshot.users):
        return MutationResult(snapshot, MutationOutcome.REJECTED)
    password = changes.pop("password", None)
    account_changes = dict(changes, password=password) if password else changes

    updated_current = replace(current, **changes)
    users = tuple(
        replace(u, **account_changes) if u.id == current.id else u for u in snapshot.users
    )
    return MutationResult(
        replace(snapshot, users=users, current_user=updated_current.without_password()),
        MutationOutcome.APPLIED,
        updated_current,
    )
