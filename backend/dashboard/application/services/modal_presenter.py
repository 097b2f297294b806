"""Builds the dialog model for the open modal state."""

from dashboard.application.services.mutations import next_invoice_id
from dashboard.domain.entities import (
    AddClient,
    AddInvoice,
    AddProject,
    Closed,
    DeleteClient,
    DeleteInvoice,
    DeleteProject,
    EditClient,
    EditInvoice,
    EditProfile,
    EditProject,
    ModalState,
    ModalView,
    ProjectStatus,
    StoreSnapshot,
)


def describe_modal(modal: ModalState, snapshot: StoreSnapshot) -> ModalView:
    """Return title, target and form options for ``modal``."""
    kind = modal.kind.value
    client_names = [c.name for c in snapshot.clients]

    if isinstance(modal, Closed):
        return ModalView(kind=kind)

    if isinstance(modal, (AddClient, EditClient)):
        editing = isinstance(modal, EditClient)
        return ModalView(
            kind=kind,
            title="Edit Client" if editing else "Add New Client",
            target=modal.client if editing else None,
        )

    if isinstance(modal, DeleteClient):
        return ModalView(
            kind=kind,
            title="Delete Client",
            target=modal.client,
            message=(
                f"Are you sure you want to delete {modal.client.name}? "
                "This will also remove their associated projects."
            ),
        )

    if isinstance(modal, (AddProject, EditProject)):
        editing = isinstance(modal, EditProject)
        return ModalView(
            kind=kind,
            title="Edit Project" if editing else "Add New Project",
            target=modal.project if editing else None,
            client_names=client_names,
        )

    if isinstance(modal, DeleteProject):
        return ModalView(
            kind=kind,
            title="Delete Project",
            target=modal.project,
            message=f'Are you sure you want to delete the project "{modal.project.name}"?',
        )

    if isinstance(modal, (AddInvoice, EditInvoice)):
        editing = isinstance(modal, EditInvoice)
        return ModalView(
            kind=kind,
            title="Edit Invoice" if editing else "Create New Invoice",
            target=modal.invoice if editing else None,
            client_names=client_names,
            next_invoice_id=None if editing else next_invoice_id(snapshot.invoices),
            active_projects=[
                p for p in snapshot.projects if p.status is ProjectStatus.IN_PROGRESS
            ],
        )

    if isinstance(modal, DeleteInvoice):
        return ModalView(
            kind=kind,
            title="Delete Invoice",
            target=modal.invoice,
            message=f"Are you sure you want to delete invoice {modal.invoice.id}?",
        )

    if isinstance(modal, EditProfile):
        return ModalView(kind=kind, title="Edit Profile", target=modal.user)

    raise TypeError(f"Unknown modal state: {modal!r}")
