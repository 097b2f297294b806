"""Dashboard controller — the single owner of session state.

Holds the entity store, the open modal and the active section, and routes
every intent through the pure mutation handlers. Handlers compute the next
snapshot; the controller commits it and closes the modal on success.
"""

from dataclasses import replace

from dashboard.application.schemas.client import ClientPayload
from dashboard.application.schemas.invoice import InvoicePayload
from dashboard.application.schemas.project import ProjectPayload
from dashboard.application.schemas.user import ProfileUpdate, RegisterRequest
from dashboard.application.services import auth_service, mutations
from dashboard.application.services.entity_store import EntityStore
from dashboard.application.services.id_sequence import IdSequence
from dashboard.application.services.modal_presenter import describe_modal
from dashboard.application.services.mutations import MutationOutcome, MutationResult
from dashboard.application.services.view_selector import ViewSelector
from dashboard.domain.entities import (
    CLOSED,
    AddClient,
    AddInvoice,
    AddProject,
    Client,
    DeleteClient,
    DeleteInvoice,
    DeleteProject,
    EditClient,
    EditInvoice,
    EditProfile,
    EditProject,
    Invoice,
    ModalKind,
    ModalState,
    ModalView,
    Project,
    RenderedView,
    Section,
    StoreSnapshot,
    User,
)
from dashboard.domain.exceptions import EntityNotFoundError, NotAuthenticatedError
from dashboard.infrastructure.logging.activity_logger import ActivityLogger, ActivityStage

alog = ActivityLogger("DashboardController")

_DEFAULT_AVATAR_BASE_URL = "https://picsum.photos/seed"


class DashboardController:
    """Mediates every read and write of a dashboard session."""

    def __init__(
        self,
        store: EntityStore,
        *,
        id_sequence: IdSequence | None = None,
        view_selector: ViewSelector | None = None,
        avatar_base_url: str = _DEFAULT_AVATAR_BASE_URL,
    ):
        self._store = store
        self._ids = id_sequence or IdSequence.after(store.snapshot)
        self._views = view_selector or ViewSelector()
        self._avatar_base_url = avatar_base_url
        self._modal: ModalState = CLOSED
        store.subscribe(self._rebind_modal)

    # ── State ────────────────────────────────────────────────────────

    @property
    def snapshot(self) -> StoreSnapshot:
        return self._store.snapshot

    @property
    def revision(self) -> int:
        return self._store.revision

    @property
    def current_user(self) -> User | None:
        return self._store.snapshot.current_user

    @property
    def active_section(self) -> Section:
        return self._views.active_section

    @property
    def modal(self) -> ModalState:
        return self._modal

    def require_user(self) -> User:
        user = self.current_user
        if user is None:
            raise NotAuthenticatedError()
        return user

    def get_client(self, client_id: int) -> Client:
        client = self.snapshot.find_client(client_id)
        if client is None:
            raise _missing("Client", client_id)
        return client

    def get_project(self, project_id: int) -> Project:
        project = self.snapshot.find_project(project_id)
        if project is None:
            raise _missing("Project", project_id)
        return project

    def get_invoice(self, invoice_id: str) -> Invoice:
        invoice = self.snapshot.find_invoice(invoice_id)
        if invoice is None:
            raise _missing("Invoice", invoice_id)
        return invoice

    # ── Auth ─────────────────────────────────────────────────────────

    def login(self, email: str, password: str | None) -> User | None:
        result = auth_service.login(self.snapshot, email, password)
        if not result.applied:
            alog.rejected(ActivityStage.AUTH, "Login failed", email=email)
            return None
        self._store.replace(result.snapshot)
        alog.event(ActivityStage.AUTH, "Signed in", user=result.entity.name, role=result.entity.role.value)
        return result.entity

    def guest_login(self) -> User:
        result = auth_service.guest_login(self.snapshot, self._ids, self._avatar_base_url)
        self._store.replace(result.snapshot)
        alog.event(ActivityStage.AUTH, "Guest session started", id=result.entity.id)
        return result.entity

    def register(self, payload: RegisterRequest) -> User | None:
        result = auth_service.register(
            self.snapshot, payload, self._ids, self._avatar_base_url
        )
        if not result.applied:
            alog.rejected(ActivityStage.AUTH, "Email already registered", email=payload.email)
            return None
        self._store.replace(result.snapshot)
        alog.event(ActivityStage.AUTH, "Account registered", id=result.entity.id, email=payload.email)
        return result.entity

    def logout(self) -> None:
        user = self.current_user
        self._store.replace(auth_service.logout(self.snapshot).snapshot)
        self._views.reset()
        self._modal = CLOSED
        alog.event(ActivityStage.AUTH, "Signed out", user=user.name if user else None)

    # ── Views ────────────────────────────────────────────────────────

    def navigate(self, section: Section) -> RenderedView:
        self._views.navigate(section)
        alog.event(ActivityStage.NAVIGATION, f"Section -> {section.value}")
        return self.render_view()

    def render_view(self) -> RenderedView:
        return self._views.render(self.snapshot, self.revision)

    # ── Modal ────────────────────────────────────────────────────────

    def open_modal(self, modal: ModalState) -> ModalState:
        self._modal = modal
        alog.event(ActivityStage.MODAL, f"Opened {modal.kind.value}")
        return modal

    def open_modal_for(self, kind: ModalKind, target_id: int | str | None = None) -> ModalState:
        """Open a modal by kind, resolving its target from the store.

        Raises ``EntityNotFoundError`` for an unknown target id and
        ``NotAuthenticatedError`` for a profile edit without a session.
        """
        if kind is ModalKind.CLOSED:
            self.close_modal()
            return self._modal
        if kind is ModalKind.ADD_CLIENT:
            return self.open_modal(AddClient())
        if kind is ModalKind.ADD_PROJECT:
            return self.open_modal(AddProject())
        if kind is ModalKind.ADD_INVOICE:
            return self.open_modal(AddInvoice())
        if kind is ModalKind.EDIT_PROFILE:
            return self.open_modal(EditProfile(self.require_user()))
        if target_id is None:
            raise _missing(kind.value, "none")
        if kind in (ModalKind.EDIT_INVOICE, ModalKind.DELETE_INVOICE):
            invoice = self.get_invoice(str(target_id))
            if kind is ModalKind.EDIT_INVOICE:
                return self.open_modal(EditInvoice(invoice))
            return self.open_modal(DeleteInvoice(invoice))

        numeric_id = _as_int_id(kind, target_id)
        if kind is ModalKind.EDIT_CLIENT:
            return self.open_modal(EditClient(self.get_client(numeric_id)))
        if kind is ModalKind.DELETE_CLIENT:
            return self.open_modal(DeleteClient(self.get_client(numeric_id)))
        if kind is ModalKind.EDIT_PROJECT:
            return self.open_modal(EditProject(self.get_project(numeric_id)))
        return self.open_modal(DeleteProject(self.get_project(numeric_id)))

    def close_modal(self) -> None:
        if self._modal is not CLOSED:
            alog.event(ActivityStage.MODAL, f"Closed {self._modal.kind.value}")
        self._modal = CLOSED

    def render_modal(self) -> ModalView:
        return describe_modal(self._modal, self.snapshot)

    def confirm_delete(self) -> MutationResult:
        """Carry out the deletion the open confirmation modal asks for."""
        modal = self._modal
        if isinstance(modal, DeleteClient):
            return self.confirm_delete_client(modal.client)
        if isinstance(modal, DeleteProject):
            return self.confirm_delete_project(modal.project)
        if isinstance(modal, DeleteInvoice):
            return self.confirm_delete_invoice(modal.invoice)
        alog.rejected(ActivityStage.MODAL, "Nothing to confirm", modal=modal.kind.value)
        return MutationResult(self.snapshot, MutationOutcome.REJECTED)

    # ── Clients ──────────────────────────────────────────────────────

    def submit_client(self, payload: ClientPayload) -> MutationResult:
        result = mutations.submit_client(self.snapshot, payload, self._ids)
        return self._commit(result, ActivityStage.CLIENT, "Client saved", close_modal=True, id=payload.id)

    def confirm_delete_client(self, target: Client) -> MutationResult:
        before = len(self.snapshot.projects)
        result = mutations.confirm_delete_client(self.snapshot, target)
        self._commit(result, ActivityStage.CLIENT, "Client deleted", close_modal=True, id=target.id)
        if result.applied:
            alog.detail(
                "Cascade removed projects",
                client=result.entity.name,
                count=before - len(result.snapshot.projects),
            )
        return result

    # ── Projects ─────────────────────────────────────────────────────

    def submit_project(self, payload: ProjectPayload) -> MutationResult:
        result = mutations.submit_project(self.snapshot, payload, self._ids)
        return self._commit(result, ActivityStage.PROJECT, "Project saved", close_modal=True, id=payload.id)

    def confirm_delete_project(self, target: Project) -> MutationResult:
        result = mutations.confirm_delete_project(self.snapshot, target)
        return self._commit(result, ActivityStage.PROJECT, "Project deleted", close_modal=True, id=target.id)

    def upload_project_image(self, project_id: int, image_url: str) -> MutationResult:
        result = mutations.upload_project_image(self.snapshot, project_id, image_url)
        return self._commit(result, ActivityStage.PROJECT, "Image added", id=project_id)

    def delete_project_image(self, project_id: int, image_url: str) -> MutationResult:
        result = mutations.delete_project_image(self.snapshot, project_id, image_url)
        return self._commit(result, ActivityStage.PROJECT, "Image removed", id=project_id)

    def set_project_notes(self, project_id: int, notes: str) -> MutationResult:
        result = mutations.set_project_notes(self.snapshot, project_id, notes)
        return self._commit(result, ActivityStage.PROJECT, "Notes updated", id=project_id)

    def toggle_checklist_item(self, project_id: int, item_id: str) -> MutationResult:
        result = mutations.toggle_checklist_item(self.snapshot, project_id, item_id)
        return self._commit(result, ActivityStage.PROJECT, "Checklist item toggled", id=project_id, item=item_id)

    # ── Invoices ─────────────────────────────────────────────────────

    def next_invoice_id(self) -> str:
        return mutations.next_invoice_id(self.snapshot.invoices)

    def submit_invoice(self, payload: InvoicePayload) -> MutationResult:
        result = mutations.submit_invoice(self.snapshot, payload)
        return self._commit(result, ActivityStage.INVOICE, "Invoice saved", close_modal=True, id=payload.id)

    def confirm_delete_invoice(self, target: Invoice) -> MutationResult:
        result = mutations.confirm_delete_invoice(self.snapshot, target)
        return self._commit(result, ActivityStage.INVOICE, "Invoice deleted", close_modal=True, id=target.id)

    # ── Profile ──────────────────────────────────────────────────────

    def update_profile(self, update: ProfileUpdate) -> MutationResult:
        result = mutations.update_profile(self.snapshot, update)
        return self._commit(result, ActivityStage.PROFILE, "Profile updated", close_modal=True)

    # ── Internals ────────────────────────────────────────────────────

    def _rebind_modal(self, snapshot: StoreSnapshot, revision: int) -> None:
        """Point an open modal at the stored version of its target.

        Report actions commit while a modal stays open, so the held record
        can go stale. A target that is gone stays as held, and confirming
        it reports NOT_FOUND.
        """
        modal = self._modal
        if isinstance(modal, (EditClient, DeleteClient)):
            target = snapshot.find_client(modal.client.id)
            field = "client"
        elif isinstance(modal, (EditProject, DeleteProject)):
            target = snapshot.find_project(modal.project.id)
            field = "project"
        elif isinstance(modal, (EditInvoice, DeleteInvoice)):
            target = snapshot.find_invoice(modal.invoice.id)
            field = "invoice"
        elif isinstance(modal, EditProfile):
            target = snapshot.current_user
            field = "user"
        else:
            return

        if target is None:
            alog.detail("Modal target no longer stored", modal=modal.kind.value, revision=revision)
            return
        self._modal = replace(modal, **{field: target})

    def _commit(
        self,
        result: MutationResult,
        stage: tuple[str, str, str],
        message: str,
        *,
        close_modal: bool = False,
        **details,
    ) -> MutationResult:
        if not result.applied:
            alog.rejected(stage, f"{message}: {result.outcome.value}", **details)
            return result
        self._store.replace(result.snapshot)
        if close_modal:
            self._modal = CLOSED
        alog.event(stage, message, **details)
        return result


def _as_int_id(kind: ModalKind, target_id: int | str) -> int:
    try:
        return int(target_id)
    except (TypeError, ValueError):
        raise _missing(kind.value, target_id) from None


def _missing(entity_type: str, entity_id: int | str) -> EntityNotFoundError:
    alog.rejected(ActivityStage.ERROR, "Unknown target", entity=entity_type, id=entity_id)
    return EntityNotFoundError(entity_type, entity_id)
