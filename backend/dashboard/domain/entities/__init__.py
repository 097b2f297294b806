from .client import Client, ClientStatus
from .project import (
    DEFAULT_PROJECT_CHECKLIST,
    ChecklistItem,
    Project,
    ProjectStatus,
    ServiceType,
    default_checklist,
)
from .invoice import INVOICE_ID_PREFIX, Invoice, InvoiceStatus
from .user import User, UserRole
from .snapshot import StoreSnapshot
from .modal import (
    CLOSED,
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
    ModalKind,
    ModalState,
)
from .view import ModalView, RenderedView, Section, ViewKind

__all__ = [
    "Client",
    "ClientStatus",
    "DEFAULT_PROJECT_CHECKLIST",
    "ChecklistItem",
    "Project",
    "ProjectStatus",
    "ServiceType",
    "default_checklist",
    "INVOICE_ID_PREFIX",
    "Invoice",
    "InvoiceStatus",
    "User",
    "UserRole",
    "StoreSnapshot",
    "CLOSED",
    "AddClient",
    "AddInvoice",
    "AddProject",
    "Closed",
    "DeleteClient",
    "DeleteInvoice",
    "DeleteProject",
    "EditClient",
    "EditInvoice",
    "EditProfile",
    "EditProject",
    "ModalKind",
    "ModalState",
    "ModalView",
    "RenderedView",
    "Section",
    "ViewKind",
]
