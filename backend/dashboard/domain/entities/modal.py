"""Modal state machine — which single dialog, if any, is open.

Each state is its own frozen dataclass; ``ModalState`` is the union of all
of them, so exactly one state is active at any time.
"""

from dataclasses import dataclass
from enum import Enum
from typing import ClassVar, Union

from .client import Client
from .invoice import Invoice
from .project import Project
from .user import User


class ModalKind(str, Enum):
    """Wire name of every modal state."""

    CLOSED = "closed"
    ADD_CLIENT = "add_client"
    EDIT_CLIENT = "edit_client"
    DELETE_CLIENT = "delete_client"
    ADD_PROJECT = "add_project"
    EDIT_PROJECT = "edit_project"
    DELETE_PROJECT = "delete_project"
    ADD_INVOICE = "add_invoice"
    EDIT_INVOICE = "edit_invoice"
    DELETE_INVOICE = "delete_invoice"
    EDIT_PROFILE = "edit_profile"


@dataclass(frozen=True)
class Closed:
    kind: ClassVar[ModalKind] = ModalKind.CLOSED


@dataclass(frozen=True)
class AddClient:
    kind: ClassVar[ModalKind] = ModalKind.ADD_CLIENT


@dataclass(frozen=True)
class EditClient:
    client: Client
    kind: ClassVar[ModalKind] = ModalKind.EDIT_CLIENT


@dataclass(frozen=True)
class DeleteClient:
    client: Client
    kind: ClassVar[ModalKind] = ModalKind.DELETE_CLIENT


@dataclass(frozen=True)
class AddProject:
    kind: ClassVar[ModalKind] = ModalKind.ADD_PROJECT


@dataclass(frozen=True)
class EditProject:
    project: Project
    kind: ClassVar[ModalKind] = ModalKind.EDIT_PROJECT


@dataclass(frozen=True)
class DeleteProject:
    project: Project
    kind: ClassVar[ModalKind] = ModalKind.DELETE_PROJECT


@dataclass(frozen=True)
class AddInvoice:
    kind: ClassVar[ModalKind] = ModalKind.ADD_INVOICE


@dataclass(frozen=True)
class EditInvoice:
    invoice: Invoice
    kind: ClassVar[ModalKind] = ModalKind.EDIT_INVOICE


@dataclass(frozen=True)
class DeleteInvoice:
    invoice: Invoice
    kind: ClassVar[ModalKind] = ModalKind.DELETE_INVOICE


@dataclass(frozen=True)
class EditProfile:
    user: User
    kind: ClassVar[ModalKind] = ModalKind.EDIT_PROFILE


ModalState = Union[
    Closed,
    AddClient,
    EditClient,
    DeleteClient,
    AddProject,
    EditProject,
    DeleteProject,
    AddInvoice,
    EditInvoice,
    DeleteInvoice,
    EditProfile,
]

CLOSED = Closed()
