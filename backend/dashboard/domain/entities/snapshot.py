"""Immutable snapshot of every collection held by the entity store."""

from dataclasses import dataclass, field

from .client import Client
from .invoice import Invoice
from .project import Project
from .user import User


@dataclass(frozen=True)
class StoreSnapshot:
    """The complete business state at one point in time.

    Snapshots are never edited in place; mutation handlers build a new one
    with ``dataclasses.replace`` and hand it to the store.
    """

    clients: tuple[Client, ...] = ()
    projects: tuple[Project, ...] = ()
    invoices: tuple[Invoice, ...] = ()
    users: tuple[User, ...] = ()
    current_user: User | None = field(default=None)

    def find_client(self, client_id: int) -> Client | None:
        return next((c for c in self.clients if c.id == client_id), None)

    def find_project(self, project_id: int) -> Project | None:
        return next((p for p in self.projects if p.id == project_id), None)

    def find_invoice(self, invoice_id: str) -> Invoice | None:
        return next((i for i in self.invoices if i.id == invoice_id), None)

    def find_user(self, user_id: int) -> User | None:
        return next((u for u in self.users if u.id == user_id), None)

    def max_numeric_id(self) -> int:
        """Largest integer identity across clients, projects and users."""
        ids = [c.id for c in self.clients]
        ids += [p.id for p in self.projects]
        ids += [u.id for u in self.users]
        if self.current_user is not None:
            ids.append(self.current_user.id)
        return max(ids, default=0)
