"""Top-level dashboard sections and the rendered view handed to callers."""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any


class Section(str, Enum):
    """Sections reachable from the sidebar."""

    DASHBOARD = "Dashboard"
    CLIENTS = "Clients"
    PROJECTS = "Projects"
    FINANCE = "Finance"
    REPORTS = "Reports"
    SETTINGS = "Settings"


class ViewKind(str, Enum):
    """What was actually rendered for the requested section."""

    SIGN_IN = "sign_in"
    DASHBOARD = "dashboard"
    CLIENTS = "clients"
    PROJECTS = "projects"
    FINANCE = "finance"
    REPORTS = "reports"
    SETTINGS = "settings"
    ACCESS_DENIED = "access_denied"


@dataclass
class RenderedView:
    """Read-only view model derived from one store snapshot.

    ``section`` is what the user navigated to; ``kind`` is what they get to
    see, which differs when access control swaps the content.
    """

    kind: ViewKind
    section: Section
    revision: int
    content: dict[str, Any] = field(default_factory=dict)


@dataclass
class ModalView:
    """Everything a dialog needs to render the open modal state."""

    kind: str
    title: str | None = None
    target: Any = None
    message: str | None = None
    client_names: list[str] | None = None
    next_invoice_id: str | None = None
    active_projects: list[Any] | None = None
