"""Domain entity for projects and their delivery checklist."""

from dataclasses import dataclass, field, replace
from enum import Enum


class ProjectStatus(str, Enum):
    """Lifecycle states of a project."""

    IN_PROGRESS = "In Progress"
    COMPLETED = "Completed"
    ON_HOLD = "On Hold"


class ServiceType(str, Enum):
    """Kind of work sold to the client."""

    WEB_DEVELOPMENT = "Web Development"
    MOBILE_APP = "Mobile App"
    UI_UX_DESIGN = "UI/UX Design"
    BRANDING = "Branding"
    DIGITAL_MARKETING = "Digital Marketing"
    CONSULTING = "Consulting"
    E_COMMERCE = "E-commerce"
    SEO = "SEO"
    CONTENT_CREATION = "Content Creation"
    SOCIAL_MEDIA = "Social Media"


@dataclass
class ChecklistItem:
    """One step of a project's delivery checklist."""

    id: str
    label: str
    completed: bool = False


@dataclass
class Project:
    """A piece of work delivered for a client.

    ``client_name`` is a denormalized reference to ``Client.name``.
    """

    id: int
    name: str
    client_name: str
    status: ProjectStatus = ProjectStatus.IN_PROGRESS
    service_type: ServiceType = ServiceType.WEB_DEVELOPMENT
    notes: str | None = None
    checklist: list[ChecklistItem] = field(default_factory=list)
    image_urls: list[str] = field(default_factory=list)


DEFAULT_PROJECT_CHECKLIST: tuple[ChecklistItem, ...] = (
    ChecklistItem(id="discovery", label="Discovery call held"),
    ChecklistItem(id="proposal", label="Proposal approved"),
    ChecklistItem(id="contract", label="Contract signed"),
    ChecklistItem(id="deposit", label="Deposit received"),
    ChecklistItem(id="kickoff", label="Kickoff meeting"),
    ChecklistItem(id="delivery", label="Final delivery"),
    ChecklistItem(id="feedback", label="Client feedback collected"),
)


def default_checklist() -> list[ChecklistItem]:
    """Return a fresh copy of the default checklist.

    Items are copied one by one so that no two projects share an item.
    """
    return [replace(item) for item in DEFAULT_PROJECT_CHECKLIST]
