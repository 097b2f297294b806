"""View selector — active section tracking and section-level access control."""

import logging
from collections.abc import Callable
from typing import Any

from dashboard.domain.entities import (
    ProjectStatus,
    RenderedView,
    Section,
    StoreSnapshot,
    User,
    UserRole,
    ViewKind,
)

logger = logging.getLogger(__name__)

ACCESS_DENIED_MESSAGE = "You do not have permission to view this section."

# Sections whose content is replaced by the access-denied view for a role
_RESTRICTED_SECTIONS: dict[Section, frozenset[UserRole]] = {
    Section.FINANCE: frozenset({UserRole.GUEST}),
}


class ViewSelector:
    """Tracks the active section and renders it from a store snapshot.

    Access control is applied when rendering, not when navigating: a guest
    can navigate to Finance, but the rendered view is access-denied.
    """

    def __init__(self, preview_limit: int = 4):
        self._preview_limit = preview_limit
        self._active = Section.DASHBOARD
        self._renderers: dict[Section, Callable[[StoreSnapshot], tuple[ViewKind, dict[str, Any]]]] = {
            Section.DASHBOARD: self._render_dashboard,
            Section.CLIENTS: self._render_clients,
            Section.PROJECTS: self._render_projects,
            Section.FINANCE: self._render_finance,
            Section.REPORTS: self._render_reports,
            Section.SETTINGS: self._render_settings,
        }

    @property
    def active_section(self) -> Section:
        return self._active

    def navigate(self, section: Section) -> Section:
        self._active = section
        return section

    def reset(self) -> None:
        self._active = Section.DASHBOARD

    @staticmethod
    def can_access(user: User, section: Section) -> bool:
        return user.role not in _RESTRICTED_SECTIONS.get(section, frozenset())

    def render(self, snapshot: StoreSnapshot, revision: int = 0) -> RenderedView:
        section = self._active
        user = snapshot.current_user

        if user is None:
            return RenderedView(ViewKind.SIGN_IN, section, revision)

        if not self.can_access(user, section):
            logger.info("Access denied: %s (%s) -> %s", user.name, user.role.value, section.value)
            return RenderedView(
                ViewKind.ACCESS_DENIED,
                section,
                revision,
                {"message": ACCESS_DENIED_MESSAGE},
            )

        kind, content = self._renderers[section](snapshot)
        return RenderedView(kind, section, revision, content)

    # ── Section renderers ────────────────────────────────────────────

    def _render_dashboard(self, snapshot: StoreSnapshot) -> tuple[ViewKind, dict[str, Any]]:
        limit = self._preview_limit
        return ViewKind.DASHBOARD, {
            "clients": list(snapshot.clients[:limit]),
            "projects": list(snapshot.projects[:limit]),
            "client_count": len(snapshot.clients),
            "project_count": len(snapshot.projects),
            "active_project_count": sum(
                1 for p in snapshot.projects if p.status is ProjectStatus.IN_PROGRESS
            ),
        }

    def _render_clients(self, snapshot: StoreSnapshot) -> tuple[ViewKind, dict[str, Any]]:
        return ViewKind.CLIENTS, {"clients": list(snapshot.clients)}

    def _render_projects(self, snapshot: StoreSnapshot) -> tuple[ViewKind, dict[str, Any]]:
        return ViewKind.PROJECTS, {"projects": list(snapshot.projects)}

    def _render_finance(self, snapshot: StoreSnapshot) -> tuple[ViewKind, dict[str, Any]]:
        return ViewKind.FINANCE, {
            "invoices": list(snapshot.invoices),
            "projects": list(snapshot.projects),
        }

    def _render_reports(self, snapshot: StoreSnapshot) -> tuple[ViewKind, dict[str, Any]]:
        return ViewKind.REPORTS, {"projects": list(snapshot.projects)}

    def _render_settings(self, snapshot: StoreSnapshot) -> tuple[ViewKind, dict[str, Any]]:
        return ViewKind.SETTINGS, {}
