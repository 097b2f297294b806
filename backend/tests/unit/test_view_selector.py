"""Unit tests for section rendering and access control."""

from dataclasses import replace

import pytest

from dashboard.application.services import ViewSelector
from dashboard.application.services.view_selector import ACCESS_DENIED_MESSAGE
from dashboard.domain.entities import Section, StoreSnapshot, User, UserRole, ViewKind


def _as(snapshot: StoreSnapshot, role: UserRole) -> StoreSnapshot:
    return replace(snapshot, current_user=User(id=99, name=role.value, email="", role=role))


def test_starts_on_dashboard():
    assert ViewSelector().active_section is Section.DASHBOARD


def test_signed_out_renders_sign_in(snapshot: StoreSnapshot):
    view = ViewSelector().render(snapshot)

    assert view.kind is ViewKind.SIGN_IN
    assert view.content == {}


def test_dashboard_is_condensed(snapshot: StoreSnapshot):
    view = ViewSelector(preview_limit=2).render(_as(snapshot, UserRole.USER), revision=7)

    assert view.kind is ViewKind.DASHBOARD
    assert view.revision == 7
    assert [p.id for p in view.content["projects"]] == [10, 11]
    assert view.content["project_count"] == 3
    assert view.content["active_project_count"] == 1
    assert len(view.content["clients"]) == 2


def test_guest_sees_access_denied_on_finance(snapshot: StoreSnapshot):
    selector = ViewSelector()

    assert selector.navigate(Section.FINANCE) is Section.FINANCE
    view = selector.render(_as(snapshot, UserRole.GUEST))

    assert selector.active_section is Section.FINANCE
    assert view.section is Section.FINANCE
    assert view.kind is ViewKind.ACCESS_DENIED
    assert view.content == {"message": ACCESS_DENIED_MESSAGE}


@pytest.mark.parametrize("role", [UserRole.ADMIN, UserRole.USER])
def test_staff_see_finance(snapshot: StoreSnapshot, role):
    selector = ViewSelector()
    selector.navigate(Section.FINANCE)

    view = selector.render(_as(snapshot, role))

    assert view.kind is ViewKind.FINANCE
    assert [i.id for i in view.content["invoices"]] == ["BX0001", "BX0003"]


@pytest.mark.parametrize(
    "section, kind",
    [
        (Section.CLIENTS, ViewKind.CLIENTS),
        (Section.PROJECTS, ViewKind.PROJECTS),
        (Section.REPORTS, ViewKind.REPORTS),
        (Section.SETTINGS, ViewKind.SETTINGS),
    ],
)
def test_guest_can_see_other_sections(snapshot: StoreSnapshot, section, kind):
    selector = ViewSelector()
    selector.navigate(section)

    assert selector.render(_as(snapshot, UserRole.GUEST)).kind is kind


def test_reset_returns_to_dashboard():
    selector = ViewSelector()
    selector.navigate(Section.REPORTS)
    selector.reset()

    assert selector.active_section is Section.DASHBOARD
