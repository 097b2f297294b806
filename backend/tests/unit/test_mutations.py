"""Unit tests for the pure mutation handlers."""

import itertools
from dataclasses import replace
from datetime import date

import pytest

from dashboard.application.schemas import (
    ChecklistItemSchema,
    ClientPayload,
    InvoicePayload,
    ProfileUpdate,
    ProjectPayload,
)
from dashboard.application.services import mutations
from dashboard.application.services.mutations import MutationOutcome
from dashboard.domain.entities import (
    DEFAULT_PROJECT_CHECKLIST,
    InvoiceStatus,
    ProjectStatus,
    StoreSnapshot,
)


@pytest.fixture
def ids():
    counter = itertools.count(1000)
    return lambda: next(counter)


# ── Clients ──


def test_submit_client_without_id_appends_with_new_identity(snapshot: StoreSnapshot, ids):
    result = mutations.submit_client(snapshot, ClientPayload(name="Initech"), ids)

    assert result.outcome is MutationOutcome.APPLIED
    assert result.entity.id == 1000
    assert [c.name for c in result.snapshot.clients] == ["Acme", "Globex", "Initech"]
    assert len(snapshot.clients) == 2


def test_repeated_client_creation_yields_distinct_ids(snapshot: StoreSnapshot, ids):
    for name in ("A", "B", "C", "A"):
        snapshot = mutations.submit_client(snapshot, ClientPayload(name=name), ids).snapshot

    client_ids = [c.id for c in snapshot.clients]
    assert len(client_ids) == len(set(client_ids))


def test_submit_client_with_id_replaces_record(snapshot: StoreSnapshot, ids):
    payload = ClientPayload(id=2, name="Globex", industry="Energy", status="active")

    result = mutations.submit_client(snapshot, payload, ids)

    globex = result.snapshot.find_client(2)
    assert globex.industry == "Energy"
    assert globex.status.value == "active"
    assert len(result.snapshot.clients) == 2


def test_submit_client_unknown_id_is_not_found(snapshot: StoreSnapshot, ids):
    result = mutations.submit_client(snapshot, ClientPayload(id=99, name="Ghost"), ids)

    assert result.outcome is MutationOutcome.NOT_FOUND
    assert result.snapshot is snapshot


def test_renaming_client_carries_name_to_projects_and_invoices(snapshot: StoreSnapshot, ids):
    result = mutations.submit_client(snapshot, ClientPayload(id=1, name="Acme Corp"), ids)

    assert {p.client_name for p in result.snapshot.projects if p.id in (10, 11)} == {"Acme Corp"}
    assert result.snapshot.find_invoice("BX0001").client_name == "Acme Corp"
    assert result.snapshot.find_project(12).client_name == "Globex"


def test_delete_client_cascades_to_projects_by_name(snapshot: StoreSnapshot):
    acme = snapshot.find_client(1)

    result = mutations.confirm_delete_client(snapshot, acme)

    assert [c.name for c in result.snapshot.clients] == ["Globex"]
    assert [p.id for p in result.snapshot.projects] == [12]
    # invoices are not part of the cascade
    assert len(result.snapshot.invoices) == 2


def test_delete_missing_client_is_not_found(snapshot: StoreSnapshot):
    acme = snapshot.find_client(1)
    after = mutations.confirm_delete_client(snapshot, acme).snapshot

    result = mutations.confirm_delete_client(after, acme)

    assert result.outcome is MutationOutcome.NOT_FOUND
    assert result.snapshot is after


# ── Projects ──


def test_new_project_gets_default_checklist(snapshot: StoreSnapshot, ids):
    payload = ProjectPayload(name="X", client_name="Acme", status="In Progress", service_type="Web Development")

    result = mutations.submit_project(snapshot, payload, ids)

    project = result.entity
    assert project.id == 1000
    assert project.status is ProjectStatus.IN_PROGRESS
    assert project.checklist == list(DEFAULT_PROJECT_CHECKLIST)
    assert all(a is not b for a, b in zip(project.checklist, DEFAULT_PROJECT_CHECKLIST))


def test_new_project_checklists_are_independent(snapshot: StoreSnapshot, ids):
    payload = ProjectPayload(name="X", client_name="Acme")
    first = mutations.submit_project(snapshot, payload, ids)
    second = mutations.submit_project(first.snapshot, payload, ids)

    first.entity.checklist[0].completed = True

    assert second.entity.checklist[0].completed is False
    assert DEFAULT_PROJECT_CHECKLIST[0].completed is False


def test_edit_project_keeps_submitted_checklist(snapshot: StoreSnapshot, ids):
    payload = ProjectPayload(
        id=10,
        name="Website v2",
        client_name="Acme",
        checklist=[ChecklistItemSchema(id="custom", label="Custom step", completed=True)],
    )

    result = mutations.submit_project(snapshot, payload, ids)

    project = result.snapshot.find_project(10)
    assert project.name == "Website v2"
    assert [(i.id, i.completed) for i in project.checklist] == [("custom", True)]
    assert project.image_urls == ["a.png"]


def test_edit_project_without_checklist_keeps_stored_one(snapshot: StoreSnapshot, ids):
    result = mutations.submit_project(snapshot, ProjectPayload(id=11, name="Logo", client_name="Acme"), ids)

    assert len(result.snapshot.find_project(11).checklist) == len(DEFAULT_PROJECT_CHECKLIST)


def test_edit_project_without_notes_keeps_stored_notes(snapshot: StoreSnapshot, ids):
    snapshot = mutations.set_project_notes(snapshot, 10, "Client loved the mockups").snapshot
    snapshot = mutations.upload_project_image(snapshot, 10, "b.png").snapshot

    result = mutations.submit_project(
        snapshot, ProjectPayload(id=10, name="Website", client_name="Acme", status="Completed"), ids
    )

    project = result.snapshot.find_project(10)
    assert project.status is ProjectStatus.COMPLETED
    assert project.notes == "Client loved the mockups"
    assert project.image_urls == ["a.png", "b.png"]


def test_edit_project_with_explicit_notes_overwrites_them(snapshot: StoreSnapshot, ids):
    snapshot = mutations.set_project_notes(snapshot, 10, "Draft").snapshot

    result = mutations.submit_project(
        snapshot, ProjectPayload(id=10, name="Website", client_name="Acme", notes=None), ids
    )

    assert result.snapshot.find_project(10).notes is None


def test_delete_project_has_no_cascade(snapshot: StoreSnapshot):
    result = mutations.confirm_delete_project(snapshot, snapshot.find_project(10))

    assert [p.id for p in result.snapshot.projects] == [11, 12]
    assert len(result.snapshot.clients) == 2


def test_upload_image_touches_only_target_project(snapshot: StoreSnapshot):
    result = mutations.upload_project_image(snapshot, 10, "b.png")

    assert result.snapshot.find_project(10).image_urls == ["a.png", "b.png"]
    assert result.snapshot.find_project(11).image_urls == []
    assert snapshot.find_project(10).image_urls == ["a.png"]


def test_upload_image_to_missing_project_is_noop(snapshot: StoreSnapshot):
    result = mutations.upload_project_image(snapshot, 404, "b.png")

    assert result.outcome is MutationOutcome.NOT_FOUND
    assert result.snapshot is snapshot


def test_delete_image_removes_every_occurrence(snapshot: StoreSnapshot):
    snapshot = mutations.upload_project_image(snapshot, 10, "b.png").snapshot
    snapshot = mutations.upload_project_image(snapshot, 10, "a.png").snapshot

    result = mutations.delete_project_image(snapshot, 10, "a.png")

    assert result.snapshot.find_project(10).image_urls == ["b.png"]


def test_set_notes_only_changes_target(snapshot: StoreSnapshot):
    result = mutations.set_project_notes(snapshot, 11, "Shipped")

    assert result.snapshot.find_project(11).notes == "Shipped"
    assert result.snapshot.find_project(10).notes is None


def test_toggle_checklist_item(snapshot: StoreSnapshot):
    result = mutations.toggle_checklist_item(snapshot, 10, "proposal")

    toggled = {i.id: i.completed for i in result.snapshot.find_project(10).checklist}
    assert toggled["proposal"] is True
    assert all(not i.completed for i in result.snapshot.find_project(11).checklist)
    assert all(not i.completed for i in snapshot.find_project(10).checklist)


def test_toggle_unknown_checklist_item_is_not_found(snapshot: StoreSnapshot):
    assert mutations.toggle_checklist_item(snapshot, 10, "nope").outcome is MutationOutcome.NOT_FOUND


# ── Invoices ──


def _invoice_payload(invoice_id: str, **overrides) -> InvoicePayload:
    fields = dict(id=invoice_id, client_name="Acme", amount=100, due_date=date(2026, 3, 1))
    fields.update(overrides)
    return InvoicePayload(**fields)


def test_submit_invoice_appends_new_id(snapshot: StoreSnapshot):
    result = mutations.submit_invoice(snapshot, _invoice_payload("BX0004"))

    assert [i.id for i in result.snapshot.invoices] == ["BX0001", "BX0003", "BX0004"]


def test_submit_invoice_replaces_existing_id(snapshot: StoreSnapshot):
    result = mutations.submit_invoice(snapshot, _invoice_payload("BX0003", status="Overdue"))

    assert len(result.snapshot.invoices) == 2
    assert result.snapshot.find_invoice("BX0003").status is InvoiceStatus.OVERDUE


def test_delete_invoice(snapshot: StoreSnapshot):
    result = mutations.confirm_delete_invoice(snapshot, snapshot.find_invoice("BX0001"))

    assert [i.id for i in result.snapshot.invoices] == ["BX0003"]


# ── Profile ──


def test_update_profile_without_session_is_noop(snapshot: StoreSnapshot):
    result = mutations.update_profile(snapshot, ProfileUpdate(name="Nobody"))

    assert result.outcome is MutationOutcome.NOT_FOUND
    assert result.snapshot is snapshot


def test_update_profile_merges_into_identity_and_account(snapshot: StoreSnapshot):
    signed_in = replace(snapshot, current_user=snapshot.users[1].without_password())

    result = mutations.update_profile(signed_in, ProfileUpdate(name="Renamed", password="new-secret"))

    assert result.snapshot.current_user.name == "Renamed"
    assert result.snapshot.current_user.password is None
    account = result.snapshot.find_user(2)
    assert account.name == "Renamed"
    assert account.password == "new-secret"
    assert account.email == "user@example.com"
    assert result.snapshot.find_user(1).name == "Admin User"


def test_update_profile_rejects_email_of_another_account(snapshot: StoreSnapshot):
    signed_in = replace(snapshot, current_user=snapshot.users[1].without_password())

    result = mutations.update_profile(signed_in, ProfileUpdate(email="admin@example.com"))

    assert result.outcome is MutationOutcome.REJECTED
    assert result.snapshot is signed_in
    assert [u.email for u in signed_in.users] == ["admin@example.com", "user@example.com"]


def test_update_profile_may_keep_own_email(snapshot: StoreSnapshot):
    signed_in = replace(snapshot, current_user=snapshot.users[1].without_password())

    result = mutations.update_profile(signed_in, ProfileUpdate(email="user@example.com", name="Same Mail"))

    assert result.outcome is MutationOutcome.APPLIED
    assert result.snapshot.find_user(2).name == "Same Mail"
