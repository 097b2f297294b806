"""Shared fixtures — a small in-memory data set."""

from datetime import date

import pytest

from dashboard.application.services import DashboardController, EntityStore, ViewSelector
from dashboard.domain.entities import (
    Client,
    ClientStatus,
    Invoice,
    InvoiceStatus,
    Project,
    ProjectStatus,
    ServiceType,
    StoreSnapshot,
    User,
    UserRole,
    default_checklist,
)


@pytest.fixture
def snapshot() -> StoreSnapshot:
    return StoreSnapshot(
        clients=(
            Client(id=1, name="Acme", email="ops@acme.test", status=ClientStatus.ACTIVE, total_value=1000),
            Client(id=2, name="Globex", status=ClientStatus.PROSPECT),
        ),
        projects=(
            Project(
                id=10,
                name="Website",
                client_name="Acme",
                status=ProjectStatus.IN_PROGRESS,
                service_type=ServiceType.WEB_DEVELOPMENT,
                checklist=default_checklist(),
                image_urls=["a.png"],
            ),
            Project(
                id=11,
                name="Logo",
                client_name="Acme",
                status=ProjectStatus.COMPLETED,
                service_type=ServiceType.BRANDING,
                checklist=default_checklist(),
            ),
            Project(
                id=12,
                name="App",
                client_name="Globex",
                status=ProjectStatus.ON_HOLD,
                service_type=ServiceType.MOBILE_APP,
                checklist=default_checklist(),
            ),
        ),
        invoices=(
            Invoice(id="BX0001", client_name="Acme", amount=500, due_date=date(2026, 1, 31),
                    project_ids=[10], status=InvoiceStatus.PAID),
            Invoice(id="BX0003", client_name="Globex", amount=250, due_date=date(2026, 2, 28)),
        ),
        users=(
            User(id=1, name="Admin User", email="admin@example.com", password="admin123", role=UserRole.ADMIN),
            User(id=2, name="Regular User", email="user@example.com", password="user123", role=UserRole.USER),
        ),
    )


@pytest.fixture
def controller(snapshot: StoreSnapshot) -> DashboardController:
    return DashboardController(
        EntityStore(snapshot),
        view_selector=ViewSelector(preview_limit=2),
        avatar_base_url="https://avatars.test",
    )
