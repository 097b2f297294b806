"""Seed loader — builds the first entity store snapshot from a YAML file.

Expected layout::

    clients:  [{id, name, contact_person, ..., status}]
    projects: [{id, name, client_name, status, service_type, checklist?, image_urls?}]
    invoices: [{id, client_name, project_ids, amount, due_date, status}]
    users:    [{id, name, email, password, role, avatar_url}]

Projects listed without a checklist receive the default checklist.
"""

import logging
from datetime import date
from pathlib import Path
from typing import Any

import yaml

from dashboard.domain.entities import (
    ChecklistItem,
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

logger = logging.getLogger(__name__)


class YamlSeedLoader:
    """Parses the seed YAML file into a ``StoreSnapshot``."""

    def __init__(self, seed_file: str | Path):
        self._path = Path(seed_file)

    def load(self) -> StoreSnapshot:
        """Read the seed file; a missing file yields an empty snapshot."""
        if not self._path.exists():
            logger.warning("Seed file %s not found — starting with an empty store", self._path)
            return StoreSnapshot()

        with open(self._path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f) or {}

        snapshot = self.parse(data)
        logger.info(
            "Seeded store from %s: %d clients, %d projects, %d invoices, %d users",
            self._path,
            len(snapshot.clients),
            len(snapshot.projects),
            len(snapshot.invoices),
            len(snapshot.users),
        )
        return snapshot

    @classmethod
    def parse(cls, data: dict[str, Any]) -> StoreSnapshot:
        return StoreSnapshot(
            clients=tuple(cls._parse_client(c) for c in data.get("clients") or []),
            projects=tuple(cls._parse_project(p) for p in data.get("projects") or []),
            invoices=tuple(cls._parse_invoice(i) for i in data.get("invoices") or []),
            users=tuple(cls._parse_user(u) for u in data.get("users") or []),
        )

    @staticmethod
    def _parse_client(raw: dict[str, Any]) -> Client:
        return Client(
            id=int(raw["id"]),
            name=raw["name"],
            contact_person=raw.get("contact_person", ""),
            email=raw.get("email", ""),
            phone=str(raw.get("phone", "")),
            location=raw.get("location", ""),
            industry=raw.get("industry", ""),
            status=ClientStatus(raw.get("status", ClientStatus.PROSPECT.value)),
            total_value=float(raw.get("total_value", 0)),
            notes=raw.get("notes"),
            avatar_url=raw.get("avatar_url", ""),
        )

    @staticmethod
    def _parse_project(raw: dict[str, Any]) -> Project:
        checklist_raw = raw.get("checklist")
        if checklist_raw is None:
            checklist = default_checklist()
        else:
            checklist = [
                ChecklistItem(
                    id=str(item["id"]),
                    label=item["label"],
                    completed=bool(item.get("completed", False)),
                )
                for item in checklist_raw
            ]
        return Project(
            id=int(raw["id"]),
            name=raw["name"],
            client_name=raw["client_name"],
            status=ProjectStatus(raw.get("status", ProjectStatus.IN_PROGRESS.value)),
            service_type=ServiceType(raw.get("service_type", ServiceType.WEB_DEVELOPMENT.value)),
            notes=raw.get("notes"),
            checklist=checklist,
            image_urls=list(raw.get("image_urls") or []),
        )

    @staticmethod
    def _parse_invoice(raw: dict[str, Any]) -> Invoice:
        return Invoice(
            id=str(raw["id"]),
            client_name=raw["client_name"],
            project_ids=[int(pid) for pid in raw.get("project_ids") or []],
            description=raw.get("description", ""),
            amount=float(raw["amount"]),
            due_date=_parse_date(raw["due_date"]),
            status=InvoiceStatus(raw.get("status", InvoiceStatus.PENDING.value)),
        )

    @staticmethod
    def _parse_user(raw: dict[str, Any]) -> User:
        return User(
            id=int(raw["id"]),
            name=raw["name"],
            email=raw["email"],
            password=raw.get("password"),
            role=UserRole(raw.get("role", UserRole.USER.value)),
            avatar_url=raw.get("avatar_url", ""),
        )


def _parse_date(value: Any) -> date:
    # PyYAML already turns unquoted ISO dates into datetime.date
    if isinstance(value, date):
        return value
    return date.fromisoformat(str(value))
