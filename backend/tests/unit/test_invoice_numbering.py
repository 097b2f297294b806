"""Unit tests for invoice id sequencing."""

from datetime import date

import pytest

from dashboard.application.services.mutations import next_invoice_id
from dashboard.domain.entities import Invoice


def _invoices(*ids: str) -> list[Invoice]:
    return [Invoice(id=i, client_name="Acme", amount=1, due_date=date(2026, 1, 1)) for i in ids]


@pytest.mark.parametrize(
    "existing, expected",
    [
        ((), "BX0001"),
        (("BX0001", "BX0003"), "BX0004"),
        (("BX0001", "garbage"), "BX0002"),
        (("BX0009", "BX", "BXabc", "XX0100"), "BX0010"),
        (("BX9999",), "BX10000"),
    ],
)
def test_next_invoice_id(existing, expected):
    assert next_invoice_id(_invoices(*existing)) == expected


def test_next_invoice_id_ignores_order():
    assert next_invoice_id(_invoices("BX0007", "BX0002")) == "BX0008"
