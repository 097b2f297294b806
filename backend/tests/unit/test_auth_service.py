"""Unit tests for sign-in, guest access and registration."""

import itertools

import pytest

from dashboard.application.schemas import RegisterRequest
from dashboard.application.services import auth_service
from dashboard.application.services.mutations import MutationOutcome
from dashboard.domain.entities import StoreSnapshot, UserRole


@pytest.fixture
def ids():
    counter = itertools.count(500)
    return lambda: next(counter)


def test_login_strips_password(snapshot: StoreSnapshot):
    result = auth_service.login(snapshot, "admin@example.com", "admin123")

    assert result.outcome is MutationOutcome.APPLIED
    assert result.snapshot.current_user.id == 1
    assert result.snapshot.current_user.password is None
    # the stored account keeps its password
    assert result.snapshot.find_user(1).password == "admin123"


@pytest.mark.parametrize(
    "email, password",
    [
        ("admin@example.com", "wrong"),
        ("ADMIN@example.com", "admin123"),
        ("nobody@example.com", "admin123"),
        ("admin@example.com", None),
    ],
)
def test_login_rejects_mismatch(snapshot: StoreSnapshot, email, password):
    result = auth_service.login(snapshot, email, password)

    assert result.outcome is MutationOutcome.REJECTED
    assert result.snapshot.current_user is None


def test_guest_login_is_transient(snapshot: StoreSnapshot, ids):
    result = auth_service.guest_login(snapshot, ids, "https://avatars.test")

    guest = result.snapshot.current_user
    assert guest.role is UserRole.GUEST
    assert guest.name == "Guest"
    assert guest.email == ""
    assert guest.id == 500
    assert guest.avatar_url == "https://avatars.test/guest/100/100"
    assert result.snapshot.users == snapshot.users


def test_register_appends_and_signs_in(snapshot: StoreSnapshot, ids):
    payload = RegisterRequest(name="Ada Lovelace", email="ada@example.com", password="s3cret")

    result = auth_service.register(snapshot, payload, ids, "https://avatars.test/")

    assert result.outcome is MutationOutcome.APPLIED
    account = result.snapshot.users[-1]
    assert account.role is UserRole.USER
    assert account.password == "s3cret"
    assert account.avatar_url == "https://avatars.test/AdaLovelace/100/100"
    assert result.snapshot.current_user == account.without_password()


def test_register_duplicate_email_changes_nothing(snapshot: StoreSnapshot, ids):
    payload = RegisterRequest(name="Imposter", email="user@example.com", password="x")

    result = auth_service.register(snapshot, payload, ids, "https://avatars.test")

    assert result.outcome is MutationOutcome.REJECTED
    assert result.snapshot is snapshot


def test_register_email_match_is_case_sensitive(snapshot: StoreSnapshot, ids):
    payload = RegisterRequest(name="Shouty", email="USER@example.com", password="x")

    assert auth_service.register(snapshot, payload, ids, "https://avatars.test").applied


def test_logout_clears_identity(snapshot: StoreSnapshot):
    signed_in = auth_service.login(snapshot, "user@example.com", "user123").snapshot

    assert auth_service.logout(signed_in).snapshot.current_user is None
