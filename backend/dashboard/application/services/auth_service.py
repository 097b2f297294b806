"""Sign-in, guest access and self-registration over the user collection.

Like the mutation handlers, these functions are pure: they compute the next
snapshot and report failure as ``MutationOutcome.REJECTED`` instead of
raising.
"""

from dataclasses import replace

from dashboard.application.schemas.user import RegisterRequest
from dashboard.application.services.mutations import IdFactory, MutationOutcome, MutationResult
from dashboard.domain.entities import StoreSnapshot, User, UserRole

GUEST_NAME = "Guest"


def avatar_for(name: str, avatar_base_url: str) -> str:
    """Avatar URL derived from a display name (spaces removed)."""
    seed = name.replace(" ", "")
    return f"{avatar_base_url.rstrip('/')}/{seed}/100/100"


def login(snapshot: StoreSnapshot, email: str, password: str | None) -> MutationResult:
    """Sign in when both email and password match an account exactly.

    Accounts without a stored password cannot sign in.
    """
    account = next(
        (
            u
            for u in snapshot.users
            if u.email == email and u.password is not None and u.password == password
        ),
        None,
    )
    if account is None:
        return MutationResult(snapshot, MutationOutcome.REJECTED)
    identity = account.without_password()
    return MutationResult(
        replace(snapshot, current_user=identity), MutationOutcome.APPLIED, identity
    )


def guest_login(
    snapshot: StoreSnapshot, id_factory: IdFactory, avatar_base_url: str
) -> MutationResult:
    """Start a transient guest session; the guest is not added to ``users``."""
    guest = User(
        id=id_factory(),
        name=GUEST_NAME,
        email="",
        role=UserRole.GUEST,
        avatar_url=avatar_for("guest", avatar_base_url),
    )
    return MutationResult(
        replace(snapshot, current_user=guest), MutationOutcome.APPLIED, guest
    )


def register(
    snapshot: StoreSnapshot,
    payload: RegisterRequest,
    id_factory: IdFactory,
    avatar_base_url: str,
) -> MutationResult:
    """Create a ``User``-role account and sign it in.

    Rejected when the email is already taken (exact, case-sensitive match);
    the snapshot is then returned untouched.
    """
    if any(u.email == payload.email for u in snapshot.users):
        return MutationResult(snapshot, MutationOutcome.REJECTED)

    account = User(
        id=id_factory(),
        name=payload.name,
        email=payload.email,
        password=payload.password,
        role=UserRole.USER,
        avatar_url=avatar_for(payload.name, avatar_base_url),
    )
    identity = account.without_password()
    return MutationResult(
        replace(snapshot, users=snapshot.users + (account,), current_user=identity),
        MutationOutcome.APPLIED,
        identity,
    )


def logout(snapshot: StoreSnapshot) -> MutationResult:
    return MutationResult(replace(snapshot, current_user=None), MutationOutcome.APPLIED)
