"""Authentication gate, sessions and the user registry."""
from datetime import timedelta

import pytest

from inventory_catalog import auth
from inventory_catalog.auth import SessionRegistry, authenticate, get_password_hash, verify_password
from inventory_catalog.exceptions import InvalidCredentials, PermissionDenied, SelfDeleteRefused, ValidationFailed
from inventory_catalog.models.slot import SLOT_USERS
from inventory_catalog.schemas.user import UserCreate, UserPermissions, UserUpdate
from inventory_catalog.services.users import UserRegistry


@pytest.fixture
def registry(workspace):
    return UserRegistry(workspace)


def test_login_registered_user(workspace, admin):
    user = authenticate(workspace.users, workspace.settings, "admin", "admin")
    assert user.id == admin.id


def test_login_wrong_password(workspace):
    with pytest.raises(InvalidCredentials):
        authenticate(workspace.users, workspace.settings, "admin", "Admin")


def test_login_guest(workspace):
    user = authenticate(workspace.users, workspace.settings, "visitor", "123")
    assert user.id == "guest-user"
    assert user.username == "visitor (زائر)"
    assert user.password == ""
    assert user.permissions == UserPermissions()


def test_guest_login_disabled(workspace):
    workspace.settings.guest_credentials.enabled = False
    with pytest.raises(InvalidCredentials):
        authenticate(workspace.users, workspace.settings, "visitor", "123")


def test_hashed_passwords_verify(monkeypatch):
    monkeypatch.setattr(auth.settings, "HASH_PASSWORDS", True)
    stored = get_password_hash("s3cret")
    assert stored != "s3cret"
    assert verify_password("s3cret", stored)
    assert not verify_password("wrong", stored)


def test_add_user(registry, admin, store):
    user = registry.add(admin, UserCreate(username=" clerk ", password="pw",
                                          permissions=UserPermissions(can_add=True)))
    assert user.username == "clerk"
    assert user.id != admin.id
    assert [u["username"] for u in store.load(SLOT_USERS)] == ["admin", "clerk"]


def test_add_duplicate_username_rejected(registry, admin):
    with pytest.raises(ValidationFailed):
        registry.add(admin, UserCreate(username="admin", password="x"))


def test_add_requires_username_and_password(registry, admin):
    with pytest.raises(ValidationFailed):
        registry.add(admin, UserCreate(username="  ", password="x"))
    with pytest.raises(ValidationFailed):
        registry.add(admin, UserCreate(username="someone", password=" "))


def test_registry_requires_change_settings(registry, viewer):
    with pytest.raises(PermissionDenied):
        registry.list(viewer)
    with pytest.raises(PermissionDenied):
        registry.add(viewer, UserCreate(username="x", password="y"))


def test_update_keeps_password_when_blank(registry, admin, viewer):
    updated = registry.update(admin, viewer.id, UserUpdate(username="viewer2", password=""))
    assert updated.username == "viewer2"
    assert updated.password == "secret"


def test_update_does_not_recheck_username(registry, admin, viewer):
    updated = registry.update(admin, viewer.id, UserUpdate(username="admin"))
    assert updated.username == "admin"


def test_update_unknown_user(registry, admin):
    assert registry.update(admin, "missing", UserUpdate(username="x")) is None


def test_update_refreshes_active_session(workspace, registry, admin, viewer):
    session_id = workspace.sessions.open(viewer)
    registry.update(admin, viewer.id, UserUpdate(
        username="viewer", permissions=UserPermissions(can_add=True)))
    assert workspace.sessions.get(session_id).permissions.can_add is True


def test_delete_self_refused(registry, admin):
    before = registry.list(admin)
    with pytest.raises(SelfDeleteRefused):
        registry.delete(admin, admin.id)
    assert registry.list(admin) == before


def test_delete_other_user(workspace, registry, admin, viewer):
    session_id = workspace.sessions.open(viewer)
    assert registry.delete(admin, viewer.id) is True
    assert [u.id for u in registry.list(admin)] == [admin.id]
    assert workspace.sessions.get(session_id) is None


def test_delete_unknown_user(registry, admin):
    assert registry.delete(admin, "missing") is False


def test_sessions_logout_is_idempotent(workspace, admin):
    session_id = workspace.sessions.open(admin)
    workspace.sessions.close(session_id)
    workspace.sessions.close(session_id)
    assert workspace.sessions.get(session_id) is None


def test_expired_session_is_evicted(admin):
    sessions = SessionRegistry(ttl=timedelta(seconds=-1))
    session_id = sessions.open(admin)
    assert sessions.get(session_id) is None
    assert len(sessions) == 0


def test_opening_a_session_drops_stale_ones(admin, viewer):
    sessions = SessionRegistry(ttl=timedelta(seconds=-1))
    for _ in range(3):
        sessions.open(viewer)
    sessions.ttl = timedelta(minutes=5)
    session_id = sessions.open(admin)
    assert len(sessions) == 1
    assert sessions.get(session_id) == admin


def test_live_session_survives(admin):
    sessions = SessionRegistry()
    session_id = sessions.open(admin)
    assert sessions.get(session_id) == admin
    assert len(sessions) == 1
