"""Slot store and workspace loading."""
import pytest
from sqlalchemy.orm import sessionmaker

from inventory_catalog.exceptions import StorageUnavailable, ValidationFailed
from inventory_catalog.models.slot import SLOT_ITEMS, SLOT_LOGO, SLOT_SETTINGS, SLOT_USERS, StorageSlot
from inventory_catalog.services.catalog import ItemCatalog
from inventory_catalog.services.store import SlotStore
from inventory_catalog.services.workspace import Workspace, data_url_size
from tests.conftest import make_item, memory_engine


@pytest.fixture
def broken_store():
    """A store whose database has no tables, so every query fails."""
    engine = memory_engine()
    yield SlotStore(sessionmaker(bind=engine))
    engine.dispose()


def test_load_missing_slot_returns_default(store):
    assert store.load("nothing", default=[1, 2]) == [1, 2]


def test_save_then_load(store):
    store.save(SLOT_ITEMS, [{"id": "a", "name": "قبعة"}])
    assert store.load(SLOT_ITEMS) == [{"id": "a", "name": "قبعة"}]

    store.save(SLOT_ITEMS, [])
    assert store.load(SLOT_ITEMS, default=None) == []


def test_malformed_json_falls_back_to_default(store, session_factory):
    with session_factory() as db:
        db.add(StorageSlot(key=SLOT_ITEMS, value="{not json"))
        db.commit()
    assert store.load(SLOT_ITEMS, default="fallback") == "fallback"


def test_unavailable_storage_reads_defaults(broken_store):
    assert broken_store.load(SLOT_ITEMS, default=[]) == []
    assert broken_store.has(SLOT_ITEMS) is False


def test_unavailable_storage_raises_on_write(broken_store):
    with pytest.raises(StorageUnavailable):
        broken_store.save(SLOT_ITEMS, [])


def test_workspace_degrades_to_memory_only(broken_store):
    workspace = Workspace(broken_store)
    workspace.load()
    admin = workspace.users[0]

    with pytest.raises(StorageUnavailable):
        ItemCatalog(workspace).add(admin, make_item())
    assert len(workspace.items) == 1


def test_first_run_seeds_from_published_snapshot(workspace, store):
    assert workspace.quick_entry.sizes == ["L", "M", "S", "XL", "XXL"]
    assert workspace.settings.company_name == "SAM PRO"
    assert workspace.settings.guest_credentials.username == "visitor"
    assert store.has(SLOT_USERS)


def test_bootstrap_creates_single_admin(workspace):
    assert len(workspace.users) == 1
    admin = workspace.users[0]
    assert admin.username == "admin"
    assert admin.password == "admin"
    assert admin.permissions.can_add
    assert admin.permissions.can_delete
    assert admin.permissions.can_change_settings


def test_existing_users_are_not_replaced(store, workspace):
    reloaded = Workspace(store)
    reloaded.load()
    assert [u.id for u in reloaded.users] == [u.id for u in workspace.users]


def test_stored_settings_gain_missing_guest_credentials(store):
    store.save(SLOT_SETTINGS, {"companyName": "Hat Shop", "companyInfo": ""})
    workspace = Workspace(store)
    workspace.load()
    assert workspace.settings.company_name == "Hat Shop"
    assert workspace.settings.guest_credentials.enabled is True
    assert workspace.settings.guest_credentials.password == "123"


def test_malformed_items_slot_uses_published_items(store):
    store.save(SLOT_ITEMS, [{"name": "no id"}])
    workspace = Workspace(store)
    workspace.load()
    assert workspace.items == []


def test_data_url_size_counts_decoded_bytes():
    assert data_url_size("data:image/png;base64,AAAA") == 3
    assert data_url_size("data:image/png;base64,AAA=") == 2
    assert data_url_size("data:text/plain,hello") == 5


def test_logo_over_one_megabyte_is_refused(workspace, admin, store):
    workspace.set_logo(admin, "data:image/png;base64,AAAA")
    too_big = "data:image/png;base64," + "A" * (1024 * 1024 * 4 // 3 + 8)

    with pytest.raises(ValidationFailed):
        workspace.set_logo(admin, too_big)
    assert workspace.logo == "data:image/png;base64,AAAA"
    assert store.load(SLOT_LOGO) == "data:image/png;base64,AAAA"


def test_logo_can_be_cleared(workspace, admin, store):
    workspace.set_logo(admin, "data:image/png;base64,AAAA")
    assert workspace.set_logo(admin, None) is None
    assert store.load(SLOT_LOGO) is None
