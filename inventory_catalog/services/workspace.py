"""Workspace - the in-memory application state and its persistence.

State is loaded from the slot store once, at startup. Every service method
mutates the in-memory copy and then re-persists the one slot it touched.
Guest sessions never see this state: they get the published snapshot.
"""
import logging
import uuid
from typing import Any, List, Optional

from pydantic import TypeAdapter, ValidationError

from inventory_catalog.auth import SessionRegistry, get_password_hash, is_guest, require_permission
from inventory_catalog.config import settings
from inventory_catalog.exceptions import StorageUnavailable, ValidationFailed
from inventory_catalog.models.slot import SLOT_ITEMS, SLOT_LOGO, SLOT_QUICK_ENTRY, SLOT_SETTINGS, SLOT_USERS
from inventory_catalog.published_data import PUBLISHED_DATA
from inventory_catalog.schemas.backup import BackupData
from inventory_catalog.schemas.item import Item
from inventory_catalog.schemas.quick_entry import QuickEntryData
from inventory_catalog.schemas.settings import AppSettings
from inventory_catalog.schemas.user import User, UserPermissions
from inventory_catalog.services.store import SlotStore

logger = logging.getLogger(__name__)

_items_adapter = TypeAdapter(List[Item])
_users_adapter = TypeAdapter(List[User])


def new_id() -> str:
    return str(uuid.uuid4())


def _parse(adapter: TypeAdapter, raw: Any, default: Any, slot: str) -> Any:
    """Validate stored data, falling back to default when it is malformed."""
    try:
        return adapter.validate_python(raw)
    except ValidationError as e:
        logger.warning("Ignoring malformed %s data: %s", slot, e.error_count())
        return default


def data_url_size(data_url: str) -> int:
    """Approximate decoded size in bytes of a base64 data URL (or raw text)."""
    header, sep, payload = data_url.partition(",")
    if not sep:
        return len(data_url.encode("utf-8"))
    if ";base64" not in header:
        return len(payload.encode("utf-8"))
    payload = payload.strip()
    return len(payload) * 3 // 4 - payload[-2:].count("=")


def merge_settings(published: dict, stored: Optional[dict]) -> dict:
    """Overlay stored settings on the published ones, guestCredentials included."""
    if not isinstance(stored, dict):
        return published
    merged = {**published, **stored}
    merged["guestCredentials"] = {
        **published.get("guestCredentials", {}),
        **(stored.get("guestCredentials") or {}),
    }
    return merged


class Workspace:
    """Application state for registered users plus the published snapshot."""

    def __init__(self, store: SlotStore, published: Optional[dict] = None):
        self.store = store
        self.published = BackupData.model_validate(published or PUBLISHED_DATA)
        self.sessions = SessionRegistry()

        self.items: List[Item] = []
        self.quick_entry = QuickEntryData()
        self.settings = AppSettings()
        self.users: List[User] = []
        self.logo: Optional[str] = None

    # --- Loading ---

    def load(self):
        """Read every slot, seeding from the published snapshot where empty."""
        published = self.published.to_storage()

        self.items = _parse(
            _items_adapter,
            self.store.load(SLOT_ITEMS, published["items"]),
            list(self.published.items),
            SLOT_ITEMS,
        )
        self.quick_entry = _parse(
            TypeAdapter(QuickEntryData),
            self.store.load(SLOT_QUICK_ENTRY, published["quickEntryData"]),
            self.published.quick_entry_data.model_copy(deep=True),
            SLOT_QUICK_ENTRY,
        )
        self.settings = _parse(
            TypeAdapter(AppSettings),
            merge_settings(published["settings"], self.store.load(SLOT_SETTINGS)),
            self.published.settings.model_copy(deep=True),
            SLOT_SETTINGS,
        )
        logo = self.store.load(SLOT_LOGO, self.published.company_logo)
        self.logo = logo if isinstance(logo, str) else None
        self.users = _parse(_users_adapter, self.store.load(SLOT_USERS, []), [], SLOT_USERS)

        if not self.users:
            self.bootstrap_admin()
        logger.info("Workspace loaded: %d items, %d users", len(self.items), len(self.users))

    def bootstrap_admin(self) -> User:
        """Create the default administrator when no account exists."""
        admin = User(
            id=new_id(),
            username=settings.DEFAULT_ADMIN_USERNAME,
            password=get_password_hash(settings.DEFAULT_ADMIN_PASSWORD),
            permissions=UserPermissions(can_add=True, can_delete=True, can_change_settings=True),
        )
        self.users = [admin]
        logger.info("Created default administrator '%s'", admin.username)
        try:
            self.persist(SLOT_USERS)
        except StorageUnavailable:
            logger.error("Default administrator exists in memory only")
        return admin

    # --- Persistence ---

    def slot_value(self, slot: str) -> Any:
        """JSON-ready value of an in-memory slot."""
        if slot == SLOT_ITEMS:
            return [item.to_storage() for item in self.items]
        if slot == SLOT_QUICK_ENTRY:
            return self.quick_entry.to_storage()
        if slot == SLOT_SETTINGS:
            return self.settings.to_storage()
        if slot == SLOT_USERS:
            return [user.to_storage() for user in self.users]
        if slot == SLOT_LOGO:
            return self.logo
        raise KeyError(slot)

    def persist(self, slot: str):
        self.store.save(slot, self.slot_value(slot))

    def persist_all(self, slots):
        """Save each slot; report the first failure after trying them all."""
        failure = None
        for slot in slots:
            try:
                self.persist(slot)
            except StorageUnavailable as e:
                failure = failure or e
        if failure:
            raise failure

    # --- Views ---

    def items_for(self, actor: User) -> List[Item]:
        if is_guest(actor):
            return self.published.items
        return self.items

    def quick_entry_for(self, actor: User) -> QuickEntryData:
        if is_guest(actor):
            return self.published.quick_entry_data
        return self.quick_entry

    # --- Settings and logo ---

    def update_settings(self, actor: User, new_settings: AppSettings) -> AppSettings:
        require_permission(actor, "can_change_settings", "change settings")
        self.settings = new_settings
        logger.info("Settings updated by %s", actor.username)
        self.persist(SLOT_SETTINGS)
        return self.settings

    def set_logo(self, actor: User, logo: Optional[str]) -> Optional[str]:
        require_permission(actor, "can_change_settings", "change the company logo")
        if logo and data_url_size(logo) > settings.LOGO_MAX_BYTES:
            raise ValidationFailed("Logo is too large; choose a file under 1 MB")
        self.logo = logo or None
        logger.info("Company logo %s by %s", "updated" if self.logo else "cleared", actor.username)
        self.persist(SLOT_LOGO)
        return self.logo

    # --- Backup ---

    def snapshot(self) -> BackupData:
        """Current state as read back from the store (in-memory where unreadable)."""
        in_memory = {
            "items": self.slot_value(SLOT_ITEMS),
            "quickEntryData": self.slot_value(SLOT_QUICK_ENTRY),
            "settings": self.slot_value(SLOT_SETTINGS),
            "companyLogo": self.slot_value(SLOT_LOGO),
        }
        stored = {
            "items": self.store.load(SLOT_ITEMS, in_memory["items"]),
            "quickEntryData": self.store.load(SLOT_QUICK_ENTRY, in_memory["quickEntryData"]),
            "settings": self.store.load(SLOT_SETTINGS, in_memory["settings"]),
            "companyLogo": self.store.load(SLOT_LOGO, in_memory["companyLogo"]),
        }
        try:
            return BackupData.model_validate(stored)
        except ValidationError:
            logger.warning("Stored data unreadable, exporting in-memory state")
            return BackupData.model_validate(in_memory)

    def replace_all(self, backup: BackupData):
        """Swap in a whole backup and persist all four data slots."""
        self.items = list(backup.items)
        self.quick_entry = backup.quick_entry_data
        self.settings = backup.settings
        self.logo = backup.company_logo
        self.persist_all([SLOT_ITEMS, SLOT_QUICK_ENTRY, SLOT_SETTINGS, SLOT_LOGO])
