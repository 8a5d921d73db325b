# Models package
from inventory_catalog.models.slot import (
    StorageSlot,
    SLOT_ITEMS,
    SLOT_QUICK_ENTRY,
    SLOT_SETTINGS,
    SLOT_USERS,
    SLOT_LOGO,
    SLOT_KEYS,
)
