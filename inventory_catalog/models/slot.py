"""Storage slot model - one named JSON blob per row."""
from sqlalchemy import Column, Integer, String, Text, DateTime
from sqlalchemy.sql import func

from inventory_catalog.database import Base


class StorageSlot(Base):
    """A named slot holding a JSON-encoded value (items, users, settings...)."""
    __tablename__ = "storage_slots"

    id = Column(Integer, primary_key=True, index=True)
    key = Column(String(50), unique=True, index=True, nullable=False)
    value = Column(Text, nullable=True)
    updated_at = Column(DateTime(timezone=True), onupdate=func.now(), server_default=func.now())


# Slot names
SLOT_ITEMS = "items"
SLOT_QUICK_ENTRY = "quick_entry"
SLOT_SETTINGS = "settings"
SLOT_USERS = "users"
SLOT_LOGO = "logo"

SLOT_KEYS = (SLOT_ITEMS, SLOT_QUICK_ENTRY, SLOT_SETTINGS, SLOT_USERS, SLOT_LOGO)
