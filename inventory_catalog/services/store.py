"""Slot store - named JSON blobs persisted in the storage_slots table."""
import json
import logging
from typing import Any

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import sessionmaker

from inventory_catalog.exceptions import StorageUnavailable
from inventory_catalog.models.slot import StorageSlot

logger = logging.getLogger(__name__)


class SlotStore:
    """Load and save named values.

    Reads fail soft: a missing row, unreadable JSON or a database error all
    yield the caller's default. Writes raise StorageUnavailable on failure.
    """

    def __init__(self, session_factory: sessionmaker):
        self._session_factory = session_factory

    def load(self, key: str, default: Any = None) -> Any:
        """Return the decoded value stored under key, or default."""
        try:
            with self._session_factory() as db:
                slot = db.query(StorageSlot).filter(StorageSlot.key == key).first()
                raw = slot.value if slot else None
        except SQLAlchemyError as e:
            logger.warning("Storage unavailable reading slot %s: %s", key, e)
            return default

        if raw is None:
            return default
        try:
            return json.loads(raw)
        except ValueError:
            logger.warning("Discarding malformed data in slot %s", key)
            return default

    def save(self, key: str, value: Any) -> None:
        """Encode value as JSON and upsert it under key."""
        encoded = json.dumps(value, ensure_ascii=False)
        db = self._session_factory()
        try:
            slot = db.query(StorageSlot).filter(StorageSlot.key == key).first()
            if slot:
                slot.value = encoded
            else:
                db.add(StorageSlot(key=key, value=encoded))
            db.commit()
        except SQLAlchemyError as e:
            db.rollback()
            logger.error("Failed to write slot %s: %s", key, e)
            raise StorageUnavailable(f"Could not save {key}; changes are kept for this session only") from e
        finally:
            db.close()

    def has(self, key: str) -> bool:
        """True if a value has been saved under key."""
        try:
            with self._session_factory() as db:
                return db.query(StorageSlot.id).filter(StorageSlot.key == key).first() is not None
        except SQLAlchemyError as e:
            logger.warning("Storage unavailable checking slot %s: %s", key, e)
            return False
