"""Quick-entry registry - the curated value lists behind the item form.

Each collection holds unique values kept in ascending order. Prices are
numbers compared and sorted numerically; every other collection holds
trimmed strings compared exactly and sorted lexicographically.
"""
import logging
import math
from typing import List, Union

from inventory_catalog.auth import is_guest, require_permission
from inventory_catalog.exceptions import PermissionDenied, ValidationFailed
from inventory_catalog.models.slot import SLOT_QUICK_ENTRY
from inventory_catalog.schemas.quick_entry import QuickEntryCategory, QuickEntryData
from inventory_catalog.schemas.user import User
from inventory_catalog.services.workspace import Workspace

logger = logging.getLogger(__name__)

RawValue = Union[str, float, int]


def parse_price(raw: RawValue) -> float:
    """Parse a price value, raising ValidationFailed unless it is a positive number."""
    try:
        value = float(raw.strip() if isinstance(raw, str) else raw)
    except (TypeError, ValueError):
        raise ValidationFailed(f"'{raw}' is not a number")
    if not math.isfinite(value) or value <= 0:
        raise ValidationFailed("Price must be greater than zero")
    return value


def clean_text(raw: RawValue) -> str:
    """Trimmed text form of a value; whole numbers lose their '.0'."""
    if isinstance(raw, float) and raw.is_integer():
        raw = int(raw)
    value = str(raw).strip()
    if not value:
        raise ValidationFailed("Value cannot be empty")
    return value


class QuickEntryRegistry:
    """Add, rename and delete values in the nine quick-entry collections."""

    def __init__(self, workspace: Workspace):
        self.workspace = workspace

    def _check_write(self, actor: User, permission: str, action: str):
        if is_guest(actor):
            raise PermissionDenied("Guests have read-only access")
        require_permission(actor, permission, action)

    def _replace(self, category: QuickEntryCategory, values: list) -> list:
        self.workspace.quick_entry = self.workspace.quick_entry.model_copy(
            update={category.value: sorted(values)}
        )
        self.workspace.persist(SLOT_QUICK_ENTRY)
        return self.values(category)

    def data(self, actor: User) -> QuickEntryData:
        return self.workspace.quick_entry_for(actor)

    def values(self, category: QuickEntryCategory) -> list:
        return list(getattr(self.workspace.quick_entry, category.value))

    def _normalize(self, category: QuickEntryCategory, raw: RawValue):
        if category == QuickEntryCategory.PRICES:
            return parse_price(raw)
        return clean_text(raw)

    def add(self, actor: User, category: QuickEntryCategory, raw: RawValue) -> List:
        """Insert a value, rejecting blanks, bad prices and duplicates."""
        self._check_write(actor, "can_add", "add quick-entry values")
        value = self._normalize(category, raw)
        current = self.values(category)
        if value in current:
            raise ValidationFailed(f"'{value}' already exists in {category.value}")
        logger.info("Quick-entry %s: added %r", category.value, value)
        return self._replace(category, current + [value])

    def rename(self, actor: User, category: QuickEntryCategory, old_raw: RawValue, new_raw: RawValue) -> List:
        """Replace old with new. Keeping the same value is allowed."""
        self._check_write(actor, "can_add", "edit quick-entry values")
        if category == QuickEntryCategory.PRICES:
            try:
                old_value = float(old_raw)
            except (TypeError, ValueError):
                raise ValidationFailed(f"'{old_raw}' is not a number")
        else:
            old_value = old_raw if isinstance(old_raw, str) else clean_text(old_raw)
        new_value = self._normalize(category, new_raw)

        current = self.values(category)
        if new_value != old_value and new_value in current:
            raise ValidationFailed(f"'{new_value}' already exists in {category.value}")
        logger.info("Quick-entry %s: renamed %r to %r", category.value, old_value, new_value)
        return self._replace(category, [new_value if v == old_value else v for v in current])

    def delete(self, actor: User, category: QuickEntryCategory, raw: RawValue) -> List:
        """Remove every entry equal to the value; absent values are ignored."""
        self._check_write(actor, "can_delete", "delete quick-entry values")
        current = self.values(category)
        if category == QuickEntryCategory.PRICES:
            try:
                value = float(raw)
            except (TypeError, ValueError):
                return current
        else:
            value = raw if isinstance(raw, str) else clean_text(raw)
        remaining = [v for v in current if v != value]
        if len(remaining) == len(current):
            return current
        logger.info("Quick-entry %s: deleted %r", category.value, value)
        return self._replace(category, remaining)
