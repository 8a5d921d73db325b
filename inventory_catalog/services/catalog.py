"""Item catalog - permission-gated CRUD over the workspace items."""
import logging
from typing import List, Optional

from inventory_catalog.auth import is_guest, require_permission
from inventory_catalog.exceptions import NotFound, PermissionDenied
from inventory_catalog.models.slot import SLOT_ITEMS
from inventory_catalog.schemas.filters import ItemFilters
from inventory_catalog.schemas.item import Item, ItemCreate, ItemUpdate
from inventory_catalog.schemas.user import User
from inventory_catalog.services.filters import filter_items
from inventory_catalog.services.workspace import Workspace, new_id

logger = logging.getLogger(__name__)


class ItemCatalog:
    """Catalog operations for one workspace.

    Reads are open to every session. Guests read the published snapshot
    and can never write, whatever their permission flags say.
    """

    def __init__(self, workspace: Workspace):
        self.workspace = workspace

    def _check_write(self, actor: User, permission: str, action: str):
        if is_guest(actor):
            logger.warning("Guest %s attempted to %s", actor.username, action)
            raise PermissionDenied("Guests have read-only access")
        require_permission(actor, permission, action)

    def list(self, actor: User, filters: Optional[ItemFilters] = None) -> List[Item]:
        """Items newest first, optionally narrowed by filters."""
        items = self.workspace.items_for(actor)
        if filters is None:
            return list(items)
        return filter_items(items, filters)

    def get(self, actor: User, item_id: str) -> Item:
        for item in self.workspace.items_for(actor):
            if item.id == item_id:
                return item
        raise NotFound("Item not found")

    def add(self, actor: User, data: ItemCreate) -> Item:
        """Create an item with a fresh id at the head of the catalog."""
        self._check_write(actor, "can_add", "add items")
        item = Item(id=new_id(), **data.model_dump())
        self.workspace.items = [item] + self.workspace.items
        logger.info("Item %s (%s) added by %s", item.id, item.name, actor.username)
        self.workspace.persist(SLOT_ITEMS)
        return item

    def update(self, actor: User, item_id: str, data: ItemUpdate) -> Optional[Item]:
        """Replace the item with item_id. Returns None when no item matches."""
        self._check_write(actor, "can_add", "edit items")
        if not any(item.id == item_id for item in self.workspace.items):
            return None
        updated = Item(id=item_id, **data.model_dump())
        self.workspace.items = [
            updated if item.id == item_id else item for item in self.workspace.items
        ]
        logger.info("Item %s updated by %s", item_id, actor.username)
        self.workspace.persist(SLOT_ITEMS)
        return updated

    def delete(self, actor: User, item_id: str) -> bool:
        """Remove the item with item_id. Returns False when nothing matched."""
        self._check_write(actor, "can_delete", "delete items")
        remaining = [item for item in self.workspace.items if item.id != item_id]
        if len(remaining) == len(self.workspace.items):
            return False
        self.workspace.items = remaining
        logger.info("Item %s deleted by %s", item_id, actor.username)
        self.workspace.persist(SLOT_ITEMS)
        return True
