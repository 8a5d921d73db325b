"""User registry - account management for holders of canChangeSettings."""
import logging
from typing import List, Optional

from inventory_catalog.auth import get_password_hash, require_permission
from inventory_catalog.exceptions import SelfDeleteRefused, ValidationFailed
from inventory_catalog.models.slot import SLOT_USERS
from inventory_catalog.schemas.user import User, UserCreate, UserUpdate
from inventory_catalog.services.workspace import Workspace, new_id

logger = logging.getLogger(__name__)


class UserRegistry:
    def __init__(self, workspace: Workspace):
        self.workspace = workspace

    def _check(self, actor: User):
        require_permission(actor, "can_change_settings", "manage users")

    def find(self, user_id: str) -> Optional[User]:
        return next((u for u in self.workspace.users if u.id == user_id), None)

    def list(self, actor: User) -> List[User]:
        self._check(actor)
        return list(self.workspace.users)

    def add(self, actor: User, data: UserCreate) -> User:
        """Create an account; usernames must be unique (exact match)."""
        self._check(actor)
        username = data.username.strip()
        password = data.password.strip()
        if not username or not password:
            raise ValidationFailed("Username and password are required")
        if any(u.username == username for u in self.workspace.users):
            raise ValidationFailed(f"Username '{username}' already exists")

        user = User(
            id=new_id(),
            username=username,
            password=get_password_hash(password),
            permissions=data.permissions,
        )
        self.workspace.users = self.workspace.users + [user]
        logger.info("User %s created by %s", username, actor.username)
        self.workspace.persist(SLOT_USERS)
        return user

    def update(self, actor: User, user_id: str, data: UserUpdate) -> Optional[User]:
        """Replace the account with user_id. Returns None when no account matches.

        Username uniqueness is not re-checked here. Sessions of the updated
        account pick up the new data immediately.
        """
        self._check(actor)
        existing = self.find(user_id)
        if existing is None:
            return None
        username = data.username.strip()
        if not username:
            raise ValidationFailed("Username is required")
        password = (data.password or "").strip()

        updated = User(
            id=user_id,
            username=username,
            password=get_password_hash(password) if password else existing.password,
            permissions=data.permissions,
        )
        self.workspace.users = [updated if u.id == user_id else u for u in self.workspace.users]
        self.workspace.sessions.refresh_user(updated)
        logger.info("User %s updated by %s", username, actor.username)
        self.workspace.persist(SLOT_USERS)
        return updated

    def delete(self, actor: User, user_id: str) -> bool:
        """Remove an account; the acting account can never delete itself."""
        self._check(actor)
        if user_id == actor.id:
            logger.warning("User %s tried to delete their own account", actor.username)
            raise SelfDeleteRefused("You cannot delete your own account")
        remaining = [u for u in self.workspace.users if u.id != user_id]
        if len(remaining) == len(self.workspace.users):
            return False
        self.workspace.users = remaining
        self.workspace.sessions.close_user(user_id)
        logger.info("User %s deleted by %s", user_id, actor.username)
        self.workspace.persist(SLOT_USERS)
        return True
