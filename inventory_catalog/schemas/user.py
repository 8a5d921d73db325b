"""User schemas for request/response validation."""
from typing import Optional

from pydantic import BaseModel, Field

from inventory_catalog.schemas.base import CamelModel


class UserPermissions(CamelModel):
    """The three independent capabilities."""
    can_add: bool = False
    can_delete: bool = False
    can_change_settings: bool = False


class UserBase(CamelModel):
    """Base user schema."""
    username: str
    permissions: UserPermissions = Field(default_factory=UserPermissions)


class UserCreate(UserBase):
    """Schema for creating a user."""
    password: str


class UserUpdate(UserBase):
    """Schema for replacing a user. A blank password keeps the current one."""
    password: Optional[str] = None


class User(UserBase):
    """A stored account, or a synthesized guest identity."""
    id: str
    password: str = ""


class UserResponse(UserBase):
    """Schema for user response (no password)."""
    id: str
    is_guest: bool = False


class Token(BaseModel):
    """Bearer token returned on login."""
    access_token: str
    token_type: str = "bearer"
    user: UserResponse
