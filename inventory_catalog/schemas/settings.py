"""Settings schemas for request/response validation."""
from typing import Optional

from pydantic import Field

from inventory_catalog.schemas.base import CamelModel


class GuestCredentials(CamelModel):
    """Shared read-only login, checked only when enabled."""
    enabled: bool = False
    username: str = ""
    password: str = ""


class AppSettings(CamelModel):
    """User-editable application settings."""
    company_name: str = ""
    company_info: str = ""
    guest_credentials: GuestCredentials = Field(default_factory=GuestCredentials)


class LogoUpdate(CamelModel):
    """Company logo as a data URL; null clears it."""
    company_logo: Optional[str] = None
