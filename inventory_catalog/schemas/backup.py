"""Backup document schemas."""
from typing import List, Optional

from inventory_catalog.schemas.base import CamelModel
from inventory_catalog.schemas.item import Item
from inventory_catalog.schemas.quick_entry import QuickEntryData
from inventory_catalog.schemas.settings import AppSettings


class BackupData(CamelModel):
    """Full application state, as exported and as accepted on import.

    items, quickEntryData and settings are required; companyLogo may be
    absent or null.
    """
    items: List[Item]
    quick_entry_data: QuickEntryData
    settings: AppSettings
    company_logo: Optional[str] = None


class ImportResult(CamelModel):
    """Summary reported after a successful import."""
    items: int
    message: str
