"""Filter schemas for the item list."""
from typing import List

from pydantic import Field

from inventory_catalog.schemas.base import CamelModel

# Sentinel type filter value that matches every item
ALL_TYPES = "الكل"


class ItemFilters(CamelModel):
    """Multi-field item filter. Empty fields (and ALL_TYPES) match everything."""
    search_term: str = ""
    type: str = ALL_TYPES
    country: str = ""
    barcode: str = ""
    category: str = ""
    size: str = ""
    color: str = ""
    material: str = ""


class FilterOptions(CamelModel):
    """Dropdown values: catalog values merged with the quick-entry lists."""
    types: List[str] = Field(default_factory=list)
    countries: List[str] = Field(default_factory=list)
    categories: List[str] = Field(default_factory=list)
    sizes: List[str] = Field(default_factory=list)
    colors: List[str] = Field(default_factory=list)
    materials: List[str] = Field(default_factory=list)
