"""Quick-entry registry schemas."""
import enum
from typing import List, Union

from pydantic import BaseModel, Field

from inventory_catalog.schemas.base import CamelModel


class QuickEntryCategory(str, enum.Enum):
    """The nine quick-entry collections."""
    MODELS = "models"
    BARCODES = "barcodes"
    COLORS = "colors"
    MATERIALS = "materials"
    PRICES = "prices"
    TYPES = "types"
    CATEGORIES = "categories"
    SIZES = "sizes"
    COUNTRIES = "countries"


class QuickEntryData(CamelModel):
    """All nine collections; each is unique and kept sorted."""
    models: List[str] = Field(default_factory=list)
    barcodes: List[str] = Field(default_factory=list)
    colors: List[str] = Field(default_factory=list)
    materials: List[str] = Field(default_factory=list)
    prices: List[float] = Field(default_factory=list)
    types: List[str] = Field(default_factory=list)
    categories: List[str] = Field(default_factory=list)
    sizes: List[str] = Field(default_factory=list)
    countries: List[str] = Field(default_factory=list)


class QuickEntryValue(BaseModel):
    """A raw value as typed into the form; prices are parsed server-side."""
    value: Union[str, float]


class QuickEntryRename(BaseModel):
    """Schema for renaming a value in place."""
    old_value: Union[str, float]
    new_value: Union[str, float]
