"""Item schemas for request/response validation."""
import math

from pydantic import field_validator

from inventory_catalog.schemas.base import CamelModel


class ItemBase(CamelModel):
    """Base item schema.

    Stored items are not revalidated, so every field is lenient here;
    ItemCreate / ItemUpdate carry the entry rules.
    """
    image: str = ""  # Base64 data URL
    name: str = ""
    model: str = ""
    barcode: str = ""
    type: str = ""
    category: str = ""
    size: str = ""
    color: str = ""
    material: str = ""
    country: str = ""
    price: float = 0
    description: str = ""


class ItemCreate(ItemBase):
    """Schema for creating an item. Name, type, image and a positive price are required."""

    @field_validator("name", "type", "image")
    @classmethod
    def required_text(cls, value: str) -> str:
        if not value:
            raise ValueError("field is required")
        return value

    @field_validator("price")
    @classmethod
    def positive_price(cls, value: float) -> float:
        if not math.isfinite(value) or value <= 0:
            raise ValueError("price must be greater than zero")
        return value


class ItemUpdate(ItemCreate):
    """Schema for replacing an item; the id comes from the path."""


class Item(ItemBase):
    """A stored catalog item."""
    id: str
