"""Filter engine - pure functions over a list of items."""
from typing import Iterable, List

from inventory_catalog.schemas.filters import ALL_TYPES, FilterOptions, ItemFilters
from inventory_catalog.schemas.item import Item
from inventory_catalog.schemas.quick_entry import QuickEntryData

# Exact-match item fields; an empty filter value matches everything
_EXACT_FIELDS = ("country", "category", "size", "color", "material")

# Item field -> quick-entry collection used to populate its dropdown
OPTION_SOURCES = {
    "type": "types",
    "country": "countries",
    "category": "categories",
    "size": "sizes",
    "color": "colors",
    "material": "materials",
}


def item_matches(item: Item, filters: ItemFilters) -> bool:
    term = filters.search_term.lower()
    if term not in item.name.lower() and term not in item.model.lower():
        return False
    if filters.type != ALL_TYPES and item.type != filters.type:
        return False
    for field in _EXACT_FIELDS:
        wanted = getattr(filters, field)
        if wanted and getattr(item, field) != wanted:
            return False
    if filters.barcode and filters.barcode not in item.barcode:
        return False
    return True


def filter_items(items: Iterable[Item], filters: ItemFilters) -> List[Item]:
    """Items passing every clause, in catalog order."""
    return [item for item in items if item_matches(item, filters)]


def merged_values(items: Iterable[Item], field: str, extra: Iterable[str]) -> List[str]:
    """Sorted union of the non-empty field values and extra."""
    values = {getattr(item, field) for item in items if getattr(item, field)}
    values.update(extra)
    return sorted(values)


def filter_options(items: List[Item], quick_entry: QuickEntryData) -> FilterOptions:
    """Dropdown values for every filterable field."""
    return FilterOptions(**{
        collection: merged_values(items, field, getattr(quick_entry, collection))
        for field, collection in OPTION_SOURCES.items()
    })
