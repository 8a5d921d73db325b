"""Item routes."""
from typing import List

from fastapi import APIRouter, Depends, HTTPException, Query, status
from fastapi.responses import StreamingResponse

from inventory_catalog.auth import get_current_user, get_workspace
from inventory_catalog.schemas.filters import ALL_TYPES, FilterOptions, ItemFilters
from inventory_catalog.schemas.item import Item, ItemCreate, ItemUpdate
from inventory_catalog.schemas.user import User
from inventory_catalog.services.catalog import ItemCatalog
from inventory_catalog.services.csv_export import items_to_csv
from inventory_catalog.services.filters import filter_options
from inventory_catalog.services.workspace import Workspace

router = APIRouter(prefix="/items", tags=["Items"])


def get_catalog(workspace: Workspace = Depends(get_workspace)) -> ItemCatalog:
    return ItemCatalog(workspace)


def get_filters(
    search: str = Query("", description="Search by name or model"),
    type: str = Query(ALL_TYPES, description="Exact type, or the ALL sentinel"),
    country: str = "",
    category: str = "",
    size: str = "",
    color: str = "",
    material: str = "",
    barcode: str = Query("", description="Barcode substring"),
) -> ItemFilters:
    return ItemFilters(
        search_term=search,
        type=type,
        country=country,
        category=category,
        size=size,
        color=color,
        material=material,
        barcode=barcode,
    )


@router.get("/", response_model=List[Item])
async def list_items(
    filters: ItemFilters = Depends(get_filters),
    catalog: ItemCatalog = Depends(get_catalog),
    current_user: User = Depends(get_current_user),
):
    """List items newest first, narrowed by any filters given."""
    return catalog.list(current_user, filters)


@router.get("/options", response_model=FilterOptions)
async def list_filter_options(
    workspace: Workspace = Depends(get_workspace),
    current_user: User = Depends(get_current_user),
):
    """Values for the filter dropdowns: catalog values plus quick-entry lists."""
    return filter_options(workspace.items_for(current_user), workspace.quick_entry_for(current_user))


@router.get("/export/csv")
async def export_items_csv(
    catalog: ItemCatalog = Depends(get_catalog),
    current_user: User = Depends(get_current_user),
):
    """Export all items to a CSV file."""
    content = items_to_csv(catalog.list(current_user))
    return StreamingResponse(
        iter([content.encode("utf-8")]),
        media_type="text/csv; charset=utf-8",
        headers={"Content-Disposition": "attachment; filename=inventory.csv"},
    )


@router.get("/{item_id}", response_model=Item)
async def get_item(
    item_id: str,
    catalog: ItemCatalog = Depends(get_catalog),
    current_user: User = Depends(get_current_user),
):
    """Get a specific item."""
    return catalog.get(current_user, item_id)


@router.post("/", response_model=Item, status_code=status.HTTP_201_CREATED)
async def create_item(
    item_data: ItemCreate,
    catalog: ItemCatalog = Depends(get_catalog),
    current_user: User = Depends(get_current_user),
):
    """Create a new item (canAdd)."""
    return catalog.add(current_user, item_data)


@router.put("/{item_id}", response_model=Item)
async def update_item(
    item_id: str,
    item_data: ItemUpdate,
    catalog: ItemCatalog = Depends(get_catalog),
    current_user: User = Depends(get_current_user),
):
    """Replace an item (canAdd)."""
    item = catalog.update(current_user, item_id, item_data)
    if item is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Item not found"
        )
    return item


@router.delete("/{item_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_item(
    item_id: str,
    catalog: ItemCatalog = Depends(get_catalog),
    current_user: User = Depends(get_current_user),
):
    """Delete an item (canDelete). Unknown ids are ignored."""
    catalog.delete(current_user, item_id)
    return None
