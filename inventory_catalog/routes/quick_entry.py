"""Quick-entry value list routes."""
from typing import List, Union

from fastapi import APIRouter, Depends, Query

from inventory_catalog.auth import get_current_user, get_workspace
from inventory_catalog.schemas.quick_entry import (
    QuickEntryCategory,
    QuickEntryData,
    QuickEntryRename,
    QuickEntryValue,
)
from inventory_catalog.schemas.user import User
from inventory_catalog.services.quick_entry import QuickEntryRegistry
from inventory_catalog.services.workspace import Workspace

router = APIRouter(prefix="/quick-entry", tags=["Quick Entry"])


def get_registry(workspace: Workspace = Depends(get_workspace)) -> QuickEntryRegistry:
    return QuickEntryRegistry(workspace)


@router.get("/", response_model=QuickEntryData)
async def get_quick_entry_data(
    registry: QuickEntryRegistry = Depends(get_registry),
    current_user: User = Depends(get_current_user),
):
    """All nine value lists."""
    return registry.data(current_user)


@router.post("/{category}", response_model=List[Union[float, str]])
async def add_value(
    category: QuickEntryCategory,
    payload: QuickEntryValue,
    registry: QuickEntryRegistry = Depends(get_registry),
    current_user: User = Depends(get_current_user),
):
    """Add a value to one list (canAdd). Returns the updated list."""
    return registry.add(current_user, category, payload.value)


@router.put("/{category}", response_model=List[Union[float, str]])
async def rename_value(
    category: QuickEntryCategory,
    payload: QuickEntryRename,
    registry: QuickEntryRegistry = Depends(get_registry),
    current_user: User = Depends(get_current_user),
):
    """Rename a value in place (canAdd)."""
    return registry.rename(current_user, category, payload.old_value, payload.new_value)


@router.delete("/{category}", response_model=List[Union[float, str]])
async def delete_value(
    category: QuickEntryCategory,
    value: str = Query(..., description="Value to remove"),
    registry: QuickEntryRegistry = Depends(get_registry),
    current_user: User = Depends(get_current_user),
):
    """Remove a value from one list (canDelete)."""
    return registry.delete(current_user, category, value)
