"""User management routes."""
from typing import List

from fastapi import APIRouter, Depends, HTTPException, status

from inventory_catalog.auth import get_current_user, get_workspace
from inventory_catalog.routes.auth import to_response
from inventory_catalog.schemas.user import User, UserCreate, UserResponse, UserUpdate
from inventory_catalog.services.users import UserRegistry
from inventory_catalog.services.workspace import Workspace

router = APIRouter(prefix="/users", tags=["Users"])


def get_user_registry(workspace: Workspace = Depends(get_workspace)) -> UserRegistry:
    return UserRegistry(workspace)


@router.get("/", response_model=List[UserResponse])
async def list_users(
    registry: UserRegistry = Depends(get_user_registry),
    current_user: User = Depends(get_current_user),
):
    """List all accounts (canChangeSettings)."""
    return [to_response(u) for u in registry.list(current_user)]


@router.post("/", response_model=UserResponse, status_code=status.HTTP_201_CREATED)
async def create_user(
    user_data: UserCreate,
    registry: UserRegistry = Depends(get_user_registry),
    current_user: User = Depends(get_current_user),
):
    """Create an account (canChangeSettings)."""
    return to_response(registry.add(current_user, user_data))


@router.put("/{user_id}", response_model=UserResponse)
async def update_user(
    user_id: str,
    user_data: UserUpdate,
    registry: UserRegistry = Depends(get_user_registry),
    current_user: User = Depends(get_current_user),
):
    """Replace an account (canChangeSettings). A blank password keeps the old one."""
    user = registry.update(current_user, user_id, user_data)
    if user is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="User not found"
        )
    return to_response(user)


@router.delete("/{user_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_user(
    user_id: str,
    registry: UserRegistry = Depends(get_user_registry),
    current_user: User = Depends(get_current_user),
):
    """Delete an account (canChangeSettings). Unknown ids are ignored; your own account cannot be deleted."""
    registry.delete(current_user, user_id)
    return None
