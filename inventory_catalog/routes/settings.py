"""Settings routes."""
from fastapi import APIRouter, Depends

from inventory_catalog.auth import get_current_user, get_workspace
from inventory_catalog.schemas.settings import AppSettings, LogoUpdate
from inventory_catalog.schemas.user import User
from inventory_catalog.services.workspace import Workspace

router = APIRouter(prefix="/settings", tags=["Settings"])


@router.get("/", response_model=AppSettings)
async def get_settings(
    workspace: Workspace = Depends(get_workspace),
    current_user: User = Depends(get_current_user),
):
    """Get company information and guest access settings."""
    return workspace.settings


@router.put("/", response_model=AppSettings)
async def update_settings(
    new_settings: AppSettings,
    workspace: Workspace = Depends(get_workspace),
    current_user: User = Depends(get_current_user),
):
    """Replace the settings (canChangeSettings)."""
    return workspace.update_settings(current_user, new_settings)


@router.get("/logo", response_model=LogoUpdate)
async def get_logo(workspace: Workspace = Depends(get_workspace)):
    """Company logo; public so the login screen can show it."""
    return LogoUpdate(company_logo=workspace.logo)


@router.put("/logo", response_model=LogoUpdate)
async def update_logo(
    payload: LogoUpdate,
    workspace: Workspace = Depends(get_workspace),
    current_user: User = Depends(get_current_user),
):
    """Set or clear the company logo (canChangeSettings)."""
    return LogoUpdate(company_logo=workspace.set_logo(current_user, payload.company_logo))
