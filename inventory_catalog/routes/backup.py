"""Backup, restore and republish routes."""
from typing import Any, Dict

from fastapi import APIRouter, Body, Depends
from fastapi.responses import PlainTextResponse

from inventory_catalog.auth import get_current_user, get_workspace
from inventory_catalog.schemas.backup import BackupData, ImportResult
from inventory_catalog.schemas.user import User
from inventory_catalog.services.backup import export_backup, import_backup, render_publishable
from inventory_catalog.services.workspace import Workspace

router = APIRouter(prefix="/backup", tags=["Backup"])


@router.get("/export", response_model=BackupData)
async def export_data(
    workspace: Workspace = Depends(get_workspace),
    current_user: User = Depends(get_current_user),
):
    """Download everything except user accounts (canChangeSettings)."""
    return export_backup(workspace, current_user)


@router.post("/import", response_model=ImportResult)
async def import_data(
    document: Dict[str, Any] = Body(...),
    workspace: Workspace = Depends(get_workspace),
    current_user: User = Depends(get_current_user),
):
    """Replace all data with a backup document (canChangeSettings)."""
    return import_backup(workspace, current_user, document)


@router.get("/publishable", response_class=PlainTextResponse)
async def export_publishable(
    workspace: Workspace = Depends(get_workspace),
    current_user: User = Depends(get_current_user),
):
    """Source for published_data.py built from the current data (canChangeSettings)."""
    return render_publishable(export_backup(workspace, current_user))
