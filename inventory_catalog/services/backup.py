"""Backup, restore and republish."""
import logging
import pprint
from typing import Any

from pydantic import ValidationError

from inventory_catalog.auth import require_permission
from inventory_catalog.exceptions import ImportMalformed
from inventory_catalog.schemas.backup import BackupData, ImportResult
from inventory_catalog.schemas.user import User
from inventory_catalog.services.workspace import Workspace

logger = logging.getLogger(__name__)

PUBLISHED_HEADER = """\
# Published dataset shipped with the application.
#
# Seeds a fresh store on first run and is the permanent read-only view for
# guest sessions. To publish the current data, run
# scripts/publish_snapshot.py (or GET /api/backup/publishable) and replace
# this file with the generated text.

"""


def export_backup(workspace: Workspace, actor: User) -> BackupData:
    """Items, quick-entry data, settings and logo as persisted."""
    require_permission(actor, "can_change_settings", "export data")
    return workspace.snapshot()


def parse_backup(document: Any) -> BackupData:
    """Validate an uploaded backup document."""
    if not isinstance(document, dict):
        raise ImportMalformed("Backup must be a JSON object")
    try:
        return BackupData.model_validate(document)
    except ValidationError as e:
        missing = sorted({str(err["loc"][0]) for err in e.errors() if err["loc"]})
        raise ImportMalformed(f"Invalid backup file: check {', '.join(missing) or 'document'}") from e


def import_backup(workspace: Workspace, actor: User, document: Any) -> ImportResult:
    """Replace all data with the backup, or nothing at all if it is malformed."""
    require_permission(actor, "can_change_settings", "import data")
    backup = parse_backup(document)
    workspace.replace_all(backup)
    logger.info("Backup with %d items imported by %s", len(backup.items), actor.username)
    return ImportResult(items=len(backup.items), message="Data imported successfully")


def render_publishable(backup: BackupData) -> str:
    """Source text for published_data.py holding the given state."""
    body = pprint.pformat(backup.to_storage(), width=100, sort_dicts=False)
    return f"{PUBLISHED_HEADER}PUBLISHED_DATA = {body}\n"
