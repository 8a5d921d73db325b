"""Authentication routes."""
import logging

from fastapi import APIRouter, Depends
from fastapi.security import OAuth2PasswordRequestForm

from inventory_catalog.auth import (
    authenticate,
    create_access_token,
    get_current_user,
    get_session_id,
    get_workspace,
    is_guest,
)
from inventory_catalog.schemas.user import Token, User, UserResponse
from inventory_catalog.services.workspace import Workspace

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/auth", tags=["Authentication"])


def to_response(user: User) -> UserResponse:
    return UserResponse(
        id=user.id,
        username=user.username,
        permissions=user.permissions,
        is_guest=is_guest(user),
    )


@router.post("/login", response_model=Token)
async def login(
    form_data: OAuth2PasswordRequestForm = Depends(),
    workspace: Workspace = Depends(get_workspace),
):
    """Log in as a registered user or, when enabled, as the guest."""
    user = authenticate(workspace.users, workspace.settings, form_data.username, form_data.password)
    session_id = workspace.sessions.open(user)
    logger.info("Login: %s", user.username)
    return Token(access_token=create_access_token(session_id, user), user=to_response(user))


@router.post("/logout", status_code=204)
async def logout(
    session_id: str = Depends(get_session_id),
    workspace: Workspace = Depends(get_workspace),
):
    """End the current session. Logging out twice is harmless."""
    workspace.sessions.close(session_id)
    return None


@router.get("/me", response_model=UserResponse)
async def read_current_user(current_user: User = Depends(get_current_user)):
    """Get the session's user, with any permission changes already applied."""
    return to_response(current_user)
