"""Authentication gate, permission checks and session handling."""
import logging
import secrets
from datetime import datetime, timedelta, timezone
from typing import Dict, Iterable, Optional, Tuple

from fastapi import Depends, HTTPException, Request, status
from fastapi.security import OAuth2PasswordBearer
from jose import JWTError, jwt
from passlib.context import CryptContext

from inventory_catalog.config import settings
from inventory_catalog.exceptions import InvalidCredentials, PermissionDenied
from inventory_catalog.schemas.settings import AppSettings
from inventory_catalog.schemas.user import User, UserPermissions

logger = logging.getLogger(__name__)

pwd_context = CryptContext(schemes=["pbkdf2_sha256"], deprecated="auto")
oauth2_scheme = OAuth2PasswordBearer(tokenUrl="/api/auth/login")


def get_password_hash(password: str) -> str:
    """Value to store for a password; the plain value unless hashing is on."""
    if settings.HASH_PASSWORDS:
        return pwd_context.hash(password)
    return password


def verify_password(plain_password: str, stored_password: str) -> bool:
    """Compare a submitted password with the stored one.

    Stored values that look like passlib hashes are verified as hashes,
    anything else by exact equality.
    """
    if pwd_context.identify(stored_password) is not None:
        return pwd_context.verify(plain_password, stored_password)
    return plain_password == stored_password


def is_guest(user: User) -> bool:
    return user.id == settings.GUEST_USER_ID


def make_guest(username: str) -> User:
    """Synthesize the read-only guest identity."""
    return User(
        id=settings.GUEST_USER_ID,
        username=f"{username}{settings.GUEST_USERNAME_SUFFIX}",
        password="",
        permissions=UserPermissions(),
    )


def require_permission(actor: Optional[User], permission: str, action: str = "perform this action"):
    """Raise PermissionDenied unless actor holds permission.

    permission is one of can_add, can_delete, can_change_settings.
    """
    if actor is None or not getattr(actor.permissions, permission):
        who = actor.username if actor else "anonymous"
        logger.warning("Permission %s denied for %s", permission, who)
        raise PermissionDenied(f"You do not have permission to {action}")


def authenticate(users: Iterable[User], app_settings: AppSettings, username: str, password: str) -> User:
    """Match registered users first, then the guest credentials if enabled."""
    for user in users:
        if user.username == username and verify_password(password, user.password):
            return user

    guest = app_settings.guest_credentials
    if guest.enabled and guest.username == username and guest.password == password:
        return make_guest(username)

    raise InvalidCredentials("Invalid username or password")


class SessionRegistry:
    """Volatile session storage; lives only as long as the process.

    Each entry expires with its token. Stale entries are dropped on access
    and whenever a new session opens.
    """

    def __init__(self, ttl: Optional[timedelta] = None):
        self.ttl = ttl if ttl is not None else timedelta(minutes=settings.ACCESS_TOKEN_EXPIRE_MINUTES)
        self._sessions: Dict[str, Tuple[User, datetime]] = {}

    def __len__(self):
        return len(self._sessions)

    def _purge_expired(self, now: datetime):
        for session_id in [sid for sid, (_, expires) in self._sessions.items() if expires <= now]:
            del self._sessions[session_id]

    def open(self, user: User) -> str:
        now = datetime.now(timezone.utc)
        self._purge_expired(now)
        session_id = secrets.token_urlsafe(16)
        self._sessions[session_id] = (user, now + self.ttl)
        return session_id

    def get(self, session_id: str) -> Optional[User]:
        entry = self._sessions.get(session_id)
        if entry is None:
            return None
        user, expires = entry
        if expires <= datetime.now(timezone.utc):
            del self._sessions[session_id]
            return None
        return user

    def close(self, session_id: str):
        self._sessions.pop(session_id, None)

    def refresh_user(self, user: User):
        """Replace the cached user in every session it owns."""
        for session_id, (current, expires) in list(self._sessions.items()):
            if current.id == user.id:
                self._sessions[session_id] = (user, expires)

    def close_user(self, user_id: str):
        for session_id in [sid for sid, (u, _) in self._sessions.items() if u.id == user_id]:
            del self._sessions[session_id]


def create_access_token(session_id: str, user: User, expires_delta: Optional[timedelta] = None) -> str:
    """Sign a token pointing at a server-side session."""
    expire = datetime.now(timezone.utc) + (
        expires_delta or timedelta(minutes=settings.ACCESS_TOKEN_EXPIRE_MINUTES)
    )
    to_encode = {"sub": user.id, "sid": session_id, "exp": expire}
    return jwt.encode(to_encode, settings.SECRET_KEY, algorithm=settings.ALGORITHM)


def decode_session_id(token: str) -> Optional[str]:
    try:
        payload = jwt.decode(token, settings.SECRET_KEY, algorithms=[settings.ALGORITHM])
    except JWTError:
        return None
    return payload.get("sid")


def get_workspace(request: Request):
    """The application's Workspace, created at startup."""
    return request.app.state.workspace


def get_session_id(token: str = Depends(oauth2_scheme)) -> str:
    credentials_exception = HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail="Could not validate credentials",
        headers={"WWW-Authenticate": "Bearer"},
    )
    session_id = decode_session_id(token)
    if session_id is None:
        raise credentials_exception
    return session_id


def get_current_user(
    session_id: str = Depends(get_session_id),
    workspace=Depends(get_workspace),
) -> User:
    """Resolve the acting user from the session registry."""
    user = workspace.sessions.get(session_id)
    if user is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Session expired or logged out",
            headers={"WWW-Authenticate": "Bearer"},
        )
    return user
