"""FastAPI application entry point."""
import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from inventory_catalog.config import settings
from inventory_catalog.database import Base, SessionLocal, engine
from inventory_catalog.exceptions import (
    CatalogError,
    ImportMalformed,
    InvalidCredentials,
    NotFound,
    PermissionDenied,
    SelfDeleteRefused,
    StorageUnavailable,
    ValidationFailed,
)
from inventory_catalog.log_config import setup_logging
from inventory_catalog.routes import auth, backup, items, quick_entry, users, settings as settings_routes
from inventory_catalog.services.store import SlotStore
from inventory_catalog.services.workspace import Workspace

logger = logging.getLogger(__name__)

ERROR_STATUS = {
    InvalidCredentials: 401,
    PermissionDenied: 403,
    ValidationFailed: 400,
    ImportMalformed: 400,
    SelfDeleteRefused: 400,
    NotFound: 404,
    StorageUnavailable: 503,
}


async def catalog_error_handler(request: Request, exc: CatalogError):
    status_code = ERROR_STATUS.get(type(exc), 400)
    headers = {"WWW-Authenticate": "Bearer"} if status_code == 401 else None
    return JSONResponse(status_code=status_code, content={"detail": exc.message}, headers=headers)


def create_app(workspace: Optional[Workspace] = None) -> FastAPI:
    """Build the app. Without a workspace, one is loaded from DATABASE_URL at startup."""

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        if workspace is None:
            Base.metadata.create_all(bind=engine)
            app.state.workspace = Workspace(SlotStore(SessionLocal))
            app.state.workspace.load()
        else:
            app.state.workspace = workspace
        logger.info("%s %s started", settings.APP_NAME, settings.APP_VERSION)
        yield

    app = FastAPI(
        title=settings.APP_NAME,
        version=settings.APP_VERSION,
        description="Inventory catalog with quick-entry lists, user permissions and backups",
        lifespan=lifespan,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],  # Configure appropriately for production
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.add_exception_handler(CatalogError, catalog_error_handler)

    app.include_router(auth.router, prefix="/api")
    app.include_router(items.router, prefix="/api")
    app.include_router(quick_entry.router, prefix="/api")
    app.include_router(users.router, prefix="/api")
    app.include_router(settings_routes.router, prefix="/api")
    app.include_router(backup.router, prefix="/api")

    @app.get("/health")
    async def health_check():
        """Health check endpoint."""
        return {"status": "healthy"}

    return app


setup_logging(settings.LOG_LEVEL)
app = create_app()
