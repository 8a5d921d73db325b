"""Application configuration."""
from pathlib import Path
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Deployment settings.

    Environment variables take precedence over .env file.
    Company name, guest credentials and the rest of the
    user-editable settings live in the slot store, not here.
    """

    APP_NAME: str = "Inventory Catalog"
    APP_VERSION: str = "0.1.0"
    DEBUG: bool = False
    LOG_LEVEL: str = "INFO"

    # Slot storage
    DATABASE_URL: str = "sqlite:///./inventory_catalog.db"

    # Session token signing
    SECRET_KEY: str = "your-secret-key-change-in-production"
    ALGORITHM: str = "HS256"
    ACCESS_TOKEN_EXPIRE_MINUTES: int = 480

    # First-run administrator
    DEFAULT_ADMIN_USERNAME: str = "admin"
    DEFAULT_ADMIN_PASSWORD: str = "admin"

    # Guest sessions
    GUEST_USER_ID: str = "guest-user"
    GUEST_USERNAME_SUFFIX: str = " (زائر)"

    # Off by default: stored passwords are compared as plain values
    HASH_PASSWORDS: bool = False

    # Largest accepted company logo, decoded
    LOGO_MAX_BYTES: int = 1024 * 1024

    model_config = SettingsConfigDict(
        env_file=".env" if Path(".env").exists() else None,
        env_file_encoding="utf-8",
        extra="ignore",
    )


settings = Settings()
