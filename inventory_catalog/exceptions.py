"""Exception hierarchy for the inventory catalog.

Every condition here is recoverable: the operation that raised it left the
previous state untouched (except StorageUnavailable on write, where the
in-memory state keeps the change). The API layer maps each class to an
HTTP status in ``main.py``.
"""


class CatalogError(Exception):
    """Base exception for all catalog errors."""

    def __init__(self, message: str = ""):
        super().__init__(message or self.__doc__)
        self.message = message or self.__doc__


class InvalidCredentials(CatalogError):
    """Username or password is incorrect."""


class PermissionDenied(CatalogError):
    """The acting session lacks the permission for this operation."""


class ValidationFailed(CatalogError):
    """Submitted data failed validation."""


class ImportMalformed(CatalogError):
    """Backup document is missing required fields."""


class StorageUnavailable(CatalogError):
    """Persistent storage could not be written."""


class SelfDeleteRefused(CatalogError):
    """You cannot delete your own account."""


class NotFound(CatalogError):
    """Requested record does not exist."""
