"""Errors raised by the backup repository."""

from typing import Optional


class StorageAccessError(Exception):
    """Raised when a filesystem operation on the backup directory fails."""

    def __init__(self, operation: str, path: str, cause: Optional[BaseException] = None):
        """Initialize storage access error.

        Args:
            operation: Human readable description of the failed operation.
            path: Path the operation was applied to.
            cause: Underlying exception, if any.
        """
        self.operation = operation
        self.path = path
        self.cause = cause
        super().__init__(f"{operation} ({path})")


class BackupNotFoundError(StorageAccessError):
    """The backup file or the backup directory does not exist."""


class InvalidBackupFilenameError(StorageAccessError):
    """A filename does not follow the backup naming convention."""
