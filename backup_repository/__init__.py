"""
Backup Repository - Managed access to a directory of configuration backups.

This package lists, inspects, reads and deletes `.tar` backup archives kept in
a single configured directory, enforcing the backup naming convention.
"""

__version__ = "1.0.0"

from .core.repository import BackupsRepository
from .core.models import BackupFile
from .core.naming import is_valid_backup_filename
from .exceptions import StorageAccessError, BackupNotFoundError, InvalidBackupFilenameError

__all__ = ["BackupsRepository", "BackupFile", "is_valid_backup_filename",
           "StorageAccessError", "BackupNotFoundError", "InvalidBackupFilenameError"]
