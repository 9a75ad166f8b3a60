"""Repository mediating all filesystem access to the backup directory."""

import os
import logging
from datetime import datetime, timezone
from typing import List, Optional

from .models import BackupFile
from .naming import is_valid_backup_filename
from .scanner import BackupDirectoryScanner
from ..exceptions import BackupNotFoundError, InvalidBackupFilenameError, StorageAccessError


class BackupsRepository:
    """Lists, inspects, reads and deletes backup archives in one directory.

    The repository keeps no state besides the configured directory, so a
    single instance can be shared between concurrent callers. Every
    filesystem failure is raised as a StorageAccessError; nothing is retried.
    """

    def __init__(self, backup_directory: str, validate_filenames: bool = True,
                 scanner: Optional[BackupDirectoryScanner] = None):
        """Initialize backups repository.

        Args:
            backup_directory: Directory holding the backup archives.
            validate_filenames: Reject caller-supplied filenames that do not
                        follow the backup naming convention.
            scanner: Optional directory scanner, mainly for tests.

        Raises:
            ValueError: If backup_directory is empty.
        """
        if not backup_directory:
            raise ValueError("Backup directory cannot be empty")

        self._backup_path = self._normalize_directory(backup_directory)
        self.validate_filenames = validate_filenames
        self.scanner = scanner or BackupDirectoryScanner(is_valid_backup_filename)
        self.logger = logging.getLogger(__name__)

    @staticmethod
    def _normalize_directory(directory: str) -> str:
        path = os.path.abspath(os.path.expanduser(directory))
        if not path.endswith(os.sep):
            path += os.sep
        return path

    def configuration_backup_path(self) -> str:
        """Return the backup directory with exactly one trailing separator."""
        return self._backup_path

    def resolve_path(self, filename: str) -> str:
        """Join the backup directory and a filename.

        No validation is done here; the filename is used verbatim.
        """
        return self.configuration_backup_path() + filename

    def list_backups(self) -> List[BackupFile]:
        """List valid backup files directly inside the backup directory.

        Returns:
            List of BackupFile records. Order is not defined.

        Raises:
            StorageAccessError: If the directory cannot be read.
        """
        filenames = self.scanner.scan(self.configuration_backup_path())
        return [BackupFile(filename=name, path=self.resolve_path(name)) for name in filenames]

    def backup_exists(self, filename: str) -> bool:
        """Check if a backup file with the given name exists."""
        path = self._get_file_path(filename, "can't check backup file")
        return os.path.isfile(path)

    def get_created_at(self, filename: str) -> datetime:
        """Get the creation date/time of a backup file.

        Platforms that do not record a birth time report the last
        modification time instead.

        Args:
            filename: Backup filename.

        Returns:
            Timezone-aware datetime in UTC.

        Raises:
            StorageAccessError: If the file metadata cannot be read.
        """
        operation = "can't read backup file's creation time"
        path = self._get_file_path(filename, operation)
        try:
            stat_result = os.stat(path)
        except OSError as e:
            raise self._storage_error(operation, path, e) from e

        timestamp = getattr(stat_result, 'st_birthtime', None)
        if timestamp is None:
            timestamp = stat_result.st_mtime
        return datetime.fromtimestamp(timestamp, tz=timezone.utc)

    def delete_backup(self, filename: str) -> None:
        """Delete a backup file.

        Deleting a file that does not exist is not an error.

        Raises:
            StorageAccessError: If an existing path cannot be deleted.
        """
        operation = "can't delete backup file"
        path = self._get_file_path(filename, operation)
        try:
            os.remove(path)
        except FileNotFoundError:
            self.logger.debug(f"Backup file already absent: {path}")
            return
        except OSError as e:
            raise self._storage_error(operation, path, e) from e

        self.logger.info(f"Deleted backup file {path}")

    def read_backup_content(self, filename: str) -> bytes:
        """Read the full content of a backup file.

        Raises:
            StorageAccessError: If the file cannot be read.
        """
        operation = "can't read backup file's content"
        path = self._get_file_path(filename, operation)
        try:
            with open(path, 'rb') as f:
                return f.read()
        except OSError as e:
            raise self._storage_error(operation, path, e) from e

    def _get_file_path(self, filename: str, operation: str) -> str:
        if self.validate_filenames and not is_valid_backup_filename(filename):
            self.logger.error(f"{operation}: invalid backup filename {filename!r}")
            raise InvalidBackupFilenameError(f"{operation}: invalid backup filename", str(filename))
        return self.resolve_path(filename)

    def _storage_error(self, operation: str, path: str, error: OSError) -> StorageAccessError:
        self.logger.error(f"{operation} ({path}): {error}")
        if isinstance(error, FileNotFoundError):
            return BackupNotFoundError(operation, path, error)
        return StorageAccessError(operation, path, error)
