"""Core backup repository functionality."""

from .repository import BackupsRepository
from .scanner import BackupDirectoryScanner
from .naming import is_valid_backup_filename, is_valid_backup_path
from .models import BackupFile

__all__ = ["BackupsRepository", "BackupDirectoryScanner", "BackupFile",
           "is_valid_backup_filename", "is_valid_backup_path"]
