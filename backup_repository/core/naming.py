"""Backup filename validation."""

import os
import re

# Must not start with ".", only word characters, dots and hyphens, ends with ".tar"
BACKUP_FILENAME_PATTERN = re.compile(r"(?!\.)[\w.\-]+\.tar", re.ASCII)


def is_valid_backup_filename(name: str) -> bool:
    """Check if a basename is a valid backup filename.

    Args:
        name: File basename, never a full path.

    Returns:
        True if the name follows the backup naming convention.
    """
    if not isinstance(name, str):
        return False
    return BACKUP_FILENAME_PATTERN.fullmatch(name) is not None


def is_valid_backup_path(path: str) -> bool:
    """Check the basename of a path against the backup naming convention."""
    return is_valid_backup_filename(os.path.basename(path))
