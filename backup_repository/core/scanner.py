"""Directory scanning for backup archives."""

import os
import logging
from typing import Callable, List

from .naming import is_valid_backup_filename
from ..exceptions import BackupNotFoundError, StorageAccessError


class BackupDirectoryScanner:
    """Lists backup files directly inside a backup directory."""

    # Only the directory's own entries are visited, subdirectories are never entered
    MAX_DEPTH = 1

    def __init__(self, validator: Callable[[str], bool] = is_valid_backup_filename):
        """Initialize directory scanner.

        Args:
            validator: Predicate applied to each entry's basename.
        """
        self.validator = validator
        self.logger = logging.getLogger(__name__)

    def scan(self, base_path: str) -> List[str]:
        """Scan a backup directory and return the names of valid backup files.

        Args:
            base_path: Directory to scan.

        Returns:
            List of filenames, in directory iteration order.

        Raises:
            StorageAccessError: If the directory cannot be opened or walked.
        """
        self.logger.info(f"Starting scan of {base_path}")
        filenames = []

        try:
            for root, dirs, files in os.walk(base_path, onerror=self._raise_walk_error):
                depth = root[len(base_path):].count(os.sep)
                if depth + 1 >= self.MAX_DEPTH:
                    dirs[:] = []  # Don't recurse further

                for name in files:
                    if self.validator(name):
                        filenames.append(name)
                    else:
                        self.logger.debug(f"Skipping {os.path.join(root, name)}: not a backup filename")
        except FileNotFoundError as e:
            self.logger.error(f"can't read backup files from configuration path ({base_path})")
            raise BackupNotFoundError("can't read backup files from configuration path", base_path, e) from e
        except OSError as e:
            self.logger.error(f"can't read backup files from configuration path ({base_path})")
            raise StorageAccessError("can't read backup files from configuration path", base_path, e) from e

        self.logger.info(f"Completed scan of {base_path}, found {len(filenames)} backup files")
        return filenames

    @staticmethod
    def _raise_walk_error(error: OSError) -> None:
        """Propagate errors that os.walk would otherwise ignore."""
        raise error
