"""Pytest configuration and shared fixtures."""

import pytest
from pathlib import Path

from backup_repository import BackupsRepository


@pytest.fixture
def backup_dir(tmp_path: Path) -> Path:
    """Create an empty backup directory."""
    directory = tmp_path / "backup"
    directory.mkdir()
    return directory


@pytest.fixture
def repository(backup_dir: Path) -> BackupsRepository:
    """Provide a repository pointed at the temporary backup directory."""
    return BackupsRepository(str(backup_dir))


@pytest.fixture
def write_backup(backup_dir: Path):
    """Write a file into the backup directory and return its path."""
    def _write(name: str, content: bytes = b"backup") -> Path:
        path = backup_dir / name
        path.write_bytes(content)
        return path
    return _write
