"""Data models for the backup repository."""

from dataclasses import dataclass


@dataclass(frozen=True)
class BackupFile:
    """A backup archive found in the backup directory."""
    filename: str
    path: str
