"""Utility modules for the backup repository."""

from .formatters import format_date, get_age_indicator

__all__ = ["format_date", "get_age_indicator"]
