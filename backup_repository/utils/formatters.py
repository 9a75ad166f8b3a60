"""Formatting utilities for backup repository output."""

from datetime import datetime, timezone
from typing import Optional


def format_date(dt: datetime, short: bool = False) -> str:
    """Format datetime for display.

    Args:
        dt: Datetime to format.
        short: If True, use short format.

    Returns:
        Formatted date string.
    """
    if short:
        return dt.strftime('%Y-%m-%d %H:%M')
    else:
        return dt.strftime('%Y-%m-%d %H:%M:%S %Z').rstrip()


def get_age_indicator(created_at: Optional[datetime], now: Optional[datetime] = None,
                      use_emoji: bool = True) -> str:
    """Get age indicator based on when a backup was created.

    Args:
        created_at: When the backup was created, timezone aware.
        now: Reference time, defaults to the current UTC time.
        use_emoji: Whether to use emoji indicators.

    Returns:
        Age indicator string.
    """
    if created_at is None:
        return "⚪ UNKNOWN" if use_emoji else "- UNK"

    now = now or datetime.now(timezone.utc)
    days_old = (now - created_at).days

    if use_emoji:
        if days_old <= 0:
            return "📍 TODAY"
        elif days_old == 1:
            return "📅 YEST"
        elif days_old <= 7:
            return f"📆 {days_old}d"
        elif days_old <= 30:
            return f"📋 {days_old}d"
        else:
            return f"📁 {days_old}d"
    else:
        if days_old <= 0:
            return "* TODAY"
        elif days_old == 1:
            return "* YEST"
        elif days_old <= 7:
            return f"+ {days_old}d"
        elif days_old <= 30:
            return f"- {days_old}d"
        else:
            return f"o {days_old}d"
