"""
Utility functions for the application.
"""
from typing import Any, Dict, Optional
from datetime import date, datetime, timezone
from zoneinfo import ZoneInfo
from reflection_app.core.config import settings
from reflection_app.core.exceptions import ValidationError


def utc_now() -> datetime:
    """Current UTC time as a naive datetime (the storage convention)."""
    return datetime.now(timezone.utc).replace(tzinfo=None)


def local_today() -> date:
    """
    Today's calendar date according to the service clock.

    Uses settings.TIMEZONE when configured, otherwise the host's local zone.
    The database clock is never consulted.
    """
    if settings.TIMEZONE:
        return datetime.now(ZoneInfo(settings.TIMEZONE)).date()
    return datetime.now().date()


def parse_iso_date(value: str) -> Optional[date]:
    """Parse a YYYY-MM-DD string, returning None when malformed."""
    try:
        return date.fromisoformat(value)
    except (TypeError, ValueError):
        return None


def format_message(message: str) -> Dict[str, Any]:
    """Format a plain acknowledgement response."""
    return {"message": message}


def full_name(first_name: Optional[str], last_name: Optional[str]) -> str:
    """Join first and last name for display."""
    return f"{first_name or ''} {last_name or ''}".strip()


def require_positive_id(value: Optional[int], label: str) -> int:
    """Reject missing or non-positive identifiers before touching storage."""
    if value is None or value <= 0:
        raise ValidationError(f"invalid {label}")
    return value
