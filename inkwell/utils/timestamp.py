"""Timestamp formatting utilities."""

from datetime import datetime


def now() -> str:
    """Current local time as a compact sortable string (e.g., "20261017_184540")."""
    return datetime.now().strftime("%Y%m%d_%H%M%S")


def to_iso8601(dt: datetime) -> str:
    """
    Format a datetime as an ISO 8601 timestamp suitable for <time datetime="...">.

    Microseconds are dropped.

    Examples:
        to_iso8601(datetime(2019, 3, 1, 12, 0, tzinfo=timezone.utc))
        # "2019-03-01T12:00:00+00:00"
    """
    return dt.replace(microsecond=0).isoformat()


def format_display_date(dt: datetime, date_format: str) -> str:
    """
    Format a datetime for display using a strftime pattern.

    Returns the ISO 8601 form if the pattern is empty.
    """
    if not date_format:
        return to_iso8601(dt)
    return dt.strftime(date_format)
