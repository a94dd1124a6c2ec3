"""Date and time utility functions."""
from datetime import datetime, timezone


def now_iso() -> str:
    """
    Current local time as an ISO 8601 string with UTC offset.

    Returns:
        Timestamp string (e.g., "2025-10-28T14:00:10.123456+08:00")
    """
    return datetime.now().astimezone().isoformat()


def parse_timestamp(timestamp: str) -> datetime:
    """
    Parse an ISO 8601 timestamp into an aware datetime.

    Args:
        timestamp: ISO 8601 string, "Z" suffix accepted

    Returns:
        Timezone-aware datetime (naive input is assumed to be UTC)

    Raises:
        ValueError: If timestamp format is invalid
    """
    if not isinstance(timestamp, str):
        raise ValueError(f"Invalid timestamp format: {timestamp!r}")

    try:
        parsed = datetime.fromisoformat(timestamp.replace("Z", "+00:00"))
    except ValueError as e:
        raise ValueError(f"Invalid timestamp format: {timestamp}") from e

    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed


def format_timestamp(timestamp: str, fmt: str = "%Y-%m-%d %H:%M") -> str:
    """
    Format an ISO 8601 timestamp for display in local time.

    Args:
        timestamp: ISO 8601 string
        fmt: strftime format (default "%Y-%m-%d %H:%M")

    Returns:
        Formatted string, or the raw input if it cannot be parsed
    """
    try:
        return parse_timestamp(timestamp).astimezone().strftime(fmt)
    except ValueError:
        return timestamp or ""
