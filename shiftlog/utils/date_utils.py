"""Date utility functions for shiftlog."""
import re
from datetime import datetime

from ..exceptions import ParseError

DISPLAY_FORMAT = "%Y-%m-%d %H:%M:%S"

# isoformat() only reads up to microseconds before Python 3.11
_FRACTION_RE = re.compile(r"(\.\d{6})\d+")


def now() -> datetime:
    """Get the current instant in local time.

    Returns:
        Timezone-aware datetime carrying the local UTC offset
    """
    return datetime.now().astimezone()


def format_display(dt: datetime) -> str:
    """Format a datetime for console output (YYYY-MM-DD HH:MM:SS).

    Args:
        dt: Datetime to format

    Returns:
        Formatted datetime string
    """
    return dt.strftime(DISPLAY_FORMAT)


def parse_strict(value: str) -> datetime:
    """Parse a YYYY-MM-DD HH:MM:SS string as local time.

    Args:
        value: Datetime string entered by the user

    Returns:
        Timezone-aware datetime in the local offset

    Raises:
        ParseError: If the string does not match the format exactly
    """
    try:
        naive = datetime.strptime(value, DISPLAY_FORMAT)
    except (TypeError, ValueError) as e:
        raise ParseError(f"Invalid time '{value}', expected format YYYY-MM-DD HH:MM:SS") from e
    return naive.astimezone()


def serialize(dt: datetime) -> str:
    """Convert a datetime to the RFC3339 string stored on disk."""
    return dt.isoformat()


def deserialize(value: str) -> datetime:
    """Parse an RFC3339 string read from a store file.

    Args:
        value: Stored timestamp (e.g. "2024-01-01T09:00:00+00:00")

    Returns:
        Timezone-aware datetime

    Raises:
        ParseError: If the string is malformed or carries no UTC offset
    """
    if not isinstance(value, str):
        raise ParseError(f"Invalid timestamp: {value!r}")
    text = value.strip()
    if text.endswith(("Z", "z")):
        text = text[:-1] + "+00:00"
    text = _FRACTION_RE.sub(r"\1", text)
    try:
        dt = datetime.fromisoformat(text)
    except ValueError as e:
        raise ParseError(f"Invalid timestamp: {value!r}") from e
    if dt.tzinfo is None or dt.utcoffset() is None:
        raise ParseError(f"Timestamp has no UTC offset: {value!r}")
    return dt


def minutes_between(start: datetime, end: datetime) -> int:
    """Whole minutes from start to end, truncated toward zero."""
    seconds = int((end - start).total_seconds())
    minutes = abs(seconds) // 60
    return -minutes if seconds < 0 else minutes


def hours_between(start: datetime, end: datetime) -> float:
    """Elapsed hours from start to end.

    Args:
        start: Start of the interval
        end: End of the interval

    Returns:
        Truncated minutes divided by 60, rounded to two decimals
    """
    return round(minutes_between(start, end) / 60, 2)
