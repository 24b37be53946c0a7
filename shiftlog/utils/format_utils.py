"""Formatting utility functions for shiftlog."""
from typing import Optional


def format_hours(hours: float) -> str:
    """Format hours with exactly two decimal places.

    Args:
        hours: Number of hours

    Returns:
        Formatted hours string (e.g. "8.50")
    """
    return f"{hours:.2f}"


def parse_hours(value: str) -> Optional[float]:
    """Parse a stored hours field.

    Args:
        value: Hours string as written to the store (e.g. "8.50")

    Returns:
        Hours rounded to two decimals, or None if the value is not a number
    """
    try:
        return round(float(value), 2)
    except (TypeError, ValueError):
        return None
