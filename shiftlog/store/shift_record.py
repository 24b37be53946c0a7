"""ShiftRecord class for representing one clock-in/clock-out interval."""
from datetime import datetime
from typing import Optional, List

from ..utils.date_utils import serialize, format_display, hours_between
from ..utils.format_utils import format_hours

FIELDS = ("start", "end")


class ShiftRecord:
    """A shift of a job: open while only `start` is set, closed once `end` is set."""

    def __init__(self, start: datetime, end: Optional[datetime] = None, hours: Optional[float] = None):
        """Initialize a ShiftRecord.

        Args:
            start: Clock-in time
            end: Clock-out time (optional while the shift is open)
            hours: Stored hours (optional, computed from start and end if missing)
        """
        self.start = start
        self.end = end
        self.hours = hours
        if self.hours is None:
            self.recompute()

    @property
    def is_open(self) -> bool:
        return self.end is None

    @property
    def is_closed(self) -> bool:
        return self.start is not None and self.end is not None

    @property
    def start_display(self) -> str:
        return format_display(self.start) if self.start else ""

    @property
    def end_display(self) -> str:
        return format_display(self.end) if self.end else ""

    def recompute(self):
        """Recompute hours from start and end (None for an open shift)."""
        self.hours = hours_between(self.start, self.end) if self.is_closed else None

    def set_field(self, field: str, value: datetime):
        """Overwrite the start or end time and recompute hours.

        Args:
            field: "start" or "end"
            value: New time

        Raises:
            ValueError: If field is not "start" or "end"
        """
        if field not in FIELDS:
            raise ValueError(f"Unknown shift field '{field}', expected one of {', '.join(FIELDS)}")
        setattr(self, field, value)
        self.recompute()

    def to_row(self) -> List[str]:
        """Convert to a store row.

        Returns:
            [start] for an open shift, [start, end, hours] for a closed one
        """
        if self.is_open:
            return [serialize(self.start)]
        return [serialize(self.start), serialize(self.end), format_hours(self.hours)]

    def __eq__(self, other):
        if not isinstance(other, ShiftRecord):
            return NotImplemented
        return (self.start, self.end, self.hours) == (other.start, other.end, other.hours)

    def __repr__(self):
        return f"ShiftRecord(start={self.start!r}, end={self.end!r}, hours={self.hours!r})"
