"""ShiftEngine: clock-in, clock-out and corrections of the latest shift."""
from datetime import datetime
from typing import Callable, List, Optional, Union

from ..exceptions import NoOpenShift, StoreNotFound
from ..store.record_store import RecordStore
from ..store.shift_record import ShiftRecord
from ..utils.date_utils import now, parse_strict, hours_between
from ..utils.log_utils import get_logger

log = get_logger(__name__)

TimeArg = Union[datetime, str]


def find_last_clock_in(records: List[ShiftRecord]) -> Optional[ShiftRecord]:
    """Find the open shift that a clock-out would close.

    Only an open record with no closed record after it counts. If several
    open records follow each other, the latest clock-in wins.

    Args:
        records: Records in file order

    Returns:
        The open record, or None if the job is not clocked in
    """
    for record in reversed(records):
        if record.is_closed:
            return None
        if record.is_open:
            return record
    return None


class ShiftEngine:
    """Applies the clock commands of a job to a RecordStore."""

    def __init__(self, store: RecordStore, clock: Optional[Callable[[], datetime]] = None):
        """Initialize a ShiftEngine.

        Args:
            store: Store the records are read from and written to
            clock: Function returning the current time (optional, for tests)
        """
        self.store = store
        self.clock = clock or now

    def records(self, job: str) -> List[ShiftRecord]:
        """Get all records of a job, an empty list if it has no store yet."""
        try:
            return self.store.read_all(job)
        except StoreNotFound:
            return []

    def is_clocked_in(self, job: str) -> bool:
        return find_last_clock_in(self.records(job)) is not None

    def clock_in(self, job: str) -> ShiftRecord:
        """Record a clock-in at the current time.

        A job that is already clocked in is not rejected, the new clock-in
        becomes the one the next clock-out closes.

        Args:
            job: Job name

        Returns:
            The open record
        """
        start = self.clock()
        if self.store.exists(job) and self.is_clocked_in(job):
            log.warning("Job '%s' is already clocked in, recording a new clock-in", job)
        return self.store.append_open(job, start)

    def clock_out(self, job: str) -> ShiftRecord:
        """Close the open shift at the current time.

        Args:
            job: Job name

        Returns:
            The closed record

        Raises:
            NoOpenShift: If the job is not clocked in
        """
        last_clock_in = find_last_clock_in(self.records(job))
        if last_clock_in is None:
            raise NoOpenShift(job)
        end = self.clock()
        hours = hours_between(last_clock_in.start, end)
        return self.store.append_closed(job, last_clock_in.start, end, hours)

    def edit_start(self, job: str, new_start: TimeArg) -> ShiftRecord:
        """Change the start time of the last shift.

        Args:
            job: Job name
            new_start: New start time, a datetime or a "YYYY-MM-DD HH:MM:SS" string

        Returns:
            The updated record
        """
        return self.store.replace_last(job, "start", self._to_datetime(new_start))

    def edit_stop(self, job: str, new_stop: TimeArg) -> ShiftRecord:
        """Change the stop time of the last shift.

        Args:
            job: Job name
            new_stop: New stop time, a datetime or a "YYYY-MM-DD HH:MM:SS" string

        Returns:
            The updated record
        """
        return self.store.replace_last(job, "end", self._to_datetime(new_stop))

    @staticmethod
    def _to_datetime(value: TimeArg) -> datetime:
        if isinstance(value, datetime):
            return value if value.tzinfo else value.astimezone()
        return parse_strict(value)
