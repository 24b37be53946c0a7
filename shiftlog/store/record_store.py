"""RecordStore: the per-job CSV file of shift records."""
from datetime import datetime
from pathlib import Path
from typing import List, Optional

from .locator import StoreLocator
from .shift_record import ShiftRecord, FIELDS
from ..exceptions import StoreIOError, StoreNotFound, EmptyStore, ParseError
from ..utils.date_utils import deserialize
from ..utils.format_utils import parse_hours
from ..utils.file_utils import ensure_directory, read_csv_rows, append_csv_row, write_csv_atomic
from ..utils.log_utils import get_logger

HEADERS = ["Clock In", "Clock Out", "Hours"]
# Header written by earlier releases that kept the job name in every row
LEGACY_HEADERS = ["Job", "Clock In", "Clock Out", "Hours"]

log = get_logger(__name__)


def _is_timestamp(value: str) -> bool:
    try:
        deserialize(value)
    except ParseError:
        return False
    return True


def parse_row(row: List[str]) -> Optional[ShiftRecord]:
    """Turn a store row into a ShiftRecord.

    Accepts [start], [start, end] and [start, end, hours], as well as the
    older layouts with a leading job column ([job, start] and
    [job, start, end, hours]).

    Args:
        row: CSV fields

    Returns:
        ShiftRecord, or None if the row is a header or does not fit any layout
    """
    fields = [f.strip() for f in row]
    if fields in (HEADERS, LEGACY_HEADERS):
        return None
    if len(fields) == 4 or (len(fields) == 2 and not _is_timestamp(fields[0])):
        fields = fields[1:]
    if len(fields) not in (1, 2, 3):
        return None

    try:
        start = deserialize(fields[0])
        end = deserialize(fields[1]) if len(fields) > 1 else None
    except ParseError:
        return None

    hours = parse_hours(fields[2]) if len(fields) == 3 else None
    return ShiftRecord(start, end, hours)


def fold_closed_markers(records: List[ShiftRecord]) -> List[ShiftRecord]:
    """Drop open markers that are closed by the record right after them.

    Clock-out appends the closed record after the open one instead of
    rewriting the file, so [open t0, closed t0-t1] is a single shift.

    Args:
        records: Records in file order

    Returns:
        Records with one entry per shift
    """
    folded = []
    for idx, record in enumerate(records):
        nxt = records[idx + 1] if idx + 1 < len(records) else None
        if record.is_open and nxt is not None and nxt.is_closed and nxt.start == record.start:
            continue
        folded.append(record)
    return folded


class RecordStore:
    """Reads and writes the shift records of each job."""

    def __init__(self, locator: Optional[StoreLocator] = None):
        """Initialize a RecordStore.

        Args:
            locator: Decides where store files live (optional, platform default if omitted)
        """
        self.locator = locator or StoreLocator()

    def path(self, job: str) -> Path:
        return self.locator.path_for(job)

    def exists(self, job: str) -> bool:
        return self.path(job).is_file()

    def _append(self, job: str, record: ShiftRecord) -> ShiftRecord:
        path = self.path(job)
        try:
            ensure_directory(path.parent)
            append_csv_row(path, record.to_row())
        except OSError as e:
            raise StoreIOError(f"Could not write to '{path}': {e}") from e
        log.debug("Appended %s to %s", record.to_row(), path)
        return record

    def append_open(self, job: str, start: datetime) -> ShiftRecord:
        """Append an open shift.

        Args:
            job: Job name
            start: Clock-in time

        Returns:
            The appended record
        """
        return self._append(job, ShiftRecord(start))

    def append_closed(self, job: str, start: datetime, end: datetime, hours: Optional[float] = None) -> ShiftRecord:
        """Append a closed shift.

        Args:
            job: Job name
            start: Clock-in time
            end: Clock-out time
            hours: Elapsed hours (optional, computed from start and end if missing)

        Returns:
            The appended record
        """
        return self._append(job, ShiftRecord(start, end, hours))

    def read_all(self, job: str) -> List[ShiftRecord]:
        """Read every record of a job in file order.

        Rows that cannot be parsed are skipped.

        Args:
            job: Job name

        Returns:
            List of ShiftRecord objects

        Raises:
            StoreNotFound: If the job has no store file yet
            StoreIOError: If the file cannot be read
        """
        path = self.path(job)
        try:
            rows = read_csv_rows(path)
        except FileNotFoundError as e:
            raise StoreNotFound(job, path) from e
        except OSError as e:
            raise StoreIOError(f"Could not read '{path}': {e}") from e

        records = []
        for line_no, row in rows:
            record = parse_row(row) if row is not None else None
            if record is None:
                if row is None or [f.strip() for f in row] not in (HEADERS, LEGACY_HEADERS):
                    log.warning("Skipping malformed row %d in %s: %s", line_no, path, row)
                continue
            records.append(record)
        return fold_closed_markers(records)

    def replace_last(self, job: str, field: str, new_value: datetime) -> ShiftRecord:
        """Overwrite the start or end time of the last record.

        Hours are recomputed for every closed record and the whole file is
        rewritten with a header row.

        Args:
            job: Job name
            field: "start" or "end"
            new_value: New time

        Returns:
            The updated last record

        Raises:
            EmptyStore: If the job has no records
            ValueError: If field is not "start" or "end"
        """
        if field not in FIELDS:
            raise ValueError(f"Unknown shift field '{field}', expected one of {', '.join(FIELDS)}")
        try:
            records = self.read_all(job)
        except StoreNotFound as e:
            raise EmptyStore(job) from e
        if not records:
            raise EmptyStore(job)

        records[-1].set_field(field, new_value)
        for record in records:
            record.recompute()

        path = self.path(job)
        try:
            write_csv_atomic(path, HEADERS, [record.to_row() for record in records])
        except OSError as e:
            raise StoreIOError(f"Could not rewrite '{path}': {e}") from e
        log.info("Rewrote %d records in %s", len(records), path)
        return records[-1]
