"""Utility modules for shiftlog."""

from .date_utils import now, format_display, parse_strict, serialize, deserialize, minutes_between, hours_between
from .format_utils import format_hours, parse_hours
from .file_utils import read_csv_rows, append_csv_row, write_csv_atomic
from .log_utils import get_logger

__all__ = [
    'now', 'format_display', 'parse_strict', 'serialize', 'deserialize', 'minutes_between', 'hours_between',
    'format_hours', 'parse_hours',
    'read_csv_rows', 'append_csv_row', 'write_csv_atomic',
    'get_logger'
]
