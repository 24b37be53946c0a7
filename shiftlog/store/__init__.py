"""Shift record storage for shiftlog."""

from .shift_record import ShiftRecord
from .locator import StoreLocator, default_data_dir, DEFAULT_JOB
from .record_store import RecordStore, HEADERS

__all__ = ['ShiftRecord', 'StoreLocator', 'default_data_dir', 'DEFAULT_JOB', 'RecordStore', 'HEADERS']
