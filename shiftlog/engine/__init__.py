"""Shift state handling for shiftlog."""

from .shift_engine import ShiftEngine, find_last_clock_in

__all__ = ['ShiftEngine', 'find_last_clock_in']
