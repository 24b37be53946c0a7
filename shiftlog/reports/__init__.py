"""Report generation modules for shiftlog."""

from .summary import SummaryReport

__all__ = ['SummaryReport']
