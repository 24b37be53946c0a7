"""Exception types raised by shiftlog."""


class ShiftLogError(Exception):
    """Base class for all shiftlog errors."""


class StoreIOError(ShiftLogError):
    """Creating, reading or writing a store file failed."""


class ParseError(ShiftLogError, ValueError):
    """A timestamp string did not match the expected format."""


class StoreNotFound(ShiftLogError):
    """No store file exists for the job yet."""

    def __init__(self, job: str, path=None):
        self.job = job
        self.path = path
        where = f" in {path}" if path else ""
        super().__init__(f"No records found for job '{job}'{where}.")


class EmptyStore(ShiftLogError):
    """An edit was attempted on a job without any records."""

    def __init__(self, job: str):
        self.job = job
        super().__init__(f"No records found to update for job '{job}'.")


class NoOpenShift(ShiftLogError):
    """Clock-out was requested but the job has no open shift."""

    def __init__(self, job: str):
        self.job = job
        super().__init__("No clock in entry found. Please clock in first.")


class ExportError(ShiftLogError):
    """Writing an exported report failed."""
