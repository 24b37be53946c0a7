"""StoreLocator: decides where the per-job store files live."""
import os
import sys
from pathlib import Path
from typing import Optional, Union

DEFAULT_JOB = "GenAI"
FILE_SUFFIX = "_hours_records.csv"


def default_data_dir() -> Path:
    """Return the per-user data directory for the platform.

    Returns:
        Directory the store files are kept in
    """
    if sys.platform.startswith("win"):
        base = os.environ.get("LOCALAPPDATA") or Path.home() / "AppData" / "Local"
        return Path(base) / "Lowband" / "HourTracker" / "data"
    if sys.platform == "darwin":
        return Path.home() / "Library" / "Application Support" / "com.Lowband.HourTracker"
    # Linux and others
    base = os.environ.get("XDG_DATA_HOME") or (Path.home() / ".local" / "share")
    return Path(base) / "hourtracker"


class StoreLocator:
    """Maps job names to store file paths inside a data directory."""

    def __init__(self, data_dir: Optional[Union[str, Path]] = None):
        """Initialize a StoreLocator.

        Args:
            data_dir: Directory holding the store files (optional, platform default if omitted)
        """
        self.data_dir = Path(data_dir).expanduser() if data_dir else default_data_dir()

    def path_for(self, job: str) -> Path:
        """Get the store file path of a job.

        Args:
            job: Job name

        Returns:
            Path of "<job>_hours_records.csv" in the data directory

        Raises:
            ValueError: If the job name is empty or contains a path separator
        """
        if not job or not job.strip():
            raise ValueError("Job name must not be empty.")
        if any(sep and sep in job for sep in (os.sep, os.altsep)) or job in (".", ".."):
            raise ValueError(f"Invalid job name '{job}'.")
        return self.data_dir / f"{job}{FILE_SUFFIX}"

    def __repr__(self):
        return f"StoreLocator(data_dir={str(self.data_dir)!r})"
