"""File I/O utility functions for shiftlog."""
import os
import csv
import shutil
import tempfile
from pathlib import Path
from typing import Iterable, List, Optional, Tuple


def ensure_directory(path: Path) -> Path:
    """Create a directory (and its parents) if it is missing.

    Args:
        path: Directory to create

    Returns:
        The same path
    """
    path.mkdir(parents=True, exist_ok=True)
    return path


def read_csv_rows(filename: Path) -> List[Tuple[int, Optional[List[str]]]]:
    """Read a CSV file one line at a time.

    Undecodable bytes are replaced and a line the csv module rejects (for
    example a field over the size limit) comes back as None, so one bad
    line never hides the others. Blank lines are dropped.

    Args:
        filename: CSV file to read

    Returns:
        List of (line number, fields or None) tuples
    """
    rows = []
    with open(filename, 'r', newline='', encoding='utf-8', errors='replace') as f:
        for line_no, line in enumerate(f, start=1):
            try:
                row = next(csv.reader([line]), [])
            except csv.Error:
                row = None
            if row == []:
                continue
            rows.append((line_no, row))
    return rows


def append_csv_row(filename: Path, row: list):
    """Append a single row to a CSV file, creating the file if needed."""
    with open(filename, 'a', newline='', encoding='utf-8') as f:
        writer = csv.writer(f)
        writer.writerow(row)
        f.flush()
        os.fsync(f.fileno())


def write_csv_atomic(filename: Path, headers: list, rows: Iterable[list]):
    """Replace a CSV file with a header row followed by the given rows.

    The data is written to a temporary file in the same directory which is
    then renamed over the target, so readers only ever see the old or the
    new complete file.

    Args:
        filename: Output file name
        headers: Column headers
        rows: Data rows
    """
    filename = Path(filename)
    fd, tmp_name = tempfile.mkstemp(prefix=f".{filename.name}.", suffix=".tmp", dir=filename.parent)
    try:
        with os.fdopen(fd, 'w', newline='', encoding='utf-8') as f:
            writer = csv.writer(f)
            writer.writerow(headers)
            writer.writerows(rows)
            f.flush()
            os.fsync(f.fileno())
        if filename.exists():
            shutil.copymode(filename, tmp_name)
        os.replace(tmp_name, filename)
    except BaseException:
        if os.path.exists(tmp_name):
            os.unlink(tmp_name)
        raise
