"""SummaryReport class for printing the shifts of a job with a running total."""
import os
from io import StringIO
from typing import List
import markdown
from tabulate import tabulate

from ..exceptions import ExportError
from ..store.shift_record import ShiftRecord
from ..utils.format_utils import format_hours

SEPARATOR = "-" * 60
HEADERS = ["#", "Start Time", "End Time", "Hours", "Running Total"]


class SummaryReport:
    """Class for generating the hours summary of a job."""

    def __init__(self, records: List[ShiftRecord], job: str):
        """Initialize a SummaryReport.

        Args:
            records: Records of the job in file order
            job: Job name (used in the title)
        """
        self.job = job
        # Open shifts have no hours yet
        self.records = [r for r in records if r.is_closed]
        self.total_hours = 0.0
        self.rows = []

        for idx, record in enumerate(self.records, start=1):
            self.total_hours += record.hours
            self.rows.append([
                idx,
                record.start_display,
                record.end_display,
                format_hours(record.hours),
                format_hours(self.total_hours),
            ])

    @property
    def total_str(self) -> str:
        return format_hours(self.total_hours)

    def table(self, tablefmt: str = "github") -> str:
        """Render the shift rows as a table.

        Args:
            tablefmt: tabulate table format

        Returns:
            Table as a string
        """
        return tabulate(self.rows, headers=HEADERS, tablefmt=tablefmt, disable_numparse=True)

    def generate_report(self) -> str:
        """Generate the console summary.

        Returns:
            Report as a string
        """
        output = StringIO()
        print(f"\n### Hours for {self.job}:", file=output)
        print(SEPARATOR, file=output)
        print(self.table(), file=output)
        print(SEPARATOR, file=output)
        print(f"Total Hours Worked: {self.total_str}", file=output)
        return output.getvalue()

    def generate_markdown(self) -> str:
        """Generate the summary as a markdown section.

        Returns:
            Markdown text
        """
        output = StringIO()
        print(f"\n### Hours for {self.job}\n", file=output)
        print(self.table("github"), file=output)
        print(f"\n**Total Hours Worked: {self.total_str}**\n", file=output)
        return output.getvalue()
    def export_markdown(self, md_path: str, overwrite: bool = False) -> bool:
        """Write the markdown summary to a file.

        A new (or overwritten) file starts with a title heading, an existing
        one gets the section appended.

        Args:
            md_path: Output file path
            overwrite: Whether to replace an existing file

        Returns:
            True if the section was appended to an existing file

        Raises:
            ExportError: If the table does not render or the file cannot be written
        """
        section = self.generate_markdown()
        if "<table>" not in markdown.markdown(section, extensions=['tables']):
            raise ExportError(f"Summary of '{self.job}' did not render as a markdown table")

        append = os.path.isfile(md_path) and os.path.getsize(md_path) > 0 and not overwrite
        try:
            with open(md_path, 'a' if append else 'w', encoding='utf-8') as f:
                if not append:
                    f.write(f"# Hours for {self.job}\n")
                f.write(section)
        except OSError as e:
            raise ExportError(f"Failed to write to '{md_path}': {e}") from e
        return append
