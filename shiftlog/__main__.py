"""Main module for the shiftlog package."""
import os
import sys
import argparse
from typing import Optional, List
from dotenv import load_dotenv

from . import __version__
from .exceptions import ShiftLogError, NoOpenShift, StoreNotFound
from .engine.shift_engine import ShiftEngine
from .store.locator import StoreLocator, DEFAULT_JOB
from .store.record_store import RecordStore
from .reports.summary import SummaryReport
from .utils.format_utils import format_hours
from .utils.log_utils import get_logger

ENV_FILE_NAME = 'shiftlog.env'
USAGE_HINT = "Please use 'clock_in', 'clock_out', 'edit_start', 'edit_stop' or 'summary' subcommand."

log = get_logger(__name__)


# --- Environment Setup ---
def find_env_file() -> Optional[str]:
    """Locate the shiftlog.env file.

    Looks at $SHIFTLOG_ENV_FILE, then the project directory, then the
    current working directory.

    Returns:
        Path of the first file found, or None
    """
    candidates = [
        os.getenv('SHIFTLOG_ENV_FILE'),
        os.path.join(os.path.dirname(os.path.dirname(os.path.abspath(__file__))), ENV_FILE_NAME),
        os.path.join(os.getcwd(), ENV_FILE_NAME),
    ]
    for candidate in candidates:
        if candidate and os.path.isfile(candidate):
            return candidate
    return None


def load_environment(env_file: Optional[str] = None) -> Optional[str]:
    """Load environment variables from the shiftlog.env file, if there is one.

    Args:
        env_file: Explicit file to load (optional)

    Returns:
        The file that was loaded, or None
    """
    env_file = env_file or find_env_file()
    if env_file:
        load_dotenv(env_file)
    return env_file


def get_default_job() -> str:
    return os.getenv('SHIFTLOG_DEFAULT_JOB') or DEFAULT_JOB


# --- CLI Logic ---
def build_parser() -> argparse.ArgumentParser:
    """Build the command line parser.

    Returns:
        Argument parser with one subparser per command
    """
    # --job is accepted after the subcommand as well
    job_parent = argparse.ArgumentParser(add_help=False)
    job_parent.add_argument('-j', '--job', default=argparse.SUPPRESS, help='Name of the job')

    parser = argparse.ArgumentParser(
        description="Logs the hours spent on your jobs.",
        epilog="""
Examples:
    # Start and end a shift for the default job
  shiftlog clock_in
  shiftlog clock_out
    ---
    # Track a separate job
  shiftlog --job acme clock_in
    ---
    # Fix the last shift when you forgot to clock in or out
  shiftlog edit_start "2024-01-01 08:00:00"
  shiftlog edit_stop "2024-01-01 17:00:00"
    ---
    # Show all shifts and the total, also export them to markdown
  shiftlog --job acme summary --md hours.md
""",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        prog="shiftlog"
    )
    parser.add_argument('-j', '--job', help='Name of the job (default: $SHIFTLOG_DEFAULT_JOB or GenAI)')
    parser.add_argument('--data-dir', help='Directory of the record files (default: $SHIFTLOG_DATA_DIR or the platform data directory)')
    parser.add_argument('-v', '--verbose', action='store_true', help='Print debug logging to stderr')
    parser.add_argument('--where', action='store_true', help='Print the record file of the job and exit')
    parser.add_argument('--version', action='version', version=f'%(prog)s {__version__}')

    subparsers = parser.add_subparsers(dest='command')
    subparsers.add_parser('clock_in', parents=[job_parent], help='Clock in for work')
    subparsers.add_parser('clock_out', parents=[job_parent], help='Clock out from work')
    summary = subparsers.add_parser('summary', parents=[job_parent], help='Show work hours summary')
    summary.add_argument('--md', help='Also export the summary as markdown to the given file path')
    summary.add_argument('--overwrite', action='store_true', help='Overwrite the markdown file if it exists')
    edit_start = subparsers.add_parser('edit_start', parents=[job_parent], help='Edit the start time of the last recorded shift')
    edit_start.add_argument('new_start_time', help='New start time in the format: YYYY-MM-DD HH:MM:SS')
    edit_stop = subparsers.add_parser('edit_stop', parents=[job_parent], help='Edit the stop time of the last recorded shift')
    edit_stop.add_argument('new_stop_time', help='New stop time in the format: YYYY-MM-DD HH:MM:SS')
    return parser


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """Parse command line arguments.

    Args:
        argv: Arguments (optional, defaults to sys.argv)

    Returns:
        Parsed arguments
    """
    return build_parser().parse_args(argv)


# --- Commands ---
def clock_in(engine: ShiftEngine, job: str) -> None:
    record = engine.clock_in(job)
    print(f"Clocked in at {record.start_display} for {job}")


def clock_out(engine: ShiftEngine, job: str) -> None:
    record = engine.clock_out(job)
    print(f"Clocked out at: {record.end_display}")
    print(f"Total hours worked: {format_hours(record.hours)}")


def print_summary(engine: ShiftEngine, job: str, md_path: Optional[str] = None, overwrite: bool = False) -> None:
    """Print all closed shifts of a job and the total hours.

    Args:
        engine: Shift engine to read the records from
        job: Job name
        md_path: Path to export markdown (optional)
        overwrite: Whether to overwrite an existing markdown file
    """
    records = engine.records(job)
    if not records:
        log.info("No records for job '%s' in %s", job, engine.store.path(job))
    report = SummaryReport(records, job)
    print(report.generate_report())

    if md_path:
        appended = report.export_markdown(md_path, overwrite)
        print(f"[SUCCESS] Markdown output {'appended to' if appended else 'written to'} '{md_path}'")


def edit_start(engine: ShiftEngine, job: str, new_start_time: str) -> None:
    record = engine.edit_start(job, new_start_time)
    print(f"Updated start time to: {record.start_display}")


def edit_stop(engine: ShiftEngine, job: str, new_stop_time: str) -> None:
    record = engine.edit_stop(job, new_stop_time)
    print(f"Updated stop time to: {record.end_display}")


def run_command(engine: ShiftEngine, job: str, args: argparse.Namespace) -> None:
    """Dispatch the parsed subcommand.

    Args:
        engine: Shift engine for the selected store
        job: Job name
        args: Parsed arguments
    """
    if args.command == 'clock_in':
        clock_in(engine, job)
    elif args.command == 'clock_out':
        clock_out(engine, job)
    elif args.command == 'summary':
        print_summary(engine, job, getattr(args, 'md', None), getattr(args, 'overwrite', False))
    elif args.command == 'edit_start':
        edit_start(engine, job, args.new_start_time)
    elif args.command == 'edit_stop':
        edit_stop(engine, job, args.new_stop_time)
    else:
        print(USAGE_HINT)


def main(argv: Optional[List[str]] = None) -> None:
    """Main entry point."""
    # Load environment variables
    load_environment()

    # Parse command line arguments
    args = parse_args(argv)
    get_logger(level='DEBUG' if args.verbose else os.getenv('SHIFTLOG_LOG_LEVEL'))

    job = args.job or get_default_job()
    locator = StoreLocator(args.data_dir or os.getenv('SHIFTLOG_DATA_DIR'))
    engine = ShiftEngine(RecordStore(locator))

    try:
        if args.where:
            print(engine.store.path(job))
            return
        run_command(engine, job, args)
    except (NoOpenShift, StoreNotFound) as e:
        print(e)
    except ShiftLogError as e:
        log.debug("Command '%s' failed", args.command, exc_info=True)
        print(f"[ERROR] {e}")
        sys.exit(1)
    except ValueError as e:
        print(f"[ERROR] {e}")
        sys.exit(1)


if __name__ == "__main__":
    main()
