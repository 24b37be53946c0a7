import sys
import os
import shutil
import tempfile
import unittest
from unittest.mock import patch
from io import StringIO
from pathlib import Path

# Add the parent directory to sys.path to import the shiftlog package
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))
from shiftlog.__main__ import main, parse_args, load_environment, get_default_job, USAGE_HINT
from shiftlog.utils.date_utils import parse_strict


class TestShiftlogCli(unittest.TestCase):
    """Test the command line interface end to end against a temporary data directory."""

    def setUp(self):
        """Set up test fixtures."""
        self.tmpdir = tempfile.mkdtemp()
        self.data_dir = Path(self.tmpdir) / "data"
        self.env_patcher = patch.dict('os.environ', {'SHIFTLOG_DEFAULT_JOB': '', 'SHIFTLOG_LOG_LEVEL': ''})
        self.env_patcher.start()
        self.load_env_patcher = patch('shiftlog.__main__.load_environment')
        self.load_env_patcher.start()

    def tearDown(self):
        """Tear down test fixtures."""
        self.load_env_patcher.stop()
        self.env_patcher.stop()
        shutil.rmtree(self.tmpdir, ignore_errors=True)

    def run_cli(self, *argv, times=()):
        """Run main() and return what it printed."""
        clock = [parse_strict(v) for v in times]
        with patch('sys.stdout', new_callable=StringIO) as mock_stdout, \
                patch('shiftlog.engine.shift_engine.now', side_effect=clock):
            main(['--data-dir', str(self.data_dir)] + list(argv))
        return mock_stdout.getvalue()

    def test_parse_args_job_before_and_after_command(self):
        """--job works as a global option on either side of the subcommand."""
        self.assertEqual(parse_args(['--job', 'acme', 'clock_in']).job, 'acme')
        self.assertEqual(parse_args(['clock_in', '--job', 'acme']).job, 'acme')
        self.assertIsNone(parse_args(['clock_in']).job)

    def test_no_command_prints_usage(self):
        """Without a subcommand a usage hint is printed."""
        output = self.run_cli()
        self.assertIn(USAGE_HINT, output)

    def test_clock_in_and_out_default_job(self):
        """The default job is GenAI and a shift reports its hours."""
        output = self.run_cli('clock_in', times=["2024-01-01 09:00:00"])
        self.assertIn("Clocked in at 2024-01-01 09:00:00 for GenAI", output)
        self.assertTrue((self.data_dir / "GenAI_hours_records.csv").is_file())

        output = self.run_cli('clock_out', times=["2024-01-01 17:30:00"])
        self.assertIn("Clocked out at: 2024-01-01 17:30:00", output)
        self.assertIn("Total hours worked: 8.50", output)

    def test_default_job_from_environment(self):
        """SHIFTLOG_DEFAULT_JOB replaces the built-in default."""
        with patch.dict('os.environ', {'SHIFTLOG_DEFAULT_JOB': 'acme'}):
            self.assertEqual(get_default_job(), 'acme')
            self.run_cli('clock_in', times=["2024-01-01 09:00:00"])
        self.assertTrue((self.data_dir / "acme_hours_records.csv").is_file())

    def test_clock_out_without_clock_in(self):
        """Clock-out with nothing open prints a friendly message."""
        output = self.run_cli('--job', 'acme', 'clock_out')
        self.assertIn("No clock in entry found. Please clock in first.", output)

    def test_summary_without_store(self):
        """Summary of a job without records prints a zero total."""
        output = self.run_cli('summary', '--job', 'acme')
        self.assertIn("Start Time", output)
        self.assertIn("Total Hours Worked: 0.00", output)

    def test_edit_then_summary(self):
        """Corrected times show up in the summary."""
        self.run_cli('-j', 'acme', 'clock_in', times=["2024-01-01 09:00:00"])
        output = self.run_cli('-j', 'acme', 'edit_start', '2024-01-01 08:00:00')
        self.assertIn("Updated start time to: 2024-01-01 08:00:00", output)
        self.run_cli('-j', 'acme', 'clock_out', times=["2024-01-01 17:00:00"])
        output = self.run_cli('-j', 'acme', 'edit_stop', '2024-01-01 17:45:00')
        self.assertIn("Updated stop time to: 2024-01-01 17:45:00", output)

        output = self.run_cli('-j', 'acme', 'summary')
        self.assertIn("2024-01-01 08:00:00", output)
        self.assertIn("2024-01-01 17:45:00", output)
        self.assertIn("Total Hours Worked: 9.75", output)

    def test_edit_with_bad_time(self):
        """A malformed edit time is reported and exits with status 1."""
        self.run_cli('clock_in', times=["2024-01-01 09:00:00"])
        with self.assertRaises(SystemExit) as ctx:
            self.run_cli('edit_start', '2024-01-01T08:00')
        self.assertEqual(ctx.exception.code, 1)

    def test_edit_without_records(self):
        """Editing a job without records exits with status 1."""
        with patch('sys.stdout', new_callable=StringIO) as mock_stdout:
            with self.assertRaises(SystemExit) as ctx:
                main(['--data-dir', str(self.data_dir), 'edit_stop', '2024-01-01 17:00:00'])
        self.assertEqual(ctx.exception.code, 1)
        self.assertIn("[ERROR] No records found to update", mock_stdout.getvalue())

    def test_summary_markdown_export(self):
        """summary --md writes the table to a markdown file."""
        self.run_cli('clock_in', times=["2024-01-01 09:00:00"])
        self.run_cli('clock_out', times=["2024-01-01 12:00:00"])
        md_path = Path(self.tmpdir) / "hours.md"
        output = self.run_cli('summary', '--md', str(md_path))
        self.assertIn("[SUCCESS] Markdown output written to", output)

        content = md_path.read_text(encoding="utf-8")
        self.assertTrue(content.startswith("# Hours for GenAI"))
        self.assertIn("| Start Time", content)
        self.assertIn("**Total Hours Worked: 3.00**", content)

        # A second export appends unless --overwrite is given
        self.run_cli('summary', '--md', str(md_path))
        self.assertEqual(md_path.read_text(encoding="utf-8").count("**Total Hours Worked"), 2)
        self.run_cli('summary', '--md', str(md_path), '--overwrite')
        self.assertEqual(md_path.read_text(encoding="utf-8").count("**Total Hours Worked"), 1)

    def test_summary_markdown_export_failure(self):
        """An unwritable markdown path is reported and exits with status 1."""
        md_path = Path(self.tmpdir) / "missing" / "hours.md"
        with patch('sys.stdout', new_callable=StringIO) as mock_stdout:
            with self.assertRaises(SystemExit) as ctx:
                main(['--data-dir', str(self.data_dir), 'summary', '--md', str(md_path)])
        self.assertEqual(ctx.exception.code, 1)
        self.assertIn("[ERROR] Failed to write to", mock_stdout.getvalue())

    def test_where(self):
        """--where prints the record file of the job."""
        output = self.run_cli('--job', 'acme', '--where')
        self.assertEqual(output.strip(), str(self.data_dir / "acme_hours_records.csv"))

    def test_invalid_job_name(self):
        """Job names with path separators are refused."""
        with self.assertRaises(SystemExit) as ctx:
            self.run_cli('--job', '../acme', 'clock_in', times=["2024-01-01 09:00:00"])
        self.assertEqual(ctx.exception.code, 1)


class TestLoadEnvironment(unittest.TestCase):
    """Test reading settings from a shiftlog.env file."""

    def test_load_environment_file(self):
        """Variables of the env file end up in os.environ."""
        tmpdir = tempfile.mkdtemp()
        try:
            env_file = os.path.join(tmpdir, 'shiftlog.env')
            with open(env_file, 'w', encoding='utf-8') as f:
                f.write("SHIFTLOG_DEFAULT_JOB=fromfile\n")
            with patch.dict('os.environ', {}):
                os.environ.pop('SHIFTLOG_DEFAULT_JOB', None)
                self.assertEqual(load_environment(env_file), env_file)
                self.assertEqual(get_default_job(), 'fromfile')
        finally:
            shutil.rmtree(tmpdir, ignore_errors=True)

    def test_missing_env_file_is_not_an_error(self):
        """Without an env file nothing is loaded."""
        with patch('shiftlog.__main__.find_env_file', return_value=None):
            self.assertIsNone(load_environment())


if __name__ == '__main__':
    unittest.main()
