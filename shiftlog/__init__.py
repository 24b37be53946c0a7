"""
shiftlog: A CLI tool for logging the hours spent on your jobs.

- Clocks in and out per job, one CSV record file per job
- Corrects the start or stop time of the latest shift
- Prints a summary table with a running total, optionally exported to Markdown
- Can be used as a CLI (via `python -m shiftlog` or `shiftlog` if installed as a package)

Environment variables are loaded from `shiftlog.env` (see `shiftlog.env.example`).
"""

__version__ = "0.1.0"
