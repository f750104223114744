"""Command-line tracker for job applications stored in SQLite."""

__version__ = "0.1.0"
