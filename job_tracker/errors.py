"""Exceptions raised by the tracker."""

from pathlib import Path


class JobTrackerError(Exception):
    """Base class for tracker errors."""


class ValidationError(JobTrackerError):
    """Input rejected before anything was written."""


class StorageError(JobTrackerError):
    """The database could not be opened, read or written."""


class FileIOError(JobTrackerError):
    """A CSV file could not be opened or written."""

    def __init__(self, path: Path, reason: str):
        self.path = path
        self.reason = reason
        super().__init__(f"Could not access {path}: {reason}")


class MalformedCSVLineError(JobTrackerError):
    """A CSV line did not contain six comma-separated fields."""

    def __init__(self, line_number: int, line: str):
        self.line_number = line_number
        self.line = line
        super().__init__(f"Invalid CSV format in line {line_number}: {line}")
