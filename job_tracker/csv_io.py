"""CSV export and import of job applications.

The format is six comma-joined fields per line with no quoting, so a comma
inside a description or URL shifts the columns on import. Notes are the last
field and may contain commas.
"""

import logging
from pathlib import Path
from typing import Union

from pydantic import BaseModel, ConfigDict, Field

from .errors import FileIOError, MalformedCSVLineError, ValidationError
from .models import CSV_HEADER
from .service import RecordService

logger = logging.getLogger(__name__)

FIELD_COUNT = len(CSV_HEADER)


class ImportReport(BaseModel):
    """What happened to each line of an imported file."""

    model_config = ConfigDict(arbitrary_types_allowed=True)

    imported: list[int] = Field(default_factory=list)
    malformed: list[MalformedCSVLineError] = Field(default_factory=list)
    rejected: list[tuple[int, str]] = Field(default_factory=list)


def export_csv(service: RecordService, path: Union[str, Path]) -> int:
    """Write all applications to a CSV file and return how many were written."""
    file_path = Path(path).absolute()
    jobs = service.list()

    try:
        with open(file_path, "w", encoding="utf-8", newline="") as f:
            f.write(",".join(CSV_HEADER) + "\n")
            for job in jobs:
                f.write(",".join(job.to_csv_fields()) + "\n")
    except OSError as e:
        raise FileIOError(file_path, str(e)) from e

    logger.info(f"Exported {len(jobs)} job applications to {file_path}")
    return len(jobs)


def parse_line(line: str, line_number: int) -> list[str]:
    """Split a data line into its six fields.

    Raises MalformedCSVLineError if there are fewer than five commas.
    """
    fields = line.split(",", FIELD_COUNT - 1)
    if len(fields) < FIELD_COUNT:
        raise MalformedCSVLineError(line_number, line)
    return fields


def import_csv(service: RecordService, path: Union[str, Path]) -> ImportReport:
    """Add every well-formed line of a CSV file as a new application.

    The header line is skipped and the ID column is ignored. Bad lines are
    logged and skipped.
    """
    file_path = Path(path).absolute()

    try:
        with open(file_path, encoding="utf-8", newline="") as f:
            lines = f.readlines()
    except (OSError, UnicodeDecodeError) as e:
        raise FileIOError(file_path, str(e)) from e

    report = ImportReport()

    for line_number, raw in enumerate(lines[1:], start=2):
        line = raw.rstrip("\r\n")

        try:
            _, description, date, status, url, notes = parse_line(line, line_number)
        except MalformedCSVLineError as e:
            logger.warning(str(e))
            report.malformed.append(e)
            continue

        try:
            job = service.add(description, date, status, url, notes)
        except ValidationError as e:
            logger.warning(f"Skipping line {line_number}: {e}")
            report.rejected.append((line_number, str(e)))
            continue

        report.imported.append(job.id)

    logger.info(
        f"Imported {len(report.imported)} job applications from {file_path} "
        f"({len(report.malformed)} malformed, {len(report.rejected)} rejected)"
    )
    return report
