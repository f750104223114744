"""Validation and record operations on top of the store."""

import logging
from enum import Enum
from typing import Optional

from .dates import is_valid_date, today
from .errors import ValidationError
from .models import JobApplication
from .store import ApplicationStore

logger = logging.getLogger(__name__)

CONFIRM_TOKENS = ("yes", "y")

INVALID_DATE_MESSAGE = (
    "Invalid date format. Please use YYYY-MM-DD or leave empty for today's date."
)


class Outcome(str, Enum):
    """Result of an operation that targets existing rows."""

    DONE = "done"
    NOT_FOUND = "not_found"
    CANCELLED = "cancelled"
    EMPTY = "empty"


def is_confirmed(token: str) -> bool:
    """Only an exact "yes" or "y" lets a destructive operation proceed."""
    return token in CONFIRM_TOKENS


class RecordService:
    """Record operations against an explicitly supplied store."""

    def __init__(self, store: ApplicationStore):
        self.store = store

    def add(
        self,
        description: str,
        date: str,
        status: str,
        url: str = "",
        notes: str = "",
    ) -> JobApplication:
        """Validate and insert a new application.

        An empty date is replaced by today's date. Raises ValidationError
        without writing anything if the input is rejected.
        """
        final_date = date or today()

        if not is_valid_date(final_date):
            raise ValidationError(INVALID_DATE_MESSAGE)
        if not description:
            raise ValidationError("Description must not be empty.")

        job = JobApplication(
            description=description,
            date=final_date,
            status=status,
            url=url,
            notes=notes,
        )
        job.id = self.store.insert(job)
        logger.info(f"Added job application {job.id}: {job.description}")
        return job

    def get(self, job_id: int) -> Optional[JobApplication]:
        """Fetch one application, or None if the id does not exist."""
        return self.store.get(job_id)

    def list(self) -> list[JobApplication]:
        """All applications ordered by id."""
        return self.store.list()

    def count(self) -> int:
        """Number of stored applications."""
        return self.store.count()

    def update_status(self, job_id: int, status: str) -> Outcome:
        """Change only the status of an existing application."""
        if self.store.get(job_id) is None:
            logger.info(f"Update skipped, job application {job_id} does not exist")
            return Outcome.NOT_FOUND

        self.store.update_status(job_id, status)
        logger.info(f"Updated job application {job_id} status to {status}")
        return Outcome.DONE

    def delete_one(self, job_id: int, confirmation: str) -> Outcome:
        """Delete one application once the confirmation token is given."""
        if self.store.get(job_id) is None:
            logger.info(f"Delete skipped, job application {job_id} does not exist")
            return Outcome.NOT_FOUND

        if not is_confirmed(confirmation):
            logger.debug(f"Deletion of job application {job_id} cancelled")
            return Outcome.CANCELLED

        self.store.delete_one(job_id)
        logger.info(f"Removed job application {job_id}")
        return Outcome.DONE

    def delete_all(self, confirmation: str) -> tuple[Outcome, int]:
        """Delete every application once the confirmation token is given."""
        if self.store.count() == 0:
            return Outcome.EMPTY, 0

        if not is_confirmed(confirmation):
            logger.debug("Deletion of all job applications cancelled")
            return Outcome.CANCELLED, 0

        removed = self.store.delete_all()
        logger.info(f"Removed all {removed} job applications")
        return Outcome.DONE, removed
