"""Interactive text menu."""

import logging
from typing import Callable, Optional

from .csv_io import export_csv, import_csv
from .errors import FileIOError, StorageError, ValidationError
from .service import Outcome, RecordService

logger = logging.getLogger(__name__)

MENU = (
    "1. Add New Job Application\n"
    "2. Update Job Application Status\n"
    "3. View All Job Applications\n"
    "4. Remove Job Application\n"
    "5. Remove All Entries\n"
    "6. Export to CSV\n"
    "7. Import from CSV\n"
    "8. Exit"
)
EXIT_CHOICE = 8
INVALID_CHOICE = "Error: Invalid Input. Please enter a number between 1 and 8.\n"


class Menu:
    """Prompt loop that turns menu choices into service calls."""

    def __init__(
        self,
        service: RecordService,
        input_fn: Optional[Callable[[str], str]] = None,
        output_fn: Optional[Callable[[str], None]] = None,
    ):
        self.service = service
        self.ask = input_fn or input
        self.say = output_fn or print
        self.actions = {
            1: self.add,
            2: self.update_status,
            3: self.show_all,
            4: self.remove_one,
            5: self.remove_all,
            6: self.export,
            7: self.import_,
        }

    def run(self) -> None:
        """Loop until the user picks Exit or input runs out."""
        while True:
            self.say(MENU)
            try:
                raw = self.ask("Enter your choice: ")
            except EOFError:
                return

            try:
                choice = int(raw.strip())
            except ValueError:
                self.say(INVALID_CHOICE)
                continue

            if choice == EXIT_CHOICE:
                return

            action = self.actions.get(choice)
            if action is None:
                self.say(INVALID_CHOICE)
                continue

            try:
                action()
            except EOFError:
                return
            except StorageError as e:
                logger.error(f"Storage error: {e}")
                self.say(f"Error: {e}")

    def _ask_id(self, prompt: str):
        """Prompt for an id, or report and return None if it is not a number."""
        raw = self.ask(prompt)
        try:
            return int(raw.strip())
        except ValueError:
            self.say(f"Error: '{raw}' is not a valid ID.")
            return None

    def _list_briefly(self) -> None:
        """Print the id and description of every application."""
        self.say("List of Job Applications:")
        for job in self.service.list():
            self.say(f"ID: {job.id} | Description: {job.description}")

    def _show_entry(self, job_id: int) -> bool:
        """Print one application, or report that it does not exist."""
        job = self.service.get(job_id)
        if job is None:
            self.say(f"Error: Job application with ID {job_id} does not exist.")
            return False
        self.say("Job Application Details:\n" + job.describe())
        return True

    def add(self) -> None:
        """Prompt for a new application and add it."""
        description = self.ask("Enter Job Description: ")
        date = self.ask("Enter Date (YYYY-MM-DD or leave empty for today): ")
        status = self.ask("Enter Status (e.g., Applied, Interviewing, Rejected): ")
        url = self.ask("Enter Job Description URL (optional): ")
        notes = self.ask("Enter Notes (optional): ")

        try:
            job = self.service.add(description, date, status, url, notes)
        except ValidationError as e:
            self.say(f"Error: {e}")
            return
        self.say(f"Job application added successfully with ID {job.id}!")

    def update_status(self) -> None:
        """Pick an application and change its status."""
        if self.service.count() == 0:
            self.say("Error: DB is empty. Cannot update entries.")
            return

        self._list_briefly()
        job_id = self._ask_id("Enter the ID of the job application you want to update: ")
        if job_id is None or not self._show_entry(job_id):
            return

        status = self.ask("Enter New Status (e.g., Applied, Interviewing, Rejected): ")
        if self.service.update_status(job_id, status) is Outcome.DONE:
            self.say("Job application updated successfully!")
        else:
            self.say(f"Error: Job application with ID {job_id} does not exist.")

    def show_all(self) -> None:
        """Print every application in full."""
        jobs = self.service.list()
        if not jobs:
            self.say("Error: DB is empty. No entries to display.")
            return
        for job in jobs:
            self.say(f"ID: {job.id}\n{job.describe()}\n")

    def remove_one(self) -> None:
        """Pick an application and delete it after confirmation."""
        if self.service.count() == 0:
            self.say("Error: DB is empty. Cannot remove entries.")
            return

        self._list_briefly()
        job_id = self._ask_id("Enter the ID of the job application you want to remove: ")
        if job_id is None or not self._show_entry(job_id):
            return

        confirmation = self.ask(
            "Are you sure you want to delete this job application? (yes/no): "
        )
        outcome = self.service.delete_one(job_id, confirmation)
        if outcome is Outcome.DONE:
            self.say("Job application removed successfully!")
        elif outcome is Outcome.CANCELLED:
            self.say("Deletion canceled.")
        else:
            self.say(f"Error: Job application with ID {job_id} does not exist.")

    def remove_all(self) -> None:
        """Delete every application after confirmation."""
        if self.service.count() == 0:
            self.say("Error: DB is already empty.")
            return

        confirmation = self.ask(
            "Are you sure you want to delete ALL job applications? (yes/no): "
        )
        outcome, removed = self.service.delete_all(confirmation)
        if outcome is Outcome.DONE:
            self.say(f"All {removed} job applications removed successfully!")
        else:
            self.say("Deletion canceled.")

    def export(self) -> None:
        """Export all applications to a CSV file."""
        if self.service.count() == 0:
            self.say("Error: DB is empty. No entries to export.")
            return

        filename = self.ask(
            "Enter the name of the CSV file to export to (e.g., job_applications.csv): "
        )
        try:
            count = export_csv(self.service, filename)
        except FileIOError as e:
            self.say(f"Error: Could not open file {e.path} for writing.")
            return
        self.say(f"{count} job applications exported to {filename} successfully!")

    def import_(self) -> None:
        """Import applications from a CSV file and report bad lines."""
        filename = self.ask(
            "Enter the name of the CSV file to import from (e.g., job_applications.csv): "
        )
        try:
            report = import_csv(self.service, filename)
        except FileIOError as e:
            self.say(f"Error: Could not open file {e.path} for reading.")
            return

        for error in report.malformed:
            self.say(f"Error: Invalid CSV format in line: {error.line}")
        for line_number, message in report.rejected:
            self.say(f"Error: line {line_number}: {message}")
        self.say(
            f"{len(report.imported)} job applications imported from {filename} successfully!"
        )
