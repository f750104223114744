"""Data models for job application tracking."""

from typing import Optional

from pydantic import BaseModel, Field, field_validator

CSV_HEADER = ["ID", "Description", "Date", "Status", "URL", "Notes"]


class JobApplication(BaseModel):
    """A single tracked job application."""

    id: Optional[int] = None
    description: str = Field(min_length=1)
    date: str
    status: str
    url: str = ""
    notes: str = ""

    @field_validator("url", "notes", mode="before")
    @classmethod
    def _none_to_empty(cls, value: Optional[str]) -> str:
        # Older rows may hold NULL for the optional columns
        return "" if value is None else value

    def to_csv_fields(self) -> list[str]:
        """Convert to CSV field order: ID, Description, Date, Status, URL, Notes."""
        return [
            "" if self.id is None else str(self.id),
            self.description,
            self.date,
            self.status,
            self.url,
            self.notes,
        ]

    def describe(self) -> str:
        """Multi-line summary used when showing an entry."""
        return (
            f"Description: {self.description}\n"
            f"Date: {self.date}\n"
            f"Status: {self.status}\n"
            f"URL: {self.url or 'N/A'}\n"
            f"Notes: {self.notes or 'N/A'}"
        )
