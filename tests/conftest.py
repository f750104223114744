"""Shared fixtures for job tracker tests."""

import pytest

from job_tracker.config import reset_config
from job_tracker.service import RecordService
from job_tracker.store import ApplicationStore


@pytest.fixture
def store():
    """Fresh in-memory store with the schema created."""
    with ApplicationStore() as s:
        s.create_schema()
        yield s


@pytest.fixture
def service(store):
    return RecordService(store)


@pytest.fixture
def populated(service):
    """Service holding three applications."""
    service.add("Backend Engineer at Acme", "2024-01-15", "Applied", "https://acme.example/jobs/1", "referral")
    service.add("Data Analyst at Globex", "2024-02-01", "Interviewing")
    service.add("SRE at Initech", "2024-03-10", "Rejected", "", "no reply for 3 weeks")
    return service


@pytest.fixture(autouse=True)
def _clean_config():
    reset_config()
    yield
    reset_config()
