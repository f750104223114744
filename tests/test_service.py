"""Tests for validation and record operations (job_tracker/service.py)."""

import pytest

from job_tracker import service as service_module
from job_tracker.dates import today
from job_tracker.errors import ValidationError
from job_tracker.service import Outcome, is_confirmed


def snapshot(service):
    return [job.model_dump() for job in service.list()]


# ============================================================
# Add
# ============================================================


class TestAdd:
    def test_add_round_trips_through_list(self, populated):
        previous_max = max(job.id for job in populated.list())

        job = populated.add("ML Engineer at Hooli", "2024-04-02", "Applied", "https://hooli.example", "dream job")

        matches = [j for j in populated.list() if j.description == "ML Engineer at Hooli"]
        assert len(matches) == 1
        stored = matches[0]
        assert stored.id == job.id
        assert stored.id > previous_max
        assert (stored.date, stored.status, stored.url, stored.notes) == (
            "2024-04-02", "Applied", "https://hooli.example", "dream job",
        )

    def test_empty_date_defaults_to_today(self, service):
        expected = today()
        job = service.add("QA Engineer", "", "Applied")
        assert service.get(job.id).date == expected

    def test_empty_date_uses_patched_today(self, service, monkeypatch):
        monkeypatch.setattr(service_module, "today", lambda: "2030-06-01")
        job = service.add("QA Engineer", "", "Applied")
        assert service.get(job.id).date == "2030-06-01"

    @pytest.mark.parametrize("bad_date", ["2024/01/15", "9999-01-01", "2024-13-01", "yesterday"])
    def test_invalid_date_is_rejected_without_write(self, service, bad_date):
        with pytest.raises(ValidationError, match="Invalid date format"):
            service.add("QA Engineer", bad_date, "Applied")
        assert service.count() == 0

    def test_loose_day_range_is_accepted(self, service):
        job = service.add("QA Engineer", "2024-02-30", "Applied")
        assert service.get(job.id).date == "2024-02-30"

    def test_empty_description_is_rejected(self, service):
        with pytest.raises(ValidationError):
            service.add("", "2024-01-15", "Applied")
        assert service.count() == 0

    def test_optional_fields_default_to_empty(self, service):
        job = service.add("QA Engineer", "2024-01-15", "Applied")
        stored = service.get(job.id)
        assert stored.url == ""
        assert stored.notes == ""


# ============================================================
# Update status
# ============================================================


class TestUpdateStatus:
    def test_only_status_changes(self, populated):
        target = populated.list()[0]
        before = target.model_dump()

        assert populated.update_status(target.id, "Interviewing") is Outcome.DONE

        after = populated.get(target.id).model_dump()
        assert after["status"] == "Interviewing"
        before.pop("status")
        after.pop("status")
        assert after == before

    def test_other_records_untouched(self, populated):
        first, *others = populated.list()
        populated.update_status(first.id, "Offer")
        assert populated.list()[1:] == others

    def test_missing_id_is_not_found_and_changes_nothing(self, populated):
        before = snapshot(populated)
        assert populated.update_status(999, "Interviewing") is Outcome.NOT_FOUND
        assert snapshot(populated) == before

    def test_id_beyond_integer_range_is_not_found(self, populated):
        before = snapshot(populated)
        assert populated.update_status(10**23, "Interviewing") is Outcome.NOT_FOUND
        assert populated.delete_one(10**23, "yes") is Outcome.NOT_FOUND
        assert snapshot(populated) == before


# ============================================================
# Delete
# ============================================================


class TestDeleteOne:
    @pytest.mark.parametrize("token", ["yes", "y"])
    def test_confirmed_delete_removes_exactly_one(self, populated, token):
        jobs = populated.list()
        target = jobs[1]

        assert populated.delete_one(target.id, token) is Outcome.DONE

        assert populated.count() == len(jobs) - 1
        assert populated.get(target.id) is None
        assert populated.list() == [jobs[0], jobs[2]]

    @pytest.mark.parametrize("token", ["no", "", "Yes", "Y", "yes ", "sure"])
    def test_anything_else_cancels(self, populated, token):
        before = snapshot(populated)
        target = populated.list()[0]
        assert populated.delete_one(target.id, token) is Outcome.CANCELLED
        assert snapshot(populated) == before

    def test_missing_id_is_not_found(self, populated):
        before = snapshot(populated)
        assert populated.delete_one(999, "yes") is Outcome.NOT_FOUND
        assert snapshot(populated) == before


class TestDeleteAll:
    def test_confirmed_delete_empties_table(self, populated):
        assert populated.delete_all("yes") == (Outcome.DONE, 3)
        assert populated.count() == 0

    def test_declined_delete_keeps_rows(self, populated):
        before = snapshot(populated)
        assert populated.delete_all("no") == (Outcome.CANCELLED, 0)
        assert snapshot(populated) == before

    def test_empty_table(self, service):
        assert service.delete_all("y") == (Outcome.EMPTY, 0)


def test_is_confirmed():
    assert is_confirmed("yes")
    assert is_confirmed("y")
    assert not is_confirmed("YES")
    assert not is_confirmed("n")
