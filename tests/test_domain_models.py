"""Unit tests for domain models."""

from datetime import date, datetime, timedelta, timezone

import pytest
from pydantic import ValidationError

from app.domain.models import (
    ApplicationStatus,
    Interview,
    InterviewStatus,
    JobApplication,
    SavedAnalysis,
)


class TestSavedAnalysis:
    """Tests for SavedAnalysis model."""

    def _make(self, **overrides):
        data = {
            "id": "abc123",
            "user_id": "user-123",
            "matched": ["react", "sql"],
            "missing": ["go"],
            "match_rate": "67%",
            "saved_at": datetime(2025, 9, 1, 12, 0, tzinfo=timezone.utc),
        }
        data.update(overrides)
        return SavedAnalysis(**data)

    def test_valid(self):
        analysis = self._make()

        assert analysis.matched == ["react", "sql"]
        assert analysis.match_rate == "67%"

    def test_naive_saved_at_treated_as_utc(self):
        analysis = self._make(saved_at=datetime(2025, 9, 1, 12, 0))
        assert analysis.saved_at.tzinfo == timezone.utc

    def test_saved_at_converted_to_utc(self):
        plus_two = timezone(timedelta(hours=2))
        analysis = self._make(saved_at=datetime(2025, 9, 1, 14, 0, tzinfo=plus_two))

        assert analysis.saved_at == datetime(2025, 9, 1, 12, 0, tzinfo=timezone.utc)

    @pytest.mark.parametrize("rate", ["67", "67.5%", "%", "abc%", "1000%"])
    def test_invalid_match_rate(self, rate):
        with pytest.raises(ValidationError):
            self._make(match_rate=rate)

    def test_is_immutable(self):
        analysis = self._make()
        with pytest.raises(ValidationError):
            analysis.match_rate = "100%"


class TestJobApplication:
    """Tests for JobApplication model."""

    def test_defaults_to_applied(self):
        application = JobApplication(
            id="app-1",
            user_id="user-123",
            position="  Frontend Engineer ",
            company="Example Corp",
            applied_date=date(2025, 9, 1),
        )

        assert application.status == ApplicationStatus.APPLIED
        assert application.position == "Frontend Engineer"

    def test_status_from_string(self):
        application = JobApplication(
            id="app-1",
            user_id="user-123",
            position="Engineer",
            company="Example Corp",
            applied_date="2025-09-01",
            status="Offer",
        )

        assert application.status == ApplicationStatus.OFFER
        assert application.applied_date == date(2025, 9, 1)

    @pytest.mark.parametrize("field", ["position", "company"])
    def test_blank_fields_rejected(self, field):
        data = {
            "id": "app-1",
            "user_id": "user-123",
            "position": "Engineer",
            "company": "Example Corp",
            "applied_date": date(2025, 9, 1),
        }
        data[field] = "   "

        with pytest.raises(ValidationError):
            JobApplication(**data)

    def test_unknown_status_rejected(self):
        with pytest.raises(ValidationError):
            JobApplication(
                id="app-1",
                user_id="user-123",
                position="Engineer",
                company="Example Corp",
                applied_date=date(2025, 9, 1),
                status="Ghosted",
            )


class TestInterview:
    """Tests for Interview model."""

    def test_defaults_to_upcoming_and_utc(self):
        interview = Interview(
            id="int-1",
            user_id="user-123",
            position="Engineer",
            company="Example Corp",
            scheduled_at=datetime(2025, 9, 3, 15, 0),
        )

        assert interview.status == InterviewStatus.UPCOMING
        assert interview.scheduled_at.tzinfo == timezone.utc

    def test_parses_iso_string(self):
        interview = Interview(
            id="int-1",
            user_id="user-123",
            position="Engineer",
            company="Example Corp",
            scheduled_at="2025-09-03T17:00:00+02:00",
            status="Canceled",
        )

        assert interview.scheduled_at == datetime(2025, 9, 3, 15, 0, tzinfo=timezone.utc)
        assert interview.status == InterviewStatus.CANCELED
