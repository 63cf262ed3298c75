"""Tests for the date of birth and appointment date rules."""

from datetime import date, datetime, timedelta

from freezegun import freeze_time

from formguard.validators.date_validator import (
    AppointmentDateValidator,
    DateOfBirthValidator,
    parse_date,
    parse_datetime,
)
from formguard.validators.models import FailureReason


class TestParseDate:
    def test_iso_date(self):
        assert parse_date("2024-05-01") == date(2024, 5, 1)

    def test_iso_datetime(self):
        assert parse_date("2024-05-01T10:30:00") == date(2024, 5, 1)

    def test_garbage(self):
        assert parse_date("next tuesday") is None

    def test_impossible_day(self):
        assert parse_date("2023-02-30") is None


class TestDateOfBirthValidator:
    def setup_method(self):
        self.v = DateOfBirthValidator()

    def test_valid_dob(self, today):
        assert self.v.validate(date(today.year - 30, 1, 1).isoformat()).valid is True

    def test_today_is_not_future(self, today):
        assert self.v.validate(today.isoformat()).valid is True

    def test_tomorrow_is_future(self, tomorrow):
        outcome = self.v.validate(tomorrow.isoformat())
        assert outcome.reason == FailureReason.FUTURE_DATE
        assert outcome.message == "Date of birth cannot be in the future"

    def test_two_hundred_years_ago(self, today):
        outcome = self.v.validate(date(today.year - 200, 1, 1).isoformat())
        assert outcome.reason == FailureReason.IMPLAUSIBLE_AGE
        assert outcome.message == "Please enter a valid date of birth"

    def test_unparseable(self):
        outcome = self.v.validate("31/12/1990")
        assert outcome.valid is False
        assert outcome.reason == FailureReason.INVALID_DATE

    @freeze_time("2026-03-01")
    def test_age_uses_calendar_years_only(self):
        # Birthday later in the year still counts as 120 years
        assert self.v.validate("1906-12-31").valid is True
        assert self.v.validate("1905-12-31").reason == FailureReason.IMPLAUSIBLE_AGE

    @freeze_time("2026-10-18")
    def test_frozen_boundaries(self):
        assert self.v.validate("2026-10-18").valid is True
        assert self.v.validate("2026-10-19").reason == FailureReason.FUTURE_DATE


class TestAppointmentDateValidator:
    def setup_method(self):
        self.v = AppointmentDateValidator()

    def test_today_is_valid(self, today):
        assert self.v.validate(today.isoformat()).valid is True

    def test_future_is_valid(self, today):
        assert self.v.validate((today + timedelta(days=30)).isoformat()).valid is True

    def test_yesterday_is_past(self, yesterday):
        outcome = self.v.validate(yesterday.isoformat())
        assert outcome.reason == FailureReason.PAST_APPOINTMENT_DATE
        assert outcome.message == "Appointment date cannot be in the past"

    def test_unparseable(self):
        assert self.v.validate("tomorrow").reason == FailureReason.INVALID_DATE

    @freeze_time("2026-10-18 23:59:59")
    def test_late_in_the_day(self):
        assert self.v.validate("2026-10-18").valid is True
        assert self.v.validate("2026-10-17").valid is False


class TestDateTimeInput:
    @freeze_time("2026-10-18 10:00:00")
    def test_dob_later_today_is_future(self):
        outcome = DateOfBirthValidator().validate("2026-10-18T23:00:00")
        assert outcome.reason == FailureReason.FUTURE_DATE

    @freeze_time("2026-10-18 10:00:00")
    def test_dob_earlier_today_is_valid(self):
        assert DateOfBirthValidator().validate("2026-10-18T09:15").valid is True

    @freeze_time("2026-10-18 10:00:00")
    def test_appointment_earlier_today_is_valid(self):
        assert AppointmentDateValidator().validate("2026-10-18T08:00").valid is True

    def test_parse_datetime_requires_time(self):
        assert parse_datetime("2026-10-18") is None
        assert parse_datetime("2026-10-18T23:00") == datetime(2026, 10, 18, 23, 0)


class TestAcceptedFormats:
    def test_compact_date_rejected(self):
        assert parse_date("20991018") is None
        assert AppointmentDateValidator().validate("20991018").reason == FailureReason.INVALID_DATE

    def test_week_date_rejected(self):
        assert parse_date("2026-W42-7") is None

    def test_timezone_suffix_rejected(self):
        assert parse_date("2026-10-18T10:00:00+05:30") is None
