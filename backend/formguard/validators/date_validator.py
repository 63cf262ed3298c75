"""Date Validators — date of birth and appointment date.

Both compare against the local clock at call time. Values that are not
calendar dates fail with INVALID_DATE instead of raising.
"""

from abc import abstractmethod
from datetime import date, datetime
from typing import Optional

from formguard.validators.base import BaseRule, FieldLookup
from formguard.validators.models import ValidationOutcome, FailureReason
from formguard.validators.reference_data import (
    INVALID_DATE_MESSAGE,
    FUTURE_DOB_MESSAGE,
    IMPLAUSIBLE_DOB_MESSAGE,
    PAST_APPOINTMENT_MESSAGE,
)

# Accepted input formats (HTML date and datetime-local inputs)
DATE_FORMAT = "%Y-%m-%d"
DATETIME_FORMATS = (
    "%Y-%m-%dT%H:%M",
    "%Y-%m-%dT%H:%M:%S",
    "%Y-%m-%dT%H:%M:%S.%f",
)


def parse_datetime(value: str) -> Optional[datetime]:
    """Parse a date-time ("2024-05-01T10:30"); None if it carries no time."""
    for fmt in DATETIME_FORMATS:
        try:
            return datetime.strptime(value, fmt)
        except ValueError:
            continue
    return None


def parse_date(value: str) -> Optional[date]:
    """Parse a date ("2024-05-01") or a date-time's date part; None if neither."""
    try:
        return datetime.strptime(value, DATE_FORMAT).date()
    except ValueError:
        pass
    moment = parse_datetime(value)
    return moment.date() if moment is not None else None


class DateRule(BaseRule):
    """Shared parsing step for the date rules."""

    def validate(self, value: str, context: Optional[FieldLookup] = None) -> ValidationOutcome:
        parsed = parse_date(value)
        if parsed is None:
            return self._fail(FailureReason.INVALID_DATE, INVALID_DATE_MESSAGE)
        return self._check(parsed, date.today(), parse_datetime(value))

    @abstractmethod
    def _check(self, value: date, today: date, moment: Optional[datetime] = None) -> ValidationOutcome:
        """Apply the rule to a parsed date; ``moment`` is set when a time was given."""
        ...


class DateOfBirthValidator(DateRule):
    """Not in the future, and at most ``max_age`` years old.

    Age is ``today.year - dob.year`` without month/day adjustment, so it can
    overstate a real age by one year.
    """

    def __init__(self, max_age: int = 120):
        self.max_age = max_age

    @property
    def name(self) -> str:
        return "DateOfBirthValidator"

    def _check(self, value: date, today: date, moment: Optional[datetime] = None) -> ValidationOutcome:
        if value > today or (moment is not None and moment > datetime.now()):
            return self._fail(FailureReason.FUTURE_DATE, FUTURE_DOB_MESSAGE)

        if today.year - value.year > self.max_age:
            return self._fail(FailureReason.IMPLAUSIBLE_AGE, IMPLAUSIBLE_DOB_MESSAGE)

        return self._ok()


class AppointmentDateValidator(DateRule):
    """Today or later; anything before today's midnight is in the past."""

    @property
    def name(self) -> str:
        return "AppointmentDateValidator"

    def _check(self, value: date, today: date, moment: Optional[datetime] = None) -> ValidationOutcome:
        if value < today:
            return self._fail(FailureReason.PAST_APPOINTMENT_DATE, PAST_APPOINTMENT_MESSAGE)
        return self._ok()
