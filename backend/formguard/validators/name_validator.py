"""Name Validator — person names (first and last) limited to letters and spaces."""

from typing import Optional

from formguard.validators.base import BaseRule, FieldLookup
from formguard.validators.models import ValidationOutcome, FailureReason
from formguard.validators.reference_data import (
    NAME_PATTERN,
    NAME_CHARSET_MESSAGE,
    NAME_LENGTH_MESSAGE,
)


class NameValidator(BaseRule):
    """Charset is checked before length, so "J1" reports the charset problem."""

    def __init__(self, min_length: int = 2):
        self.min_length = min_length

    @property
    def name(self) -> str:
        return "NameValidator"

    def validate(self, value: str, context: Optional[FieldLookup] = None) -> ValidationOutcome:
        if not NAME_PATTERN.fullmatch(value):
            return self._fail(FailureReason.CHARSET_VIOLATION, NAME_CHARSET_MESSAGE)

        if len(value) < self.min_length:
            return self._fail(
                FailureReason.LENGTH_VIOLATION,
                NAME_LENGTH_MESSAGE.format(min_length=self.min_length),
            )

        return self._ok()
