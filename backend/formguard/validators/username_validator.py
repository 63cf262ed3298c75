"""Username Validator — starts with a letter, then letters, digits, '_' or '-'."""

from typing import Optional

from formguard.validators.base import BaseRule, FieldLookup
from formguard.validators.models import ValidationOutcome, FailureReason
from formguard.validators.reference_data import (
    USERNAME_PATTERN,
    USERNAME_PATTERN_MESSAGE,
    USERNAME_LENGTH_MESSAGE,
)


class UsernameValidator(BaseRule):
    def __init__(self, min_length: int = 3, max_length: int = 30):
        self.min_length = min_length
        self.max_length = max_length

    @property
    def name(self) -> str:
        return "UsernameValidator"

    def validate(self, value: str, context: Optional[FieldLookup] = None) -> ValidationOutcome:
        if not USERNAME_PATTERN.fullmatch(value):
            return self._fail(FailureReason.PATTERN_MISMATCH, USERNAME_PATTERN_MESSAGE)

        if not self.min_length <= len(value) <= self.max_length:
            return self._fail(
                FailureReason.LENGTH_VIOLATION,
                USERNAME_LENGTH_MESSAGE.format(min_length=self.min_length, max_length=self.max_length),
            )

        return self._ok()
