"""Password Validators — minimum strength and confirmation match."""

from typing import Optional

from formguard.validators.base import BaseRule, FieldLookup
from formguard.validators.models import ValidationOutcome, FailureReason, FieldName
from formguard.validators.reference_data import WEAK_PASSWORD_MESSAGE, PASSWORD_MISMATCH_MESSAGE
from formguard.validators.strength import score_password


class PasswordValidator(BaseRule):
    """Passes when at least ``min_score`` of the five strength checks pass."""

    def __init__(self, min_score: int = 4, min_length: int = 8):
        self.min_score = min_score
        self.min_length = min_length

    @property
    def name(self) -> str:
        return "PasswordValidator"

    def validate(self, value: str, context: Optional[FieldLookup] = None) -> ValidationOutcome:
        strength = score_password(value, min_length=self.min_length)
        if strength.score < self.min_score:
            return self._fail(FailureReason.WEAK_PASSWORD, WEAK_PASSWORD_MESSAGE)
        return self._ok()


class ConfirmPasswordValidator(BaseRule):
    """Cross-field rule: the value must equal the sibling password field.

    A form without a password field has nothing to confirm against, so the
    value is accepted.
    """

    def __init__(self, password_field: str = FieldName.PASSWORD.value):
        self.password_field = password_field

    @property
    def name(self) -> str:
        return "ConfirmPasswordValidator"

    def validate(self, value: str, context: Optional[FieldLookup] = None) -> ValidationOutcome:
        if context is None:
            return self._ok()

        password = context.get(self.password_field)
        if password is None:
            return self._ok()

        if value != password:
            return self._fail(FailureReason.PASSWORD_MISMATCH, PASSWORD_MISMATCH_MESSAGE)

        return self._ok()
