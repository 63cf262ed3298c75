"""Validation models — field identities, failure reasons, outcomes, and form results.

Validation failures are data, not exceptions: every rule returns a
ValidationOutcome and the engine aggregates them into a FormValidationResult.
"""

from enum import Enum
from typing import Optional
from pydantic import BaseModel, Field, model_validator


class FieldName(str, Enum):
    """Field names that carry a field-specific rule.

    Any other name is still accepted by the engine and checked for
    required-ness only.
    """

    FIRST_NAME = "first_name"
    LAST_NAME = "last_name"
    EMAIL = "email"
    PHONE = "phone"
    ZIPCODE = "zipcode"
    USERNAME = "username"
    PASSWORD = "password"
    CONFIRM_PASSWORD = "confirm_password"
    DATE_OF_BIRTH = "date_of_birth"
    DATE = "date"


class FieldKind(str, Enum):
    """Input control kinds an adapter can report."""

    TEXT = "text"
    PASSWORD = "password"
    EMAIL = "email"
    TEL = "tel"
    DATE = "date"
    CHECKBOX = "checkbox"
    SELECT = "select"
    TEXTAREA = "textarea"


# Kinds whose presence is a checked/selected state rather than a text value
CHOICE_KINDS = {FieldKind.CHECKBOX}


class FailureReason(str, Enum):
    """Deterministic reason codes for every failed validation."""

    REQUIRED = "REQUIRED"
    CHARSET_VIOLATION = "CHARSET_VIOLATION"
    LENGTH_VIOLATION = "LENGTH_VIOLATION"
    PATTERN_MISMATCH = "PATTERN_MISMATCH"       # email / phone / zipcode / username shape
    WEAK_PASSWORD = "WEAK_PASSWORD"
    PASSWORD_MISMATCH = "PASSWORD_MISMATCH"
    INVALID_DATE = "INVALID_DATE"               # not a calendar date at all
    FUTURE_DATE = "FUTURE_DATE"
    IMPLAUSIBLE_AGE = "IMPLAUSIBLE_AGE"
    PAST_APPOINTMENT_DATE = "PAST_APPOINTMENT_DATE"


class ValidationOutcome(BaseModel):
    """Result of validating a single field value."""

    valid: bool
    message: str = ""
    reason: Optional[FailureReason] = None

    model_config = {"frozen": True}

    @model_validator(mode="after")
    def _message_iff_invalid(self) -> "ValidationOutcome":
        if self.valid and (self.message or self.reason is not None):
            raise ValueError("a valid outcome carries no message or reason")
        if not self.valid and not (self.message and self.reason is not None):
            raise ValueError("an invalid outcome needs both a message and a reason")
        return self

    @classmethod
    def ok(cls) -> "ValidationOutcome":
        return cls(valid=True)

    @classmethod
    def fail(cls, reason: FailureReason, message: str) -> "ValidationOutcome":
        return cls(valid=False, reason=reason, message=message)


class PasswordChecks(BaseModel):
    """Individual password-complexity checks."""

    length: bool = False
    uppercase: bool = False
    lowercase: bool = False
    number: bool = False
    special: bool = False


class PasswordStrength(BaseModel):
    """Unweighted password strength: score is the count of passed checks."""

    score: int = Field(ge=0, le=5, description="Number of satisfied checks, 0-5")
    checks: PasswordChecks


class FormField(BaseModel):
    """Metadata for one form control as reported by the adapter."""

    name: str
    value: str = ""
    required: bool = False
    kind: FieldKind = FieldKind.TEXT
    checked: bool = Field(default=False, description="Checked/selected state for choice fields")
    label: Optional[str] = None

    model_config = {"use_enum_values": True}

    @property
    def is_choice(self) -> bool:
        return FieldKind(self.kind) in CHOICE_KINDS


class FormValidationResult(BaseModel):
    """Aggregate result of a whole-form validation pass."""

    valid: bool
    errors: dict[str, str] = Field(default_factory=dict)
