"""Validation Engine — dispatches field rules, tracks errors, aggregates forms.

This is the main entry point for form validation. An adapter owns one
FormValidator per form, feeds it field values, and renders what it returns.

Usage:
    validator = FormValidator()
    outcome = validator.validate_field("phone", "9876543210", required=True)
    result = validator.validate_form(fields)
    if not result.valid:
        # Show validator.error_summary(), focus validator.first_error_field()
"""

import time
from typing import Iterable, Mapping, Optional, Union

import structlog

from formguard.config import Settings, get_settings
from formguard.validators.base import BaseRule, FieldLookup
from formguard.validators.error_state import ErrorState
from formguard.validators.exceptions import RuleRegistrationError
from formguard.validators.labels import resolve_label
from formguard.validators.models import (
    FailureReason,
    FieldName,
    FormField,
    FormValidationResult,
    ValidationOutcome,
)
from formguard.validators.reference_data import (
    REQUIRED_MESSAGE,
    CHOICE_REQUIRED_MESSAGE,
    SUMMARY_HEADER,
)

# Import all rules
from formguard.validators.name_validator import NameValidator
from formguard.validators.contact_validator import EmailValidator, PhoneValidator, ZipcodeValidator
from formguard.validators.username_validator import UsernameValidator
from formguard.validators.password_validator import PasswordValidator, ConfirmPasswordValidator
from formguard.validators.date_validator import DateOfBirthValidator, AppointmentDateValidator

logger = structlog.get_logger()

FieldKey = Union[FieldName, str]


def _key(field_name: FieldKey) -> str:
    return field_name.value if isinstance(field_name, FieldName) else field_name


class FormValidator:
    """Validates fields against per-name rules and keeps the form's ErrorState.

    Design principles:
        - Failures are returned, never raised
        - Required-ness is checked before any field-specific rule
        - Names without a rule are only checked for required-ness
        - ErrorState always reflects the latest validation of each field
    """

    def __init__(
        self,
        rules: Optional[Mapping[FieldKey, BaseRule]] = None,
        settings: Optional[Settings] = None,
    ):
        """Initialize with default rules or a custom table.

        Args:
            rules: Optional field name -> rule table. If None, uses all defaults.
            settings: Optional settings; defaults to the cached environment settings.
        """
        self.settings = settings or get_settings()
        table = rules if rules is not None else self.default_rules(self.settings)
        self.rules: dict[str, BaseRule] = {_key(name): rule for name, rule in table.items()}
        self._errors = ErrorState()

    @staticmethod
    def default_rules(settings: Settings) -> dict[FieldName, BaseRule]:
        """Create the default field name -> rule table."""
        name_rule = NameValidator(min_length=settings.NAME_MIN_LENGTH)
        return {
            FieldName.FIRST_NAME: name_rule,
            FieldName.LAST_NAME: name_rule,
            FieldName.EMAIL: EmailValidator(),
            FieldName.PHONE: PhoneValidator(),
            FieldName.ZIPCODE: ZipcodeValidator(),
            FieldName.USERNAME: UsernameValidator(
                min_length=settings.USERNAME_MIN_LENGTH,
                max_length=settings.USERNAME_MAX_LENGTH,
            ),
            FieldName.PASSWORD: PasswordValidator(
                min_score=settings.PASSWORD_MIN_SCORE,
                min_length=settings.PASSWORD_MIN_LENGTH,
            ),
            FieldName.CONFIRM_PASSWORD: ConfirmPasswordValidator(),
            FieldName.DATE_OF_BIRTH: DateOfBirthValidator(max_age=settings.MAX_AGE_YEARS),
            FieldName.DATE: AppointmentDateValidator(),
        }

    # ── Error state ──

    @property
    def error_state(self) -> ErrorState:
        """The live ErrorState (read it; the engine is the only writer)."""
        return self._errors

    @property
    def errors(self) -> dict[str, str]:
        """Snapshot of the current field -> message errors."""
        return self._errors.as_dict()

    def clear_field_error(self, field_name: FieldKey) -> None:
        """Drop a field's error while the user is editing it."""
        self._errors.discard(_key(field_name))

    def first_error_field(self) -> Optional[str]:
        """The field an adapter should focus after a failed submit."""
        return self._errors.first()

    def error_summary(self) -> Optional[str]:
        """All current messages under a single header, or None if there are none."""
        if not self._errors:
            return None
        return f"{SUMMARY_HEADER}\n\n" + "\n".join(self._errors.messages())

    # ── Field validation ──

    def validate_field(
        self,
        field_name: FieldKey,
        value: Optional[str],
        required: bool = False,
        context: Optional[FieldLookup] = None,
        label: Optional[str] = None,
    ) -> ValidationOutcome:
        """Validate one text-like field and record the outcome.

        Args:
            field_name: Field identity; picks the rule
            value: Current value (trimmed here)
            required: Whether the field must carry a value
            context: Lookup of sibling values for cross-field rules
            label: Label text for the "is required" message

        Returns:
            ValidationOutcome for this field
        """
        name = _key(field_name)
        value = (value or "").strip()

        outcome = self._evaluate(name, value, required, context, label)
        self._errors.record(name, outcome)

        logger.debug(
            "field_validated",
            field=name,
            valid=outcome.valid,
            reason=outcome.reason,
        )
        return outcome

    def validate_choice(self, field_name: FieldKey, checked: bool, required: bool = True) -> ValidationOutcome:
        """Validate a checkbox-like field: a required one must be checked."""
        name = _key(field_name)
        if required and not checked:
            outcome = ValidationOutcome.fail(FailureReason.REQUIRED, CHOICE_REQUIRED_MESSAGE)
        else:
            outcome = ValidationOutcome.ok()
        self._errors.record(name, outcome)

        logger.debug("choice_validated", field=name, valid=outcome.valid)
        return outcome

    def _evaluate(
        self,
        name: str,
        value: str,
        required: bool,
        context: Optional[FieldLookup],
        label: Optional[str],
    ) -> ValidationOutcome:
        if required and not value:
            return ValidationOutcome.fail(
                FailureReason.REQUIRED,
                REQUIRED_MESSAGE.format(label=resolve_label(name, label)),
            )

        if not value:
            return ValidationOutcome.ok()

        rule = self.rules.get(name)
        if rule is None:
            return ValidationOutcome.ok()

        return rule.validate(value, context)

    # ── Form validation ──

    def validate_form(
        self,
        fields: Iterable[Union[FormField, Mapping]],
        include_optional: bool = False,
    ) -> FormValidationResult:
        """Validate every required field, in order, without stopping early.

        Args:
            fields: FormFields (or dicts of FormField attributes) in form order
            include_optional: Also validate non-required text fields; empty ones pass
                and drop any earlier error

        Returns:
            FormValidationResult; ``errors`` is the ErrorState after the pass
        """
        start_time = time.perf_counter()

        form_fields = [f if isinstance(f, FormField) else FormField(**f) for f in fields]
        context = {f.name: f.value.strip() for f in form_fields if not f.is_choice}

        valid = True
        checked = 0
        for field in form_fields:
            if not field.required and not (include_optional and not field.is_choice):
                continue

            if field.is_choice:
                outcome = self.validate_choice(field.name, field.checked, field.required)
            else:
                outcome = self.validate_field(
                    field.name,
                    field.value,
                    required=field.required,
                    context=context,
                    label=field.label,
                )
            checked += 1
            valid = valid and outcome.valid

        result = FormValidationResult(valid=valid, errors=self._errors.as_dict())

        total_duration = (time.perf_counter() - start_time) * 1000

        logger.info(
            "form_validated",
            valid=result.valid,
            field_count=checked,
            error_count=len(result.errors),
            duration_ms=round(total_duration, 2),
        )

        return result

    # ── Rule table ──

    def add_rule(self, field_name: FieldKey, rule: BaseRule) -> None:
        """Register (or replace) the rule for a field name."""
        name = _key(field_name)
        if not name:
            raise RuleRegistrationError("field name must be a non-empty string")
        if not isinstance(rule, BaseRule):
            raise RuleRegistrationError(f"rule for '{name}' must be a BaseRule, got {type(rule).__name__}")
        self.rules[name] = rule

    def remove_rule(self, field_name: FieldKey) -> None:
        """Remove a field's rule; the field is then only checked for required-ness."""
        self.rules.pop(_key(field_name), None)
