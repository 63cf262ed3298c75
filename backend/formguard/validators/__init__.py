"""Form Validator — deterministic validation layer for booking and registration forms.

Usage:
    from formguard.validators import FormValidator

    validator = FormValidator()
    result = validator.validate_form(fields)
    if not result.valid:
        # Render result.errors next to each field
"""

from formguard.validators.engine import FormValidator
from formguard.validators.error_state import ErrorState
from formguard.validators.exceptions import FormGuardError, RuleRegistrationError, UnknownFormError
from formguard.validators.forms import (
    APPOINTMENT_FORM,
    REGISTRATION_FORM,
    FormSchema,
    FieldSpec,
    get_form_schema,
    get_all_forms,
)
from formguard.validators.labels import resolve_label
from formguard.validators.models import (
    FailureReason,
    FieldKind,
    FieldName,
    FormField,
    FormValidationResult,
    PasswordChecks,
    PasswordStrength,
    ValidationOutcome,
)
from formguard.validators.normalizers import normalize_phone, normalize_zip, normalize_name, normalize_field
from formguard.validators.strength import score_password

__all__ = [
    "FormValidator",
    "ErrorState",
    "FormGuardError",
    "RuleRegistrationError",
    "UnknownFormError",
    "APPOINTMENT_FORM",
    "REGISTRATION_FORM",
    "FormSchema",
    "FieldSpec",
    "get_form_schema",
    "get_all_forms",
    "resolve_label",
    "FailureReason",
    "FieldKind",
    "FieldName",
    "FormField",
    "FormValidationResult",
    "PasswordChecks",
    "PasswordStrength",
    "ValidationOutcome",
    "normalize_phone",
    "normalize_zip",
    "normalize_name",
    "normalize_field",
    "score_password",
]
