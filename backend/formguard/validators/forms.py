"""Form schemas — the appointment and registration forms the validator ships for.

A schema lists a form's controls in display order. ``bind`` turns raw
submitted data into FormFields ready for ``FormValidator.validate_form``.
"""

from typing import Any, Mapping, Optional

from pydantic import BaseModel, Field

from formguard.validators.exceptions import UnknownFormError
from formguard.validators.models import FieldKind, FormField
from formguard.validators.normalizers import normalize_field

# Raw checkbox values that count as checked
_TRUTHY = {"on", "true", "1", "yes", "checked"}


class FieldSpec(BaseModel):
    """One control in a form schema."""

    name: str
    kind: FieldKind = FieldKind.TEXT
    required: bool = False
    label: Optional[str] = None

    model_config = {"use_enum_values": True}


class FormSchema(BaseModel):
    """Ordered controls of a form."""

    name: str
    fields: list[FieldSpec] = Field(default_factory=list)

    def bind(self, data: Mapping[str, Any], normalize: bool = True) -> list[FormField]:
        """Pair each control with its submitted value.

        Missing keys become empty values. Text values pass through the input
        filters when ``normalize`` is set; checkbox values are read as checked
        when truthy.
        """
        bound = []
        for spec in self.fields:
            raw = data.get(spec.name)
            if FieldKind(spec.kind) is FieldKind.CHECKBOX:
                bound.append(FormField(
                    name=spec.name,
                    kind=spec.kind,
                    required=spec.required,
                    label=spec.label,
                    checked=_is_checked(raw),
                ))
                continue

            value = "" if raw is None else str(raw)
            if normalize:
                value = normalize_field(spec.name, value, spec.kind)
            bound.append(FormField(
                name=spec.name,
                value=value,
                kind=spec.kind,
                required=spec.required,
                label=spec.label,
            ))
        return bound


def _is_checked(raw: Any) -> bool:
    if isinstance(raw, bool):
        return raw
    if raw is None:
        return False
    return str(raw).strip().lower() in _TRUTHY


APPOINTMENT_FORM = FormSchema(
    name="appointmentForm",
    fields=[
        FieldSpec(name="first_name", required=True, label="First Name *"),
        FieldSpec(name="last_name", required=True, label="Last Name *"),
        FieldSpec(name="email", kind=FieldKind.EMAIL, required=True, label="Email *"),
        FieldSpec(name="phone", kind=FieldKind.TEL, required=True, label="Phone Number *"),
        FieldSpec(name="date", kind=FieldKind.DATE, required=True, label="Appointment Date *"),
        FieldSpec(name="time", kind=FieldKind.SELECT, required=True, label="Preferred Time *"),
        FieldSpec(name="reason", kind=FieldKind.TEXTAREA, label="Reason for Visit"),
    ],
)

REGISTRATION_FORM = FormSchema(
    name="registerForm",
    fields=[
        FieldSpec(name="first_name", required=True, label="First Name *"),
        FieldSpec(name="last_name", required=True, label="Last Name *"),
        FieldSpec(name="username", required=True, label="Username *"),
        FieldSpec(name="email", kind=FieldKind.EMAIL, required=True, label="Email *"),
        FieldSpec(name="phone", kind=FieldKind.TEL, label="Phone Number"),
        FieldSpec(name="date_of_birth", kind=FieldKind.DATE, label="Date of Birth"),
        FieldSpec(name="zipcode", label="PIN Code"),
        FieldSpec(name="password", kind=FieldKind.PASSWORD, required=True, label="Password *"),
        FieldSpec(name="confirm_password", kind=FieldKind.PASSWORD, required=True, label="Confirm Password *"),
        FieldSpec(name="terms", kind=FieldKind.CHECKBOX, required=True, label="I agree to the terms"),
    ],
)

FORMS: dict[str, FormSchema] = {
    APPOINTMENT_FORM.name: APPOINTMENT_FORM,
    REGISTRATION_FORM.name: REGISTRATION_FORM,
}


def get_form_schema(name: str) -> FormSchema:
    """Look up a shipped form schema by its form id."""
    try:
        return FORMS[name]
    except KeyError:
        raise UnknownFormError(f"No form schema named '{name}'. Known forms: {', '.join(sorted(FORMS))}") from None


def get_all_forms() -> list[str]:
    """List all shipped form ids."""
    return list(FORMS.keys())
