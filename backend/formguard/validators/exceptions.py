"""Errors raised for misuse of the validation API.

Failed validations are never raised; these cover programming mistakes at
the seams (bad rule registration, unknown form schemas).
"""


class FormGuardError(Exception):
    """Base class for all formguard errors."""


class RuleRegistrationError(FormGuardError, ValueError):
    """A rule could not be registered under the given field name."""


class UnknownFormError(FormGuardError, KeyError):
    """No form schema is registered under the requested name."""
