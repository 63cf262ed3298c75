"""Contact Validators — email, mobile phone, and postal code shape checks."""

from formguard.validators.base import PatternRule
from formguard.validators.reference_data import (
    EMAIL_PATTERN,
    EMAIL_MESSAGE,
    PHONE_PATTERN,
    PHONE_MESSAGE,
    ZIPCODE_PATTERN,
    ZIPCODE_MESSAGE,
)


class EmailValidator(PatternRule):
    """Loose email shape: something@something.something, no whitespace."""

    def __init__(self):
        super().__init__("EmailValidator", EMAIL_PATTERN, EMAIL_MESSAGE)


class PhoneValidator(PatternRule):
    """Ten-digit mobile number whose first digit is 6-9."""

    def __init__(self):
        super().__init__("PhoneValidator", PHONE_PATTERN, PHONE_MESSAGE)


class ZipcodeValidator(PatternRule):
    """Six-digit PIN code that cannot start with 0."""

    def __init__(self):
        super().__init__("ZipcodeValidator", ZIPCODE_PATTERN, ZIPCODE_MESSAGE)
