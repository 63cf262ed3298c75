"""Input normalization filters applied to raw input before validation.

Each filter is pure and idempotent, and the filters are independent of one
another. They clean what a user typed; they do not decide validity.
"""

import re
from typing import Optional, Union

from formguard.config import get_settings
from formguard.validators.models import FieldKind, FieldName

NON_DIGITS = re.compile(r"[^0-9]")
NON_NAME_CHARS = re.compile(r"[^a-zA-Z\s]")


def normalize_phone(raw: str, max_digits: int = 10) -> str:
    """Keep digits only, at most ``max_digits`` of them."""
    return NON_DIGITS.sub("", raw)[:max_digits]


def normalize_zip(raw: str, max_digits: int = 6) -> str:
    """Keep digits only, at most ``max_digits`` of them."""
    return NON_DIGITS.sub("", raw)[:max_digits]


def normalize_name(raw: str) -> str:
    """Keep ASCII letters and whitespace."""
    return NON_NAME_CHARS.sub("", raw)


NAME_FIELDS = {FieldName.FIRST_NAME.value, FieldName.LAST_NAME.value}


def _is_tel(kind: Optional[Union[FieldKind, str]]) -> bool:
    try:
        return kind is not None and FieldKind(kind) is FieldKind.TEL
    except ValueError:
        return False


def normalize_field(name: str, raw: str, kind: Optional[Union[FieldKind, str]] = None) -> str:
    """Apply the filter that matches a field, or return ``raw`` unchanged.

    Telephone inputs are filtered as phone numbers whatever their name.
    """
    settings = get_settings()
    if _is_tel(kind) or name == FieldName.PHONE.value:
        return normalize_phone(raw, settings.PHONE_DIGITS)
    if name == FieldName.ZIPCODE.value:
        return normalize_zip(raw, settings.ZIPCODE_DIGITS)
    if name in NAME_FIELDS:
        return normalize_name(raw)
    return raw
