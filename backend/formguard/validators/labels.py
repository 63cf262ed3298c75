"""Human-readable field labels for "is required" messages."""

import re
from typing import Optional

_WORD_START = re.compile(r"\b\w")


def resolve_label(field_name: str, label: Optional[str] = None) -> str:
    """Return the label an adapter supplied, or derive one from the name.

    Supplied labels lose their required-marker asterisks. Derived labels turn
    underscores into spaces and upper-case the first character of each word:
    ``date_of_birth`` -> ``Date Of Birth``.
    """
    if label is not None:
        cleaned = label.replace("*", "").strip()
        if cleaned:
            return cleaned

    return _WORD_START.sub(lambda m: m.group(0).upper(), field_name.replace("_", " "))
