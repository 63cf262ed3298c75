"""Password strength scoring.

Five independent, unweighted checks; the score is how many pass. Pure and
deterministic, so adapters can call it on every keystroke for a meter.
"""

import re

from formguard.validators.models import PasswordChecks, PasswordStrength

UPPERCASE = re.compile(r"[A-Z]")
LOWERCASE = re.compile(r"[a-z]")
DIGIT = re.compile(r"[0-9]")
SPECIAL = re.compile(r"[^a-zA-Z0-9]")


def score_password(password: str, min_length: int = 8) -> PasswordStrength:
    """Score a password from 0 to 5.

    Args:
        password: Raw password text (not trimmed)
        min_length: Length at which the length check passes

    Returns:
        PasswordStrength with the score and each individual check
    """
    checks = PasswordChecks(
        length=len(password) >= min_length,
        uppercase=bool(UPPERCASE.search(password)),
        lowercase=bool(LOWERCASE.search(password)),
        number=bool(DIGIT.search(password)),
        special=bool(SPECIAL.search(password)),
    )
    score = sum(1 for passed in checks.model_dump().values() if passed)
    return PasswordStrength(score=score, checks=checks)
