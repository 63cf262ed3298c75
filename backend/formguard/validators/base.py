"""Base rule — abstract class implementing the Strategy Pattern.

Each field rule is a standalone, independently testable unit.
New rules are registered with the engine without modifying it.
"""

from abc import ABC, abstractmethod
from typing import Optional, Protocol

from formguard.validators.models import ValidationOutcome, FailureReason


class FieldLookup(Protocol):
    """Read access to the other fields' current values.

    Any ``Mapping[str, str]`` satisfies this protocol.
    """

    def get(self, name: str) -> Optional[str]:
        ...


class BaseRule(ABC):
    """Abstract base for all field rules.

    Contract:
        - validate() is deterministic for a given value, context and day
        - validate() only sees non-empty, trimmed values; required-ness is
          checked by the engine before dispatch
        - validate() returns a ValidationOutcome and never raises on bad input
        - No UI state, no I/O
    """

    @property
    @abstractmethod
    def name(self) -> str:
        """Human-readable name for logging."""
        ...

    @abstractmethod
    def validate(self, value: str, context: Optional[FieldLookup] = None) -> ValidationOutcome:
        """Run this rule against one field value.

        Args:
            value: Trimmed, non-empty field value
            context: Lookup of sibling field values (for cross-field rules)

        Returns:
            ValidationOutcome, valid or carrying a reason and message
        """
        ...

    # ── Helper Methods ──

    def _ok(self) -> ValidationOutcome:
        return ValidationOutcome.ok()

    def _fail(self, reason: FailureReason, message: str) -> ValidationOutcome:
        """Convenience method to create a failed ValidationOutcome."""
        return ValidationOutcome.fail(reason, message)


class PatternRule(BaseRule):
    """Rule that only checks the value's shape against a compiled regex."""

    def __init__(self, rule_name: str, pattern, message: str):
        self._name = rule_name
        self.pattern = pattern
        self.message = message

    @property
    def name(self) -> str:
        return self._name

    def validate(self, value: str, context: Optional[FieldLookup] = None) -> ValidationOutcome:
        if not self.pattern.fullmatch(value):
            return self._fail(FailureReason.PATTERN_MISMATCH, self.message)
        return self._ok()
