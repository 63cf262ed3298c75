"""Per-field error state owned by a FormValidator."""

from typing import Iterator, Optional

from formguard.validators.models import ValidationOutcome


class ErrorState:
    """Field name -> message for every field whose last validation failed.

    Entries are replaced, never merged: recording an outcome first drops the
    field's previous entry, then re-adds it only if the outcome failed.
    Iteration follows the order in which failures were recorded.
    """

    def __init__(self):
        self._entries: dict[str, str] = {}

    def record(self, field_name: str, outcome: ValidationOutcome) -> None:
        self._entries.pop(field_name, None)
        if not outcome.valid:
            self._entries[field_name] = outcome.message

    def discard(self, field_name: str) -> None:
        """Forget a field's error, e.g. when the user starts editing it."""
        self._entries.pop(field_name, None)

    def get(self, field_name: str) -> Optional[str]:
        return self._entries.get(field_name)

    def first(self) -> Optional[str]:
        """Name of the earliest recorded failing field, if any."""
        return next(iter(self._entries), None)

    def messages(self) -> list[str]:
        return list(self._entries.values())

    def as_dict(self) -> dict[str, str]:
        """Snapshot copy; mutating it does not affect the state."""
        return dict(self._entries)

    def __contains__(self, field_name: object) -> bool:
        return field_name in self._entries

    def __iter__(self) -> Iterator[str]:
        return iter(list(self._entries))

    def __len__(self) -> int:
        return len(self._entries)

    def __bool__(self) -> bool:
        return bool(self._entries)

    def __repr__(self) -> str:
        return f"ErrorState({self._entries!r})"
