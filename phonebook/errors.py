"""Exception hierarchy shared by the phonebook modules."""
from __future__ import annotations


class PhonebookError(Exception):
    """Base class for recoverable phonebook errors."""


class InvalidFieldError(PhonebookError, ValueError):
    """Raised when a field token is not editable on a record."""

    def __init__(self, field: str, valid_fields=()) -> None:
        self.field = field
        self.valid_fields = tuple(sorted(valid_fields))
        super().__init__(field)

    def __str__(self) -> str:
        if self.valid_fields:
            return (
                f"Invalid field: {self.field}. "
                f"It must be one of: {', '.join(self.valid_fields)}."
            )
        return f"Invalid field: {self.field}"


class UnknownKindError(PhonebookError, ValueError):
    """Raised when a record kind is neither person nor organization."""


class RecordIndexError(PhonebookError, IndexError):
    """Raised when a display index does not point at a stored record."""


class RecordNotFoundError(PhonebookError, LookupError):
    """Raised when a record instance is not part of the store."""


class StorageError(PhonebookError):
    """Raised when the records file cannot be read or written."""
