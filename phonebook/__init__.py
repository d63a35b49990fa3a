"""Person and organization phonebook with JSON persistence."""
from __future__ import annotations

from .errors import (
    InvalidFieldError,
    PhonebookError,
    RecordIndexError,
    RecordNotFoundError,
    StorageError,
    UnknownKindError,
)
from .phone import is_valid_phone_number
from .records import (
    INVALID_FIELD,
    NO_DATA,
    NO_NUMBER,
    Organization,
    Person,
    Record,
    format_record,
    record_from_dict,
)
from .storage import JsonRecordStorage
from .store import ContactStore, RecordChange

__all__ = [
    # Records
    "Record",
    "Person",
    "Organization",
    "format_record",
    "record_from_dict",
    "INVALID_FIELD",
    "NO_DATA",
    "NO_NUMBER",
    # Store
    "ContactStore",
    "RecordChange",
    "is_valid_phone_number",
    # Persistence
    "JsonRecordStorage",
    # Errors
    "PhonebookError",
    "InvalidFieldError",
    "UnknownKindError",
    "RecordIndexError",
    "RecordNotFoundError",
    "StorageError",
]
