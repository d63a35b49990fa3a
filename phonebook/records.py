"""Record model for phonebook entries."""
from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any, ClassVar, Dict, FrozenSet, Type

from .errors import InvalidFieldError

INVALID_FIELD = "Invalid property"
NO_DATA = "[no data]"
NO_NUMBER = "[no number]"


@dataclass(slots=True)
class Record(ABC):
    """Fields shared by every phonebook entry.

    Subclasses declare ``FIELDS``, the mapping from user-facing field tokens
    (as typed in the edit menu and stored on disk) to attribute names.
    ``created_at`` and ``last_edited_at`` are never part of that mapping.
    """

    kind: ClassVar[str] = ""
    FIELDS: ClassVar[Dict[str, str]] = {}

    name: str
    number: str = ""
    created_at: str = ""
    last_edited_at: str = ""

    @property
    @abstractmethod
    def title(self) -> str:
        """Short label used in search listings."""

    def valid_fields(self) -> FrozenSet[str]:
        return frozenset(self.FIELDS)

    def get_field(self, field: str) -> str:
        attribute = self.FIELDS.get(field)
        if attribute is None:
            return INVALID_FIELD
        return getattr(self, attribute)

    def set_field(self, field: str, value: str) -> None:
        attribute = self.FIELDS.get(field)
        if attribute is None:
            raise InvalidFieldError(field, self.FIELDS)
        setattr(self, attribute, value)

    def to_dict(self) -> Dict[str, Any]:
        """Convert to the tagged dictionary written to the records file."""
        data: Dict[str, Any] = {"type": self.kind}
        for field, attribute in self.FIELDS.items():
            data[field] = getattr(self, attribute)
        data["createdDate"] = self.created_at
        data["lastEditDate"] = self.last_edited_at
        return data

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Record":
        values = {attribute: data.get(field, "") for field, attribute in cls.FIELDS.items()}
        return cls(
            created_at=data.get("createdDate", ""),
            last_edited_at=data.get("lastEditDate", ""),
            **values,
        )


@dataclass(slots=True)
class Person(Record):
    """A private contact."""

    kind: ClassVar[str] = "person"
    FIELDS: ClassVar[Dict[str, str]] = {
        "name": "name",
        "surname": "surname",
        "birthDate": "birth_date",
        "gender": "gender",
        "number": "number",
    }

    surname: str = ""
    birth_date: str = ""
    gender: str = ""

    @property
    def title(self) -> str:
        return f"{self.name} {self.surname}"


@dataclass(slots=True)
class Organization(Record):
    """A business contact."""

    kind: ClassVar[str] = "organization"
    FIELDS: ClassVar[Dict[str, str]] = {
        "name": "name",
        "address": "address",
        "number": "number",
    }

    address: str = ""

    @property
    def title(self) -> str:
        return self.name


RECORD_TYPES: Dict[str, Type[Record]] = {
    Person.kind: Person,
    Organization.kind: Organization,
}


def record_from_dict(data: Dict[str, Any]) -> Record:
    """Build the record variant named by ``data["type"]``."""

    kind = data.get("type")
    record_type = RECORD_TYPES.get(kind) if isinstance(kind, str) else None
    if record_type is None:
        raise ValueError(f"Unknown record type: {kind!r}")

    for key in (*record_type.FIELDS, "createdDate", "lastEditDate"):
        value = data.get(key, "")
        if not isinstance(value, str):
            raise ValueError(f"Field {key!r} must be a string, got {type(value).__name__}")
    return record_type.from_dict(data)


def _or_placeholder(value: str) -> str:
    return value if value else NO_DATA


def format_record(record: Record) -> str:
    """Return the multi-line description shown when a record is opened.

    Empty optional fields are rendered as ``[no data]``; the record itself is
    left untouched.
    """

    if isinstance(record, Person):
        lines = [
            f"Name: {record.name}",
            f"Surname: {record.surname}",
            f"Birth date: {_or_placeholder(record.birth_date)}",
            f"Gender: {_or_placeholder(record.gender)}",
            f"Number: {_or_placeholder(record.number)}",
        ]
    elif isinstance(record, Organization):
        lines = [
            f"Organization name: {record.name}",
            f"Address: {_or_placeholder(record.address)}",
            f"Number: {_or_placeholder(record.number)}",
        ]
    else:
        raise TypeError(f"Unsupported record type: {type(record).__name__}")
    lines.append(f"Time created: {record.created_at}")
    lines.append(f"Time last edit: {record.last_edited_at}")
    return "\n".join(lines)
