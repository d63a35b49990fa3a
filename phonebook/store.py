"""In-memory contact store and its operations."""
from __future__ import annotations

import logging
from dataclasses import dataclass, field
from datetime import datetime
from typing import Callable, Iterable, Iterator, List, Mapping, Optional, Tuple

from .errors import RecordIndexError, RecordNotFoundError, UnknownKindError
from .phone import is_valid_phone_number
from .records import NO_NUMBER, RECORD_TYPES, Record

logger = logging.getLogger(__name__)

WRONG_NUMBER_FORMAT = "Wrong number format!"


@dataclass(slots=True)
class RecordChange:
    """Outcome of an add or edit, with any non-fatal warnings."""

    record: Record
    warnings: List[str] = field(default_factory=list)


def timestamp(moment: datetime) -> str:
    """Format ``moment`` at minute precision, e.g. ``2026-10-19T14:05``."""

    return moment.replace(second=0, microsecond=0).isoformat(timespec="minutes")


class ContactStore:
    """Ordered, mutable collection of phonebook records.

    Indexes accepted and returned by the store are 1-based, matching what the
    user sees in listings.
    """

    def __init__(
        self,
        records: Optional[Iterable[Record]] = None,
        *,
        clock: Callable[[], datetime] = datetime.now,
    ) -> None:
        self._records: List[Record] = list(records or [])
        self._clock = clock

    def __len__(self) -> int:
        return len(self._records)

    def __iter__(self) -> Iterator[Record]:
        return iter(self._records)

    @property
    def records(self) -> List[Record]:
        """A copy of the stored records in order."""
        return list(self._records)

    def count(self) -> int:
        return len(self._records)

    def _now(self) -> str:
        return timestamp(self._clock())

    def get(self, index: int) -> Record:
        if not 1 <= index <= len(self._records):
            raise RecordIndexError(
                f"No record number {index}; the phonebook has {len(self._records)} records."
            )
        return self._records[index - 1]

    def index_of(self, record: Record) -> int:
        for position, candidate in enumerate(self._records, 1):
            if candidate is record:
                return position
        raise RecordNotFoundError(f"Record {record.name} is not in the phonebook.")

    def add_record(self, kind: str, fields: Mapping[str, str]) -> RecordChange:
        """Create a record of ``kind`` from field tokens and append it.

        A malformed phone number is stored as an empty string and reported as a
        warning instead of rejecting the record.
        """

        record_type = RECORD_TYPES.get(kind)
        if record_type is None:
            raise UnknownKindError(f"Unknown type: {kind}")

        warnings: List[str] = []
        values = {
            attribute: fields.get(token, "")
            for token, attribute in record_type.FIELDS.items()
        }
        if not is_valid_phone_number(values["number"]):
            logger.warning(f"Rejected phone number {values['number']!r} for new {kind}")
            warnings.append(WRONG_NUMBER_FORMAT)
            values["number"] = ""

        now = self._now()
        record = record_type(created_at=now, last_edited_at=now, **values)
        self._records.append(record)
        logger.info(f"Added {kind} record {record.name!r} ({len(self._records)} total)")
        return RecordChange(record=record, warnings=warnings)

    def edit_record(self, index: int, field: str, value: str) -> RecordChange:
        """Set ``field`` on the record at ``index`` and stamp the edit time."""

        record = self.get(index)
        warnings: List[str] = []
        if field == "number" and not is_valid_phone_number(value):
            logger.warning(f"Rejected phone number {value!r} for record {index}")
            warnings.append(WRONG_NUMBER_FORMAT)
            value = NO_NUMBER

        # Raises InvalidFieldError before anything is changed.
        record.set_field(field, value)
        record.last_edited_at = self._now()
        logger.info(f"Edited {field} of record {index} ({record.name!r})")
        return RecordChange(record=record, warnings=warnings)

    def remove_record(self, record: Record) -> Record:
        """Remove this exact record instance; equal copies are left in place."""

        del self._records[self.index_of(record) - 1]
        logger.info(f"Removed record {record.name!r}")
        return record

    def remove_at(self, index: int) -> Record:
        return self.remove_record(self.get(index))

    def list(self) -> List[Tuple[int, str]]:
        return [(position, record.name) for position, record in enumerate(self._records, 1)]

    def search(self, query: str) -> List[Record]:
        """Case-insensitive substring search over every editable field.

        A blank query matches every record.
        """

        needle = query.strip().lower()
        if not needle:
            return list(self._records)
        return [record for record in self._records if _matches(record, needle)]


def _matches(record: Record, needle: str) -> bool:
    return any(needle in record.get_field(token).lower() for token in record.valid_fields())
