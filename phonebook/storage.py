"""JSON file persistence for phonebook records."""
from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Iterable, List, Union

from .errors import StorageError
from .records import Record, record_from_dict

logger = logging.getLogger(__name__)


class JsonRecordStorage:
    """Reads and overwrites a single JSON array of tagged records."""

    def __init__(self, path: Union[str, Path]) -> None:
        self.path = Path(path)

    def load(self) -> List[Record]:
        """Return the stored records, or an empty list when no file exists."""

        if not self.path.exists():
            logger.debug(f"No records file at {self.path}; starting empty")
            return []

        try:
            with self.path.open("r", encoding="utf-8") as f:
                data = json.load(f)
        except (json.JSONDecodeError, OSError) as exc:
            raise StorageError(f"Unable to read {self.path}: {exc}") from exc

        if not isinstance(data, list):
            raise StorageError(f"{self.path} does not contain a list of records")

        records: List[Record] = []
        for position, item in enumerate(data, 1):
            if not isinstance(item, dict):
                raise StorageError(f"Entry {position} in {self.path} is not an object")
            try:
                records.append(record_from_dict(item))
            except ValueError as exc:
                raise StorageError(f"Entry {position} in {self.path}: {exc}") from exc

        logger.info(f"Loaded {len(records)} records from {self.path}")
        return records

    def save(self, records: Iterable[Record]) -> None:
        """Overwrite the file with ``records`` in order."""

        payload = [record.to_dict() for record in records]
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            with self.path.open("w", encoding="utf-8") as f:
                json.dump(payload, f, indent=4)
                f.write("\n")
        except OSError as exc:
            raise StorageError(f"Unable to write {self.path}: {exc}") from exc
        logger.info(f"Saved {len(payload)} records to {self.path}")
