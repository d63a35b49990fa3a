"""Interactive menu loop for browsing and editing the phonebook."""
from __future__ import annotations

import logging
from typing import Callable, Dict, List, Optional, Sequence, Tuple

from ..errors import InvalidFieldError, RecordIndexError, StorageError, UnknownKindError
from ..records import Record, format_record
from ..storage import JsonRecordStorage
from ..store import ContactStore

logger = logging.getLogger(__name__)

# Field prompts in the order they are asked when adding a record.
ADD_PROMPTS: Dict[str, Sequence[Tuple[str, str]]] = {
    "person": (
        ("name", "Enter the name of the person:"),
        ("surname", "Enter the surname of the person:"),
        ("birthDate", "Enter the birth date:"),
        ("gender", "Enter the gender (M, F):"),
        ("number", "Enter the number:"),
    ),
    "organization": (
        ("name", "Enter the organization name:"),
        ("address", "Enter the address:"),
        ("number", "Enter the number:"),
    ),
}

FIELD_ALIASES = {"birth": "birthDate"}


class _InputClosed(Exception):
    """Raised internally when the input stream is exhausted."""


class PhonebookShell:
    """Line-oriented front end over a :class:`ContactStore`.

    This is the only place that reads input or prints; everything it does is
    delegated to the store and, on exit, to the storage.
    """

    def __init__(
        self,
        store: ContactStore,
        storage: Optional[JsonRecordStorage] = None,
        *,
        autosave: bool = True,
        read: Optional[Callable[[], str]] = None,
        write: Optional[Callable[[str], None]] = None,
    ) -> None:
        self.store = store
        self.storage = storage
        self.autosave = autosave
        self._read = read or input
        self._write = write or print
        self._actions: Dict[str, Callable[[], None]] = {
            "add": self._add,
            "remove": self._remove,
            "edit": self._edit,
            "count": self._count,
            "list": self._list,
            "search": self._search,
        }

    def run(self) -> int:
        """Process commands until ``exit`` or end of input; return the exit status."""

        while True:
            try:
                action = self._ask(
                    "[menu] Enter action (add, remove, edit, count, list, search, exit):"
                )
                if action == "exit":
                    break
                handler = self._actions.get(action)
                if handler is None:
                    logger.debug(f"Ignoring unknown action {action!r}")
                    continue
                handler()
                self._write("")
            except _InputClosed:
                break
        return self._shutdown()

    # --- prompts -----------------------------------------------------------

    def _ask(self, prompt: str, *, strip: bool = True) -> str:
        """Read one line; commands and indexes are stripped, field values are not."""
        self._write(prompt)
        try:
            line = self._read()
        except EOFError as exc:
            raise _InputClosed() from exc
        return line.strip() if strip else line

    def _parse_index(self, raw: str, limit: Optional[int] = None) -> Optional[int]:
        """Turn ``raw`` into a 1-based index no greater than ``limit`` (default: store size)."""
        try:
            index = int(raw)
        except ValueError:
            self._write("Please enter a valid number.")
            return None
        if limit is None:
            limit = len(self.store)
        if not 1 <= index <= limit:
            self._write("Selection out of range.")
            return None
        return index

    def _choose_record(self) -> Optional[int]:
        self._print_names()
        return self._parse_index(self._ask("Select a record:"))

    def _print_names(self) -> None:
        for index, name in self.store.list():
            self._write(f"{index}. {name}")

    # --- actions -----------------------------------------------------------

    def _add(self) -> None:
        kind = self._ask("Enter the type (person, organization):")
        prompts = ADD_PROMPTS.get(kind)
        if prompts is None:
            self._write(str(UnknownKindError(f"Unknown type: {kind}")))
            return
        fields = {token: self._ask(prompt, strip=False) for token, prompt in prompts}
        change = self.store.add_record(kind, fields)
        self._report(change.warnings)
        self._write("The record added.")

    def _remove(self) -> None:
        if not len(self.store):
            self._write("No records to remove!")
            return
        index = self._choose_record()
        if index is not None:
            self._delete(index)

    def _edit(self) -> None:
        if not len(self.store):
            self._write("No records to edit!")
            return
        index = self._choose_record()
        if index is not None:
            self._edit_field(index)

    def _count(self) -> None:
        self._write(f"The phonebook has {self.store.count()} records.")

    def _list(self) -> None:
        if not len(self.store):
            self._write("The phonebook is empty.")
            return
        self._print_names()
        choice = self._ask("[list] Enter action ([number], back):")
        if choice == "back":
            return
        index = self._parse_index(choice)
        if index is not None:
            self._record_menu(index)

    def _search(self) -> None:
        while True:
            query = self._ask("Enter search query:", strip=False)
            results = self.store.search(query)
            if not results:
                self._write("No matching records found.")
                return

            self._print_results(results)
            choice = self._ask("[search] Enter action ([number], back, again):")
            if choice == "again":
                continue
            if choice == "back":
                return
            position = self._parse_index(choice, len(results))
            if position is not None:
                self._record_menu(self.store.index_of(results[position - 1]))
            return

    def _print_results(self, results: List[Record]) -> None:
        self._write(f"Found {len(results)} results:")
        for position, record in enumerate(results, 1):
            self._write(f"{position}. {record.title}")

    # --- single record -----------------------------------------------------

    def _record_menu(self, index: int) -> None:
        self._write(format_record(self.store.get(index)))
        while True:
            choice = self._ask("[record] Enter action (edit, delete, menu):")
            if choice == "menu":
                return
            if choice == "delete":
                self._delete(index)
                return
            if choice == "edit":
                if self._edit_field(index):
                    self._write(format_record(self.store.get(index)))
                continue
            target = self._parse_index(choice)
            if target is not None:
                index = target
                self._write(format_record(self.store.get(index)))

    def _edit_field(self, index: int) -> bool:
        record = self.store.get(index)
        tokens = ", ".join(record.FIELDS)
        field = self._ask(f"Select a field ({tokens}):")
        field = FIELD_ALIASES.get(field, field)
        if field not in record.valid_fields():
            self._write(str(InvalidFieldError(field, record.valid_fields())))
            return False

        value = self._ask(f"Enter {field}:", strip=False)
        try:
            change = self.store.edit_record(index, field, value)
        except (InvalidFieldError, RecordIndexError) as exc:
            self._write(str(exc))
            return False
        self._report(change.warnings)
        self._write("The record updated!")
        return True

    def _delete(self, index: int) -> None:
        record = self.store.remove_at(index)
        self._write(f"Record {record.name} removed successfully.")

    def _report(self, warnings: Sequence[str]) -> None:
        for warning in warnings:
            self._write(warning)

    # --- exit --------------------------------------------------------------

    def _shutdown(self) -> int:
        if not self.autosave or self.storage is None:
            return 0
        try:
            self.storage.save(self.store)
        except StorageError as exc:
            self._write(f"Unable to save records: {exc}")
            return 1
        return 0
