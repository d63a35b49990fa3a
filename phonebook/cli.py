#!/usr/bin/env python3
"""Phonebook CLI."""
from __future__ import annotations

import argparse
import logging
import sys

from .config import ConfigError, Settings, load_settings
from .errors import RecordIndexError, StorageError
from .interfaces.shell import PhonebookShell
from .records import format_record
from .storage import JsonRecordStorage
from .store import ContactStore


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="phonebook",
        description="Keep person and organization contacts in a JSON phonebook.",
    )
    parser.add_argument(
        "--file",
        help="Records file to load and save (defaults to PHONEBOOK_FILE or records.json).",
    )
    parser.add_argument(
        "--no-save",
        action="store_true",
        help="Do not write records back when the interactive shell exits.",
    )

    subparsers = parser.add_subparsers(dest="command")

    subparsers.add_parser(
        "shell",
        help="Open the interactive menu (default).",
    )
    subparsers.add_parser(
        "list",
        help="List record names with their numbers.",
    )
    subparsers.add_parser(
        "count",
        help="Show how many records are stored.",
    )

    search_parser = subparsers.add_parser(
        "search",
        help="Find records whose fields contain the query.",
    )
    search_parser.add_argument("query", help="Case-insensitive text to look for.")

    show_parser = subparsers.add_parser(
        "show",
        help="Print every field of a single record.",
    )
    show_parser.add_argument("index", type=int, help="Record number as shown by 'list'.")

    return parser


def _configure_logging(settings: Settings) -> None:
    logging.basicConfig(
        level=settings.log_level_number,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )


def _cmd_list(store: ContactStore) -> int:
    entries = store.list()
    if not entries:
        print("The phonebook is empty.")
        return 0
    for index, name in entries:
        print(f"{index}. {name}")
    return 0


def _cmd_count(store: ContactStore) -> int:
    print(f"The phonebook has {store.count()} records.")
    return 0


def _cmd_search(store: ContactStore, query: str) -> int:
    results = store.search(query)
    if not results:
        print("No matching records found.")
        return 0
    print(f"Found {len(results)} results:")
    for record in results:
        print(f"{store.index_of(record)}. {record.title}")
    return 0


def _cmd_show(store: ContactStore, index: int) -> int:
    try:
        record = store.get(index)
    except RecordIndexError as exc:
        print(exc, file=sys.stderr)
        return 1
    print(format_record(record))
    return 0


def main(argv: list[str] | None = None) -> int:
    parser = _build_parser()
    args = parser.parse_args(argv)

    try:
        settings = load_settings(records_file=args.file)
    except ConfigError as exc:
        print(f"Configuration error: {exc}", file=sys.stderr)
        return 1

    _configure_logging(settings)

    storage = JsonRecordStorage(settings.records_file)
    try:
        store = ContactStore(storage.load())
    except StorageError as exc:
        print(f"Unable to load records: {exc}", file=sys.stderr)
        return 1

    command = args.command or "shell"
    if command == "shell":
        shell = PhonebookShell(
            store,
            storage,
            autosave=settings.autosave and not args.no_save,
        )
        return shell.run()
    if command == "list":
        return _cmd_list(store)
    if command == "count":
        return _cmd_count(store)
    if command == "search":
        return _cmd_search(store, args.query)
    if command == "show":
        return _cmd_show(store, args.index)

    parser.error(f"Unknown command: {command}")
    return 2


if __name__ == "__main__":
    raise SystemExit(main())
