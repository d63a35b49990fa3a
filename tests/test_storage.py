"""Tests for the JSON records file."""
from __future__ import annotations

import json

import pytest

from phonebook.errors import StorageError
from phonebook.records import Organization, Person
from phonebook.storage import JsonRecordStorage


@pytest.fixture
def records_file(tmp_path):
    return tmp_path / "records.json"


@pytest.fixture
def sample_records():
    return [
        Person(
            name="John",
            surname="Smith",
            birth_date="1990-01-01",
            gender="M",
            number="123 456 789",
            created_at="2026-10-19T09:30",
            last_edited_at="2026-10-19T10:15",
        ),
        Organization(
            name="Pizza Shop",
            address="Wall St. 1",
            number="",
            created_at="2026-10-19T09:31",
            last_edited_at="2026-10-19T09:31",
        ),
        Person(name="Ann", surname="Lee", number="[no number]"),
    ]


class TestLoad:
    def test_missing_file_is_empty(self, records_file):
        assert JsonRecordStorage(records_file).load() == []

    def test_reads_tagged_file(self, records_file):
        records_file.write_text(
            json.dumps(
                [
                    {
                        "type": "organization",
                        "name": "Car Shop",
                        "address": "Main St. 2",
                        "number": "+1 (800) 555",
                        "createdDate": "2023-05-01T12:00",
                        "lastEditDate": "2023-05-02T12:00",
                    }
                ]
            ),
            encoding="utf-8",
        )

        (record,) = JsonRecordStorage(records_file).load()

        assert record == Organization(
            name="Car Shop",
            address="Main St. 2",
            number="+1 (800) 555",
            created_at="2023-05-01T12:00",
            last_edited_at="2023-05-02T12:00",
        )

    def test_malformed_json_raises(self, records_file):
        records_file.write_text("{not json", encoding="utf-8")
        with pytest.raises(StorageError):
            JsonRecordStorage(records_file).load()

    def test_non_list_raises(self, records_file):
        records_file.write_text(json.dumps({"type": "person"}), encoding="utf-8")
        with pytest.raises(StorageError):
            JsonRecordStorage(records_file).load()

    def test_unknown_type_raises(self, records_file):
        records_file.write_text(json.dumps([{"type": "robot", "name": "R2"}]), encoding="utf-8")
        with pytest.raises(StorageError, match="Entry 1"):
            JsonRecordStorage(records_file).load()

    def test_unhashable_type_raises(self, records_file):
        records_file.write_text(json.dumps([{"type": ["person"], "name": "x"}]), encoding="utf-8")
        with pytest.raises(StorageError, match="Entry 1"):
            JsonRecordStorage(records_file).load()

    @pytest.mark.parametrize(
        "entry",
        [
            {"type": "person", "name": None},
            {"type": "person", "name": "Ann", "number": 5},
            {"type": "organization", "name": "Acme", "address": ["Main St."]},
            {"type": "person", "name": "Ann", "createdDate": 20231001},
        ],
    )
    def test_non_string_field_raises(self, records_file, entry):
        records_file.write_text(json.dumps([entry]), encoding="utf-8")
        with pytest.raises(StorageError, match="must be a string"):
            JsonRecordStorage(records_file).load()


class TestSave:
    def test_round_trip_preserves_order_and_kinds(self, records_file, sample_records):
        storage = JsonRecordStorage(records_file)
        storage.save(sample_records)

        loaded = storage.load()

        assert loaded == sample_records
        assert [type(record) for record in loaded] == [Person, Organization, Person]

    def test_writes_tagged_entries(self, records_file, sample_records):
        JsonRecordStorage(records_file).save(sample_records)

        data = json.loads(records_file.read_text(encoding="utf-8"))

        assert [entry["type"] for entry in data] == ["person", "organization", "person"]
        assert data[0]["birthDate"] == "1990-01-01"
        assert data[1]["address"] == "Wall St. 1"

    def test_overwrites_previous_content(self, records_file, sample_records):
        storage = JsonRecordStorage(records_file)
        storage.save(sample_records)
        storage.save(sample_records[:1])

        assert storage.load() == sample_records[:1]

    def test_creates_parent_directory(self, tmp_path, sample_records):
        storage = JsonRecordStorage(tmp_path / "nested" / "book.json")
        storage.save(sample_records)
        assert storage.load() == sample_records

    def test_save_empty(self, records_file):
        storage = JsonRecordStorage(records_file)
        storage.save([])
        assert records_file.read_text(encoding="utf-8").strip() == "[]"
        assert storage.load() == []
