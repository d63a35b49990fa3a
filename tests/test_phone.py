"""Tests for phone number validation."""
from __future__ import annotations

import pytest

from phonebook.phone import is_valid_phone_number


@pytest.mark.parametrize(
    "number",
    [
        "123456789",
        "+123456789",
        "(123) 456-789",
        "123 45 67",
        "a",
        "+0 (123) 456-789-ABcd",
        "123 (45) 67",
        "+(phone)",
        "1-23-456",
        "ab_cd",
    ],
)
def test_accepts(number):
    assert is_valid_phone_number(number)


@pytest.mark.parametrize(
    "number",
    [
        "",
        "123*456",
        "123 4",
        "(123) 4",
        "(123)(456)",
        "123 (4) 56",
        "++123",
        "123 ",
        "12--34",
        "12 3456 (789)",
        "١٢٣",
    ],
)
def test_rejects(number):
    assert not is_valid_phone_number(number)
