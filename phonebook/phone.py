"""Phone number format checks."""
from __future__ import annotations

import re

_TOKEN = r"\w+"
_GROUP = r"\w{2,}"
_SEPARATOR = r"[- ]"
_TAIL = rf"(?:{_SEPARATOR}{_GROUP})*"

# Accepted shapes, each optionally prefixed with "+":
#   123456789
#   (123) 456-789
#   123 (45) 67
#   123 45 67
_SHAPES = (
    _TOKEN,
    rf"\({_TOKEN}\){_TAIL}",
    rf"{_TOKEN}{_SEPARATOR}\({_GROUP}\){_TAIL}",
    rf"{_TOKEN}{_SEPARATOR}{_GROUP}{_TAIL}",
)

PHONE_NUMBER_PATTERN = re.compile(
    r"\+?(?:" + "|".join(_SHAPES) + r")",
    re.ASCII,
)


def is_valid_phone_number(value: str) -> bool:
    """Return True when ``value`` is one of the accepted phone number shapes.

    Word characters are limited to ASCII letters, digits and underscore.
    """

    return PHONE_NUMBER_PATTERN.fullmatch(value) is not None
