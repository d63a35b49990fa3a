"""User-facing front ends for the phonebook."""
from __future__ import annotations

from .shell import PhonebookShell

__all__ = ["PhonebookShell"]
