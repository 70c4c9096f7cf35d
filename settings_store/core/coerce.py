"""
Read-side coercion for the string-only local store.
Stored values that are all ASCII digits come back as int; everything else stays a string.
Existing stored data depends on this exact rule.
"""

from __future__ import annotations

import re
from typing import Union

# ASCII only: str.isdigit() and \d would also accept non-ASCII digits.
_DIGITS = re.compile(r"[0-9]+")


def parse_digits(raw: str) -> Union[str, int]:
    """Return int(raw) if raw is one or more ASCII digits, else raw unchanged ("007" -> 7, "-1" -> "-1")."""
    if _DIGITS.fullmatch(raw):
        try:
            return int(raw, 10)
        except ValueError:
            # beyond the interpreter's int string conversion limit
            return raw
    return raw
