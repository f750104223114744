"""Date helpers for application entries."""

import re
from datetime import date
from typing import Optional

MIN_YEAR = 1900
MAX_YEAR = 2100

# Leading whitespace, optional sign, then digits; anything after is ignored
_LEADING_INT = re.compile(r"\s*([+-]?[0-9]+)")


def leading_int(text: str) -> Optional[int]:
    """Parse the integer at the start of text, or None if there is none.

    "1a" gives 1 and " 7" gives 7, while "a1" gives None.
    """
    match = _LEADING_INT.match(text)
    if match is None:
        return None
    return int(match.group(1))


def is_valid_date(value: str) -> bool:
    """Check that a date string looks like YYYY-MM-DD.

    An empty string is valid and means "use today". Only ranges are checked,
    so day 31 is accepted for every month. Each part only needs to start
    with a number, so "2024-1a-15" passes as month 1.
    """
    if not value:
        return True

    if len(value) != 10 or value[4] != "-" or value[7] != "-":
        return False

    year = leading_int(value[0:4])
    month = leading_int(value[5:7])
    day = leading_int(value[8:10])
    if year is None or month is None or day is None:
        return False

    if year < MIN_YEAR or year > MAX_YEAR:
        return False
    if month < 1 or month > 12:
        return False
    if day < 1 or day > 31:
        return False

    return True


def today() -> str:
    """Get today's local date in YYYY-MM-DD format."""
    return date.today().strftime("%Y-%m-%d")
