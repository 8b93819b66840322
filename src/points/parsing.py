"""Strict field parsers used by the scoring rules.

Each parser raises ``FieldParseError`` on malformed input; the engine turns
that into a zero contribution for the rule concerned.
"""

import re
from fractions import Fraction
from typing import Tuple

AMOUNT_PATTERN = re.compile(r'[+-]?(?:[0-9]+(?:\.[0-9]*)?|\.[0-9]+)')
DATE_PATTERN = re.compile(r'[0-9]{4}-[0-9]{2}-[0-9]{2}')
TIME_PATTERN = re.compile(r'[0-9]{2}:[0-9]{2}')


class FieldParseError(ValueError):
    def __init__(self, field: str, value: str):
        super().__init__(f"could not parse {field} {value!r}")
        self.field = field
        self.value = value


def parse_amount(value: str, field: str = "amount") -> Fraction:
    """Parse a plain decimal string such as ``"35.35"`` exactly."""
    if not AMOUNT_PATTERN.fullmatch(value):
        raise FieldParseError(field, value)
    try:
        return Fraction(value)
    except ValueError:
        # digit strings beyond the interpreter's int conversion limit
        raise FieldParseError(field, value)


def parse_day(purchase_date: str) -> int:
    """Day of month from a ``YYYY-MM-DD`` string (characters 9-10)."""
    if not DATE_PATTERN.fullmatch(purchase_date):
        raise FieldParseError("purchase date", purchase_date)
    day = int(purchase_date[8:])
    if not 1 <= day <= 31:
        raise FieldParseError("purchase date", purchase_date)
    return day


def parse_hour_minute(purchase_time: str) -> Tuple[int, int]:
    """Hour and minute from a 24h ``HH:MM`` string."""
    if not TIME_PATTERN.fullmatch(purchase_time):
        raise FieldParseError("purchase time", purchase_time)
    hour = int(purchase_time[:2])
    minute = int(purchase_time[3:])
    if hour > 23 or minute > 59:
        raise FieldParseError("purchase time", purchase_time)
    return hour, minute
