"""Checks run once when a masked field loses focus.

The keystroke machines only catch local mistakes (a day above 31, an octet
above 255).  These functions look at the complete value and report shape
errors that can only be seen once typing is over.  Each returns the message
to show, or None when the value is acceptable.
"""

from __future__ import annotations

import re
from datetime import date

from masked_textual.messages import Message, MessageKey
from masked_textual.models import DateFormat, YearBounds

_DATE_RE = re.compile(r"\d{2}/\d{2}/\d{4}")
_PHONE_RE = re.compile(r"\d{3}-\d{3}-\d{4}")
_SSN_RE = re.compile(r"\d{3}-\d{2}-\d{4}")


def date_format_message(date_format: DateFormat) -> Message:
    """Return the 'wrong date format' message for the active layout."""
    if date_format is DateFormat.DDMMYYYY:
        return Message(MessageKey.DATEFORMATDDMMYYYY)
    return Message(MessageKey.DATEFORMAT)


def parse_date(text: str, date_format: DateFormat) -> date | None:
    """Parse slash-separated *text* in the given layout.

    Single-digit day and month parts are accepted; the year needs all four
    digits.

    Returns:
        The parsed date, or None if *text* is not a valid date.
    """
    parts = text.split("/")
    if len(parts) != 3 or not all(p.isdigit() and p.isascii() for p in parts):
        return None
    if len(parts[2]) != 4:
        return None
    first, second, year = (int(p) for p in parts)
    day, month = (first, second) if date_format is DateFormat.DDMMYYYY else (second, first)
    try:
        return date(year, month, day)
    except ValueError:
        return None


def check_date(text: str, date_format: DateFormat, bounds: YearBounds) -> Message | None:
    """Validate a finished date entry.

    The shape check runs first; the calendar parse and year-range check run
    afterwards and overwrite its message when they fail.
    """
    if not text:
        return None

    message = None
    if not _DATE_RE.fullmatch(text):
        message = date_format_message(date_format)

    parsed = parse_date(text, date_format)
    if parsed is None:
        message = date_format_message(date_format)
    elif not bounds.contains(parsed.year):
        message = Message(MessageKey.YEARBETWEEN, (bounds.min_year, bounds.max_year))
    return message


def check_phone(text: str) -> Message | None:
    """Require the ``999-999-9999`` layout."""
    if _PHONE_RE.fullmatch(text):
        return None
    return Message(MessageKey.PHONEFORMAT)


def check_ssn(text: str) -> Message | None:
    """Require the ``999-99-9999`` layout."""
    if _SSN_RE.fullmatch(text):
        return None
    return Message(MessageKey.SSNFORMAT)


def check_ip(text: str) -> Message | None:
    """Require exactly three dots, none adjacent, and no trailing dot.

    The number of digits per octet is not checked here; the keystroke
    machine already keeps each octet at or below 255.
    """
    if text.count(".") != 3 or ".." in text or text.endswith("."):
        return Message(MessageKey.IP_FORMAT)
    return None
