"""Data models for masks, edit sessions, and key events."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

# Representable calendar year range for the year bounds.
MIN_CALENDAR_YEAR = 1
MAX_CALENDAR_YEAR = 9999


class MaskKind(Enum):
    """The closed set of masks a field can carry."""

    NONE = "none"
    DATE_ONLY = "date"
    PHONE_WITH_AREA = "phone"
    IP_ADDRESS = "ip"
    SSN = "ssn"
    DECIMAL = "decimal"
    DIGIT_ONLY = "digit"

    @property
    def max_length(self) -> int | None:
        """Return the maximum text length for this mask, or None if unbounded."""
        match self:
            case MaskKind.DATE_ONLY:
                return 10
            case MaskKind.IP_ADDRESS:
                return 15
            case MaskKind.PHONE_WITH_AREA:
                return 12
            case MaskKind.SSN:
                return 11
            case _:
                return None

    @property
    def max_delimiters(self) -> int:
        """Return how many separators a complete value contains."""
        match self:
            case MaskKind.IP_ADDRESS:
                return 3
            case MaskKind.DATE_ONLY | MaskKind.PHONE_WITH_AREA | MaskKind.SSN:
                return 2
            case _:
                return 0


class DateFormat(Enum):
    """Short date layouts supported by the date mask."""

    DDMMYYYY = "ddmmyyyy"
    MMDDYYYY = "mmddyyyy"

    @property
    def placeholder(self) -> str:
        """Return the human-readable layout (e.g. 'dd/mm/yyyy')."""
        match self:
            case DateFormat.DDMMYYYY:
                return "dd/mm/yyyy"
            case DateFormat.MMDDYYYY:
                return "mm/dd/yyyy"


@dataclass
class YearBounds:
    """Inclusive range of years accepted by the date mask.

    Values outside the representable calendar range are ignored by the
    setters rather than raising, so a bad configuration leaves the previous
    bound in place.
    """

    min_year: int = 1900
    max_year: int = 2100

    def set_min(self, value: int) -> None:
        """Set the lower bound when it is a representable year."""
        if MIN_CALENDAR_YEAR <= value <= MAX_CALENDAR_YEAR:
            self.min_year = value

    def set_max(self, value: int) -> None:
        """Set the upper bound when it is a representable year."""
        if MIN_CALENDAR_YEAR <= value <= MAX_CALENDAR_YEAR:
            self.max_year = value

    def contains(self, year: int) -> bool:
        """Return True if *year* lies within the bounds."""
        return self.min_year <= year <= self.max_year


@dataclass
class EditSession:
    """Per-field counters carried across keystrokes."""

    digits_since_delimiter: int = 0
    delimiters_inserted: int = 0

    def reset(self) -> None:
        """Start a fresh entry."""
        self.digits_since_delimiter = 0
        self.delimiters_inserted = 0


@dataclass(frozen=True)
class KeyEvent:
    """A single character event coming from the host widget."""

    char: str = ""
    is_backspace: bool = False

    @classmethod
    def backspace(cls) -> KeyEvent:
        """Build a backspace event."""
        return cls(char="", is_backspace=True)

    @property
    def is_digit(self) -> bool:
        """Whether the event carries a single ASCII digit."""
        return len(self.char) == 1 and self.char in "0123456789"


@dataclass(frozen=True)
class EditResult:
    """Outcome of one key event, returned to the host."""

    handled: bool
    text: str
    caret: int
    message: str | None = None
