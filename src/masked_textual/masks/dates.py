"""Slash-separated date masks (dd/mm/yyyy and mm/dd/yyyy)."""

from __future__ import annotations

import re

from masked_textual.buffer import TextBuffer, simulate_edit
from masked_textual.calendar_rules import is_valid_day
from masked_textual.leave import check_date, date_format_message
from masked_textual.masks.base import MaskMachine, MaskSettings, parse_number
from masked_textual.messages import Message, MessageKey
from masked_textual.models import DateFormat, EditSession, KeyEvent, MaskKind
from masked_textual.sink import ErrorSink

_DAY_AND_FIRST_MONTH_DIGIT_RE = re.compile(r"\d{2}/\d")


class DateMachine(MaskMachine):
    """Common parts of both date layouts."""

    kind = MaskKind.DATE_ONLY
    delimiter = "/"
    checks_on_leave = True
    date_format = DateFormat.DDMMYYYY

    def on_focus_leave(self, text: str, settings: MaskSettings) -> Message | None:
        return check_date(text, self.date_format, settings.bounds)


class DayFirstDateMachine(DateMachine):
    """``dd/mm/yyyy``.

    Each keystroke is applied to a copy of the text first.  The copy is
    checked according to its new length and only committed when it passes,
    so a rejected digit never reaches the buffer.
    """

    date_format = DateFormat.DDMMYYYY

    def on_character(
        self,
        event: KeyEvent,
        buffer: TextBuffer,
        session: EditSession,
        settings: MaskSettings,
        sink: ErrorSink,
    ) -> bool:
        if event.is_backspace:
            return False
        if not (event.is_digit or event.char == self.delimiter):
            return self.reject(sink, MessageKey.ONLYDIGITANDSLASH)

        sink.clear()
        self.start_fresh(buffer, session)
        if buffer.is_full():
            return True

        candidate = simulate_edit(
            buffer.current_text(),
            buffer.selection_start(),
            buffer.selection_length(),
            event.char,
        )
        if event.char == self.delimiter:
            candidate, message = self._typed_slash(candidate)
        else:
            candidate, message = self._typed_digit(candidate, settings)

        if message is None and len(candidate) == 6:
            message = self._check_day_of_month(candidate, settings)

        if message is None:
            buffer.set_text(candidate)
        else:
            sink.put(message)
        return True

    def _typed_slash(self, candidate: str) -> tuple[str, Message | None]:
        """Handle a slash typed by the user, zero-padding a one-digit group."""
        length = len(candidate)
        if length in (1, 4, 7) or length >= 8:
            return candidate, Message(MessageKey.ONLYDIGIT)
        if length in (2, 5):
            candidate = candidate[: length - 2] + "0" + candidate[length - 2 :]
            slash = candidate.rfind(self.delimiter)
            if not parse_number(candidate[max(slash - 2, 0) : slash]):
                return candidate, Message(MessageKey.DAYNOTVALID)
        return candidate, None

    def _typed_digit(self, candidate: str, settings: MaskSettings) -> tuple[str, Message | None]:
        """Check a digit according to the length it brings the text to."""
        match len(candidate):
            case 2:
                day = parse_number(candidate)
                if day is None:
                    return candidate, date_format_message(self.date_format)
                if day > 31:
                    return candidate, Message(MessageKey.NUMBERISSMALLERTHAN, (31,))
                return candidate + self.delimiter, None
            case 3 | 6:
                return candidate[:-1] + self.delimiter + candidate[-1], None
            case 4:
                if not _DAY_AND_FIRST_MONTH_DIGIT_RE.fullmatch(candidate):
                    return candidate, date_format_message(self.date_format)
            case 5:
                month = parse_number(candidate[3:5])
                if month is None:
                    return candidate, date_format_message(self.date_format)
                if month > 12:
                    return candidate, Message(MessageKey.NUMBERISSMALLERTHAN, (12,))
                return candidate + self.delimiter, None
            case 10:
                year = parse_number(candidate[6:10])
                if year is None:
                    return candidate, date_format_message(self.date_format)
                bounds = settings.bounds
                if not bounds.contains(year):
                    return candidate, Message(
                        MessageKey.YEARBETWEEN, (bounds.min_year, bounds.max_year)
                    )
        return candidate, None

    def _check_day_of_month(self, candidate: str, settings: MaskSettings) -> Message | None:
        """Cross-check ``dd/mm`` once both parts are known."""
        day = parse_number(candidate[0:2])
        month = parse_number(candidate[3:5])
        if day is None or month is None:
            return date_format_message(self.date_format)
        if not is_valid_day(month, day, settings.current_year):
            return Message(MessageKey.DAYNOTVALID)
        return None


class MonthFirstDateMachine(DateMachine):
    """``mm/dd/yyyy``.

    Digits are consumed group by group using the session counters.  A first
    month digit of 2-9 can only mean ``02``-``09``, so the month is closed
    right away; the same holds for a first day digit of 4-9.  A two-digit
    month above 12 is read as month ``01`` followed by the start of the day.
    """

    date_format = DateFormat.MMDDYYYY

    def on_character(
        self,
        event: KeyEvent,
        buffer: TextBuffer,
        session: EditSession,
        settings: MaskSettings,
        sink: ErrorSink,
    ) -> bool:
        if event.is_backspace:
            return False
        if not (event.is_digit or event.char == self.delimiter):
            return self.reject(sink, MessageKey.ONLYDIGITANDSLASH)

        sink.clear()
        self.start_fresh(buffer, session)
        if buffer.is_full():
            return True
        if not buffer.at_end():
            return False

        if event.char == self.delimiter:
            return self._typed_slash(buffer, session, settings, sink)
        return self._typed_digit(event.char, buffer, session, settings, sink)

    def _typed_digit(
        self,
        char: str,
        buffer: TextBuffer,
        session: EditSession,
        settings: MaskSettings,
        sink: ErrorSink,
    ) -> bool:
        text = buffer.current_text()
        digits = session.digits_since_delimiter
        slashes = session.delimiters_inserted

        # A full month or day group left open (after a backspace) is closed first.
        if slashes < self.max_delimiters and digits >= 2:
            text += self.delimiter
            digits = 0
            slashes += 1

        if slashes == 0:
            new_text = self._month_digit(text, digits, char)
            if new_text is None:
                return self.reject(sink, MessageKey.DATEFORMAT)
        elif slashes == 1:
            new_text = self._day_digit(text, digits, char, settings)
            if new_text is None:
                return self.reject(sink, MessageKey.DAYNOTVALID)
        else:
            if digits >= 4:
                return True
            if digits == 0 and char not in "12":
                # Advisory only: the digit is still accepted.
                sink.set(MessageKey.YEARSTART)
            new_text = text + char

        return self.commit(buffer, new_text, char)

    def _month_digit(self, text: str, digits: int, char: str) -> str | None:
        if digits == 0:
            if int(char) > 1:
                return f"{text}0{char}/"
            return text + char

        first = text[-1]
        month = parse_number(first + char)
        if month is None or month == 0:
            return None
        head = text[:-1]
        if month <= 12:
            return f"{text}{char}/"
        if month == 13:
            return f"{head}0{first}/{char}"
        return f"{head}0{first}/0{char}/"

    def _day_digit(self, text: str, digits: int, char: str, settings: MaskSettings) -> str | None:
        if digits == 0:
            if int(char) > 3:
                return f"{text}0{char}/"
            return text + char

        month = parse_number(text[: text.find(self.delimiter)])
        day = parse_number(text[-1] + char)
        if month is None or day is None:
            return None
        if not is_valid_day(month, day, settings.current_year):
            return None
        return f"{text}{char}/"

    def _typed_slash(
        self,
        buffer: TextBuffer,
        session: EditSession,
        settings: MaskSettings,
        sink: ErrorSink,
    ) -> bool:
        """Close the current group by hand, zero-padding a single digit."""
        digits = session.digits_since_delimiter
        slashes = session.delimiters_inserted
        if slashes >= self.max_delimiters:
            return self.reject(sink, MessageKey.ONLYDIGIT)
        if digits == 2:
            return False
        if digits != 1:
            return True

        text = buffer.current_text()
        value = parse_number(text[-1])
        if value is None:
            return True
        if slashes == 0 and value == 0:
            return self.reject(sink, MessageKey.DATEFORMAT)
        if slashes == 1:
            month = parse_number(text[: text.find(self.delimiter)])
            if month is None or not is_valid_day(month, value, settings.current_year):
                return self.reject(sink, MessageKey.DAYNOTVALID)
        buffer.set_text(f"{text[:-1]}0{text[-1]}/")
        return True
