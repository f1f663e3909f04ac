"""Shared interface of the per-mask state machines."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, field
from datetime import date

from masked_textual.buffer import TextBuffer, rescan
from masked_textual.messages import Message, MessageKey
from masked_textual.models import DateFormat, EditSession, KeyEvent, MaskKind, YearBounds
from masked_textual.sink import ErrorSink


@dataclass
class MaskSettings:
    """Field-wide settings the machines read while handling a key."""

    date_format: DateFormat = DateFormat.DDMMYYYY
    bounds: YearBounds = field(default_factory=YearBounds)
    clock: Callable[[], date] = date.today

    @property
    def current_year(self) -> int:
        """The calendar year used for the February leap-day rule."""
        return self.clock().year


def parse_number(text: str) -> int | None:
    """Return *text* as an int, or None if it is not made of ASCII digits only."""
    if text and text.isdigit() and text.isascii():
        return int(text)
    return None


class MaskMachine:
    """One state machine per mask kind.

    ``on_character`` returns ``handled``: True means the machine already
    updated the buffer (or rejected the key), False means the key should be
    applied as a plain text box would.  ``resync`` recomputes the session
    counters from the buffer and is called after every event.
    """

    kind: MaskKind = MaskKind.NONE
    delimiter: str = ""
    checks_on_leave: bool = False

    @property
    def max_delimiters(self) -> int:
        return self.kind.max_delimiters

    def on_character(
        self,
        event: KeyEvent,
        buffer: TextBuffer,
        session: EditSession,
        settings: MaskSettings,
        sink: ErrorSink,
    ) -> bool:
        raise NotImplementedError

    def on_focus_leave(self, text: str, settings: MaskSettings) -> Message | None:
        return None

    def resync(self, buffer: TextBuffer, session: EditSession) -> None:
        """Recount digits and separators left of the caret."""
        if not self.delimiter:
            session.reset()
            return
        digits, delimiters = rescan(buffer.current_text(), buffer.caret, self.delimiter)
        session.digits_since_delimiter = digits
        session.delimiters_inserted = min(delimiters, self.max_delimiters)

    def start_fresh(self, buffer: TextBuffer, session: EditSession) -> None:
        """Treat select-all-then-type as a new entry."""
        if buffer.is_select_all():
            buffer.clear()
            session.reset()

    def reject(self, sink: ErrorSink, key: MessageKey, *bounds: int) -> bool:
        """Report *key* and swallow the keystroke."""
        sink.set(key, *bounds)
        return True

    @staticmethod
    def fits(buffer: TextBuffer, extra: int) -> bool:
        """Whether *extra* more characters fit under the maximum length."""
        max_length = buffer.max_length()
        return max_length is None or buffer.text_length() + extra <= max_length

    @staticmethod
    def commit(buffer: TextBuffer, new_text: str, char: str) -> bool:
        """Apply *new_text*, or defer to the default insertion when it is a plain append.

        Returns:
            The ``handled`` flag for the keystroke.
        """
        if new_text == buffer.current_text() + char:
            return False
        max_length = buffer.max_length()
        if max_length is None or len(new_text) <= max_length:
            buffer.set_text(new_text)
        return True
