"""Dash-separated digit groups: phone numbers and SSNs."""

from __future__ import annotations

from masked_textual.buffer import TextBuffer
from masked_textual.leave import check_phone, check_ssn
from masked_textual.masks.base import MaskMachine, MaskSettings
from masked_textual.messages import Message, MessageKey
from masked_textual.models import EditSession, KeyEvent, MaskKind
from masked_textual.sink import ErrorSink


class GroupedDigitsMachine(MaskMachine):
    """Digits split into fixed-size groups joined by ``-``.

    The digit completing a group is written together with the dash, so the
    user only ever types digits.  A digit typed into an already complete
    group (after backspacing over a dash) gets the dash in front of it.
    """

    delimiter = "-"
    checks_on_leave = True

    def __init__(self, kind: MaskKind, group_sizes: tuple[int, ...]) -> None:
        """Initialize the machine.

        Args:
            kind: The mask this machine serves.
            group_sizes: Digits per group, e.g. ``(3, 3, 4)`` for a phone.
        """
        self.kind = kind
        self.group_sizes = group_sizes

    @property
    def max_delimiters(self) -> int:
        return len(self.group_sizes) - 1

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
            return self.reject(sink, MessageKey.ONLYDIGITANDDASH)

        sink.clear()
        self.start_fresh(buffer, session)
        if buffer.is_full():
            return True
        if not buffer.at_end():
            return False

        digits = session.digits_since_delimiter
        delimiters = session.delimiters_inserted

        if event.char == self.delimiter:
            # Only close a non-empty group, and never past the last one.
            return digits == 0 or delimiters >= self.max_delimiters

        if delimiters < self.max_delimiters:
            target = self.group_sizes[delimiters]
            if digits >= target:
                if self.fits(buffer, 2):
                    buffer.append(self.delimiter + event.char)
                return True
            if digits + 1 == target and self.fits(buffer, 2):
                buffer.append(event.char + self.delimiter)
                return True
            return False

        return digits >= self.group_sizes[-1]

    def on_focus_leave(self, text: str, settings: MaskSettings) -> Message | None:
        if self.kind is MaskKind.SSN:
            return check_ssn(text)
        return check_phone(text)


class PhoneMachine(GroupedDigitsMachine):
    """``999-999-9999``."""

    def __init__(self) -> None:
        super().__init__(MaskKind.PHONE_WITH_AREA, (3, 3, 4))


class SsnMachine(GroupedDigitsMachine):
    """``999-99-9999``."""

    def __init__(self) -> None:
        super().__init__(MaskKind.SSN, (3, 2, 4))
