"""Dotted IPv4 address mask."""

from __future__ import annotations

from masked_textual.buffer import TextBuffer, simulate_edit
from masked_textual.leave import check_ip
from masked_textual.masks.base import MaskMachine, MaskSettings, parse_number
from masked_textual.messages import Message, MessageKey
from masked_textual.models import EditSession, KeyEvent, MaskKind
from masked_textual.sink import ErrorSink

_OCTET_MAX = 255
_OCTET_DIGITS = 3


class IpAddressMachine(MaskMachine):
    """Four dot-separated octets, each at most 255.

    The third digit of an octet is written together with the following dot.
    A dot may only close a non-empty octet, so two dots never touch.
    """

    kind = MaskKind.IP_ADDRESS
    delimiter = "."
    checks_on_leave = True

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
            return self.reject(sink, MessageKey.ONLYDIGITANDDOT)

        sink.clear()
        self.start_fresh(buffer, session)
        if buffer.is_full():
            return True
        if not buffer.at_end():
            return self._insert_inside(event, buffer, sink)

        digits = session.digits_since_delimiter
        dots = session.delimiters_inserted

        if event.char == self.delimiter:
            return digits == 0 or dots >= self.max_delimiters

        if digits >= _OCTET_DIGITS:
            # Octet already complete: start the next one, if there is one.
            if dots < self.max_delimiters and self.fits(buffer, 2):
                buffer.append(self.delimiter + event.char)
            return True

        text = buffer.current_text()
        octet = parse_number(text[len(text) - digits :] + event.char)
        if octet is None:
            return True
        if octet > _OCTET_MAX:
            return self.reject(sink, MessageKey.NUMBERISSMALLERTHAN, _OCTET_MAX)

        if digits + 1 == _OCTET_DIGITS and dots < self.max_delimiters:
            buffer.append(event.char + self.delimiter)
            return True
        return False

    def _insert_inside(self, event: KeyEvent, buffer: TextBuffer, sink: ErrorSink) -> bool:
        """Check an edit made away from the end of the text."""
        candidate = simulate_edit(
            buffer.current_text(),
            buffer.selection_start(),
            buffer.selection_length(),
            event.char,
        )
        if (
            candidate.startswith(self.delimiter)
            or ".." in candidate
            or candidate.count(self.delimiter) > self.max_delimiters
        ):
            return True
        for octet in candidate.split(self.delimiter):
            if len(octet) > _OCTET_DIGITS:
                return True
            value = parse_number(octet)
            if value is not None and value > _OCTET_MAX:
                return self.reject(sink, MessageKey.NUMBERISSMALLERTHAN, _OCTET_MAX)
        return False

    def on_focus_leave(self, text: str, settings: MaskSettings) -> Message | None:
        return check_ip(text)
