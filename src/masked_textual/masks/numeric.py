"""Character filters for the digit-only and decimal masks."""

from __future__ import annotations

from masked_textual.buffer import TextBuffer
from masked_textual.masks.base import MaskMachine, MaskSettings
from masked_textual.messages import MessageKey
from masked_textual.models import EditSession, KeyEvent, MaskKind
from masked_textual.sink import ErrorSink


class DigitOnlyMachine(MaskMachine):
    """Accept digits only."""

    kind = MaskKind.DIGIT_ONLY

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
        if event.is_digit:
            sink.clear()
            return False
        return self.reject(sink, MessageKey.ONLYDIGIT)


class DecimalMachine(MaskMachine):
    """Accept digits and dots; the shape of the number is not checked."""

    kind = MaskKind.DECIMAL

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
        if event.is_digit or event.char == ".":
            sink.clear()
            return False
        return self.reject(sink, MessageKey.ONLYDIGITANDDOT)
