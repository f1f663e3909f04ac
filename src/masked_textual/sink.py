"""Last-write-wins slot holding a field's current validation message."""

from __future__ import annotations

from masked_textual.messages import Message, MessageKey


class ErrorSink:
    """Receives validation messages for one field."""

    def __init__(self) -> None:
        self._message: Message | None = None

    @property
    def message(self) -> Message | None:
        """The most recently set message, or None when cleared."""
        return self._message

    def set(self, key: MessageKey, *bounds: int) -> None:
        """Replace the current message."""
        self._message = Message(key, tuple(bounds))

    def put(self, message: Message | None) -> None:
        """Store an already-built message, clearing the slot for None."""
        self._message = message

    def clear(self) -> None:
        self._message = None
