"""Per-field controller that routes key events to the active mask."""

from __future__ import annotations

from collections.abc import Callable
from datetime import date

from loguru import logger

from masked_textual.buffer import TextBuffer
from masked_textual.masks import MaskMachine, MaskSettings, machine_for
from masked_textual.messages import Resolver, default_resolver
from masked_textual.models import DateFormat, EditResult, EditSession, KeyEvent, MaskKind
from masked_textual.sink import ErrorSink


class MaskController:
    """Holds the mask configuration and edit state of one field.

    The host feeds it the widget state with :meth:`sync`, then one
    :class:`KeyEvent` at a time through :meth:`on_character`, and calls
    :meth:`on_focus_leave` when the field loses focus.  Every call runs to
    completion synchronously.
    """

    def __init__(
        self,
        mask: MaskKind = MaskKind.NONE,
        *,
        date_format: DateFormat = DateFormat.DDMMYYYY,
        min_year: int | None = None,
        max_year: int | None = None,
        resolve: Resolver = default_resolver,
        clock: Callable[[], date] = date.today,
    ) -> None:
        """Initialize the controller.

        Args:
            mask: Initial mask kind.
            date_format: Layout used when the mask is a date.
            min_year: Lowest accepted year; ignored when not representable.
            max_year: Highest accepted year; ignored when not representable.
            resolve: Turns message keys into display text.
            clock: Source of today's date for the February leap-day rule.
        """
        self.settings = MaskSettings(date_format=date_format, clock=clock)
        if min_year is not None:
            self.settings.bounds.set_min(min_year)
        if max_year is not None:
            self.settings.bounds.set_max(max_year)
        self.buffer = TextBuffer()
        self.sink = ErrorSink()
        self._resolve = resolve
        self._mask = MaskKind.NONE
        self._session: EditSession | None = None
        self.set_mask(mask)

    @property
    def mask(self) -> MaskKind:
        return self._mask

    @mask.setter
    def mask(self, kind: MaskKind) -> None:
        self.set_mask(kind)

    @property
    def date_format(self) -> DateFormat:
        return self.settings.date_format

    @date_format.setter
    def date_format(self, value: DateFormat) -> None:
        self.settings.date_format = value

    @property
    def min_year(self) -> int:
        return self.settings.bounds.min_year

    @min_year.setter
    def min_year(self, value: int) -> None:
        self.settings.bounds.set_min(value)

    @property
    def max_year(self) -> int:
        return self.settings.bounds.max_year

    @max_year.setter
    def max_year(self, value: int) -> None:
        self.settings.bounds.set_max(value)

    @property
    def max_length(self) -> int | None:
        return self.buffer.max_length()

    @property
    def session(self) -> EditSession | None:
        """Counters of the current entry, or None for an unmasked field."""
        return self._session

    @property
    def machine(self) -> MaskMachine | None:
        return machine_for(self._mask, self.settings.date_format)

    @property
    def text(self) -> str:
        return self.buffer.current_text()

    @property
    def error(self) -> str:
        """The current validation message, or an empty string."""
        message = self.sink.message
        if message is None:
            return ""
        return message.render(self._resolve)

    def set_mask(self, kind: MaskKind) -> None:
        """Switch to *kind*, clearing the text and starting a new session."""
        self._mask = kind
        self.buffer.clear()
        self.buffer.set_max_length(kind.max_length)
        self.sink.clear()
        self._session = None if kind is MaskKind.NONE else EditSession()
        logger.debug("Mask set to {} (max length {})", kind.name, kind.max_length)

    def sync(self, text: str, selection_start: int, selection_length: int = 0) -> None:
        """Adopt the text and selection currently shown by the host widget."""
        self.buffer.sync(text, selection_start, selection_length)
        self._resync()

    def on_character(self, event: KeyEvent) -> EditResult:
        """Handle one key event.

        Returns:
            The ``handled`` flag plus the resulting text, caret and message.
            When the machine does not handle the key it is applied the way a
            plain text box would, so the result always holds the final text.
        """
        machine = self.machine
        handled = False
        if machine is not None and self._session is not None:
            handled = machine.on_character(
                event, self.buffer, self._session, self.settings, self.sink
            )

        if not handled:
            if event.is_backspace:
                self.buffer.delete_backward()
            else:
                self.buffer.insert_default(event.char)
        self._resync()

        message = self.error or None
        logger.debug(
            "{} key {!r}: handled={} text={!r} message={!r}",
            self._mask.name,
            "<backspace>" if event.is_backspace else event.char,
            handled,
            self.buffer.current_text(),
            message,
        )
        return EditResult(
            handled=handled,
            text=self.buffer.current_text(),
            caret=self.buffer.caret,
            message=message,
        )

    def on_focus_leave(self, text: str | None = None) -> str | None:
        """Validate the complete value once the field loses focus.

        Args:
            text: Final text reported by the host; defaults to the buffer.

        Returns:
            The current validation message, or None when there is none.
        """
        if text is not None:
            self.sync(text, len(text))

        machine = self.machine
        if machine is not None and machine.checks_on_leave:
            message = machine.on_focus_leave(self.buffer.current_text(), self.settings)
            self.sink.put(message)
            if message is not None:
                logger.info(
                    "{} value {!r} failed on leave: {}",
                    self._mask.name,
                    self.buffer.current_text(),
                    message.key.value,
                )
        return self.error or None

    def _resync(self) -> None:
        machine = self.machine
        if machine is not None and self._session is not None:
            machine.resync(self.buffer, self._session)
