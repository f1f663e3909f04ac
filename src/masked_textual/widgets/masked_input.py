"""Input widget that runs every keystroke through a mask controller."""

from __future__ import annotations

from collections.abc import Callable
from datetime import date

from textual.events import Blur
from textual.message import Message
from textual.widgets import Input

from masked_textual.controller import MaskController
from masked_textual.messages import Resolver, default_resolver
from masked_textual.models import DateFormat, KeyEvent, MaskKind

_PLACEHOLDERS: dict[MaskKind, str] = {
    MaskKind.PHONE_WITH_AREA: "999-999-9999",
    MaskKind.SSN: "999-99-9999",
    MaskKind.IP_ADDRESS: "999.999.999.999",
    MaskKind.DECIMAL: "0.0",
    MaskKind.DIGIT_ONLY: "0",
}


def placeholder_for(mask: MaskKind, date_format: DateFormat) -> str:
    """Return the placeholder hint shown in an empty field."""
    if mask is MaskKind.DATE_ONLY:
        return date_format.placeholder
    return _PLACEHOLDERS.get(mask, "")


class MaskedInput(Input):
    """An Input whose printable keys and backspace go through a MaskController.

    Printable characters are intercepted in ``_on_key`` and backspace in
    ``action_delete_left``; the controller decides the resulting text and
    caret.  Navigation keys keep their default behaviour.  When the field
    loses focus the complete value is validated and any problem is shown as
    an error notification.
    """

    class Validated(Message):
        """Posted after each keystroke and on blur with the current error."""

        def __init__(self, masked_input: MaskedInput, error: str | None) -> None:
            super().__init__()
            self.masked_input = masked_input
            self.error = error

        @property
        def control(self) -> MaskedInput:
            return self.masked_input

    def __init__(
        self,
        mask: MaskKind = MaskKind.NONE,
        *,
        date_format: DateFormat = DateFormat.DDMMYYYY,
        min_year: int | None = None,
        max_year: int | None = None,
        resolve: Resolver = default_resolver,
        clock: Callable[[], date] = date.today,
        **kwargs,
    ) -> None:
        """Initialize the field with its mask settings.

        Args:
            mask: The mask kind for this field.
            date_format: Layout used by the date mask.
            min_year: Lowest accepted year for the date mask.
            max_year: Highest accepted year for the date mask.
            resolve: Turns message keys into display text.
            clock: Source of today's date for the leap-day rule.
            **kwargs: Passed on to :class:`~textual.widgets.Input`.
        """
        kwargs.setdefault("placeholder", placeholder_for(mask, date_format))
        super().__init__(**kwargs)
        self.controller = MaskController(
            mask,
            date_format=date_format,
            min_year=min_year,
            max_year=max_year,
            resolve=resolve,
            clock=clock,
        )

    @property
    def error(self) -> str:
        """The field's current validation message, or an empty string."""
        return self.controller.error

    @property
    def date_format(self) -> DateFormat:
        """Layout used by the date mask."""
        return self.controller.date_format

    @date_format.setter
    def date_format(self, value: DateFormat) -> None:
        # Only a placeholder derived from the layout follows it.
        if self.placeholder == placeholder_for(self.controller.mask, self.controller.date_format):
            self.placeholder = placeholder_for(self.controller.mask, value)
        self.controller.date_format = value

    async def _on_key(self, event) -> None:
        """Route printable characters through the mask; defer everything else."""
        if not event.is_printable:
            await super()._on_key(event)
            return

        event.prevent_default()
        event.stop()
        self._apply(KeyEvent(event.character))

    def action_delete_left(self) -> None:
        """Route backspace through the mask so its counters stay in step."""
        self._apply(KeyEvent.backspace())

    def _apply(self, key: KeyEvent) -> None:
        start, end = sorted(self.selection)
        self.controller.sync(self.value, start, end - start)
        result = self.controller.on_character(key)
        self.value = result.text
        self.cursor_position = result.caret
        self._show_error(result.message)

    def _on_blur(self, event: Blur) -> None:
        """Validate the complete value when the field loses focus."""
        message = self.controller.on_focus_leave(self.value)
        self._show_error(message)
        if message:
            self.notify(message, severity="error", timeout=3)

    def _show_error(self, message: str | None) -> None:
        self.set_class(bool(message), "-invalid")
        self.post_message(self.Validated(self, message))
