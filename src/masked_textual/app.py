"""Demo Textual application with one masked field per mask kind."""

from __future__ import annotations

from textual.app import App, ComposeResult
from textual.binding import Binding
from textual.containers import Horizontal, Vertical
from textual.widgets import Label, Static

from masked_textual.config import Settings
from masked_textual.messages import catalog_resolver
from masked_textual.models import MaskKind
from masked_textual.widgets.masked_input import MaskedInput

_LABELS: dict[MaskKind, str] = {
    MaskKind.DATE_ONLY: "Date:",
    MaskKind.PHONE_WITH_AREA: "Phone:",
    MaskKind.SSN: "SSN:",
    MaskKind.IP_ADDRESS: "IP address:",
    MaskKind.DECIMAL: "Decimal:",
    MaskKind.DIGIT_ONLY: "Digits:",
    MaskKind.NONE: "Text:",
}


class MaskedTextualApp(App):
    """A form for trying out the input masks."""

    TITLE = "masked-textual"

    CSS = """
    #form {
        padding: 1 2;
        height: auto;
    }
    .form-field {
        height: 3;
    }
    .form-field Label {
        width: 14;
        padding: 1 0;
    }
    MaskedInput {
        width: 30;
    }
    #error-bar {
        padding: 0 2;
        color: $error;
    }
    """

    BINDINGS = [
        Binding("escape", "quit", "Quit"),
    ]

    def __init__(self, settings: Settings | None = None) -> None:
        """Initialize the app.

        Args:
            settings: Resolved settings; defaults are used when omitted.
        """
        super().__init__()
        self.settings = settings or Settings()

    @property
    def masks(self) -> list[MaskKind]:
        """The mask kinds shown, one field each."""
        if self.settings.mask is not None:
            return [self.settings.mask]
        return [kind for kind in MaskKind if kind is not MaskKind.NONE]

    def compose(self) -> ComposeResult:
        """Create one labelled field per mask and the error bar."""
        resolve = catalog_resolver(self.settings.messages)
        with Vertical(id="form"):
            for kind in self.masks:
                with Horizontal(classes="form-field"):
                    yield Label(_LABELS[kind])
                    yield MaskedInput(
                        kind,
                        date_format=self.settings.date_format,
                        min_year=self.settings.min_year,
                        max_year=self.settings.max_year,
                        resolve=resolve,
                        id=f"field-{kind.value}",
                    )
        yield Static("", id="error-bar")

    def on_masked_input_validated(self, event: MaskedInput.Validated) -> None:
        """Show the latest validation message under the form."""
        self.query_one("#error-bar", Static).update(event.error or "")
