"""Validation message keys and their default English text.

The core only ever stores a :class:`Message` (a key plus optional numeric
bounds).  Turning it into text is the job of a resolver function injected
into the controller, so hosts can plug in their own translations.
"""

from __future__ import annotations

from collections.abc import Callable, Mapping
from dataclasses import dataclass
from enum import Enum


class MessageKey(Enum):
    """Keys of the message catalog."""

    ONLYDIGIT = "ONLYDIGIT"
    ONLYDIGITANDDOT = "ONLYDIGITANDDOT"
    ONLYDIGITANDSLASH = "ONLYDIGITANDSLASH"
    ONLYDIGITANDDASH = "ONLYDIGITANDDASH"
    DATEFORMAT = "DATEFORMAT"
    DATEFORMATDDMMYYYY = "DATEFORMATddmmyyyy"
    YEARBETWEEN = "YEARBETWEEN"
    PHONEFORMAT = "PHONEFORMAT"
    SSNFORMAT = "SSNFORMAT"
    IP_FORMAT = "IP_FORMAT"
    NUMBERISSMALLERTHAN = "NUMBERISSMALLERTHAN"
    DAYNOTVALID = "DAYNOTVALID"
    YEARSTART = "YEARSTART"


DEFAULT_MESSAGES: dict[MessageKey, str] = {
    MessageKey.ONLYDIGIT: "Only digits are allowed",
    MessageKey.ONLYDIGITANDDOT: "Only digits and dot are allowed",
    MessageKey.ONLYDIGITANDSLASH: "Only digits and slash are allowed",
    MessageKey.ONLYDIGITANDDASH: "Only digits and dash are allowed",
    MessageKey.DATEFORMAT: "The date format is mm/dd/yyyy",
    MessageKey.DATEFORMATDDMMYYYY: "The date format is dd/mm/yyyy",
    MessageKey.YEARBETWEEN: "The year must be between",
    MessageKey.PHONEFORMAT: "The phone format is 999-999-9999",
    MessageKey.SSNFORMAT: "The SSN format is 999-99-9999",
    MessageKey.IP_FORMAT: "The IP address format is 999.999.999.999",
    MessageKey.NUMBERISSMALLERTHAN: "The number must not be greater than",
    MessageKey.DAYNOTVALID: "This is not a valid day of month",
    MessageKey.YEARSTART: "The year should start with 1 or 2",
}

Resolver = Callable[[MessageKey], str]


@dataclass(frozen=True)
class Message:
    """A validation message waiting to be rendered."""

    key: MessageKey
    bounds: tuple[int, ...] = ()

    def render(self, resolve: Resolver) -> str:
        """Render the message text, interpolating numeric bounds.

        One bound is appended after a space (``"... 31"``), two bounds are
        rendered as a range (``"...: 1980-2050"``).

        Args:
            resolve: Function mapping a key to its localized text.

        Returns:
            The message text.
        """
        text = resolve(self.key)
        if len(self.bounds) == 1:
            return f"{text} {self.bounds[0]}"
        if len(self.bounds) == 2:
            return f"{text}: {self.bounds[0]}-{self.bounds[1]}"
        return text


def default_resolver(key: MessageKey) -> str:
    """Resolve *key* against the built-in English catalog."""
    return DEFAULT_MESSAGES[key]


def catalog_resolver(overrides: Mapping[str, str]) -> Resolver:
    """Build a resolver that prefers *overrides* over the default catalog.

    Args:
        overrides: Mapping of key names (e.g. ``"ONLYDIGIT"``) to text, as
            read from the ``[messages]`` section of the config file.

    Returns:
        A resolver function.  Unknown key names in *overrides* are ignored.
    """
    catalog = dict(DEFAULT_MESSAGES)
    for name, text in overrides.items():
        try:
            catalog[MessageKey(name)] = str(text)
        except ValueError:
            continue
    return catalog.__getitem__
