"""Exceptions raised while reading the configuration.

Validation problems in typed text are never raised; they are reported as
messages through the field's error sink.
"""


class ConfigError(Exception):
    """Raised when a configuration value cannot be used."""


class UnknownMaskError(ConfigError):
    """Raised when a mask name does not match any mask kind."""

    def __init__(self, name: str) -> None:
        super().__init__(f"unknown mask: {name!r}")
        self.name = name


class UnknownDateFormatError(ConfigError):
    """Raised when a date format name is neither ddmmyyyy nor mmddyyyy."""

    def __init__(self, name: str) -> None:
        super().__init__(f"unknown date format: {name!r}")
        self.name = name
