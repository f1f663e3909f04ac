"""Configuration resolution for masked-textual.

Priority order (highest to lowest):
1. Command-line arguments
2. config.toml (``MASKED_TEXTUAL_CONFIG`` or ~/.config/masked-textual/config.toml)
3. Built-in defaults
"""

from __future__ import annotations

import argparse
import os
import sys
from dataclasses import dataclass, field
from pathlib import Path

from loguru import logger

from masked_textual.errors import ConfigError, UnknownDateFormatError, UnknownMaskError
from masked_textual.models import DateFormat, MaskKind

if sys.version_info >= (3, 11):
    import tomllib
else:
    import tomli as tomllib

_DEFAULT_CONFIG_PATH = Path.home() / ".config" / "masked-textual" / "config.toml"


@dataclass
class Settings:
    """Resolved settings for the demo application."""

    mask: MaskKind | None = None
    date_format: DateFormat = DateFormat.DDMMYYYY
    min_year: int | None = None
    max_year: int | None = None
    messages: dict[str, str] = field(default_factory=dict)
    log_level: str = "WARNING"
    log_file: Path | None = None


def config_path() -> Path:
    """Return the config file location, honouring ``MASKED_TEXTUAL_CONFIG``."""
    env_path = os.environ.get("MASKED_TEXTUAL_CONFIG")
    if env_path:
        return Path(env_path).expanduser()
    return _DEFAULT_CONFIG_PATH


def _load_config_dict() -> dict:
    """Load the full config.toml as a dict, or return empty dict on failure."""
    path = config_path()
    if not path.exists():
        return {}
    try:
        with open(path, "rb") as f:
            return tomllib.load(f)
    except (OSError, UnicodeDecodeError, tomllib.TOMLDecodeError):
        return {}


def parse_mask(name: str) -> MaskKind:
    """Map a mask name such as ``"phone"`` or ``"PHONE_WITH_AREA"`` to its kind.

    Raises:
        UnknownMaskError: If the name matches no mask kind.
    """
    key = name.strip()
    try:
        return MaskKind(key.lower())
    except ValueError:
        pass
    try:
        return MaskKind[key.upper()]
    except KeyError:
        raise UnknownMaskError(name) from None


def parse_date_format(name: str) -> DateFormat:
    """Map ``"ddmmyyyy"``, ``"dd/mm/yyyy"`` and the like to a date format.

    Raises:
        UnknownDateFormatError: If the name matches neither layout.
    """
    key = name.strip().lower().replace("/", "")
    try:
        return DateFormat(key)
    except ValueError:
        raise UnknownDateFormatError(name) from None


def _parse_year(value: object, option: str) -> int:
    try:
        return int(str(value))
    except ValueError:
        raise ConfigError(f"{option} must be a year, got {value!r}") from None


def _parse_log_level(value: object) -> str:
    level = str(value).upper()
    try:
        logger.level(level)
    except ValueError:
        raise ConfigError(f"unknown log level: {value!r}") from None
    return level


def load_message_overrides() -> dict[str, str]:
    """Load message texts from the ``[messages]`` section of config.toml.

    Example config.toml::

        [messages]
        ONLYDIGIT = "Digits only"

    Returns:
        A dict mapping message keys to replacement text.
    """
    messages = _load_config_dict().get("messages", {})
    if not isinstance(messages, dict):
        return {}
    return {str(k): str(v) for k, v in messages.items()}


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse command-line arguments.

    Args:
        argv: Arguments to parse. Defaults to sys.argv[1:].

    Returns:
        Parsed namespace.
    """
    parser = argparse.ArgumentParser(
        prog="masked-textual",
        description="Try the keystroke input masks in a terminal form.",
    )
    parser.add_argument(
        "-m",
        "--mask",
        help="Show a single field with this mask (date, phone, ip, ssn, decimal, digit).",
        default=None,
    )
    parser.add_argument(
        "-d",
        "--date-format",
        help="Date layout: ddmmyyyy or mmddyyyy.",
        default=None,
    )
    parser.add_argument("--min-year", type=int, default=None, help="Lowest accepted year.")
    parser.add_argument("--max-year", type=int, default=None, help="Highest accepted year.")
    parser.add_argument("--log-level", default=None, help="Log level (e.g. DEBUG).")
    parser.add_argument("--log-file", default=None, help="Write logs to this file.")
    return parser.parse_args(argv)


def resolve_settings(args: argparse.Namespace) -> Settings:
    """Merge CLI arguments over config.toml over the defaults.

    Raises:
        ConfigError: If a mask name, date format, year or log level cannot be used.
    """
    config = _load_config_dict()
    years = config.get("years", {})
    if not isinstance(years, dict):
        years = {}
    settings = Settings()

    mask_name = args.mask or config.get("mask")
    if mask_name:
        settings.mask = parse_mask(str(mask_name))

    format_name = args.date_format or config.get("date_format")
    if format_name:
        settings.date_format = parse_date_format(str(format_name))

    if args.min_year is not None:
        settings.min_year = args.min_year
    elif "min" in years:
        settings.min_year = _parse_year(years["min"], "years.min")

    if args.max_year is not None:
        settings.max_year = args.max_year
    elif "max" in years:
        settings.max_year = _parse_year(years["max"], "years.max")

    settings.messages = load_message_overrides()
    settings.log_level = _parse_log_level(args.log_level or config.get("log_level") or "WARNING")

    log_file = args.log_file or config.get("log_file")
    if log_file:
        settings.log_file = Path(str(log_file)).expanduser()
    return settings
