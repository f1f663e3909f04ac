"""Tests for configuration resolution."""

from pathlib import Path

import pytest

from masked_textual.config import (
    _load_config_dict,
    config_path,
    load_message_overrides,
    parse_args,
    parse_date_format,
    parse_mask,
    resolve_settings,
)
from masked_textual.errors import ConfigError, UnknownDateFormatError, UnknownMaskError
from masked_textual.models import DateFormat, MaskKind


@pytest.fixture(autouse=True)
def isolated_config(tmp_path: Path, monkeypatch) -> Path:
    """Point the config lookup at a file inside tmp_path."""
    path = tmp_path / "config.toml"
    monkeypatch.setenv("MASKED_TEXTUAL_CONFIG", str(path))
    return path


class TestParseArgs:
    """Tests for CLI argument parsing."""

    def test_no_args(self):
        args = parse_args([])
        assert args.mask is None
        assert args.date_format is None
        assert args.min_year is None
        assert args.max_year is None
        assert args.log_level is None
        assert args.log_file is None

    def test_short_flags(self):
        args = parse_args(["-m", "phone", "-d", "mmddyyyy"])
        assert args.mask == "phone"
        assert args.date_format == "mmddyyyy"

    def test_year_flags_are_ints(self):
        args = parse_args(["--min-year", "1980", "--max-year", "2050"])
        assert (args.min_year, args.max_year) == (1980, 2050)

    def test_bad_year_exits(self):
        with pytest.raises(SystemExit):
            parse_args(["--min-year", "soon"])


class TestParseNames:
    """Tests for mask and date format name parsing."""

    def test_mask_by_value(self):
        assert parse_mask("phone") is MaskKind.PHONE_WITH_AREA
        assert parse_mask(" IP ") is MaskKind.IP_ADDRESS

    def test_mask_by_member_name(self):
        assert parse_mask("PHONE_WITH_AREA") is MaskKind.PHONE_WITH_AREA
        assert parse_mask("date_only") is MaskKind.DATE_ONLY

    def test_unknown_mask(self):
        with pytest.raises(UnknownMaskError) as exc_info:
            parse_mask("zip")
        assert exc_info.value.name == "zip"

    def test_date_format_variants(self):
        assert parse_date_format("ddmmyyyy") is DateFormat.DDMMYYYY
        assert parse_date_format("MM/DD/YYYY") is DateFormat.MMDDYYYY

    def test_unknown_date_format(self):
        with pytest.raises(UnknownDateFormatError):
            parse_date_format("yyyy-mm-dd")

    def test_unknown_names_are_config_errors(self):
        with pytest.raises(ConfigError):
            parse_mask("zip")


class TestConfigFile:
    """Tests for reading config.toml."""

    def test_env_path(self, isolated_config: Path):
        assert config_path() == isolated_config

    def test_missing_file(self):
        assert _load_config_dict() == {}

    def test_malformed_file(self, isolated_config: Path):
        isolated_config.write_text("mask = [unclosed\n")
        assert _load_config_dict() == {}

    def test_invalid_utf8_file(self, isolated_config: Path):
        isolated_config.write_bytes(b'mask = "\xff\xfe"\n')
        assert _load_config_dict() == {}

    def test_messages_not_a_table(self, isolated_config: Path):
        isolated_config.write_text('messages = "x"\n')
        assert load_message_overrides() == {}

    def test_message_overrides(self, isolated_config: Path):
        isolated_config.write_text('[messages]\nONLYDIGIT = "Digits only"\n')
        assert load_message_overrides() == {"ONLYDIGIT": "Digits only"}


class TestResolveSettings:
    """Tests for merging CLI arguments, config.toml and defaults."""

    def test_defaults(self):
        settings = resolve_settings(parse_args([]))
        assert settings.mask is None
        assert settings.date_format is DateFormat.DDMMYYYY
        assert settings.min_year is None
        assert settings.max_year is None
        assert settings.messages == {}
        assert settings.log_level == "WARNING"
        assert settings.log_file is None

    def test_config_values(self, isolated_config: Path, tmp_path: Path):
        log_file = tmp_path / "masks.log"
        isolated_config.write_text(
            'mask = "ssn"\n'
            'date_format = "mm/dd/yyyy"\n'
            'log_level = "debug"\n'
            f'log_file = "{log_file}"\n'
            "[years]\n"
            "min = 1980\n"
            "max = 2050\n"
        )
        settings = resolve_settings(parse_args([]))
        assert settings.mask is MaskKind.SSN
        assert settings.date_format is DateFormat.MMDDYYYY
        assert (settings.min_year, settings.max_year) == (1980, 2050)
        assert settings.log_level == "DEBUG"
        assert settings.log_file == log_file

    def test_cli_overrides_config(self, isolated_config: Path):
        isolated_config.write_text('mask = "ssn"\n[years]\nmin = 1980\n')
        settings = resolve_settings(parse_args(["--mask", "ip", "--min-year", "2000"]))
        assert settings.mask is MaskKind.IP_ADDRESS
        assert settings.min_year == 2000

    def test_bad_year_in_config(self, isolated_config: Path):
        isolated_config.write_text('[years]\nmax = "later"\n')
        with pytest.raises(ConfigError):
            resolve_settings(parse_args([]))

    def test_bad_mask_in_config(self, isolated_config: Path):
        isolated_config.write_text('mask = "zip"\n')
        with pytest.raises(UnknownMaskError):
            resolve_settings(parse_args([]))

    def test_years_not_a_table(self, isolated_config: Path):
        isolated_config.write_text("years = 5\n")
        settings = resolve_settings(parse_args([]))
        assert settings.min_year is None
        assert settings.max_year is None

    def test_log_level_is_upper_cased(self):
        settings = resolve_settings(parse_args(["--log-level", "debug"]))
        assert settings.log_level == "DEBUG"

    def test_unknown_log_level_on_cli(self):
        with pytest.raises(ConfigError):
            resolve_settings(parse_args(["--log-level", "loud"]))

    def test_unknown_log_level_in_config(self, isolated_config: Path):
        isolated_config.write_text('log_level = "loud"\n')
        with pytest.raises(ConfigError):
            resolve_settings(parse_args([]))
