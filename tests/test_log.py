"""Tests for logging setup."""

from pathlib import Path

import pytest
from loguru import logger

from masked_textual.controller import MaskController
from masked_textual.log import setup_logging
from masked_textual.models import MaskKind


@pytest.fixture(autouse=True)
def restore_logger():
    """Put loguru back to the package's import-time state."""
    yield
    logger.remove()
    logger.disable("masked_textual")


class TestSetupLogging:
    """Tests for setup_logging."""

    def test_file_sink_receives_package_records(self, tmp_path: Path):
        log_file = tmp_path / "logs" / "masks.log"
        setup_logging("DEBUG", log_file)
        MaskController(MaskKind.PHONE_WITH_AREA)
        logger.remove()
        assert "Mask set to PHONE_WITH_AREA" in log_file.read_text()

    def test_level_filters_records(self, tmp_path: Path):
        log_file = tmp_path / "masks.log"
        setup_logging("WARNING", log_file)
        MaskController(MaskKind.PHONE_WITH_AREA)
        logger.remove()
        assert "Mask set to" not in log_file.read_text()

    def test_leave_failure_logged_at_info(self, tmp_path: Path):
        log_file = tmp_path / "masks.log"
        setup_logging("INFO", log_file)
        MaskController(MaskKind.SSN).on_focus_leave("123")
        logger.remove()
        assert "failed on leave: SSNFORMAT" in log_file.read_text()
