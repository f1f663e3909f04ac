"""Keystroke-level input masks for dates, phone numbers, SSNs and IP addresses."""

from loguru import logger

from masked_textual.controller import MaskController
from masked_textual.models import DateFormat, EditResult, KeyEvent, MaskKind

# Library code stays quiet until the application calls setup_logging().
logger.disable("masked_textual")

__all__ = ["DateFormat", "EditResult", "KeyEvent", "MaskController", "MaskKind"]
