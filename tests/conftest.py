"""Shared test fixtures."""

from __future__ import annotations

from collections.abc import Callable
from datetime import date

import pytest

from masked_textual.controller import MaskController
from masked_textual.models import DateFormat, EditResult, KeyEvent, MaskKind

BACKSPACE = "\b"


def leap_year_today() -> date:
    """A clock stuck in a leap year."""
    return date(2024, 3, 1)


def common_year_today() -> date:
    """A clock stuck in a non-leap year."""
    return date(2026, 3, 1)


def type_keys(controller: MaskController, keys: str) -> list[EditResult]:
    """Feed *keys* one by one; ``\\b`` stands for backspace."""
    results = []
    for char in keys:
        event = KeyEvent.backspace() if char == BACKSPACE else KeyEvent(char)
        results.append(controller.on_character(event))
    return results


@pytest.fixture
def make_controller() -> Callable[..., MaskController]:
    """Factory for controllers pinned to a leap-year clock by default."""

    def _make(
        mask: MaskKind,
        date_format: DateFormat = DateFormat.DDMMYYYY,
        **kwargs,
    ) -> MaskController:
        kwargs.setdefault("clock", leap_year_today)
        return MaskController(mask, date_format=date_format, **kwargs)

    return _make
