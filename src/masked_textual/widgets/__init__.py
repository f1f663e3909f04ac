"""Textual widgets built on the mask controller."""

from masked_textual.widgets.masked_input import MaskedInput, placeholder_for

__all__ = ["MaskedInput", "placeholder_for"]
