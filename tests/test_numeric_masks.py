"""Tests for the digit-only and decimal masks."""

from masked_textual.models import KeyEvent, MaskKind
from tests.conftest import BACKSPACE, type_keys


class TestDigitOnly:
    """Tests for the DIGIT_ONLY mask."""

    def test_digits_pass_through(self, make_controller):
        controller = make_controller(MaskKind.DIGIT_ONLY)
        results = type_keys(controller, "0123456789")
        assert controller.text == "0123456789"
        assert all(not r.handled for r in results)
        assert all(r.message is None for r in results)

    def test_non_digits_rejected(self, make_controller):
        controller = make_controller(MaskKind.DIGIT_ONLY)
        type_keys(controller, "12")
        for char in "a.-/ xZ":
            result = controller.on_character(KeyEvent(char))
            assert result.handled
            assert result.text == "12"
            assert result.message == "Only digits are allowed"

    def test_digit_clears_message(self, make_controller):
        controller = make_controller(MaskKind.DIGIT_ONLY)
        results = type_keys(controller, "a1")
        assert results[0].message == "Only digits are allowed"
        assert results[1].message is None

    def test_backspace_keeps_message(self, make_controller):
        controller = make_controller(MaskKind.DIGIT_ONLY)
        results = type_keys(controller, "12a" + BACKSPACE)
        assert results[-1].text == "1"
        assert results[-1].message == "Only digits are allowed"

    def test_no_length_limit(self, make_controller):
        controller = make_controller(MaskKind.DIGIT_ONLY)
        type_keys(controller, "9" * 40)
        assert len(controller.text) == 40


class TestDecimal:
    """Tests for the DECIMAL mask."""

    def test_decimal_scenario_passes_through(self, make_controller):
        controller = make_controller(MaskKind.DECIMAL)
        results = type_keys(controller, "12.5")
        assert controller.text == "12.5"
        assert all(not r.handled for r in results)
        assert all(r.message is None for r in results)

    def test_shape_not_checked_while_typing(self, make_controller):
        controller = make_controller(MaskKind.DECIMAL)
        type_keys(controller, "1..2.")
        assert controller.text == "1..2."

    def test_letters_rejected(self, make_controller):
        controller = make_controller(MaskKind.DECIMAL)
        type_keys(controller, "3")
        result = controller.on_character(KeyEvent("e"))
        assert result.handled
        assert result.text == "3"
        assert result.message == "Only digits and dot are allowed"

    def test_minus_rejected(self, make_controller):
        controller = make_controller(MaskKind.DECIMAL)
        result = controller.on_character(KeyEvent("-"))
        assert result.handled
        assert result.text == ""

    def test_no_leave_check(self, make_controller):
        controller = make_controller(MaskKind.DECIMAL)
        type_keys(controller, "1..")
        assert controller.on_focus_leave() is None
