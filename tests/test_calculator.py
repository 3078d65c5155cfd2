import pytest

from algokit.calculator import Calculator


def type_number(calc, text):
    for ch in text:
        if ch == ".":
            calc.point()
        else:
            calc.enter_digit(ch)


def test_starts_at_zero():
    assert Calculator().display == "0"


def test_digits_replace_leading_zero():
    calc = Calculator()
    type_number(calc, "12")
    assert calc.display == "12"


def test_zero_then_zero_stays_single():
    calc = Calculator()
    calc.enter_digit("0")
    assert calc.display == "0"


def test_invalid_digit_rejected():
    with pytest.raises(ValueError):
        Calculator().enter_digit("a")


def test_backspace_to_zero():
    calc = Calculator()
    type_number(calc, "34")
    calc.backspace()
    assert calc.display == "3"
    calc.backspace()
    assert calc.display == "0"


def test_clear_and_clear_entry():
    calc = Calculator()
    type_number(calc, "99")
    calc.clear_entry()
    assert calc.display == ""
    calc.clear()
    assert calc.display == "0"


def test_toggle_sign_round_trip():
    calc = Calculator()
    type_number(calc, "25")
    calc.toggle_sign()
    assert calc.display == "-25"
    calc.toggle_sign()
    assert calc.display == "25"


def test_point_added_only_once():
    calc = Calculator()
    type_number(calc, "1.5")
    calc.point()
    assert calc.display == "1.5"


def test_operator_blanks_display():
    calc = Calculator()
    type_number(calc, "8")
    calc.press_operator("+")
    assert calc.display == ""


def test_addition():
    calc = Calculator()
    type_number(calc, "2")
    calc.press_operator("+")
    type_number(calc, "3")
    calc.equals()
    assert calc.display == "5"


def test_division_gives_fraction():
    calc = Calculator()
    type_number(calc, "5")
    calc.press_operator("/")
    type_number(calc, "2")
    calc.equals()
    assert calc.display == "2.5"


def test_division_by_zero_gives_infinity():
    calc = Calculator()
    type_number(calc, "7")
    calc.press_operator("/")
    type_number(calc, "0")
    calc.equals()
    assert calc.display == "Infinity"


def test_subtract_self_is_zero():
    calc = Calculator()
    type_number(calc, "123")
    calc.press_operator("-")
    type_number(calc, "123")
    calc.equals()
    assert calc.display == "0"


def test_multiply_by_one_keeps_number():
    calc = Calculator()
    type_number(calc, "46")
    calc.press_operator("*")
    type_number(calc, "1")
    calc.equals()
    assert calc.display == "46"


def test_equals_without_operator_keeps_display():
    calc = Calculator()
    type_number(calc, "6")
    calc.equals()
    assert calc.display == "6"


def test_equals_on_blank_display_fails():
    calc = Calculator()
    type_number(calc, "4")
    calc.press_operator("*")
    with pytest.raises(ValueError):
        calc.equals()


def test_unknown_operator_rejected():
    calc = Calculator()
    with pytest.raises(ValueError):
        calc.press_operator("%")


def test_operator_on_blank_display_fails():
    calc = Calculator()
    calc.clear_entry()
    with pytest.raises(ValueError):
        calc.press_operator("+")