import pytest

from algonotes.calculator import Calculator, main


def run(*keys):
    calculator = Calculator()
    for key in keys:
        calculator.press(key)
    return calculator


def test_initial_display_is_zero():
    assert Calculator().display == "0"


def test_digits_append():
    assert run("1", "2").display == "12"


def test_leading_zero_is_replaced():
    assert run("0", "7").display == "7"


def test_backspace_to_empty_shows_zero():
    calculator = run("4")
    assert calculator.backspace() == "0"


def test_backspace_drops_last_character():
    calculator = run("4", "2")
    assert calculator.backspace() == "4"


def test_point_added_only_once():
    assert run("1", ".", ".").display == "1."


def test_toggle_sign_round_trip():
    calculator = run("3", "8")
    assert calculator.toggle_sign() == "-38"
    assert calculator.toggle_sign() == "38"


def test_clear_and_clear_entry():
    calculator = run("9", "9")
    assert calculator.clear_entry() == ""
    assert calculator.clear() == "0"


def test_operator_clears_display_and_stores_operand():
    calculator = run("4", "+")
    assert calculator.display == ""
    assert calculator.first == 4.0
    assert calculator.operator == "+"


def test_addition():
    assert run("2", "+", "3", "=").display == "5"


def test_subtracting_a_number_from_itself_gives_zero():
    assert run("6", "7", "-", "6", "7", "=").display == "0"


def test_multiplying_by_one_keeps_value():
    assert run("4", "2", "*", "1", "=").display == "42"


def test_adding_zero_keeps_value():
    assert run("1", "9", "+", "0", "=").display == "19"


def test_fractional_result_drops_trailing_zero():
    assert run("1", ".", "5", "*", "2", "=").display == "3"


def test_division_by_zero():
    assert run("1", "/", "0", "=").display == "Infinity"


def test_equals_without_operator_keeps_display():
    calculator = run("5", "5", "=")
    assert calculator.display == "55"
    assert calculator.second == 55.0


def test_operator_on_empty_display_raises_and_keeps_state():
    calculator = run("CE")
    with pytest.raises(ValueError):
        calculator.choose_operator("+")
    assert calculator.display == ""
    assert calculator.operator is None


def test_unknown_operator_raises():
    with pytest.raises(ValueError):
        Calculator().choose_operator("%")


def test_bad_digit_raises():
    with pytest.raises(ValueError):
        Calculator().enter_digit("x")


def test_unknown_key_raises():
    with pytest.raises(ValueError):
        Calculator().press("?")


def test_press_matches_direct_calls():
    pressed = run("8", "/", "4", "=")
    direct = Calculator()
    direct.enter_digit("8")
    direct.choose_operator("/")
    direct.enter_digit("4")
    direct.equals()
    assert pressed.display == direct.display


def test_aliases_match_symbols():
    assert run("5", "PM").display == run("5", "±").display
    assert run("5", "6", "BS").display == run("5", "6", "⌫").display


def test_main_with_clear_entry(capsys):
    assert main(["7", "CE"]) == 0
    assert capsys.readouterr().out == "\n"


def test_main_reports_bad_key(capsys):
    assert main(["1", "?"]) == 1
    assert "unknown key" in capsys.readouterr().err