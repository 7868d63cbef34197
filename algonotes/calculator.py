"""A four-function pocket calculator driven by key presses, with a small command-line front end."""

from __future__ import annotations

import math
import operator as _op
import sys
from collections.abc import Callable, Iterable, Sequence

DIGITS = frozenset("0123456789")

BACKSPACE = "⌫"
CLEAR = "C"
CLEAR_ENTRY = "CE"
PLUS_MINUS = "±"
POINT = "."
EQUALS = "="

_ALIASES = {"BS": BACKSPACE, "PM": PLUS_MINUS}
_MULTI_CHAR_KEYS = frozenset({CLEAR_ENTRY, *_ALIASES})


def _divide(first: float, second: float) -> float:
    if second != 0:
        return first / second
    if first == 0 or math.isnan(first):
        return math.nan
    return math.copysign(1.0, first) * math.copysign(1.0, second) * math.inf


_OPERATIONS: dict[str, Callable[[float, float], float]] = {
    "+": _op.add,
    "-": _op.sub,
    "*": _op.mul,
    "/": _divide,
}


def _parse(text: str) -> float:
    if "_" in text or not text.strip():
        raise ValueError(f"not a number: {text!r}")
    try:
        return float(text)
    except ValueError:
        raise ValueError(f"not a number: {text!r}") from None


def _format(value: float) -> str:
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "Infinity" if value > 0 else "-Infinity"
    text = repr(value)
    mantissa, exponent = text.partition("e")[::2] if "e" in text else (text, "")
    if mantissa.endswith(".0"):
        mantissa = mantissa[:-2]
    return f"{mantissa}E{exponent}" if exponent else mantissa


class Calculator:
    """Holds the display text, the first operand and the pending operator."""

    def __init__(self) -> None:
        self.display = "0"
        self.first = 0.0
        self.second = 0.0
        self.result = 0.0
        self.operator: str | None = None

    def backspace(self) -> str:
        """Drop the last character; an emptied display shows "0"."""
        self.display = self.display[:-1]
        if not self.display:
            self.display = "0"
        return self.display

    def enter_digit(self, digit: str) -> str:
        """Append a digit, replacing a lone "0"."""
        if digit not in DIGITS:
            raise ValueError(f"not a digit: {digit!r}")
        self.display = digit if self.display == "0" else self.display + digit
        return self.display

    def choose_operator(self, operator: str) -> str:
        """Store the displayed number as the first operand and clear the display."""
        if operator not in _OPERATIONS:
            raise ValueError(f"unknown operator: {operator!r}")
        self.first = _parse(self.display)
        self.display = ""
        self.operator = operator
        return self.display

    def point(self) -> str:
        """Append a decimal point unless the display already has one."""
        if "." not in self.display:
            self.display += "."
        return self.display

    def equals(self) -> str:
        """Apply the pending operator to the first operand and the displayed number."""
        self.second = _parse(self.display)
        operation = _OPERATIONS.get(self.operator) if self.operator else None
        if operation is not None:
            self.result = operation(self.first, self.second)
            self.display = _format(self.result)
        return self.display

    def clear(self) -> str:
        """Reset the display to "0"."""
        self.display = "0"
        return self.display

    def clear_entry(self) -> str:
        """Empty the display."""
        self.display = ""
        return self.display

    def toggle_sign(self) -> str:
        """Drop the first character if the display holds a minus sign, otherwise prefix one."""
        if "-" in self.display:
            self.display = self.display[1:]
        else:
            self.display = "-" + self.display
        return self.display

    def press(self, key: str) -> str:
        """Handle one key by its label and return the display."""
        key = _ALIASES.get(key, key)
        if key in DIGITS:
            return self.enter_digit(key)
        if key in _OPERATIONS:
            return self.choose_operator(key)
        actions: dict[str, Callable[[], str]] = {
            POINT: self.point,
            EQUALS: self.equals,
            CLEAR: self.clear,
            CLEAR_ENTRY: self.clear_entry,
            PLUS_MINUS: self.toggle_sign,
            BACKSPACE: self.backspace,
        }
        try:
            action = actions[key]
        except KeyError:
            raise ValueError(f"unknown key: {key!r}") from None
        return action()


def _keys(words: Iterable[str]) -> list[str]:
    keys: list[str] = []
    for word in words:
        if word in _MULTI_CHAR_KEYS:
            keys.append(word)
        else:
            keys.extend(word)
    return keys


def main(argv: Sequence[str] | None = None) -> int:
    """Press the keys given as arguments and print the display.

    Without arguments, read keys line by line from standard input and print the
    display after each line. "CE", "BS" (backspace) and "PM" (sign) are whole keys;
    any other argument is split into single-character keys.
    """
    args = list(sys.argv[1:] if argv is None else argv)
    calculator = Calculator()
    if args:
        try:
            for key in _keys(args):
                calculator.press(key)
        except ValueError as error:
            print(f"error: {error}", file=sys.stderr)
            return 1
        print(calculator.display)
        return 0
    for line in sys.stdin:
        try:
            for key in _keys(line.split()):
                calculator.press(key)
        except ValueError as error:
            print(f"error: {error}", file=sys.stderr)
        print(calculator.display)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())