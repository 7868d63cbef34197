"""Enumerations and counts: parentheses, permutations, stair jumps, keypad words, factorials."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from functools import reduce
from operator import mul
from typing import Any

KEYPAD = (",:", "abc", "def", "ghi", "jkl", "mno", "pqrs", "tu", "vwx", "yz")


def balanced_parentheses(n: int) -> list[str]:
    """Return every balanced string of ``n`` pairs of parentheses, '(' tried before ')'."""
    if n < 0:
        raise ValueError("number of pairs must not be negative")
    found: list[str] = []

    def extend(opened: int, closed: int, prefix: str) -> None:
        if opened == 0 and closed == 0:
            found.append(prefix)
            return
        if opened:
            extend(opened - 1, closed, prefix + "(")
        if closed > opened:
            extend(opened, closed - 1, prefix + ")")

    extend(n, n, "")
    return found


def binomial(n: int, k: int) -> int:
    """Return the binomial coefficient C(n, k)."""
    if n < 0 or k < 0 or k > n:
        raise ValueError("binomial requires 0 <= k <= n")
    k = min(k, n - k)
    result = 1
    for i in range(k):
        result = result * (n - i) // (i + 1)
    return result


def catalan(n: int) -> int:
    """Return the n-th Catalan number."""
    return binomial(2 * n, n) // (n + 1)


def permutations_of_string(text: str) -> list[str]:
    """Return the permutations of ``text`` in the order produced by recursive swapping."""
    found: list[str] = []
    last = len(text) - 1

    def permute(chars: list[str], left: int) -> None:
        if left == last:
            found.append("".join(chars))
            return
        for i in range(left, last + 1):
            chars[left], chars[i] = chars[i], chars[left]
            permute(chars, left + 1)
            chars[left], chars[i] = chars[i], chars[left]

    if text:
        permute(list(text), 0)
    return found


def permutations_of(items: Sequence[Any]) -> list[list[Any]]:
    """Return every ordering of ``items``, choosing unused positions left to right."""
    values = list(items)
    used = [False] * len(values)
    current: list[Any] = []
    found: list[list[Any]] = []

    def build() -> None:
        if len(current) == len(values):
            found.append(list(current))
            return
        for i, value in enumerate(values):
            if used[i]:
                continue
            used[i] = True
            current.append(value)
            build()
            current.pop()
            used[i] = False

    build()
    return found


def stair_jumps(n: int) -> list[str]:
    """Return every way to climb ``n`` stairs in jumps of 1, 2 or 3, as digit strings."""
    if n == 0:
        return [""]
    if n < 0:
        return []
    return [
        str(step) + rest
        for step in (1, 2, 3)
        for rest in stair_jumps(n - step)
    ]


def keypad_combinations(digits: str) -> list[str]:
    """Return every word the digit string can spell on the phone keypad."""
    if not digits:
        return [""]
    head = digits[0]
    if not ("0" <= head <= "9"):
        raise ValueError(f"not a keypad digit: {head!r}")
    letters = KEYPAD[int(head)]
    return [
        letter + rest
        for rest in keypad_combinations(digits[1:])
        for letter in letters
    ]


def factorial_digits(n: int) -> str:
    """Return the decimal digits of n!; values below 2 give "1"."""
    factors: Iterable[int] = range(2, n + 1)
    return str(reduce(mul, factors, 1))