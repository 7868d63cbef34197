"""Small exercises: best-two averages for students, an even-number triangle and an ordered-map tour."""

from __future__ import annotations

from bisect import bisect_left, bisect_right
from collections.abc import Iterable, Mapping
from dataclasses import dataclass


def best_two_average(first: float, second: float, third: float) -> float:
    """Return the mean of the two highest of three marks."""
    _, middle, highest = sorted((first, second, third))
    return (middle + highest) / 2


def _number(value: float) -> str:
    return f"{value:g}"


@dataclass
class Student:
    """A student with a university serial number, a name and three test marks."""

    usn: str
    name: str
    first: float
    second: float
    third: float

    def average(self) -> float:
        """Return the average of the student's two best marks."""
        return best_two_average(self.first, self.second, self.third)


def describe_students(students: Iterable[Student]) -> str:
    """Return a report with each student's name, serial number and best-two average."""
    return "".join(
        f"Name : {student.name}\n"
        f"USN : {student.usn}\n"
        f"Average : {_number(student.average())}\n\n"
        for student in students
    )


def even_number_pattern(rows: int) -> str:
    """Return a right-leaning triangle of consecutive even numbers.

    Row ``i`` (1-based) is indented by ``rows + 4 - i`` blocks of three spaces and
    holds ``i`` numbers, each followed by a tab.
    """
    lines: list[str] = []
    number = 0
    for row in range(1, rows + 1):
        indent = "   " * (rows + 4 - row)
        cells: list[str] = []
        for _ in range(row):
            number += 2
            cells.append(f"{number}\t")
        lines.append(indent + "".join(cells) + "\n")
    return "".join(lines)


def _table(entries: Mapping[int, int]) -> str:
    rows = "".join(f"\t{key}\t{value}\n" for key, value in sorted(entries.items()))
    return "\tKEY\tELEMENT\n" + rows


def _bound_entry(entries: Mapping[int, int], key: int, upper: bool) -> tuple[int, int]:
    keys = sorted(entries)
    index = (bisect_right if upper else bisect_left)(keys, key)
    if index == len(keys):
        raise KeyError(key)
    found = keys[index]
    return found, entries[found]


def ordered_map_demo() -> str:
    """Return the transcript of a walk through an ordered integer map.

    The map is filled, copied, trimmed below key 3, has key 4 erased, and is
    finally probed with lower and upper bounds for key 5.
    """
    first = {1: 40, 2: 30, 3: 60, 4: 20, 5: 50, 6: 50, 7: 10}
    parts: list[str] = ["\nThe map gquiz1 is : \n", _table(first), "\n"]

    second = dict(first)
    parts += ["\nThe map gquiz2 after assign from gquiz1 is : \n", _table(second), "\n"]

    second = {key: value for key, value in second.items() if key >= 3}
    parts += ["\ngquiz2 after removal of elements less than key=3 : \n", _table(second)]

    removed = 1 if second.pop(4, None) is not None else 0
    parts += [f"\ngquiz2.erase(4) : {removed} removed \n", _table(second), "\n"]

    low_key, low_value = _bound_entry(first, 5, upper=False)
    high_key, high_value = _bound_entry(first, 5, upper=True)
    parts.append(f"gquiz1.lower_bound(5) : \tKEY = {low_key}\t\tELEMENT = {low_value}\n")
    parts.append(f"gquiz1.upper_bound(5) : \tKEY = {high_key}\t\tELEMENT = {high_value}\n")
    return "".join(parts)