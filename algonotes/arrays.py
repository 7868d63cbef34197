"""Array and matrix problems: triplets, peaks, subarrays, histograms and consecutive runs."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from itertools import chain
from typing import Any


def three_sum_zero(values: Iterable[int]) -> list[tuple[int, int, int]]:
    """Return every distinct ascending triplet of values that sums to zero, in ascending order."""
    ordered = sorted(values)
    size = len(ordered)
    found: list[tuple[int, int, int]] = []
    for i in range(size - 2):
        if i > 0 and ordered[i] == ordered[i - 1]:
            continue
        low, high = i + 1, size - 1
        while low < high:
            total = ordered[i] + ordered[low] + ordered[high]
            if total == 0:
                found.append((ordered[i], ordered[low], ordered[high]))
                low += 1
                high -= 1
                while low < high and ordered[low] == ordered[low - 1]:
                    low += 1
            elif total < 0:
                low += 1
            else:
                high -= 1
    return found


def has_duplicates(values: Iterable[Any]) -> bool:
    """Return True if any value occurs more than once."""
    seen: set[Any] = set()
    for value in values:
        if value in seen:
            return True
        seen.add(value)
    return False


def beauty_verdict(values: Iterable[Any]) -> str:
    """Return "prekrasnyy" for a sequence without repeats, otherwise "ne krasivo"."""
    seen: set[Any] = set()
    for value in values:
        if value in seen:
            return "ne krasivo"
        seen.add(value)
    return "prekrasnyy"


def replace_with_greatest_on_right(values: Iterable[int]) -> list[int]:
    """Replace each value by the greatest value to its right (never below 0); the last becomes -1."""
    items = list(values)
    if not items:
        return []
    result = [0] * len(items)
    running = 0
    for i in range(len(items) - 1, -1, -1):
        result[i] = running
        running = max(running, items[i])
    result[-1] = -1
    return result


def find_peak(values: Sequence[Any]) -> int:
    """Return the index of an element not smaller than its neighbours, found by binary search."""
    size = len(values)
    if size == 0:
        raise ValueError("cannot find a peak in an empty sequence")
    low, high = 0, size - 1
    while True:
        mid = low + (high - low) // 2
        left_ok = mid == 0 or values[mid - 1] <= values[mid]
        right_ok = mid == size - 1 or values[mid + 1] <= values[mid]
        if left_ok and right_ok:
            return mid
        if mid > 0 and values[mid - 1] > values[mid]:
            high = mid - 1
        else:
            low = mid + 1


def equilibrium_point(values: Iterable[int]) -> int | None:
    """Return the 1-based position whose left and right sums are equal, or None."""
    items = list(values)
    remaining = sum(items)
    left = 0
    for position, value in enumerate(items, start=1):
        remaining -= value
        if left == remaining:
            return position
        left += value
    return None


def max_subarray(values: Iterable[int]) -> tuple[int, int, int]:
    """Return (largest contiguous sum, start index, end index) by Kadane's algorithm."""
    items = list(values)
    if not items:
        raise ValueError("cannot take the maximum subarray of an empty sequence")
    best: int | None = None
    running = 0
    start = end = candidate = 0
    for i, value in enumerate(items):
        running += value
        if best is None or best < running:
            best = running
            start = candidate
            end = i
        if running < 0:
            running = 0
            candidate = i + 1
    assert best is not None
    return best, start, end


def next_greater_elements(values: Iterable[Any]) -> list[Any]:
    """For each value, return the first later value greater than it, or None if there is none."""
    items = list(values)
    result: list[Any] = []
    for i, value in enumerate(items):
        result.append(next((later for later in items[i + 1:] if value < later), None))
    return result


def subarray_with_sum(values: Iterable[int], target: int) -> tuple[int, int] | None:
    """Return 1-based (start, end) of a contiguous run of non-negative values summing to target, or None."""
    items = list(values)
    start = 0
    running = 0
    for end, value in enumerate(items):
        running += value
        if running >= target:
            while target < running and start < end:
                running -= items[start]
                start += 1
            if running == target:
                return start + 1, end + 1
    return None


def merge_k_sorted(arrays: Iterable[Iterable[Any]]) -> list[Any]:
    """Merge several arrays into one ascending list."""
    return sorted(chain.from_iterable(arrays))


def _check_rectangular(matrix: Sequence[Sequence[Any]]) -> int:
    widths = {len(row) for row in matrix}
    if len(widths) > 1:
        raise ValueError("all rows of the matrix must have the same length")
    return widths.pop() if widths else 0


def transpose(matrix: Sequence[Sequence[Any]]) -> list[list[Any]]:
    """Return the transpose of a rectangular matrix."""
    _check_rectangular(matrix)
    return [list(column) for column in zip(*matrix)]


def sort_rows(matrix: Iterable[Iterable[Any]]) -> list[list[Any]]:
    """Return a copy of the matrix with every row sorted ascending."""
    return [sorted(row) for row in matrix]


def max_histogram_area(heights: Sequence[int]) -> int:
    """Return the largest rectangle area under a histogram of bar heights."""
    size = len(heights)
    right_limit = [size - 1] * size
    left_limit = [0] * size
    stack: list[int] = []
    for i in range(size - 1, -1, -1):
        while stack and heights[stack[-1]] >= heights[i]:
            stack.pop()
        right_limit[i] = stack[-1] - 1 if stack else size - 1
        stack.append(i)
    stack.clear()
    for i in range(size):
        while stack and heights[stack[-1]] >= heights[i]:
            stack.pop()
        left_limit[i] = stack[-1] + 1 if stack else 0
        stack.append(i)
    return max(
        (height * (right - left + 1) for height, left, right in zip(heights, left_limit, right_limit)),
        default=0,
    )


def max_rectangle_in_binary_matrix(matrix: Sequence[Sequence[int]]) -> int:
    """Return the area of the largest all-ones rectangle in a 0/1 matrix."""
    _check_rectangular(matrix)
    if not matrix:
        return 0
    heights = list(matrix[0])
    best = max_histogram_area(heights)
    for row in matrix[1:]:
        heights = [0 if cell == 0 else height + cell for height, cell in zip(heights, row)]
        best = max(best, max_histogram_area(heights))
    return best


def longest_consecutive(values: Iterable[int]) -> int:
    """Return the length of the longest run of consecutive integers, using union-find."""
    parent: dict[int, int] = {}
    group_size: dict[int, int] = {}

    def find(value: int) -> int:
        root = value
        while parent[root] != root:
            root = parent[root]
        while parent[value] != root:
            parent[value], value = root, parent[value]
        return root

    best = 0
    for num in values:
        if num not in parent:
            parent[num] = num
            group_size[num] = 1
        root = find(num)
        for adjacent in (num - 1, num + 1):
            if adjacent in parent:
                other = find(adjacent)
                if other != root:
                    parent[other] = root
                    group_size[root] += group_size[other]
        best = max(best, group_size[root])
    return best