import itertools

import pytest

from algonotes.arrays import (
    beauty_verdict,
    equilibrium_point,
    find_peak,
    has_duplicates,
    longest_consecutive,
    max_histogram_area,
    max_rectangle_in_binary_matrix,
    max_subarray,
    merge_k_sorted,
    next_greater_elements,
    replace_with_greatest_on_right,
    sort_rows,
    subarray_with_sum,
    three_sum_zero,
    transpose,
)


def test_three_sum_zero_pinned():
    assert three_sum_zero([-1, 0, 1, 2, -1, -4]) == [(-1, -1, 2), (-1, 0, 1)]


@pytest.mark.parametrize("values", [[0, 0, 0, 0], [-5, 2, 3, 1, -1, 0, 4, -4], [3, -2, -1, 5, -3]])
def test_three_sum_zero_invariants(values):
    found = three_sum_zero(values)
    assert len(found) == len(set(found))
    for triplet in found:
        assert sum(triplet) == 0
        assert list(triplet) == sorted(triplet)
    assert found == sorted(found)


def test_three_sum_zero_too_short():
    assert three_sum_zero([0, 0]) == []


def test_duplicates_and_verdict():
    assert has_duplicates([1, 2, 3, 1]) is True
    assert has_duplicates([1, 2, 3]) is False
    assert beauty_verdict([4, 5, 6]) == "prekrasnyy"
    assert beauty_verdict([4, 5, 4]) == "ne krasivo"


def test_replace_with_greatest_source_example():
    assert replace_with_greatest_on_right([0, 1, 2, 3]) == [3, 3, 3, -1]


def test_replace_with_greatest_last_is_minus_one():
    result = replace_with_greatest_on_right([9, 4, 7])
    assert result[-1] == -1
    assert result[0] == 7
    assert replace_with_greatest_on_right([]) == []


@pytest.mark.parametrize("values", [[1], [1, 2, 3], [3, 2, 1], [1, 3, 20, 4, 1, 0], [5, 5, 5]])
def test_find_peak_is_peak(values):
    index = find_peak(values)
    if index > 0:
        assert values[index - 1] <= values[index]
    if index < len(values) - 1:
        assert values[index + 1] <= values[index]


def test_find_peak_empty():
    with pytest.raises(ValueError):
        find_peak([])


@pytest.mark.parametrize("values", [[1, 3, 5, 2, 2], [0], [2, 0, 2], [-7, 1, 5, 2, -4, 3, 0]])
def test_equilibrium_point_balances(values):
    position = equilibrium_point(values)
    assert position is not None
    assert sum(values[: position - 1]) == sum(values[position:])


def test_equilibrium_point_missing():
    assert equilibrium_point([1, 2]) is None
    assert equilibrium_point([]) is None


def test_max_subarray_source_example():
    values = [-2, -3, 4, -1, -2, 1, 5, -3]
    total, start, end = max_subarray(values)
    assert sum(values[start : end + 1]) == total
    for i, j in itertools.combinations(range(len(values) + 1), 2):
        assert sum(values[i:j]) <= total


def test_max_subarray_all_negative():
    values = [-3, -1, -2]
    total, start, end = max_subarray(values)
    assert total == max(values)
    assert start == end == values.index(max(values))


def test_max_subarray_empty():
    with pytest.raises(ValueError):
        max_subarray([])


def test_next_greater_decreasing_has_none():
    assert next_greater_elements([27, 18, 11, 9]) == [None, None, None, None]


def test_next_greater_invariant():
    values = [4, 5, 2, 25, 7, 3, 8]
    result = next_greater_elements(values)
    assert len(result) == len(values)
    for i, found in enumerate(result):
        later = values[i + 1 :]
        if found is None:
            assert all(x <= values[i] for x in later)
        else:
            assert found > values[i]
            first = later.index(found)
            assert all(x <= values[i] for x in later[:first])


@pytest.mark.parametrize(
    "values,target",
    [([1, 2, 3, 7, 5], 12), ([1, 2, 3, 4, 5, 6, 7, 8, 9, 10], 15), ([5], 5), ([0, 4, 0], 4)],
)
def test_subarray_with_sum_found(values, target):
    span = subarray_with_sum(values, target)
    assert span is not None
    start, end = span
    assert 1 <= start <= end <= len(values)
    assert sum(values[start - 1 : end]) == target


def test_subarray_with_sum_missing():
    assert subarray_with_sum([1, 2, 3], 100) is None


def test_merge_k_sorted():
    arrays = [[1, 5, 9], [45, 90], [2, 6, 78, 100, 234], [0]]
    merged = merge_k_sorted(arrays)
    assert merged == sorted(itertools.chain.from_iterable(arrays))
    assert merge_k_sorted([]) == []


def test_transpose_round_trip():
    matrix = [[1, 2, 3], [4, 5, 6], [7, 8, 9]]
    flipped = transpose(matrix)
    assert transpose(flipped) == matrix
    for i, row in enumerate(matrix):
        for j, cell in enumerate(row):
            assert flipped[j][i] == cell


def test_transpose_ragged():
    with pytest.raises(ValueError):
        transpose([[1, 2], [3]])


def test_sort_rows():
    matrix = [[3, 1, 2], [9, -1, 0]]
    result = sort_rows(matrix)
    for original, row in zip(matrix, result):
        assert row == sorted(row)
        assert sorted(original) == row


def test_histogram_pinned():
    assert max_histogram_area([6, 2, 5, 4, 5, 1, 6]) == 12


def test_histogram_invariants():
    assert max_histogram_area([]) == 0
    assert max_histogram_area([3, 3, 3, 3]) == 3 * 4
    heights = [2, 1, 4, 3]
    assert max_histogram_area(heights) >= max(heights)


@pytest.mark.parametrize(
    "matrix,expected",
    [
        ([[0, 1, 1, 0], [1, 1, 1, 1], [1, 1, 1, 1], [1, 1, 0, 0]], 8),
        ([[0, 1, 1], [1, 1, 1], [0, 1, 1]], 6),
        ([[1, 1, 1], [0, 1, 1], [1, 0, 0]], 4),
    ],
)
def test_max_rectangle_source_cases(matrix, expected):
    assert max_rectangle_in_binary_matrix(matrix) == expected


def test_max_rectangle_edges():
    assert max_rectangle_in_binary_matrix([]) == 0
    assert max_rectangle_in_binary_matrix([[0, 0], [0, 0]]) == 0
    assert max_rectangle_in_binary_matrix([[1, 1], [1, 1]]) == 4
    with pytest.raises(ValueError):
        max_rectangle_in_binary_matrix([[1, 1], [1]])


def test_longest_consecutive():
    run = [7, 3, 5, 4, 6, 8]
    assert longest_consecutive(run) == len(run)
    assert longest_consecutive(run + run) == len(run)
    assert longest_consecutive([]) == 0
    assert longest_consecutive([10, 20, 30]) == 1
    assert longest_consecutive([1, 3, 100, 5, 6, 4]) == len([3, 4, 5, 6])