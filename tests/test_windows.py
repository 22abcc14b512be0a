from collections import Counter

import pytest

from puzzlekit.windows import (
    kth_largest_value,
    latest_time_catch_the_bus,
    longest_awesome,
    longest_equal_subarray,
    maximize_win,
    most_competitive,
    take_characters,
)


def _is_subsequence(part, whole):
    it = iter(whole)
    return all(any(x == y for y in it) for x in part)


# kth_largest_value

def test_kth_largest_worked_example():
    assert kth_largest_value([[5, 2], [1, 6]], 1) == 7


def test_kth_largest_single_cell():
    assert kth_largest_value([[42]], 1) == 42


def test_kth_largest_non_increasing_in_k():
    matrix = [[5, 2, 9], [1, 6, 3], [4, 8, 7]]
    results = [kth_largest_value(matrix, k) for k in range(1, 10)]
    assert results == sorted(results, reverse=True)


def test_kth_largest_empty_raises():
    with pytest.raises(ValueError):
        kth_largest_value([], 1)


# latest_time_catch_the_bus

def test_latest_time_bus_with_room_leaves_at_departure():
    assert latest_time_catch_the_bus([10], [2], 2) == 10


def test_latest_time_full_bus():
    assert latest_time_catch_the_bus([10], [10], 1) == 9


def test_latest_time_avoids_passengers_and_does_not_mutate():
    buses = [20, 30, 10]
    passengers = [19, 13, 26, 4, 25, 11, 21]
    result = latest_time_catch_the_bus(buses, passengers, 2)
    assert result not in passengers
    assert result <= max(buses)
    assert buses == [20, 30, 10]


def test_latest_time_no_buses_raises():
    with pytest.raises(ValueError):
        latest_time_catch_the_bus([], [1], 1)


# longest_awesome

@pytest.mark.parametrize("s", ["12321", "1122", "9", "213123"])
def test_longest_awesome_whole_string(s):
    assert longest_awesome(s) == len(s)


def test_longest_awesome_all_distinct():
    assert longest_awesome("0123456789") == 1


def test_longest_awesome_bounds():
    s = "3242415"
    assert 1 <= longest_awesome(s) <= len(s)


# longest_equal_subarray

def test_longest_equal_all_equal():
    nums = [4, 4, 4, 4]
    assert longest_equal_subarray(nums, 0) == len(nums)


def test_longest_equal_large_k_is_max_frequency():
    nums = [1, 3, 2, 3, 1, 3]
    assert longest_equal_subarray(nums, len(nums)) == Counter(nums).most_common(1)[0][1]


def test_longest_equal_bounded_by_frequency():
    nums = [1, 1, 2, 2, 1, 1]
    for k in range(len(nums)):
        assert longest_equal_subarray(nums, k) <= Counter(nums).most_common(1)[0][1]


# maximize_win

def test_maximize_win_large_k_covers_all():
    positions = [1, 1, 2, 2, 3, 3, 5]
    assert maximize_win(positions, 100) == len(positions)


def test_maximize_win_same_position():
    positions = [7, 7, 7]
    assert maximize_win(positions, 0) == len(positions)


def test_maximize_win_monotone_in_k():
    positions = [1, 2, 3, 4, 10, 11, 20, 30]
    results = [maximize_win(positions, k) for k in range(12)]
    assert results == sorted(results)
    assert results[-1] <= len(positions)


def test_maximize_win_empty_raises():
    with pytest.raises(ValueError):
        maximize_win([], 1)


# most_competitive

def test_most_competitive_example():
    assert most_competitive([3, 5, 2, 6], 2) == [2, 6]


def test_most_competitive_full_length():
    nums = [2, 4, 3, 3, 5, 4, 9, 6]
    assert most_competitive(nums, len(nums)) == nums


def test_most_competitive_sorted_input():
    nums = [1, 2, 3, 4, 5]
    assert most_competitive(nums, 3) == nums[:3]


def test_most_competitive_is_subsequence_and_minimal():
    nums = [2, 4, 3, 3, 5, 4, 9, 6]
    result = most_competitive(nums, 4)
    assert len(result) == 4
    assert _is_subsequence(result, nums)
    assert result <= nums[:4]


def test_most_competitive_bad_k_raises():
    with pytest.raises(ValueError):
        most_competitive([1, 2], 3)


# take_characters

def test_take_characters_zero_k():
    assert take_characters("abcabc", 0) == 0


def test_take_characters_impossible():
    assert take_characters("aab", 1) == -1


def test_take_characters_whole_string():
    s = "abc"
    assert take_characters(s, 1) == len(s)


def test_take_characters_example():
    assert take_characters("aabaaaacaabc", 2) == 8


def test_take_characters_bounds():
    s = "cbbaacbbcaab"
    for k in range(1, 4):
        result = take_characters(s, k)
        assert 3 * k <= result <= len(s)