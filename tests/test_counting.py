import random

import pytest

from puzzlekit.counting import (
    convert_date_to_binary,
    difference_of_sum,
    discount_prices,
    edge_score,
    find_judge,
    find_maximum_score,
    find_missing_and_repeated_values,
    get_sneaky_numbers,
    max_div_score,
    number_of_pairs,
)


def test_difference_of_sum_single_digits_vanish():
    assert all(difference_of_sum([n]) == 0 for n in range(10))


@pytest.mark.parametrize("nums", [[1, 15, 6, 3], [123, 4567], [99, 1000, 7]])
def test_difference_of_sum_multiple_of_nine(nums):
    assert difference_of_sum(nums) % 9 == 0


def test_edge_score_single_target():
    assert edge_score([2, 2, 2]) == 2


def test_edge_score_tie_prefers_smaller_node():
    # node 1 receives label 2, node 2 receives label 2 as well
    assert edge_score([1, 2, 1, 2][:2] + [1, 2]) == edge_score([1, 2, 1, 2])
    assert edge_score([3, 3, 3, 3]) == 3


def test_find_judge_single_person():
    assert find_judge(1, []) == 1


def test_find_judge_simple():
    assert find_judge(2, [[1, 2]]) == 2


def test_find_judge_mutual_trust():
    assert find_judge(2, [[1, 2], [2, 1]]) == -1


def test_find_judge_too_few_relations():
    assert find_judge(3, [[1, 3]]) == -1


def test_find_judge_three_people():
    assert find_judge(3, [[1, 3], [2, 3]]) == 3


def test_find_missing_and_repeated_values():
    values = list(range(1, 10))
    random.Random(7).shuffle(values)
    missing = values[4]
    repeated = values[0]
    values[4] = repeated
    grid = [values[0:3], values[3:6], values[6:9]]
    assert find_missing_and_repeated_values(grid) == [repeated, missing]


def test_max_div_score_prefers_smallest_on_tie():
    assert max_div_score([1], [7, 5]) == 5


def test_max_div_score_highest_count():
    assert max_div_score([4, 8, 3], [3, 2]) == 2


def test_number_of_pairs_example():
    assert number_of_pairs([1, 3, 4], [1, 3, 4], 1) == 5


def test_number_of_pairs_nothing_divisible():
    assert number_of_pairs([3, 5], [1], 2) == 0


def test_discount_prices_example():
    sentence = "there are $1 $2 and 5$ candies in the shop"
    assert discount_prices(sentence, 50) == "there are $0.50 $1.00 and 5$ candies in the shop"


def test_discount_prices_leaves_non_prices():
    sentence = "$ $$ $1a 33$  spaced "
    assert discount_prices(sentence, 20) == sentence


def test_discount_prices_zero_discount_formats():
    assert discount_prices("$5 $12", 0) == "$5.00 $12.00"


def test_convert_date_to_binary_example():
    assert convert_date_to_binary("2080-02-29") == "100000100000-10-11101"


def test_convert_date_to_binary_round_trip():
    year, month, day = convert_date_to_binary("1999-12-31").split("-")
    assert (int(year, 2), int(month, 2), int(day, 2)) == (1999, 12, 31)


def test_find_maximum_score_ignores_last_element():
    assert find_maximum_score([1, 3, 1, 5]) == find_maximum_score([1, 3, 1, 100])


def test_find_maximum_score_first_is_max():
    nums = [9, 1, 2, 3]
    assert find_maximum_score(nums) == nums[0] * (len(nums) - 1)


def test_find_maximum_score_single():
    assert find_maximum_score([42]) == 0


def test_get_sneaky_numbers():
    nums = list(range(10)) + [3, 7]
    random.Random(1).shuffle(nums)
    assert get_sneaky_numbers(nums) == [3, 7]


def test_get_sneaky_numbers_small():
    assert get_sneaky_numbers([0, 1, 1, 0]) == [0, 1]