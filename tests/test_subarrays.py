import random
from collections import Counter

import pytest
from hypothesis import given, strategies as st

from dsakit.subarrays import (
    count_subarrays_with_xor,
    four_sum,
    has_two_sum,
    longest_consecutive,
    longest_unique_substring,
    longest_zero_sum_subarray,
)

small_ints = st.integers(min_value=-20, max_value=20)


# has_two_sum


def test_two_sum_worked_example():
    assert has_two_sum([2, 6, 5, 8, 11], 14) is True


def test_two_sum_does_not_modify_input():
    values = [2, 6, 5, 8, 11]
    snapshot = list(values)
    has_two_sum(values, 14)
    assert values == snapshot


@pytest.mark.parametrize("values", [[], [7]])
def test_two_sum_needs_two_values(values):
    assert has_two_sum(values, 14) is False


def test_two_sum_same_element_not_used_twice():
    assert has_two_sum([7], 14) is False
    assert has_two_sum([7, 7], 14) is True


@given(st.lists(small_ints, min_size=2, max_size=20), st.data())
def test_two_sum_finds_any_real_pair(values, data):
    i, j = data.draw(
        st.lists(
            st.integers(min_value=0, max_value=len(values) - 1),
            min_size=2,
            max_size=2,
            unique=True,
        )
    )
    assert has_two_sum(values, values[i] + values[j]) is True


@given(st.lists(small_ints, min_size=1, max_size=20))
def test_two_sum_target_out_of_reach(values):
    assert has_two_sum(values, 2 * max(values) + 1) is False


# four_sum


def test_four_sum_worked_example():
    assert four_sum([4, 3, 3, 4, 4, 2, 1, 2, 1, 1], 9) == [
        (1, 1, 3, 4),
        (1, 2, 2, 4),
        (1, 2, 3, 3),
    ]


def test_four_sum_does_not_modify_input():
    values = [4, 3, 3, 4, 4, 2, 1, 2, 1, 1]
    snapshot = list(values)
    four_sum(values, 9)
    assert values == snapshot


def test_four_sum_too_few_values():
    assert four_sum([1, 2, 3], 6) == []


@given(st.lists(small_ints, max_size=9), small_ints)
def test_four_sum_results_are_valid(values, target):
    result = four_sum(values, target)
    available = Counter(values)
    assert len(result) == len(set(result))
    assert result == sorted(result)
    for quad in result:
        assert sum(quad) == target
        assert list(quad) == sorted(quad)
        assert not Counter(quad) - available


@given(st.lists(small_ints, min_size=4, max_size=9), st.data())
def test_four_sum_finds_any_real_quadruplet(values, data):
    indices = data.draw(
        st.lists(
            st.integers(min_value=0, max_value=len(values) - 1),
            min_size=4,
            max_size=4,
            unique=True,
        )
    )
    chosen = sorted(values[i] for i in indices)
    assert tuple(chosen) in four_sum(values, sum(chosen))


# count_subarrays_with_xor


def test_xor_count_worked_example():
    assert count_subarrays_with_xor([4, 2, 2, 6, 4], 6) == 4


def test_xor_count_empty():
    assert count_subarrays_with_xor([], 5) == 0


@given(st.lists(st.integers(min_value=0, max_value=15), min_size=1, max_size=30))
def test_xor_count_whole_array_is_counted(values):
    total = 0
    for value in values:
        total ^= value
    assert count_subarrays_with_xor(values, total) >= 1


@given(st.lists(st.integers(min_value=0, max_value=15), max_size=30),
       st.integers(min_value=0, max_value=15))
def test_xor_count_invariant_under_reversal(values, k):
    assert count_subarrays_with_xor(values, k) == count_subarrays_with_xor(
        list(reversed(values)), k
    )


@given(st.lists(st.integers(min_value=0, max_value=15), max_size=30),
       st.integers(min_value=0, max_value=15))
def test_xor_count_bounded_by_number_of_subarrays(values, k):
    n = len(values)
    assert 0 <= count_subarrays_with_xor(values, k) <= n * (n + 1) // 2


# longest_zero_sum_subarray


def test_zero_sum_whole_worked_example_suffix():
    values = [9, -3, 3, -1, 6, -5]
    assert longest_zero_sum_subarray(values) == len(values) - 1


@given(st.lists(st.integers(min_value=1, max_value=50), max_size=20))
def test_zero_sum_none_when_all_positive(values):
    assert longest_zero_sum_subarray(values) == 0


@given(st.lists(small_ints, max_size=20))
def test_zero_sum_whole_list_when_balanced(values):
    balanced = values + [-sum(values)]
    assert longest_zero_sum_subarray(balanced) == len(balanced)


@given(st.lists(small_ints, max_size=20))
def test_zero_sum_invariant_under_reversal(values):
    result = longest_zero_sum_subarray(values)
    assert result == longest_zero_sum_subarray(list(reversed(values)))
    assert 0 <= result <= len(values)


# longest_consecutive


def test_consecutive_worked_example():
    values = [100, 200, 1, 2, 3, 4]
    assert longest_consecutive(values) == len(values) - 2


def test_consecutive_empty():
    assert longest_consecutive([]) == 0


@given(st.integers(min_value=-100, max_value=100), st.integers(min_value=1, max_value=30),
       st.randoms(use_true_random=False))
def test_consecutive_shuffled_run(start, length, rng: random.Random):
    values = list(range(start, start + length))
    rng.shuffle(values)
    assert longest_consecutive(values) == length


@given(st.lists(small_ints, max_size=30))
def test_consecutive_ignores_duplicates(values):
    assert longest_consecutive(values + values) == longest_consecutive(values)
    assert longest_consecutive(values) <= len(set(values))


# longest_unique_substring


def test_unique_substring_worked_example():
    assert longest_unique_substring("takeUforward") == 9


def test_unique_substring_empty():
    assert longest_unique_substring("") == 0


@given(st.text(max_size=40))
def test_unique_substring_bounded_by_alphabet(text):
    result = longest_unique_substring(text)
    assert result <= len(set(text))
    if text:
        assert result >= 1


@given(st.sets(st.characters(), min_size=1, max_size=20))
def test_unique_substring_distinct_characters(chars):
    text = "".join(sorted(chars))
    assert longest_unique_substring(text) == len(text)
    assert longest_unique_substring(text * 2) == len(text)


def test_unique_substring_handles_non_ascii():
    text = "ééàü"
    assert longest_unique_substring(text) == len(text) - 1