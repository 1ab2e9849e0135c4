from collections import Counter

import pytest
from hypothesis import given
from hypothesis import strategies as st

from dsakit.hashing import (
    count_pairs_with_difference,
    count_zero_sum_pairs,
    extract_unique,
    longest_consecutive_sequence,
    longest_zero_sum_subarray,
    most_frequent,
    remove_duplicates,
)

small_ints = st.lists(st.integers(min_value=-20, max_value=20), max_size=30)


def test_extract_unique_example():
    assert extract_unique("abcabc") == "abc"


@given(st.text(alphabet="abcdxyz", max_size=40))
def test_extract_unique_keeps_first_occurrences(text):
    result = extract_unique(text)
    assert len(set(result)) == len(result)
    assert set(result) == set(text)
    positions = [text.index(ch) for ch in result]
    assert positions == sorted(positions)


def test_remove_duplicates_example():
    assert remove_duplicates([1, 1, 2, 1, 2]) == [1, 2]


@given(small_ints)
def test_remove_duplicates_keeps_first_occurrences(values):
    result = remove_duplicates(values)
    assert len(set(result)) == len(result)
    assert set(result) == set(values)
    positions = [values.index(v) for v in result]
    assert positions == sorted(positions)


def test_longest_consecutive_single_element():
    assert longest_consecutive_sequence([7]) == [7]


def test_longest_consecutive_tie_goes_to_earliest():
    assert longest_consecutive_sequence([10, 11, 1, 2]) == [10, 11]


def test_longest_consecutive_empty_raises():
    with pytest.raises(ValueError):
        longest_consecutive_sequence([])


@given(st.sets(st.integers(min_value=-30, max_value=30), min_size=1, max_size=25))
def test_longest_consecutive_is_a_maximal_run(unique):
    values = list(unique)
    result = longest_consecutive_sequence(values)
    start, end = result[0], result[-1]
    assert len(result) == (1 if start == end else 2)
    assert all(v in unique for v in range(start, end + 1))
    assert start - 1 not in unique and end + 1 not in unique
    length = end - start + 1
    for v in values:
        assert not all(w in unique for w in range(v, v + length + 1))


@given(small_ints)
def test_zero_sum_subarray_exists(values):
    length = longest_zero_sum_subarray(values)
    assert 0 <= length <= len(values)
    if length:
        assert any(
            sum(values[i : i + length]) == 0 for i in range(len(values) - length + 1)
        )


@given(small_ints)
def test_zero_sum_whole_array(values):
    closed = values + [-sum(values)]
    assert longest_zero_sum_subarray(closed) == len(closed)


@given(st.lists(st.integers(min_value=-5, max_value=5), min_size=1, max_size=30))
def test_most_frequent_is_first_of_the_most_common(values):
    result = most_frequent(values)
    counts = Counter(values)
    top = max(counts.values())
    assert counts[result] == top
    tied = [v for v in counts if counts[v] == top]
    assert values.index(result) == min(values.index(v) for v in tied)


def test_most_frequent_empty_raises():
    with pytest.raises(ValueError):
        most_frequent([])


def test_zero_sum_pairs_source_example():
    assert count_zero_sum_pairs([2, 1, -2, 2, 3]) == 2


@given(st.lists(st.integers(min_value=1, max_value=50), max_size=20))
def test_zero_sum_pairs_none_for_positive(values):
    assert count_zero_sum_pairs(values) == 0


@given(small_ints, st.integers(min_value=-20, max_value=20).filter(bool))
def test_zero_sum_pairs_grows_by_partners(values, extra):
    before = count_zero_sum_pairs(values)
    assert count_zero_sum_pairs(values + [extra]) == before + values.count(-extra)


@given(small_ints)
def test_zero_sum_pairs_order_independent(values):
    assert count_zero_sum_pairs(values) == count_zero_sum_pairs(values[::-1])


@given(small_ints, st.integers(min_value=-10, max_value=10))
def test_difference_pairs_sign_of_k_ignored(values, k):
    assert count_pairs_with_difference(values, k) == count_pairs_with_difference(
        values, -k
    )


@given(small_ints, st.integers(min_value=0, max_value=10), st.integers(-50, 50))
def test_difference_pairs_shift_invariant(values, k, shift):
    shifted = [v + shift for v in values]
    assert count_pairs_with_difference(shifted, k) == count_pairs_with_difference(
        values, k
    )


@given(st.integers(min_value=1, max_value=30), st.integers(min_value=1, max_value=30))
def test_difference_pairs_over_a_range(n, gap):
    expected = max(n - gap, 0)
    assert count_pairs_with_difference(list(range(n)), gap) == expected