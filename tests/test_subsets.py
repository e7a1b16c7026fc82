from collections import Counter

import pytest
from hypothesis import given
from hypothesis import strategies as st

from dpkit.subsets import (
    can_partition_compact,
    can_partition_memo,
    can_partition_table,
    change_compact,
    change_memo,
    change_table,
    largest_divisible_subset,
    length_of_lis_compact,
    length_of_lis_memo,
    length_of_lis_table,
)

small_lists = st.lists(st.integers(min_value=1, max_value=20), min_size=1, max_size=8)
coin_sets = st.lists(
    st.integers(min_value=1, max_value=10), min_size=1, max_size=4, unique=True
)
amounts = st.integers(min_value=0, max_value=30)
any_ints = st.lists(st.integers(min_value=-50, max_value=50), min_size=1, max_size=8)


def test_partition_worked_example():
    nums = [1, 5, 11, 5]
    assert can_partition_memo(nums) is True
    assert can_partition_table(nums) is True
    assert can_partition_compact(nums) is True


@given(nums=small_lists)
def test_partition_of_doubled_list_is_possible(nums):
    doubled = nums + nums
    assert can_partition_memo(doubled) is True
    assert can_partition_table(doubled) is True
    assert can_partition_compact(doubled) is True


@given(nums=small_lists)
def test_partition_with_odd_sum_is_impossible(nums):
    if sum(nums) % 2 == 0:
        nums = nums + [1]
    assert can_partition_memo(nums) is False
    assert can_partition_table(nums) is False
    assert can_partition_compact(nums) is False


@given(nums=small_lists)
def test_partition_variants_agree(nums):
    memo = can_partition_memo(nums)
    assert can_partition_table(nums) == memo
    assert can_partition_compact(nums) == memo


def test_partition_rejects_empty():
    with pytest.raises(ValueError):
        can_partition_table([])
    with pytest.raises(ValueError):
        can_partition_compact([])


def test_change_worked_example():
    assert change_memo(5, [1, 2, 5]) == 4
    assert change_table(5, [1, 2, 5]) == 4
    assert change_compact(5, [1, 2, 5]) == 4


@given(coins=coin_sets)
def test_change_of_zero_amount_has_one_way(coins):
    assert change_memo(0, coins) == 1
    assert change_table(0, coins) == 1
    assert change_compact(0, coins) == 1


@given(amount=amounts)
def test_change_with_unit_coin_has_one_way(amount):
    assert change_memo(amount, [1]) == 1
    assert change_table(amount, [1]) == 1
    assert change_compact(amount, [1]) == 1


@given(amount=amounts, coins=coin_sets)
def test_change_variants_agree(amount, coins):
    memo = change_memo(amount, coins)
    assert change_table(amount, coins) == memo
    assert change_compact(amount, coins) == memo


@given(amount=amounts, coins=coin_sets)
def test_change_ignores_coin_order(amount, coins):
    assert change_table(amount, coins) == change_table(amount, list(reversed(coins)))


@given(amount=amounts, coins=coin_sets, extra=st.integers(min_value=11, max_value=40))
def test_change_never_drops_with_more_coins(amount, coins, extra):
    assert change_compact(amount, coins + [extra]) >= change_compact(amount, coins)


def test_change_rejects_empty_coins():
    with pytest.raises(ValueError):
        change_memo(5, [])
    with pytest.raises(ValueError):
        change_table(5, [])
    with pytest.raises(ValueError):
        change_compact(5, [])


def test_change_rejects_negative_amount():
    with pytest.raises(ValueError):
        change_memo(-1, [1, 2])
    with pytest.raises(ValueError):
        change_table(-1, [1, 2])
    with pytest.raises(ValueError):
        change_compact(-1, [1, 2])


def test_lis_worked_example():
    nums = [10, 9, 2, 5, 3, 7, 101, 18]
    assert length_of_lis_memo(nums) == 4
    assert length_of_lis_table(nums) == 4
    assert length_of_lis_compact(nums) == 4


@given(nums=st.sets(st.integers(min_value=-50, max_value=50), min_size=1, max_size=8))
def test_lis_of_increasing_run_is_its_length(nums):
    ordered = sorted(nums)
    assert length_of_lis_memo(ordered) == len(ordered)
    assert length_of_lis_table(ordered) == len(ordered)
    assert length_of_lis_compact(ordered) == len(ordered)


@given(nums=any_ints)
def test_lis_of_non_increasing_run_is_one(nums):
    descending = sorted(nums, reverse=True)
    assert length_of_lis_memo(descending) == 1
    assert length_of_lis_table(descending) == 1
    assert length_of_lis_compact(descending) == 1


@given(nums=any_ints)
def test_lis_variants_agree_and_are_bounded(nums):
    length = length_of_lis_memo(nums)
    assert length_of_lis_table(nums) == length
    assert length_of_lis_compact(nums) == length
    assert 1 <= length <= len(nums)


def test_lis_of_empty_is_zero_for_recursive_and_table():
    assert length_of_lis_memo([]) == length_of_lis_table([]) == 0


def test_lis_compact_rejects_empty():
    with pytest.raises(ValueError):
        length_of_lis_compact([])


def test_divisible_subset_of_chain_is_whole_chain():
    assert largest_divisible_subset([8, 1, 4, 2]) == [1, 2, 4, 8]


@given(nums=st.lists(st.integers(min_value=1, max_value=100), min_size=1, max_size=8, unique=True))
def test_divisible_subset_invariants(nums):
    result = largest_divisible_subset(nums)
    assert result
    assert result == sorted(result)
    assert not Counter(result) - Counter(nums)
    for small, big in zip(result, result[1:]):
        assert big % small == 0


@given(nums=st.lists(st.integers(min_value=1, max_value=100), min_size=1, max_size=8, unique=True))
def test_divisible_subset_at_least_as_long_as_one_plus_ones(nums):
    result = largest_divisible_subset(nums + [1] if 1 not in nums else nums)
    assert result[0] == 1


def test_divisible_subset_leaves_input_untouched():
    nums = [4, 2, 1]
    largest_divisible_subset(nums)
    assert nums == [4, 2, 1]


def test_divisible_subset_rejects_empty():
    with pytest.raises(ValueError):
        largest_divisible_subset([])