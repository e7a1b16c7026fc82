"""Subset-sum, coin-change, increasing-subsequence and divisible-subset problems."""

from __future__ import annotations

from bisect import bisect_left
from functools import lru_cache
from typing import Sequence


def _half_of_sum(nums: Sequence[int]) -> int | None:
    """Return half the total of nums, or None when the total is odd."""
    total = sum(nums)
    if total % 2 == 1:
        return None
    return total // 2


def can_partition_memo(nums: Sequence[int]) -> bool:
    """Whether nums splits into two parts of equal sum, by memoised recursion."""
    half = _half_of_sum(nums)
    if half is None:
        return False

    @lru_cache(maxsize=None)
    def reachable(index: int, target: int) -> bool:
        if target == 0:
            return True
        if index == 0:
            return nums[0] == target
        if reachable(index - 1, target):
            return True
        value = nums[index]
        return value <= target and reachable(index - 1, target - value)

    return reachable(len(nums) - 1, half)


def can_partition_table(nums: Sequence[int]) -> bool:
    """Whether nums splits into two parts of equal sum, filling a full table."""
    if not nums:
        raise ValueError("nums must not be empty")
    half = _half_of_sum(nums)
    if half is None:
        return False
    table = [[False] * (half + 1) for _ in nums]
    for row in table:
        row[0] = True
    if nums[0] <= half:
        table[0][nums[0]] = True
    for index in range(1, len(nums)):
        value = nums[index]
        above, row = table[index - 1], table[index]
        for target in range(1, half + 1):
            taken = value <= target and above[target - value]
            row[target] = above[target] or taken
    return table[-1][half]


def can_partition_compact(nums: Sequence[int]) -> bool:
    """Whether nums splits into two parts of equal sum, keeping one row."""
    if not nums:
        raise ValueError("nums must not be empty")
    half = _half_of_sum(nums)
    if half is None:
        return False
    prev = [False] * (half + 1)
    prev[0] = True
    if nums[0] <= half:
        prev[nums[0]] = True
    for value in nums[1:]:
        current = [False] * (half + 1)
        current[0] = True
        for target in range(1, half + 1):
            taken = value <= target and prev[target - value]
            current[target] = prev[target] or taken
        prev = current
    return prev[half]


def _check_change_args(amount: int, coins: Sequence[int]) -> None:
    if not coins:
        raise ValueError("coins must not be empty")
    if amount < 0:
        raise ValueError("amount must not be negative")


def change_memo(amount: int, coins: Sequence[int]) -> int:
    """Number of coin combinations summing to amount, by memoised recursion."""
    _check_change_args(amount, coins)

    @lru_cache(maxsize=None)
    def ways(index: int, target: int) -> int:
        if index == 0:
            return 1 if target % coins[0] == 0 else 0
        skip = ways(index - 1, target)
        coin = coins[index]
        pick = ways(index, target - coin) if coin <= target else 0
        return skip + pick

    return ways(len(coins) - 1, amount)


def change_table(amount: int, coins: Sequence[int]) -> int:
    """Number of coin combinations summing to amount, filling a full table."""
    _check_change_args(amount, coins)
    table = [[0] * (amount + 1) for _ in coins]
    for row in table:
        row[0] = 1
    for target in range(1, amount + 1):
        if target % coins[0] == 0:
            table[0][target] = 1
    for index in range(1, len(coins)):
        coin = coins[index]
        above, row = table[index - 1], table[index]
        for target in range(1, amount + 1):
            pick = row[target - coin] if coin <= target else 0
            row[target] = above[target] + pick
    return table[-1][amount]


def change_compact(amount: int, coins: Sequence[int]) -> int:
    """Number of coin combinations summing to amount, keeping one row."""
    _check_change_args(amount, coins)
    first = coins[0]
    prev = [1 if target % first == 0 else 0 for target in range(amount + 1)]
    for coin in coins[1:]:
        current = [0] * (amount + 1)
        for target in range(amount + 1):
            pick = current[target - coin] if coin <= target else 0
            current[target] = prev[target] + pick
        prev = current
    return prev[amount]


def length_of_lis_memo(nums: Sequence[int]) -> int:
    """Length of the longest strictly increasing subsequence, by memoised recursion."""
    size = len(nums)

    @lru_cache(maxsize=None)
    def longest(index: int, prev_index: int) -> int:
        if index == size:
            return 0
        skip = longest(index + 1, prev_index)
        if prev_index == -1 or nums[index] > nums[prev_index]:
            return max(skip, 1 + longest(index + 1, index))
        return skip

    return longest(0, -1)


def length_of_lis_table(nums: Sequence[int]) -> int:
    """Length of the longest strictly increasing subsequence, filling a full table."""
    size = len(nums)
    table = [[0] * (size + 1) for _ in range(size + 1)]
    for index in range(size - 1, -1, -1):
        below = table[index + 1]
        for prev_index in range(index - 1, -2, -1):
            skip = below[prev_index + 1]
            pick = 0
            if prev_index == -1 or nums[index] > nums[prev_index]:
                pick = 1 + below[index + 1]
            table[index][prev_index + 1] = max(pick, skip)
    return table[0][0]


def length_of_lis_compact(nums: Sequence[int]) -> int:
    """Length of the longest strictly increasing subsequence, by patience sorting."""
    if not nums:
        raise ValueError("nums must not be empty")
    tails = [nums[0]]
    for value in nums[1:]:
        if value > tails[-1]:
            tails.append(value)
        else:
            tails[bisect_left(tails, value)] = value
    return len(tails)


def largest_divisible_subset(nums: Sequence[int]) -> list[int]:
    """Largest subset in which every pair divides one way; returned ascending."""
    if not nums:
        raise ValueError("nums must not be empty")
    values = sorted(nums)
    lengths = [1] * len(values)
    parents = list(range(len(values)))
    best_length, last = 1, 0
    for i, value in enumerate(values):
        for j in range(i):
            if value % values[j] == 0 and lengths[i] < lengths[j] + 1:
                lengths[i] = lengths[j] + 1
                parents[i] = j
        if lengths[i] > best_length:
            best_length, last = lengths[i], i
    chain = [values[last]]
    while parents[last] != last:
        last = parents[last]
        chain.append(values[last])
    chain.reverse()
    return chain