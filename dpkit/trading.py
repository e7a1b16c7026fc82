"""Best trading profit from a price series under various transaction rules."""

from __future__ import annotations

from functools import lru_cache
from typing import Sequence


def _check_k(k: int) -> None:
    if k < 0:
        raise ValueError("number of transactions must not be negative")


def max_profit_unlimited_memo(prices: Sequence[int]) -> int:
    """Best profit with any number of buy/sell pairs, by memoised recursion."""
    size = len(prices)

    @lru_cache(maxsize=None)
    def best(index: int, holding: bool) -> int:
        if index == size:
            return 0
        price = prices[index]
        if holding:
            return max(best(index + 1, True), price + best(index + 1, False))
        return max(best(index + 1, False), -price + best(index + 1, True))

    return best(0, False)


def max_profit_unlimited_table(prices: Sequence[int]) -> int:
    """Best profit with any number of buy/sell pairs, filling a full table."""
    table = [[0, 0] for _ in range(len(prices) + 1)]
    for index in range(len(prices) - 1, -1, -1):
        price = prices[index]
        ahead_free, ahead_holding = table[index + 1]
        table[index] = [
            max(ahead_free, -price + ahead_holding),
            max(ahead_holding, price + ahead_free),
        ]
    return table[0][0]


def max_profit_unlimited_compact(prices: Sequence[int]) -> int:
    """Best profit with any number of buy/sell pairs, keeping two values."""
    free, holding = 0, 0
    for price in reversed(prices):
        free, holding = max(free, -price + holding), max(holding, price + free)
    return free


def max_profit_two_memo(prices: Sequence[int]) -> int:
    """Best profit with at most two buy/sell pairs, by memoised recursion."""
    size = len(prices)

    @lru_cache(maxsize=None)
    def best(index: int, holding: bool, capacity: int) -> int:
        if index == size or capacity == 0:
            return 0
        price = prices[index]
        if holding:
            return max(
                best(index + 1, True, capacity),
                price + best(index + 1, False, capacity - 1),
            )
        return max(
            best(index + 1, False, capacity),
            -price + best(index + 1, True, capacity),
        )

    return best(0, False, 2)


def max_profit_two_table(prices: Sequence[int]) -> int:
    """Best profit with at most two buy/sell pairs, filling a full table."""
    size = len(prices)
    # table[index][holding][capacity]
    table = [[[0] * 3 for _ in range(2)] for _ in range(size + 1)]
    for index in range(size - 1, -1, -1):
        price = prices[index]
        ahead = table[index + 1]
        for capacity in (1, 2):
            table[index][0][capacity] = max(
                ahead[0][capacity], -price + ahead[1][capacity]
            )
            table[index][1][capacity] = max(
                ahead[1][capacity], price + ahead[0][capacity - 1]
            )
    return table[0][0][2]


def max_profit_two_compact(prices: Sequence[int]) -> int:
    """Best profit with at most two buy/sell pairs, keeping one layer."""
    ahead = [[0] * 3 for _ in range(2)]
    for price in reversed(prices):
        current = [[0] * 3 for _ in range(2)]
        for capacity in (1, 2):
            current[0][capacity] = max(ahead[0][capacity], -price + ahead[1][capacity])
            current[1][capacity] = max(
                ahead[1][capacity], price + ahead[0][capacity - 1]
            )
        ahead = current
    return ahead[0][2]


def max_profit_k_memo(k: int, prices: Sequence[int]) -> int:
    """Best profit with at most k buy/sell pairs, by memoised recursion."""
    _check_k(k)
    size = len(prices)
    steps = 2 * k

    @lru_cache(maxsize=None)
    def best(index: int, step: int) -> int:
        if index == size or step == steps:
            return 0
        price = prices[index]
        # Even steps are buys, odd steps are sells.
        gain = -price if step % 2 == 0 else price
        return max(gain + best(index + 1, step + 1), best(index + 1, step))

    return best(0, 0)


def max_profit_k_table(k: int, prices: Sequence[int]) -> int:
    """Best profit with at most k buy/sell pairs, filling a full table."""
    _check_k(k)
    steps = 2 * k
    table = [[0] * (steps + 1) for _ in range(len(prices) + 1)]
    for index in range(len(prices) - 1, -1, -1):
        price = prices[index]
        ahead, row = table[index + 1], table[index]
        for step in range(steps - 1, -1, -1):
            gain = -price if step % 2 == 0 else price
            row[step] = max(gain + ahead[step + 1], ahead[step])
    return table[0][0]


def max_profit_k_compact(k: int, prices: Sequence[int]) -> int:
    """Best profit with at most k buy/sell pairs, keeping one row."""
    _check_k(k)
    steps = 2 * k
    after = [0] * (steps + 1)
    for price in reversed(prices):
        current = [0] * (steps + 1)
        for step in range(steps - 1, -1, -1):
            gain = -price if step % 2 == 0 else price
            current[step] = max(gain + after[step + 1], after[step])
        after = current
    return after[0]


def max_profit_fee_memo(prices: Sequence[int], fee: int) -> int:
    """Best profit paying fee on every sale, by memoised recursion."""
    size = len(prices)

    @lru_cache(maxsize=None)
    def best(index: int, can_buy: bool) -> int:
        if index == size:
            return 0
        price = prices[index]
        if can_buy:
            return max(-price + best(index + 1, False), best(index + 1, True))
        return max(price - fee + best(index + 1, True), best(index + 1, False))

    return best(0, True)


def max_profit_fee_table(prices: Sequence[int], fee: int) -> int:
    """Best profit paying fee on every sale, filling a full table."""
    # table[index] = [holding, can_buy]
    table = [[0, 0] for _ in range(len(prices) + 1)]
    for index in range(len(prices) - 1, -1, -1):
        price = prices[index]
        ahead_holding, ahead_can_buy = table[index + 1]
        table[index] = [
            max(price - fee + ahead_can_buy, ahead_holding),
            max(-price + ahead_holding, ahead_can_buy),
        ]
    return table[0][1]


def max_profit_fee_compact(prices: Sequence[int], fee: int) -> int:
    """Best profit paying fee on every sale, keeping two values."""
    can_buy, holding = 0, 0
    for price in reversed(prices):
        can_buy, holding = (
            max(-price + holding, can_buy),
            max(price - fee + can_buy, holding),
        )
    return can_buy