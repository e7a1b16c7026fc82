"""Common subsequences, supersequences, distinct subsequences and edit distance."""

from __future__ import annotations

from functools import lru_cache


def _lcs_table(text1: str, text2: str) -> list[list[int]]:
    """Full LCS table: entry [i][j] is the LCS length of text1[:i] and text2[:j]."""
    table = [[0] * (len(text2) + 1) for _ in range(len(text1) + 1)]
    for i, char1 in enumerate(text1, start=1):
        above, row = table[i - 1], table[i]
        for j, char2 in enumerate(text2, start=1):
            if char1 == char2:
                row[j] = 1 + above[j - 1]
            else:
                row[j] = max(above[j], row[j - 1])
    return table


def longest_common_subsequence_memo(text1: str, text2: str) -> int:
    """Length of the longest common subsequence, by memoised recursion."""

    @lru_cache(maxsize=None)
    def longest(i: int, j: int) -> int:
        if i < 0 or j < 0:
            return 0
        if text1[i] == text2[j]:
            return 1 + longest(i - 1, j - 1)
        return max(longest(i - 1, j), longest(i, j - 1))

    return longest(len(text1) - 1, len(text2) - 1)


def longest_common_subsequence_table(text1: str, text2: str) -> int:
    """Length of the longest common subsequence, filling a full table."""
    return _lcs_table(text1, text2)[-1][-1]


def longest_common_subsequence_compact(text1: str, text2: str) -> int:
    """Length of the longest common subsequence, keeping one row at a time."""
    prev = [0] * (len(text2) + 1)
    for char1 in text1:
        current = [0] * (len(text2) + 1)
        for j, char2 in enumerate(text2, start=1):
            if char1 == char2:
                current[j] = 1 + prev[j - 1]
            else:
                current[j] = max(prev[j], current[j - 1])
        prev = current
    return prev[-1]


def longest_palindrome_subseq(s: str) -> int:
    """Length of the longest palindromic subsequence of s."""
    return longest_common_subsequence_table(s[::-1], s)


def min_insertions_table(s: str) -> int:
    """Fewest insertions that make s a palindrome, using a full table."""
    return len(s) - longest_common_subsequence_table(s[::-1], s)


def min_insertions_compact(s: str) -> int:
    """Fewest insertions that make s a palindrome, keeping one row at a time."""
    return len(s) - longest_common_subsequence_compact(s[::-1], s)


def shortest_common_supersequence(str1: str, str2: str) -> str:
    """A shortest string that has both str1 and str2 as subsequences."""
    table = _lcs_table(str1, str2)
    i, j = len(str1), len(str2)
    built: list[str] = []
    while i > 0 and j > 0:
        if str1[i - 1] == str2[j - 1]:
            built.append(str1[i - 1])
            i -= 1
            j -= 1
        elif table[i - 1][j] > table[i][j - 1]:
            built.append(str1[i - 1])
            i -= 1
        else:
            built.append(str2[j - 1])
            j -= 1
    built.extend(reversed(str1[:i]))
    built.extend(reversed(str2[:j]))
    return "".join(reversed(built))


def num_distinct_memo(s: str, t: str) -> int:
    """Number of distinct ways t occurs as a subsequence of s, by memoised recursion."""

    @lru_cache(maxsize=None)
    def ways(i: int, j: int) -> int:
        if j < 0:
            return 1
        if i < 0:
            return 0
        if s[i] == t[j]:
            return ways(i - 1, j - 1) + ways(i - 1, j)
        return ways(i - 1, j)

    return ways(len(s) - 1, len(t) - 1)


def num_distinct_table(s: str, t: str) -> int:
    """Number of distinct ways t occurs as a subsequence of s, filling a full table."""
    table = [[0] * (len(t) + 1) for _ in range(len(s) + 1)]
    for row in table:
        row[0] = 1
    for i, char_s in enumerate(s, start=1):
        above, row = table[i - 1], table[i]
        for j, char_t in enumerate(t, start=1):
            row[j] = above[j] + (above[j - 1] if char_s == char_t else 0)
    return table[-1][-1]


def num_distinct_compact(s: str, t: str) -> int:
    """Number of distinct ways t occurs as a subsequence of s, keeping one row."""
    prev = [1] + [0] * len(t)
    for char_s in s:
        current = [1] + [0] * len(t)
        for j, char_t in enumerate(t, start=1):
            current[j] = prev[j] + (prev[j - 1] if char_s == char_t else 0)
        prev = current
    return prev[-1]


def min_distance_memo(word1: str, word2: str) -> int:
    """Edit distance between two words, by memoised recursion."""

    @lru_cache(maxsize=None)
    def distance(i: int, j: int) -> int:
        if i == 0:
            return j
        if j == 0:
            return i
        if word1[i - 1] == word2[j - 1]:
            return distance(i - 1, j - 1)
        return 1 + min(distance(i, j - 1), distance(i - 1, j), distance(i - 1, j - 1))

    return distance(len(word1), len(word2))


def min_distance_table(word1: str, word2: str) -> int:
    """Edit distance between two words, filling a full table."""
    table = [[0] * (len(word2) + 1) for _ in range(len(word1) + 1)]
    table[0] = list(range(len(word2) + 1))
    for i, row in enumerate(table):
        row[0] = i
    for i, char1 in enumerate(word1, start=1):
        above, row = table[i - 1], table[i]
        for j, char2 in enumerate(word2, start=1):
            if char1 == char2:
                row[j] = above[j - 1]
            else:
                row[j] = 1 + min(row[j - 1], above[j], above[j - 1])
    return table[-1][-1]


def min_distance_compact(word1: str, word2: str) -> int:
    """Edit distance between two words, keeping one row at a time."""
    prev = list(range(len(word2) + 1))
    for i, char1 in enumerate(word1, start=1):
        current = [i] + [0] * len(word2)
        for j, char2 in enumerate(word2, start=1):
            if char1 == char2:
                current[j] = prev[j - 1]
            else:
                current[j] = 1 + min(current[j - 1], prev[j], prev[j - 1])
        prev = current
    return prev[-1]