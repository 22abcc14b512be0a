"""Dynamic-programming and memoised-search puzzles."""

from __future__ import annotations

from bisect import insort
from collections.abc import Sequence
from functools import cache

MOD = 10**9 + 7
SCORE_FLOOR = -(10**11)
PICKS = 4


def count_quadruplets(nums: Sequence[int]) -> int:
    """Count i<j<k<l with nums[i] < nums[k] < nums[j] < nums[l] in a permutation of 1..n."""
    n = len(nums)
    if n < PICKS:
        return 0

    left = [[0] * (n + 1) for _ in range(n + 1)]
    right_values = [nums[-1]]
    for j in range(n - 3, 0, -1):
        insort(right_values, nums[j + 1])
        pivot = nums[j]
        row = left[pivot]
        for rank, value in enumerate(right_values, start=1):
            if value >= pivot:
                break
            row[value] = value - rank

    total = 0
    # Negated values keep the list in descending order of the originals.
    left_values = [-nums[0]]
    for k in range(2, n - 1):
        insort(left_values, -nums[k - 1])
        pivot = nums[k]
        for rank, negated in enumerate(left_values, start=1):
            value = -negated
            if value <= pivot:
                break
            total += (n - value - rank + 1) * left[value][pivot]
    return total


def count_quadruplets_fast(nums: Sequence[int]) -> int:
    """Same count as :func:`count_quadruplets`, in quadratic time without sorting."""
    n = len(nums)
    if n < PICKS:
        return 0

    left = [[0] * (n + 1) for _ in range(n + 1)]
    seen = [False] * (n + 1)
    seen[nums[-1]] = True
    for j in range(n - 3, 0, -1):
        seen[nums[j + 1]] = True
        row = left[nums[j]]
        missing = 0
        for value in range(1, nums[j]):
            if seen[value]:
                row[value] = missing
            else:
                missing += 1

    total = 0
    seen = [False] * (n + 1)
    seen[nums[0]] = True
    for k in range(2, n - 1):
        seen[nums[k - 1]] = True
        pivot = nums[k]
        missing = 0
        for value in range(n, pivot, -1):
            if seen[value]:
                total += missing * left[value][pivot]
            else:
                missing += 1
    return total


def count_special_numbers(n: int) -> int:
    """Count integers in [1, n] whose decimal digits are all distinct."""
    if n < 0:
        raise ValueError("n must be non-negative")
    digits = str(n)

    @cache
    def search(i: int, mask: int, limited: bool, started: bool) -> int:
        if i == len(digits):
            return int(started)
        total = search(i + 1, mask, False, False) if not started else 0
        upper = int(digits[i]) if limited else 9
        for digit in range(0 if started else 1, upper + 1):
            if not (mask >> digit) & 1:
                total += search(
                    i + 1, mask | (1 << digit), limited and digit == upper, True
                )
        return total

    return search(0, 0, True, False)


def mincost_tickets(days: Sequence[int], costs: Sequence[int]) -> int:
    """Cheapest way to cover the travel ``days`` with 1-, 7- and 30-day passes."""
    if not days:
        return 0
    dp = [0] * 366
    j = 0
    for i in range(1, 366):
        if i == days[j]:
            j += 1
            dp[i] = min(
                dp[i - 1] + costs[0],
                dp[max(i - 7, 0)] + costs[1],
                dp[max(i - 30, 0)] + costs[2],
            )
            if j == len(days):
                return dp[i]
        else:
            dp[i] = dp[i - 1]
    return dp[365]


def number_of_permutations(n: int, requirements: Sequence[Sequence[int]]) -> int:
    """Permutations of 0..n-1 whose prefixes have the required inversion counts."""
    required: dict[int, int] = {}
    for end, count in requirements:
        required.setdefault(end, count)
    max_count = max((count for _, count in requirements), default=0)
    if required.get(0, 0) != 0:
        return 0

    previous = [0] * (max_count + 1)
    previous[0] = 1
    for i in range(1, n):
        current = [0] * (max_count + 1)
        wanted = required.get(i)
        for j in range(max_count + 1):
            if wanted is not None and j != wanted:
                continue
            current[j] = sum(previous[j - k] for k in range(min(i, j) + 1)) % MOD
        previous = current
    return previous[required.get(n - 1, 0)]


def max_operations(nums: Sequence[int]) -> int:
    """Most deletions of two end elements that all share the same sum."""
    n = len(nums)
    if n <= 2:
        return 1

    best = 1
    scores = {nums[0] + nums[1], nums[-1] + nums[-2], nums[0] + nums[-1]}
    for score in scores:
        visited: set[tuple[int, int]] = set()
        stack = [(0, n - 1, 0)]
        while stack:
            left, right, count = stack.pop()
            best = max(best, count)
            if right - left < 1 or (left, right) in visited:
                continue
            visited.add((left, right))
            if nums[left] + nums[left + 1] == score:
                stack.append((left + 2, right, count + 1))
            if nums[left] + nums[right] == score:
                stack.append((left + 1, right - 1, count + 1))
            if nums[right] + nums[right - 1] == score:
                stack.append((left, right - 2, count + 1))
    return best


def max_score(a: Sequence[int], b: Sequence[int]) -> int:
    """Largest sum of a[i] * b[j_i] over increasing indices j_0 < j_1 < j_2 < j_3."""
    if len(a) != PICKS:
        raise ValueError("a must hold exactly four values")
    if len(b) < PICKS:
        raise ValueError("b must hold at least four values")
    n = len(b)
    previous = [a[0] * value for value in b]
    for i in range(1, PICKS):
        current = [SCORE_FLOOR] * n
        best = previous[i - 1]
        for j in range(i, n):
            current[j] = best + a[i] * b[j]
            best = max(best, previous[j])
        previous = current
    return max(previous[PICKS - 1 :])


def min_valid_strings(words: Sequence[str], target: str) -> int:
    """Fewest word prefixes that concatenate to ``target``, or -1."""
    prefixes = {word[:end] for word in words for end in range(1, len(word) + 1)}
    unreachable = len(target) + 1
    dp = [unreachable] * (len(target) + 1)
    dp[0] = 0
    for i in range(len(target)):
        if dp[i] == unreachable:
            break
        for j in range(i + 1, len(target) + 1):
            if target[i:j] not in prefixes:
                break
            dp[j] = min(dp[j], dp[i] + 1)
    return -1 if dp[-1] == unreachable else dp[-1]