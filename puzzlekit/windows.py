"""Sliding-window, prefix and heap-selection puzzles."""

from __future__ import annotations

import heapq
from bisect import bisect_right
from collections import Counter, defaultdict
from collections.abc import Sequence

DIGITS = 10
TAKE_ALPHABET = "abc"


def kth_largest_value(matrix: Sequence[Sequence[int]], k: int) -> int:
    """The k-th largest XOR of a top-left submatrix anchored at (0, 0)."""
    if not matrix or not matrix[0]:
        raise ValueError("matrix must be non-empty")
    cols = len(matrix[0])
    above = [0] * (cols + 1)
    values = []
    for row in matrix:
        current = [0] * (cols + 1)
        for j, cell in enumerate(row, start=1):
            current[j] = cell ^ above[j] ^ current[j - 1] ^ above[j - 1]
            values.append(current[j])
        above = current
    return heapq.nlargest(k, values)[-1]


def latest_time_catch_the_bus(
    buses: Sequence[int], passengers: Sequence[int], capacity: int
) -> int:
    """Latest arrival time that still boards a bus without matching another passenger."""
    if not buses:
        raise ValueError("there must be at least one bus")
    departures = sorted(buses)
    arrivals = sorted(passengers)
    last_bus = len(departures) - 1

    latest = departures[-1]
    first_on_bus = 0
    bus = 0
    stop = 0
    while stop < len(arrivals) and bus < len(departures):
        while bus < len(departures) and (
            departures[bus] < arrivals[stop] or stop - first_on_bus + 1 > capacity
        ):
            bus += 1
            first_on_bus = stop
        if bus == last_bus and stop - first_on_bus + 1 == capacity:
            latest = arrivals[stop] - 1
        stop += 1

    for arrival in reversed(arrivals):
        if arrival == latest:
            latest -= 1
        elif arrival < latest:
            break
    return latest


def longest_awesome(s: str) -> int:
    """Length of the longest substring that can be rearranged into a palindrome."""
    if len(s) == 1:
        return 1
    best = 1
    first_seen = {0: -1}
    mask = 0
    for i, char in enumerate(s):
        mask ^= 1 << int(char)
        for digit in range(DIGITS):
            partner = mask ^ (1 << digit)
            if partner in first_seen:
                best = max(best, i - first_seen[partner])
        if mask in first_seen:
            best = max(best, i - first_seen[mask])
        else:
            first_seen[mask] = i
    return best


def longest_equal_subarray(nums: Sequence[int], k: int) -> int:
    """Longest run of equal values after deleting at most ``k`` elements."""
    positions: defaultdict[int, list[int]] = defaultdict(list)
    for i, num in enumerate(nums):
        positions[num].append(i)

    best = 1
    for indices in positions.values():
        deleted = 0
        left = 0
        for right in range(1, len(indices)):
            deleted += indices[right] - indices[right - 1] - 1
            while deleted > k:
                deleted -= indices[left + 1] - indices[left] - 1
                left += 1
            best = max(best, right - left + 1)
    return best


def maximize_win(prize_positions: Sequence[int], k: int) -> int:
    """Most prizes covered by two segments of length ``k`` on sorted positions."""
    n = len(prize_positions)
    if n == 0:
        raise ValueError("there must be at least one prize")
    covered = [
        bisect_right(prize_positions, position + k) - i
        for i, position in enumerate(prize_positions)
    ]

    best = covered[-1]
    best_second = 0
    second = n - 1
    for first in range(n - 2, -1, -1):
        while prize_positions[second] - prize_positions[first] > k:
            best_second = max(best_second, covered[second])
            second -= 1
        best = max(best, best_second + covered[first])
    return best


def most_competitive(nums: Sequence[int], k: int) -> list[int]:
    """Lexicographically smallest subsequence of length ``k``."""
    n = len(nums)
    if not 0 <= k <= n:
        raise ValueError("k must be between 0 and len(nums)")
    left = 0
    right = n - k
    heap = [(nums[i], i) for i in range(right + 1)] if k else []
    heapq.heapify(heap)

    chosen = []
    for _ in range(k):
        value, index = heapq.heappop(heap)
        while index < left or index > right:
            value, index = heapq.heappop(heap)
        chosen.append(value)
        left = index + 1
        right += 1
        if right < n:
            heapq.heappush(heap, (nums[right], right))
    return chosen


def take_characters(s: str, k: int) -> int:
    """Fewest characters taken from both ends to hold ``k`` of each of a, b, c, or -1."""
    n = len(s)

    def enough(counts: Counter[str]) -> bool:
        return all(counts[char] >= k for char in TAKE_ALPHABET)

    if not enough(Counter(s)):
        return -1

    counts: Counter[str] = Counter()
    j = n - 1
    while not enough(counts):
        counts[s[j]] += 1
        j -= 1
    j += 1

    best = n - j
    i = 0
    while i < best:
        counts[s[i]] += 1
        while j < n and enough(counts):
            counts[s[j]] -= 1
            j += 1
        if not enough(counts):
            j -= 1
            counts[s[j]] += 1
        best = min(best, i + (n - j) + 1)
        i += 1
    return best