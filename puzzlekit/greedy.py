"""Greedy, two-pointer and heap-driven puzzles."""

from __future__ import annotations

import heapq
from collections import Counter
from collections.abc import Sequence
from itertools import accumulate

GARBAGE_KINDS = "MPG"


def can_complete_circuit(gas: Sequence[int], cost: Sequence[int]) -> int:
    """Index of the station from which a full loop is possible, or -1."""
    n = len(gas)
    start = 0
    tank = 0
    for i in range(2 * n):
        tank += gas[i % n] - cost[i % n]
        if start >= n:
            return -1
        if tank < 0:
            start = i + 1
            tank = 0
        elif i - start + 1 == n:
            return start
    return -1


def get_winner(arr: Sequence[int], k: int) -> int:
    """Winner of the array game where a value must win ``k`` rounds in a row."""
    best = max(arr)
    winner = arr[0]
    wins = 0
    for challenger in arr[1:]:
        if winner > challenger:
            wins += 1
        else:
            winner = challenger
            wins = 1
        if winner == best or wins == k:
            break
    return winner


def max_num_of_marked_indices(nums: Sequence[int]) -> int:
    """Most indices markable in pairs (i, j) with 2 * nums[i] <= nums[j]."""
    values = sorted(nums)
    n = len(values)
    j = n // 2
    marked = 0
    for small in values[: n // 2]:
        while j < n and 2 * small > values[j]:
            j += 1
        if j >= n:
            break
        marked += 2
        j += 1
    return marked


def max_profit_assignment(
    difficulty: Sequence[int], profit: Sequence[int], worker: Sequence[int]
) -> int:
    """Total profit when each worker takes the best job within their ability."""
    jobs = sorted(zip(difficulty, profit))
    total = 0
    best = 0
    j = 0
    for ability in sorted(worker):
        while j < len(jobs) and jobs[j][0] <= ability:
            best = max(best, jobs[j][1])
            j += 1
        total += best
    return total


def max_score_sightseeing_pair(values: Sequence[int]) -> int:
    """Maximum of values[i] + values[j] + i - j over i < j (at least 0)."""
    result = 0
    if not values:
        return result
    best = values[0]
    for j, value in enumerate(values[1:], start=1):
        result = max(result, best + value - j)
        best = max(best, value + j)
    return result


def maximum_subsequence_count(text: str, pattern: str) -> int:
    """Most occurrences of ``pattern`` as a subsequence after inserting one of its chars."""
    first, second = pattern[0], pattern[1]
    pairs = 0
    first_count = 0
    second_count = 0
    for char in reversed(text):
        if char == first:
            pairs += second_count
            first_count += 1
        if char == second:
            second_count += 1
    return pairs + max(first_count, second_count)


def min_operations(nums: Sequence[int]) -> int:
    """Fewest suffix flips needed to turn a binary array into all ones."""
    flipped = 0
    operations = 0
    for num in nums:
        if num ^ flipped == 0:
            flipped ^= 1
            operations += 1
    return operations


def min_refuel_stops(
    target: int, start_fuel: int, stations: Sequence[Sequence[int]]
) -> int:
    """Fewest refuelling stops to reach ``target``, or -1 if impossible."""
    fuel = start_fuel
    reachable: list[int] = []
    stops = 0
    pending = iter(stations)
    upcoming = next(pending, None)

    def load() -> None:
        nonlocal upcoming
        while upcoming is not None and upcoming[0] <= fuel:
            heapq.heappush(reachable, -upcoming[1])
            upcoming = next(pending, None)

    load()
    while fuel < target and reachable:
        fuel -= heapq.heappop(reachable)
        load()
        stops += 1
    return -1 if fuel < target else stops


def minimum_refill(plants: Sequence[int], capacity_a: int, capacity_b: int) -> int:
    """Refills needed when two gardeners water plants from both ends."""
    refills = 0
    can_a, can_b = capacity_a, capacity_b
    i, j = 0, len(plants) - 1
    while i <= j:
        if i == j:
            if max(can_a, can_b) < plants[i]:
                refills += 1
        else:
            if can_a < plants[i]:
                refills += 1
                can_a = capacity_a
            can_a -= plants[i]
            if can_b < plants[j]:
                refills += 1
                can_b = capacity_b
            can_b -= plants[j]
        i += 1
        j -= 1
    return refills


def minimum_rounds(tasks: Sequence[int]) -> int:
    """Fewest rounds of 2 or 3 same-level tasks, or -1 if impossible."""
    counts = Counter(tasks).values()
    if any(count == 1 for count in counts):
        return -1
    return sum(-(-count // 3) for count in counts)


def number_of_weeks(milestones: Sequence[int]) -> int:
    """Most weeks of work without doing the same project two weeks running."""
    if len(milestones) == 1:
        return 1
    ordered = sorted(milestones)
    largest = ordered[-1]
    rest = sum(ordered[:-1])
    if largest <= rest + 1:
        return largest + rest
    return rest * 2 + 1


def smallest_range_ii(nums: Sequence[int], k: int) -> int:
    """Smallest max-min after adding +k or -k to every element."""
    values = sorted(nums)
    low, high = values[0], values[-1]
    result = high - low
    for left, right in zip(values, values[1:]):
        result = min(result, max(high - k, left + k) - min(low + k, right - k))
    return result


def missing_rolls(rolls: Sequence[int], mean: int, n: int) -> list[int]:
    """``n`` die values making the overall mean ``mean``, or an empty list."""
    surplus = (n + len(rolls)) * mean - sum(rolls)
    if not n <= surplus <= 6 * n:
        return []
    base, extra = divmod(surplus, n)
    return [base + 1] * extra + [base] * (n - extra)


def garbage_collection(garbage: Sequence[str], travel: Sequence[int]) -> int:
    """Minutes for three trucks to collect all metal, paper and glass."""
    total = sum(len(house) for house in garbage)
    elapsed = [0, *accumulate(travel)]
    for kind in GARBAGE_KINDS:
        last = max((i for i, house in enumerate(garbage) if kind in house), default=0)
        total += elapsed[last]
    return total