"""Binary-search-on-the-answer puzzles."""

from __future__ import annotations

import math
from bisect import bisect_left
from collections.abc import Sequence

MAX_SPEED = 10**7


def _round_half_up(value: float) -> int:
    return math.floor(value + 0.5) if value >= 0 else math.ceil(value - 0.5)


def _on_time(dist: Sequence[int], speed: int, hour_hundredths: int) -> bool:
    remaining = hour_hundredths - sum(-(-d // speed) * 100 for d in dist[:-1])
    return remaining * speed >= dist[-1] * 100


def min_speed_on_time(dist: Sequence[int], hour: float) -> int:
    """Smallest integer speed to arrive within ``hour`` hours, or -1."""
    hundredths = _round_half_up(hour * 100)
    speeds = range(1, MAX_SPEED + 1)
    index = bisect_left(
        speeds, True, key=lambda speed: _on_time(dist, speed, hundredths)
    )
    return speeds[index] if index < len(speeds) else -1


def minimum_time(time: Sequence[int], total_trips: int) -> int:
    """Least time for the buses to complete ``total_trips`` trips together."""
    upper = total_trips * time[0]
    moments = range(1, upper + 1)
    index = bisect_left(
        moments,
        True,
        key=lambda moment: sum(moment // t for t in time) >= total_trips,
    )
    return moments[index] if index < len(moments) else upper


def _score_fits(starts: Sequence[int], d: int, score: int) -> bool:
    previous = starts[0]
    for low in starts[1:]:
        if previous + score < low:
            previous = low
        elif previous + score <= low + d:
            previous += score
        else:
            return False
    return True


def max_possible_score(start: Sequence[int], d: int) -> int:
    """Largest minimum gap when picking one integer from each [s, s + d]."""
    starts = sorted(start)
    low, high = 0, starts[-1] + d - starts[0]
    best = 0
    while low <= high:
        mid = (low + high) // 2
        if _score_fits(starts, d, mid):
            best = mid
            low = mid + 1
        else:
            high = mid - 1
    return best