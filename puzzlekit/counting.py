"""Counting and simple scanning puzzles."""

from __future__ import annotations

from collections import Counter
from collections.abc import Sequence
from math import isqrt


def difference_of_sum(nums: Sequence[int]) -> int:
    """Absolute difference between the element sum and the digit sum."""
    element_sum = sum(nums)
    digit_sum = sum(int(c) for num in nums for c in str(num))
    return abs(element_sum - digit_sum)


def edge_score(edges: Sequence[int]) -> int:
    """Node with the largest sum of incoming labels; ties go to the smallest node."""
    scores = [0] * len(edges)
    for node, target in enumerate(edges):
        scores[target] += node
    if not scores:
        return 0
    return max(range(len(scores)), key=scores.__getitem__)


def find_judge(n: int, trust: Sequence[Sequence[int]]) -> int:
    """Return the town judge trusted by everyone else and trusting nobody, or -1."""
    if n == 1:
        return 1
    if n > len(trust) + 1:
        return -1

    judge = -1
    trusts_others = [0] * (n + 1)
    trusted_by = [0] * (n + 1)
    for a, b in trust:
        trusts_others[a] += 1
        trusted_by[b] += 1

        if trusted_by[b] == n - 1 and trusts_others[b] == 0:
            if judge != -1:
                return -1
            judge = b

        if judge == a:
            return -1
    return judge


def find_missing_and_repeated_values(grid: Sequence[Sequence[int]]) -> list[int]:
    """Return ``[repeated, missing]`` for an n×n grid holding 1..n² with one swap."""
    size = len(grid) ** 2
    counts = Counter(value for row in grid for value in row)
    repeated = next((value for value, c in counts.items() if c == 2), 0)
    missing = next((value for value in range(1, size + 1) if value not in counts), 0)
    return [repeated, missing]


def max_div_score(nums: Sequence[int], divisors: Sequence[int]) -> int:
    """Divisor dividing the most nums; ties go to the smallest divisor."""
    best = 0
    best_count = -1
    for divisor in sorted(divisors):
        count = sum(1 for num in nums if num % divisor == 0)
        if count > best_count:
            best_count = count
            best = divisor
    return best


def number_of_pairs(nums1: Sequence[int], nums2: Sequence[int], k: int) -> int:
    """Count pairs (i, j) with nums1[i] divisible by nums2[j] * k."""
    counts = Counter(nums2)
    total = 0
    for num in nums1:
        if num % k:
            continue
        quotient = num // k
        for factor in range(1, isqrt(quotient) + 1):
            if quotient % factor == 0:
                total += counts[factor]
                partner = quotient // factor
                if partner != factor:
                    total += counts[partner]
    return total


def _is_price(word: str) -> bool:
    return len(word) > 1 and word[0] == "$" and all("0" <= c <= "9" for c in word[1:])


def discount_prices(sentence: str, discount: int) -> str:
    """Apply a percentage discount to every ``$<digits>`` word, two decimals."""
    factor = (100 - discount) / 100.0
    words = (
        f"${int(word[1:]) * factor:.2f}" if _is_price(word) else word
        for word in sentence.split(" ")
    )
    return " ".join(words)


def _binary(value: int) -> str:
    return format(value, "b") if value else ""


def convert_date_to_binary(date: str) -> str:
    """Rewrite a ``YYYY-MM-DD`` date with each part in binary."""
    year, month, day = int(date[0:4]), int(date[5:7]), int(date[8:10])
    return f"{_binary(year)}-{_binary(month)}-{_binary(day)}"


def find_maximum_score(nums: Sequence[int]) -> int:
    """Sum of the running maximum over every jump position except the last."""
    total = 0
    best = nums[0] if nums else 0
    for num in nums[1:]:
        total += best
        best = max(best, num)
    return total


def get_sneaky_numbers(nums: Sequence[int]) -> list[int]:
    """Values appearing twice in a list meant to hold 0..n-1 once each."""
    expected = 0
    duplicates = []
    for num in sorted(nums):
        if num == expected:
            expected += 1
        else:
            duplicates.append(num)
    return duplicates