"""Warm-up exercises on integers, strings and lists."""

from __future__ import annotations

from collections import Counter
from collections.abc import Iterable, Sequence


def add(num1: int, num2: int) -> int:
    """Return the sum of two integers."""
    return num1 + num2


def is_anagram(s: str, t: str) -> bool:
    """Tell whether ``t`` uses exactly the same characters as ``s``."""
    return Counter(s) == Counter(t)


def get_concatenation(nums: Sequence[int]) -> list[int]:
    """Return ``nums`` followed by a second copy of itself."""
    return [*nums, *nums]


def find_words_containing(words: Iterable[str], x: str) -> list[int]:
    """Return the indices of the words that contain the character ``x``."""
    return [index for index, word in enumerate(words) if x in word]


def contains_duplicate(nums: Iterable[int]) -> bool:
    """Tell whether any value appears more than once."""
    seen: set[int] = set()
    for num in nums:
        if num in seen:
            return True
        seen.add(num)
    return False


def contains_nearby_duplicate(nums: Iterable[int], k: int) -> bool:
    """Tell whether two equal values sit at most ``k`` positions apart.

    A negative ``k`` places no limit on the distance.
    """
    last_seen: dict[int, int] = {}
    for index, num in enumerate(nums):
        previous = last_seen.get(num)
        if previous is not None and (k < 0 or index - previous <= k):
            return True
        last_seen[num] = index
    return False


def num_identical_pairs(nums: Iterable[int]) -> int:
    """Count the index pairs ``i < j`` whose values are equal."""
    return sum(count * (count - 1) // 2 for count in Counter(nums).values())


def num_jewels_in_stones(jewels: str, stones: str) -> int:
    """Count the stones whose character is listed among the jewels.

    A jewel character listed twice is counted twice.
    """
    stone_counts = Counter(stones)
    return sum(stone_counts[jewel] for jewel in jewels)


def remove_duplicates(nums: list[int]) -> int:
    """Keep only the first occurrence of each value in ``nums``, in place.

    Returns the number of values left.
    """
    nums[:] = dict.fromkeys(nums)
    return len(nums)


def two_sum(nums: Iterable[int], target: int) -> list[int]:
    """Find two positions whose values add up to ``target``.

    Returns ``[later_index, earlier_index]``, or an empty list when no
    such pair exists.
    """
    positions: dict[int, int] = {}
    for index, num in enumerate(nums):
        complement = target - num
        if complement in positions:
            return [index, positions[complement]]
        positions[num] = index
    return []


def is_palindrome(s: str) -> bool:
    """Tell whether ``s`` reads the same both ways, ignoring case and
    anything that is not a letter or digit."""
    letters = [ch for ch in s.lower() if ch.isalnum()]
    return letters == letters[::-1]