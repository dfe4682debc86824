"""Intermediate exercises on hashing and list products."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from math import prod


def group_anagrams(strs: Iterable[str]) -> list[list[str]]:
    """Group words that are anagrams of one another."""
    groups: dict[str, list[str]] = {}
    for word in strs:
        groups.setdefault("".join(sorted(word)), []).append(word)
    return list(groups.values())


def longest_consecutive(nums: Iterable[int]) -> int:
    """Return the length of the longest run of consecutive integers."""
    values = set(nums)
    longest = 0
    for start in values:
        if start - 1 in values:
            continue
        end = start
        while end + 1 in values:
            end += 1
        longest = max(longest, end - start + 1)
    return longest


def product_except_self(nums: Sequence[int]) -> list[int]:
    """For each position, return the product of all the other values."""
    product = prod(nums)
    if product != 0:
        return [product // num for num in nums]
    zeros = nums.count(0)
    if zeros >= 2:
        return [0] * len(nums)
    others = prod(num for num in nums if num != 0)
    return [others if num == 0 else 0 for num in nums]