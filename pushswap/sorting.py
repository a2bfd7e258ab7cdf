"""Sorting stack ``a`` with the push_swap operations."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence

from pushswap.stacks import Stacks


@dataclass(frozen=True)
class ValueInfo:
    """A value found in a stack and its position, counted from the top."""

    value: int
    pos: int


def _extreme(values: Sequence[int], better) -> ValueInfo:
    if not values:
        raise ValueError("cannot search an empty stack")
    best_pos = 0
    best = values[0]
    for pos, value in enumerate(values):
        if better(value, best):
            best, best_pos = value, pos
    return ValueInfo(best, best_pos)


def find_max(values: Sequence[int]) -> ValueInfo:
    """Return the largest value and the position of its first occurrence."""
    return _extreme(values, lambda new, best: new > best)


def find_min(values: Sequence[int]) -> ValueInfo:
    """Return the smallest value and the position of its first occurrence."""
    return _extreme(values, lambda new, best: new < best)


def is_sorted(values: Sequence[int]) -> bool:
    """Return True if the values never decrease from top to bottom."""
    return all(first <= second for first, second in zip(values, values[1:]))


def tiny_sort(stacks: Stacks) -> None:
    """Sort a three-element stack ``a`` with at most two operations."""
    largest = find_max(stacks.a)
    if largest.pos == 0:
        stacks.rotate_a()
    elif largest.pos == 1:
        stacks.rev_rotate_a()
    if stacks.a[0] > stacks.a[1]:
        stacks.swap_a()


def radix_sort(stacks: Stacks, max_num: int, size: int) -> None:
    """Binary LSD radix sort of non-negative values in ``a``, using ``b`` as a bucket."""
    max_bits = 0
    while (max_num >> max_bits) != 0:
        max_bits += 1
    for bit in range(max_bits):
        for _ in range(size):
            if (stacks.a[0] >> bit) & 1 == 0:
                stacks.push_b()
            else:
                stacks.rotate_a()
        while stacks.b:
            stacks.push_a()


def radix_sort_with_negatives(stacks: Stacks, size: int) -> None:
    """Radix sort ``a``, shifting the values to be non-negative while sorting."""
    min_val = find_min(stacks.a).value
    max_val = find_max(stacks.a).value
    if min_val >= 0:
        radix_sort(stacks, max_val, size)
        return
    offset = -min_val
    stacks.a[:] = [value + offset for value in stacks.a]
    radix_sort(stacks, max_val + offset, size)
    stacks.a[:] = [value - offset for value in stacks.a]