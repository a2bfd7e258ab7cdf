"""Command entry point: print the operations that sort the given numbers."""

from __future__ import annotations

import sys
from typing import Sequence

from pushswap.parsing import parse_stack
from pushswap.sorting import is_sorted, radix_sort_with_negatives, tiny_sort
from pushswap.stacks import Stacks


def main(argv: Sequence[str] | None = None) -> int:
    """Sort the numbers in the single argument, printing one operation per line."""
    args = list(sys.argv[1:] if argv is None else argv)
    if len(args) != 1:
        return 0
    stacks = Stacks(parse_stack(args[0]))
    if is_sorted(stacks.a):
        return 0
    if len(stacks.a) == 3:
        tiny_sort(stacks)
    else:
        radix_sort_with_negatives(stacks, len(stacks.a))
    return 0


if __name__ == "__main__":
    sys.exit(main())