"""The two push_swap stacks and the operations that move numbers between them."""

from __future__ import annotations

from typing import Callable, Iterable

_RULE = "------------------\n"


def rotate(stack: list[int]) -> bool:
    """Move the top element to the bottom. Return False if fewer than two elements."""
    if len(stack) < 2:
        return False
    stack.append(stack.pop(0))
    return True


def rev_rotate(stack: list[int]) -> bool:
    """Move the bottom element to the top. Return False if fewer than two elements."""
    if len(stack) < 2:
        return False
    stack.insert(0, stack.pop())
    return True


def swap(stack: list[int]) -> bool:
    """Swap the two top elements. Return False if fewer than two elements."""
    if len(stack) < 2:
        return False
    stack[0], stack[1] = stack[1], stack[0]
    return True


def _print_op(name: str) -> None:
    print(name)


class Stacks:
    """Stacks ``a`` and ``b``, top first, that report every performed operation."""

    def __init__(
        self,
        a: Iterable[int] = (),
        b: Iterable[int] = (),
        emit: Callable[[str], None] | None = None,
    ) -> None:
        self.a: list[int] = list(a)
        self.b: list[int] = list(b)
        self.emit: Callable[[str], None] = emit if emit is not None else _print_op

    def _report(self, done: bool, name: str) -> None:
        if done:
            self.emit(name)

    def rotate_a(self) -> None:
        """The first element of a becomes the last one."""
        self._report(rotate(self.a), "ra")

    def rev_rotate_a(self) -> None:
        """The last element of a becomes the first one."""
        self._report(rev_rotate(self.a), "rra")

    def swap_a(self) -> None:
        """Swap the first two elements of a."""
        self._report(swap(self.a), "sa")

    def push_a(self) -> None:
        """Move the top of b onto a."""
        if not self.b:
            return
        self.a.insert(0, self.b.pop(0))
        self.emit("pa")

    def rotate_b(self) -> None:
        """The first element of b becomes the last one."""
        self._report(rotate(self.b), "rb")

    def rev_rotate_b(self) -> None:
        """The last element of b becomes the first one."""
        self._report(rev_rotate(self.b), "rrb")

    def swap_b(self) -> None:
        """Swap the first two elements of b."""
        self._report(swap(self.b), "sb")

    def push_b(self) -> None:
        """Move the top of a onto b."""
        if not self.a:
            return
        self.b.insert(0, self.a.pop(0))
        self.emit("pb")

    def rotate_both(self) -> None:
        """Rotate both stacks; reported only when both actually rotated."""
        done_a = rotate(self.a)
        done_b = rotate(self.b)
        self._report(done_a and done_b, "rr")

    def rev_rotate_both(self) -> None:
        """Reverse-rotate both stacks; reported only when both actually moved."""
        done_a = rev_rotate(self.a)
        done_b = rev_rotate(self.b)
        self._report(done_a and done_b, "rrr")

    def swap_both(self) -> None:
        """Swap the tops of both stacks; always reported."""
        swap(self.a)
        swap(self.b)
        self.emit("ss")

    def render(self) -> str:
        """Return both stacks as two side-by-side columns."""
        lines = ["Stack A    Stack B\n", "-------    -------\n"]
        rows = max(len(self.a), len(self.b))
        for row in range(rows):
            left = f" {self.a[row]} " if row < len(self.a) else " _"
            right = f"        {self.b[row]}\n" if row < len(self.b) else "        _\n"
            lines.append(left + right)
        return "".join(lines)

    def framed(self) -> str:
        """Return :meth:`render` between two horizontal rules."""
        return _RULE + self.render() + _RULE