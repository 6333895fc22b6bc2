"""The two stacks, the eleven operations on them, and helpers for reading them."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterable, Sequence
from enum import Enum
from itertools import pairwise


class Op(str, Enum):
    """One stack operation, named as it is printed."""

    SA = "sa"
    SB = "sb"
    SS = "ss"
    PA = "pa"
    PB = "pb"
    RA = "ra"
    RB = "rb"
    RR = "rr"
    RRA = "rra"
    RRB = "rrb"
    RRR = "rrr"

    def __str__(self) -> str:
        return self.value


def _swap_top(stack: deque[int]) -> bool:
    if len(stack) < 2:
        return False
    stack[0], stack[1] = stack[1], stack[0]
    return True


def _rotate(stack: deque[int]) -> bool:
    if len(stack) < 2:
        return False
    stack.rotate(-1)
    return True


def _reverse_rotate(stack: deque[int]) -> bool:
    if len(stack) < 2:
        return False
    stack.rotate(1)
    return True


class Stacks:
    """Stacks ``a`` and ``b``, top first, with a log of the operations applied.

    An operation that cannot take effect (too few elements) changes nothing
    and is not logged.
    """

    def __init__(self, a: Iterable[int] = (), b: Iterable[int] = ()) -> None:
        self.a: deque[int] = deque(a)
        self.b: deque[int] = deque(b)
        self.ops: list[Op] = []

    def __repr__(self) -> str:
        return f"Stacks(a={list(self.a)!r}, b={list(self.b)!r})"

    def _log(self, op: Op, done: bool) -> bool:
        if done:
            self.ops.append(op)
        return done

    def execute(self, op: Op | str) -> bool:
        """Apply an operation given as an ``Op`` or its name; return whether it took effect."""
        handlers = {
            Op.SA: self.sa,
            Op.SB: self.sb,
            Op.SS: self.ss,
            Op.PA: self.pa,
            Op.PB: self.pb,
            Op.RA: self.ra,
            Op.RB: self.rb,
            Op.RR: self.rr,
            Op.RRA: self.rra,
            Op.RRB: self.rrb,
            Op.RRR: self.rrr,
        }
        return handlers[Op(op)]()

    def sa(self) -> bool:
        """Swap the first two elements of ``a``."""
        return self._log(Op.SA, _swap_top(self.a))

    def sb(self) -> bool:
        """Swap the first two elements of ``b``."""
        return self._log(Op.SB, _swap_top(self.b))

    def ss(self) -> bool:
        """Swap the tops of both stacks; only when each has two or more elements."""
        if len(self.a) < 2 or len(self.b) < 2:
            return False
        _swap_top(self.a)
        _swap_top(self.b)
        return self._log(Op.SS, True)

    def pa(self) -> bool:
        """Move the top of ``b`` onto ``a``."""
        if not self.b:
            return False
        self.a.appendleft(self.b.popleft())
        return self._log(Op.PA, True)

    def pb(self) -> bool:
        """Move the top of ``a`` onto ``b``."""
        if not self.a:
            return False
        self.b.appendleft(self.a.popleft())
        return self._log(Op.PB, True)

    def ra(self) -> bool:
        """Rotate ``a``: the first element becomes the last."""
        return self._log(Op.RA, _rotate(self.a))

    def rb(self) -> bool:
        """Rotate ``b``: the first element becomes the last."""
        return self._log(Op.RB, _rotate(self.b))

    def rr(self) -> bool:
        """Rotate both stacks; only when each has two or more elements."""
        if len(self.a) < 2 or len(self.b) < 2:
            return False
        _rotate(self.a)
        _rotate(self.b)
        return self._log(Op.RR, True)

    def rra(self) -> bool:
        """Reverse-rotate ``a``: the last element becomes the first."""
        return self._log(Op.RRA, _reverse_rotate(self.a))

    def rrb(self) -> bool:
        """Reverse-rotate ``b``: the last element becomes the first."""
        return self._log(Op.RRB, _reverse_rotate(self.b))

    def rrr(self) -> bool:
        """Reverse-rotate both stacks; only when each has two or more elements."""
        if len(self.a) < 2 or len(self.b) < 2:
            return False
        _reverse_rotate(self.a)
        _reverse_rotate(self.b)
        return self._log(Op.RRR, True)


def is_sorted(values: Iterable[int]) -> bool:
    """True when the values are in non-decreasing order (empty counts as sorted)."""
    return all(x <= y for x, y in pairwise(values))


def has_duplicates(values: Iterable[int]) -> bool:
    """True when some value occurs more than once."""
    seen: set[int] = set()
    for value in values:
        if value in seen:
            return True
        seen.add(value)
    return False


def find_index(values: Iterable[int], value: int) -> int:
    """Position of ``value`` from the top, or -1 when it is absent."""
    return next((i for i, v in enumerate(values) if v == value), -1)


def find_place_b(b: Sequence[int], value: int) -> int:
    """Rotations of ``b`` (kept in descending cyclic order) needed before pushing ``value``."""
    if not b:
        raise ValueError("stack b is empty")
    if b[0] < value < b[-1]:
        return 0
    if value > max(b) or value < min(b):
        return find_index(b, max(b))
    return next(
        (i for i, (upper, lower) in enumerate(pairwise(b), start=1) if upper >= value >= lower),
        len(b),
    )


def find_place_a(a: Sequence[int], value: int) -> int:
    """Rotations of ``a`` (kept in ascending cyclic order) needed before pushing ``value``."""
    if len(a) < 2:
        return 0
    if a[-1] < value < a[0]:
        return 0
    if value > max(a) or value < min(a):
        return find_index(a, min(a))
    return next(
        (i for i, (lower, upper) in enumerate(pairwise(a), start=1) if lower <= value <= upper),
        len(a),
    )