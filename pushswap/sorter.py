"""The sorting strategy: fill ``b`` cheaply, then pour it back into ``a``."""

from __future__ import annotations

from collections.abc import Iterable

from pushswap.costs import (
    cheapest_ab,
    cheapest_ba,
    cost_rarb,
    cost_rarb_a,
    cost_rarrb,
    cost_rarrb_a,
    cost_rrarb,
    cost_rrarb_a,
    cost_rrarrb,
    cost_rrarrb_a,
)
from pushswap.parsing import PushSwapError
from pushswap.stack import (
    Op,
    Stacks,
    find_index,
    find_place_a,
    find_place_b,
    has_duplicates,
    is_sorted,
)


def _to_b(direction: str) -> bool:
    if direction == "a":
        return True
    if direction == "b":
        return False
    raise ValueError(f"direction must be 'a' or 'b', not {direction!r}")


def apply_rarb(stacks: Stacks, value: int, direction: str) -> None:
    """Rotate both stacks forwards until ``value`` can be pushed, then push it.

    ``direction`` ``"a"`` moves ``value`` from ``a`` to ``b``; ``"b"`` the other way.
    """
    a, b = stacks.a, stacks.b
    if _to_b(direction):
        while a[0] != value and find_place_b(b, value) > 0:
            stacks.rr()
        while a[0] != value:
            stacks.ra()
        while find_place_b(b, value) > 0:
            stacks.rb()
        stacks.pb()
    else:
        while b[0] != value and find_place_a(a, value) > 0:
            stacks.rr()
        while b[0] != value:
            stacks.rb()
        while find_place_a(a, value) > 0:
            stacks.ra()
        stacks.pa()


def apply_rrarrb(stacks: Stacks, value: int, direction: str) -> None:
    """Reverse-rotate both stacks until ``value`` can be pushed, then push it."""
    a, b = stacks.a, stacks.b
    if _to_b(direction):
        while a[0] != value and find_place_b(b, value) > 0:
            stacks.rrr()
        while a[0] != value:
            stacks.rra()
        while find_place_b(b, value) > 0:
            stacks.rrb()
        stacks.pb()
    else:
        while b[0] != value and find_place_a(a, value) > 0:
            stacks.rrr()
        while b[0] != value:
            stacks.rrb()
        while find_place_a(a, value) > 0:
            stacks.rra()
        stacks.pa()


def apply_rrarb(stacks: Stacks, value: int, direction: str) -> None:
    """Reverse-rotate ``a`` and rotate ``b`` until ``value`` can be pushed, then push it."""
    a, b = stacks.a, stacks.b
    if _to_b(direction):
        while a[0] != value:
            stacks.rra()
        while find_place_b(b, value) > 0:
            stacks.rb()
        stacks.pb()
    else:
        while find_place_a(a, value) > 0:
            stacks.rra()
        while b[0] != value:
            stacks.rb()
        stacks.pa()


def apply_rarrb(stacks: Stacks, value: int, direction: str) -> None:
    """Rotate ``a`` and reverse-rotate ``b`` until ``value`` can be pushed, then push it."""
    a, b = stacks.a, stacks.b
    if _to_b(direction):
        while a[0] != value:
            stacks.ra()
        while find_place_b(b, value) > 0:
            stacks.rrb()
        stacks.pb()
    else:
        while find_place_a(a, value) > 0:
            stacks.ra()
        while b[0] != value:
            stacks.rrb()
        stacks.pa()


def sort_three(stacks: Stacks) -> None:
    """Sort stack ``a`` when it holds three elements."""
    a = stacks.a
    if min(a) == a[0]:
        stacks.rra()
        stacks.sa()
    elif max(a) == a[0]:
        stacks.ra()
        if not is_sorted(a):
            stacks.sa()
    elif find_index(a, max(a)) == 1:
        stacks.rra()
    else:
        stacks.sa()


_AB_MOVES = (
    (cost_rarb, apply_rarb),
    (cost_rrarrb, apply_rrarrb),
    (cost_rarrb, apply_rarrb),
    (cost_rrarb, apply_rrarb),
)

_BA_MOVES = (
    (cost_rarb_a, apply_rarb),
    (cost_rarrb_a, apply_rarrb),
    (cost_rrarrb_a, apply_rrarrb),
    (cost_rrarb_a, apply_rrarb),
)


def _move_cheapest(stacks: Stacks, direction: str) -> None:
    if direction == "a":
        best, source, moves = cheapest_ab(stacks.a, stacks.b), stacks.a, _AB_MOVES
    else:
        best, source, moves = cheapest_ba(stacks.a, stacks.b), stacks.b, _BA_MOVES
    for value in list(source):
        for cost, apply in moves:
            if cost(stacks.a, stacks.b, value) == best:
                apply(stacks, value, direction)
                return
    raise RuntimeError("no move matches the cheapest cost")


def _push_till_three(stacks: Stacks) -> None:
    while len(stacks.a) > 3 and not is_sorted(stacks.a):
        _move_cheapest(stacks, "a")


def push_to_b(stacks: Stacks) -> None:
    """Move values into ``b`` until three remain in ``a``, then sort those three."""
    for _ in range(2):
        if len(stacks.a) > 3 and not is_sorted(stacks.a):
            stacks.pb()
    if len(stacks.a) > 3 and not is_sorted(stacks.a):
        _push_till_three(stacks)
    if not is_sorted(stacks.a):
        sort_three(stacks)


def push_back_to_a(stacks: Stacks) -> None:
    """Push every value of ``b`` back into its place in ``a``."""
    while stacks.b:
        _move_cheapest(stacks, "b")


def sort_stacks(stacks: Stacks) -> None:
    """Sort stack ``a`` and leave its smallest value on top."""
    a = stacks.a
    if len(a) == 2:
        stacks.sa()
        return
    push_to_b(stacks)
    push_back_to_a(stacks)
    smallest = min(a)
    index = find_index(a, smallest)
    rotate = stacks.ra if index < len(a) - index else stacks.rra
    while a[0] != smallest:
        rotate()


def solve(values: Iterable[int]) -> list[Op]:
    """Return the operations that sort ``values`` (top first) in stack ``a``."""
    stacks = Stacks(values)
    if has_duplicates(stacks.a):
        raise PushSwapError("duplicate values")
    if not is_sorted(stacks.a):
        sort_stacks(stacks)
    return stacks.ops