"""Rotation costs for moving one value between the stacks.

The ``*_a`` variants price a move from ``b`` back to ``a``. The others price
a move from ``a`` to ``b``. Each cost counts the rotations only. The push
that follows is not included.
"""

from __future__ import annotations

from collections.abc import Callable, Sequence

from pushswap.stack import find_index, find_place_a, find_place_b

CostFunction = Callable[[Sequence[int], Sequence[int], int], int]


def cost_rarb(a: Sequence[int], b: Sequence[int], value: int) -> int:
    """Rotations when both ``a`` and ``b`` are rotated forwards (ra + rb)."""
    return max(find_place_b(b, value), find_index(a, value))


def cost_rrarrb(a: Sequence[int], b: Sequence[int], value: int) -> int:
    """Rotations when both stacks are reverse-rotated (rra + rrb)."""
    place = find_place_b(b, value)
    cost = len(b) - place if place else 0
    index = find_index(a, value)
    if index and cost < len(a) - index:
        cost = len(a) - index
    return cost


def cost_rrarb(a: Sequence[int], b: Sequence[int], value: int) -> int:
    """Rotations for reverse-rotating ``a`` and rotating ``b`` (rra + rb)."""
    index = find_index(a, value)
    cost = len(a) - index if index else 0
    return cost + find_place_b(b, value)


def cost_rarrb(a: Sequence[int], b: Sequence[int], value: int) -> int:
    """Rotations for rotating ``a`` and reverse-rotating ``b`` (ra + rrb)."""
    place = find_place_b(b, value)
    cost = len(b) - place if place else 0
    return find_index(a, value) + cost


def cost_rarb_a(a: Sequence[int], b: Sequence[int], value: int) -> int:
    """Rotations to bring ``value`` from ``b`` into ``a`` with ra + rb."""
    return max(find_place_a(a, value), find_index(b, value))


def cost_rrarrb_a(a: Sequence[int], b: Sequence[int], value: int) -> int:
    """Rotations to bring ``value`` from ``b`` into ``a`` with rra + rrb."""
    place = find_place_a(a, value)
    cost = len(a) - place if place else 0
    index = find_index(b, value)
    if index and cost < len(b) - index:
        cost = len(b) - index
    return cost


def cost_rarrb_a(a: Sequence[int], b: Sequence[int], value: int) -> int:
    """Rotations to bring ``value`` from ``b`` into ``a`` with ra + rrb."""
    index = find_index(b, value)
    cost = len(b) - index if index else 0
    return find_place_a(a, value) + cost


def cost_rrarb_a(a: Sequence[int], b: Sequence[int], value: int) -> int:
    """Rotations to bring ``value`` from ``b`` into ``a`` with rra + rb."""
    place = find_place_a(a, value)
    cost = len(a) - place if place else 0
    return find_index(b, value) + cost


_AB_COSTS: tuple[CostFunction, ...] = (cost_rarb, cost_rrarrb, cost_rarrb, cost_rrarb)
_BA_COSTS: tuple[CostFunction, ...] = (cost_rarb_a, cost_rrarrb_a, cost_rarrb_a, cost_rrarb_a)


def _cheapest(
    source: Sequence[int],
    first: CostFunction,
    costs: tuple[CostFunction, ...],
    a: Sequence[int],
    b: Sequence[int],
) -> int:
    if not source:
        raise ValueError("source stack is empty")
    best = first(a, b, source[0])
    for value in source:
        for cost in costs:
            best = min(best, cost(a, b, value))
    return best


def cheapest_ab(a: Sequence[int], b: Sequence[int]) -> int:
    """Smallest rotation count over every value of ``a`` and every strategy."""
    return _cheapest(a, cost_rrarrb, _AB_COSTS, a, b)


def cheapest_ba(a: Sequence[int], b: Sequence[int]) -> int:
    """Smallest rotation count over every value of ``b`` and every strategy."""
    return _cheapest(b, cost_rrarrb_a, _BA_COSTS, a, b)