import pytest
from hypothesis import given
from hypothesis import strategies as st

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
from pushswap.stack import find_index, find_place_b

AB_COSTS = [cost_rarb, cost_rrarrb, cost_rarrb, cost_rrarb]
BA_COSTS = [cost_rarb_a, cost_rrarrb_a, cost_rarrb_a, cost_rrarb_a]


@st.composite
def a_to_b(draw):
    values = draw(st.lists(st.integers(-1000, 1000), min_size=3, max_size=12, unique=True))
    nb = draw(st.integers(2, len(values) - 1))
    b_sorted = sorted(values[:nb], reverse=True)
    r = draw(st.integers(0, nb - 1))
    return values[nb:], b_sorted[r:] + b_sorted[:r]


@st.composite
def b_to_a(draw):
    values = draw(st.lists(st.integers(-1000, 1000), min_size=3, max_size=12, unique=True))
    na = draw(st.integers(2, len(values) - 1))
    a_sorted = sorted(values[:na])
    r = draw(st.integers(0, na - 1))
    return a_sorted[r:] + a_sorted[:r], values[na:]


def test_top_value_that_tops_b_costs_nothing():
    a, b = [5, 1, 4], [3, 2]
    assert [cost(a, b, 5) for cost in AB_COSTS] == [0, 0, 0, 0]
    assert cheapest_ab(a, b) == 0


def test_rarb_covers_both_index_and_place():
    a, b = [5, 1, 4], [3, 2]
    for value in a:
        assert cost_rarb(a, b, value) >= find_index(a, value)
        assert cost_rarb(a, b, value) >= find_place_b(b, value)


@given(a_to_b())
def test_cheapest_ab_is_a_lower_bound_that_is_attained(stacks):
    a, b = stacks
    best = cheapest_ab(a, b)
    costs = [cost(a, b, v) for v in a for cost in AB_COSTS]
    assert all(best <= c for c in costs)
    assert best in costs


@given(b_to_a())
def test_cheapest_ba_is_a_lower_bound_that_is_attained(stacks):
    a, b = stacks
    best = cheapest_ba(a, b)
    costs = [cost(a, b, v) for v in b for cost in BA_COSTS]
    assert all(best <= c for c in costs)
    assert best in costs


@given(a_to_b())
def test_costs_are_never_negative(stacks):
    a, b = stacks
    for value in a:
        assert cost_rarb(a, b, value) >= 0
        assert cost_rrarrb(a, b, value) >= 0
        assert cost_rarrb(a, b, value) >= 0
        assert cost_rrarb(a, b, value) >= 0


@given(b_to_a())
def test_ba_costs_are_never_negative(stacks):
    a, b = stacks
    for value in b:
        assert cost_rarb_a(a, b, value) >= 0
        assert cost_rrarrb_a(a, b, value) >= 0
        assert cost_rarrb_a(a, b, value) >= 0
        assert cost_rrarb_a(a, b, value) >= 0


def test_cheapest_ab_of_empty_a_raises():
    with pytest.raises(ValueError):
        cheapest_ab([], [2, 1])


def test_cheapest_ba_of_empty_b_raises():
    with pytest.raises(ValueError):
        cheapest_ba([1, 2], [])