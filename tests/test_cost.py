import pytest

from labkit.cost import (
    cost_inf,
    cost_is_inf,
    cost_le,
    cost_lt,
    cost_sum,
    format_cost,
)


def test_infinite_cost_is_int_max():
    assert cost_inf() == 2**31 - 1


def test_cost_is_inf():
    assert cost_is_inf(cost_inf())
    assert not cost_is_inf(0)
    assert not cost_is_inf(-1)


@pytest.mark.parametrize("a,b", [(1, 2), (0, 0), (-3, 7), (5, cost_inf())])
def test_le_and_lt(a, b):
    assert cost_le(a, b)
    assert cost_lt(a, b) == (a != b)
    assert not cost_lt(b, a)


def test_sum_with_infinite_is_infinite():
    assert cost_is_inf(cost_sum(cost_inf(), 3))
    assert cost_is_inf(cost_sum(3, cost_inf()))
    assert cost_is_inf(cost_sum(cost_inf(), cost_inf()))


def test_sum_finite():
    assert cost_sum(2, 3) == 5
    assert cost_sum(2, 3) == cost_sum(3, 2)
    assert cost_sum(0, 7) == 7


def test_format_cost():
    assert format_cost(cost_inf()) == "#"
    assert format_cost(42) == "42"
    assert format_cost(-4) == "-4"