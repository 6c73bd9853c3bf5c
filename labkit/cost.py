"""Edge costs with a distinguished infinite value."""

INFINITE_COST = 2**31 - 1


def cost_inf() -> int:
    """Return the infinite cost."""
    return INFINITE_COST


def cost_is_inf(cost: int) -> bool:
    """Tell whether ``cost`` is the infinite cost."""
    return cost == INFINITE_COST


def cost_le(c1: int, c2: int) -> bool:
    """Less-or-equal relation between costs."""
    return c1 <= c2


def cost_lt(c1: int, c2: int) -> bool:
    """Strict less-than relation between costs."""
    return c1 < c2


def cost_sum(c1: int, c2: int) -> int:
    """Add two costs; the sum is infinite if either operand is."""
    if cost_is_inf(c1) or cost_is_inf(c2):
        return INFINITE_COST
    return c1 + c2


def format_cost(cost: int) -> str:
    """Render a cost, using ``#`` for the infinite cost."""
    return "#" if cost_is_inf(cost) else str(cost)