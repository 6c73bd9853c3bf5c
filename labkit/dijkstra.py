"""Single-source minimum path costs with Dijkstra's algorithm."""

from __future__ import annotations

import sys
from typing import AbstractSet, Sequence

from labkit.cost import cost_inf, cost_le, cost_sum, format_cost
from labkit.graph import Graph, graph_from_file


def minimum(vertexs: AbstractSet[int], costs: Sequence[int]) -> int:
    """Return the vertex in ``vertexs`` with the lowest finite cost.

    Ties go to the lowest-numbered vertex. When every candidate has an
    infinite cost, the lowest-numbered candidate is returned.
    """
    if not vertexs:
        raise ValueError("no vertices to choose from")
    best: int | None = None
    best_cost = cost_inf()
    for vertex, cost in enumerate(costs):
        if cost < best_cost and vertex in vertexs:
            best, best_cost = vertex, cost
    return min(vertexs) if best is None else best


def dijkstra(graph: Graph, init: int) -> list[int]:
    """Return, for every vertex, the minimum cost of a path from ``init``.

    The entry for ``init`` itself is the cost of its self edge.
    """
    size = graph.max_vertexs
    if not 0 <= init < size:
        raise IndexError(f"vertex {init} out of range for graph of {size} vertices")
    pending = set(range(size))
    pending.discard(init)
    costs = [graph.get_cost(init, target) for target in range(size)]
    while pending:
        chosen = minimum(pending, costs)
        pending.discard(chosen)
        for target in pending:
            candidate = cost_sum(costs[chosen], graph.get_cost(chosen, target))
            if cost_le(candidate, costs[target]):
                costs[target] = candidate
    return costs


def main(argv: Sequence[str] | None = None) -> int:
    """Print the minimum costs from vertex 0 of the graph named on the command line."""
    args = list(sys.argv[1:] if argv is None else argv)
    if not args:
        print("Usage: ./dijkstra input/example_graph_1.in")
        return 1
    try:
        graph = graph_from_file(args[0])
    except FileNotFoundError:
        print("File does not exist.", file=sys.stderr)
        return 1
    init = 0
    costs = dijkstra(graph, init)
    print("Dijkstra Shortest Path Algorithm")
    for vertex, cost in enumerate(costs):
        print(f"Minimum cost from {init} to {vertex}: {format_cost(cost)}")
    return 0


if __name__ == "__main__":
    sys.exit(main())