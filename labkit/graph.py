"""Directed graphs stored as a cost matrix."""

from __future__ import annotations

import re
import sys
from pathlib import Path
from typing import Sequence

from labkit.cost import cost_inf, format_cost

_LEADING_INT = re.compile(r"\s*([+-]?\d+)")


def _atoi(word: str) -> int:
    """Parse the leading integer of ``word``, yielding 0 if there is none."""
    match = _LEADING_INT.match(word)
    return int(match.group(1)) if match else 0


class Graph:
    """A directed graph over vertices ``0 .. max_vertexs - 1`` with edge costs."""

    def __init__(self, max_vertexs: int) -> None:
        if max_vertexs < 0:
            raise ValueError("max_vertexs must not be negative")
        self.max_vertexs = max_vertexs
        self._costs = [[cost_inf()] * max_vertexs for _ in range(max_vertexs)]

    def _check(self, vertex: int) -> None:
        if not 0 <= vertex < self.max_vertexs:
            raise IndexError(
                f"vertex {vertex} out of range for graph of {self.max_vertexs} vertices"
            )

    def add_edge(self, source: int, target: int, cost: int) -> None:
        """Set the cost of the edge from ``source`` to ``target``."""
        self._check(source)
        self._check(target)
        self._costs[source][target] = cost

    def get_cost(self, source: int, target: int) -> int:
        """Return the cost of the edge from ``source`` to ``target``."""
        self._check(source)
        self._check(target)
        return self._costs[source][target]

    def dump(self) -> str:
        """Render the graph in the format read by :func:`parse_graph`."""
        lines = [str(self.max_vertexs)]
        lines.extend(
            "".join(f"{format_cost(cost)} " for cost in row) for row in self._costs
        )
        return "\n".join(lines) + "\n"


def parse_graph(text: str) -> Graph:
    """Build a graph from its text form: a size followed by the cost matrix.

    Entries starting with ``#`` stand for the infinite cost.
    """
    tokens = iter(text.split())
    try:
        size = int(next(tokens))
    except (StopIteration, ValueError) as exc:
        raise ValueError("Invalid format: missing graph size") from exc
    if size < 0:
        raise ValueError("Invalid format: negative graph size")
    graph = Graph(size)
    for source in range(size):
        for target in range(size):
            try:
                word = next(tokens)
            except StopIteration as exc:
                raise ValueError("Invalid format: cost matrix is incomplete") from exc
            cost = cost_inf() if word.startswith("#") else _atoi(word)
            graph.add_edge(source, target, cost)
    return graph


def graph_from_file(path: str | Path) -> Graph:
    """Read a graph from the file at ``path``."""
    return parse_graph(Path(path).read_text())


def main(argv: Sequence[str] | None = None) -> int:
    """Load the graph named on the command line and print it."""
    args = list(sys.argv[1:] if argv is None else argv)
    if not args:
        print("Usage: graph input/example_graph_1.in")
        return 1
    try:
        graph = graph_from_file(args[0])
    except FileNotFoundError:
        print("File does not exist.", file=sys.stderr)
        return 1
    sys.stdout.write(graph.dump())
    return 0


if __name__ == "__main__":
    sys.exit(main())