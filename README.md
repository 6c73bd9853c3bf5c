# labkit

A small toolkit of classic data structures and algorithms. Each one can be
used as a library, and most also come with a small command-line tool.

## What is inside

| Module | Contents |
| --- | --- |
| `labkit.cost` | Integer edge costs with an "infinite" value: `cost_inf`, `cost_is_inf`, `cost_le`, `cost_lt`, `cost_sum`, `format_cost` |
| `labkit.graph` | `Graph`, a directed graph stored as a cost matrix; `parse_graph`, `graph_from_file` |
| `labkit.dijkstra` | `dijkstra(graph, init)` gives the minimum path cost from one vertex; `minimum` |
| `labkit.strings` | `string_less`, `readline`, `compare_report` |
| `labkit.bst` | `BinarySearchTree`, a set of integers; `bst_from_file` |
| `labkit.textfuncs` | `string_length`, `string_filter`, `string_clone`, `welcome_message` |
| `labkit.dictionary` | `Dictionary` mapping words to definitions; `dict_from_file`, `dict_to_file` |
| `labkit.dict_cli` | The interactive dictionary menu |
| `labkit.intqueue` | `IntQueue`, a FIFO queue of integers; `parse_queue`, `queue_from_file`, `user_discard` |
| `labkit.arrays` | `format_array`, `array_from_file` |

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Library use

```python
from labkit.graph import parse_graph
from labkit.dijkstra import dijkstra
from labkit.cost import format_cost

graph = parse_graph("3\n0 4 #\n# 0 1\n2 # 0\n")
print([format_cost(c) for c in dijkstra(graph, 0)])

from labkit.bst import BinarySearchTree

tree = BinarySearchTree()
for value in (5, 2, 8):
    tree.add(value)
print(len(tree), 2 in tree, tree.min(), tree.max(), list(tree))
```

`BinarySearchTree` ignores elements that are already present. Iterating over it
yields the elements in ascending order, while `dump()` renders them in
pre-order. `root()`, `min()` and `max()` raise `ValueError` on an empty tree.

`Dictionary` replaces the definition when a word is added again. `search()`
returns `None` for missing words, and `items()` yields `(word, definition)`
pairs in word order.

`IntQueue.dequeue()`, `first()` and `discard(n)` raise `IndexError` when the
queue is empty or the position is out of range. `dump()` writes `[ a, b, c]`.

## File formats

A graph file starts with the number of vertices `N`, followed by an `N x N`
matrix of costs. An entry that starts with `#` marks a missing edge, which has
infinite cost:

```
3
0 4 #
# 0 1
2 # 0
```

- **Tree files** (`bst_from_file`) and **array files** (`array_from_file`) hold
  a count followed by that many integers. `array_from_file` also rejects counts
  above its `max_size`.
- **Queue files** start with `empty: <flag>`. A flag of `0` means the integers
  that follow are the queue's contents. Any other value means the queue is
  empty.
- **Dictionary files** hold one `word: definition` pair per line. Lines without
  a word or a definition are skipped.

## Commands

```
labkit-graph input.in          # read a graph and print its cost matrix
labkit-dijkstra input.in       # minimum cost from vertex 0 to every vertex
labkit-tree numbers.in         # numbered menu over a binary search tree, read from stdin
labkit-queue queue.in          # show a queue, then discard an element chosen by index
labkit-dict                    # lettered menu: add, search, remove, change, load, dump ...
labkit-strings                 # compare two short lines typed on standard input
labkit-filter                  # remove '.' from a sample string
labkit-filter filter TEXT C    # remove character C from TEXT
labkit-filter welcome          # greet the name typed on standard input
labkit-filter clone TEXT       # copy TEXT and print the copy with a changed start
```

Menu prompts and messages are printed in Spanish for `labkit-tree`,
`labkit-queue`, `labkit-strings` and `labkit-filter welcome`.

`labkit-strings` and `labkit-filter welcome` read at most 19 characters per
line and drop the last character read.

## What it does not do

The binary search tree and the queue exist only in memory. Both can be read
from files, but neither can be written back. The dictionary is the only
structure that `labkit-dict` can save to a file with its dump option.