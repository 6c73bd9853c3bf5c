"""Classic data structures and algorithms: trees, dictionaries, queues, arrays and cost graphs."""

__version__ = "0.1.0"

__all__ = [
    "arrays",
    "bst",
    "cost",
    "dict_cli",
    "dictionary",
    "dijkstra",
    "graph",
    "intqueue",
    "strings",
    "textfuncs",
]