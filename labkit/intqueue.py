"""Queue of integers, its text file format and a command that edits one."""

from __future__ import annotations

import re
import sys
from collections import deque
from collections.abc import Iterable, Iterator
from pathlib import Path
from typing import Sequence, TextIO

_HEADER = re.compile(r"empty:\s*([+-]?\d+)")
_INT = re.compile(r"[+-]?\d+")

_HELP = (
    "Usage: {prog} <input file path>\n\n"
    "Loads a queue given in a file in disk and prints it on the screen."
    "\n\n"
    "The input file must have the following format:\n"
    ' * The first line must contain the string "empty: " followed by a number'
    " that indicates with 0 that the content of the file is NOT EMPTY, and"
    " any other value indicates that there is no data in the file.\n"
    " * The second line must contain the members of the queue"
    " separated by one or more spaces. Each member must be an integer."
    "\n\n"
    "In other words, the file format is:\n"
    "empty: <empty_flag>\n"
    "<elem 1> <elem 2> ... <elem N>\n\n"
)


class IntQueue:
    """A first-in first-out queue of integers."""

    def __init__(self) -> None:
        self._items: deque[int] = deque()

    def enqueue(self, e: int) -> None:
        """Add ``e`` at the back of the queue."""
        self._items.append(e)

    def dequeue(self) -> int:
        """Remove and return the element at the front of the queue."""
        if not self._items:
            raise IndexError("dequeue from an empty queue")
        return self._items.popleft()

    def first(self) -> int:
        """Return the element at the front of the queue."""
        if not self._items:
            raise IndexError("first of an empty queue")
        return self._items[0]

    def is_empty(self) -> bool:
        """Tell whether the queue holds no elements."""
        return not self._items

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[int]:
        """Yield the elements from front to back."""
        return iter(self._items)

    def discard(self, n: int) -> None:
        """Remove the element at position ``n``, counting from the front at 0."""
        if not 0 <= n < len(self._items):
            raise IndexError(f"position {n} out of range for queue of {len(self._items)}")
        del self._items[n]

    def dump(self, file: TextIO | None = None) -> None:
        """Write the queue as ``[ a, b, c]`` followed by a newline."""
        out = sys.stdout if file is None else file
        out.write("[ " + ", ".join(str(e) for e in self._items) + "]\n")


def parse_queue(text: str) -> IntQueue:
    """Build a queue from its text form.

    The text starts with ``empty: <flag>``; a flag of 0 means integers
    follow, any other value means the queue is empty.
    """
    match = _HEADER.match(text)
    if match is None:
        raise ValueError("Invalid array.")
    queue = IntQueue()
    if int(match.group(1)) != 0:
        return queue
    rest = text[match.end():]
    tokens = rest.split()
    if not tokens and rest:
        raise ValueError("Invalid array.")
    for token in tokens:
        if not _INT.fullmatch(token):
            raise ValueError("Invalid array.")
        queue.enqueue(int(token))
    return queue


def queue_from_file(path: str | Path) -> IntQueue:
    """Read a queue from the file at ``path``."""
    return parse_queue(Path(path).read_text())


def _tokens(stream: TextIO) -> Iterable[str]:
    for line in stream:
        yield from line.split()


def user_discard(
    queue: IntQueue, infile: TextIO | None = None, outfile: TextIO | None = None
) -> IntQueue:
    """Ask for a position and remove that element from ``queue``.

    Out-of-range positions are reported and asked again; input that is
    not a number raises :class:`ValueError`.
    """
    inp = sys.stdin if infile is None else infile
    out = sys.stdout if outfile is None else outfile
    size = len(queue)
    if size == 0:
        raise ValueError("the queue is empty")
    out.write("\nEliminar n-esimo elemento\n-------------------------\n\n")
    queue.dump(out)
    tokens = iter(_tokens(inp))
    while True:
        out.write(f"\nElija un elemento del 0-{size - 1}: ")
        word = next(tokens, None)
        if word is None or not _INT.fullmatch(word):
            out.write("Elemento inválido!\n")
            raise ValueError("invalid position")
        position = int(word)
        if 0 <= position < size:
            queue.discard(position)
            return queue
        out.write("Elemento inválido!\n")


def main(argv: Sequence[str] | None = None) -> int:
    """Load the queue named on the command line, print it and remove one element."""
    args = list(sys.argv[1:] if argv is None else argv)
    if len(args) != 1:
        print(_HELP.format(prog="cola"), end="")
        return 1
    try:
        queue = queue_from_file(args[0])
    except FileNotFoundError:
        print("File does not exist.", file=sys.stderr)
        return 1
    except ValueError as exc:
        print(exc, file=sys.stderr)
        return 1
    print(f"length: {len(queue)}")
    queue.dump(sys.stdout)
    try:
        user_discard(queue, sys.stdin, sys.stdout)
    except ValueError as exc:
        print(exc, file=sys.stderr)
        return 1
    queue.dump(sys.stdout)
    return 0


if __name__ == "__main__":
    sys.exit(main())