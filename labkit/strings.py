"""String ordering, line reading and a small comparison command."""

from __future__ import annotations

import sys
from typing import Sequence, TextIO

_MAX_LENGTH = 20


def string_less(str1: str, str2: str) -> bool:
    """Tell whether ``str1`` comes strictly before ``str2`` by character code."""
    return str1 < str2


def readline(stream: TextIO) -> str | None:
    """Read one line from ``stream`` without its trailing newline.

    Returns ``None`` when nothing is left to read.
    """
    line = stream.readline()
    if line == "":
        return None
    return line[:-1] if line.endswith("\n") else line


def compare_report(str1: str, str2: str) -> str:
    """Describe how two strings compare, one verdict per line."""
    equal = "Los string son iguales" if str1 == str2 else "Los string NO son iguales"
    order = "String 1 es mayor" if string_less(str1, str2) else "String 2 es mayor"
    return f"{equal}\n{order}\n"


def _read_bounded(stream: TextIO) -> str:
    # At most one less than the buffer size is read; the last character is dropped.
    return stream.readline(_MAX_LENGTH - 1)[:-1]


def main(argv: Sequence[str] | None = None) -> int:
    """Read two strings from standard input and report how they compare."""
    print("Ingrese el contenido de string 1: ", end="", flush=True)
    str1 = _read_bounded(sys.stdin)
    print("Ingrese el  contenido de string 2: ", end="", flush=True)
    str2 = _read_bounded(sys.stdin)
    sys.stdout.write(compare_report(str1, str2))
    return 0


if __name__ == "__main__":
    sys.exit(main())