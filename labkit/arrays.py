"""Reading integer arrays from files and rendering them."""

from __future__ import annotations

import re
from pathlib import Path
from typing import Sequence

_INT = re.compile(r"[+-]?\d+")


def format_array(values: Sequence[int]) -> str:
    """Render ``values`` as ``[a, b, c]`` and a newline.

    An empty sequence renders as a lone ``[``.
    """
    if not values:
        return "["
    return "[" + ", ".join(str(v) for v in values) + "]\n"


def array_from_file(path: str | Path, max_size: int) -> list[int]:
    """Read a count followed by that many integers from the file at ``path``.

    Raises :class:`ValueError` if the content is malformed or the count
    exceeds ``max_size``.
    """
    tokens = iter(Path(path).read_text().split())
    first = next(tokens, None)
    if first is None or not _INT.fullmatch(first):
        raise ValueError("Invalid array.")
    size = int(first)
    if size < 0 or size > max_size:
        raise ValueError(f"Allowed size is {max_size}.")
    values = []
    for _ in range(size):
        word = next(tokens, None)
        if word is None or not _INT.fullmatch(word):
            raise ValueError("Invalid array.")
        values.append(int(word))
    return values