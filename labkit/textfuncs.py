"""Small string helpers and demonstration commands built on them."""

from __future__ import annotations

import argparse
import sys
from typing import Sequence

_MAX_LENGTH = 20
_DEMO_TEXT = "h.o.l.a m.u.n.d.o.!"
_CLONE_PREFIX = "A long"


def string_length(text: str) -> int:
    """Return the number of characters in ``text``."""
    return len(text)


def string_filter(text: str, c: str) -> str:
    """Return ``text`` with every occurrence of the character ``c`` removed."""
    if len(c) != 1:
        raise ValueError("c must be a single character")
    return "".join(ch for ch in text if ch != c)


def string_clone(text: str) -> str:
    """Return an independent copy of ``text``."""
    return "".join(list(text))


def welcome_message(name: str) -> str:
    """Return the greeting for ``name``."""
    return f"Te damos la bienvenida {name} a este maravilloso programa!"


def _run_filter(text: str, c: str) -> None:
    filtered = string_filter(text, c)
    print(
        f"original: '{text}' ({string_length(text)})\n"
        f"filtrada: '{filtered}' ({string_length(filtered)})"
    )


def _run_welcome() -> None:
    print("Ingrese su nombre y apellido: ", end="", flush=True)
    # At most one less than the buffer size is read; the last character is dropped.
    name = sys.stdin.readline(_MAX_LENGTH - 1)[:-1]
    print(welcome_message(name))


def _run_clone(text: str) -> None:
    copy = string_clone(text)
    print(f"Original: {text}")
    copy = _CLONE_PREFIX + copy[len(_CLONE_PREFIX):]
    print(f"Copia   : {copy}")


def main(argv: Sequence[str] | None = None) -> int:
    """Run one of the demonstrations: filter (default), welcome or clone."""
    parser = argparse.ArgumentParser(prog="textfuncs")
    sub = parser.add_subparsers(dest="command")
    p_filter = sub.add_parser("filter", help="remove a character from a text")
    p_filter.add_argument("text", nargs="?", default=_DEMO_TEXT)
    p_filter.add_argument("char", nargs="?", default=".")
    sub.add_parser("welcome", help="greet the name read from standard input")
    p_clone = sub.add_parser("clone", help="copy a text and alter the copy")
    p_clone.add_argument("text")
    args = parser.parse_args(list(sys.argv[1:] if argv is None else argv))

    try:
        if args.command == "welcome":
            _run_welcome()
        elif args.command == "clone":
            _run_clone(args.text)
        elif args.command == "filter":
            _run_filter(args.text, args.char)
        else:
            _run_filter(_DEMO_TEXT, ".")
    except ValueError as exc:
        print(exc, file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())