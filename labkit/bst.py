"""Binary search tree of integers and an interactive command around it."""

from __future__ import annotations

import sys
from collections.abc import Iterable, Iterator
from pathlib import Path
from typing import Sequence, TextIO

_MENU = (
    "\nIngrese cual de las siguientes operaciones desea realizar: \n"
    " * 1 ........ Mostrar árbol por pantalla\n"
    " * 2 ........ Agregar un elemento\n"
    " * 3 ........ Eliminar un elemento\n"
    " * 4 ........ Chequear existencia de elemento\n"
    " * 5 ........ Mostrar longitud del árbol\n"
    " * 6 ........ Mostrar raiz, máximo y mínimo del árbol\n"
    " * 7 ........ Salir\n"
)

_QUIT = 7


class _Node:
    __slots__ = ("elem", "left", "right")

    def __init__(self, elem: int) -> None:
        self.elem = elem
        self.left: _Node | None = None
        self.right: _Node | None = None


class BinarySearchTree:
    """A set of integers kept in a binary search tree.

    Adding an element that is already present has no effect.
    """

    def __init__(self) -> None:
        self._root: _Node | None = None
        self._size = 0

    def add(self, e: int) -> None:
        """Insert ``e`` unless it is already in the tree."""
        if self._root is None:
            self._root = _Node(e)
            self._size += 1
            return
        node = self._root
        while True:
            if e == node.elem:
                return
            if e < node.elem:
                if node.left is None:
                    node.left = _Node(e)
                    break
                node = node.left
            else:
                if node.right is None:
                    node.right = _Node(e)
                    break
                node = node.right
        self._size += 1

    def remove(self, e: int) -> None:
        """Remove ``e``; does nothing if it is not in the tree.

        A node with two children takes the value of its in-order successor.
        """
        parent: _Node | None = None
        node = self._root
        while node is not None and node.elem != e:
            parent = node
            node = node.left if e < node.elem else node.right
        if node is None:
            return
        if node.left is not None and node.right is not None:
            succ_parent = node
            succ = node.right
            while succ.left is not None:
                succ_parent = succ
                succ = succ.left
            node.elem = succ.elem
            parent, node = succ_parent, succ
        child = node.left if node.left is not None else node.right
        if parent is None:
            self._root = child
        elif parent.left is node:
            parent.left = child
        else:
            parent.right = child
        self._size -= 1

    def __contains__(self, e: object) -> bool:
        node = self._root
        while node is not None:
            if e == node.elem:
                return True
            node = node.left if e < node.elem else node.right  # type: ignore[operator]
        return False

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[int]:
        """Yield the elements in ascending order."""
        stack: list[_Node] = []
        node = self._root
        while stack or node is not None:
            while node is not None:
                stack.append(node)
                node = node.left
            node = stack.pop()
            yield node.elem
            node = node.right

    def _preorder(self) -> Iterator[int]:
        stack = [self._root] if self._root is not None else []
        while stack:
            node = stack.pop()
            yield node.elem
            if node.right is not None:
                stack.append(node.right)
            if node.left is not None:
                stack.append(node.left)

    def _require_nonempty(self) -> _Node:
        if self._root is None:
            raise ValueError("the tree is empty")
        return self._root

    def root(self) -> int:
        """Return the element at the root."""
        return self._require_nonempty().elem

    def max(self) -> int:
        """Return the largest element."""
        node = self._require_nonempty()
        while node.right is not None:
            node = node.right
        return node.elem

    def min(self) -> int:
        """Return the smallest element."""
        node = self._require_nonempty()
        while node.left is not None:
            node = node.left
        return node.elem

    def dump(self) -> str:
        """Render the elements in pre-order, each followed by a space."""
        return "".join(f"{e} " for e in self._preorder())


def bst_from_file(path: str | Path) -> BinarySearchTree:
    """Read a count followed by that many integers and build a tree of them."""
    tokens = iter(Path(path).read_text().split())
    try:
        size = int(next(tokens))
    except (StopIteration, ValueError) as exc:
        raise ValueError("Invalid format.") from exc
    if size < 0:
        raise ValueError("Invalid format.")
    tree = BinarySearchTree()
    for _ in range(size):
        try:
            tree.add(int(next(tokens)))
        except (StopIteration, ValueError) as exc:
            raise ValueError("Invalid array.") from exc
    return tree


def _tokens(stream: TextIO) -> Iterable[str]:
    for line in stream:
        yield from line.split()


def _next_int(tokens: Iterator[str]) -> int | None:
    word = next(tokens, None)
    if word is None:
        return None
    try:
        return int(word)
    except ValueError:
        return None


def main(argv: Sequence[str] | None = None) -> int:
    """Load a tree from the file named on the command line and run the menu."""
    args = list(sys.argv[1:] if argv is None else argv)
    if not args:
        print("Usage: readtree <input file path>\n")
        return 1
    try:
        tree = bst_from_file(args[0])
    except FileNotFoundError:
        print("File does not exist.", file=sys.stderr)
        return 1
    except ValueError as exc:
        print(exc, file=sys.stderr)
        return 1

    tokens = iter(_tokens(sys.stdin))
    option = 0
    while option != _QUIT:
        print(_MENU, end="")
        read = _next_int(tokens)
        if read is None:
            print("Invalid format.", file=sys.stderr)
            return 1
        option = read
        if option == 1:
            print(tree.dump())
            if not tree:
                print("Árbol vacío")
        elif option in (2, 3, 4):
            e = _next_int(tokens)
            if e is None:
                print("Invalid format.", file=sys.stderr)
                return 1
            if option == 2:
                tree.add(e)
            elif option == 3:
                tree.remove(e)
            elif e in tree:
                print("El elemento existe")
            else:
                print("El elemento  No existe")
        elif option == 5:
            print(f"Longitud: {len(tree)}", end="")
        elif option == 6:
            try:
                print(f"Raiz: {tree.root()}\nMinimo: {tree.min()}\nMaximo: {tree.max()}")
            except ValueError as exc:
                print(exc, file=sys.stderr)
                return 1
        elif option != _QUIT:
            print("Opcion no displonible. Por favor, intente nuevamente: ")
    print("\nFIN DEL PROGRAMA")
    return 0


if __name__ == "__main__":
    sys.exit(main())