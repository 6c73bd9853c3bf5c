"""Word dictionary kept in a binary search tree, with file loading and saving."""

from __future__ import annotations

from collections.abc import Iterator
from pathlib import Path
from typing import TextIO

from labkit.strings import readline, string_less


class _Node:
    __slots__ = ("key", "value", "left", "right")

    def __init__(self, key: str, value: str) -> None:
        self.key = key
        self.value = value
        self.left: _Node | None = None
        self.right: _Node | None = None


class Dictionary:
    """Maps words to definitions, ordered by word."""

    def __init__(self) -> None:
        self._root: _Node | None = None
        self._size = 0

    def add(self, word: str, definition: str) -> None:
        """Add ``word`` with ``definition``, replacing any previous definition."""
        if self._root is None:
            self._root = _Node(word, definition)
            self._size += 1
            return
        node = self._root
        while True:
            if word == node.key:
                node.value = definition
                return
            if string_less(word, node.key):
                if node.left is None:
                    node.left = _Node(word, definition)
                    break
                node = node.left
            else:
                if node.right is None:
                    node.right = _Node(word, definition)
                    break
                node = node.right
        self._size += 1

    def _find(self, word: str) -> _Node | None:
        node = self._root
        while node is not None and node.key != word:
            node = node.left if string_less(word, node.key) else node.right
        return node

    def search(self, word: str) -> str | None:
        """Return the definition of ``word``, or ``None`` if it is absent."""
        node = self._find(word)
        return None if node is None else node.value

    def __contains__(self, word: object) -> bool:
        return isinstance(word, str) and self._find(word) is not None

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[str]:
        """Yield the words in order."""
        for key, _ in self.items():
            yield key

    def items(self) -> Iterator[tuple[str, str]]:
        """Yield ``(word, definition)`` pairs in word order."""
        stack: list[_Node] = []
        node = self._root
        while stack or node is not None:
            while node is not None:
                stack.append(node)
                node = node.left
            node = stack.pop()
            yield node.key, node.value
            node = node.right

    def remove(self, word: str) -> None:
        """Remove ``word``; does nothing if it is absent.

        A node with two children takes the entry of the largest word
        in its left subtree.
        """
        parent: _Node | None = None
        node = self._root
        while node is not None and node.key != word:
            parent = node
            node = node.left if string_less(word, node.key) else node.right
        if node is None:
            return
        if node.left is not None and node.right is not None:
            pred_parent = node
            pred = node.left
            while pred.right is not None:
                pred_parent = pred
                pred = pred.right
            node.key, node.value = pred.key, pred.value
            parent, node = pred_parent, pred
        child = node.left if node.left is not None else node.right
        if parent is None:
            self._root = child
        elif parent.left is node:
            parent.left = child
        else:
            parent.right = child
        self._size -= 1

    def clear(self) -> None:
        """Remove every word."""
        self._root = None
        self._size = 0

    def dump(self, file: TextIO) -> None:
        """Write each entry as ``word:definition`` on its own line, in order."""
        for key, value in self.items():
            file.write(f"{key}:{value}\n")


def _parse_line(line: str) -> tuple[str, str] | None:
    stripped = line.lstrip(":")
    if not stripped:
        return None
    word, _, rest = stripped.partition(":")
    if not rest:
        return None
    return word, rest.lstrip(" ")


def dict_from_file(path: str | Path) -> Dictionary:
    """Load a dictionary from lines of the form ``word: definition``.

    Lines without a word or without a definition are skipped.
    Raises :class:`OSError` if the file cannot be opened.
    """
    result = Dictionary()
    with open(path, encoding="utf-8") as stream:
        while (line := readline(stream)) is not None:
            entry = _parse_line(line)
            if entry is not None:
                result.add(*entry)
    return result


def dict_to_file(dictionary: Dictionary, path: str | Path) -> None:
    """Write ``dictionary`` to ``path`` in the format read by :func:`dict_from_file`.

    Raises :class:`OSError` if the file cannot be written.
    """
    with open(path, "w", encoding="utf-8") as stream:
        dictionary.dump(stream)