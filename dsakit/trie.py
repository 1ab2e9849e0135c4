"""Prefix trees over lower-case words."""

from __future__ import annotations

import string
from collections.abc import Iterable
from dataclasses import dataclass, field

_ALPHABET = frozenset(string.ascii_lowercase)


def _check(word: str) -> None:
    bad = set(word) - _ALPHABET
    if bad:
        raise ValueError(
            f"only the letters a-z are allowed, got {''.join(sorted(bad))!r}"
        )


@dataclass
class _Node:
    children: dict[str, _Node] = field(default_factory=dict)
    terminal: bool = False


def _descend(root: _Node, text: str) -> _Node | None:
    node = root
    for char in text:
        found = node.children.get(char)
        if found is None:
            return None
        node = found
    return node


class Trie:
    """A set of lower-case words supporting lookup, removal and completion."""

    def __init__(self) -> None:
        self._root = _Node()

    def insert(self, word: str) -> None:
        """Add ``word``; ValueError if it has characters outside a-z."""
        _check(word)
        node = self._root
        for char in word:
            node = node.children.setdefault(char, _Node())
        node.terminal = True

    def search(self, word: str) -> bool:
        """Whether ``word`` was inserted and not removed since."""
        _check(word)
        node = _descend(self._root, word)
        return node is not None and node.terminal

    def __contains__(self, word: object) -> bool:
        if not isinstance(word, str) or not set(word) <= _ALPHABET:
            return False
        return self.search(word)

    def remove(self, word: str) -> None:
        """Drop ``word`` if present, pruning branches that no longer lead anywhere."""
        _check(word)
        path = [self._root]
        for char in word:
            child = path[-1].children.get(char)
            if child is None:
                return
            path.append(child)
        path[-1].terminal = False
        for char, parent, node in reversed(list(zip(word, path, path[1:]))):
            if node.terminal or node.children:
                break
            del parent.children[char]

    def complete(self, prefix: str) -> list[str]:
        """All stored words starting with ``prefix``, in alphabetical order."""
        _check(prefix)
        start = _descend(self._root, prefix)
        if start is None:
            return []
        words: list[str] = []
        stack = [(start, prefix)]
        while stack:
            node, text = stack.pop()
            if node.terminal:
                words.append(text)
            stack.extend(
                (child, text + char)
                for char, child in sorted(node.children.items(), reverse=True)
            )
        return words


class SuffixTrie:
    """Holds every suffix of the inserted words, so any substring can be found."""

    def __init__(self) -> None:
        self._root = _Node()

    def insert(self, word: str) -> None:
        """Add every suffix of ``word``; ValueError if it has characters outside a-z."""
        _check(word)
        for begin in range(len(word)):
            node = self._root
            for char in word[begin:]:
                node = node.children.setdefault(char, _Node())

    def search(self, pattern: str) -> bool:
        """Whether ``pattern`` occurs inside any inserted word."""
        _check(pattern)
        return _descend(self._root, pattern) is not None


def has_palindrome_pair(words: Iterable[str]) -> bool:
    """Whether some word reversed equals itself or a word given before it."""
    seen: set[str] = set()
    for word in words:
        seen.add(word)
        if word[::-1] in seen:
            return True
    return False