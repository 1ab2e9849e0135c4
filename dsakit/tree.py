"""Generic trees whose nodes hold an integer and any number of children."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field


@dataclass
class TreeNode:
    """A node of a generic tree."""

    data: int
    children: list[TreeNode] = field(default_factory=list)

    def _walk_preorder(self) -> Iterator[TreeNode]:
        stack = [self]
        while stack:
            node = stack.pop()
            yield node
            stack.extend(reversed(node.children))

    def _walk_level_order(self) -> Iterator[TreeNode]:
        pending = deque([self])
        while pending:
            node = pending.popleft()
            yield node
            pending.extend(node.children)

    def nodes_at_level(self, k: int) -> list[int]:
        """Data of the nodes at depth ``k``, left to right; empty when ``k`` < 0."""
        if k < 0:
            return []
        level = [self]
        for _ in range(k):
            level = [child for node in level for child in node.children]
            if not level:
                break
        return [node.data for node in level]

    def preorder(self) -> list[int]:
        """Data in pre-order: each node before its children."""
        return [node.data for node in self._walk_preorder()]

    def postorder(self) -> list[int]:
        """Data in post-order: each node after its children."""
        order: list[int] = []
        stack: list[tuple[TreeNode, bool]] = [(self, False)]
        while stack:
            node, expanded = stack.pop()
            if expanded:
                order.append(node.data)
                continue
            stack.append((node, True))
            stack.extend((child, False) for child in reversed(node.children))
        return order

    @staticmethod
    def _line(node: TreeNode) -> str:
        return f"{node.data}:" + "".join(f"{child.data}," for child in node.children)

    def level_lines(self) -> list[str]:
        """One ``N:c1,c2,`` line per node, in level order."""
        return [self._line(node) for node in self._walk_level_order()]

    def preorder_lines(self) -> list[str]:
        """One ``N:c1,c2,`` line per node, in pre-order."""
        return [self._line(node) for node in self._walk_preorder()]

    def replace_with_depth(self, depth: int = 0) -> None:
        """Overwrite each node's data with its depth, this node being ``depth``."""
        stack = [(self, depth)]
        while stack:
            node, level = stack.pop()
            node.data = level
            stack.extend((child, level + 1) for child in node.children)

    def identical(self, other: TreeNode) -> bool:
        """Whether the two trees hold equal data in matching positions.

        Children are paired by position; those past the end of the shorter
        child list are not compared.
        """
        stack = [(self, other)]
        while stack:
            mine, theirs = stack.pop()
            if mine.data != theirs.data:
                return False
            stack.extend(zip(mine.children, theirs.children))
        return True

    def total(self) -> int:
        """Sum of the data of all nodes."""
        return sum(node.data for node in self._walk_preorder())

    def size(self) -> int:
        """Number of nodes in the tree."""
        return sum(1 for _ in self._walk_preorder())


def _next_int(tokens: Iterator[object], what: str) -> int:
    try:
        token = next(tokens)
    except StopIteration:
        raise ValueError(f"input ended before {what}") from None
    return int(token)  # type: ignore[call-overload]


def _next_count(tokens: Iterator[object]) -> int:
    count = _next_int(tokens, "a child count")
    if count < 0:
        raise ValueError(f"child count must not be negative, got {count}")
    return count


def read_level_order(tokens: Iterable[object]) -> TreeNode:
    """Build a tree from the root's data, then, node by node in level order,
    a child count followed by that many children's data.

    Raises ValueError when the input ends early or a count is negative.
    """
    stream = iter(tokens)
    root = TreeNode(_next_int(stream, "the root data"))
    pending = deque([root])
    while pending:
        node = pending.popleft()
        for _ in range(_next_count(stream)):
            child = TreeNode(_next_int(stream, "a child's data"))
            node.children.append(child)
            pending.append(child)
    return root


def read_preorder(tokens: Iterable[object]) -> TreeNode:
    """Build a tree from tokens where each node is its data, its child count
    and then each of its children in the same form.

    Raises ValueError when the input ends early or a count is negative.
    """
    stream = iter(tokens)
    root = TreeNode(_next_int(stream, "the root data"))
    stack: list[list] = [[root, _next_count(stream)]]
    while stack:
        top = stack[-1]
        node, remaining = top
        if remaining == 0:
            stack.pop()
            continue
        top[1] = remaining - 1
        child = TreeNode(_next_int(stream, "a child's data"))
        node.children.append(child)
        stack.append([child, _next_count(stream)])
    return root