"""Queries that summarise the data held in a generic tree."""

from __future__ import annotations

from collections.abc import Iterator

from dsakit.tree import TreeNode


def _nodes(root: TreeNode) -> Iterator[TreeNode]:
    stack = [root]
    while stack:
        node = stack.pop()
        yield node
        stack.extend(reversed(node.children))


def _family_sum(node: TreeNode) -> int:
    return node.data + sum(child.data for child in node.children)


def contains(root: TreeNode, value: int) -> bool:
    """Whether any node of the tree holds ``value``."""
    return any(node.data == value for node in _nodes(root))


def count_leaves(root: TreeNode) -> int:
    """Number of nodes that have no children."""
    return sum(1 for node in _nodes(root) if not node.children)


def count_greater_than(root: TreeNode, value: int) -> int:
    """Number of nodes whose data is strictly greater than ``value``."""
    return sum(1 for node in _nodes(root) if node.data > value)


def largest(root: TreeNode) -> int:
    """The largest data held in the tree."""
    return max(node.data for node in _nodes(root))


def next_larger(root: TreeNode, value: int) -> int | None:
    """The smallest data strictly greater than ``value``, or None if there is none."""
    return min((node.data for node in _nodes(root) if node.data > value), default=None)


def max_child_sum_value(root: TreeNode) -> int:
    """Data of the node whose own data plus its children's data is largest.

    Ties go to the node met first in pre-order.
    """
    return max(_nodes(root), key=_family_sum).data


def max_child_sum_value_last(root: TreeNode) -> int:
    """Like :func:`max_child_sum_value`, but ties go to the node met last in pre-order."""
    best = root
    best_sum = _family_sum(root)
    for node in _nodes(root):
        total = _family_sum(node)
        if total >= best_sum:
            best, best_sum = node, total
    return best.data