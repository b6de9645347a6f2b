"""Binary trees built from level-order arrays, and level-sum queries on them."""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass
from typing import Iterable, Optional

__all__ = ["TreeNode", "to_tree", "tree", "kth_largest_level_sum"]


@dataclass
class TreeNode:
    """A node of a binary tree holding an integer value."""

    val: int
    left: Optional["TreeNode"] = None
    right: Optional["TreeNode"] = None


def to_tree(values: Iterable[Optional[int]]) -> Optional[TreeNode]:
    """Build a tree from a level-order list where ``None`` marks a missing child.

    The pair of entries after a node's position gives its left and right
    children. Raises ValueError if the root is missing or if children are
    listed for a node that does not exist.
    """
    values = list(values)
    if not values:
        return None
    if values[0] is None:
        raise ValueError("the root of a tree cannot be null")

    root = TreeNode(values[0])
    pending: deque[TreeNode] = deque([root])
    rest = values[1:]

    for start in range(0, len(rest), 2):
        if not pending:
            raise ValueError("children listed for a node that does not exist")
        parent = pending.popleft()
        left, right = (rest[start : start + 2] + [None])[:2]
        if left is not None:
            parent.left = TreeNode(left)
            pending.append(parent.left)
        if right is not None:
            parent.right = TreeNode(right)
            pending.append(parent.right)

    return root


def _parse_entry(entry: object) -> Optional[int]:
    if isinstance(entry, bool):
        return None
    if isinstance(entry, int):
        return entry
    if isinstance(entry, str):
        try:
            return int(entry.strip())
        except ValueError:
            return None
    return None


def tree(*args: object) -> Optional[TreeNode]:
    """Build a tree from level-order entries such as ``tree(1, "null", 2)``.

    Integers and integer strings become nodes; anything else (``None``,
    ``"null"``) marks a missing child.
    """
    if not args:
        return None
    return to_tree(_parse_entry(arg) for arg in args)


def kth_largest_level_sum(root: Optional[TreeNode], k: int) -> int:
    """Return the k-th largest sum of a tree level, or -1 if there are fewer levels."""
    if root is None:
        raise ValueError("the tree must not be empty")

    sums: list[int] = []
    layer = [root]
    while layer:
        sums.append(sum(node.val for node in layer))
        layer = [child for node in layer for child in (node.left, node.right) if child]

    sums.sort(reverse=True)
    if 1 <= k <= len(sums):
        return sums[k - 1]
    return -1