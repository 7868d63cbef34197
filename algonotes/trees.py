"""Binary search trees, mirroring, lowest common ancestors and generic (n-ary) trees."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterable
from dataclasses import dataclass, field
from typing import Any


@dataclass(eq=False)
class BinaryNode:
    """A node of a binary tree; nodes compare by identity."""

    value: Any
    left: BinaryNode | None = field(default=None, repr=False)
    right: BinaryNode | None = field(default=None, repr=False)


@dataclass(eq=False)
class TreeNode:
    """A node of a generic tree with any number of ordered children."""

    value: Any
    children: list[TreeNode] = field(default_factory=list, repr=False)


def bst_insert(root: BinaryNode | None, value: Any) -> BinaryNode:
    """Insert ``value`` into the search tree and return its root; equal values go right."""
    node = BinaryNode(value)
    if root is None:
        return node
    current = root
    while True:
        if value < current.value:
            if current.left is None:
                current.left = node
                return root
            current = current.left
        else:
            if current.right is None:
                current.right = node
                return root
            current = current.right


def bst_from(values: Iterable[Any]) -> BinaryNode | None:
    """Build a binary search tree by inserting ``values`` in order."""
    root: BinaryNode | None = None
    for value in values:
        root = bst_insert(root, value)
    return root


def bst_min(root: BinaryNode | None) -> Any:
    """Return the smallest value of a binary search tree."""
    if root is None:
        raise ValueError("an empty tree has no minimum")
    while root.left is not None:
        root = root.left
    return root.value


def mirror(root: BinaryNode | None) -> BinaryNode | None:
    """Swap the children of every node, level by level, in place; return the root."""
    queue = deque([root] if root is not None else [])
    while queue:
        node = queue.popleft()
        node.left, node.right = node.right, node.left
        if node.left is not None:
            queue.append(node.left)
        if node.right is not None:
            queue.append(node.right)
    return root


def inorder(root: BinaryNode | None) -> list[Any]:
    """Return the values of the tree in in-order sequence."""
    values: list[Any] = []
    stack: list[BinaryNode] = []
    node = root
    while stack or node is not None:
        while node is not None:
            stack.append(node)
            node = node.left
        node = stack.pop()
        values.append(node.value)
        node = node.right
    return values


def lowest_common_ancestor(root: BinaryNode | None, first: Any, second: Any) -> BinaryNode | None:
    """Return the lowest common ancestor of two values in a binary search tree, or None if empty."""
    node = root
    while node is not None:
        if node.value > first and node.value > second:
            node = node.left
        elif node.value < first and node.value < second:
            node = node.right
        else:
            return node
    return None


def tree_from_level_order(tokens: Iterable[Any] | str) -> TreeNode:
    """Build a generic tree from level-order input: root, then each node's child count and children.

    ``tokens`` may be a whitespace-separated string or an iterable of integers.
    """
    if isinstance(tokens, str):
        tokens = tokens.split()
    stream = (int(token) for token in tokens)

    def take(what: str) -> int:
        try:
            return next(stream)
        except StopIteration:
            raise ValueError(f"input ended while reading {what}") from None

    root = TreeNode(take("the root value"))
    queue = deque([root])
    while queue:
        parent = queue.popleft()
        count = take("a child count")
        if count < 0:
            raise ValueError(f"child count must not be negative, got {count}")
        for _ in range(count):
            child = TreeNode(take("a child value"))
            parent.children.append(child)
            queue.append(child)
    return root


def next_larger(root: TreeNode | None, threshold: Any) -> TreeNode | None:
    """Return the node whose value is the smallest one greater than ``threshold``, or None.

    Among equal candidates the first one in pre-order wins.
    """
    best: TreeNode | None = None
    stack = [root] if root is not None else []
    while stack:
        node = stack.pop()
        if node.value > threshold and (best is None or node.value < best.value):
            best = node
        stack.extend(reversed(node.children))
    return best