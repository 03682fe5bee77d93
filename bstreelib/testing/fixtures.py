"""Test fixtures for bstreelib consumers.

These fixtures provide the integer collaborators trees are usually
exercised with, and a helper that checks structural invariants without
making node internals part of the public API.
"""

from collections import deque
from typing import Any, Dict, List, Optional, Sequence

from ..core.tree import BinarySearchTree
from ..core.traverser import InOrderTraverser, PreOrderTraverser


def compare_ints(a: int, b: int) -> int:
    """Three-way integer comparison: negative, zero or positive."""
    return (a > b) - (a < b)


def int_formatter(key: int) -> str:
    """Decimal representation of an integer key."""
    return str(key)


def balanced_order(keys: Sequence[Any]) -> List[Any]:
    """Reorder sorted keys median-first so inserting them builds a balanced tree.

    Inserting the result of ``balanced_order(range(n))`` into an empty
    tree gives depth ceil(log2(n + 1)).

    Args:
        keys: Keys in ascending order

    Returns:
        The same keys, medians before their halves
    """
    result: List[Any] = []
    pending = deque([(0, len(keys))])
    while pending:
        lo, hi = pending.popleft()
        if lo >= hi:
            continue
        mid = (lo + hi) // 2
        result.append(keys[mid])
        pending.append((lo, mid))
        pending.append((mid + 1, hi))
    return result


class TreeTestHelper:
    """Public test fixture for tree verification.

    Example:
        tree = BinarySearchTree(compare_ints, int_formatter, int)
        for k in keys:
            tree.insert(k)
        helper = TreeTestHelper(tree)
        assert helper.check_invariants() == []
    """

    def __init__(self, tree: BinarySearchTree):
        """Initialize with the tree under test.

        Args:
            tree: The tree to inspect
        """
        self._tree = tree

    def check_invariants(self, strict: bool = False) -> List[str]:
        """Check ordering, parent links and the node count.

        Deleting a two-child node copies its predecessor's key upward,
        which can leave a key equal to the node's key in its left
        subtree when duplicates are stored. The default check therefore
        only requires left keys to be not Greater.

        Args:
            strict: Require left children to compare strictly Less
                (holds for trees of distinct keys)

        Returns:
            List of violations (empty if the tree is consistent)
        """
        tree = self._tree
        violations = []
        root = tree.root

        if root is not None and root.parent is not None:
            violations.append(f"root {root.key!r} has a parent")

        count = 0
        for node, _ in PreOrderTraverser().traverse(root):
            count += 1
            if node.left is not None:
                if node.left.parent is not node:
                    violations.append(f"left child {node.left.key!r} of {node.key!r} has wrong parent")
                order = tree.compare(node.left.key, node.key)
                if order > 0 or (strict and order == 0):
                    violations.append(f"left child {node.left.key!r} not Less than {node.key!r}")
            if node.right is not None:
                if node.right.parent is not node:
                    violations.append(f"right child {node.right.key!r} of {node.key!r} has wrong parent")
                if tree.compare(node.right.key, node.key) < 0:
                    violations.append(f"right child {node.right.key!r} Less than {node.key!r}")

        # Local checks miss grandchildren on the wrong side; in-order catches those
        previous: Optional[Any] = None
        first = True
        for node, _ in InOrderTraverser().traverse(root):
            if not first and tree.compare(node.key, previous) < 0:
                violations.append(f"in-order sequence decreases at {node.key!r}")
            previous = node.key
            first = False

        if count != len(tree):
            violations.append(f"len() is {len(tree)} but {count} nodes are reachable")

        return violations

    def in_order_keys(self) -> List[Any]:
        """Return stored keys in ascending order."""
        return list(self._tree.keys())

    def shape(self) -> Dict[Any, Dict[str, Any]]:
        """Map each key to its parent and children keys.

        Assumes unique keys; with duplicates the last node wins.

        Returns:
            {key: {'parent': key, 'left': key, 'right': key}}, None for
            missing links
        """
        def key_of(node):
            return node.key if node is not None else None

        return {
            node.key: {
                'parent': key_of(node.parent),
                'left': key_of(node.left),
                'right': key_of(node.right),
            }
            for node, _ in PreOrderTraverser().traverse(self._tree.root)
        }
