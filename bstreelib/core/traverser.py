"""Tree traversal strategies for bstreelib.

Traversers implement different orders for walking a binary tree.
All of them use explicit stacks or queues instead of recursion, so a
degenerate tree of any height can be walked.
"""

from abc import ABC, abstractmethod
from collections import deque
from typing import Deque, Iterator, List, Optional, Tuple, Union

from ..config import TraversalStrategy
from .node import TreeNode


class TreeTraverser(ABC):
    """Abstract base class for tree traversal strategies.

    Traversers yield ``(node, depth)`` pairs where the starting node
    has depth 0. Depth limits prune the walk the same way for every
    strategy.
    """

    @abstractmethod
    def traverse(self,
                 root: Optional[TreeNode],
                 max_depth: Optional[int] = None,
                 min_depth: int = 0) -> Iterator[Tuple[TreeNode, int]]:
        """Traverse the subtree starting from root.

        Args:
            root: Starting node for traversal (None yields nothing)
            max_depth: Maximum depth to traverse (None = unlimited)
            min_depth: Minimum depth before yielding nodes

        Yields:
            Tuples of (node, depth) where depth is relative to root
        """
        pass

    def _should_yield(self, depth: int, min_depth: int, max_depth: Optional[int]) -> bool:
        """Check if a node at given depth should be yielded."""
        if depth < min_depth:
            return False
        if max_depth is not None and depth > max_depth:
            return False
        return True

    def _should_explore(self, depth: int, max_depth: Optional[int]) -> bool:
        """Check if children of node at given depth should be explored."""
        if max_depth is None:
            return True
        return depth < max_depth


class InOrderTraverser(TreeTraverser):
    """In-order traversal: left subtree, node, right subtree.

    On a binary search tree this visits keys in ascending order.
    """

    def traverse(self,
                 root: Optional[TreeNode],
                 max_depth: Optional[int] = None,
                 min_depth: int = 0) -> Iterator[Tuple[TreeNode, int]]:
        stack: List[Tuple[TreeNode, int]] = []
        current, depth = root, 0

        while stack or current is not None:
            # Slide down the left spine, remembering every node passed
            while current is not None:
                stack.append((current, depth))
                current = current.left if self._should_explore(depth, max_depth) else None
                depth += 1

            node, depth = stack.pop()
            if self._should_yield(depth, min_depth, max_depth):
                yield (node, depth)

            current = node.right if self._should_explore(depth, max_depth) else None
            depth += 1


class PreOrderTraverser(TreeTraverser):
    """Pre-order traversal: node before its children.

    Good for copying a tree: re-inserting keys in this order
    rebuilds the same shape.
    """

    def traverse(self,
                 root: Optional[TreeNode],
                 max_depth: Optional[int] = None,
                 min_depth: int = 0) -> Iterator[Tuple[TreeNode, int]]:
        if root is None:
            return
        stack: List[Tuple[TreeNode, int]] = [(root, 0)]

        while stack:
            node, depth = stack.pop()

            if self._should_yield(depth, min_depth, max_depth):
                yield (node, depth)

            if self._should_explore(depth, max_depth):
                # Right pushed first so left is processed first
                if node.right is not None:
                    stack.append((node.right, depth + 1))
                if node.left is not None:
                    stack.append((node.left, depth + 1))


class PostOrderTraverser(TreeTraverser):
    """Post-order traversal: children before node.

    A node is yielded only after its children have been read and
    yielded, so callers may dismantle each node as it arrives. Teardown
    relies on this.
    """

    def traverse(self,
                 root: Optional[TreeNode],
                 max_depth: Optional[int] = None,
                 min_depth: int = 0) -> Iterator[Tuple[TreeNode, int]]:
        if root is None:
            return
        # (node, depth, expanded) - expanded nodes have their children queued
        stack: List[Tuple[TreeNode, int, bool]] = [(root, 0, False)]

        while stack:
            node, depth, expanded = stack.pop()

            if expanded:
                if self._should_yield(depth, min_depth, max_depth):
                    yield (node, depth)
                continue

            stack.append((node, depth, True))
            if self._should_explore(depth, max_depth):
                if node.right is not None:
                    stack.append((node.right, depth + 1, False))
                if node.left is not None:
                    stack.append((node.left, depth + 1, False))


class LevelOrderTraverser(TreeTraverser):
    """Level-order (breadth-first) traversal.

    Visits all nodes at depth N before any node at depth N+1, left to
    right within a level.
    """

    def traverse(self,
                 root: Optional[TreeNode],
                 max_depth: Optional[int] = None,
                 min_depth: int = 0) -> Iterator[Tuple[TreeNode, int]]:
        if root is None:
            return
        queue: Deque[Tuple[TreeNode, int]] = deque([(root, 0)])

        while queue:
            node, depth = queue.popleft()

            if self._should_yield(depth, min_depth, max_depth):
                yield (node, depth)

            if self._should_explore(depth, max_depth):
                for child in node.children():
                    queue.append((child, depth + 1))


def create_traverser(strategy: Union[TraversalStrategy, str]) -> TreeTraverser:
    """Create a traverser instance by strategy.

    Args:
        strategy: TraversalStrategy or its name (in_order, pre_order,
            post_order, level_order, plus short aliases)

    Returns:
        TreeTraverser instance

    Raises:
        ValueError: If strategy name is not recognized
    """
    strategies = {
        'in_order': InOrderTraverser,
        'inorder': InOrderTraverser,
        'pre_order': PreOrderTraverser,
        'preorder': PreOrderTraverser,
        'post_order': PostOrderTraverser,
        'postorder': PostOrderTraverser,
        'level_order': LevelOrderTraverser,
        'level': LevelOrderTraverser,
        'bfs': LevelOrderTraverser,
    }

    if isinstance(strategy, TraversalStrategy):
        strategy = strategy.value
    elif not isinstance(strategy, str):
        raise ValueError(f"Unknown traversal strategy: {strategy!r}")

    strategy_lower = strategy.lower()
    if strategy_lower not in strategies:
        raise ValueError(
            f"Unknown traversal strategy: {strategy}. "
            f"Choose from: {', '.join(strategies.keys())}"
        )

    return strategies[strategy_lower]()
