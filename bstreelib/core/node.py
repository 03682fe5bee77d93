"""TreeNode for bstreelib.

The TreeNode is intentionally kept simple - it's a data container.
All ordering and restructuring logic lives in BinarySearchTree, and
nodes never call back into the tree.
"""

import weakref
from typing import Any, Iterator, Optional


class TreeNode:
    """A single node of a binary search tree.

    Ownership runs downward: a node owns its ``left`` and ``right``
    children. The ``parent`` link is a weak reference used only for
    restructuring during deletion, so it never keeps a node alive.
    """

    __slots__ = ('key', 'left', 'right', '_parent', '__weakref__')

    def __init__(self, key: Any):
        """Initialize a detached node holding ``key``.

        Args:
            key: The (already copied) key this node owns
        """
        self.key = key
        self.left: Optional['TreeNode'] = None
        self.right: Optional['TreeNode'] = None
        self._parent: Optional[weakref.ref] = None

    @property
    def parent(self) -> Optional['TreeNode']:
        """Parent node, or None for the root or a detached node."""
        if self._parent is None:
            return None
        return self._parent()

    @parent.setter
    def parent(self, node: Optional['TreeNode']) -> None:
        self._parent = weakref.ref(node) if node is not None else None

    def is_leaf(self) -> bool:
        """Check if this node has no children.

        Returns:
            bool: True if both child links are empty
        """
        return self.left is None and self.right is None

    def children(self) -> Iterator['TreeNode']:
        """Yield the present children, left first."""
        if self.left is not None:
            yield self.left
        if self.right is not None:
            yield self.right

    def release(self) -> None:
        """Drop the key and every link held by this node.

        Called exactly once when the node leaves the tree. Children
        are not touched beyond clearing the references to them.
        """
        self.key = None
        self.left = None
        self.right = None
        self._parent = None

    def __repr__(self) -> str:
        """Detailed representation for debugging."""
        return f"{self.__class__.__name__}(key={self.key!r})"
