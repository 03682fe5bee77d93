"""BinarySearchTree for bstreelib.

The tree owns every node and is the only thing that restructures them.
It dispatches to the traversers for anything that walks the whole tree
(depth, rendering, teardown) and does its own root-to-leaf walks for
insert, search and delete.

A tree is not safe for concurrent use. Insert and delete rewire several
links in sequence; callers sharing a tree across threads must hold one
lock around every call.
"""

import copy
import warnings
from typing import Any, Callable, Iterator, Optional, Tuple, Union

from ..config import TraversalStrategy, TreeConfig, TreeConfigError
from ..error_policies import CollectErrorsPolicy, ErrorPolicy
from .node import TreeNode
from .result import TreeResult
from .traverser import (
    InOrderTraverser,
    LevelOrderTraverser,
    PostOrderTraverser,
    create_traverser,
)


Comparator = Callable[[Any, Any], int]
Formatter = Callable[[Any], str]


def natural_compare(a: Any, b: Any) -> int:
    """Three-way comparison using the keys' own ordering."""
    return (a > b) - (a < b)


class BinarySearchTree:
    """Unbalanced binary search tree over caller-ordered keys.

    Keys that compare Less go left; everything else, including equal
    keys, goes right. No rebalancing is done, so inserting sorted keys
    produces a chain as deep as the number of keys. Every walk is
    iterative, so such chains are handled without recursion.

    Example:
        >>> tree = BinarySearchTree(key_type=int)
        >>> for k in (6, 21, -4, 0, 120):
        ...     _ = tree.insert(k)
        >>> tree.to_string()
        'Tree: -4 0 6 21 120'
    """

    def __init__(self,
                 compare: Optional[Comparator] = None,
                 format: Optional[Formatter] = None,
                 key_type: Optional[type] = None,
                 config: Optional[TreeConfig] = None,
                 error_policy: Optional[ErrorPolicy] = None):
        """Create an empty tree.

        Args:
            compare: compare(a, b) returning negative, zero or positive.
                Defaults to the keys' natural ordering.
            format: format(key) returning the display string of a key.
                Defaults to str.
            key_type: Type every key must be an instance of (None = any)
            config: Tree configuration (defaults to TreeConfig())
            error_policy: Policy for failing callbacks
                (defaults to CollectErrorsPolicy)

        Raises:
            TreeConfigError: If the configuration is invalid
        """
        self._config = config or TreeConfig()

        config_errors = self._config.validate()
        if config_errors:
            raise TreeConfigError(
                f"Invalid configuration: {'; '.join(config_errors)}"
            )

        self._compare = compare or natural_compare
        self._format = format or str
        self._key_type = key_type
        self._policy = error_policy or CollectErrorsPolicy()

        self._root: Optional[TreeNode] = None
        self._size = 0
        self._destroyed = False

    # Read-only bindings, fixed for the tree's lifetime

    @property
    def root(self) -> Optional[TreeNode]:
        return self._root

    @property
    def compare(self) -> Comparator:
        return self._compare

    @property
    def format(self) -> Formatter:
        return self._format

    @property
    def key_type(self) -> Optional[type]:
        return self._key_type

    @property
    def config(self) -> TreeConfig:
        return self._config

    @property
    def error_policy(self) -> ErrorPolicy:
        return self._policy

    @property
    def destroyed(self) -> bool:
        return self._destroyed

    # Core operations

    def insert(self, key: Any) -> TreeResult:
        """Insert a copy of ``key``.

        Duplicates are allowed and land in the right subtree of the
        first equal key on their path.

        Args:
            key: Key to insert

        Returns:
            TreeResult.OK, or INVALID_ARGUMENT if the key is None, has
            the wrong type, or a callback failed (tree left unchanged)
        """
        if not self._usable('insert') or not self._accepts(key):
            return TreeResult.INVALID_ARGUMENT

        # Walk and copy before touching any link
        try:
            parent = None
            current = self._root
            go_left = False
            while current is not None:
                parent = current
                go_left = self._compare(key, current.key) < 0
                current = current.left if go_left else current.right

            node = TreeNode(self._copy_key(key))
        except Exception as error:
            self._policy.handle(error, 'insert', key)
            return TreeResult.INVALID_ARGUMENT

        node.parent = parent
        if parent is None:
            self._root = node
        elif go_left:
            parent.left = node
        else:
            parent.right = node

        self._size += 1
        return TreeResult.OK

    def contains(self, key: Any) -> bool:
        """Check whether a key equal to ``key`` is stored.

        Args:
            key: Key to look for

        Returns:
            True if found. False if absent, and also for a None key, a
            key of the wrong type, or a failing comparator.
        """
        if not self._usable('contains') or not self._accepts(key):
            return False

        try:
            return self._find(key) is not None
        except Exception as error:
            self._policy.handle(error, 'contains', key)
            return False

    def delete(self, key: Any) -> TreeResult:
        """Remove the shallowest node whose key equals ``key``.

        A node with two children takes over the key of its in-order
        predecessor (the rightmost node of its left subtree), and that
        predecessor is spliced out instead.

        Args:
            key: Key to remove

        Returns:
            TreeResult.OK if a node was removed, NOT_FOUND if no node
            matched, INVALID_ARGUMENT for bad input or a failing callback
        """
        if not self._usable('delete') or not self._accepts(key):
            return TreeResult.INVALID_ARGUMENT

        # Every callback runs here, before the first relink
        try:
            node = self._find(key)
            if node is None:
                return TreeResult.NOT_FOUND
            if node.left is not None and node.right is not None:
                predecessor = self._subtree_maximum(node.left)
                predecessor_key = self._copy_key(predecessor.key)
        except Exception as error:
            self._policy.handle(error, 'delete', key)
            return TreeResult.INVALID_ARGUMENT

        if node.left is None:
            self._transplant(node, node.right)
        elif node.right is None:
            self._transplant(node, node.left)
        else:
            node.key = predecessor_key
            # Rightmost node of a subtree has no right child
            self._transplant(predecessor, predecessor.left)

        return TreeResult.OK

    def depth(self) -> int:
        """Number of nodes on the longest root-to-leaf path (0 if empty)."""
        if not self._usable('depth'):
            return 0
        deepest = max((d for _, d in LevelOrderTraverser().traverse(self._root)), default=-1)
        return deepest + 1

    def to_string(self) -> str:
        """Render the label followed by every formatted key in ascending order.

        Returns:
            e.g. "Tree: -4 0 6 21 120", or just the label when empty
        """
        if not self._usable('to_string'):
            return ""

        parts = [self._format_key(node.key)
                 for node, _ in InOrderTraverser().traverse(self._root)]
        return self._config.render.render(parts)

    def destroy(self) -> None:
        """Release every node and retire the tree.

        Afterwards the tree is empty and every operation reports
        INVALID_ARGUMENT (or False / 0 / "") with a RuntimeWarning.
        """
        if not self._usable('destroy'):
            return

        # Post-order hands over each node after its children are done
        for node, _ in PostOrderTraverser().traverse(self._root):
            node.release()

        self._root = None
        self._size = 0
        self._destroyed = True

    # Queries built on the core

    def minimum(self) -> Any:
        """Smallest key, or None if the tree is empty."""
        if self._root is None:
            return None
        return self._subtree_minimum(self._root).key

    def maximum(self) -> Any:
        """Largest key, or None if the tree is empty."""
        if self._root is None:
            return None
        return self._subtree_maximum(self._root).key

    def traverse(self,
                 strategy: Union[TraversalStrategy, str] = TraversalStrategy.IN_ORDER,
                 max_depth: Optional[int] = None,
                 min_depth: int = 0) -> Iterator[Tuple[Any, int]]:
        """Walk the tree in the given order.

        Args:
            strategy: Traversal order (in_order, pre_order, post_order, level_order)
            max_depth: Deepest level to visit, root = 0 (None = unlimited)
            min_depth: Shallowest level to yield

        Returns:
            Iterator of (key, depth) pairs

        Raises:
            ValueError: If strategy is not recognized
        """
        traverser = create_traverser(strategy)
        return ((node.key, depth)
                for node, depth in traverser.traverse(self._root, max_depth, min_depth))

    def keys(self) -> Iterator[Any]:
        """Iterate over stored keys in ascending order."""
        for node, _ in InOrderTraverser().traverse(self._root):
            yield node.key

    def is_empty(self) -> bool:
        return self._root is None

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[Any]:
        return self.keys()

    def __contains__(self, key: Any) -> bool:
        return self.contains(key)

    def __str__(self) -> str:
        return self.to_string()

    def __repr__(self) -> str:
        if self._destroyed:
            return f"{self.__class__.__name__}(destroyed)"
        return f"{self.__class__.__name__}(size={self._size}, depth={self.depth()})"

    def __enter__(self) -> 'BinarySearchTree':
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        if not self._destroyed:
            self.destroy()

    # Internals

    def _usable(self, operation: str) -> bool:
        if self._destroyed:
            warnings.warn(
                f"{operation}() called on a destroyed {self.__class__.__name__}",
                RuntimeWarning,
                stacklevel=3
            )
            return False
        return True

    def _accepts(self, key: Any) -> bool:
        if key is None:
            return False
        if self._config.strict_types and self._key_type is not None:
            # bool subclasses int but is not an integer key
            if isinstance(key, bool) and self._key_type is int:
                return False
            return isinstance(key, self._key_type)
        return True

    def _copy_key(self, key: Any) -> Any:
        return copy.deepcopy(key) if self._config.copy_keys else key

    def _format_key(self, key: Any) -> str:
        try:
            text = self._format(key)
            if not isinstance(text, str):
                raise TypeError(f"format() returned {type(text).__name__}, expected str")
            return text
        except Exception as error:
            self._policy.handle(error, 'format', key)
            return repr(key)

    def _find(self, key: Any) -> Optional[TreeNode]:
        """Return the shallowest node equal to key. Comparator errors propagate."""
        current = self._root
        while current is not None:
            order = self._compare(key, current.key)
            if order < 0:
                current = current.left
            elif order > 0:
                current = current.right
            else:
                return current
        return None

    @staticmethod
    def _subtree_minimum(node: TreeNode) -> TreeNode:
        while node.left is not None:
            node = node.left
        return node

    @staticmethod
    def _subtree_maximum(node: TreeNode) -> TreeNode:
        while node.right is not None:
            node = node.right
        return node

    def _transplant(self, u: TreeNode, v: Optional[TreeNode]) -> None:
        """Splice ``v`` into ``u``'s position, then release ``u`` alone.

        ``v``'s subtree is carried over untouched.
        """
        parent = u.parent
        if parent is None:
            self._root = v
        elif u is parent.left:
            parent.left = v
        else:
            parent.right = v

        if v is not None:
            v.parent = parent

        u.release()
        self._size -= 1
