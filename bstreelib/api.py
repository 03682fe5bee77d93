"""High-level API for bstreelib.

This module provides simple, functional interfaces over BinarySearchTree,
one function per tree operation. Unlike the methods, every function
accepts ``tree=None`` and reports it through its return value instead of
raising, so code written against a C-style "tree handle" ports directly.
"""

from typing import Any, Callable, Optional

from .config import TreeConfig
from .core.result import TreeResult
from .core.tree import BinarySearchTree
from .error_policies import ErrorPolicy


def create_tree(
    key_type: Optional[type],
    compare: Optional[Callable[[Any, Any], int]] = None,
    format: Optional[Callable[[Any], str]] = None,
    config: Optional[TreeConfig] = None,
    error_policy: Optional[ErrorPolicy] = None,
) -> BinarySearchTree:
    """Create an empty tree.

    Args:
        key_type: Type shared by every key (None = unchecked)
        compare: compare(a, b) -> negative / zero / positive
        format: format(key) -> str used by to_string
        config: Optional TreeConfig
        error_policy: Optional policy for failing callbacks

    Returns:
        An empty BinarySearchTree

    Example:
        >>> from bstreelib.testing import compare_ints, int_formatter
        >>> tree = create_tree(int, compare_ints, int_formatter)
        >>> to_string(tree)
        'Tree:'
    """
    return BinarySearchTree(
        compare=compare,
        format=format,
        key_type=key_type,
        config=config,
        error_policy=error_policy,
    )


def insert(tree: Optional[BinarySearchTree], key: Any) -> TreeResult:
    """Insert a copy of key into tree.

    Returns:
        TreeResult.OK, or INVALID_ARGUMENT for a missing tree or bad key
    """
    if tree is None:
        return TreeResult.INVALID_ARGUMENT
    return tree.insert(key)


def contains(tree: Optional[BinarySearchTree], key: Any) -> bool:
    """Check whether key is in tree. A missing tree contains nothing."""
    if tree is None:
        return False
    return tree.contains(key)


def delete(tree: Optional[BinarySearchTree], key: Any) -> TreeResult:
    """Remove the shallowest occurrence of key from tree.

    Returns:
        TreeResult.OK if removed, NOT_FOUND if absent,
        INVALID_ARGUMENT for a missing tree or bad key
    """
    if tree is None:
        return TreeResult.INVALID_ARGUMENT
    return tree.delete(key)


def depth(tree: Optional[BinarySearchTree]) -> int:
    """Depth of tree, 0 for an empty or missing tree."""
    if tree is None:
        return 0
    return tree.depth()


def to_string(tree: Optional[BinarySearchTree]) -> str:
    """In-order rendering of tree, empty string for a missing tree."""
    if tree is None:
        return ""
    return tree.to_string()


def destroy_tree(tree: Optional[BinarySearchTree]) -> None:
    """Release every node of tree. Does nothing for a missing tree."""
    if tree is None:
        return
    tree.destroy()
