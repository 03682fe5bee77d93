"""Core abstractions for bstreelib.

This module contains the node, the tree that owns the nodes, and the
traversers the tree dispatches to.
"""

from .node import TreeNode
from .result import TreeResult
from .traverser import (
    TreeTraverser,
    InOrderTraverser,
    PreOrderTraverser,
    PostOrderTraverser,
    LevelOrderTraverser,
    create_traverser,
)
from .tree import BinarySearchTree, natural_compare

__all__ = [
    "TreeNode",
    "TreeResult",
    "TreeTraverser",
    "InOrderTraverser",
    "PreOrderTraverser",
    "PostOrderTraverser",
    "LevelOrderTraverser",
    "create_traverser",
    "BinarySearchTree",
    "natural_compare",
]
