"""bstreelib - Generic Binary Search Tree Library.

bstreelib provides a mutable, unbalanced binary search tree ordered by a
caller-supplied comparison function, storing its own copies of the keys.

Choose your interface:
━━━━━━━━━━━━━━━━━━━━━━━━━━
Object-oriented:
    from bstreelib import BinarySearchTree

Functional (tree handle passed to every call):
    from bstreelib.api import create_tree, insert, contains, delete
━━━━━━━━━━━━━━━━━━━━━━━━━━

Both interfaces share the same tree and the same result codes.
"""

__version__ = "0.1.0"

from .config import (
    TraversalStrategy,
    RenderConfig,
    TreeConfig,
    TreeConfigError,
)
from .core import (
    TreeNode,
    TreeResult,
    BinarySearchTree,
    natural_compare,
)
from .error_policies import (
    ErrorPolicy,
    FailFastPolicy,
    CollectErrorsPolicy,
    ContinueOnErrorsPolicy,
    ThresholdPolicy,
)
from . import api

__all__ = [
    "__version__",
    # Core
    "TreeNode",
    "TreeResult",
    "BinarySearchTree",
    "natural_compare",
    # Config
    "TraversalStrategy",
    "RenderConfig",
    "TreeConfig",
    "TreeConfigError",
    # Errors
    "ErrorPolicy",
    "FailFastPolicy",
    "CollectErrorsPolicy",
    "ContinueOnErrorsPolicy",
    "ThresholdPolicy",
    # Functional API
    "api",
]
