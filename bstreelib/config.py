"""Configuration system for bstreelib.

This module defines how users tune a tree: how keys are stored,
how the tree renders itself, and which traversal orders exist.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import List


class TraversalStrategy(Enum):
    """Order in which nodes are visited.

    Every strategy is implemented with an explicit stack or queue,
    so degenerate (list-shaped) trees never hit the recursion limit.
    """
    IN_ORDER = "in_order"           # Left, node, right (ascending keys)
    PRE_ORDER = "pre_order"         # Node before children
    POST_ORDER = "post_order"       # Children before node
    LEVEL_ORDER = "level_order"     # Level by level


@dataclass
class RenderConfig:
    """Configuration for the string rendering of a tree."""

    label: str = "Tree:"    # Leading label, empty string for none
    separator: str = " "    # Placed between label and each formatted key

    def render(self, parts: List[str]) -> str:
        """Join formatted keys behind the label.

        Args:
            parts: Formatted keys in output order

        Returns:
            The rendered string
        """
        if self.label:
            parts = [self.label] + parts
        return self.separator.join(parts)


@dataclass
class TreeConfig:
    """Complete configuration for a BinarySearchTree.

    Trees validate their configuration once at construction; the
    configuration is not consulted for changes afterwards.
    """

    # Rendering
    render: RenderConfig = field(default_factory=RenderConfig)

    # Key storage
    copy_keys: bool = True      # Store a deep copy of every inserted key
    strict_types: bool = True   # Reject keys that don't match key_type

    @classmethod
    def compact(cls) -> 'TreeConfig':
        """Create config that renders keys without a label.

        Returns:
            TreeConfig whose rendering is just the space-separated keys
        """
        return cls(render=RenderConfig(label=""))

    @classmethod
    def shared_keys(cls) -> 'TreeConfig':
        """Create config that stores caller keys without copying.

        Only safe for immutable keys (ints, strings, tuples of those).

        Returns:
            TreeConfig with key copying disabled
        """
        return cls(copy_keys=False)

    def validate(self) -> List[str]:
        """Validate configuration for consistency.

        Returns:
            List of validation errors (empty if valid)
        """
        errors = []

        if not isinstance(self.render.label, str):
            errors.append("render.label must be a string")

        if not isinstance(self.render.separator, str):
            errors.append("render.separator must be a string")
        elif not self.render.separator:
            errors.append("render.separator cannot be empty")

        return errors


class TreeConfigError(Exception):
    """Raised when a TreeConfig fails validation."""
    pass
