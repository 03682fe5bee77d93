#!/usr/bin/env python3
"""
Integer tree example showing the functional bstreelib API.

This example demonstrates:
- Building a tree from a handful of integers
- Rendering, depth and search
- The three delete cases and a delete of a missing key
"""

import sys
from pathlib import Path

# Add parent directory to path for development
sys.path.insert(0, str(Path(__file__).parent.parent))

from bstreelib.api import create_tree, insert, contains, delete, depth, to_string, destroy_tree
from bstreelib.testing import compare_ints, int_formatter


def main():
    """Build, query and dismantle a small integer tree."""
    keys = [int(arg) for arg in sys.argv[1:]] or [6, 21, -4, 0, 120]

    tree = create_tree(int, compare_ints, int_formatter)
    for key in keys:
        insert(tree, key)

    print(to_string(tree))
    print(f"Depth: {depth(tree)}")
    print("-" * 50)

    for query in (0, 7):
        print(f"contains({query}): {contains(tree, query)}")

    # 999 exercises the not-found path
    for key in (keys[0], min(keys), 999):
        result = delete(tree, key)
        print(f"delete({key}): {result.name:<10} {to_string(tree)}")

    print(f"Depth: {depth(tree)}")
    destroy_tree(tree)


if __name__ == "__main__":
    main()
