"""Shared fixtures for the bstreelib test suite."""

import pytest

from bstreelib import BinarySearchTree
from bstreelib.testing import compare_ints, int_formatter


SAMPLE_KEYS = [6, 21, -4, 0, 120]


def pytest_configure(config):
    config.addinivalue_line("markers", "slow: large trees, skipped by run_tests.py unless --all")


@pytest.fixture
def int_tree():
    """Empty integer tree."""
    tree = BinarySearchTree(compare_ints, int_formatter, int)
    yield tree
    if not tree.destroyed:
        tree.destroy()


@pytest.fixture
def sample_tree(int_tree):
    """Integer tree built from 6, 21, -4, 0, 120 in that order.

    Structure:
        6
        ├── -4
        │   └── 0   (right)
        └── 21
            └── 120 (right)
    """
    for key in SAMPLE_KEYS:
        int_tree.insert(key)
    return int_tree
