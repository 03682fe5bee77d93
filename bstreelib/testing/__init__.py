"""Testing utilities for bstreelib consumers."""

from .fixtures import TreeTestHelper, balanced_order, compare_ints, int_formatter

__all__ = ['TreeTestHelper', 'balanced_order', 'compare_ints', 'int_formatter']
