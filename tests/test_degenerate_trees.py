"""Degenerate and randomized trees.

Sorted insertion builds a chain as deep as the number of keys. Every
operation must cope with chains deeper than the interpreter's recursion
limit.
"""

import random
import sys
from collections import Counter

import pytest

from bstreelib import BinarySearchTree, TraversalStrategy, TreeResult
from bstreelib.testing import TreeTestHelper, compare_ints, int_formatter


def chain(n):
    tree = BinarySearchTree(compare_ints, int_formatter, int)
    for key in range(n):
        tree.insert(key)
    return tree


def check_chain(n):
    tree = chain(n)

    assert tree.depth() == n
    assert tree.contains(n - 1)
    assert not tree.contains(n)
    assert tree.maximum() == n - 1
    assert tree.to_string() == "Tree: " + " ".join(str(k) for k in range(n))
    for strategy in TraversalStrategy:
        assert len(list(tree.traverse(strategy))) == n

    # Delete from the bottom and the top of the chain
    assert tree.delete(n - 1) is TreeResult.OK
    assert tree.delete(0) is TreeResult.OK
    assert tree.depth() == n - 2

    root = tree.root
    tree.destroy()
    assert root.key is None


def test_chain_deeper_than_recursion_limit():
    check_chain(sys.getrecursionlimit() + 500)


@pytest.mark.slow
def test_large_sorted_chain():
    check_chain(20_000)


def run_random_operations(seed, operations, key_range, check_every):
    """Mix inserts and deletes, checking against a multiset model."""
    rng = random.Random(seed)
    tree = BinarySearchTree(compare_ints, int_formatter, int)
    helper = TreeTestHelper(tree)
    model = Counter()

    for step in range(operations):
        key = rng.randrange(key_range)
        if rng.random() < 0.6:
            assert tree.insert(key) is TreeResult.OK
            model[key] += 1
            assert tree.contains(key)
        else:
            result = tree.delete(key)
            if model[key]:
                assert result is TreeResult.OK
                model[key] -= 1
            else:
                assert result is TreeResult.NOT_FOUND
            assert tree.contains(key) == (model[key] > 0)

        if step % check_every == 0:
            assert helper.check_invariants() == []
            assert list(tree) == sorted(model.elements())

    assert helper.check_invariants() == []
    assert list(tree) == sorted(model.elements())
    assert len(tree) == sum(model.values())


@pytest.mark.parametrize("seed", [0, 1, 2, 3])
def test_random_operations_match_model(seed):
    run_random_operations(seed, operations=600, key_range=50, check_every=1)


@pytest.mark.slow
def test_large_random_tree_invariants():
    run_random_operations(42, operations=50_000, key_range=5_000, check_every=5_000)
