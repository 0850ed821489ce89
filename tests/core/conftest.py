"""Pytest fixtures for core tests."""

import pytest


@pytest.fixture
def six_nodes():
    """Six parentless target handles with principals 1..6."""
    from tests.core.forest_test_helpers import make_ref

    return [make_ref(i) for i in range(1, 7)]


@pytest.fixture
def forest():
    """Empty NodeForest with the default start guard."""
    from supportforest.graph import NodeForest

    return NodeForest()


@pytest.fixture
def staking_forest():
    """Forest with a self-vote and a short voter -> target chain.

    voter:1 -> target:1 -> target:2
    voter:3 -> target:2
    """
    from supportforest.graph import NodeForest

    f = NodeForest()
    v1, t1, t2, v3 = f.voter(1), f.target(1), f.target(2), f.voter(3)
    f.set_parent(v1.id, t1.id)
    f.set_parent(t1.id, t2.id)
    f.set_parent(v3.id, t2.id)
    return f
