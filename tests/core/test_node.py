"""Tests for NodeRole, NodeId, Node and NodeRef."""

import pytest

from supportforest.graph import (
    Node,
    NodeId,
    NodeRef,
    NodeRole,
    is_parent_of,
    remove_parent,
    set_parent_of,
)

from tests.core.forest_test_helpers import chain, make_id, make_ref


class TestNodeRole:
    """Tests for NodeRole enum."""

    def test_all_roles_exist(self):
        assert NodeRole.VOTER.value == "voter"
        assert NodeRole.TARGET.value == "target"

    def test_voter_sorts_before_target(self):
        assert NodeRole.VOTER < NodeRole.TARGET
        assert NodeRole.TARGET > NodeRole.VOTER
        assert sorted([NodeRole.TARGET, NodeRole.VOTER]) == [NodeRole.VOTER, NodeRole.TARGET]

    def test_codes(self):
        assert NodeRole.VOTER.code == "V"
        assert NodeRole.TARGET.code == "T"


class TestNodeId:
    """Tests for NodeId compound identity."""

    def test_equal_on_both_fields(self):
        assert NodeId(10, NodeRole.TARGET) == NodeId(10, NodeRole.TARGET)
        assert NodeId(10, NodeRole.TARGET) != NodeId(11, NodeRole.TARGET)

    def test_self_vote_roles_are_distinct(self):
        """The same principal as voter and target are two vertices."""
        voter = NodeId("alice", NodeRole.VOTER)
        target = NodeId("alice", NodeRole.TARGET)
        assert voter != target
        assert len({voter, target}) == 2

    def test_hash_consistent_with_equality(self):
        assert hash(NodeId(1, NodeRole.VOTER)) == hash(NodeId(1, NodeRole.VOTER))
        assert {NodeId(1, NodeRole.VOTER): "x"}[NodeId(1, NodeRole.VOTER)] == "x"

    def test_ordering_by_principal_then_role(self):
        ids = [
            NodeId(2, NodeRole.VOTER),
            NodeId(1, NodeRole.TARGET),
            NodeId(1, NodeRole.VOTER),
        ]
        assert sorted(ids) == [
            NodeId(1, NodeRole.VOTER),
            NodeId(1, NodeRole.TARGET),
            NodeId(2, NodeRole.VOTER),
        ]

    def test_is_immutable(self):
        node_id = make_id(1)
        with pytest.raises(AttributeError):
            node_id.who = 2

    def test_str_and_repr(self):
        assert str(NodeId("bob", NodeRole.VOTER)) == "voter:bob"
        assert repr(NodeId(10, NodeRole.TARGET)) == "NodeId(10, T)"

    @pytest.mark.parametrize(
        "text,expected",
        [
            ("voter:alice", NodeId("alice", NodeRole.VOTER)),
            ("target:bob", NodeId("bob", NodeRole.TARGET)),
            ("carol", NodeId("carol", NodeRole.TARGET)),
            ("VOTER: dave ", NodeId("dave", NodeRole.VOTER)),
        ],
    )
    def test_parse(self, text, expected):
        assert NodeId.parse(text) == expected

    def test_parse_default_role(self):
        assert NodeId.parse("eve", default_role=NodeRole.VOTER) == NodeId("eve", NodeRole.VOTER)

    def test_parse_unknown_role(self):
        with pytest.raises(ValueError, match="Unknown node role"):
            NodeId.parse("nominator:alice")

    def test_parse_missing_principal(self):
        with pytest.raises(ValueError, match="Missing principal"):
            NodeId.parse("voter:")


class TestNode:
    """Tests for Node."""

    def test_basic_create(self):
        node = Node(make_id(10))
        assert node.id == NodeId(10, NodeRole.TARGET)
        assert node.parent is None
        assert node == Node(NodeId(10, NodeRole.TARGET))

    def test_equality_ignores_parent(self):
        a = Node(make_id(1))
        b = Node(make_id(1), parent=make_ref(2))
        assert a == b
        assert hash(a) == hash(b)

    def test_different_ids_not_equal(self):
        assert Node(make_id(1)) != Node(make_id(2))
        assert Node(make_id(1, NodeRole.VOTER)) != Node(make_id(1, NodeRole.TARGET))

    def test_repr_shows_parent_id_only(self):
        a, b = make_ref(1), make_ref(2)
        chain(a, b, a)
        assert repr(a.node) == "(NodeId(1, T) --> NodeId(2, T))"
        assert repr(Node(make_id(3))) == "(NodeId(3, T) --> None)"

    def test_into_ref(self):
        node = Node(make_id(1))
        ref = node.into_ref()
        assert isinstance(ref, NodeRef)
        assert ref.node is node


class TestNodeRef:
    """Tests for NodeRef shared handles."""

    def test_set_parent(self):
        a, b = make_ref(10), make_ref(20)
        assert a.parent is None
        a.set_parent(b)
        assert a.parent == b
        assert not a.is_root

    def test_mutation_visible_through_every_handle(self):
        node = Node(make_id(1))
        first, second = node.into_ref(), node.into_ref()
        parent = make_ref(2)

        first.set_parent(parent)
        assert second.has_parent(parent)

        second.remove_parent()
        assert first.parent is None
        assert first.is_root

    def test_separate_allocations_with_same_id_are_equal(self):
        a = make_ref(5)
        b = make_ref(5)
        assert a is not b
        assert a == b
        assert hash(a) == hash(b)

    def test_equality_ignores_parent_state(self):
        a, b = make_ref(1), make_ref(1)
        a.set_parent(make_ref(2))
        b.set_parent(make_ref(3))
        assert a == b

    def test_self_vote_handles_distinct(self):
        assert NodeRef.new("p", NodeRole.VOTER) != NodeRef.new("p", NodeRole.TARGET)

    def test_has_parent(self):
        a, b, c = make_ref(1), make_ref(2), make_ref(3)
        assert not a.has_parent(b)
        a.set_parent(b)
        assert a.has_parent(b)
        assert not a.has_parent(c)
        # Compared by identity, not allocation.
        assert a.has_parent(make_ref(2))

    def test_self_parent_allowed(self):
        a = make_ref(1)
        a.set_parent(a)
        assert a.has_parent(a)

    def test_compare_cycle_does_not_recurse(self):
        """Comparing nodes on a cycle never walks the parent chain."""
        a, b, c = make_ref(1), make_ref(2), make_ref(3)
        chain(a, b, c, a)
        other = make_ref(1)
        chain(other, make_ref(4), other)
        assert a == other
        assert a != b
        assert repr(a) == "(NodeId(1, T) --> NodeId(2, T))"


class TestModuleFunctions:
    """Tests for the free-function forms of the handle operations."""

    def test_is_parent_of(self):
        a, b = make_ref(1), make_ref(2)
        assert not is_parent_of(a, b)
        set_parent_of(a, b)
        assert is_parent_of(a, b)
        assert not is_parent_of(b, a)

    def test_remove_parent(self):
        a, b = make_ref(1), make_ref(2)
        set_parent_of(a, b)
        remove_parent(a)
        assert not is_parent_of(a, b)
        assert a.parent is None

    def test_remove_parent_when_unset(self):
        a = make_ref(1)
        remove_parent(a)
        assert a.parent is None
