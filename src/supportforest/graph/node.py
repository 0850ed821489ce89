"""Node - Vertex representation for the support forest.

This module provides the core data structures of the forest:
- NodeRole: Voter or Target tag of a vertex
- NodeId: Compound (principal, role) identity of a vertex
- Node: A vertex with an optional parent pointer
- NodeRef: Shared, mutable handle to a Node
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from functools import total_ordering
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from supportforest.graph.walk import RootWalk


@total_ordering
class NodeRole(Enum):
    """The role a vertex plays in the support graph.

    The same principal may appear once per role (a self-vote), so the role
    is part of the vertex identity. Voters sort before targets.
    """

    VOTER = "voter"  # a nominator in a staking context
    TARGET = "target"  # a candidate/validator in a staking context

    @property
    def code(self) -> str:
        """One-letter display code ("V" or "T")."""
        return "V" if self is NodeRole.VOTER else "T"

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, NodeRole):
            return NotImplemented
        return _ROLE_ORDER[self] < _ROLE_ORDER[other]


_ROLE_ORDER = {NodeRole.VOTER: 0, NodeRole.TARGET: 1}


@dataclass(frozen=True, order=True)
class NodeId:
    """Identifier of a vertex.

    Attributes:
        who: Account-like identifier of the principal.
        role: The role of the vertex.
    """

    who: Any
    role: NodeRole

    @classmethod
    def parse(cls, text: str, default_role: NodeRole = NodeRole.TARGET) -> NodeId:
        """Parse a "role:who" string.

        The role prefix is optional; the principal is kept as a string.

        Raises:
            ValueError: If the role prefix is unknown or the principal is empty.
        """
        role_text, sep, who = text.partition(":")
        if not sep:
            role, who = default_role, role_text
        else:
            try:
                role = NodeRole(role_text.strip().lower())
            except ValueError:
                raise ValueError(f"Unknown node role '{role_text}' in '{text}'") from None
        who = who.strip()
        if not who:
            raise ValueError(f"Missing principal in node id '{text}'")
        return cls(who, role)

    def __str__(self) -> str:
        return f"{self.role.value}:{self.who}"

    def __repr__(self) -> str:
        return f"NodeId({self.who!r}, {self.role.code})"


class Node:
    """A one-way vertex. It only stores a pointer to its parent.

    Equality and hashing use the id alone. The parent chain may be cyclic,
    so it must never take part in comparison.
    """

    __slots__ = ("id", "parent")

    def __init__(self, id: NodeId, parent: NodeRef | None = None) -> None:
        self.id = id
        self.parent = parent

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Node):
            return NotImplemented
        return self.id == other.id

    def __hash__(self) -> int:
        return hash(self.id)

    def __repr__(self) -> str:
        parent_id = self.parent.id if self.parent is not None else None
        return f"({self.id!r} --> {parent_id!r})"

    def into_ref(self) -> NodeRef:
        """Wrap this node in a new shared handle."""
        return NodeRef(self)


class NodeRef:
    """Shared, mutable handle to a Node.

    Any number of handles may wrap the same Node; a parent change made
    through one of them is seen by all. Handles compare by node id, so two
    separately allocated nodes with the same id are equal.
    """

    __slots__ = ("node",)

    def __init__(self, node: Node) -> None:
        self.node = node

    @classmethod
    def new(cls, who: Any, role: NodeRole) -> NodeRef:
        """Create a parentless node and wrap it."""
        return cls(Node(NodeId(who, role)))

    @property
    def id(self) -> NodeId:
        return self.node.id

    @property
    def parent(self) -> NodeRef | None:
        return self.node.parent

    @property
    def is_root(self) -> bool:
        """True if this node has no parent."""
        return self.node.parent is None

    def has_parent(self, other: NodeRef) -> bool:
        """Check if `other` is the parent of this node."""
        parent = self.node.parent
        if parent is None:
            return False
        return parent == other

    def set_parent(self, parent: NodeRef) -> None:
        """Point this node at `parent`. Cycles and self-parents are allowed."""
        self.node.parent = parent

    def remove_parent(self) -> None:
        """Clear the parent of this node."""
        self.node.parent = None

    def root(self, **kwargs: Any) -> RootWalk:
        """Find the root of this node. See `supportforest.graph.walk.root`."""
        from supportforest.graph.walk import root

        return root(self, **kwargs)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, NodeRef):
            return NotImplemented
        return self.node.id == other.node.id

    def __hash__(self) -> int:
        return hash(self.node.id)

    def __repr__(self) -> str:
        return repr(self.node)


def is_parent_of(who: NodeRef, other: NodeRef) -> bool:
    """Return True if `other` is the parent of `who`."""
    return who.has_parent(other)


def set_parent_of(who: NodeRef, parent: NodeRef) -> None:
    """Set `who`'s parent to be `parent`."""
    who.set_parent(parent)


def remove_parent(who: NodeRef) -> None:
    """Remove the parent of `who`."""
    who.remove_parent()


__all__ = [
    "NodeRole",
    "NodeId",
    "Node",
    "NodeRef",
    "is_parent_of",
    "set_parent_of",
    "remove_parent",
]
