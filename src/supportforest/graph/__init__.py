"""Graph module - Support forest data structures.

Exports:
- NodeRole: Voter/Target role of a vertex
- NodeId: Compound (principal, role) identity
- Node: Vertex with a single parent pointer
- NodeRef: Shared mutable handle to a Node
- CycleGuard, RootWalk, WalkLimitError, root: Root walk
- NodeForest: Caller-owned collection of vertices
- MutationEntry, MutationLog: Parent mutation history

Note: use graph.factory.load_forest() to build a NodeForest from a file.
"""

from supportforest.graph.forest import NodeForest
from supportforest.graph.mutations import MutationEntry, MutationLog
from supportforest.graph.node import (
    Node,
    NodeId,
    NodeRef,
    NodeRole,
    is_parent_of,
    remove_parent,
    set_parent_of,
)
from supportforest.graph.walk import CycleGuard, RootWalk, WalkLimitError, root

__all__ = [
    "NodeRole",
    "NodeId",
    "Node",
    "NodeRef",
    "is_parent_of",
    "set_parent_of",
    "remove_parent",
    "CycleGuard",
    "RootWalk",
    "WalkLimitError",
    "root",
    "NodeForest",
    "MutationEntry",
    "MutationLog",
]
