"""
supportforest - Parent-pointer forest for support graph reduction

Vertices of a voter/target support graph, keyed by (principal, role) and
linked by single parent pointers, plus the root walk used to find and
collapse cycles when reducing the graph to a minimal edge set.
"""

from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version("supportforest")
except PackageNotFoundError:
    __version__ = "0.0.0+unknown"  # Not installed
__license__ = "MIT"

from supportforest.graph import (
    CycleGuard,
    Node,
    NodeForest,
    NodeId,
    NodeRef,
    NodeRole,
    RootWalk,
    WalkLimitError,
    root,
)

__all__ = [
    "__version__",
    "CycleGuard",
    "Node",
    "NodeForest",
    "NodeId",
    "NodeRef",
    "NodeRole",
    "RootWalk",
    "WalkLimitError",
    "root",
]
