"""NodeForest - Caller-owned collection of support forest vertices.

Vertices are stored by identity, so every edge that names a vertex resolves
to the same shared handle. Parent changes go through the forest and are
recorded in its MutationLog.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator
from typing import Any

from supportforest.graph.mutations import MutationEntry, MutationLog
from supportforest.graph.node import NodeId, NodeRef, NodeRole
from supportforest.graph.walk import CycleGuard, RootWalk, root

logger = logging.getLogger(__name__)


class NodeForest:
    """Map from NodeId to NodeRef with logged parent mutations.

    Attributes:
        guard: Cycle guard used by `root`.
        max_depth: Hop bound used by `root` (None for unbounded).
        mutations: Log of parent changes made through this forest.
    """

    def __init__(
        self,
        guard: CycleGuard = CycleGuard.START,
        max_depth: int | None = None,
    ) -> None:
        self.guard = guard
        self.max_depth = max_depth
        self.mutations = MutationLog()
        self._index: dict[NodeId, NodeRef] = {}

    @classmethod
    def from_config(cls, config: dict[str, Any]) -> NodeForest:
        """Create an empty forest using the [walk] section of `config`."""
        from supportforest.config import walk_options

        guard, max_depth = walk_options(config)
        return cls(guard=guard, max_depth=max_depth)

    # Vertex access
    def add(self, who: Any, role: NodeRole) -> NodeRef:
        """Return the vertex for (who, role), creating it if needed."""
        node_id = NodeId(who, role)
        ref = self._index.get(node_id)
        if ref is None:
            ref = NodeRef.new(who, role)
            self._index[node_id] = ref
        return ref

    def voter(self, who: Any) -> NodeRef:
        return self.add(who, NodeRole.VOTER)

    def target(self, who: Any) -> NodeRef:
        return self.add(who, NodeRole.TARGET)

    def get(self, node_id: NodeId) -> NodeRef | None:
        return self._index.get(node_id)

    def __getitem__(self, node_id: NodeId) -> NodeRef:
        try:
            return self._index[node_id]
        except KeyError:
            raise KeyError(f"Unknown node: {node_id}") from None

    def __contains__(self, node_id: object) -> bool:
        return node_id in self._index

    def __len__(self) -> int:
        return len(self._index)

    def __iter__(self) -> Iterator[NodeRef]:
        """Iterate over vertices in NodeId order."""
        for node_id in sorted(self._index):
            yield self._index[node_id]

    def roots(self) -> Iterator[NodeRef]:
        """Iterate over vertices without a parent, in NodeId order."""
        for ref in self:
            if ref.is_root:
                yield ref

    # Structure
    def is_parent_of(self, child_id: NodeId, parent_id: NodeId) -> bool:
        return self[child_id].has_parent(self[parent_id])

    def set_parent(self, child_id: NodeId, parent_id: NodeId) -> MutationEntry:
        """Point `child_id` at `parent_id`.

        No cycle validation is done here; callers own the structure policy.

        Raises:
            KeyError: If either vertex is unknown.
        """
        child = self[child_id]
        parent = self[parent_id]
        entry = MutationEntry(
            operation="set_parent",
            target_id=child_id,
            before=_parent_id(child),
            after=parent_id,
        )
        child.set_parent(parent)
        self.mutations.append(entry)
        logger.debug("set_parent %s -> %s", child_id, parent_id)
        return entry

    def remove_parent(self, child_id: NodeId) -> MutationEntry:
        """Clear the parent of `child_id`.

        Raises:
            KeyError: If the vertex is unknown.
        """
        child = self[child_id]
        entry = MutationEntry(
            operation="remove_parent",
            target_id=child_id,
            before=_parent_id(child),
            after=None,
        )
        child.remove_parent()
        self.mutations.append(entry)
        logger.debug("remove_parent %s", child_id)
        return entry

    def undo(self) -> MutationEntry | None:
        """Revert the most recent parent mutation.

        The entry stays in the log if its vertices can no longer be
        resolved through this forest.

        Returns:
            The reverted entry, or None if nothing was recorded.

        Raises:
            KeyError: If the entry names a vertex unknown to this forest.
        """
        entry = self.mutations.last()
        if entry is None:
            return None
        child = self[entry.target_id]
        previous = self[entry.before] if entry.before is not None else None
        self.mutations.pop()
        if previous is None:
            child.remove_parent()
        else:
            child.set_parent(previous)
        logger.debug("undo %s", entry)
        return entry

    def undo_to(self, mutation_id: str) -> list[MutationEntry]:
        """Revert mutations back to, and including, `mutation_id`.

        Returns:
            The reverted entries, newest first.

        Raises:
            ValueError: If `mutation_id` is not in the log.
        """
        pending = self.mutations.entries_since(mutation_id)
        return [self.undo() for _ in pending]

    def history(self) -> list[MutationEntry]:
        """Recorded parent mutations, oldest first."""
        return list(self.mutations.iter_entries())

    # Walks
    def root(self, node_id: NodeId) -> RootWalk:
        """Walk from `node_id` using this forest's guard and depth bound."""
        return root(self[node_id], guard=self.guard, max_depth=self.max_depth)


def _parent_id(ref: NodeRef) -> NodeId | None:
    parent = ref.parent
    return parent.id if parent is not None else None


__all__ = ["NodeForest"]
