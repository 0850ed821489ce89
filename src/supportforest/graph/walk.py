"""Root walk - Ascend parent pointers to the terminal vertex.

The parent relation may contain cycles, so ascent needs a stopping rule
besides reaching a parentless vertex. Two guards are available:

- CycleGuard.START: stop when ascent would return to the starting vertex.
  This is the default. A cycle that is reachable from the start but does not
  contain it is NOT caught by this guard; bound such walks with `max_depth`.
- CycleGuard.VISITED: stop when ascent would revisit any vertex already on
  the path. Always terminates.
"""

from __future__ import annotations

import logging
from enum import Enum
from typing import NamedTuple

from supportforest.graph.node import NodeId, NodeRef

logger = logging.getLogger(__name__)


class CycleGuard(Enum):
    """Stopping rule used by `root` on cyclic parent chains."""

    START = "start"
    VISITED = "visited"


class WalkLimitError(RuntimeError):
    """Raised when a root walk exceeds its configured depth bound."""

    def __init__(self, start: NodeId, max_depth: int) -> None:
        self.start = start
        self.max_depth = max_depth
        super().__init__(f"Root walk from {start} exceeded {max_depth} parent hops")


class RootWalk(NamedTuple):
    """Result of a root walk.

    Attributes:
        root: The last vertex reached.
        path: Vertices traversed, starting with the start vertex and ending
            with the root.
    """

    root: NodeRef
    path: list[NodeRef]

    @property
    def is_cycle(self) -> bool:
        """True if the walk was stopped by a guard rather than a true root."""
        return self.root.parent is not None


def root(
    start: NodeRef,
    guard: CycleGuard = CycleGuard.START,
    max_depth: int | None = None,
) -> RootWalk:
    """Find the root of `start`.

    Returns a `(root, path)` tuple where `path` holds the vertices leading to
    the root: the first element is the start itself and the last one is the
    root. If the chain closes back on the start, the walk stops before the
    closing edge and the returned root is the last vertex visited.

    Args:
        start: Handle to begin ascent from.
        guard: Which revisit stops the walk.
        max_depth: Maximum number of parent hops, or None for no bound.

    Raises:
        WalkLimitError: If `max_depth` is set and exceeded.
    """
    initial = start
    path: list[NodeRef] = [start]
    current = start
    visited: set[NodeId] = {start.id} if guard is CycleGuard.VISITED else set()

    while current.parent is not None:
        next_parent = current.parent
        if next_parent == initial:
            logger.debug("Walk from %s closed back on the start at %s", start.id, current.id)
            break
        if guard is CycleGuard.VISITED:
            if next_parent.id in visited:
                logger.debug("Walk from %s revisited %s", start.id, next_parent.id)
                break
            visited.add(next_parent.id)
        if max_depth is not None and len(path) > max_depth:
            raise WalkLimitError(start.id, max_depth)
        path.append(next_parent)
        current = next_parent

    return RootWalk(current, path)


__all__ = ["CycleGuard", "RootWalk", "WalkLimitError", "root"]
