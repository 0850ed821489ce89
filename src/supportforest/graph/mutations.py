"""Mutation records for NodeForest parent changes.

Every parent change made through a NodeForest is recorded so a reduction
pass can be audited or rolled back step by step.
"""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass, field
from datetime import datetime
from uuid import uuid4

from supportforest.graph.node import NodeId


@dataclass
class MutationEntry:
    """Single parent mutation.

    Attributes:
        operation: "set_parent" or "remove_parent".
        target_id: The vertex whose parent changed.
        before: Parent id before the mutation (None if unset).
        after: Parent id after the mutation (None if unset).
        id: Unique mutation ID (UUID4 hex).
        timestamp: When the mutation occurred.
    """

    operation: str
    target_id: NodeId
    before: NodeId | None
    after: NodeId | None
    id: str = field(default_factory=lambda: uuid4().hex)
    timestamp: datetime = field(default_factory=datetime.now)

    def __str__(self) -> str:
        return f"[{self.id[:8]}] {self.operation}({self.target_id}: {self.before} -> {self.after})"


class MutationLog:
    """Parent mutations in the order they were made.

    NodeForest appends one entry per parent change and walks the log
    backwards to undo them.
    """

    def __init__(self) -> None:
        self._entries: list[MutationEntry] = []

    def append(self, entry: MutationEntry) -> None:
        self._entries.append(entry)

    def iter_entries(self) -> Iterator[MutationEntry]:
        """Yield entries oldest first."""
        yield from self._entries

    def __len__(self) -> int:
        return len(self._entries)

    def last(self) -> MutationEntry | None:
        """Newest entry without removing it, or None when the log is empty."""
        return self._entries[-1] if self._entries else None

    def entries_since(self, mutation_id: str) -> list[MutationEntry]:
        """Entries from `mutation_id` (inclusive) up to the newest one.

        Raises:
            ValueError: If no entry has that id.
        """
        for position, entry in enumerate(self._entries):
            if entry.id == mutation_id:
                return self._entries[position:]
        raise ValueError(f"Mutation {mutation_id} not found in log")

    def pop(self) -> MutationEntry | None:
        """Remove the newest entry and return it, or None when empty."""
        if not self._entries:
            return None
        return self._entries.pop()

    def clear(self) -> None:
        self._entries.clear()


__all__ = ["MutationEntry", "MutationLog"]
