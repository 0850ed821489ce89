"""Forest Factory - Build a NodeForest from parent mappings or TOML files.

Forest files hold a single [parents] table mapping child vertices to their
parents, both written as "role:who" (role defaults to target):

    [parents]
    "voter:alice" = "target:bob"
    "target:bob" = "target:carol"
"""

from __future__ import annotations

from pathlib import Path
from typing import Any, Mapping

import tomlkit
from tomlkit.exceptions import ParseError

from supportforest.graph.forest import NodeForest
from supportforest.graph.node import NodeId


def build_forest(
    parents: Mapping[str, str],
    config: dict[str, Any] | None = None,
) -> NodeForest:
    """Build a forest from a child -> parent mapping of "role:who" keys.

    Args:
        parents: Child key to parent key.
        config: Configuration supplying the [walk] options (defaults if None).

    Raises:
        ValueError: If a key cannot be parsed.
    """
    forest = NodeForest.from_config(config) if config is not None else NodeForest()
    for child_key, parent_key in parents.items():
        if not isinstance(parent_key, str):
            raise ValueError(f"Parent of '{child_key}' must be a string, got {parent_key!r}")
        child_id = NodeId.parse(child_key)
        parent_id = NodeId.parse(parent_key)
        forest.add(child_id.who, child_id.role)
        forest.add(parent_id.who, parent_id.role)
        forest.set_parent(child_id, parent_id)
    # Loading is not an undoable edit.
    forest.mutations.clear()
    return forest


def load_forest(path: Path, config: dict[str, Any] | None = None) -> NodeForest:
    """Load a forest file.

    Raises:
        ValueError: If the file is not valid TOML or lacks a [parents] table.
    """
    try:
        data = tomlkit.parse(path.read_text(encoding="utf-8")).unwrap()
    except ParseError as e:
        raise ValueError(f"Invalid TOML in {path}: {e}") from e
    parents = data.get("parents")
    if not isinstance(parents, dict):
        raise ValueError(f"{path} has no [parents] table")
    return build_forest(parents, config)


__all__ = ["build_forest", "load_forest"]
