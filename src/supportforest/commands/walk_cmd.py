"""
supportforest.commands.walk_cmd - Root walk commands.

- `supportforest root FILE NODE...` - Walk from the given vertices
- `supportforest roots FILE` - Walk from every vertex in the forest
"""

from __future__ import annotations

import argparse
import json
import sys
from typing import Any

from supportforest.graph import CycleGuard, NodeForest, NodeId, RootWalk

GUARD_CHOICES = [guard.value for guard in CycleGuard]


def run(args: argparse.Namespace) -> int:
    """Run the root or roots command."""
    forest = _load(args)

    if args.command == "root":
        try:
            node_ids = [NodeId.parse(text) for text in args.nodes]
        except ValueError as e:
            print(f"Error: {e}", file=sys.stderr)
            return 1
        missing = [str(node_id) for node_id in node_ids if node_id not in forest]
        if missing:
            print(f"Error: unknown node(s): {', '.join(missing)}", file=sys.stderr)
            return 1
    else:
        node_ids = [ref.id for ref in forest]

    results = [(node_id, forest.root(node_id)) for node_id in node_ids]

    if args.json:
        print(json.dumps([_walk_to_dict(node_id, walk) for node_id, walk in results], indent=2))
    elif not args.quiet:
        for node_id, walk in results:
            print(_format_walk(node_id, walk))
    return 0


def _load(args: argparse.Namespace) -> NodeForest:
    from supportforest.config import get_config
    from supportforest.graph.factory import load_forest

    config = get_config(getattr(args, "config", None))
    forest = load_forest(args.file, config)
    # Command-line options win over the config file.
    if getattr(args, "guard", None):
        forest.guard = CycleGuard(args.guard)
    max_depth = getattr(args, "max_depth", None)
    if max_depth is not None:
        if max_depth < 0:
            raise ValueError(f"--max-depth must be >= 0, got {max_depth}")
        forest.max_depth = max_depth or None
    return forest


def _format_walk(node_id: NodeId, walk: RootWalk) -> str:
    path = " -> ".join(str(ref.id) for ref in walk.path)
    marker = " (cycle)" if walk.is_cycle else ""
    return f"{node_id}: root={walk.root.id}{marker} path={path}"


def _walk_to_dict(node_id: NodeId, walk: RootWalk) -> dict[str, Any]:
    return {
        "node": str(node_id),
        "root": str(walk.root.id),
        "path": [str(ref.id) for ref in walk.path],
        "cycle": walk.is_cycle,
    }

