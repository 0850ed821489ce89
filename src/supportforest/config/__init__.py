"""
supportforest.config - Configuration loading and defaults
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

from supportforest.config.defaults import CONFIG_FILENAME, DEFAULT_CONFIG
from supportforest.config.loader import (
    _try_parse_env_value,
    apply_env_overrides,
    find_config_file,
    load_config,
    merge_configs,
)
from supportforest.graph.walk import CycleGuard


def get_config(config_path: Path | None = None, start_dir: Path | None = None) -> dict[str, Any]:
    """Return the effective configuration.

    Uses `config_path` if given, otherwise searches upward from `start_dir`
    (default: the working directory). Falls back to defaults plus
    environment overrides when no file is found.
    """
    if config_path is None:
        config_path = find_config_file(start_dir or Path.cwd())
    if config_path is not None:
        return load_config(config_path)
    return apply_env_overrides(merge_configs(DEFAULT_CONFIG, {}))


def walk_options(config: dict[str, Any]) -> tuple[CycleGuard, int | None]:
    """Read the [walk] section as (guard, max_depth).

    Raises:
        ValueError: If cycle_guard or max_depth is invalid.
    """
    walk = config.get("walk", {})
    if not isinstance(walk, dict):
        raise ValueError(f"walk must be a table, got {walk!r}")
    guard_value = walk.get("cycle_guard", DEFAULT_CONFIG["walk"]["cycle_guard"])
    try:
        guard = CycleGuard(str(guard_value).lower())
    except ValueError:
        choices = ", ".join(g.value for g in CycleGuard)
        raise ValueError(
            f"Invalid walk.cycle_guard '{guard_value}' (expected one of: {choices})"
        ) from None

    max_depth = walk.get("max_depth", DEFAULT_CONFIG["walk"]["max_depth"])
    if isinstance(max_depth, bool) or not isinstance(max_depth, int) or max_depth < 0:
        raise ValueError(f"Invalid walk.max_depth '{max_depth}' (expected integer >= 0)")
    return guard, (max_depth or None)


__all__ = [
    "CONFIG_FILENAME",
    "DEFAULT_CONFIG",
    "_try_parse_env_value",
    "apply_env_overrides",
    "find_config_file",
    "get_config",
    "load_config",
    "merge_configs",
    "walk_options",
]
