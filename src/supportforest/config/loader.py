"""
supportforest.config.loader - Find, parse and merge configuration files.
"""

from __future__ import annotations

import copy
import json
import os
from pathlib import Path
from typing import Any, Mapping

import tomlkit
from tomlkit.exceptions import ParseError

from supportforest.config.defaults import CONFIG_FILENAME, DEFAULT_CONFIG, ENV_PREFIX


def find_config_file(start_dir: Path) -> Path | None:
    """Find .supportforest.toml in `start_dir` or any parent directory.

    Returns:
        Path to the config file, or None if not found.
    """
    current = start_dir.resolve()
    while True:
        candidate = current / CONFIG_FILENAME
        if candidate.is_file():
            return candidate
        if current == current.parent:
            return None
        current = current.parent


def load_config(config_path: Path) -> dict[str, Any]:
    """Load a config file, merged over defaults, with env overrides applied.

    Raises:
        ValueError: If the file is not valid TOML.
    """
    text = config_path.read_text(encoding="utf-8")
    try:
        user = tomlkit.parse(text).unwrap()
    except ParseError as e:
        raise ValueError(f"Invalid TOML in {config_path}: {e}") from e
    return apply_env_overrides(merge_configs(DEFAULT_CONFIG, user))


def merge_configs(defaults: Mapping[str, Any], user: Mapping[str, Any]) -> dict[str, Any]:
    """Deep-merge `user` over `defaults` without modifying either."""
    merged = copy.deepcopy(dict(defaults))
    for key, value in user.items():
        if isinstance(value, Mapping) and isinstance(merged.get(key), dict):
            merged[key] = merge_configs(merged[key], value)
        else:
            merged[key] = copy.deepcopy(value)
    return merged


def _try_parse_env_value(value: str) -> Any:
    """Parse an environment value into a typed value.

    JSON arrays, objects and integers are decoded; "true"/"false" become
    booleans. Anything else, including malformed JSON, is returned as-is.
    """
    lowered = value.strip().lower()
    if lowered == "true":
        return True
    if lowered == "false":
        return False
    stripped = value.strip()
    if stripped[:1] in ("[", "{") or stripped.lstrip("-").isdigit():
        try:
            return json.loads(stripped)
        except json.JSONDecodeError:
            return value
    return value


def apply_env_overrides(
    config: dict[str, Any], environ: Mapping[str, str] | None = None
) -> dict[str, Any]:
    """Apply SUPPORTFOREST_<SECTION>_<KEY> variables to `config` in place.

    Example: SUPPORTFOREST_WALK_CYCLE_GUARD=visited sets walk.cycle_guard.

    Raises:
        ValueError: If the targeted section is not a table.
    """
    if environ is None:
        environ = os.environ
    for name, raw in environ.items():
        if not name.startswith(ENV_PREFIX):
            continue
        section, sep, key = name[len(ENV_PREFIX) :].lower().partition("_")
        if not sep or not key:
            continue
        table = config.setdefault(section, {})
        if not isinstance(table, dict):
            raise ValueError(f"{section} must be a table, cannot apply {name}")
        table[key] = _try_parse_env_value(raw)
    return config


__all__ = [
    "apply_env_overrides",
    "find_config_file",
    "load_config",
    "merge_configs",
]
