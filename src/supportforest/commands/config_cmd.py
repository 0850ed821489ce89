"""
supportforest.commands.config_cmd - Inspect the effective configuration.

- `supportforest config show` - Print merged configuration as TOML
- `supportforest config path` - Print the configuration file location
"""

from __future__ import annotations

import argparse
import json
import sys
from pathlib import Path

import tomlkit

from supportforest.config import find_config_file, get_config


def run(args: argparse.Namespace) -> int:
    """Run the config command."""
    action = getattr(args, "config_action", None)
    config_path: Path | None = getattr(args, "config", None)

    if action == "path":
        path = config_path or find_config_file(Path.cwd())
        if path is None:
            print("No configuration file found (using defaults)", file=sys.stderr)
            return 1
        print(path)
        return 0
    elif action == "show":
        config = get_config(config_path)
        if getattr(args, "json", False):
            print(json.dumps(config, indent=2))
        else:
            print(tomlkit.dumps(config), end="")
        return 0
    else:
        print("Usage: supportforest config <show|path>", file=sys.stderr)
        return 1
