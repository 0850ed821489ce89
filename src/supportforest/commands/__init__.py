"""
supportforest.commands - CLI command implementations
"""

__all__ = [
    "config_cmd",
    "walk_cmd",
]
