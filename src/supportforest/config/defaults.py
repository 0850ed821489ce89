"""
supportforest.config.defaults - Default configuration values.
"""

CONFIG_FILENAME = ".supportforest.toml"

ENV_PREFIX = "SUPPORTFOREST_"

DEFAULT_CONFIG = {
    "walk": {
        # "visited": stop when ascent would revisit any vertex on the path.
        # "start": stop only when ascent returns to the starting vertex; a
        # chain running into a cycle that skips the start never ends unless
        # max_depth is set.
        "cycle_guard": "visited",
        # Maximum parent hops per walk; 0 means unbounded.
        "max_depth": 0,
    },
}
