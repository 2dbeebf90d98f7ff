"""
Configuration constants for flatgraph.

Tunable settings live here; the logging level can be overridden from
the environment.
"""

import os

# =============================================================================
# Logging Configuration
# =============================================================================

# Level used by the CLI when --verbose is not given
LOG_LEVEL = os.environ.get("FLATGRAPH_LOG_LEVEL", "WARNING").upper()

# Rich renders time and level itself, so only the message is formatted
LOG_FORMAT = "%(message)s"

# =============================================================================
# CLI Configuration
# =============================================================================

# Separator between endpoints in --edge options, e.g. "0:3"
EDGE_SEPARATOR = ":"

# Labels of the six nodes in the `flatgraph demo` sample graph
DEMO_LABELS = ("hello", "world", "foo", "bar", "baz", "asd")

# Edges of the sample graph, as index pairs into DEMO_LABELS
DEMO_EDGES = ((0, 1), (0, 2), (0, 3), (0, 4), (3, 5), (4, 5))

# Loggers the CLI attaches its handler to
LOGGER_NAMES = ("flatgraph", "cli")
