"""
Configuration constants for graphpath.

All defaults and tunable parameters are defined here.
Overrides are read from environment variables; configure_logging() also
loads a local .env file.
"""

import logging
import math
import os

from dotenv import find_dotenv, load_dotenv

# =============================================================================
# Graph Configuration
# =============================================================================

# Weight given to edges added without an explicit weight (unweighted use)
DEFAULT_EDGE_WEIGHT = 1

# Fill value for missing edges in a dense adjacency matrix export
ADJACENCY_MATRIX_FILL = math.inf

# =============================================================================
# Traversal Configuration
# =============================================================================

# Maximum hop depth for bfs_path; unset means unlimited
BFS_MAX_DEPTH: int | None = (
    int(os.environ["GRAPHPATH_BFS_MAX_DEPTH"])
    if os.environ.get("GRAPHPATH_BFS_MAX_DEPTH")
    else None
)

# =============================================================================
# Shortest-Path Configuration
# =============================================================================

# Weighted A* epsilon: f(n) = g(n) + EPSILON * h(n)
# 1.0 keeps an admissible heuristic optimal; > 1 trades optimality for speed
ASTAR_EPSILON = float(os.environ.get("GRAPHPATH_ASTAR_EPSILON", "1.0"))

# =============================================================================
# Logging Configuration
# =============================================================================

# Log level (DEBUG, INFO, WARNING, ERROR)
LOG_LEVEL = os.environ.get("GRAPHPATH_LOG_LEVEL", "INFO")

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def configure_logging(level: str | None = None, dotenv_path: str | None = None) -> None:
    """
    Configure root logging for applications embedding graphpath.

    Loads a .env file first, so GRAPHPATH_LOG_LEVEL may be set there.

    Args:
        level: Log level name (default: GRAPHPATH_LOG_LEVEL, then INFO)
        dotenv_path: .env file to load (default: search upward from cwd)
    """
    load_dotenv(dotenv_path or find_dotenv(usecwd=True))
    if level is None:
        level = os.environ.get("GRAPHPATH_LOG_LEVEL", LOG_LEVEL)
    logging.basicConfig(level=level.upper(), format=LOG_FORMAT)
