"""
Configuration constants for graphmath.

Paths, plotting defaults and environment-driven settings live here.
"""

import os
from pathlib import Path

# =============================================================================
# Path Configuration
# =============================================================================

# Default location for exported HTML pages (relative to the working directory)
DEFAULT_HTML_OUTPUT = Path("results.html")

# =============================================================================
# Logging Configuration
# =============================================================================

# Log level (DEBUG, INFO, WARNING, ERROR)
LOG_LEVEL = os.environ.get("GRAPHMATH_LOG_LEVEL", "WARNING")

# =============================================================================
# Visualization Configuration
# =============================================================================

# Open exported HTML pages in a browser
OPEN_BROWSER = os.environ.get("GRAPHMATH_OPEN_BROWSER", "0").lower() in ("1", "true", "yes")

PLOTLY_CDN_URL = "https://cdn.plot.ly/plotly-2.35.2.min.js"

NODE_SIZE = 22
FIGURE_HEIGHT = 550

# =============================================================================
# Random Graph Configuration
# =============================================================================

RANDOM_GRAPH_NODES = 12
RANDOM_GRAPH_EDGE_PROBABILITY = 0.25
RANDOM_GRAPH_WEIGHT_LOW = 1
RANDOM_GRAPH_WEIGHT_HIGH = 20
RANDOM_GRAPH_SEED = 42
