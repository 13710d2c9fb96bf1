"""
Configuration constants for the pathfinding visualizer backend.

Every setting can be overridden with a PATHVIZ_* environment variable.
"""

import os

# =============================================================================
# Server Configuration
# =============================================================================

HOST = os.environ.get("PATHVIZ_HOST", "127.0.0.1")
PORT = int(os.environ.get("PATHVIZ_PORT", "8000"))

# Comma separated list; "*" allows any origin (the frontend dev server).
CORS_ORIGINS = [
    o.strip() for o in os.environ.get("PATHVIZ_CORS_ORIGINS", "*").split(",") if o.strip()
]

# =============================================================================
# Search Limits
# =============================================================================

# Largest board (rows * cols) the API will search
MAX_CELLS = int(os.environ.get("PATHVIZ_MAX_CELLS", "10000"))

# Cap on visited cells returned per response; unset means the full trace
_max_visited = os.environ.get("PATHVIZ_MAX_VISITED")
MAX_VISITED = int(_max_visited) if _max_visited else None

# =============================================================================
# Logging
# =============================================================================

LOG_LEVEL = os.environ.get("PATHVIZ_LOG_LEVEL", "INFO").upper()
LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"
