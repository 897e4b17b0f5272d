"""
Configuration constants for the graph trace visualizer service.

All tunable settings live here.  Anything deployment-specific can be
overridden through environment variables - never hardcode secrets.
"""

import os
import secrets

# =============================================================================
# Server Configuration
# =============================================================================

HOST = os.environ.get("GRAPH_TRACE_HOST", "127.0.0.1")
PORT = int(os.environ.get("GRAPH_TRACE_PORT", "5000"))
DEBUG = os.environ.get("GRAPH_TRACE_DEBUG", "").lower() in ("1", "true", "yes")

# Flask session signing key.  A random key means sessions do not survive a
# restart, which is fine for a single-user visualizer.
SECRET_KEY = os.environ.get("GRAPH_TRACE_SECRET_KEY") or secrets.token_hex(32)

# =============================================================================
# Logging Configuration
# =============================================================================

LOG_LEVEL = os.environ.get("GRAPH_TRACE_LOG_LEVEL", "INFO").upper()
LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"

# =============================================================================
# Playback Configuration
# =============================================================================

# Milliseconds between auto-advanced trace events
DEFAULT_SPEED_MS = 500

# Floor for user-supplied speeds
MIN_SPEED_MS = 20

# Playback states kept server-side; the least recently used run is evicted
MAX_PLAYERS = int(os.environ.get("GRAPH_TRACE_MAX_PLAYERS", "256"))
