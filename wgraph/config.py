"""
Configuration defaults for wgraph.

Values are read once at import time. Environment variables override the
built-in defaults; per-call settings go through constructor keywords instead.
"""

import os

# =============================================================================
# Graph
# =============================================================================

# Weight used by Graph.add_edge when none is given
DEFAULT_WEIGHT = 1

# =============================================================================
# Auxiliary structures
# =============================================================================

# Starting slot count for the BFS queue; it doubles on overflow
QUEUE_INITIAL_CAPACITY = int(os.getenv("WGRAPH_QUEUE_CAPACITY", "16"))

# Priority queue used by Dijkstra when Algorithms gets no explicit factory:
#   "linear" -> unordered list with linear-scan extract_min
#   "heap"   -> binary heap (heapq)
PRIORITY_QUEUE_BACKEND = os.getenv("WGRAPH_PQ_BACKEND", "linear").strip().lower()

PRIORITY_QUEUE_BACKENDS = ("linear", "heap")
