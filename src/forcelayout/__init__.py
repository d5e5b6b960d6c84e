"""
forcelayout: 2D force-directed graph layout engine

Lays out an undirected graph by simulating pairwise forces:
- Every pair of nodes within a cutoff distance repels
- Every link pulls its two endpoints together
- Forces are scaled by elapsed time and integrated once per tick
- Each node's per-tick displacement is capped by its max speed

The engine (core) knows nothing about screens or files. Loading (io),
the tick loop and viewport clamping (host), diagnostics (analysis)
and plotting (viz) are thin layers that read the engine's state.
"""

__version__ = "0.1.0"
