# dmap/settings.py
from __future__ import annotations

# Distance metric used when a grid is built without one.
# "manhattan" | "chebyshev" | "euclidean"
DEFAULT_METRIC: str = "euclidean"

# Overlay render (tile size in px)
TILE_SIZE: int = 32

# Heat overlay colors (RGBA for semi-transparency)
HEAT_NEAR_RGBA: tuple[int, int, int, int] = (0, 255, 255, 160)      # cyan at the goals
HEAT_FAR_RGBA: tuple[int, int, int, int] = (160, 40, 40, 160)       # red-ish at the far edge
HEAT_UNREACHABLE_RGBA: tuple[int, int, int, int] = (0, 0, 0, 220)   # never reached
