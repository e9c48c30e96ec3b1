# dmap/world/grid.py
from __future__ import annotations
import math
import numpy as np
from dataclasses import dataclass, field
from typing import Literal
from dmap import settings

Coord = tuple[int, int]
Metric = Literal["manhattan", "chebyshev", "euclidean"]

METRICS: tuple[Metric, ...] = ("manhattan", "chebyshev", "euclidean")

# No accumulated distance ever reaches this; the generator never adds to it.
UNREACHABLE: int = int(np.iinfo(np.int64).max)


@dataclass(slots=True)
class DistanceGrid:
    """Dense width x height map of integer distances to the nearest goal.

    Cells start out (and return after clear()) as UNREACHABLE. Out-of-bounds
    reads report UNREACHABLE and out-of-bounds writes are dropped, so callers
    never need to bounds-check before touching the grid.
    """
    width: int
    height: int
    metric: Metric = settings.DEFAULT_METRIC  # type: ignore[assignment]
    _cells: np.ndarray = field(init=False, repr=False)

    def __post_init__(self) -> None:
        # degenerate sizes collapse to an empty grid
        self.width = max(0, int(self.width))
        self.height = max(0, int(self.height))
        self._cells = np.full((self.height, self.width), UNREACHABLE, dtype=np.int64)

    # --- bounds ---
    def in_bounds(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height

    def dimensions(self) -> tuple[int, int]:
        return self.width, self.height

    # --- cells ---
    def get(self, x: int, y: int) -> int:
        if not self.in_bounds(x, y):
            return UNREACHABLE
        return int(self._cells[y, x])

    def set(self, x: int, y: int, value: int) -> None:
        if not self.in_bounds(x, y):
            return
        self._cells[y, x] = value

    def is_reachable(self, x: int, y: int) -> bool:
        return self.get(x, y) != UNREACHABLE

    def clear(self) -> None:
        self._cells.fill(UNREACHABLE)

    def reachable_count(self) -> int:
        return int(np.count_nonzero(self._cells != UNREACHABLE))

    def as_array(self) -> np.ndarray:
        """Copy of the distances, indexed [y, x]."""
        return self._cells.copy()

    # --- metric ---
    def pairwise_cost(self, x1: int, y1: int, x2: int, y2: int) -> int:
        dx = abs(x2 - x1)
        dy = abs(y2 - y1)
        if self.metric == "manhattan":
            return dx + dy
        if self.metric == "chebyshev":
            return max(dx, dy)
        # euclidean, rounded half away from zero (d is never negative)
        return int(math.floor(math.hypot(dx, dy) + 0.5))
