# dmap/world/pathing.py
from __future__ import annotations
import heapq
import logging
from typing import Callable, Iterable

from dmap.world.grid import Coord, DistanceGrid, Metric

log = logging.getLogger(__name__)

Walkable = Callable[[int, int], bool]

ORTHOGONAL: tuple[Coord, ...] = ((0, 1), (0, -1), (1, 0), (-1, 0))
DIAGONAL: tuple[Coord, ...] = ((1, 1), (1, -1), (-1, 1), (-1, -1))


def neighbor_offsets(metric: Metric) -> tuple[Coord, ...]:
    """Movement offsets for a metric. Only chebyshev may step diagonally."""
    if metric == "chebyshev":
        return ORTHOGONAL + DIAGONAL
    return ORTHOGONAL


def generate(grid: DistanceGrid, goals: Iterable[Coord], is_walkable: Walkable) -> None:
    """
    Multi-source Dijkstra flood fill from goals, written into grid in place.
    Goals that are out of bounds or not walkable are skipped.
    Tiles with no path to any goal keep UNREACHABLE.
    """
    grid.clear()
    offsets = neighbor_offsets(grid.metric)

    # (distance, x, y)
    heap: list[tuple[int, int, int]] = []
    dropped = 0
    for gx, gy in goals:
        if not grid.in_bounds(gx, gy) or not is_walkable(gx, gy):
            dropped += 1
            continue
        grid.set(gx, gy, 0)
        heap.append((0, gx, gy))
    heapq.heapify(heap)
    if dropped:
        log.debug("generate: dropped %d goal(s) out of bounds or not walkable", dropped)

    seeded = len(heap)
    pops = 0
    while heap:
        dist, x, y = heapq.heappop(heap)
        pops += 1
        if dist > grid.get(x, y):
            continue  # stale entry, a shorter path already landed here

        for dx, dy in offsets:
            nx, ny = x + dx, y + dy
            if not grid.in_bounds(nx, ny) or not is_walkable(nx, ny):
                continue
            new_dist = dist + grid.pairwise_cost(x, y, nx, ny)
            if new_dist < grid.get(nx, ny):
                grid.set(nx, ny, new_dist)
                heapq.heappush(heap, (new_dist, nx, ny))

    log.debug(
        "generate: metric=%s seeded=%d pops=%d reachable=%d",
        grid.metric, seeded, pops, grid.reachable_count(),
    )


def generate_from_single_goal(grid: DistanceGrid, x: int, y: int, is_walkable: Walkable) -> None:
    generate(grid, [(x, y)], is_walkable)


def find_unreachable_tiles(grid: DistanceGrid, is_walkable: Walkable) -> list[Coord]:
    """Walkable tiles the last generate() never reached, in row-major order."""
    width, height = grid.dimensions()
    out: list[Coord] = []
    for y in range(height):
        for x in range(width):
            if is_walkable(x, y) and not grid.is_reachable(x, y):
                out.append((x, y))
    return out


# --- consumers: rolling downhill toward the nearest goal ---
def downhill_step(grid: DistanceGrid, x: int, y: int) -> Coord | None:
    """Neighbor with the lowest distance below (x, y); None at a goal, unreachable tile or local minimum."""
    here = grid.get(x, y)
    if not grid.is_reachable(x, y) or here == 0:
        return None

    best: Coord | None = None
    best_dist = here
    for dx, dy in neighbor_offsets(grid.metric):
        nx, ny = x + dx, y + dy
        d = grid.get(nx, ny)
        if d < best_dist:
            best, best_dist = (nx, ny), d
    return best


def downhill_path(grid: DistanceGrid, x: int, y: int) -> list[Coord]:
    """Follow downhill_step from (x, y); returns [start .. goal]. If unreachable, empty list."""
    if not grid.is_reachable(x, y):
        return []
    path: list[Coord] = [(x, y)]
    cur = downhill_step(grid, x, y)
    while cur is not None:
        path.append(cur)
        cur = downhill_step(grid, *cur)
    return path
