# dmap/render/overlay.py
from __future__ import annotations
import pygame

from dmap import settings
from dmap.world.grid import UNREACHABLE, DistanceGrid

RGBA = tuple[int, int, int, int]


def _lerp(a: RGBA, b: RGBA, t: float) -> RGBA:
    return tuple(int(round(ca + (cb - ca) * t)) for ca, cb in zip(a, b))  # type: ignore[return-value]


def distance_color(distance: int, max_distance: int) -> RGBA:
    """Near (0) is HEAT_NEAR, max_distance is HEAT_FAR; UNREACHABLE gets its own color."""
    if distance == UNREACHABLE:
        return settings.HEAT_UNREACHABLE_RGBA
    if max_distance <= 0:
        return settings.HEAT_NEAR_RGBA
    t = min(1.0, max(0.0, distance / max_distance))
    return _lerp(settings.HEAT_NEAR_RGBA, settings.HEAT_FAR_RGBA, t)


def max_reachable_distance(grid: DistanceGrid) -> int:
    cells = grid.as_array()
    reached = cells[cells != UNREACHABLE]
    return int(reached.max()) if reached.size else 0


def draw_distance_overlay(
    surface: pygame.Surface,
    grid: DistanceGrid,
    tile_size: int = settings.TILE_SIZE,
    origin: tuple[int, int] = (0, 0),
) -> None:
    """Heat map of grid, one tile_size square per cell, blitted at origin (px)."""
    sw, sh = surface.get_size()
    overlay = pygame.Surface((sw, sh), pygame.SRCALPHA)
    ox, oy = origin
    width, height = grid.dimensions()
    far = max_reachable_distance(grid)

    for y in range(height):
        for x in range(width):
            rect = pygame.Rect(ox + x * tile_size, oy + y * tile_size, tile_size, tile_size)
            if not rect.colliderect(pygame.Rect(0, 0, sw, sh)):
                continue
            overlay.fill(distance_color(grid.get(x, y), far), rect)

    surface.blit(overlay, (0, 0))
