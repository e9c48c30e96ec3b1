from __future__ import annotations
import pygame

from dmap import settings
from dmap.render.overlay import distance_color, draw_distance_overlay, max_reachable_distance
from dmap.world.grid import UNREACHABLE, DistanceGrid
from dmap.world.pathing import generate


def test_distance_color_endpoints():
    assert distance_color(0, 10) == settings.HEAT_NEAR_RGBA
    assert distance_color(10, 10) == settings.HEAT_FAR_RGBA
    assert distance_color(25, 10) == settings.HEAT_FAR_RGBA
    assert distance_color(UNREACHABLE, 10) == settings.HEAT_UNREACHABLE_RGBA
    assert distance_color(0, 0) == settings.HEAT_NEAR_RGBA


def test_distance_color_midpoint():
    near, far = settings.HEAT_NEAR_RGBA, settings.HEAT_FAR_RGBA
    mid = distance_color(5, 10)
    for c, a, b in zip(mid, near, far):
        assert min(a, b) <= c <= max(a, b)


def test_max_reachable_distance():
    grid = DistanceGrid(10, 10, "manhattan")
    assert max_reachable_distance(grid) == 0
    generate(grid, [(0, 0)], lambda x, y: x != 5)
    assert max_reachable_distance(grid) == 4 + 9


def test_draw_distance_overlay_paints_each_tile():
    grid = DistanceGrid(4, 1, "manhattan")
    generate(grid, [(0, 0)], lambda x, y: x != 2)
    ts = 8
    surface = pygame.Surface((4 * ts, ts))
    surface.fill((0, 0, 0))

    draw_distance_overlay(surface, grid, tile_size=ts)

    goal = surface.get_at((ts // 2, ts // 2))
    far = surface.get_at((ts + ts // 2, ts // 2))
    wall = surface.get_at((2 * ts + ts // 2, ts // 2))
    assert goal.g > 100 and goal.r < 20
    assert far.r > 50
    assert (wall.r, wall.g, wall.b) == (0, 0, 0)


def test_draw_distance_overlay_respects_origin():
    grid = DistanceGrid(2, 2, "manhattan")
    generate(grid, [(0, 0)], lambda x, y: True)
    surface = pygame.Surface((64, 64))
    surface.fill((0, 0, 0))

    draw_distance_overlay(surface, grid, tile_size=8, origin=(32, 32))

    assert tuple(surface.get_at((4, 4)))[:3] == (0, 0, 0)
    assert surface.get_at((36, 36)).g > 100
