"""Grid ray casting (DDA) producing one wall slice per screen column."""

from __future__ import annotations

import math
from dataclasses import dataclass
from enum import IntEnum

from .mapfile import Cell, CubMap
from .player import Player


class WallFace(IntEnum):
    """Which wall texture a slice uses; values index the texture list."""

    NORTH = 0
    SOUTH = 1
    WEST = 2
    EAST = 3


@dataclass(frozen=True)
class RayHit:
    """Where one column's ray met a wall and how to draw it."""

    column: int
    map_x: int
    map_y: int
    side: int
    ray_dir_x: float
    ray_dir_y: float
    distance: float
    line_height: int
    draw_start: int
    draw_end: int
    wall_x: float
    tex_x: int
    face: WallFace


def _delta(component: float) -> float:
    return abs(1 / component) if component else math.inf


def _face(side: int, ray_dir_x: float, ray_dir_y: float) -> WallFace:
    if side == 0:
        return WallFace.WEST if ray_dir_x < 0 else WallFace.EAST
    return WallFace.NORTH if ray_dir_y < 0 else WallFace.SOUTH


def cast_ray(
    player: Player,
    cubmap: CubMap,
    column: int,
    screen_width: int,
    screen_height: int,
    texture_width: int,
) -> RayHit:
    """Cast the ray for ``column`` and return the wall slice it hits."""
    camera_x = 2 * column / float(screen_width) - 1
    ray_dir_x = player.dir_x + player.plane_x * camera_x
    ray_dir_y = player.dir_y + player.plane_y * camera_x
    map_x = int(player.pos_x)
    map_y = int(player.pos_y)
    delta_x = _delta(ray_dir_x)
    delta_y = _delta(ray_dir_y)

    if ray_dir_x < 0:
        step_x = -1
        side_x = (player.pos_x - map_x) * delta_x
    else:
        step_x = 1
        side_x = (map_x + 1.0 - player.pos_x) * delta_x
    if ray_dir_y < 0:
        step_y = -1
        side_y = (player.pos_y - map_y) * delta_y
    else:
        step_y = 1
        side_y = (map_y + 1.0 - player.pos_y) * delta_y

    while True:
        if side_x < side_y:
            side_x += delta_x
            map_x += step_x
            side = 0
        else:
            side_y += delta_y
            map_y += step_y
            side = 1
        if cubmap.cell(map_x, map_y) == Cell.WALL:
            break

    if side == 0:
        distance = (map_x - player.pos_x + (1 - step_x) // 2) / ray_dir_x
    else:
        distance = (map_y - player.pos_y + (1 - step_y) // 2) / ray_dir_y

    line_height = int(screen_height / distance) if distance > 0 else screen_height
    draw_start = max(-(line_height // 2) + screen_height // 2, 0)
    draw_end = min(line_height // 2 + screen_height // 2, screen_height - 1)

    if side == 0:
        wall_x = player.pos_y + distance * ray_dir_y
    else:
        wall_x = player.pos_x + distance * ray_dir_x
    wall_x -= math.floor(wall_x)
    tex_x = int(wall_x * float(texture_width))
    if side == 0 and ray_dir_x > 0:
        tex_x = texture_width - tex_x - 1
    if side == 1 and ray_dir_y < 0:
        tex_x = texture_width - tex_x - 1

    return RayHit(
        column=column,
        map_x=map_x,
        map_y=map_y,
        side=side,
        ray_dir_x=ray_dir_x,
        ray_dir_y=ray_dir_y,
        distance=distance,
        line_height=line_height,
        draw_start=draw_start,
        draw_end=draw_end,
        wall_x=wall_x,
        tex_x=tex_x,
        face=_face(side, ray_dir_x, ray_dir_y),
    )


def cast_all(
    player: Player,
    cubmap: CubMap,
    screen_width: int,
    screen_height: int,
    texture_width: int,
) -> list[RayHit]:
    """Cast one ray per screen column, left to right."""
    return [
        cast_ray(player, cubmap, column, screen_width, screen_height, texture_width)
        for column in range(screen_width)
    ]