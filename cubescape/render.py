"""Drawing a frame: background, textured wall slices and the minimap."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Sequence

import numpy as np

from .mapfile import Cell, CubMap
from .player import Player
from .raycast import cast_all
from .textures import Texture

SCREEN_WIDTH = 1920
SCREEN_HEIGHT = 1080

SQUARE_SIZE = 10
MINIMAP_RADIUS = 10
MINIMAP_WALL = 0x000000
MINIMAP_FLOOR = 0xFFFFFF
MINIMAP_PLAYER = 0xFF0000
_SHADE_MASK = 0x7F7F7F


def shade(color):
    """Darken a packed colour by halving each channel."""
    return (color >> 1) & _SHADE_MASK


@dataclass
class Frame:
    """An off-screen image of packed ``0xRRGGBB`` pixels."""

    width: int
    height: int
    pixels: np.ndarray = field(init=False, repr=False)

    def __post_init__(self) -> None:
        if self.width <= 0 or self.height <= 0:
            raise ValueError("frame dimensions must be positive")
        self.pixels = np.zeros((self.height, self.width), dtype=np.uint32)

    def put(self, x: int, y: int, color: int) -> None:
        """Set one pixel; coordinates outside the frame are ignored."""
        if 0 <= x < self.width and 0 <= y < self.height:
            self.pixels[y, x] = color

    def get(self, x: int, y: int) -> int:
        """Return the pixel at column ``x``, row ``y``."""
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise IndexError(f"pixel ({x}, {y}) is outside the frame")
        return int(self.pixels[y, x])

    def fill_background(self, horizon: int, ceiling: int, floor: int) -> None:
        """Paint rows above ``horizon`` with ``ceiling`` and the rest with ``floor``."""
        split = min(max(horizon, 0), self.height)
        self.pixels[:split, :] = ceiling
        self.pixels[split:, :] = floor

    def to_rgb(self) -> np.ndarray:
        """Return the frame as a ``height x width x 3`` array of bytes."""
        channels = (
            (self.pixels >> 16) & 0xFF,
            (self.pixels >> 8) & 0xFF,
            self.pixels & 0xFF,
        )
        return np.stack(channels, axis=-1).astype(np.uint8)


def draw_square(frame: Frame, x: int, y: int, color: int) -> None:
    """Fill a minimap square whose top-left corner is at ``(x, y)``."""
    for dx in range(SQUARE_SIZE):
        for dy in range(SQUARE_SIZE):
            frame.put(x + dx, y + dy, color)


def draw_minimap(frame: Frame, cubmap: CubMap, player: Player) -> None:
    """Draw the squares around the player in the top-left corner."""
    offsets = range(-MINIMAP_RADIUS, MINIMAP_RADIUS + 1)
    for i in offsets:
        for j in offsets:
            map_x = int(player.pos_x + i)
            map_y = int(player.pos_y + j)
            if cubmap.contains(map_x, map_y) and cubmap.cell(map_x, map_y) == Cell.EMPTY:
                color = MINIMAP_FLOOR
            else:
                color = MINIMAP_WALL
            draw_square(
                frame,
                (i + MINIMAP_RADIUS) * SQUARE_SIZE,
                (j + MINIMAP_RADIUS) * SQUARE_SIZE,
                color,
            )
    centre = MINIMAP_RADIUS * SQUARE_SIZE
    draw_square(frame, centre, centre, MINIMAP_PLAYER)


def draw_walls(
    frame: Frame, player: Player, cubmap: CubMap, textures: Sequence[Texture]
) -> None:
    """Draw one textured wall slice for every column of ``frame``."""
    tex_width = textures[0].width
    tex_height = textures[0].height
    texels = [np.asarray(texture.pixels, dtype=np.uint32) for texture in textures]
    hits = cast_all(player, cubmap, frame.width, frame.height, tex_width)
    for hit in hits:
        start, end = hit.draw_start, hit.draw_end
        if end <= start:
            continue
        step = 1.0 * tex_height / hit.line_height
        tex_pos = (start - frame.height // 2 + hit.line_height // 2) * step
        increments = np.full(end - start, step, dtype=np.float64)
        increments[0] = tex_pos
        positions = np.add.accumulate(increments)
        tex_y = positions.astype(np.int64) & (tex_height - 1)
        colors = texels[hit.face][tex_height * tex_y + hit.tex_x]
        if hit.side == 1:
            colors = shade(colors)
        frame.pixels[start:end, hit.column] = colors


def render_scene(
    cubmap: CubMap,
    player: Player,
    textures: Sequence[Texture],
    width: int = SCREEN_WIDTH,
    height: int = SCREEN_HEIGHT,
) -> Frame:
    """Render a complete frame: background, walls, then the minimap."""
    frame = Frame(width, height)
    frame.fill_background(height // 2, cubmap.ceiling, cubmap.floor)
    draw_walls(frame, player, cubmap, textures)
    draw_minimap(frame, cubmap, player)
    return frame