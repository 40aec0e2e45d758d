"""Wall textures: loading images and scaling them to a square grid."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence

import numpy as np
from PIL import Image

from .mapfile import CubMap, MapError

TEXTURE_SIZE = 128


@dataclass(frozen=True)
class Texture:
    """A square-or-rectangular grid of packed ``0xRRGGBB`` pixels, row-major."""

    width: int
    height: int
    pixels: tuple[int, ...]

    def sample(self, x: int, y: int) -> int:
        """Return the colour at column ``x``, row ``y``."""
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise IndexError(f"texel ({x}, {y}) is outside the texture")
        return self.pixels[y * self.width + x]


def resample(
    pixels: Sequence[int], width: int, height: int, size: int = TEXTURE_SIZE
) -> Texture:
    """Scale a row-major ``width`` x ``height`` image to ``size`` x ``size``."""
    if width <= 0 or height <= 0 or size <= 0:
        raise ValueError("texture dimensions must be positive")
    if len(pixels) != width * height:
        raise ValueError("pixel count does not match the dimensions")
    rows = [(height * i) // size for i in range(size)]
    cols = [(width * j) // size for j in range(size)]
    scaled = tuple(pixels[width * row + col] for row in rows for col in cols)
    return Texture(width=size, height=size, pixels=scaled)


def load_texture(path) -> Texture:
    """Read the image at ``path`` and scale it to a square texture."""
    try:
        with Image.open(path) as image:
            rgb = np.asarray(image.convert("RGB"), dtype=np.uint32)
    except (OSError, ValueError) as exc:
        raise MapError("Failed to open xpm") from exc
    height, width = rgb.shape[:2]
    packed = (rgb[..., 0] << 16) | (rgb[..., 1] << 8) | rgb[..., 2]
    return resample(packed.ravel().tolist(), width, height, TEXTURE_SIZE)


def load_wall_textures(cubmap: CubMap) -> tuple[Texture, ...]:
    """Load the north, south, west and east textures, in that order."""
    return tuple(
        load_texture(path)
        for path in (cubmap.north, cubmap.south, cubmap.west, cubmap.east)
    )