"""The player's position, view direction and camera plane."""

from __future__ import annotations

import math
from dataclasses import dataclass

from .mapfile import Cell, CubMap

MOVE_SPEED = 0.1
ROT_SPEED = 0.07
PLANE_LENGTH = 0.66
START_OFFSET = 0.02

# Look direction and camera plane for each start letter.
_ORIENTATIONS = {
    "W": ((-1.0, 0.0), (0.0, PLANE_LENGTH)),
    "E": ((1.0, 0.0), (0.0, -PLANE_LENGTH)),
    "N": ((0.0, -1.0), (-PLANE_LENGTH, 0.0)),
    "S": ((0.0, 1.0), (PLANE_LENGTH, 0.0)),
}

_FORWARD_REACH = 0.9
_SIDE_REACH = 0.5


def _is_floor(cubmap: CubMap, x: int, y: int) -> bool:
    return cubmap.contains(x, y) and cubmap.grid[y][x] == Cell.EMPTY


@dataclass
class Player:
    """A camera in the map: position, direction and camera plane."""

    pos_x: float
    pos_y: float
    dir_x: float
    dir_y: float
    plane_x: float
    plane_y: float
    move_speed: float = MOVE_SPEED
    rot_speed: float = ROT_SPEED

    @classmethod
    def from_map(cls, cubmap: CubMap) -> "Player":
        """Place a player on the start square of ``cubmap``."""
        try:
            (dir_x, dir_y), (plane_x, plane_y) = _ORIENTATIONS[cubmap.player_dir]
        except KeyError:
            raise ValueError(
                f"unknown start direction {cubmap.player_dir!r}"
            ) from None
        return cls(
            pos_x=cubmap.player_x + START_OFFSET,
            pos_y=cubmap.player_y + START_OFFSET,
            dir_x=dir_x,
            dir_y=dir_y,
            plane_x=plane_x,
            plane_y=plane_y,
        )

    def _shift(self, cubmap: CubMap, dx: float, dy: float, reach: float) -> None:
        probe_x = int(self.pos_x + dx * reach)
        if _is_floor(cubmap, probe_x, int(self.pos_y)):
            self.pos_x += dx * self.move_speed
        probe_y = int(self.pos_y + dy * reach)
        if _is_floor(cubmap, int(self.pos_x), probe_y):
            self.pos_y += dy * self.move_speed

    def move_forward(self, cubmap: CubMap) -> None:
        """Step along the view direction unless a wall is in the way."""
        self._shift(cubmap, self.dir_x, self.dir_y, _FORWARD_REACH)

    def move_backward(self, cubmap: CubMap) -> None:
        """Step against the view direction unless a wall is in the way."""
        self._shift(cubmap, -self.dir_x, -self.dir_y, _FORWARD_REACH)

    def move_left(self, cubmap: CubMap) -> None:
        """Strafe to the left unless a wall is in the way."""
        self._shift(cubmap, -self.plane_x, -self.plane_y, _SIDE_REACH)

    def move_right(self, cubmap: CubMap) -> None:
        """Strafe to the right unless a wall is in the way."""
        self._shift(cubmap, self.plane_x, self.plane_y, _SIDE_REACH)

    def rotate(self, angle: float) -> None:
        """Rotate direction and camera plane by ``angle`` radians."""
        cos_a = math.cos(angle)
        sin_a = math.sin(angle)
        self.dir_x, self.dir_y = (
            self.dir_x * cos_a - self.dir_y * sin_a,
            self.dir_x * sin_a + self.dir_y * cos_a,
        )
        self.plane_x, self.plane_y = (
            self.plane_x * cos_a - self.plane_y * sin_a,
            self.plane_x * sin_a + self.plane_y * cos_a,
        )

    def rotate_left(self) -> None:
        """Turn by one rotation step to the left."""
        self.rotate(self.rot_speed)

    def rotate_right(self) -> None:
        """Turn by one rotation step to the right."""
        self.rotate(-self.rot_speed)