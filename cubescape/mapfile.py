"""Parsing and validation of ``.cub`` scene descriptions.

A scene file starts with a header of six identifiers (four wall texture
paths and two colours) in any order, possibly separated by blank lines,
followed by a contiguous block of map rows made of ``1`` (wall), ``0``
(floor), a single ``N``/``S``/``W``/``E`` (player start) and spaces
(nothing).
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import IntEnum
from pathlib import Path

_TEXTURE_KEYS = ("NO", "SO", "WE", "EA")
_COLOR_KEYS = ("F", "C")
_MAP_CHARS = frozenset("10NSWE ")
_PLAYER_CHARS = frozenset("NSWE")


class MapError(Exception):
    """Raised when a scene description is malformed or cannot be read."""


class Cell(IntEnum):
    """Content of one map square."""

    EMPTY = 0
    WALL = 1
    VOID = 2


@dataclass(frozen=True)
class CubMap:
    """A fully parsed and validated scene."""

    north: str
    south: str
    west: str
    east: str
    floor: int
    ceiling: int
    grid: tuple[tuple[Cell, ...], ...]
    player_x: int
    player_y: int
    player_dir: str

    @property
    def width(self) -> int:
        return len(self.grid[0]) if self.grid else 0

    @property
    def height(self) -> int:
        return len(self.grid)

    def contains(self, x: int, y: int) -> bool:
        """Return whether column ``x`` and row ``y`` lie inside the grid."""
        return 0 <= x < self.width and 0 <= y < self.height

    def cell(self, x: int, y: int) -> Cell:
        """Return the cell at column ``x``, row ``y``."""
        if not self.contains(x, y):
            raise IndexError(f"cell ({x}, {y}) is outside the map")
        return self.grid[y][x]


@dataclass
class _Header:
    textures: dict[str, str] = field(default_factory=dict)
    colors: dict[str, int] = field(default_factory=dict)

    @property
    def full(self) -> bool:
        # A colour of 0 counts as not yet given, as in the scene format's
        # reference loader.
        return all(key in self.textures for key in _TEXTURE_KEYS) and all(
            self.colors.get(key) for key in _COLOR_KEYS
        )

    def set(self, words: list[str]) -> None:
        if len(words) != 2:
            raise MapError("Invalid parameter")
        key, value = words
        if key in _TEXTURE_KEYS and key not in self.textures:
            self.textures[key] = value
        elif key in _COLOR_KEYS and not self.colors.get(key):
            self.colors[key] = parse_color(value)
        else:
            raise MapError("Invalid parameter")


def _split_lines(text: str) -> list[str]:
    lines = text.split("\n")
    if lines[-1] == "":
        lines.pop()
    return lines


def _words(text: str, sep: str) -> list[str]:
    return [word for word in text.split(sep) if word]


def _trim(line: str, header_full: bool) -> str:
    if not header_full:
        line = line.lstrip(" ")
    return line.rstrip(" ")


def _color_component(text: str) -> int:
    value = 0
    for char in text:
        if not "0" <= char <= "9":
            raise MapError("Invalid color")
        value = value * 10 + int(char)
        if value > 255:
            raise MapError("Invalid color")
    return value


def parse_color(text: str) -> int:
    """Parse ``"R,G,B"`` into a packed ``0xRRGGBB`` integer."""
    parts = _words(text, ",")
    if len(parts) != 3:
        raise MapError("Invalid color")
    red, green, blue = (_color_component(part) for part in parts)
    return red << 16 | green << 8 | blue


def is_map_line(line: str) -> bool:
    """Return whether ``line`` holds only characters allowed in map rows."""
    return all(char in _MAP_CHARS for char in line)


def validate_closed(grid, width: int, height: int) -> None:
    """Raise :class:`MapError` unless every floor cell is enclosed by walls."""
    for y, row in enumerate(grid):
        for x, cell in enumerate(row):
            if cell != Cell.EMPTY:
                continue
            for nx, ny in ((x + 1, y), (x - 1, y), (x, y + 1), (x, y - 1)):
                if not (0 <= nx < width and 0 <= ny < height):
                    raise MapError("Invalid map")
                if grid[ny][nx] == Cell.VOID:
                    raise MapError("Invalid map")


def _build_grid(rows: list[str]):
    width = max(len(row) for row in rows)
    grid = []
    player = None
    for y, row in enumerate(rows):
        cells = [Cell.VOID] * width
        for x, char in enumerate(row):
            if char == "1":
                cells[x] = Cell.WALL
            elif char == "0":
                cells[x] = Cell.EMPTY
            elif char in _PLAYER_CHARS:
                cells[x] = Cell.EMPTY
                if player is not None:
                    raise MapError("Invalid map")
                player = (x, y, char)
        grid.append(tuple(cells))
    if player is None:
        raise MapError("Invalid map")
    return tuple(grid), width, player


def parse_cub(text: str) -> CubMap:
    """Parse and validate the contents of a ``.cub`` file."""
    header = _Header()
    rows: list[str] = []
    map_closed = False
    for raw in _split_lines(text):
        line = _trim(raw, header.full)
        if not line:
            if header.full and rows:
                map_closed = True
            continue
        words = _words(line, " ")
        if words[0] in _TEXTURE_KEYS or words[0] in _COLOR_KEYS:
            header.set(words)
        elif header.full and is_map_line(line):
            if map_closed:
                raise MapError("Invalid map")
            rows.append(line)
        else:
            raise MapError("Invalid parameter")
    if not header.full or not rows:
        raise MapError("Invalid map")

    grid, width, (player_x, player_y, player_dir) = _build_grid(rows)
    validate_closed(grid, width, len(grid))
    return CubMap(
        north=header.textures["NO"],
        south=header.textures["SO"],
        west=header.textures["WE"],
        east=header.textures["EA"],
        floor=header.colors["F"],
        ceiling=header.colors["C"],
        grid=grid,
        player_x=player_x,
        player_y=player_y,
        player_dir=player_dir,
    )


def load_cub(path) -> CubMap:
    """Read and parse the ``.cub`` file at ``path``."""
    path = Path(path)
    if not str(path).endswith(".cub"):
        raise MapError("Invalid file extension")
    try:
        handle = open(path, "rb")
    except OSError as exc:
        raise MapError("Failed to open file") from exc
    with handle:
        try:
            data = handle.read()
        except OSError as exc:
            raise MapError("Failed to read file") from exc
    return parse_cub(data.decode("utf-8", errors="surrogateescape"))