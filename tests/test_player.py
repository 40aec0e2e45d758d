import math

import pytest

from cubescape.mapfile import Cell, parse_cub
from cubescape.player import Player

HEADER = (
    "NO ./n.xpm\nSO ./s.xpm\nWE ./w.xpm\nEA ./e.xpm\n"
    "F 10,20,30\nC 40,50,60\n"
)


def make_map(direction="N"):
    rows = ["11111", "10001", f"10{direction}01", "10001", "11111"]
    return parse_cub(HEADER + "\n".join(rows) + "\n")


@pytest.mark.parametrize(
    "direction, expected",
    [
        ("W", (-1.0, 0.0, 0.0, 0.66)),
        ("E", (1.0, 0.0, 0.0, -0.66)),
        ("N", (0.0, -1.0, -0.66, 0.0)),
        ("S", (0.0, 1.0, 0.66, 0.0)),
    ],
)
def test_from_map_orientation(direction, expected):
    player = Player.from_map(make_map(direction))
    assert (player.dir_x, player.dir_y, player.plane_x, player.plane_y) == expected


def test_from_map_position_offset():
    player = Player.from_map(make_map())
    assert player.pos_x == pytest.approx(2.02)
    assert player.pos_y == pytest.approx(2.02)
    assert player.move_speed == 0.1
    assert player.rot_speed == 0.07


def test_move_forward_follows_direction():
    cubmap = make_map("N")
    player = Player.from_map(cubmap)
    start_x, start_y = player.pos_x, player.pos_y
    player.move_forward(cubmap)
    assert player.pos_x == start_x
    assert player.pos_y == pytest.approx(start_y - player.move_speed)


def test_forward_then_backward_returns():
    cubmap = make_map("E")
    player = Player.from_map(cubmap)
    start = (player.pos_x, player.pos_y)
    player.move_forward(cubmap)
    player.move_backward(cubmap)
    assert (player.pos_x, player.pos_y) == pytest.approx(start)


def test_left_then_right_returns():
    cubmap = make_map("S")
    player = Player.from_map(cubmap)
    start = (player.pos_x, player.pos_y)
    player.move_left(cubmap)
    assert (player.pos_x, player.pos_y) != pytest.approx(start)
    player.move_right(cubmap)
    assert (player.pos_x, player.pos_y) == pytest.approx(start)


@pytest.mark.parametrize("direction", ["N", "S", "W", "E"])
@pytest.mark.parametrize("method", ["move_forward", "move_backward", "move_left", "move_right"])
def test_walls_stop_movement(direction, method):
    cubmap = make_map(direction)
    player = Player.from_map(cubmap)
    for _ in range(100):
        getattr(player, method)(cubmap)
        assert cubmap.cell(int(player.pos_x), int(player.pos_y)) == Cell.EMPTY


def test_rotation_round_trip():
    player = Player.from_map(make_map("W"))
    before = (player.dir_x, player.dir_y, player.plane_x, player.plane_y)
    player.rotate_left()
    assert player.dir_y != pytest.approx(before[1])
    player.rotate_right()
    after = (player.dir_x, player.dir_y, player.plane_x, player.plane_y)
    assert after == pytest.approx(before)


def test_rotation_preserves_lengths_and_orthogonality():
    player = Player.from_map(make_map("N"))
    for _ in range(37):
        player.rotate_left()
    assert math.hypot(player.dir_x, player.dir_y) == pytest.approx(1.0)
    assert math.hypot(player.plane_x, player.plane_y) == pytest.approx(0.66)
    dot = player.dir_x * player.plane_x + player.dir_y * player.plane_y
    assert dot == pytest.approx(0.0, abs=1e-12)


def test_quarter_turn_from_north():
    player = Player.from_map(make_map("N"))
    player.rotate(math.pi / 2)
    assert (player.dir_x, player.dir_y) == pytest.approx((1.0, 0.0), abs=1e-12)