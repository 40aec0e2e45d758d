import pygame
import pytest

from cubescape.app import action_for_key, main
from cubescape.controls import Action


@pytest.mark.parametrize(
    "key, action",
    [
        (pygame.K_ESCAPE, Action.QUIT),
        (pygame.K_LEFT, Action.ROTATE_LEFT),
        (pygame.K_RIGHT, Action.ROTATE_RIGHT),
        (pygame.K_a, Action.LEFT),
        (pygame.K_d, Action.RIGHT),
        (pygame.K_w, Action.FORWARD),
        (pygame.K_s, Action.BACKWARD),
        (pygame.K_DOWN, Action.DOWN),
        (pygame.K_q, Action.TOGGLE_MOUSE),
    ],
)
def test_key_bindings(key, action):
    assert action_for_key(key) is action


def test_unbound_key():
    assert action_for_key(pygame.K_z) is None


def test_main_without_arguments(capsys):
    assert main([]) == 1
    assert capsys.readouterr().err == "Error\nInvalid number of arguments\n"


def test_main_with_too_many_arguments(capsys):
    assert main(["a.cub", "b.cub"]) == 1
    assert capsys.readouterr().err == "Error\nInvalid number of arguments\n"


def test_main_rejects_extension(capsys):
    assert main(["scene.txt"]) == 1
    assert capsys.readouterr().err == "Error\nInvalid file extension\n"


def test_main_missing_file(tmp_path, capsys):
    assert main([str(tmp_path / "missing.cub")]) == 1
    assert capsys.readouterr().err == "Error\nFailed to open file\n"


def test_main_invalid_map(tmp_path, capsys):
    scene = tmp_path / "open.cub"
    scene.write_text(
        "NO a\nSO b\nWE c\nEA d\nF 1,2,3\nC 4,5,6\n\n111\n1N0\n111\n"
    )
    assert main([str(scene)]) == 1
    assert capsys.readouterr().err == "Error\nInvalid map\n"


def test_main_missing_textures(tmp_path, capsys):
    scene = tmp_path / "closed.cub"
    scene.write_text(
        "NO no.xpm\nSO so.xpm\nWE we.xpm\nEA ea.xpm\nF 1,2,3\nC 4,5,6\n\n"
        "111\n1N1\n111\n"
    )
    assert main([str(scene)]) == 1
    assert capsys.readouterr().err == "Error\nFailed to open xpm\n"