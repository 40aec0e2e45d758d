"""The game window: event loop, input handling and display."""

from __future__ import annotations

import sys

import pygame

from .controls import Action, InputState
from .mapfile import CubMap, MapError, load_cub
from .player import Player
from .render import SCREEN_HEIGHT, SCREEN_WIDTH, render_scene
from .textures import load_wall_textures

WINDOW_TITLE = "Hell!"

_KEY_ACTIONS = {
    pygame.K_ESCAPE: Action.QUIT,
    pygame.K_LEFT: Action.ROTATE_LEFT,
    pygame.K_RIGHT: Action.ROTATE_RIGHT,
    pygame.K_a: Action.LEFT,
    pygame.K_s: Action.BACKWARD,
    pygame.K_w: Action.FORWARD,
    pygame.K_d: Action.RIGHT,
    pygame.K_DOWN: Action.DOWN,
    pygame.K_q: Action.TOGGLE_MOUSE,
}


def action_for_key(key: int):
    """Return the :class:`Action` bound to a pygame key code, or ``None``."""
    return _KEY_ACTIONS.get(key)


def run(cubmap: CubMap, width: int = SCREEN_WIDTH, height: int = SCREEN_HEIGHT) -> int:
    """Open a window and play ``cubmap`` until the player quits."""
    textures = load_wall_textures(cubmap)
    player = Player.from_map(cubmap)
    state = InputState(mouse_x=width // 2, mouse_y=height // 2)
    pygame.init()
    try:
        screen = pygame.display.set_mode((width, height))
        pygame.display.set_caption(WINDOW_TITLE)
        while not state.quit_requested:
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    state.quit_requested = True
                elif event.type == pygame.KEYDOWN:
                    action = action_for_key(event.key)
                    if action is not None:
                        state.press(action)
                        if action is Action.TOGGLE_MOUSE:
                            pygame.mouse.set_visible(not state.mouse_look)
                elif event.type == pygame.KEYUP:
                    action = action_for_key(event.key)
                    if action is not None:
                        state.release(action)
                elif event.type == pygame.MOUSEMOTION:
                    state.move_mouse(*event.pos)
            if state.quit_requested:
                break
            state.apply(player, cubmap, width)
            frame = render_scene(cubmap, player, textures, width, height)
            surface = pygame.surfarray.make_surface(frame.to_rgb().swapaxes(0, 1))
            screen.blit(surface, (0, 0))
            pygame.display.flip()
    finally:
        pygame.quit()
    return 0


def main(argv=None) -> int:
    """Load the scene named on the command line and play it."""
    args = sys.argv[1:] if argv is None else list(argv)
    try:
        if len(args) != 1:
            raise MapError("Invalid number of arguments")
        cubmap = load_cub(args[0])
        return run(cubmap, SCREEN_WIDTH, SCREEN_HEIGHT)
    except MapError as exc:
        sys.stderr.write(f"Error\n{exc}\n")
        return 1


if __name__ == "__main__":
    sys.exit(main())