"""Keyboard and mouse state, and how it drives the player each frame."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum, auto

from .mapfile import CubMap
from .player import Player
from .render import SCREEN_HEIGHT, SCREEN_WIDTH

MOUSE_TURN_THRESHOLD = 1000


class Action(Enum):
    """What a key does."""

    QUIT = auto()
    ROTATE_LEFT = auto()
    ROTATE_RIGHT = auto()
    LEFT = auto()
    RIGHT = auto()
    FORWARD = auto()
    BACKWARD = auto()
    DOWN = auto()
    TOGGLE_MOUSE = auto()


_HOLDABLE = frozenset(
    {
        Action.ROTATE_LEFT,
        Action.ROTATE_RIGHT,
        Action.LEFT,
        Action.RIGHT,
        Action.FORWARD,
        Action.BACKWARD,
        Action.DOWN,
    }
)


@dataclass
class InputState:
    """Held keys, pointer position and mouse-look mode."""

    held: set = field(default_factory=set)
    mouse_x: int = SCREEN_WIDTH // 2
    mouse_y: int = SCREEN_HEIGHT // 2
    mouse_look: bool = False
    quit_requested: bool = False

    def press(self, action: Action) -> None:
        """Handle a key going down."""
        if action is Action.QUIT:
            self.quit_requested = True
        elif action is Action.TOGGLE_MOUSE:
            self.toggle_mouse_look()
        elif action in _HOLDABLE:
            self.held.add(action)

    def release(self, action: Action) -> None:
        """Handle a key coming up."""
        if action in _HOLDABLE:
            self.held.discard(action)

    def move_mouse(self, x: int, y: int) -> None:
        """Record the pointer position."""
        self.mouse_x = x
        self.mouse_y = y

    def toggle_mouse_look(self) -> bool:
        """Switch mouse-look mode and return whether it is now on."""
        self.mouse_look = not self.mouse_look
        return self.mouse_look

    def apply(self, player: Player, cubmap: CubMap, screen_width: int) -> None:
        """Move and turn ``player`` for one frame according to the input."""
        if Action.ROTATE_LEFT in self.held:
            player.rotate_left()
        if Action.ROTATE_RIGHT in self.held:
            player.rotate_right()
        if Action.LEFT in self.held:
            player.move_left(cubmap)
        if Action.RIGHT in self.held:
            player.move_right(cubmap)
        if Action.FORWARD in self.held:
            player.move_forward(cubmap)
        if Action.BACKWARD in self.held:
            player.move_backward(cubmap)
        if self.mouse_look:
            offset = self.mouse_x - screen_width // 2
            if offset > MOUSE_TURN_THRESHOLD:
                player.rotate_right()
            elif offset < -MOUSE_TURN_THRESHOLD:
                player.rotate_left()