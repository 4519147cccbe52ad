"""Player state, input actions and movement with wall collision."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from enum import Enum, auto

MOVE_SPEED = 0.05
ROT_SPEED = 0.05
COLLISION_RADIUS = 0.2

_BLOCKING_TILES = frozenset("1 ")


class Action(Enum):
    """Inputs the game reacts to."""

    FORWARD = auto()
    BACKWARD = auto()
    STRAFE_LEFT = auto()
    STRAFE_RIGHT = auto()
    ROTATE_LEFT = auto()
    ROTATE_RIGHT = auto()
    QUIT = auto()


class QuitRequested(Exception):
    """Raised when the player asks to leave the game."""


@dataclass
class Player:
    """Position, view direction, camera plane and heading angle (radians)."""

    pos_x: float
    pos_y: float
    dir_x: float
    dir_y: float
    plane_x: float = 0.0
    plane_y: float = 0.0
    dir: float = 0.0

    def rotate(self, angle: float) -> None:
        """Turn the view by ``angle`` radians, keeping ``dir`` in [0, 2*pi)."""
        cos_a, sin_a = math.cos(angle), math.sin(angle)
        self.dir_x, self.dir_y = (
            cos_a * self.dir_x - sin_a * self.dir_y,
            sin_a * self.dir_x + cos_a * self.dir_y,
        )
        self.plane_x, self.plane_y = (
            cos_a * self.plane_x - sin_a * self.plane_y,
            sin_a * self.plane_x + cos_a * self.plane_y,
        )
        self.dir += angle
        if self.dir < 0:
            self.dir += math.tau
        elif self.dir >= math.tau:
            self.dir -= math.tau


@dataclass
class GameState:
    """The map, the player and the set of actions currently held down."""

    maplines: list[str]
    player: Player
    move_speed: float = MOVE_SPEED
    rot_speed: float = ROT_SPEED
    collision_radius: float = COLLISION_RADIUS
    held: set[Action] = field(default_factory=set)

    @property
    def map_height(self) -> int:
        return len(self.maplines)

    def press(self, action: Action) -> None:
        """Start an action; ``Action.QUIT`` raises :class:`QuitRequested`."""
        if action is Action.QUIT:
            raise QuitRequested()
        self.held.add(action)

    def release(self, action: Action) -> None:
        """Stop an action."""
        self.held.discard(action)

    def is_walkable(self, x: int, y: int) -> bool:
        """Whether the tile at column ``x``, row ``y`` can be entered."""
        if not 0 <= y < self.map_height:
            return False
        line = self.maplines[y]
        if not 0 <= x < len(line):
            return False
        return line[x] not in _BLOCKING_TILES

    def try_move(self, dx: float, dy: float) -> bool:
        """Move the player by (dx, dy) unless that would enter a wall.

        Both axes are checked together, so a blocked move does not slide.
        Returns whether the player moved.
        """
        new_x = self.player.pos_x + dx
        new_y = self.player.pos_y + dy
        reach_x = self.collision_radius if dx > 0 else -self.collision_radius
        reach_y = self.collision_radius if dy > 0 else -self.collision_radius
        if not self.is_walkable(int(new_x + reach_x), int(new_y + reach_y)):
            return False
        self.player.pos_x = new_x
        self.player.pos_y = new_y
        return True

    def update(self) -> None:
        """Apply one frame of every held action."""
        player = self.player
        step = self.move_speed
        if Action.FORWARD in self.held:
            self.try_move(player.dir_x * step, player.dir_y * step)
        if Action.BACKWARD in self.held:
            self.try_move(-player.dir_x * step, -player.dir_y * step)
        if Action.STRAFE_LEFT in self.held:
            self.try_move(player.dir_y * step, -player.dir_x * step)
        if Action.STRAFE_RIGHT in self.held:
            self.try_move(-player.dir_y * step, player.dir_x * step)
        if Action.ROTATE_LEFT in self.held:
            player.rotate(-self.rot_speed)
        if Action.ROTATE_RIGHT in self.held:
            player.rotate(self.rot_speed)