"""Game state: keyboard actions, player movement and tile layout for drawing."""

from __future__ import annotations

import enum
from typing import NamedTuple

from tilequest.gamemap import COLLECTIBLE, EXIT, FLOOR, PLAYER, WALL, GameMap

__all__ = ["TILE_SIZE", "Action", "MoveOutcome", "Tile", "Game", "key_action"]

TILE_SIZE = 32


class Action(enum.Enum):
    QUIT = "quit"
    UP = "up"
    DOWN = "down"
    LEFT = "left"
    RIGHT = "right"


class MoveOutcome(enum.Enum):
    BLOCKED = "blocked"
    EXIT_LOCKED = "exit_locked"
    MOVED = "moved"
    COLLECTED = "collected"
    WON = "won"


# Key codes for macOS and for X11.
_KEYS: dict[int, Action] = {
    53: Action.QUIT,
    65307: Action.QUIT,
    13: Action.UP,
    119: Action.UP,
    1: Action.DOWN,
    115: Action.DOWN,
    0: Action.LEFT,
    97: Action.LEFT,
    2: Action.RIGHT,
    100: Action.RIGHT,
}

_STEPS: dict[Action, tuple[int, int]] = {
    Action.UP: (0, -1),
    Action.DOWN: (0, 1),
    Action.LEFT: (-1, 0),
    Action.RIGHT: (1, 0),
}

_DRAWN = frozenset((WALL, FLOOR, PLAYER, COLLECTIBLE, EXIT))


def key_action(keycode: int) -> Action | None:
    """Return the action bound to ``keycode``, or None if the key does nothing."""
    return _KEYS.get(keycode)


class Tile(NamedTuple):
    """One tile to draw: its map character and its pixel position."""

    cell: str
    x: int
    y: int


class Game:
    """A game in progress on a validated map."""

    def __init__(self, game_map: GameMap) -> None:
        game_map.validate()
        self.map = game_map
        self.move_count = 0
        self.running = True

    @property
    def player(self) -> tuple[int, int]:
        return self.map.player_x, self.map.player_y

    def try_move(self, new_x: int, new_y: int) -> MoveOutcome:
        """Move the player to (new_x, new_y) if the rules allow it."""
        game_map = self.map
        if not (0 <= new_x < game_map.width and 0 <= new_y < game_map.height):
            return MoveOutcome.BLOCKED
        target = game_map[new_x, new_y]
        if target == WALL:
            return MoveOutcome.BLOCKED
        if target == EXIT:
            if game_map.collectible_count == 0:
                self.running = False
                return MoveOutcome.WON
            return MoveOutcome.EXIT_LOCKED
        outcome = MoveOutcome.MOVED
        if target == COLLECTIBLE:
            game_map.collectible_count -= 1
            outcome = MoveOutcome.COLLECTED
        game_map[game_map.player_x, game_map.player_y] = FLOOR
        game_map.player_x, game_map.player_y = new_x, new_y
        game_map[new_x, new_y] = PLAYER
        self.move_count += 1
        return outcome

    def handle_key(self, keycode: int) -> MoveOutcome | None:
        """Apply a key press; quitting stops the game and returns None."""
        action = key_action(keycode)
        if action is None:
            return None
        if action is Action.QUIT:
            self.running = False
            return None
        dx, dy = _STEPS[action]
        x, y = self.player
        return self.try_move(x + dx, y + dy)

    def render(self) -> list[Tile]:
        """Return the tiles to draw, row by row, at TILE_SIZE pixel spacing."""
        return [
            Tile(cell, x * TILE_SIZE, y * TILE_SIZE)
            for y, row in enumerate(self.map)
            for x, cell in enumerate(row)
            if cell in _DRAWN
        ]