"""Game state, movement rules and drawing of the map."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional

from .gamemap import COLLECTIBLE, EMPTY, EXIT, PLAYER, WALL, GameMap
from .image import Image

TILE_SIZE = 64

KEY_ESCAPE = 65307
KEY_UP = 119
KEY_DOWN = 115
KEY_LEFT = 97
KEY_RIGHT = 100


class Direction(Enum):
    """A step on the grid as (row change, column change)."""

    UP = (-1, 0)
    DOWN = (1, 0)
    LEFT = (0, -1)
    RIGHT = (0, 1)


_KEY_DIRECTIONS = {
    KEY_UP: Direction.UP,
    KEY_DOWN: Direction.DOWN,
    KEY_LEFT: Direction.LEFT,
    KEY_RIGHT: Direction.RIGHT,
}


class GameOver(Exception):
    """Raised when the game ends, by reaching the exit or by quitting."""

    def __init__(self, won: bool, moves: int) -> None:
        outcome = "won" if won else "quit"
        super().__init__(f"game {outcome} after {moves} moves")
        self.won = won
        self.moves = moves


def _fit(image: Image) -> Image:
    tile = Image(TILE_SIZE, TILE_SIZE)
    tile.blit(image, 0, 0)
    return tile


@dataclass
class Tiles:
    """The five tile images, each cut or padded to TILE_SIZE square."""

    background: Image
    player: Image
    collectible: Image
    wall: Image
    exit: Image

    def __post_init__(self) -> None:
        self.background = _fit(self.background)
        self.player = _fit(self.player)
        self.collectible = _fit(self.collectible)
        self.wall = _fit(self.wall)
        self.exit = _fit(self.exit)

    def for_cell(self, cell: str) -> Optional[Image]:
        """Return the image drawn for a map cell, or None for unknown cells."""
        return {
            WALL: self.wall,
            EMPTY: self.background,
            COLLECTIBLE: self.collectible,
            PLAYER: self.player,
            EXIT: self.exit,
        }.get(cell)


class Game:
    """A game in progress on a validated map."""

    def __init__(self, game_map: GameMap, tiles: Tiles) -> None:
        position = game_map.player_position
        if position is None:
            raise ValueError("map has no player")
        self.grid = [list(row) for row in game_map.grid]
        self.player = position
        self.collectibles = game_map.collectibles
        self.moves = 0
        self.tiles = tiles
        self.canvas = Image(game_map.width * TILE_SIZE, game_map.height * TILE_SIZE)

    def _draw(self, tile: Image, row: int, col: int) -> None:
        self.canvas.blit(tile, col * TILE_SIZE, row * TILE_SIZE)

    def render(self) -> Image:
        """Draw the whole map onto the canvas and return it."""
        for r, row in enumerate(self.grid):
            for c, cell in enumerate(row):
                tile = self.tiles.for_cell(cell)
                if tile is not None:
                    self._draw(tile, r, c)
        return self.canvas

    def move(self, direction: Direction) -> bool:
        """Try to move the player one cell; return whether it moved.

        Raises GameOver when the player steps on an exit with every
        collectible taken.
        """
        row, col = self.player
        d_row, d_col = direction.value
        new_row, new_col = row + d_row, col + d_col
        if not (0 <= new_row < len(self.grid) and 0 <= new_col < len(self.grid[new_row])):
            return False
        target = self.grid[new_row][new_col]
        if target == WALL:
            return False
        if target == COLLECTIBLE:
            self.collectibles -= 1
        if target == EXIT:
            if self.collectibles == 0:
                raise GameOver(True, self.moves)
            return False
        self.moves += 1
        self.grid[row][col] = EMPTY
        self.grid[new_row][new_col] = PLAYER
        self.player = (new_row, new_col)
        self._draw(self.tiles.background, row, col)
        self._draw(self.tiles.player, new_row, new_col)
        return True

    def handle_key(self, key: int) -> bool:
        """React to a released key; return whether the player moved.

        The escape key raises GameOver.
        """
        if key == KEY_ESCAPE:
            raise GameOver(False, self.moves)
        direction = _KEY_DIRECTIONS.get(key)
        if direction is None:
            return False
        return self.move(direction)

    def status_line(self) -> str:
        """Text showing the number of moves made."""
        return f"move count: {self.moves}"