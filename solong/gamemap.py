"""Loading and validation of ``.ber`` game maps."""

from __future__ import annotations

import os
from collections.abc import Sequence
from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Union

WALL = "1"
EMPTY = "0"
PLAYER = "P"
EXIT = "E"
COLLECTIBLE = "C"
VALID_TILES = frozenset((WALL, EMPTY, PLAYER, EXIT, COLLECTIBLE))
MAP_SUFFIX = ".ber"

_REACHED = "2"
_FILLABLE = (EMPTY, COLLECTIBLE)
_NEIGHBOURS = ((-1, 0), (1, 0), (0, 1), (0, -1))

Grid = list[list[str]]


class MapError(Exception):
    """Raised when the command line or a map is not acceptable."""


def check_args(argv: Sequence[str]) -> str:
    """Check a command line of program name and map path; return the path."""
    if len(argv) != 2:
        raise MapError("invalid number of argument")
    path = argv[1]
    dot = path.rfind(".")
    if dot == -1:
        raise MapError("invalid argument")
    if path[dot:] != MAP_SUFFIX:
        raise MapError(f"file must be of type <name>{MAP_SUFFIX}")
    return path


def parse_map(text: str) -> "GameMap":
    """Build a map from text, one row per non-empty line."""
    rows = [list(line) for line in text.split("\n") if line]
    if not rows:
        raise MapError("map is empty")
    return GameMap(rows)


def read_map(path: Union[str, os.PathLike]) -> "GameMap":
    """Read a map file and return its map."""
    try:
        text = Path(path).read_bytes().decode("latin-1")
    except OSError as exc:
        raise MapError("file cannot be read") from exc
    return parse_map(text)


def _inside(grid: Grid, row: int, col: int) -> bool:
    return 0 <= row < len(grid) and 0 <= col < len(grid[row])


def flood_fill(grid: Grid, row: int, col: int) -> int:
    """Mark every empty or collectible cell reachable from ``(row, col)``.

    Marked cells become ``"2"``. The grid is changed in place; the number of
    cells marked is returned.
    """
    filled = 0
    pending = [(row, col)]
    while pending:
        r, c = pending.pop()
        if not _inside(grid, r, c) or grid[r][c] not in _FILLABLE:
            continue
        grid[r][c] = _REACHED
        filled += 1
        pending.extend((r + dr, c + dc) for dr, dc in _NEIGHBOURS)
    return filled


def has_valid_path(grid: Grid, start: tuple[int, int]) -> bool:
    """Tell whether every collectible and every exit can be reached from ``start``."""
    work = [list(row) for row in grid]
    row, col = start
    work[row][col] = EMPTY
    flood_fill(work, row, col)
    for r, line in enumerate(work):
        for c, cell in enumerate(line):
            if cell == COLLECTIBLE:
                return False
            if cell == EXIT and not any(
                _inside(work, r + dr, c + dc) and work[r + dr][c + dc] == _REACHED
                for dr, dc in _NEIGHBOURS
            ):
                return False
    return True


@dataclass
class GameMap:
    """A rectangular grid of map cells, stored row by row."""

    grid: Grid

    @property
    def height(self) -> int:
        return len(self.grid)

    @property
    def width(self) -> int:
        return len(self.grid[0]) if self.grid else 0

    def _count(self, tile: str) -> int:
        return sum(row.count(tile) for row in self.grid)

    @property
    def collectibles(self) -> int:
        return self._count(COLLECTIBLE)

    @property
    def exits(self) -> int:
        return self._count(EXIT)

    @property
    def players(self) -> int:
        return self._count(PLAYER)

    @property
    def player_position(self) -> Optional[tuple[int, int]]:
        """Row and column of the last player cell in reading order."""
        position = None
        for r, row in enumerate(self.grid):
            for c, cell in enumerate(row):
                if cell == PLAYER:
                    position = (r, c)
        return position

    def _is_walled(self) -> bool:
        top, bottom = self.grid[0], self.grid[-1]
        if any(cell != WALL for cell in top) or any(cell != WALL for cell in bottom):
            return False
        return all(row[0] == WALL and row[-1] == WALL for row in self.grid)

    def validate(self) -> "GameMap":
        """Check the map and return it; raise MapError on the first problem."""
        if any(cell not in VALID_TILES for row in self.grid for cell in row):
            raise MapError("invalid map (unknown element)")
        if any(len(row) != self.width for row in self.grid):
            raise MapError("map is not a rectangle")
        if not self._is_walled():
            raise MapError("map is not surrounded by walls")
        if self.collectibles < 1 or self.exits < 1 or self.players != 1:
            raise MapError("map err (no element C, J or E) or J > 1")
        if not has_valid_path(self.grid, self.player_position):
            raise MapError("No valid path")
        return self