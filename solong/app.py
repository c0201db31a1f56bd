"""Command-line entry point: load a map and play it in a window."""

from __future__ import annotations

import os
import sys
from collections.abc import Sequence
from pathlib import Path
from typing import Optional, Union

os.environ.setdefault("PYGAME_HIDE_SUPPORT_PROMPT", "1")

import pygame  # noqa: E402

from .game import KEY_ESCAPE, Game, GameOver, Tiles  # noqa: E402
from .gamemap import MapError, check_args, read_map  # noqa: E402
from .image import Image  # noqa: E402
from .xpm import XpmError, load_xpm  # noqa: E402

PROGRAM_NAME = "so_long"
IMAGE_DIR = Path("images")
FRAME_RATE = 60

_TILE_FILES = {
    "background": "background.xpm",
    "exit": "exit.xpm",
    "collectible": "gold.xpm",
    "player": "player.xpm",
    "wall": "wall.xpm",
}


def load_tiles(directory: Union[str, os.PathLike]) -> Tiles:
    """Load the five tile images from ``directory``.

    Raises XpmError when any of them cannot be read.
    """
    folder = Path(directory)
    images = {role: load_xpm(folder / name) for role, name in _TILE_FILES.items()}
    return Tiles(**images)


def image_to_surface(image: Image) -> pygame.Surface:
    """Turn an image into a pygame surface with the same RGB pixels."""
    data = image.to_bytes()  # B, G, R, A per pixel
    rgb = bytearray(image.width * image.height * 3)
    rgb[0::3] = data[2::4]
    rgb[1::3] = data[1::4]
    rgb[2::3] = data[0::4]
    return pygame.image.frombuffer(bytes(rgb), (image.width, image.height), "RGB").copy()


def _error(message: str) -> None:
    print(f"Error\n{message}", file=sys.stderr)


def _key_code(event_key: int) -> int:
    return KEY_ESCAPE if event_key == pygame.K_ESCAPE else event_key


def _write(text: str) -> None:
    sys.stdout.write(text)
    sys.stdout.flush()


def _run(game: Game) -> int:
    width, height = game.canvas.width, game.canvas.height
    pygame.init()
    try:
        screen = pygame.display.set_mode((width, height))
        pygame.display.set_caption(PROGRAM_NAME)
        clock = pygame.time.Clock()
        game.render()
        try:
            while True:
                for event in pygame.event.get():
                    if event.type == pygame.QUIT:
                        return 0
                    if event.type == pygame.KEYUP:
                        if game.handle_key(_key_code(event.key)):
                            _write(f" move count : {game.moves} \r")
                _write(f"{game.status_line()} \r")
                screen.blit(image_to_surface(game.canvas), (0, 0))
                pygame.display.flip()
                clock.tick(FRAME_RATE)
        except GameOver:
            return 0
    finally:
        pygame.quit()


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Play the map named by the single argument; return the exit status."""
    args = list(sys.argv[1:] if argv is None else argv)
    try:
        path = check_args([PROGRAM_NAME, *args])
        game_map = read_map(path)
    except MapError as exc:
        _error(str(exc))
        return 1
    # A map that was read but fails its checks ends the program normally.
    try:
        game_map.validate()
    except MapError as exc:
        _error(str(exc))
        return 0
    try:
        tiles = load_tiles(IMAGE_DIR)
    except XpmError:
        _error("error when loading image")
        return 0
    return _run(Game(game_map, tiles))


if __name__ == "__main__":
    sys.exit(main())