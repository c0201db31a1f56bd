# solong

A small top-down puzzle game. You walk a character around a walled map,
pick up every coin, and then leave through the exit. The number of moves
you have made is shown as you play.

## Installing

```
pip install .
```

This installs `pygame`, which opens the window and reads the keyboard.

## Playing

```
solong path/to/level.ber
```

The command takes exactly one argument, a file whose name ends in `.ber`.
The tile images are read from an `images/` directory in the current
working directory (see *Tiles* below), so run the command from the
directory that holds it.

Controls (a move happens when the key is released):

| Key | Action     |
|-----|------------|
| W   | move up    |
| S   | move down  |
| A   | move left  |
| D   | move right |
| Esc | quit       |

Closing the window also quits. You cannot walk through walls. The exit
stays shut until you have picked up every coin; stepping onto it after
that ends the game. Only steps that actually move the player are
counted, and the count is written to standard output as
`move count: N`.

### Errors and exit status

Problems are reported on standard error as a line `Error` followed by a
short reason.

- A wrong number of arguments, a name that does not end in `.ber`, or a
  file that cannot be read ends the program with status 1.
- A map that is read but fails its checks, or tile images that cannot be
  loaded (`error when loading image`), end the program with status 0.

## Map files

A map is plain text, one row per line. Empty lines are skipped. Rows are
built from these characters:

| Char | Meaning     |
|------|-------------|
| `1`  | wall        |
| `0`  | empty floor |
| `C`  | coin        |
| `E`  | exit        |
| `P`  | player      |

A map is accepted only when, checked in this order:

1. it contains no other characters (a carriage return counts as one);
2. every row has the same length, so the map is a rectangle;
3. its border is made entirely of walls;
4. it has exactly one player, at least one exit and at least one coin;
5. every coin can be reached from the player, and every exit is next to
   a square the player can reach.

Example:

```
1111111111
1P0C00C0E1
1011110101
1000C00001
1111111111
```

## Tiles

The game needs five XPM images in `images/`: `background.xpm`,
`wall.xpm`, `gold.xpm` (coins), `player.xpm` and `exit.xpm`. No images
come with the package. Each image is cut or padded with black to 64×64
pixels.

Colours may be given as `#RRGGBB` or as X11 colour names such as
`forest green`, in any case; unknown names give black. The colour `None`
gives the pixel value `0xFF000000` (`solong.xpm.TRANSPARENT`). The window
draws only the red, green and blue parts of each pixel, so such pixels
appear black rather than see-through.

## Using it as a library

- `solong.gamemap`: `check_args`, `parse_map`, `read_map` and
  `GameMap` (with `validate`, `width`, `height`, `collectibles`, `exits`,
  `players` and `player_position`). `flood_fill(grid, row, col)` marks
  reachable floor and coin cells with `"2"` in place and returns how many
  it marked; `has_valid_path(grid, start)` works on a copy. Problems raise
  `MapError`.
- `solong.game`: `Game(game_map, tiles)` holds the game state, with
  `move(direction)`, `handle_key(key)`, `render()` and `status_line()`.
  `Direction` names the four steps and `Tiles` holds the five tile
  images. Reaching the exit or pressing escape raises `GameOver`, whose
  `won` and `moves` attributes tell how it ended.
- `solong.xpm`: `parse_xpm(lines)` builds an image from XPM strings and
  `load_xpm(path)` reads an XPM file; helpers `split_words`,
  `find_unquoted`, `strip_comments` and `quoted_lines`. Bad data raises
  `XpmError`.
- `solong.image.Image`: a buffer of 32-bit `0xAARRGGBB` pixels with
  `put_pixel`, `get_pixel`, `blit` (clipped to the image) and `to_bytes`.
- `solong.colors`: `lookup_color(name)` returns the RGB value of an X11
  colour name (raising `KeyError` for unknown names) and
  `parse_color(name, extra)` reads an XPM colour word.
- `solong.app`: `main(argv=None)` runs the game and returns the exit
  status; `load_tiles(directory)` and `image_to_surface(image)` are the
  helpers it uses.