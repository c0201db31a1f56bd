"""Reading of XPM images into :class:`Image` objects."""

from __future__ import annotations

import os
import re
from collections.abc import Iterable, Iterator
from pathlib import Path
from typing import Optional, Union

from .colors import parse_color
from .image import Image

# Pixel value given to the XPM colour "None".
TRANSPARENT = 0xFF000000

_WORD_SEPARATORS = re.compile(r"[ \t]+")
_QUOTED = re.compile(r'"([^"]*)"')
_LEADING_INT = re.compile(r"\s*([+-]?\d+)")


class XpmError(ValueError):
    """Raised when XPM data cannot be turned into an image."""


def split_words(text: str) -> list[str]:
    """Split ``text`` on runs of spaces and tabs, dropping empty words."""
    return [word for word in _WORD_SEPARATORS.split(text) if word]


def find_unquoted(text: str, needle: str) -> int:
    """Return the first position of ``needle`` outside double quotes, or -1."""
    quoted = False
    last_start = len(text) - len(needle)
    for pos, char in enumerate(text):
        if pos > last_start:
            break
        if char == '"':
            quoted = not quoted
        if not quoted and text.startswith(needle, pos):
            return pos
    return -1


def _blank(text: str, start: int, end: int) -> str:
    return text[:start] + " " * (end - start) + text[end:]


def strip_comments(text: str) -> str:
    """Replace C-style comments outside quotes with spaces, keeping the length."""
    for opener, closer in (("/*", "*/"), ("//", "\n")):
        while (begin := find_unquoted(text, opener)) != -1:
            end = text.find(closer, begin + len(opener))
            end = len(text) if end == -1 else end + len(closer)
            text = _blank(text, begin, end)
    return text


def quoted_lines(text: str) -> Iterator[str]:
    """Yield the contents of successive double-quoted strings in ``text``."""
    for match in _QUOTED.finditer(text):
        yield match.group(1)


def _atoi(word: str) -> int:
    match = _LEADING_INT.match(word)
    return int(match.group(1)) if match else 0


def _color_of(definition: str) -> int:
    words = split_words(definition)
    try:
        index = words.index("c")
    except ValueError:
        raise XpmError(f"colour definition without 'c' key: {definition!r}") from None
    if index + 1 >= len(words):
        raise XpmError(f"colour definition without a colour: {definition!r}")
    extra: Optional[str] = words[index + 2] if index + 2 < len(words) else None
    return parse_color(words[index + 1], extra)


def parse_xpm(lines: Iterable[str]) -> Image:
    """Build an image from XPM strings: header, colour definitions, pixel rows."""
    rows = iter(lines)

    def next_line(what: str) -> str:
        try:
            return next(rows)
        except StopIteration:
            raise XpmError(f"missing {what}") from None

    header = split_words(next_line("header"))
    if len(header) < 4:
        raise XpmError(f"incomplete header: {' '.join(header)!r}")
    width, height, ncolors, cpp = (_atoi(word) for word in header[:4])
    if min(width, height, ncolors, cpp) <= 0:
        raise XpmError(f"invalid header: {' '.join(header)!r}")

    palette: dict[str, int] = {}
    for _ in range(ncolors):
        line = next_line("colour definition")
        key, value = line[:cpp], _color_of(line[cpp:])
        if cpp <= 2:
            palette[key] = value
        else:
            palette.setdefault(key, value)

    image = Image(width, height)
    for y in range(height):
        line = next_line("pixel row")
        if len(line) < width * cpp:
            raise XpmError(f"pixel row {y} is too short")
        for x in range(width):
            color = palette.get(line[x * cpp:(x + 1) * cpp], 0)
            image.put_pixel(x, y, TRANSPARENT if color == -1 else color)
    return image


def load_xpm(path: Union[str, os.PathLike]) -> Image:
    """Read an XPM file and return its image."""
    try:
        text = Path(path).read_bytes().decode("latin-1")
    except OSError as exc:
        raise XpmError(f"cannot read {path}") from exc
    return parse_xpm(quoted_lines(strip_comments(text)))