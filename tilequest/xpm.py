"""Reader for XPM images, from in-memory line lists or from files."""

from __future__ import annotations

import re
from collections.abc import Iterable, Iterator
from os import PathLike

from tilequest.colors import color_from_text
from tilequest.image import Image
from tilequest.text import find_outside_quotes, split_words

__all__ = [
    "XpmError",
    "strip_comments",
    "quoted_lines",
    "parse_xpm",
    "xpm_to_image",
    "xpm_file_to_image",
]

# Pixel value used for the colour "none".
TRANSPARENT = 0xFF000000

_LEADING_INT = re.compile(r"\s*([+-]?\d+)")


class XpmError(ValueError):
    """Raised when XPM data cannot be turned into an image."""


def _atoi(word: str) -> int:
    match = _LEADING_INT.match(word)
    return int(match.group(1)) if match else 0


def _blank(text: str, start: int, stop: int) -> str:
    return text[:start] + " " * (stop - start) + text[stop:]


def strip_comments(text: str) -> str:
    """Replace ``/* */`` and ``//`` comments outside quoted strings with spaces.

    The result has the same length as ``text``. A ``//`` comment is blanked
    up to and including its newline; an unterminated comment runs to the end.
    """
    while (begin := find_outside_quotes(text, "/*")) != -1:
        end = text.find("*/", begin + 2)
        text = _blank(text, begin, len(text) if end == -1 else end + 2)
    while (begin := find_outside_quotes(text, "//")) != -1:
        end = text.find("\n", begin + 2)
        text = _blank(text, begin, len(text) if end == -1 else end + 1)
    return text


def quoted_lines(text: str) -> Iterator[str]:
    """Yield the contents of each successive pair of double quotes in ``text``."""
    pos = 0
    while True:
        start = text.find('"', pos)
        if start == -1:
            return
        end = text.find('"', start + 1)
        if end == -1:
            return
        yield text[start + 1:end]
        pos = end + 1


def _next_line(lines: Iterator[str], what: str) -> str:
    try:
        return next(lines)
    except StopIteration:
        raise XpmError(f"XPM data ends before the {what}") from None


def _read_header(lines: Iterator[str]) -> tuple[int, int, int, int]:
    words = split_words(_next_line(lines, "header"))
    if len(words) < 4:
        raise XpmError("XPM header needs width, height, colour count and chars per pixel")
    width, height, ncolors, cpp = (_atoi(word) for word in words[:4])
    if min(width, height, ncolors, cpp) <= 0:
        raise XpmError(f"invalid XPM header: {' '.join(words[:4])!r}")
    return width, height, ncolors, cpp


def _read_colors(lines: Iterator[str], ncolors: int, cpp: int) -> dict[str, int]:
    colors: dict[str, int] = {}
    # With one or two characters per pixel a later definition replaces an
    # earlier one; with more, the first definition of a key is kept.
    last_wins = cpp <= 2
    for _ in range(ncolors):
        line = _next_line(lines, "colour table")
        key = line[:cpp]
        words = split_words(line[cpp:])
        try:
            index = words.index("c")
        except ValueError:
            raise XpmError(f"colour line without a 'c' entry: {line!r}") from None
        if index + 1 >= len(words):
            raise XpmError(f"colour line without a colour: {line!r}")
        extra = words[index + 2] if index + 2 < len(words) else None
        value = color_from_text(words[index + 1], extra)
        if last_wins or key not in colors:
            colors[key] = value
    return colors


def parse_xpm(lines: Iterable[str]) -> Image:
    """Build an image from the strings of an XPM: header, colours, then pixel rows."""
    source = iter(lines)
    width, height, ncolors, cpp = _read_header(source)
    colors = _read_colors(source, ncolors, cpp)
    image = Image(width, height)
    for y in range(height):
        row = _next_line(source, "pixel rows")
        if len(row) < width * cpp:
            raise XpmError(f"pixel row {y} is shorter than {width} pixels")
        for x in range(width):
            color = colors.get(row[x * cpp:(x + 1) * cpp], 0)
            if color == -1:
                color = TRANSPARENT
            image.put_pixel(x, y, color)
    return image


def xpm_to_image(xpm_data: Iterable[str]) -> Image:
    """Build an image from XPM data given as a sequence of its strings."""
    return parse_xpm(xpm_data)


def xpm_file_to_image(path: str | PathLike[str]) -> Image:
    """Read an XPM file and return its image; OSError if it cannot be read."""
    with open(path, "rb") as handle:
        text = handle.read().decode("latin-1")
    return parse_xpm(quoted_lines(strip_comments(text)))