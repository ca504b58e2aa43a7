"""Tile maps: loading from ``.ber`` files and validating their layout."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from os import PathLike

__all__ = [
    "MapError",
    "GameMap",
    "load_map",
    "check_extension",
    "WALL",
    "FLOOR",
    "PLAYER",
    "COLLECTIBLE",
    "EXIT",
]

WALL = "1"
FLOOR = "0"
PLAYER = "P"
COLLECTIBLE = "C"
EXIT = "E"

_ALLOWED = frozenset((WALL, FLOOR, PLAYER, COLLECTIBLE, EXIT))

MAP_EXTENSION = ".ber"


class MapError(ValueError):
    """Raised when a map file is missing, malformed or invalid."""


class GameMap:
    """A rectangular grid of tiles, addressed as ``game_map[x, y]``.

    Construction checks that there are no empty lines and that every line
    has the same length. ``check_elements`` (or ``validate``) fills in the
    element counts and the player position.
    """

    def __init__(self, lines: Iterable[str]) -> None:
        rows = [list(line) for line in lines]
        width: int | None = None
        for row in rows:
            if not row:
                raise MapError("Map contains empty lines.")
            if width is None:
                width = len(row)
            elif len(row) != width:
                raise MapError("Map is not rectangular.")
        if not rows:
            raise MapError("Map is empty or invalid dimensions.")
        self._rows = rows
        self.player_count = 0
        self.exit_count = 0
        self.collectible_count = 0
        self.player_x: int | None = None
        self.player_y: int | None = None

    @property
    def width(self) -> int:
        return len(self._rows[0])

    @property
    def height(self) -> int:
        return len(self._rows)

    def __getitem__(self, position: tuple[int, int]) -> str:
        x, y = position
        return self._rows[y][x]

    def __setitem__(self, position: tuple[int, int], cell: str) -> None:
        x, y = position
        self._rows[y][x] = cell

    def __iter__(self) -> Iterator[str]:
        return ("".join(row) for row in self._rows)

    def __str__(self) -> str:
        return "\n".join(self)

    def __repr__(self) -> str:
        return f"GameMap(width={self.width}, height={self.height})"

    def check_walls(self) -> None:
        """Raise MapError unless the map is surrounded by walls."""
        top, bottom = self._rows[0], self._rows[-1]
        if any(cell != WALL for cell in top + bottom):
            raise MapError("Map is not surrounded by walls (top/bottom).")
        if any(row[0] != WALL or row[-1] != WALL for row in self._rows):
            raise MapError("Map is not surrounded by walls (left/right).")

    def check_elements(self) -> None:
        """Count players, exits and collectibles; raise MapError on bad content."""
        self.player_count = 0
        self.exit_count = 0
        self.collectible_count = 0
        for y, row in enumerate(self._rows):
            for x, cell in enumerate(row):
                if cell not in _ALLOWED:
                    raise MapError(
                        "Map contains invalid characters. (Allowed: 0, 1, P,E, C)"
                    )
                if cell == PLAYER:
                    self.player_count += 1
                    self.player_x, self.player_y = x, y
                elif cell == EXIT:
                    self.exit_count += 1
                elif cell == COLLECTIBLE:
                    self.collectible_count += 1
        if self.player_count != 1:
            raise MapError("Map must contain exactly one player ('P').")
        if self.exit_count != 1:
            raise MapError("Map must contain exactly one exit ('E').")
        if self.collectible_count < 1:
            raise MapError("Map must contain at least one collectible ('C').")

    def validate(self) -> None:
        """Run every check on the map, walls first."""
        self.check_walls()
        self.check_elements()


def _split_lines(content: str) -> list[str]:
    if not content:
        return []
    lines = content.split("\n")
    if content.endswith("\n"):
        lines.pop()
    return lines


def load_map(path: str | PathLike[str]) -> GameMap:
    """Read a map file into a GameMap; its layout is checked but not validated."""
    try:
        with open(path, "rb") as handle:
            content = handle.read().decode("latin-1")
    except OSError as exc:
        raise MapError("Could not open map file.") from exc
    return GameMap(_split_lines(content))


def check_extension(path: str | PathLike[str]) -> str:
    """Return ``path`` as a string if it ends in ``.ber``; raise MapError otherwise."""
    text = str(path)
    if len(text) < len(MAP_EXTENSION) or not text.endswith(MAP_EXTENSION):
        raise MapError("Map file must have .ber extension.")
    return text