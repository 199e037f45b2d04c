"""Level maps: parsing, tile normalisation and on-screen tile placement."""

from __future__ import annotations

import os
from collections.abc import Iterable, Iterator
from dataclasses import dataclass

TILE_SIZE = 90
EMPTY = "."

# Cells above a dirt block that expose its top as grass.
_OPEN_ABOVE = frozenset(".RrOE")
# Vertical offset at which each drawable tile is placed within its cell.
_TILE_LIFT = {"~": 0, "X": 0, "R": 10, "O": 10, "r": 10, "E": 0}


def _at(row: list[str] | str, index: int) -> str:
    """Return the cell at ``index`` or an empty string when it lies outside the row."""
    return row[index] if 0 <= index < len(row) else ""


def pad_rows(rows: Iterable[str]) -> list[str]:
    """Pad every row with empty cells up to the width of the longest one."""
    rows = list(rows)
    width = max((len(row) for row in rows), default=0)
    return [row.ljust(width, EMPTY) for row in rows]


def resolve_textures(grid: Iterable[str]) -> list[str]:
    """Turn raw map cells into the tile kinds used for drawing and collision.

    Cells are processed row by row, left to right, and each change is seen by
    the cells processed after it.
    """
    cells = [list(row) for row in grid]
    above: list[str] | None = None
    for row in cells:
        for i, cell in enumerate(row):
            if cell == " ":
                cell = EMPTY
            if cell == "X" and above is not None and _at(above, i) in _OPEN_ABOVE:
                cell = "~"
            following = _at(row, i + 1)
            if cell == "R" and following == EMPTY:
                row[i + 1] = "O"
            elif cell == "R" and following in ("R", "X"):
                cell = "r"
            if above is not None and cell == EMPTY and _at(above, i) == "E":
                cell = "E"
            row[i] = cell
        above = row
    return ["".join(row) for row in cells]


@dataclass
class TileMap:
    """A rectangular level grid with a horizontal scroll offset in pixels."""

    rows: tuple[str, ...]
    offset: float = 0.0

    def __post_init__(self) -> None:
        self.rows = tuple(self.rows)

    @property
    def width(self) -> int:
        return len(self.rows[0]) if self.rows else 0

    @property
    def height(self) -> int:
        return len(self.rows)

    def tile(self, row: int, col: int) -> str:
        """Return the tile at ``(row, col)``; columns outside the map read as ``""``."""
        if not 0 <= row < len(self.rows):
            raise IndexError(f"row {row} is outside the map")
        return _at(self.rows[row], col)

    def visible_tiles(self) -> Iterator[tuple[str, float, int]]:
        """Yield ``(tile, x, y)`` for every drawable tile, in row-major order."""
        for j, line in enumerate(self.rows):
            for i, tile in enumerate(line):
                lift = _TILE_LIFT.get(tile)
                if lift is not None:
                    yield tile, i * TILE_SIZE - self.offset, j * TILE_SIZE + lift


def parse_map(text: str) -> TileMap:
    """Build a map from its text form, one newline-terminated line per row."""
    rows = text.split("\n")
    if rows and rows[-1] == "":
        rows.pop()
    return TileMap(tuple(resolve_textures(pad_rows(rows))))


def load_map(path: str | os.PathLike[str]) -> TileMap:
    """Read and parse a map file."""
    with open(path, encoding="utf-8") as handle:
        return parse_map(handle.read())